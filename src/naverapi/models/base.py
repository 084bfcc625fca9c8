from dataclasses import asdict, fields, is_dataclass
from enum import Enum
from typing import Any, Dict, Iterable


class ToDictMixin:
    """
    Mixin that adds to_dict() method to dataclasses.

    Handles nested dataclasses, lists, enums and common types automatically.

    The output uses the Python attribute names; wire payloads (camelCase keys)
    are built by each request model's ``to_payload()``.

    Example:
        @dataclass
        class MyResult(ToDictMixin):
            name: str
            count: int

        result = MyResult(name="test", count=5)
        data = result.to_dict()  # {"name": "test", "count": 5}
    """

    def to_dict(self) -> Dict[str, Any]:
        """Convert dataclass to dictionary, handling nested structures."""
        if not is_dataclass(self):
            raise TypeError(f"{self.__class__.__name__} is not a dataclass")

        result = {}
        for f in fields(self):
            if not f.repr:
                continue
            value = getattr(self, f.name)
            result[f.name] = self._serialize_value(value)

        return result

    def _serialize_value(self, value: Any) -> Any:
        """Serialize a single value for dict output."""
        if value is None:
            return None
        if isinstance(value, Enum):
            return value.value
        if isinstance(value, (str, int, float, bool)):
            return value
        if isinstance(value, bytes):
            return f"<{len(value)} bytes>"
        if isinstance(value, (list, tuple)):
            return [self._serialize_value(v) for v in value]
        if isinstance(value, dict):
            return {k: self._serialize_value(v) for k, v in value.items()}
        if hasattr(value, "to_dict"):
            return value.to_dict()
        if is_dataclass(value):
            return asdict(value)
        return str(value)


def enum_value(value: Any) -> Any:
    """Return the wire value of an enum member, or the value unchanged."""
    return value.value if isinstance(value, Enum) else value


def omit_empty(payload: Dict[str, Any], keys: Iterable[str]) -> Dict[str, Any]:
    """
    Drop the optional keys of a wire payload whose value is empty.

    Empty means None, "" or an empty list. Keys not listed are always kept,
    whatever their value, so required fields are sent even when blank.
    """
    optional = set(keys)
    return {
        key: value
        for key, value in payload.items()
        if key not in optional or value not in (None, "", [])
    }
