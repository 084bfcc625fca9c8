"""
Base class and utilities for all services.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


@dataclass
class ServiceResult(Generic[T]):
    """
    Result object returned by service operations.

    Provides a consistent interface for views to handle operation outcomes.
    """

    success: bool
    data: Optional[T] = None
    error: Optional[str] = None
    message: Optional[str] = None

    @classmethod
    def ok(cls, data: T = None, message: str = None) -> "ServiceResult[T]":
        """Create a successful result."""
        return cls(success=True, data=data, message=message)

    @classmethod
    def fail(cls, error: str) -> "ServiceResult[T]":
        """Create a failed result."""
        return cls(success=False, error=error)

class BaseService:
    """
    Base class for all services.

    Services wrap a client and turn its exceptions into failed
    ServiceResults, so views never have to handle them.
    """

    def _validate_input_path(self, path: str, must_exist: bool = True) -> Optional[str]:
        """
        Validate an input path.

        Returns:
            None if valid, error message if invalid
        """
        p = Path(path)
        if must_exist and not p.exists():
            return f"Path does not exist: {path}"
        if must_exist and not p.is_file():
            return f"Not a file: {path}"
        return None
