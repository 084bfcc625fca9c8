# models/geocode.py
"""
Data models for geocoding operations.

See https://api.ncloud-docs.com/docs/en/ai-naver-mapsgeocoding-geocode
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Sequence, Tuple

from .base import ToDictMixin

GEOCODE_API_URL = "https://naveropenapi.apigw.ntruss.com"
GEOCODE_ENDPOINT = "/map-geocode/v2/geocode"

CLIENT_ID_HEADER = "X-NCP-APIGW-API-KEY-ID"
CLIENT_SECRET_HEADER = "X-NCP-APIGW-API-KEY"

# Response status values
STATUS_OK = "OK"
STATUS_INVALID_REQUEST = "INVALID_REQUEST"
STATUS_SYSTEM_ERROR = "SYSTEM_ERROR"


class Language(str, Enum):
    """Language of the returned addresses."""

    KOR = "kor"  # default
    ENG = "eng"


class FilterType(str, Enum):
    """Administrative code family used by the ``filter`` parameter."""

    HCODE = "HCODE"  # administrative-dong codes
    BCODE = "BCODE"  # legal-dong codes


@dataclass
class GeocodeQuery(ToDictMixin):
    """
    Optional parameters of a geocode request.

    Attributes:
        coordinate: (longitude, latitude) used as the search center. When set,
            the API reports each result's distance to it.
        language: Language of the returned addresses (server default: kor).
        filter_type: Code family of ``codes``.
        codes: Administrative codes to restrict the results to.
        page: Page number (server default: 1).
        count: Results per page (server default: 10, range 1-100).
    """

    coordinate: Optional[Tuple[float, float]] = None
    language: Optional[Language] = None
    filter_type: Optional[FilterType] = None
    codes: List[str] = field(default_factory=list)
    page: Optional[int] = None
    count: Optional[int] = None

    def to_params(self, query: str) -> Dict[str, str]:
        """Build the query string parameters for an address lookup."""
        params = {"query": query}
        if self.coordinate is not None:
            lon, lat = self.coordinate
            params["coordinate"] = format_coordinate(lon, lat)
        if self.language is not None:
            params["language"] = Language(self.language).value
        if self.filter_type is not None and self.codes:
            params["filter"] = format_filter(self.filter_type, self.codes)
        if self.page is not None:
            params["page"] = str(self.page)
        if self.count is not None:
            params["count"] = str(self.count)
        return params


def format_coordinate(lon: float, lat: float) -> str:
    """Format a search center as ``lon,lat`` with six decimals each."""
    return f"{lon:f},{lat:f}"


def format_filter(filter_type: FilterType, codes: Sequence[str]) -> str:
    """Format a filter value, e.g. ``HCODE@4113554500;4113555000``."""
    return f"{FilterType(filter_type).value}@{';'.join(codes)}"


@dataclass
class AddressElement(ToDictMixin):
    """
    One component of an address (province, city, road name, postal code...).

    Attributes:
        types: Component types, e.g. ["SIDO"] or ["POSTAL_CODE"].
        long_name: Full name of the component.
        short_name: Abbreviated name of the component.
        code: Administrative code, when the component has one.
    """

    types: List[str] = field(default_factory=list)
    long_name: str = ""
    short_name: str = ""
    code: str = ""

    @classmethod
    def from_api_response(cls, data: Dict[str, Any]) -> "AddressElement":
        """Create from API response data."""
        return cls(
            types=list(data.get("types") or []),
            long_name=data.get("longName", ""),
            short_name=data.get("shortName", ""),
            code=data.get("code", ""),
        )


@dataclass
class Address(ToDictMixin):
    """
    A geocoded address.

    Attributes:
        road_address: Road-name address.
        jibun_address: Lot-number (jibun) address.
        english_address: English address.
        x: Longitude, as returned by the API.
        y: Latitude, as returned by the API.
        distance: Distance in meters to the requested coordinate (0 if none).
        address_elements: Address components.
    """

    road_address: str = ""
    jibun_address: str = ""
    english_address: str = ""
    x: str = ""
    y: str = ""
    distance: float = 0.0
    address_elements: List[AddressElement] = field(default_factory=list)

    @classmethod
    def from_api_response(cls, data: Dict[str, Any]) -> "Address":
        """Create from API response data."""
        return cls(
            road_address=data.get("roadAddress", ""),
            jibun_address=data.get("jibunAddress", ""),
            english_address=data.get("englishAddress", ""),
            x=data.get("x", ""),
            y=data.get("y", ""),
            distance=float(data.get("distance") or 0.0),
            address_elements=[
                AddressElement.from_api_response(e) for e in data.get("addressElements") or []
            ],
        )

    @property
    def longitude(self) -> Optional[float]:
        """Longitude as a float, or None if the API omitted it."""
        return float(self.x) if self.x else None

    @property
    def latitude(self) -> Optional[float]:
        """Latitude as a float, or None if the API omitted it."""
        return float(self.y) if self.y else None


@dataclass
class Meta(ToDictMixin):
    """Paging information of a geocode response."""

    total_count: int = 0
    page: int = 0
    count: int = 0

    @classmethod
    def from_api_response(cls, data: Dict[str, Any]) -> "Meta":
        return cls(
            total_count=int(data.get("totalCount") or 0),
            page=int(data.get("page") or 0),
            count=int(data.get("count") or 0),
        )


@dataclass
class GeocodeResponse(ToDictMixin):
    """
    Decoded geocode response.

    Attributes:
        status: OK, INVALID_REQUEST or SYSTEM_ERROR.
        error_message: Server-provided error text (empty on success).
        meta: Paging information.
        addresses: Matching addresses (may be empty on success).
    """

    status: str = ""
    error_message: str = ""
    meta: Meta = field(default_factory=Meta)
    addresses: List[Address] = field(default_factory=list)

    @classmethod
    def from_api_response(cls, data: Dict[str, Any]) -> "GeocodeResponse":
        """Create from API response data."""
        return cls(
            status=data.get("status", ""),
            error_message=data.get("errorMessage", ""),
            meta=Meta.from_api_response(data.get("meta") or {}),
            addresses=[Address.from_api_response(a) for a in data.get("addresses") or []],
        )

    @property
    def ok(self) -> bool:
        return self.status == STATUS_OK
