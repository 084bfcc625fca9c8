# services/geocode.py
"""
Service for address geocoding.

Example:
    >>> service = GeocodeService(GeocodeClient("client-id", "client-secret"))
    >>> result = service.lookup("불정로 6")
    >>> if result.success:
    ...     for address in result.data.addresses:
    ...         print(f"{address.road_address}: {address.y}, {address.x}")
"""

from typing import Optional, Sequence, Tuple

from naverapi.clients.geocode import GeocodeClient
from naverapi.core.exceptions import NaverAPIError
from naverapi.core.logger import get_logger
from naverapi.models.geocode import GeocodeResponse

from .base import BaseService, ServiceResult

logger = get_logger(__name__)


class GeocodeService(BaseService):
    """
    Service for geocode lookups.

    Args:
        client: Configured GeocodeClient.
        language: Default result language, used when a lookup gives none.
    """

    def __init__(self, client: GeocodeClient, language: Optional[str] = None) -> None:
        super().__init__()
        self.client = client
        self.language = language

    def lookup(
        self,
        address: str,
        coordinate: Optional[Tuple[float, float]] = None,
        language: Optional[str] = None,
        h_codes: Optional[Sequence[str]] = None,
        b_codes: Optional[Sequence[str]] = None,
        page: Optional[int] = None,
        count: Optional[int] = None,
    ) -> ServiceResult[GeocodeResponse]:
        """
        Geocode an address.

        Args:
            address: Address to search for.
            coordinate: (longitude, latitude) of the search center.
            language: "kor" or "eng".
            h_codes: Administrative-dong codes to filter by.
            b_codes: Legal-dong codes to filter by.
            page: Page number.
            count: Results per page.

        Returns:
            ServiceResult with the GeocodeResponse on success.
        """
        try:
            response = self.client.query(
                address,
                coordinate=coordinate,
                language=language or self.language,
                h_codes=h_codes,
                b_codes=b_codes,
                page=page,
                count=count,
            )
        except NaverAPIError as e:
            logger.error(f"Geocode lookup failed for {address!r}: {e}")
            return ServiceResult.fail(f"Geocode lookup failed: {e}")

        return ServiceResult.ok(
            data=response,
            message=f"Found {response.meta.total_count} address(es)",
        )
