"""
Geocode Client
==============

Client for the Naver Maps Geocoding API, which converts an address into
coordinates and structured address components.

Example:
    >>> from naverapi.clients.geocode import GeocodeClient
    >>> from naverapi.models.geocode import Language
    >>>
    >>> client = GeocodeClient("client-id", "client-secret")
    >>> result = client.query("불정로 6", language=Language.ENG, count=5)
    >>> for address in result.addresses:
    ...     print(address.road_address, address.x, address.y)
"""

from dataclasses import replace
from typing import Optional, Sequence, Tuple, Union

import requests

from naverapi.core.exceptions import (
    APIStatusError,
    ConfigurationError,
    GeocodeError,
    InvalidQueryError,
    ResponseDecodeError,
)
from naverapi.core.http.client import DEFAULT_TIMEOUT, DEFAULT_USER_AGENT
from naverapi.core.logger import get_logger
from naverapi.models.geocode import (
    CLIENT_ID_HEADER,
    CLIENT_SECRET_HEADER,
    GEOCODE_API_URL,
    GEOCODE_ENDPOINT,
    FilterType,
    GeocodeQuery,
    GeocodeResponse,
    Language,
)

from .base import BaseClient

logger = get_logger(__name__)


class GeocodeClient(BaseClient):
    """
    Client for the geocode endpoint of the Naver Maps API.

    Authentication uses the application's client id and client secret,
    sent as plain API-key headers on every request.

    Args:
        client_id: Application client id.
        client_secret: Application client secret.
        session: Optional requests session. A new one is used if omitted.
        base_url: API base URL (default: https://naveropenapi.apigw.ntruss.com).
        timeout: Request timeout in seconds.

    Raises:
        ConfigurationError: If the client id or secret is empty.
    """

    def __init__(
        self,
        client_id: str,
        client_secret: str,
        session: Optional[requests.Session] = None,
        base_url: str = GEOCODE_API_URL,
        timeout: float = DEFAULT_TIMEOUT,
        user_agent: str = DEFAULT_USER_AGENT,
    ) -> None:
        if not client_id or not client_secret:
            raise ConfigurationError("a geocode client id and client secret are required")
        super().__init__(base_url, session=session, timeout=timeout, user_agent=user_agent)
        self.client_id = client_id
        self.client_secret = client_secret

    def query(
        self,
        address: str,
        *,
        options: Optional[GeocodeQuery] = None,
        coordinate: Optional[Tuple[float, float]] = None,
        language: Union[Language, str, None] = None,
        h_codes: Optional[Sequence[str]] = None,
        b_codes: Optional[Sequence[str]] = None,
        page: Optional[int] = None,
        count: Optional[int] = None,
    ) -> GeocodeResponse:
        """
        Look up an address.

        Keyword arguments override the matching fields of ``options``.

        Args:
            address: Address to search for. Required.
            options: Pre-built query options.
            coordinate: (longitude, latitude) of the search center.
            language: Language of the returned addresses.
            h_codes: Restrict results to these administrative-dong codes.
            b_codes: Restrict results to these legal-dong codes.
            page: Page number.
            count: Results per page (1-100).

        Returns:
            The decoded response. An empty address list is a valid result.

        Raises:
            InvalidQueryError: If the address is empty or both h_codes and
                b_codes are given.
            GeocodeError: If the response status is not OK.
            APIStatusError: If the API answered an error status without a
                geocode response body.
            ResponseDecodeError: If the response body is not JSON.
            TransportError: If the request could not be performed.
        """
        if not address:
            raise InvalidQueryError("invalid query parameter: the address is required")

        params = self._build_query(
            options, coordinate, language, h_codes, b_codes, page, count
        ).to_params(address)

        response = self.http.get(GEOCODE_ENDPOINT, params=params, headers=self._auth_headers())
        result = self._decode(response)

        if not result.ok:
            logger.warning(f"Geocode query failed with status {result.status}: {result.error_message}")
            raise GeocodeError(result.status, result.error_message)

        logger.debug(f"Geocode query matched {result.meta.total_count} address(es)")
        return result

    def _auth_headers(self):
        return {
            CLIENT_ID_HEADER: self.client_id,
            CLIENT_SECRET_HEADER: self.client_secret,
        }

    @staticmethod
    def _build_query(
        options: Optional[GeocodeQuery],
        coordinate: Optional[Tuple[float, float]],
        language: Union[Language, str, None],
        h_codes: Optional[Sequence[str]],
        b_codes: Optional[Sequence[str]],
        page: Optional[int],
        count: Optional[int],
    ) -> GeocodeQuery:
        if h_codes and b_codes:
            raise InvalidQueryError("only one of h_codes and b_codes can filter a query")

        query = replace(options) if options is not None else GeocodeQuery()
        if coordinate is not None:
            query.coordinate = coordinate
        if language is not None:
            query.language = language
        if h_codes:
            query.filter_type, query.codes = FilterType.HCODE, list(h_codes)
        if b_codes:
            query.filter_type, query.codes = FilterType.BCODE, list(b_codes)
        if page is not None:
            query.page = page
        if count is not None:
            query.count = count

        # Options objects may carry raw strings too
        if query.language is not None:
            try:
                query.language = Language(query.language)
            except ValueError as e:
                raise InvalidQueryError(f"unsupported language: {query.language!r}") from e
        if query.filter_type is not None:
            try:
                query.filter_type = FilterType(query.filter_type)
            except ValueError as e:
                raise InvalidQueryError(f"unsupported filter type: {query.filter_type!r}") from e
        return query

    def _decode(self, response: requests.Response) -> GeocodeResponse:
        try:
            data = self._decode_object(response)
        except ResponseDecodeError as e:
            if not response.ok:
                raise APIStatusError(
                    response.status_code, response.reason or "", response.text or None
                ) from e
            raise

        if not response.ok and "status" not in data:
            raise APIStatusError(response.status_code, response.reason or "", data)

        return GeocodeResponse.from_api_response(data)
