"""
Custom Exception Classes for the Naver Cloud API Clients

This module defines the exception hierarchy raised by the geocode, mailer
and SENS clients. Every exception derives from NaverAPIError so callers can
catch all client failures with a single except clause, and every exception
keeps its human-readable explanation in a ``message`` attribute.
"""

from typing import Any, Optional


class NaverAPIError(Exception):
    """
    Base class for every error raised by naverapi.

    Attributes:
        message (str): Explanation of the error
    """

    def __init__(self, message: str = "A Naver Cloud API call failed.") -> None:
        super().__init__(message)
        self.message = message


class ConfigurationError(NaverAPIError):
    """
    Raised when a client is missing a credential or a required setting.

    Typical causes are an empty access key, secret key or SENS service id.
    """

    def __init__(self, message: str = "The client is not configured.") -> None:
        super().__init__(message)


class InvalidQueryError(NaverAPIError):
    """Raised when request parameters are rejected before any I/O."""

    def __init__(self, message: str = "invalid query parameter") -> None:
        super().__init__(message)


class TransportError(NaverAPIError):
    """
    Raised when the HTTP request itself could not be performed.

    Wraps ``requests.RequestException`` (DNS failure, refused connection,
    timeout, ...). The original exception is chained as ``__cause__``.
    """

    def __init__(self, message: str = "could not perform the HTTP request") -> None:
        super().__init__(message)


class ResponseDecodeError(NaverAPIError):
    """
    Raised when a response body is not the JSON document the API documents.

    Attributes:
        message (str): Explanation of the error
        body (str): The raw body that failed to decode (truncated)
    """

    def __init__(self, message: str = "could not decode response body", body: str = "") -> None:
        super().__init__(message)
        self.body = body[:512]


class APIStatusError(NaverAPIError):
    """
    Raised when the API answers with an unexpected HTTP status code.

    Attributes:
        message (str): Explanation of the error
        status_code (int): HTTP status code received
        reason (str): HTTP reason phrase received
        detail (Optional[Any]): Decoded error payload when the server sent one
    """

    def __init__(
        self,
        status_code: int,
        reason: str = "",
        detail: Optional[Any] = None,
        message: Optional[str] = None,
    ) -> None:
        if message is None:
            message = f"request failed with code {status_code}: {status_code} {reason}".rstrip()
            if detail:
                message = f"{message} ({detail})"
        super().__init__(message)
        self.status_code = status_code
        self.reason = reason
        self.detail = detail


class GeocodeError(NaverAPIError):
    """
    Raised when a geocode response carries a status other than ``OK``.

    Attributes:
        message (str): The server's ``errorMessage`` (or a generic text)
        status (str): The response ``status`` field, e.g. ``INVALID_REQUEST``
    """

    def __init__(self, status: str, message: str = "") -> None:
        super().__init__(message or f"geocode request failed with status {status!r}")
        self.status = status


class SendSMSFailedError(NaverAPIError):
    """
    Raised when a send SMS response's ``statusName`` is not ``"success"``.

    Attributes:
        message (str): Explanation of the error
        response (Any): The decoded SendSMSResponse
    """

    def __init__(self, response: Any = None) -> None:
        super().__init__('the send SMS request\'s response did not return status "success"')
        self.response = response


class UnknownRecipientTypeError(NaverAPIError, ValueError):
    """Raised when a mail recipient type is not one of R, C or B."""

    def __init__(self, value: str = "") -> None:
        super().__init__(f"unknown recipient type: {value!r}" if value else "unknown recipient type")
        self.value = value
