"""
HTTP Client Utilities
=====================

Provides reusable HTTP functionality for the Naver Cloud API clients.

Features:
- Session-backed HTTP client with timeout and error handling
- JSON and multipart/form-data request bodies
- API gateway HMAC-SHA256 request signing
"""

from .client import (
    DEFAULT_TIMEOUT,
    DEFAULT_USER_AGENT,
    APIClient,
    Clock,
    SystemClock,
    encode_json,
)
from .signing import (
    ACCESS_KEY_HEADER,
    SIGNATURE_HEADER,
    TIMESTAMP_HEADER,
    canonical_string,
    make_signature,
    ncloud_headers,
    timestamp_millis,
)

__all__ = [
    "ACCESS_KEY_HEADER",
    "APIClient",
    "Clock",
    "DEFAULT_TIMEOUT",
    "DEFAULT_USER_AGENT",
    "SIGNATURE_HEADER",
    "SystemClock",
    "TIMESTAMP_HEADER",
    "canonical_string",
    "encode_json",
    "make_signature",
    "ncloud_headers",
    "timestamp_millis",
]
