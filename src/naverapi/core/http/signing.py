"""
API Gateway Request Signing
===========================

Naver Cloud Platform APIs behind the API gateway (Outbound Mailer, SENS, ...)
authenticate every request with an HMAC-SHA256 signature computed over a
canonical string:

    {METHOD} {path}\\n{timestamp}\\n{access_key}

The signature is the standard Base64 encoding of the digest, keyed by the
account's secret key, and travels in the ``x-ncp-apigw-signature-v2`` header
together with the timestamp and access key it was computed from.

See https://api.ncloud-docs.com/docs/en/common-ncpapi
"""

import base64
import hashlib
import hmac
from datetime import datetime, timedelta, timezone
from typing import Dict

from naverapi.core.exceptions import ConfigurationError

TIMESTAMP_HEADER = "x-ncp-apigw-timestamp"
ACCESS_KEY_HEADER = "x-ncp-iam-access-key"
SIGNATURE_HEADER = "x-ncp-apigw-signature-v2"

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def timestamp_millis(moment: datetime) -> str:
    """
    Format a moment as milliseconds since the Unix epoch.

    Naive datetimes are interpreted as UTC.

    Example:
        >>> timestamp_millis(datetime(1997, 2, 26, tzinfo=timezone.utc))
        '856915200000'
    """
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return str((moment - _EPOCH) // timedelta(milliseconds=1))


def canonical_string(method: str, path: str, timestamp: str, access_key: str) -> str:
    """Build the string-to-sign for the API gateway signature."""
    return f"{method.upper()} {path}\n{timestamp}\n{access_key}"


def make_signature(
    method: str,
    path: str,
    timestamp: str,
    access_key: str,
    secret_key: str,
) -> str:
    """
    Compute the API gateway signature of a request.

    Args:
        method: HTTP method of the request (e.g. "POST").
        path: URL path (and query string, if any) without scheme and host.
        timestamp: Milliseconds since the epoch, as sent in the timestamp header.
        access_key: Access key of the account or sub account.
        secret_key: Secret key paired with the access key.

    Returns:
        Base64-encoded HMAC-SHA256 signature.

    Raises:
        ConfigurationError: If the access key or secret key is empty.
    """
    if not access_key:
        raise ConfigurationError("an access key is required to sign API gateway requests")
    if not secret_key:
        raise ConfigurationError("a secret key is required to sign API gateway requests")

    message = canonical_string(method, path, timestamp, access_key)
    digest = hmac.new(
        secret_key.encode("utf-8"),
        message.encode("utf-8"),
        hashlib.sha256,
    ).digest()
    return base64.b64encode(digest).decode("ascii")


def ncloud_headers(
    method: str,
    path: str,
    timestamp: str,
    access_key: str,
    secret_key: str,
) -> Dict[str, str]:
    """
    Build the authentication headers of an API gateway request.

    Returns:
        Mapping with the timestamp, access key and signature headers.
    """
    signature = make_signature(method, path, timestamp, access_key, secret_key)
    return {
        TIMESTAMP_HEADER: timestamp,
        ACCESS_KEY_HEADER: access_key,
        SIGNATURE_HEADER: signature,
    }
