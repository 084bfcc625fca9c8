# tests/conftest.py
"""
Global pytest fixtures for naverapi tests.
"""

import json
from datetime import datetime, timezone

import pytest
import requests

# 1997-02-26T00:00:00Z
FIXED_NOW = datetime(1997, 2, 26, tzinfo=timezone.utc)
FIXED_TIMESTAMP = "856915200000"

ACCESS_KEY = "test-access-key"
SECRET_KEY = "test-secret-key"
SERVICE_ID = "test-service-id"


class FixedClock:
    """Clock that always returns the same moment."""

    def __init__(self, moment: datetime = FIXED_NOW) -> None:
        self.moment = moment

    def now(self) -> datetime:
        return self.moment


def build_response(status_code=200, body=None, text=None, reason="", url="https://example.invalid/"):
    """Build a requests.Response as the transport would return it."""
    response = requests.Response()
    response.status_code = status_code
    response.reason = reason
    response.url = url
    response.encoding = "utf-8"
    if body is not None:
        response._content = json.dumps(body).encode("utf-8")
        response.headers["Content-Type"] = "application/json;charset=UTF-8"
    else:
        response._content = (text or "").encode("utf-8")
        response.headers["Content-Type"] = "text/plain"
    return response


@pytest.fixture
def fixed_clock():
    """Clock pinned to 1997-02-26T00:00:00Z."""
    return FixedClock()


@pytest.fixture
def session():
    """Real requests session; tests patch its send() method."""
    s = requests.Session()
    yield s
    s.close()


@pytest.fixture
def make_response():
    """Factory for fake HTTP responses."""
    return build_response


@pytest.fixture
def mock_send(mocker, session):
    """Patch session.send to return the given response, and return the mock."""

    def _mock(response):
        return mocker.patch.object(session, "send", return_value=response)

    return _mock


def sent_request(send_mock) -> requests.PreparedRequest:
    """The PreparedRequest passed to a patched session.send."""
    assert send_mock.call_count == 1
    return send_mock.call_args[0][0]
