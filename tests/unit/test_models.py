"""
Unit tests for naverapi.models package.
"""

import pytest

from naverapi.core.exceptions import UnknownRecipientTypeError
from naverapi.models.base import omit_empty
from naverapi.models.geocode import (
    FilterType,
    GeocodeQuery,
    GeocodeResponse,
    Language,
    format_coordinate,
    format_filter,
)
from naverapi.models.mailer import (
    CreateFileResponse,
    CreateMailRequest,
    CreateMailResponse,
    File,
    Recipient,
    RecipientType,
)
from naverapi.models.sens import SendSMSResponse, messages_endpoint


class TestOmitEmpty:
    """Tests for omit_empty function."""

    def test_drops_empty_optional_values(self):
        """Test None, empty strings and empty lists are dropped."""
        payload = {"a": None, "b": "", "c": [], "d": "x"}
        assert omit_empty(payload, ["a", "b", "c", "d"]) == {"d": "x"}

    def test_keeps_required_keys(self):
        """Test keys not listed are kept even when empty."""
        assert omit_empty({"name": "", "tags": []}, ["tags"]) == {"name": ""}

    def test_keeps_falsy_values(self):
        """Test zero and False are not empty."""
        assert omit_empty({"n": 0, "b": False}, ["n", "b"]) == {"n": 0, "b": False}


class TestRecipientType:
    """Tests for RecipientType enum."""

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("R", RecipientType.DEFAULT),
            ("c", RecipientType.CARBON_COPY),
            (" B ", RecipientType.BLIND_CARBON_COPY),
        ],
    )
    def test_parse(self, text, expected):
        """Test parsing is case-insensitive."""
        assert RecipientType.parse(text) is expected

    def test_parse_unknown(self):
        """Test unknown types raise UnknownRecipientTypeError."""
        with pytest.raises(UnknownRecipientTypeError) as exc_info:
            RecipientType.parse("X")

        assert exc_info.value.value == "X"

    def test_parse_error_is_value_error(self):
        """Test the error can be handled as a ValueError."""
        with pytest.raises(ValueError):
            RecipientType.parse("")

    def test_str(self):
        """Test str() gives the wire value."""
        assert str(RecipientType.CARBON_COPY) == "C"


class TestMailModels:
    """Tests for mailer request and response models."""

    def test_recipient_defaults(self):
        """Test a recipient defaults to type R without parameters."""
        assert Recipient(address="a@example.com").to_payload() == {
            "address": "a@example.com",
            "name": "",
            "type": "R",
        }

    def test_mail_request_without_attachments(self):
        """Test attachFileIds is omitted when empty."""
        request = CreateMailRequest(
            sender_address="s@example.com",
            sender_name="Sender",
            title="Hi",
            body="Body",
            recipients=[Recipient(address="a@example.com", type=RecipientType.BLIND_CARBON_COPY)],
        )

        payload = request.to_payload()

        assert list(payload) == ["senderAddress", "senderName", "title", "body", "recipients"]
        assert payload["recipients"][0]["type"] == "B"

    def test_create_mail_response_error(self):
        """Test an error payload is decoded."""
        result = CreateMailResponse.from_api_response(
            {"error": {"errorCode": "77102", "message": "Bad request"}}
        )

        assert result.error.error_code == "77102"
        assert str(result.error) == "77102: Bad request"

    def test_create_file_response(self):
        """Test file ids keep the upload order."""
        result = CreateFileResponse.from_api_response(
            {"tempRequestId": "t", "files": [{"fileId": "b"}, {"fileId": "a"}]}
        )

        assert result.file_ids == ["b", "a"]

    def test_file_from_path(self, tmp_path):
        """Test files are read from disk with their base name."""
        path = tmp_path / "report.txt"
        path.write_bytes(b"content")

        f = File.from_path(path)

        assert f.name == "report.txt"
        assert f.content == b"content"

    def test_file_to_dict_hides_content(self):
        """Test to_dict summarizes binary content."""
        assert File(name="a", content=b"1234").to_dict() == {"name": "a", "content": "<4 bytes>"}


class TestGeocodeModels:
    """Tests for geocode models."""

    def test_format_coordinate(self):
        """Test coordinates use six decimals."""
        assert format_coordinate(127.1054328, 37.3595953) == "127.105433,37.359595"
        assert format_coordinate(127, 37) == "127.000000,37.000000"

    def test_format_filter(self):
        """Test filter values join codes with semicolons."""
        assert format_filter(FilterType.HCODE, ["1", "2"]) == "HCODE@1;2"

    def test_query_params_skip_unset(self):
        """Test unset options are not sent."""
        assert GeocodeQuery().to_params("addr") == {"query": "addr"}

    def test_query_params_skip_filter_without_codes(self):
        """Test a filter type without codes is not sent."""
        query = GeocodeQuery(language=Language.KOR, filter_type=FilterType.BCODE)
        assert query.to_params("addr") == {"query": "addr", "language": "kor"}

    def test_response_defaults(self):
        """Test missing fields decode to empty values."""
        result = GeocodeResponse.from_api_response({"status": "OK"})

        assert result.ok
        assert result.addresses == []
        assert result.meta.total_count == 0

    def test_address_coordinates(self):
        """Test x/y are exposed as floats."""
        result = GeocodeResponse.from_api_response(
            {"status": "OK", "addresses": [{"x": "127.5", "y": "37.25"}]}
        )

        address = result.addresses[0]
        assert address.longitude == 127.5
        assert address.latitude == 37.25

    def test_to_dict(self):
        """Test responses serialize with nested models."""
        result = GeocodeResponse.from_api_response(
            {"status": "OK", "meta": {"totalCount": 1}, "addresses": [{"roadAddress": "r"}]}
        )

        data = result.to_dict()

        assert data["meta"]["total_count"] == 1
        assert data["addresses"][0]["road_address"] == "r"


class TestSENSModels:
    """Tests for SENS models."""

    def test_messages_endpoint(self):
        """Test the endpoint path of a service."""
        assert messages_endpoint("ncp:sms:kr:1:svc") == "/sms/v2/services/ncp:sms:kr:1:svc/messages"

    def test_response_succeeded(self):
        """Test success depends on statusName only."""
        assert SendSMSResponse.from_api_response({"statusName": "success"}).succeeded
        assert not SendSMSResponse.from_api_response({"statusName": "processing"}).succeeded

    def test_status_code_as_text(self):
        """Test numeric status codes are kept as text."""
        assert SendSMSResponse.from_api_response({"statusCode": 202}).status_code == "202"
