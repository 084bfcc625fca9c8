"""
Unit tests for naverapi.clients.mailer module.
"""

import pytest

from conftest import ACCESS_KEY, FIXED_TIMESTAMP, SECRET_KEY, sent_request
from naverapi.clients.mailer import CloudOutboundMailerClient
from naverapi.core.exceptions import APIStatusError, ConfigurationError, ResponseDecodeError
from naverapi.models.mailer import CreateMailRequest, File, Recipient

EXPECTED_MAIL_BODY = (
    b'{"senderAddress":"test-sender-address","senderName":"test-sender-name",'
    b'"title":"test-title","body":"test-body","recipients":[{"address":"test-address",'
    b'"name":"test-name","type":"test-type","parameters":["test-parameter-1",'
    b'"test-parameter-2"]}],"attachFileIds":["test-file-id-1","test-file-id-2"]}'
)


@pytest.fixture
def client(session, fixed_clock):
    return CloudOutboundMailerClient(ACCESS_KEY, SECRET_KEY, session=session, clock=fixed_clock)


@pytest.fixture
def mail_request():
    return CreateMailRequest(
        sender_address="test-sender-address",
        sender_name="test-sender-name",
        title="test-title",
        body="test-body",
        recipients=[
            Recipient(
                address="test-address",
                name="test-name",
                type="test-type",
                parameters=["test-parameter-1", "test-parameter-2"],
            )
        ],
        attach_file_ids=["test-file-id-1", "test-file-id-2"],
    )


class TestCreateMail:
    """Tests for CloudOutboundMailerClient.create_mail."""

    def test_request(self, client, mail_request, mock_send, make_response):
        """Test the signed JSON request."""
        send = mock_send(make_response(201, {"requestId": "test-request-id", "count": 1}))

        client.create_mail(mail_request)

        prepared = sent_request(send)
        assert prepared.method == "POST"
        assert prepared.url == "https://mail.apigw.ntruss.com/api/v1/mails"
        assert prepared.headers["Content-Type"] == "application/json"
        assert prepared.headers["x-ncp-apigw-timestamp"] == FIXED_TIMESTAMP
        assert prepared.headers["x-ncp-iam-access-key"] == ACCESS_KEY
        assert (
            prepared.headers["x-ncp-apigw-signature-v2"]
            == "F1YxxwEjDRZmNLxqqDFz53OpbvLrMCqEsv9tLxoBcWE="
        )
        assert prepared.body == EXPECTED_MAIL_BODY

    def test_response(self, client, mail_request, mock_send, make_response):
        """Test the response is decoded."""
        mock_send(make_response(201, {"requestId": "test-request-id", "count": 1}))

        result = client.create_mail(mail_request)

        assert result.request_id == "test-request-id"
        assert result.count == 1
        assert result.error is None

    def test_unexpected_status(self, client, mail_request, mock_send, make_response):
        """Test any status but 201 raises APIStatusError with the error payload."""
        body = {"error": {"errorCode": "77101", "message": "Login information error"}}
        mock_send(make_response(401, body, reason="Unauthorized"))

        with pytest.raises(APIStatusError) as exc_info:
            client.create_mail(mail_request)

        error = exc_info.value
        assert error.status_code == 401
        assert error.reason == "Unauthorized"
        assert error.detail == body
        assert error.message.startswith("request failed with code 401: 401 Unauthorized")

    def test_ok_is_not_created(self, client, mail_request, mock_send, make_response):
        """Test 200 OK is still an unexpected status."""
        mock_send(make_response(200, {"requestId": "x", "count": 1}))

        with pytest.raises(APIStatusError) as exc_info:
            client.create_mail(mail_request)

        assert exc_info.value.status_code == 200

    def test_invalid_json(self, client, mail_request, mock_send, make_response):
        """Test a non-JSON 201 body raises ResponseDecodeError."""
        mock_send(make_response(201, text="created"))

        with pytest.raises(ResponseDecodeError):
            client.create_mail(mail_request)

    def test_json_array(self, client, mail_request, mock_send, make_response):
        """Test a JSON body that is not an object raises ResponseDecodeError."""
        mock_send(make_response(201, ["unexpected"]))

        with pytest.raises(ResponseDecodeError):
            client.create_mail(mail_request)

    def test_missing_credentials(self, session, mail_request, mock_send, make_response, fixed_clock):
        """Test signing fails without a secret key."""
        send = mock_send(make_response(201, {}))
        client = CloudOutboundMailerClient(ACCESS_KEY, "", session=session, clock=fixed_clock)

        with pytest.raises(ConfigurationError):
            client.create_mail(mail_request)

        send.assert_not_called()

    def test_custom_base_url(self, client, mail_request, mock_send, make_response):
        """Test the base URL can be redirected while the signed path stays the same."""
        send = mock_send(make_response(201, {"requestId": "x", "count": 1}))
        client.base_url = "http://localhost:8080/"

        client.create_mail(mail_request)

        prepared = sent_request(send)
        assert prepared.url == "http://localhost:8080/api/v1/mails"
        assert (
            prepared.headers["x-ncp-apigw-signature-v2"]
            == "F1YxxwEjDRZmNLxqqDFz53OpbvLrMCqEsv9tLxoBcWE="
        )


class TestCreateFiles:
    """Tests for CloudOutboundMailerClient.create_files."""

    FILES = [
        File(name="test-name-1", content=b"test-content-1"),
        File(name="test-name-2", content=b"test-content-2"),
    ]

    RESPONSE = {
        "tempRequestId": "test-temp-request-id",
        "files": [
            {"fileName": "test-name-1", "fileSize": 14, "fileId": "test-file-id-1"},
            {"fileName": "test-name-2", "fileSize": 14, "fileId": "test-file-id-2"},
        ],
    }

    def test_request(self, client, mock_send, make_response):
        """Test the signed multipart request."""
        send = mock_send(make_response(201, self.RESPONSE))

        client.create_files(self.FILES)

        prepared = sent_request(send)
        assert prepared.method == "POST"
        assert prepared.url == "https://mail.apigw.ntruss.com/api/v1/files"
        assert prepared.headers["Content-Type"].startswith("multipart/form-data; boundary=")
        assert (
            prepared.headers["x-ncp-apigw-signature-v2"]
            == "q1JhbYivx0lU//wBoOyh+yn/y7+Lg9Ez/Xj6FDzxap4="
        )
        assert b'name="fileList"; filename="test-name-1"' in prepared.body
        assert b'name="fileList"; filename="test-name-2"' in prepared.body
        assert b"test-content-1" in prepared.body
        assert b"test-content-2" in prepared.body

    def test_response(self, client, mock_send, make_response):
        """Test the uploaded file ids are decoded in order."""
        mock_send(make_response(201, self.RESPONSE))

        result = client.create_files(self.FILES)

        assert result.temp_request_id == "test-temp-request-id"
        assert result.file_ids == ["test-file-id-1", "test-file-id-2"]
        assert result.files[0].file_size == 14

    def test_no_files(self, client, mock_send, make_response):
        """Test an empty upload is rejected before any request."""
        send = mock_send(make_response(201, self.RESPONSE))

        with pytest.raises(ValueError):
            client.create_files([])

        send.assert_not_called()

    def test_unexpected_status(self, client, mock_send, make_response):
        """Test a non-JSON error body is kept as text."""
        mock_send(make_response(500, text="Internal Server Error", reason="Internal Server Error"))

        with pytest.raises(APIStatusError) as exc_info:
            client.create_files(self.FILES)

        assert exc_info.value.status_code == 500
        assert exc_info.value.detail == "Internal Server Error"
