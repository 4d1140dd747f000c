"""
ApiClient tests.

The requests.Session is replaced with a MagicMock so no network is used.
"""

import pytest
import requests
from unittest.mock import MagicMock

from bizconsole.api_client import ApiClient
from bizconsole.exceptions import ApiError


def make_response(status=200, json_data=None, content=b"{}", reason="OK"):
    response = MagicMock()
    response.status_code = status
    response.ok = 200 <= status < 400
    response.reason = reason
    response.content = content
    if isinstance(json_data, Exception):
        response.json.side_effect = json_data
    else:
        response.json.return_value = json_data
    return response


@pytest.fixture
def session():
    return MagicMock(spec=requests.Session)


@pytest.fixture
def client(session):
    return ApiClient(base_url="https://erp.example.com/api", token="tok", timeout=5, session=session)


# ===========================================================================
# Request construction
# ===========================================================================


class TestRequests:
    def test_get_builds_url_headers_and_params(self, client, session):
        """GET joins the path onto the base URL and sends auth header and params."""
        session.request.return_value = make_response(json_data={"success": True, "data": [1, 2]})

        assert client.get("attendance/company/4", params={"page": 1}) == [1, 2]

        method, url = session.request.call_args.args
        kwargs = session.request.call_args.kwargs
        assert method == "GET"
        assert url == "https://erp.example.com/api/attendance/company/4"
        assert kwargs["params"] == {"page": 1}
        assert kwargs["timeout"] == 5
        assert kwargs["headers"]["Authorization"] == "Bearer tok"

    @pytest.mark.parametrize("verb", ["post", "put", "patch", "delete"])
    def test_body_verbs_send_json(self, client, session, verb):
        """Every body-carrying verb sends its payload as JSON."""
        session.request.return_value = make_response(json_data={"id": 3})

        result = getattr(client, verb)("/tasks/3", {"title": "x"})

        assert result == {"id": 3}
        assert session.request.call_args.args == (verb.upper(), "https://erp.example.com/api/tasks/3")
        assert session.request.call_args.kwargs["json"] == {"title": "x"}

    def test_no_token_means_no_auth_header(self, session):
        """Without a token no Authorization header is sent."""
        client = ApiClient(base_url="http://h/", token="", session=session)
        assert "Authorization" not in client._get_headers()

    def test_empty_body_returns_none(self, client, session):
        """An empty response body decodes to None."""
        session.request.return_value = make_response(status=204, content=b"")
        assert client.delete("tasks/1") is None


# ===========================================================================
# Error mapping
# ===========================================================================


class TestErrors:
    def test_http_error_carries_server_message(self, client, session):
        """HTTP errors surface the server's message and status code."""
        session.request.return_value = make_response(
            status=422, json_data={"success": False, "message": "date is invalid"}, reason="Unprocessable"
        )
        with pytest.raises(ApiError) as info:
            client.post("attendance", {})
        assert info.value.status_code == 422
        assert info.value.message == "date is invalid"
        assert "HTTP 422" in str(info.value)

    def test_http_error_without_json_uses_reason(self, client, session):
        """A non-JSON error body falls back to the HTTP reason."""
        session.request.return_value = make_response(status=502, json_data=ValueError("no json"), reason="Bad Gateway")
        with pytest.raises(ApiError) as info:
            client.get("tickets")
        assert info.value.message == "Bad Gateway"

    def test_transport_error_wrapped(self, client, session):
        """Connection failures are raised as ApiError."""
        session.request.side_effect = requests.ConnectionError("refused")
        with pytest.raises(ApiError) as info:
            client.get("tickets")
        assert info.value.status_code is None
        assert "refused" in info.value.message

    def test_unsuccessful_envelope_raises(self, client, session):
        """An envelope with success false raises ApiError."""
        session.request.return_value = make_response(json_data={"success": False, "message": "Not allowed"})
        with pytest.raises(ApiError, match="Not allowed"):
            client.get("tickets")

    def test_invalid_json_raises(self, client, session):
        """A body that is not JSON raises ApiError."""
        session.request.return_value = make_response(json_data=ValueError("bad"))
        with pytest.raises(ApiError, match="invalid JSON"):
            client.get("tickets")


class TestUnwrap:
    def test_plain_payload_passes_through(self):
        """Payloads without an envelope are returned unchanged."""
        assert ApiClient.unwrap([{"id": 1}]) == [{"id": 1}]
        assert ApiClient.unwrap({"id": 1}) == {"id": 1}

    def test_envelope_returns_data(self):
        """An envelope unwraps to its data field."""
        assert ApiClient.unwrap({"success": True, "data": {"employees": []}}) == {"employees": []}
