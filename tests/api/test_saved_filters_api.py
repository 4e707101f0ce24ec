"""Test suite for the saved filters API client."""

from unittest.mock import Mock, patch

import pytest
import requests

from erp_saved_filters.api import SavedFiltersAPIClient
from erp_saved_filters.config import Settings
from erp_saved_filters.exceptions import (
    ClientError,
    CorsBlockedError,
    FailureKind,
    NetworkError,
    PersistenceError,
    ServerError,
)
from erp_saved_filters.filtering import SavedFilterCreate, SavedFilterUpdate


def _entity(**overrides):
    data = {
        "id": "flt-1",
        "tenant_id": "tenant-1",
        "name": "Activos",
        "description": None,
        "module": "users",
        "filters": {"is_active": {"operator": "eq", "value": True}},
        "is_default": False,
        "is_shared": False,
        "created_by": "u1",
        "created_at": "2025-01-01T00:00:00Z",
        "updated_at": "2025-01-02T10:30:00Z",
    }
    data.update(overrides)
    return data


def _response(status_code=200, body=None, headers=None):
    response = Mock()
    response.status_code = status_code
    response.headers = headers or {}
    response.content = b"{}" if body is not None else b""
    response.json.return_value = body
    response.text = ""
    return response


class TestSavedFiltersAPIClient:
    """Test SavedFiltersAPIClient requests and decoding."""

    @pytest.fixture
    def client(self):
        """Create client without CORS emulation."""
        return SavedFiltersAPIClient(base_url="http://erp.test/api/v1/", token="test_token")

    @patch("requests.request")
    def test_list_filters_success(self, mock_request, client):
        """Test list envelope decoding and query parameters."""
        mock_request.return_value = _response(
            body={
                "data": [_entity(), _entity(id="flt-2", is_default=True)],
                "meta": {"total": 2, "page": 1, "page_size": 20, "total_pages": 1},
                "error": None,
            }
        )

        page = client.list_filters(module="users", is_shared=False, page=1, page_size=20)

        assert [f.id for f in page.data] == ["flt-1", "flt-2"]
        assert page.data[1].is_default is True
        assert page.data[0].filters == {"is_active": {"operator": "eq", "value": True}}
        assert page.meta.total == 2

        kwargs = mock_request.call_args.kwargs
        assert kwargs["method"] == "GET"
        assert kwargs["url"] == "http://erp.test/api/v1/views/filters"
        assert kwargs["params"] == {"module": "users", "is_shared": "false", "page": 1, "page_size": 20}
        assert kwargs["headers"]["authorization"] == "Bearer test_token"

    @patch("requests.request")
    def test_list_filters_empty_is_success(self, mock_request, client):
        mock_request.return_value = _response(body={"data": [], "meta": {"total": 0}})

        page = client.list_filters(module="users")

        assert page.data == []
        assert mock_request.call_args.kwargs["params"] == {"module": "users"}

    @patch("requests.request")
    def test_create_filter_sends_payload(self, mock_request, client):
        """Test POST body for creation."""
        mock_request.return_value = _response(status_code=201, body={"data": _entity(is_shared=True)})

        created = client.create_filter(
            SavedFilterCreate(
                name="Activos",
                module="users",
                filters={"is_active": {"operator": "eq", "value": True}},
                is_shared=True,
            )
        )

        assert created.id == "flt-1"
        assert created.is_shared is True
        kwargs = mock_request.call_args.kwargs
        assert kwargs["method"] == "POST"
        assert kwargs["json"] == {
            "name": "Activos",
            "module": "users",
            "filters": {"is_active": {"operator": "eq", "value": True}},
            "is_default": False,
            "is_shared": True,
        }

    def test_create_filter_rejects_empty_name(self, client):
        with pytest.raises(ValueError):
            client.create_filter(SavedFilterCreate(name="", module="users", filters={}))

    @patch("requests.request")
    def test_update_filter_sends_only_set_fields(self, mock_request, client):
        """Test partial patch semantics."""
        mock_request.return_value = _response(body={"data": _entity(is_default=True)})

        updated = client.update_filter("flt-1", SavedFilterUpdate(is_default=True, description=None))

        assert updated.is_default is True
        kwargs = mock_request.call_args.kwargs
        assert kwargs["method"] == "PUT"
        assert kwargs["url"].endswith("/views/filters/flt-1")
        assert kwargs["json"] == {"description": None, "is_default": True}

    @patch("requests.request")
    def test_get_filter(self, mock_request, client):
        mock_request.return_value = _response(body={"data": _entity()})

        saved_filter = client.get_filter("flt-1")

        assert saved_filter.name == "Activos"
        assert saved_filter.to_dict()["updated_at"] == "2025-01-02T10:30:00Z"

    @patch("requests.request")
    def test_delete_filter_no_body(self, mock_request, client):
        mock_request.return_value = _response(status_code=204)

        assert client.delete_filter("flt-1") is None
        assert mock_request.call_args.kwargs["method"] == "DELETE"

    @patch("requests.request")
    def test_malformed_entity_raises_persistence_error(self, mock_request, client):
        mock_request.return_value = _response(body={"data": None})

        with pytest.raises(PersistenceError) as exc_info:
            client.get_filter("flt-1")

        assert exc_info.value.kind == FailureKind.OTHER


class TestFailureClassification:
    """Test classification of transport failures."""

    @pytest.fixture
    def client(self):
        return SavedFiltersAPIClient(base_url="http://erp.test/api/v1")

    @patch("requests.request")
    def test_connection_error_is_network(self, mock_request, client):
        mock_request.side_effect = requests.ConnectionError("Connection refused")

        with pytest.raises(NetworkError) as exc_info:
            client.list_filters(module="users")

        assert exc_info.value.kind == FailureKind.NETWORK

    @patch("requests.request")
    def test_timeout_is_network(self, mock_request, client):
        mock_request.side_effect = requests.Timeout("timed out")

        with pytest.raises(NetworkError):
            client.get_filter("flt-1")

    @patch("requests.request")
    def test_5xx_is_server_error(self, mock_request, client):
        mock_request.return_value = _response(status_code=500, body={"detail": "Internal Server Error"})

        with pytest.raises(ServerError) as exc_info:
            client.list_filters(module="users")

        assert exc_info.value.status_code == 500
        assert str(exc_info.value) == "Internal Server Error"

    @patch("requests.request")
    def test_4xx_is_client_error(self, mock_request, client):
        mock_request.return_value = _response(
            status_code=403, body={"error": {"message": "Forbidden", "code": "PERMISSION_DENIED"}}
        )

        with pytest.raises(ClientError) as exc_info:
            client.delete_filter("flt-1")

        assert exc_info.value.kind == FailureKind.CLIENT
        assert exc_info.value.message == "Forbidden"

    @patch("requests.request")
    def test_invalid_json_is_other(self, mock_request, client):
        response = _response(body={})
        response.json.side_effect = ValueError("Expecting value")
        mock_request.return_value = response

        with pytest.raises(PersistenceError) as exc_info:
            client.list_filters()

        assert exc_info.value.kind == FailureKind.OTHER

    @patch("requests.request")
    def test_missing_cors_header_is_cors_error(self, mock_request):
        """Test CORS emulation when an origin is configured."""
        client = SavedFiltersAPIClient.from_settings(
            Settings(api_base_url="http://erp.test/api/v1", origin="http://app.erp.test")
        )
        mock_request.return_value = _response(status_code=500, body={"detail": "boom"})

        with pytest.raises(CorsBlockedError) as exc_info:
            client.list_filters(module="users")

        assert exc_info.value.kind == FailureKind.CORS
        assert mock_request.call_args.kwargs["headers"]["origin"] == "http://app.erp.test"

    @patch("requests.request")
    def test_matching_cors_header_passes(self, mock_request):
        client = SavedFiltersAPIClient(base_url="http://erp.test/api/v1", origin="http://app.erp.test")
        mock_request.return_value = _response(
            body={"data": []}, headers={"Access-Control-Allow-Origin": "http://app.erp.test"}
        )

        assert client.list_filters().data == []
