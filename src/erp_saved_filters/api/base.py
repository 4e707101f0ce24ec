"""Base API client for the ERP backend."""

import logging
import uuid
from abc import ABC, abstractmethod
from datetime import datetime
from typing import Any, Dict, Optional

import requests

from ..constants import API_CONFIG
from ..exceptions import ClientError, CorsBlockedError, NetworkError, PersistenceError, ServerError

logger = logging.getLogger(__name__)


class BaseAPIClient(ABC):
    """Base class for all ERP backend clients."""

    def __init__(
        self,
        base_url: str = API_CONFIG["DEFAULT_BASE_URL"],
        token: Optional[str] = None,
        timeout: float = API_CONFIG["DEFAULT_TIMEOUT"],
        origin: Optional[str] = None,
    ) -> None:
        """Initialize the base API client.

        Args:
            base_url: Backend API root, e.g. ``http://localhost:8000/api/v1``
            token: Bearer access token
            timeout: Request timeout in seconds
            origin: Browser origin the requests act on behalf of; when set,
                responses without a matching CORS header are rejected
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.origin = origin

        # Common headers
        self.headers = {
            "user-agent": API_CONFIG["USER_AGENT"],
            "content-type": "application/json",
            "accept": "application/json",
        }
        if token:
            self.headers["authorization"] = f"Bearer {token}"
        if origin:
            self.headers["origin"] = origin

    def _make_request(
        self,
        method: str,
        path: str,
        params: Optional[Dict[str, Any]] = None,
        data: Optional[Dict[str, Any]] = None,
    ) -> Optional[Dict[str, Any]]:
        """Make a request and classify any failure.

        Args:
            method: HTTP method (GET, POST, etc.)
            path: API path (without base URL)
            params: Query parameters
            data: Request body data

        Returns:
            Dict containing the decoded response body, or None for empty bodies

        Raises:
            NetworkError: When the backend cannot be reached
            CorsBlockedError: When the response lacks the CORS header for our origin
            ServerError: For 5xx responses
            ClientError: For 4xx responses
            PersistenceError: For any other failure
        """
        request_id = str(uuid.uuid4())
        start_time = datetime.now()

        logger.info(f"Request {request_id}: Starting {method} {path}")

        url = f"{self.base_url}{path}"

        try:
            response = requests.request(
                method=method,
                url=url,
                params=params,
                json=data,
                headers=self.headers,
                timeout=self.timeout,
            )
        except (requests.ConnectionError, requests.Timeout) as e:
            duration_ms = int((datetime.now() - start_time).total_seconds() * 1000)
            logger.error(f"Request {request_id}: Connection failed in {duration_ms}ms: {e}")
            raise NetworkError(f"Error de conexión: {e}") from e
        except requests.RequestException as e:
            duration_ms = int((datetime.now() - start_time).total_seconds() * 1000)
            logger.error(f"Request {request_id}: Request failed in {duration_ms}ms: {e}")
            raise PersistenceError(str(e)) from e

        duration_ms = int((datetime.now() - start_time).total_seconds() * 1000)
        status_code = response.status_code

        if self.origin and not self._cors_allowed(response):
            logger.error(f"Request {request_id}: Blocked by CORS in {duration_ms}ms, status={status_code}")
            raise CorsBlockedError(
                f"Respuesta bloqueada por CORS para el origen {self.origin}", status_code=status_code
            )

        if status_code >= 500:
            logger.error(f"Request {request_id}: Server error in {duration_ms}ms, status={status_code}")
            raise ServerError(self._error_message(response), status_code=status_code, details=self._error_body(response))

        if status_code >= 400:
            logger.warning(f"Request {request_id}: Client error in {duration_ms}ms, status={status_code}")
            raise ClientError(self._error_message(response), status_code=status_code, details=self._error_body(response))

        logger.info(f"Request {request_id}: Success in {duration_ms}ms, status={status_code}")

        if status_code == 204 or not response.content:
            return None

        try:
            result: Dict[str, Any] = response.json()
        except ValueError as e:
            logger.error(f"Request {request_id}: Response body is not valid JSON")
            raise PersistenceError("Invalid JSON response", status_code=status_code) from e

        return result

    def _cors_allowed(self, response: requests.Response) -> bool:
        allowed = response.headers.get("Access-Control-Allow-Origin")
        return allowed is not None and allowed in ("*", self.origin)

    @staticmethod
    def _error_body(response: requests.Response) -> Dict[str, Any]:
        try:
            body = response.json()
        except ValueError:
            return {"raw_response": response.text}
        return body if isinstance(body, dict) else {"raw_response": body}

    def _error_message(self, response: requests.Response) -> str:
        body = self._error_body(response)

        detail = body.get("detail")
        if isinstance(detail, str):
            return detail

        error = body.get("error")
        if isinstance(error, dict) and error.get("message"):
            return str(error["message"])

        if body.get("message"):
            return str(body["message"])

        return f"HTTP {response.status_code}"

    @abstractmethod
    def get_api_path(self) -> str:
        """Return the base API path for this client."""
        pass
