"""Saved filters API client for the ERP views backend."""

import logging
from typing import Optional

from ..config import Settings
from ..constants import API_CONFIG
from ..exceptions import PersistenceError
from ..filtering.saved_filter import (
    FilterPage,
    PaginationMeta,
    SavedFilter,
    SavedFilterCreate,
    SavedFiltersListParams,
    SavedFilterUpdate,
)
from .base import BaseAPIClient

logger = logging.getLogger(__name__)


class SavedFiltersAPIClient(BaseAPIClient):
    """Client for the ``/views/filters`` endpoints."""

    @classmethod
    def from_settings(cls, settings: Settings) -> "SavedFiltersAPIClient":
        return cls(
            base_url=settings.api_base_url,
            token=settings.api_token,
            timeout=settings.timeout,
            origin=settings.origin,
        )

    def get_api_path(self) -> str:
        """Return the base API path for saved filter endpoints."""
        return API_CONFIG["FILTERS_PATH"]

    def list_filters(
        self,
        module: Optional[str] = None,
        is_shared: Optional[bool] = None,
        page: Optional[int] = None,
        page_size: Optional[int] = None,
    ) -> FilterPage:
        """
        Retrieve saved filters visible to the current user.

        Args:
            module: Optional module namespace to filter by
            is_shared: Optional shared flag to filter by
            page: Optional page number
            page_size: Optional page size

        Returns:
            FilterPage with the entities and pagination metadata

        Raises:
            PersistenceError: When the request fails or the envelope is malformed
        """
        params = SavedFiltersListParams(module=module, is_shared=is_shared, page=page, page_size=page_size)
        response = self._make_request("GET", self.get_api_path(), params=params.to_query_params()) or {}

        items = response.get("data") or []
        if not isinstance(items, list):
            raise PersistenceError("Malformed list response: 'data' is not a list")

        try:
            filters = [SavedFilter.from_dict(item) for item in items]
        except (KeyError, TypeError) as e:
            raise PersistenceError(f"Malformed saved filter in list response: {e}") from e
        logger.debug(f"Listed {len(filters)} saved filters for module={module}")

        return FilterPage(data=filters, meta=PaginationMeta.from_dict(response.get("meta")))

    def get_filter(self, filter_id: str) -> SavedFilter:
        """Retrieve a single saved filter."""
        response = self._make_request("GET", f"{self.get_api_path()}/{filter_id}")
        return self._entity(response)

    def create_filter(self, filter_data: SavedFilterCreate) -> SavedFilter:
        """
        Create a saved filter.

        Args:
            filter_data: Name, module, filter configuration and flags

        Returns:
            The entity as persisted, with server-assigned id and timestamps

        Raises:
            ValueError: When the payload violates the schema limits
            PersistenceError: When the request fails
        """
        response = self._make_request("POST", self.get_api_path(), data=filter_data.to_payload())
        return self._entity(response)

    def update_filter(self, filter_id: str, filter_data: SavedFilterUpdate) -> SavedFilter:
        """Apply a partial update to a saved filter."""
        response = self._make_request("PUT", f"{self.get_api_path()}/{filter_id}", data=filter_data.to_payload())
        return self._entity(response)

    def delete_filter(self, filter_id: str) -> None:
        """Delete a saved filter."""
        self._make_request("DELETE", f"{self.get_api_path()}/{filter_id}")

    @staticmethod
    def _entity(response: Optional[dict]) -> SavedFilter:
        data = (response or {}).get("data")
        if not isinstance(data, dict):
            raise PersistenceError("Malformed response: missing 'data' entity")
        try:
            return SavedFilter.from_dict(data)
        except (KeyError, TypeError) as e:
            raise PersistenceError(f"Malformed saved filter: missing {e}") from e
