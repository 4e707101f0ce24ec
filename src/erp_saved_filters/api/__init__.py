"""ERP backend client modules."""

from .base import BaseAPIClient
from .saved_filters import SavedFiltersAPIClient

__all__ = ["BaseAPIClient", "SavedFiltersAPIClient"]
