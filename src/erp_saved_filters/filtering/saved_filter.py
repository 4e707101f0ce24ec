"""
Saved filter data models exchanged with the views backend.
"""

import copy
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Optional

from ..constants import SAVED_FILTER_LIMITS
from ..utils.validators import parse_iso8601, validate_string_length
from .types import FilterConfig


class _Unset:
    """Marker for update fields that were not provided."""

    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False


UNSET: Any = _Unset()


def _format_timestamp(value: Optional[datetime]) -> Optional[str]:
    if value is None:
        return None
    return value.isoformat().replace("+00:00", "Z")


@dataclass
class SavedFilter:
    """Saved filter as persisted by the backend."""

    id: str
    tenant_id: str
    name: str
    module: str
    filters: FilterConfig = field(default_factory=dict)
    description: Optional[str] = None
    is_default: bool = False
    is_shared: bool = False
    created_by: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "SavedFilter":
        """Create SavedFilter from a backend response entity."""
        return cls(
            id=str(data["id"]),
            tenant_id=str(data.get("tenant_id") or ""),
            name=data["name"],
            module=data["module"],
            filters=copy.deepcopy(data.get("filters") or {}),
            description=data.get("description"),
            is_default=bool(data.get("is_default", False)),
            is_shared=bool(data.get("is_shared", False)),
            created_by=data.get("created_by"),
            created_at=parse_iso8601(data.get("created_at")),
            updated_at=parse_iso8601(data.get("updated_at")),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "tenant_id": self.tenant_id,
            "name": self.name,
            "description": self.description,
            "module": self.module,
            "filters": copy.deepcopy(self.filters),
            "is_default": self.is_default,
            "is_shared": self.is_shared,
            "created_by": self.created_by,
            "created_at": _format_timestamp(self.created_at),
            "updated_at": _format_timestamp(self.updated_at),
        }


@dataclass
class SavedFilterCreate:
    """Payload for creating a saved filter."""

    name: str
    module: str
    filters: FilterConfig
    description: Optional[str] = None
    is_default: bool = False
    is_shared: bool = False

    def to_payload(self) -> dict[str, Any]:
        """Return the request body, enforcing the backend schema limits.

        Raises:
            ValueError: When name or module are empty or too long
        """
        if not validate_string_length(self.name, 1, SAVED_FILTER_LIMITS["NAME_MAX_LENGTH"]):
            raise ValueError(f"name must be 1-{SAVED_FILTER_LIMITS['NAME_MAX_LENGTH']} characters")
        if not validate_string_length(self.module, 1, SAVED_FILTER_LIMITS["MODULE_MAX_LENGTH"]):
            raise ValueError(f"module must be 1-{SAVED_FILTER_LIMITS['MODULE_MAX_LENGTH']} characters")
        if not isinstance(self.filters, dict):
            raise ValueError("filters must be an object")

        payload: dict[str, Any] = {
            "name": self.name,
            "module": self.module,
            "filters": copy.deepcopy(self.filters),
            "is_default": self.is_default,
            "is_shared": self.is_shared,
        }
        if self.description is not None:
            payload["description"] = self.description
        return payload


@dataclass
class SavedFilterUpdate:
    """Partial update of a saved filter; fields left UNSET are not sent."""

    name: Any = UNSET
    description: Any = UNSET
    filters: Any = UNSET
    is_default: Any = UNSET
    is_shared: Any = UNSET

    def to_payload(self) -> dict[str, Any]:
        """Return the request body with only the fields that were set.

        Raises:
            ValueError: When a provided name or filters value is invalid
        """
        payload: dict[str, Any] = {}

        if self.name is not UNSET:
            if not validate_string_length(self.name, 1, SAVED_FILTER_LIMITS["NAME_MAX_LENGTH"]):
                raise ValueError(f"name must be 1-{SAVED_FILTER_LIMITS['NAME_MAX_LENGTH']} characters")
            payload["name"] = self.name
        if self.description is not UNSET:
            payload["description"] = self.description
        if self.filters is not UNSET:
            if not isinstance(self.filters, dict):
                raise ValueError("filters must be an object")
            payload["filters"] = copy.deepcopy(self.filters)
        if self.is_default is not UNSET:
            payload["is_default"] = bool(self.is_default)
        if self.is_shared is not UNSET:
            payload["is_shared"] = bool(self.is_shared)

        return payload


@dataclass
class SavedFiltersListParams:
    """Query parameters for listing saved filters."""

    module: Optional[str] = None
    is_shared: Optional[bool] = None
    page: Optional[int] = None
    page_size: Optional[int] = None

    def to_query_params(self) -> dict[str, Any]:
        params: dict[str, Any] = {}
        if self.module:
            params["module"] = self.module
        if self.is_shared is not None:
            params["is_shared"] = "true" if self.is_shared else "false"
        if self.page is not None:
            params["page"] = self.page
        if self.page_size is not None:
            params["page_size"] = self.page_size
        return params


@dataclass
class PaginationMeta:
    total: int = 0
    page: int = 1
    page_size: int = 0
    total_pages: int = 0

    @classmethod
    def from_dict(cls, data: Optional[dict[str, Any]]) -> "PaginationMeta":
        data = data or {}
        return cls(
            total=int(data.get("total", 0) or 0),
            page=int(data.get("page", 1) or 1),
            page_size=int(data.get("page_size", 0) or 0),
            total_pages=int(data.get("total_pages", 0) or 0),
        )


@dataclass
class FilterPage:
    """One page of saved filters returned by the list endpoint."""

    data: list[SavedFilter]
    meta: PaginationMeta
