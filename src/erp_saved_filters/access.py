"""Access control for saved filters.

Every check receives the acting principal explicitly; a missing principal
denies every action.
"""

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Optional, Union

from .constants import FILTER_ADMIN_PERMISSION_SUFFIXES, FILTER_ADMIN_ROLES, VIEWS_PERMISSIONS
from .filtering.saved_filter import SavedFilter


def _as_name_set(names: Union[str, Iterable[str], None]) -> frozenset[str]:
    if names is None:
        return frozenset()
    if isinstance(names, str):
        return frozenset([names])
    return frozenset(names)


@dataclass(frozen=True)
class Principal:
    """The acting user, as far as access decisions are concerned."""

    id: str
    roles: frozenset[str] = field(default_factory=frozenset)
    permissions: frozenset[str] = field(default_factory=frozenset)
    tenant_id: Optional[str] = None

    def __post_init__(self) -> None:
        # Accept a single name or any iterable of names for roles and permissions
        object.__setattr__(self, "roles", _as_name_set(self.roles))
        object.__setattr__(self, "permissions", _as_name_set(self.permissions))

    def has_role(self, role: str) -> bool:
        return role in self.roles

    def has_permission(self, permission: str) -> bool:
        return permission in self.permissions


@dataclass(frozen=True)
class FilterActions:
    """Instance actions a principal may perform on one saved filter."""

    can_edit: bool
    can_share: bool
    can_delete: bool


def can_edit_filter(saved_filter: SavedFilter, principal: Optional[Principal]) -> bool:
    """Only the creator of a filter may edit it."""
    if principal is None:
        return False
    return saved_filter.created_by is not None and saved_filter.created_by == principal.id


def can_share_filter(saved_filter: SavedFilter, principal: Optional[Principal]) -> bool:
    """Sharing is an edit-class action."""
    return can_edit_filter(saved_filter, principal)


def can_delete_filter(saved_filter: SavedFilter, principal: Optional[Principal], module: str) -> bool:
    """Creators, filter admin roles and module managers may delete a filter.

    Args:
        saved_filter: The filter to delete
        principal: The acting user
        module: Business module whose ``<module>.manage`` / ``<module>.admin``
            permissions grant deletion

    Returns:
        True if the principal may delete the filter
    """
    if principal is None:
        return False

    if can_edit_filter(saved_filter, principal):
        return True

    if any(principal.has_role(role) for role in FILTER_ADMIN_ROLES):
        return True

    return any(principal.has_permission(f"{module}.{suffix}") for suffix in FILTER_ADMIN_PERMISSION_SUFFIXES)


def can_view_filters(principal: Optional[Principal]) -> bool:
    return principal is not None and principal.has_permission(VIEWS_PERMISSIONS["VIEW"])


def can_manage_filters(principal: Optional[Principal]) -> bool:
    return principal is not None and principal.has_permission(VIEWS_PERMISSIONS["MANAGE"])


def can_share_filters(principal: Optional[Principal]) -> bool:
    return principal is not None and principal.has_permission(VIEWS_PERMISSIONS["SHARE"])


def filter_actions(saved_filter: SavedFilter, principal: Optional[Principal], module: str) -> FilterActions:
    """Evaluate the edit/share/delete gates of one filter at once."""
    return FilterActions(
        can_edit=can_edit_filter(saved_filter, principal),
        can_share=can_share_filter(saved_filter, principal),
        can_delete=can_delete_filter(saved_filter, principal, module),
    )
