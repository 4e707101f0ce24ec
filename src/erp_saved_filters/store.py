"""
Saved-filter store: cached saved filters of one module plus the commands that
keep the cache in sync with the backend.

State changes go through ``reduce_filter_state``, a pure reducer, so the same
transitions can be driven by a UI layer or by tests without any I/O.

Known limitations:
- The cache is not locked; one logical caller is expected to mutate it at a
  time. Concurrent update/remove of the same id apply in the order their
  responses arrive.
- In-flight requests cannot be cancelled; callers that go away mid-request
  must ignore the outcome themselves.
- Clearing ``is_default`` through ``update`` clears the cached default without
  electing a new one; the next ``list`` recomputes it.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Callable, Optional, Protocol, Union

from .exceptions import PersistenceError
from .filtering.saved_filter import (
    FilterPage,
    SavedFilter,
    SavedFilterCreate,
    SavedFiltersListParams,
    SavedFilterUpdate,
)
from .utils.decorators import store_command

logger = logging.getLogger(__name__)


class SavedFiltersBackend(Protocol):
    """Persistence collaborator for saved filters."""

    def list_filters(
        self,
        module: Optional[str] = None,
        is_shared: Optional[bool] = None,
        page: Optional[int] = None,
        page_size: Optional[int] = None,
    ) -> FilterPage: ...

    def get_filter(self, filter_id: str) -> SavedFilter: ...

    def create_filter(self, filter_data: SavedFilterCreate) -> SavedFilter: ...

    def update_filter(self, filter_id: str, filter_data: SavedFilterUpdate) -> SavedFilter: ...

    def delete_filter(self, filter_id: str) -> None: ...


@dataclass(frozen=True)
class FilterStoreState:
    filters: tuple[SavedFilter, ...] = ()
    default_filter: Optional[SavedFilter] = None
    loading: bool = False
    error: Optional[PersistenceError] = None


# ---------------------------------------------------------------------------
# Actions
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class RequestStarted:
    pass


@dataclass(frozen=True)
class FiltersLoaded:
    filters: tuple[SavedFilter, ...]


@dataclass(frozen=True)
class FilterFetched:
    saved_filter: SavedFilter


@dataclass(frozen=True)
class FilterCreated:
    saved_filter: SavedFilter


@dataclass(frozen=True)
class FilterUpdated:
    filter_id: str
    saved_filter: SavedFilter


@dataclass(frozen=True)
class FilterRemoved:
    filter_id: str


@dataclass(frozen=True)
class RequestFailed:
    error: PersistenceError


@dataclass(frozen=True)
class ErrorDismissed:
    pass


StoreAction = Union[
    RequestStarted,
    FiltersLoaded,
    FilterFetched,
    FilterCreated,
    FilterUpdated,
    FilterRemoved,
    RequestFailed,
    ErrorDismissed,
]


def _is_module_default(saved_filter: SavedFilter, module: str) -> bool:
    return saved_filter.is_default and saved_filter.module == module


def reduce_filter_state(state: FilterStoreState, action: StoreAction, module: str) -> FilterStoreState:
    """Return the state that results from applying an action.

    Args:
        state: Current state
        action: Action to apply
        module: Module the store is scoped to, used to pick the default filter

    Returns:
        The next state; the input state is never modified

    Raises:
        TypeError: For objects that are not store actions
    """
    if isinstance(action, RequestStarted):
        return replace(state, loading=True, error=None)

    if isinstance(action, FiltersLoaded):
        filters = tuple(action.filters)
        default_filter = next((f for f in filters if _is_module_default(f, module)), None)
        return FilterStoreState(filters=filters, default_filter=default_filter, loading=False, error=None)

    if isinstance(action, FilterFetched):
        return replace(state, loading=False, error=None)

    if isinstance(action, FilterCreated):
        created = action.saved_filter
        default_filter = created if _is_module_default(created, module) else state.default_filter
        return FilterStoreState(
            filters=state.filters + (created,),
            default_filter=default_filter,
            loading=False,
            error=None,
        )

    if isinstance(action, FilterUpdated):
        updated = action.saved_filter
        filters = tuple(updated if f.id == action.filter_id else f for f in state.filters)

        if _is_module_default(updated, module):
            default_filter = updated
        elif state.default_filter is not None and state.default_filter.id == action.filter_id:
            default_filter = None
        else:
            default_filter = state.default_filter

        return FilterStoreState(filters=filters, default_filter=default_filter, loading=False, error=None)

    if isinstance(action, FilterRemoved):
        filters = tuple(f for f in state.filters if f.id != action.filter_id)
        default_filter = state.default_filter
        if default_filter is not None and default_filter.id == action.filter_id:
            default_filter = None
        return FilterStoreState(filters=filters, default_filter=default_filter, loading=False, error=None)

    if isinstance(action, RequestFailed):
        return replace(state, loading=False, error=action.error)

    if isinstance(action, ErrorDismissed):
        return replace(state, error=None)

    raise TypeError(f"Unknown store action: {action!r}")


Listener = Callable[[FilterStoreState], None]


class SavedFiltersStore:
    """Cache of the saved filters of one module, kept in sync with the backend."""

    def __init__(self, backend: SavedFiltersBackend, module: str):
        self.backend = backend
        self.module = module
        self._state = FilterStoreState()
        self._listeners: list[Listener] = []

    @property
    def state(self) -> FilterStoreState:
        return self._state

    @property
    def filters(self) -> tuple[SavedFilter, ...]:
        return self._state.filters

    @property
    def default_filter(self) -> Optional[SavedFilter]:
        return self._state.default_filter

    @property
    def loading(self) -> bool:
        return self._state.loading

    @property
    def error(self) -> Optional[PersistenceError]:
        return self._state.error

    def dispatch(self, action: StoreAction) -> FilterStoreState:
        """Apply an action and notify subscribers when the state changed."""
        new_state = reduce_filter_state(self._state, action, self.module)
        if new_state != self._state:
            self._state = new_state
            for listener in list(self._listeners):
                listener(new_state)
        return self._state

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a state listener; returns a function that unregisters it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _begin_request(self) -> None:
        self.dispatch(RequestStarted())

    def _fail_request(self, error: PersistenceError) -> None:
        self.dispatch(RequestFailed(error))

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    @store_command(failure_result=False)
    def list(self, params: Optional[SavedFiltersListParams] = None) -> bool:
        """Load saved filters, replacing the cache. An empty result is a success."""
        params = params or SavedFiltersListParams()
        page = self.backend.list_filters(
            module=params.module or self.module,
            is_shared=params.is_shared,
            page=params.page,
            page_size=params.page_size,
        )
        self.dispatch(FiltersLoaded(tuple(page.data)))
        logger.debug(f"Store for module '{self.module}' holds {len(page.data)} filters")
        return True

    def refresh(self) -> bool:
        return self.list(SavedFiltersListParams(module=self.module))

    @store_command(failure_result=None)
    def get(self, filter_id: str) -> Optional[SavedFilter]:
        """Fetch a single filter without touching the cache."""
        saved_filter = self.backend.get_filter(filter_id)
        self.dispatch(FilterFetched(saved_filter))
        return saved_filter

    def create(self, filter_data: SavedFilterCreate) -> Optional[SavedFilter]:
        """Persist a new filter and append it to the cache.

        Raises:
            ValueError: When the payload violates the schema limits; nothing is sent
        """
        filter_data.to_payload()
        return self._create(filter_data)

    @store_command(failure_result=None)
    def _create(self, filter_data: SavedFilterCreate) -> Optional[SavedFilter]:
        created = self.backend.create_filter(filter_data)
        self.dispatch(FilterCreated(created))
        return created

    def update(self, filter_id: str, filter_data: SavedFilterUpdate) -> Optional[SavedFilter]:
        """Persist a partial update and replace the cached entity.

        Raises:
            ValueError: When a provided field is invalid; nothing is sent
        """
        filter_data.to_payload()
        return self._update(filter_id, filter_data)

    @store_command(failure_result=None)
    def _update(self, filter_id: str, filter_data: SavedFilterUpdate) -> Optional[SavedFilter]:
        updated = self.backend.update_filter(filter_id, filter_data)
        self.dispatch(FilterUpdated(filter_id, updated))
        return updated

    @store_command(failure_result=False)
    def remove(self, filter_id: str) -> bool:
        """Delete a filter and evict it from the cache."""
        self.backend.delete_filter(filter_id)
        self.dispatch(FilterRemoved(filter_id))
        return True

    def dismiss_error(self) -> None:
        self.dispatch(ErrorDismissed())

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def find(self, filter_id: str) -> Optional[SavedFilter]:
        return next((f for f in self._state.filters if f.id == filter_id), None)

    def get_default_filter(self, module: str) -> Optional[SavedFilter]:
        """Return the effective default filter of a module.

        The cached default wins; otherwise the first cached filter flagged as
        default for the module is returned.
        """
        default_filter = self._state.default_filter
        if default_filter is not None and default_filter.module == module:
            return default_filter
        return next((f for f in self._state.filters if _is_module_default(f, module)), None)

    def get_my_filters(self, module: str) -> list[SavedFilter]:
        return [f for f in self._state.filters if f.module == module and not f.is_shared and not f.is_default]

    def get_shared_filters(self, module: str) -> list[SavedFilter]:
        return [f for f in self._state.filters if f.module == module and f.is_shared]
