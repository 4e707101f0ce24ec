"""Decorators for saved-filter store commands."""

import functools
import logging
import uuid
from datetime import datetime
from typing import Any, Callable, TypeVar

from ..exceptions import PersistenceError

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Any])


def store_command(failure_result: Any = None) -> Callable[[F], F]:
    """Decorator to run a store command with consistent loading/error handling.

    The wrapped method belongs to an object exposing ``_begin_request()`` and
    ``_fail_request(error)``. Persistence failures are captured into the
    object's state instead of propagating, and the command returns
    ``failure_result``. Any other exception is wrapped as an unclassified
    PersistenceError.

    Args:
        failure_result: Value returned when the command fails

    Returns:
        Decorator function
    """

    def decorator(func: F) -> F:
        @functools.wraps(func)
        def wrapper(self: Any, *args: Any, **kwargs: Any) -> Any:
            request_id = str(uuid.uuid4())
            start_time = datetime.now()

            logger.info(f"Command {request_id}: Starting {func.__name__}")
            self._begin_request()

            try:
                result = func(self, *args, **kwargs)

            except PersistenceError as e:
                duration_ms = int((datetime.now() - start_time).total_seconds() * 1000)
                logger.warning(
                    f"Command {request_id}: {func.__name__} failed in {duration_ms}ms "
                    f"({e.kind.value}, status={e.status_code}): {e}"
                )
                self._fail_request(e)
                return failure_result

            except Exception as e:
                duration_ms = int((datetime.now() - start_time).total_seconds() * 1000)
                logger.exception(f"Command {request_id}: Unexpected error in {func.__name__} after {duration_ms}ms")
                error = PersistenceError(f"An unexpected error occurred: {e!s}")
                error.__cause__ = e
                self._fail_request(error)
                return failure_result

            duration_ms = int((datetime.now() - start_time).total_seconds() * 1000)
            logger.info(f"Command {request_id}: Completed {func.__name__} in {duration_ms}ms")

            return result

        return wrapper  # type: ignore[return-value]

    return decorator
