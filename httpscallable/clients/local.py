"""
Local functions client - in-proc handler registry.

Stands in for a real functions client when no backend is reachable
(tests, emulation, CLI experiments). Handlers are plain Python callables
registered by trigger name:

    client = LocalFunctionsClient()
    client.register("shout", lambda data: {"message": data["text"].upper()})

    functions = Functions(client)
    functions.https_callable("shout").call({"text": "hi"}, on_complete=print)

Error classification (mirrors what a real transport reports):
- Payload that is not a CallableValue -> INVALID_ARGUMENT
- Unknown trigger name -> NOT_FOUND
- Handler exceeds the timeout -> DEADLINE_EXCEEDED
- FunctionsError raised by the handler -> propagated unchanged
- Any other handler exception -> INTERNAL (chained)
- Handler returns a non-CallableValue -> INTERNAL
"""

import logging
import threading
from concurrent.futures import ThreadPoolExecutor
from concurrent.futures import TimeoutError as FutureTimeoutError
from typing import Any, Callable

from httpscallable.errors import FunctionsError, FunctionsErrorCode
from httpscallable.values import CallableValue, is_callable_value

logger = logging.getLogger(__name__)

# Type alias for trigger handlers
Handler = Callable[[Any], CallableValue]


class LocalFunctionsClient:
    """
    FunctionsClient that dispatches to registered in-proc handlers.

    Handlers run on a worker pool so the timeout can be enforced. A handler
    that times out keeps running in its worker; only the caller is released.
    """

    def __init__(self, handlers: dict[str, Handler] | None = None, max_workers: int = 4):
        self._handlers: dict[str, Handler] = dict(handlers or {})
        self._lock = threading.Lock()
        self._executor = ThreadPoolExecutor(
            max_workers=max_workers,
            thread_name_prefix="httpscallable-local",
        )

    def register(self, name: str, handler: Handler) -> None:
        """
        Register a handler under a trigger name.

        Replaces any handler already registered under that name.
        """
        if not name:
            raise ValueError("Trigger name must be non-empty")
        with self._lock:
            self._handlers[name] = handler

    def unregister(self, name: str) -> None:
        """Remove a handler. Unknown names are ignored."""
        with self._lock:
            self._handlers.pop(name, None)

    def names(self) -> list[str]:
        """Sorted list of registered trigger names."""
        with self._lock:
            return sorted(self._handlers)

    def invoke(self, name: str, data: Any, timeout: float) -> CallableValue:
        if not is_callable_value(data):
            raise FunctionsError(
                FunctionsErrorCode.INVALID_ARGUMENT,
                f"Unsupported payload type for '{name}': {type(data).__name__}",
            )

        with self._lock:
            handler = self._handlers.get(name)
        if handler is None:
            raise FunctionsError(FunctionsErrorCode.NOT_FOUND, f"No trigger named '{name}'")

        future = self._executor.submit(handler, data)
        try:
            value = future.result(timeout=timeout)
        except FutureTimeoutError:
            logger.warning("Trigger %s exceeded timeout of %ss", name, timeout)
            raise FunctionsError(
                FunctionsErrorCode.DEADLINE_EXCEEDED,
                f"Trigger '{name}' did not finish within {timeout}s",
            ) from None
        except FunctionsError:
            raise  # Already classified, propagate
        except Exception as e:
            logger.exception("Trigger %s raised %s", name, type(e).__name__)
            raise FunctionsError(FunctionsErrorCode.INTERNAL, str(e) or "INTERNAL") from e

        if not is_callable_value(value):
            raise FunctionsError(
                FunctionsErrorCode.INTERNAL,
                f"Trigger '{name}' returned unsupported type: {type(value).__name__}",
            )
        return value

    def close(self) -> None:
        """Shut down the worker pool without waiting for running handlers."""
        self._executor.shutdown(wait=False)

    def __enter__(self) -> "LocalFunctionsClient":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
