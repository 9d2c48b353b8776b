"""
CallableReference - Reference to one callable HTTPS trigger.

The reference binds a trigger name and a timeout to a shared functions
client and forwards invocations to it:
1. call(data, on_complete=...) invokes the client and delivers exactly one
   callback, either (CallableResult, None) or (None, error)
2. call_async(data) awaits the same outcome on the running event loop

Error handling contract:
- The client's exception is delivered unchanged (same object)
- No retries, no classification, no partial success
- The timeout is forwarded to the client, which enforces it

Cancelling a task awaiting call_async does not cancel the request already
handed to the client.
"""

import asyncio
import logging
from typing import Any, Callable, Optional

from httpscallable.callable.result import CallableResult
from httpscallable.clients.base import FunctionsClient

logger = logging.getLogger(__name__)

# Default request timeout in seconds
DEFAULT_TIMEOUT = 70.0

# on_complete(result, error): exactly one of the two is not None
CompletionCallback = Callable[[Optional[CallableResult], Optional[BaseException]], None]


class CallableReference:
    """
    A reference to a particular callable HTTPS trigger.

    Created by Functions.https_callable(). The client is shared, not owned;
    the reference holds no per-call state and may be used for any number of
    sequential or concurrent calls.

    Attributes:
        timeout: Seconds the client may spend on each call. Read when a call
            starts, so changing it affects only later calls.
    """

    def __init__(self, client: FunctionsClient, name: str, timeout: float = DEFAULT_TIMEOUT):
        self._client = client
        self._name = name
        self.timeout = timeout

    @property
    def name(self) -> str:
        """Name of the trigger this reference refers to."""
        return self._name

    def call(self, data: Any = None, *, on_complete: CompletionCallback) -> None:
        """
        Execute this trigger and report through a callback.

        The payload can be None, bool, int, float, str, a list of those, or a
        dict with str keys whose values are also one of those types. The
        client rejects anything else.

        Args:
            data: Parameters to pass to the trigger
            on_complete: Called once with (result, None) on success or
                (None, error) on failure

        Exceptions raised by on_complete propagate to the caller.
        """
        self._invoke(data, self.timeout, on_complete)

    async def call_async(self, data: Any = None) -> CallableResult:
        """
        Execute this trigger and await the result.

        The client call runs on the loop's default executor; only the
        awaiting task is suspended.

        Args:
            data: Parameters to pass to the trigger

        Returns:
            CallableResult with the decoded response

        Raises:
            Exception: Whatever the client raised, unchanged
        """
        loop = asyncio.get_running_loop()
        future: asyncio.Future[CallableResult] = loop.create_future()
        timeout = self.timeout

        def resolve(result: Optional[CallableResult], error: Optional[BaseException]) -> None:
            # Awaiting task was cancelled; the late outcome has nowhere to go.
            if future.done():
                return
            if error is not None:
                future.set_exception(error)
            else:
                future.set_result(result)

        def on_complete(result: Optional[CallableResult], error: Optional[BaseException]) -> None:
            loop.call_soon_threadsafe(resolve, result, error)

        def forward_escape(work: asyncio.Future) -> None:
            # BaseExceptions from the client (and errors raised while
            # scheduling resolve) bypass on_complete and land here.
            if future.done() or work.cancelled():
                return
            error = work.exception()
            if error is not None:
                future.set_exception(error)

        work = loop.run_in_executor(None, self._invoke, data, timeout, on_complete)
        work.add_done_callback(forward_escape)
        return await future

    def _invoke(self, data: Any, timeout: float, on_complete: CompletionCallback) -> None:
        extra = {"trigger": self._name, "timeout": timeout}
        logger.debug("Calling trigger %s (timeout=%ss)", self._name, timeout, extra=extra)
        try:
            value = self._client.invoke(self._name, data, timeout)
        except Exception as e:
            logger.debug("Trigger %s failed: %s", self._name, type(e).__name__, extra=extra)
            on_complete(None, e)
            return
        on_complete(CallableResult(data=value), None)

    def __repr__(self) -> str:
        return f"CallableReference(name={self._name!r}, timeout={self.timeout!r})"
