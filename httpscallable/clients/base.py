"""
Functions client interface.

This module defines the protocol that any functions client must implement,
allowing CallableReference to be decoupled from the actual transport.

A real client attaches identity/auth tokens, performs the HTTPS request,
enforces the timeout, decodes the response body and maps failures to
FunctionsError. None of that lives in this package.

Implementations shipped here:
- NoOpFunctionsClient: For testing and dry-run mode
- LocalFunctionsClient: In-proc handler registry (httpscallable.clients.local)
"""

from typing import Any, Protocol, runtime_checkable

from httpscallable.values import CallableValue


@runtime_checkable
class FunctionsClient(Protocol):
    """
    Protocol for invoking callable triggers by name.

    Implementations must be safe for concurrent use by multiple
    CallableReference objects.
    """

    def invoke(self, name: str, data: Any, timeout: float) -> CallableValue:
        """
        Invoke the named trigger.

        Args:
            name: Endpoint name of the trigger
            data: Payload to send (a CallableValue)
            timeout: Seconds the request may take before failing with
                FunctionsError(DEADLINE_EXCEEDED)

        Returns:
            Decoded response value

        Raises:
            Exception: Any failure. FunctionsError is preferred.
        """
        ...


class NoOpFunctionsClient:
    """
    No-op implementation of FunctionsClient for testing.

    Returns None without performing any request and records each call.
    """

    def __init__(self):
        self.calls: list[tuple[str, Any, float]] = []

    def invoke(self, name: str, data: Any, timeout: float) -> CallableValue:
        """Record the call and return None."""
        self.calls.append((name, data, timeout))
        return None
