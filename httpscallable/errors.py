"""
Error classes for httpscallable.

Error handling contract:
- CallableResult is success-only
- Errors are exceptions, not values
- CallableReference never classifies: whatever the functions client raised
  reaches the caller unchanged (callback error slot or awaited exception)

FunctionsError is the typed failure that functions clients raise. The
bundled stand-in clients use it; real transports are expected to map their
HTTP and protocol failures onto the same codes.
"""

from enum import Enum
from typing import Any


class HttpsCallableError(Exception):
    """Base exception for httpscallable."""
    pass


class ConfigError(HttpsCallableError):
    """Configuration or client loading error."""
    pass


class FunctionsErrorCode(str, Enum):
    """
    Canonical status codes for callable invocations.

    Values are the lowercase, hyphenated forms used by the callable
    protocol (e.g. "unauthenticated", "deadline-exceeded").
    """
    OK = "ok"
    CANCELLED = "cancelled"
    UNKNOWN = "unknown"
    INVALID_ARGUMENT = "invalid-argument"
    DEADLINE_EXCEEDED = "deadline-exceeded"
    NOT_FOUND = "not-found"
    ALREADY_EXISTS = "already-exists"
    PERMISSION_DENIED = "permission-denied"
    RESOURCE_EXHAUSTED = "resource-exhausted"
    FAILED_PRECONDITION = "failed-precondition"
    ABORTED = "aborted"
    OUT_OF_RANGE = "out-of-range"
    UNIMPLEMENTED = "unimplemented"
    INTERNAL = "internal"
    UNAVAILABLE = "unavailable"
    DATA_LOSS = "data-loss"
    UNAUTHENTICATED = "unauthenticated"

    @classmethod
    def parse(cls, value: str) -> "FunctionsErrorCode":
        """
        Parse a status string into a code.

        Accepts both the protocol form ("DEADLINE_EXCEEDED") and the
        hyphenated form ("deadline-exceeded"). Unrecognised values map
        to UNKNOWN.
        """
        normalized = value.strip().lower().replace("_", "-")
        try:
            return cls(normalized)
        except ValueError:
            return cls.UNKNOWN


class FunctionsError(HttpsCallableError):
    """
    Invocation failed.

    Covers transport errors, decode errors and remote-reported failures.
    The reference layer does not inspect these; callers may branch on
    ``code``.

    Attributes:
        code: FunctionsErrorCode describing the failure
        message: Human-readable message
        details: Optional extra payload reported by the backend
    """

    def __init__(
        self,
        code: FunctionsErrorCode | str,
        message: str | None = None,
        details: Any = None,
    ):
        if not isinstance(code, FunctionsErrorCode):
            code = FunctionsErrorCode.parse(code)
        self.code = code
        self.message = message or code.value.upper().replace("-", "_")
        self.details = details
        super().__init__(self.message)

    def __repr__(self) -> str:
        return f"FunctionsError(code={self.code.value!r}, message={self.message!r})"
