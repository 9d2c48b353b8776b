"""
Callable reference module for httpscallable.

This module provides the reference layer that:
1. Forwards invocations of a named trigger to the shared functions client
2. Wraps successful responses in CallableResult
3. Passes client errors through unchanged (callback or awaited exception)
"""

from httpscallable.callable.result import CallableResult
from httpscallable.callable.reference import (
    DEFAULT_TIMEOUT,
    CallableReference,
    CompletionCallback,
)

__all__ = [
    "CallableResult",
    "CallableReference",
    "CompletionCallback",
    "DEFAULT_TIMEOUT",
]
