"""
CallableResult - Successful outcome of a callable invocation.

Holds whatever the functions client decoded from the response body. No
validation and no transformation happen here; errors never produce a
CallableResult (they are raised or passed through the callback error slot).
"""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class CallableResult:
    """
    Result of calling a CallableReference.

    Attributes:
        data: Decoded value returned by the trigger. A trigger that returned
            an array yields a list, a JSON object yields a dict, and so on.
    """
    data: Any = None
