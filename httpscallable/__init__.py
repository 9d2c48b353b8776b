"""
httpscallable - Client-side references to Cloud Functions callable triggers

Binds a trigger name and timeout to a pluggable functions client and
exposes callback and awaitable call forms.
"""

__version__ = "0.1.0"


__all__ = [
    "CallableReference",
    "CallableResult",
    "ConfigError",
    "Functions",
    "FunctionsClient",
    "FunctionsError",
    "FunctionsErrorCode",
    "HttpsCallableConfig",
    "HttpsCallableError",
    "load_config",
]

from .callable import CallableReference, CallableResult
from .clients import FunctionsClient
from .config import HttpsCallableConfig, load_config
from .errors import ConfigError, FunctionsError, FunctionsErrorCode, HttpsCallableError
from .functions import Functions
