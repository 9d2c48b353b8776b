"""
Functions client boundary for httpscallable.

This module provides:
1. The FunctionsClient protocol consumed by CallableReference
2. In-proc stand-ins (no-op and local handler registry)
3. Loading a client from a "module:attribute" import path
"""

from httpscallable.clients.base import FunctionsClient, NoOpFunctionsClient
from httpscallable.clients.local import LocalFunctionsClient
from httpscallable.clients.loader import load_client

__all__ = [
    "FunctionsClient",
    "NoOpFunctionsClient",
    "LocalFunctionsClient",
    "load_client",
]
