"""
Functions - factory for callable references.

One Functions object owns the shared functions client; every reference it
creates borrows that client.
"""

import logging
from typing import TYPE_CHECKING

from httpscallable.callable.reference import DEFAULT_TIMEOUT, CallableReference
from httpscallable.clients.base import FunctionsClient
from httpscallable.clients.loader import load_client
from httpscallable.errors import ConfigError

if TYPE_CHECKING:
    from httpscallable.config import HttpsCallableConfig

logger = logging.getLogger(__name__)


class Functions:
    """Entry point for calling Cloud Functions triggers through a functions client."""

    def __init__(self, client: FunctionsClient, default_timeout: float = DEFAULT_TIMEOUT):
        self._client = client
        self.default_timeout = default_timeout

    @property
    def client(self) -> FunctionsClient:
        """The shared functions client."""
        return self._client

    def https_callable(self, name: str, timeout: float | None = None) -> CallableReference:
        """
        Create a reference to a callable HTTPS trigger.

        Args:
            name: Trigger name
            timeout: Per-reference timeout in seconds. Defaults to
                default_timeout.

        Returns:
            CallableReference bound to this factory's client
        """
        if not name:
            raise ValueError("Trigger name must be non-empty")
        return CallableReference(
            self._client,
            name,
            timeout=self.default_timeout if timeout is None else timeout,
        )

    @classmethod
    def from_config(cls, config: "HttpsCallableConfig") -> "Functions":
        """
        Build Functions from configuration.

        Raises:
            ConfigError: If no client is configured or it cannot be loaded
        """
        if not config.client:
            raise ConfigError("No functions client configured (set 'client' in config.yaml)")
        client = load_client(config.client, **config.client_options)
        logger.info("Using functions client %s", config.client)
        return cls(client, default_timeout=config.default_timeout)

    def __repr__(self) -> str:
        return f"Functions(client={type(self._client).__name__}, default_timeout={self.default_timeout!r})"
