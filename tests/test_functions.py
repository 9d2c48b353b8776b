"""Tests for the Functions factory.

Tests cover:
- https_callable creates references sharing one client
- Default and per-reference timeouts
- Building from configuration
"""

import pytest
from httpscallable import Functions
from httpscallable.callable import CallableReference
from httpscallable.clients import NoOpFunctionsClient
from httpscallable.config import HttpsCallableConfig
from httpscallable.errors import ConfigError


class TestHttpsCallable:
    """Tests for reference creation."""

    def test_reference_shares_client(self, scripted_client):
        client = scripted_client(value="ok")
        functions = Functions(client)

        first = functions.https_callable("a")
        second = functions.https_callable("b")
        first.call(on_complete=lambda r, e: None)
        second.call(on_complete=lambda r, e: None)

        assert isinstance(first, CallableReference)
        assert [c[0] for c in client.calls] == ["a", "b"]
        assert functions.client is client

    def test_default_timeout(self, scripted_client):
        ref = Functions(scripted_client()).https_callable("a")
        assert ref.timeout == 70

    def test_factory_default_timeout(self, scripted_client):
        ref = Functions(scripted_client(), default_timeout=15).https_callable("a")
        assert ref.timeout == 15

    def test_per_reference_timeout(self, scripted_client):
        ref = Functions(scripted_client(), default_timeout=15).https_callable("a", timeout=2)
        assert ref.timeout == 2

    def test_empty_name_rejected(self, scripted_client):
        with pytest.raises(ValueError, match="non-empty"):
            Functions(scripted_client()).https_callable("")


class TestFromConfig:
    """Tests for Functions.from_config."""

    def test_builds_configured_client(self):
        config = HttpsCallableConfig(
            client="httpscallable.clients.base:NoOpFunctionsClient",
            default_timeout=20,
        )
        functions = Functions.from_config(config)
        assert isinstance(functions.client, NoOpFunctionsClient)
        assert functions.default_timeout == 20

    def test_passes_client_options(self):
        config = HttpsCallableConfig(
            client="httpscallable.clients.local:LocalFunctionsClient",
            client_options={"max_workers": 1},
        )
        functions = Functions.from_config(config)
        functions.client.close()

    def test_missing_client_raises(self):
        with pytest.raises(ConfigError, match="No functions client configured"):
            Functions.from_config(HttpsCallableConfig())
