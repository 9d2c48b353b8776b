import threading

import pytest

from httpscallable.clients import LocalFunctionsClient
from httpscallable.errors import FunctionsError, FunctionsErrorCode


class ScriptedClient:
    """FunctionsClient that returns a fixed value or raises a fixed error."""

    def __init__(self, value=None, error=None):
        self.value = value
        self.error = error
        self.calls = []
        self.threads = []

    def invoke(self, name, data, timeout):
        self.calls.append((name, data, timeout))
        self.threads.append(threading.get_ident())
        if self.error is not None:
            raise self.error
        return self.value


@pytest.fixture(autouse=True)
def isolated_home(monkeypatch, tmp_path):
    home = tmp_path / "httpscallable_home"
    monkeypatch.setenv("HTTPSCALLABLE_HOME", str(home))
    monkeypatch.delenv("HTTPSCALLABLE_TIMEOUT", raising=False)
    return home


@pytest.fixture
def scripted_client():
    return ScriptedClient


@pytest.fixture
def local_client():
    def shout(data):
        return {"message": data["text"].upper()}

    def deny(data):
        raise FunctionsError(FunctionsErrorCode.UNAUTHENTICATED, "unauthenticated")

    client = LocalFunctionsClient({"shout": shout, "deny": deny})
    yield client
    client.close()
