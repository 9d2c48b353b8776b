"""
Client loader - resolve a functions client from an import path.

The transport is external, so configuration names it by import path:

    client: "mycompany.functions_transport:make_client"
    client_options:
      region: europe-west1

The attribute may be a ready client instance or a factory. Factories are
called with client_options as keyword arguments.
"""

import importlib
import logging
from typing import Any

from httpscallable.clients.base import FunctionsClient
from httpscallable.errors import ConfigError

logger = logging.getLogger(__name__)


def load_client(path: str, **options: Any) -> FunctionsClient:
    """
    Import and build a functions client.

    Args:
        path: "package.module:attribute"
        **options: Keyword arguments passed to the factory

    Returns:
        An object implementing FunctionsClient

    Raises:
        ConfigError: If the path is malformed, the import fails, the
            attribute is missing, or the result is not a client
    """
    module_name, sep, attr = path.partition(":")
    if not sep or not module_name or not attr:
        raise ConfigError(f"Client path must look like 'module:attribute', got '{path}'")

    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        raise ConfigError(f"Cannot import client module '{module_name}': {e}") from e

    target = module
    for part in attr.split("."):
        try:
            target = getattr(target, part)
        except AttributeError as e:
            raise ConfigError(f"'{module_name}' has no attribute '{attr}'") from e

    if isinstance(target, FunctionsClient) and not isinstance(target, type):
        if options:
            raise ConfigError(f"'{path}' is a client instance; client_options are not accepted")
        client = target
    elif callable(target):
        client = target(**options)
    else:
        raise ConfigError(f"'{path}' is neither a client nor a client factory")

    if not isinstance(client, FunctionsClient):
        raise ConfigError(
            f"'{path}' produced {type(client).__name__}, which has no invoke(name, data, timeout)"
        )

    logger.debug("Loaded functions client %s from %s", type(client).__name__, path)
    return client
