"""
Configuration management for httpscallable.

Loads config.yaml from the httpscallable home directory:
- $HTTPSCALLABLE_HOME if set
- ~/.config/httpscallable otherwise

Example config.yaml:

    client: "mycompany.functions_transport:make_client"
    client_options:
      region: us-central1
    default_timeout: 70
    log_level: INFO
    log_format: pretty
    env_file: ~/.config/httpscallable/.env

HTTPSCALLABLE_TIMEOUT in the environment overrides default_timeout.
"""

import os
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from dotenv import load_dotenv

from httpscallable.callable.reference import DEFAULT_TIMEOUT
from httpscallable.errors import ConfigError

LOG_FORMATS = ("pretty", "structured")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def get_httpscallable_home() -> Path:
    """Directory holding config.yaml and .env."""
    home = os.environ.get("HTTPSCALLABLE_HOME")
    if home:
        return Path(home)
    return Path("~/.config/httpscallable").expanduser()


@dataclass
class HttpsCallableConfig:
    """Effective httpscallable configuration."""
    client: Optional[str] = None
    client_options: Dict[str, Any] = field(default_factory=dict)
    default_timeout: float = DEFAULT_TIMEOUT
    log_level: str = "INFO"
    log_format: str = "pretty"
    log_file: Optional[str] = None
    env_file: Optional[str] = None

    def __post_init__(self):
        """Validate and normalize values."""
        if self.client_options is None:
            self.client_options = {}
        if not isinstance(self.client_options, dict):
            raise ConfigError("client_options must be a mapping")

        try:
            self.default_timeout = float(self.default_timeout)
        except (TypeError, ValueError):
            raise ConfigError(f"default_timeout must be a number, got {self.default_timeout!r}")
        if self.default_timeout <= 0:
            raise ConfigError("default_timeout must be positive")

        self.log_level = str(self.log_level).upper()
        if self.log_level not in LOG_LEVELS:
            raise ConfigError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        if self.log_format not in LOG_FORMATS:
            raise ConfigError(f"log_format must be one of {', '.join(LOG_FORMATS)}")

    def get_log_file_path(self) -> Optional[Path]:
        """Expanded log file path, or None when file logging is off."""
        if not self.log_file:
            return None
        return Path(self.log_file).expanduser()

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def load_config(config_path: Optional[Path] = None) -> HttpsCallableConfig:
    """
    Load configuration from YAML.

    Args:
        config_path: Path to config file. Defaults to <home>/config.yaml

    Returns:
        HttpsCallableConfig instance

    Raises:
        FileNotFoundError: If the config file does not exist
        ConfigError: If the config is invalid
    """
    if config_path is None:
        config_path = get_httpscallable_home() / "config.yaml"

    if not config_path.exists():
        raise FileNotFoundError(
            f"httpscallable config.yaml not found at {config_path}. "
            "Run 'httpscallable init' to create one."
        )

    try:
        with open(config_path, "r") as f:
            raw = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML syntax: {e}")

    if not isinstance(raw, dict):
        raise ConfigError("Configuration file must contain a mapping")

    known = {f.name for f in fields(HttpsCallableConfig)}
    unknown = sorted(set(raw) - known)
    if unknown:
        raise ConfigError(f"Unknown configuration keys: {', '.join(unknown)}")

    env_file = raw.get("env_file")
    if env_file:
        env_path = Path(env_file).expanduser()
        if env_path.exists():
            load_dotenv(env_path)

    return HttpsCallableConfig(**_apply_env_overrides(raw))


def default_config() -> HttpsCallableConfig:
    """Configuration used when no config.yaml exists (env overrides still apply)."""
    return HttpsCallableConfig(**_apply_env_overrides({}))


def _apply_env_overrides(raw: Dict[str, Any]) -> Dict[str, Any]:
    timeout_override = os.environ.get("HTTPSCALLABLE_TIMEOUT")
    if timeout_override:
        raw["default_timeout"] = timeout_override
    return raw
