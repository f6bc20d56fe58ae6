"""Configuration sources and path helpers."""

import json
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Protocol, Union

import httpx
from dotenv import load_dotenv

from .errors import ConfigError

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
LOGS_DIR = PROJECT_ROOT / "04_logs"
DEFAULT_LOG_PATH = LOGS_DIR / "app.log"
DEFAULT_CONFIG_PATH = PROJECT_ROOT / "tracer.json"

TRACER_SERVER_KEY = "tracer-server"


PathLike = Union[str, Path]


class IConfigProvider(Protocol):
    """Key/value configuration source, read on every call."""

    def read_config(self, key: str) -> Any:
        """Return the value stored under key. Raises ConfigError if absent."""
        ...


def env_var_name(key: str) -> str:
    """Map a config key to its environment variable ("tracer-server" -> "TRACER_SERVER")."""
    return key.replace("-", "_").upper()


class EnvConfig:
    """Configuration backed by environment variables and an optional .env file."""

    def __init__(
        self,
        dotenv_path: PathLike | None = None,
        overrides: Mapping[str, Any] | None = None,
    ):
        if dotenv_path is not None:
            load_dotenv(dotenv_path)
        self._overrides = dict(overrides or {})

    def read_config(self, key: str) -> Any:
        if key in self._overrides:
            return self._overrides[key]

        value = os.getenv(env_var_name(key))
        if value is None:
            raise ConfigError(f"configuration key {key!r} is not set")
        return value


class JsonFileConfig:
    """Configuration stored as a JSON object on disk.

    The file is re-read on every lookup so edits take effect without a restart.
    """

    def __init__(self, path: PathLike = DEFAULT_CONFIG_PATH):
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def read_config(self, key: str) -> Any:
        try:
            with self._path.open(encoding="utf-8") as f:
                data = json.load(f)
        except OSError as e:
            raise ConfigError(f"cannot read configuration file {self._path}: {e}") from e
        except json.JSONDecodeError as e:
            raise ConfigError(f"invalid configuration file {self._path}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigError(f"configuration file {self._path} is not a JSON object")
        if key not in data:
            raise ConfigError(f"configuration key {key!r} not found in {self._path}")
        return data[key]


def build_base_url(address: Any) -> str:
    """Turn a configured server address into a base URL.

    A bare "host:port" gets an http:// prefix; an address that already has a
    scheme is kept as is. Addresses httpx cannot parse (a non-numeric port,
    a missing host) raise ConfigError.
    """
    if not isinstance(address, str) or not address.strip():
        raise ConfigError(f"invalid tracer server address: {address!r}")

    address = address.strip().rstrip("/")
    if "://" not in address:
        address = f"http://{address}"

    try:
        url = httpx.URL(address)
    except httpx.InvalidURL as e:
        raise ConfigError(f"invalid tracer server address {address!r}: {e}") from e
    if not url.host:
        raise ConfigError(f"invalid tracer server address {address!r}: no host")
    return address
