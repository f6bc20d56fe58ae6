"""Tracer client: JSON-over-HTTP access to a tracer server."""

from .client import ITracerClient, TracerClient
from .config import (
    TRACER_SERVER_KEY,
    EnvConfig,
    IConfigProvider,
    JsonFileConfig,
    build_base_url,
)
from .errors import (
    ConfigError,
    DecodeError,
    EncodeError,
    TracerClientError,
    TransportError,
)
from .models import Label, Request, Tracer, TracerEvent
from .transport import JSON_CONTENT_TYPE, HttpTransport, ITransport

__all__ = [
    # Client
    "ITracerClient",
    "TracerClient",
    # Models
    "Tracer",
    "TracerEvent",
    "Request",
    "Label",
    # Configuration
    "IConfigProvider",
    "EnvConfig",
    "JsonFileConfig",
    "TRACER_SERVER_KEY",
    "build_base_url",
    # Transport
    "ITransport",
    "HttpTransport",
    "JSON_CONTENT_TYPE",
    # Errors
    "TracerClientError",
    "ConfigError",
    "EncodeError",
    "TransportError",
    "DecodeError",
]
