"""Reference tracer server."""

from .app import create_fastapi_app
from .store import ITracerStore, TracerStore

__all__ = ["create_fastapi_app", "ITracerStore", "TracerStore"]
