"""Client module."""

from .client import ITracerClient, TracerClient

__all__ = ["ITracerClient", "TracerClient"]
