"""API routes."""

from .labels import create_labels_router
from .tracers import create_tracers_router

__all__ = ["create_labels_router", "create_tracers_router"]
