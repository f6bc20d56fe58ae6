"""FastAPI application setup for the reference tracer server."""

from fastapi import FastAPI

from .routes import create_labels_router, create_tracers_router
from .store import ITracerStore, TracerStore


def create_fastapi_app(store: ITracerStore | None = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    if store is None:
        store = TracerStore()

    fastapi_app = FastAPI(
        title="Tracer API",
        description="In-memory tracer server for local development",
        version="0.1.0",
    )
    fastapi_app.state.store = store

    fastapi_app.include_router(create_tracers_router(store))
    fastapi_app.include_router(create_labels_router(store))

    return fastapi_app
