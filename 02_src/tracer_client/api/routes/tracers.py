"""Tracer API routes."""

from fastapi import APIRouter, HTTPException

from ...models import Request, Tracer, TracerEvent
from ..store import ITracerStore


def create_tracers_router(store: ITracerStore) -> APIRouter:
    """Create tracers router."""
    router = APIRouter(prefix="/tracers", tags=["tracers"])

    @router.post("", response_model=list[Tracer])
    async def add_tracers(request: Request) -> list[Tracer]:
        """Store the tracers found in a request."""
        return store.add_tracers(request)

    @router.get("", response_model=list[Tracer])
    async def get_tracers() -> list[Tracer]:
        """Get all tracers."""
        return store.get_tracers()

    @router.get("/{tracer_id}", response_model=Tracer)
    async def get_tracer(tracer_id: int) -> Tracer:
        """Get a tracer by ID."""
        tracer = store.get_tracer(tracer_id)
        if tracer is None:
            raise HTTPException(status_code=404, detail=f"Tracer {tracer_id} not found")
        return tracer

    @router.post("/{tracer_id}/events", response_model=TracerEvent)
    async def add_event(tracer_id: int, event: TracerEvent) -> TracerEvent:
        """Attach an event to a tracer."""
        stored = store.add_event(tracer_id, event)
        if stored is None:
            raise HTTPException(status_code=404, detail=f"Tracer {tracer_id} not found")
        return stored

    @router.get("/{tracer_id}/events", response_model=list[TracerEvent])
    async def get_events(tracer_id: int) -> list[TracerEvent]:
        """Get the events of a tracer."""
        events = store.get_events(tracer_id)
        if events is None:
            raise HTTPException(status_code=404, detail=f"Tracer {tracer_id} not found")
        return events

    return router
