"""Tracer-related wire models."""

from pydantic import BaseModel, Field


class Tracer(BaseModel):
    """A server-side instrumentation point: a unique string planted in a request."""

    id: int = 0
    tracer_string: str = ""
    tracer_payload: str = ""
    tracer_location_index: int = 0
    tracer_location_type: int = 0
    overall_severity: int = 0
    has_tracer_events: bool = False


class Request(BaseModel):
    """A captured HTTP request together with the tracers found in it."""

    raw_request: str = ""
    request_url: str = ""
    request_method: str = ""
    tracers: list[Tracer] = Field(default_factory=list)


class TracerEvent(BaseModel):
    """An occurrence of a tracer observed somewhere, e.g. in the DOM."""

    id: int = 0
    tracer_id: int = 0  # foreign key, assigned by the client before sending
    raw_event: str = ""
    raw_event_index: int = 0
    event_url: str = ""
    event_type: str = ""
