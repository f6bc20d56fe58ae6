"""Wire models exchanged with the tracer server."""

from .labels import Label
from .tracers import Request, Tracer, TracerEvent

__all__ = [
    # Tracers
    "Tracer",
    "TracerEvent",
    "Request",
    # Labels
    "Label",
]
