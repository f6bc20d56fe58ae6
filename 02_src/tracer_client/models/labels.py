"""Label wire model."""

from pydantic import BaseModel


class Label(BaseModel):
    """A named, id-addressable annotation. Label() is the empty label."""

    id: int = 0
    name: str = ""
    tracer_string: str = ""
    tracer_payload: str = ""
