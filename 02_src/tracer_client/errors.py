"""Error taxonomy for the tracer client."""

from typing import Any


class TracerClientError(Exception):
    """Base error for every stage failure of a client call.

    Attributes:
        result: Value the failed call yields (an empty list for list fetches,
            an empty Label for a label lookup, None for submissions).
        tracer_id: Tracer the failed submission targeted, if any.
    """

    def __init__(
        self,
        message: str,
        result: Any = None,
        tracer_id: int | None = None,
    ):
        super().__init__(message)
        self.result = result
        self.tracer_id = tracer_id


class ConfigError(TracerClientError):
    """The tracer server address could not be resolved."""


class EncodeError(TracerClientError):
    """A value could not be serialized to JSON."""


class TransportError(TracerClientError):
    """The request failed at the connection or HTTP level.

    ``status_code`` is set when the server answered with a non-2xx status and
    is None for connection and body-read failures.
    """

    def __init__(
        self,
        message: str,
        result: Any = None,
        tracer_id: int | None = None,
        status_code: int | None = None,
    ):
        super().__init__(message, result=result, tracer_id=tracer_id)
        self.status_code = status_code


class DecodeError(TracerClientError):
    """The response body could not be decoded."""
