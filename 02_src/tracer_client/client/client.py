"""Client for the tracer server's JSON-over-HTTP API."""

from collections.abc import Mapping
from typing import Protocol, TypeVar

import httpx
from pydantic import BaseModel, TypeAdapter, ValidationError
from pydantic_core import PydanticSerializationError

from ..config import TRACER_SERVER_KEY, IConfigProvider, build_base_url
from ..errors import DecodeError, EncodeError, TracerClientError, TransportError
from ..logging_config import get_logger
from ..models import Label, Request, Tracer, TracerEvent
from ..transport import JSON_CONTENT_TYPE, HttpTransport, ITransport

logger = get_logger(__name__)

T = TypeVar("T")

_TRACER_LIST = TypeAdapter(list[Tracer])
_LABEL_LIST = TypeAdapter(list[Label])
_LABEL = TypeAdapter(Label)


class ITracerClient(Protocol):
    """Remote store for tracers, tracer events and labels."""

    async def add_tracers(self, request: Request) -> None:
        """Submit a request bundle and the tracers found in it."""
        ...

    async def get_tracers(self) -> list[Tracer]:
        """Fetch every tracer known to the server."""
        ...

    async def add_tracer_events(
        self, tracer_events: Mapping[int, TracerEvent]
    ) -> list[TracerClientError]:
        """Submit one event per tracer id, collecting per-item errors."""
        ...

    async def add_tracer_event(self, tracer_event: TracerEvent, tracer_id: int) -> None:
        """Submit a single event for a tracer."""
        ...

    async def add_label(self, label: Label) -> None:
        """Submit a label."""
        ...

    async def get_labels(self) -> list[Label]:
        """Fetch every label known to the server."""
        ...

    async def get_label(self, label_id: int) -> Label:
        """Fetch a single label."""
        ...


def encode(value: BaseModel) -> bytes:
    """Serialize a wire model to JSON bytes."""
    try:
        return value.model_dump_json().encode("utf-8")
    except (PydanticSerializationError, TypeError, ValueError) as e:
        raise EncodeError(f"cannot encode {type(value).__name__}: {e}") from e


def decode(adapter: TypeAdapter[T], body: bytes) -> T:
    """Parse a JSON response body into the adapter's type."""
    try:
        return adapter.validate_json(body)
    except ValidationError as e:
        raise DecodeError(f"cannot decode response body: {e}") from e


class TracerClient:
    """Stateless client: every call reads the server address, sends one request, returns.

    Calls run their stages in order (encode, resolve address, send, read body,
    decode) and stop at the first failing stage. Nothing is retried.
    """

    def __init__(self, config: IConfigProvider, transport: ITransport | None = None):
        self._config = config
        self._transport = transport if transport is not None else HttpTransport()

    def _base_url(self) -> str:
        return build_base_url(self._config.read_config(TRACER_SERVER_KEY))

    async def _send(self, request: httpx.Request) -> bytes:
        """Send request and return the response body. The response is always closed."""
        context = {"method": request.method, "url": str(request.url)}
        logger.debug(
            "Sending %s request to %s", request.method, request.url, extra={"context": context}
        )

        try:
            response = await self._transport.send(request)
        except httpx.HTTPError as e:
            raise TransportError(f"{request.method} {request.url} failed: {e}") from e

        try:
            body = await response.aread()
        except httpx.HTTPError as e:
            raise TransportError(f"reading response from {request.url} failed: {e}") from e
        finally:
            await response.aclose()

        if response.is_error:
            raise TransportError(
                f"{request.method} {request.url} returned HTTP {response.status_code}",
                status_code=response.status_code,
            )

        logger.debug(
            "Read the following from the response: %s", body, extra={"context": context}
        )
        return body

    async def _post(self, path: str, body: bytes) -> None:
        url = f"{self._base_url()}{path}"
        request = httpx.Request(
            "POST", url, content=body, headers={"Content-Type": JSON_CONTENT_TYPE}
        )
        await self._send(request)

    async def _get(self, path: str) -> bytes:
        url = f"{self._base_url()}{path}"
        return await self._send(httpx.Request("GET", url))

    async def add_tracers(self, request: Request) -> None:
        """POST a request bundle to /tracers. The response body is discarded."""
        logger.debug("Adding the following tracers: %s", request.tracers)
        try:
            body = encode(request)
            logger.debug("Encoded the tracers into the following JSON: %s", body)
            await self._post("/tracers", body)
        except TracerClientError as e:
            logger.warning("Adding tracers failed: %s", e)
            raise

    async def get_tracers(self) -> list[Tracer]:
        """GET /tracers.

        Raises:
            TracerClientError: On any failing stage; ``error.result`` is ``[]``.
        """
        logger.debug("Getting all the tracers")
        try:
            return decode(_TRACER_LIST, await self._get("/tracers"))
        except TracerClientError as e:
            e.result = []
            logger.warning("Getting tracers failed: %s", e)
            raise

    async def add_tracer_events(
        self, tracer_events: Mapping[int, TracerEvent]
    ) -> list[TracerClientError]:
        """Submit every event to the tracer it is keyed by.

        Each entry is attempted exactly once, in ascending tracer id order,
        whether or not earlier entries failed. Returns the errors in the same
        order; each carries the ``tracer_id`` it belongs to. An empty list
        means every event was accepted.
        """
        logger.debug("Adding the following tracer events: %s", dict(tracer_events))
        errors: list[TracerClientError] = []

        for tracer_id in sorted(tracer_events):
            try:
                await self.add_tracer_event(tracer_events[tracer_id], tracer_id)
            except TracerClientError as e:
                errors.append(e)

        return errors

    async def add_tracer_event(self, tracer_event: TracerEvent, tracer_id: int) -> None:
        """POST an event to /tracers/{tracer_id}/events.

        The event is sent with its tracer_id set to ``tracer_id``; the caller's
        instance is left untouched.
        """
        logger.debug(
            "Adding the following tracer event: %s, tracer ID: %d", tracer_event, tracer_id
        )
        event = tracer_event.model_copy(update={"tracer_id": tracer_id})
        try:
            await self._post(f"/tracers/{tracer_id}/events", encode(event))
        except TracerClientError as e:
            e.tracer_id = tracer_id
            logger.warning("Adding tracer event to tracer %d failed: %s", tracer_id, e)
            raise

    async def add_label(self, label: Label) -> None:
        """POST a label to /labels."""
        logger.debug("Adding the following label: %s", label)
        try:
            await self._post("/labels", encode(label))
        except TracerClientError as e:
            logger.warning("Adding label failed: %s", e)
            raise

    async def get_labels(self) -> list[Label]:
        """GET /labels.

        Raises:
            TracerClientError: On any failing stage; ``error.result`` is ``[]``.
        """
        logger.debug("Getting all the labels")
        try:
            return decode(_LABEL_LIST, await self._get("/labels"))
        except TracerClientError as e:
            e.result = []
            logger.warning("Getting labels failed: %s", e)
            raise

    async def get_label(self, label_id: int) -> Label:
        """Fetch a label by id.

        Note: the tracer server contract observed so far serves this lookup
        from /tracers/{id}, not /labels/{id}. The path is kept as observed
        until the service contract says otherwise; a tracer-shaped body
        decodes into a Label through the fields they share.

        Raises:
            TracerClientError: On any failing stage; ``error.result`` is ``Label()``.
        """
        logger.debug("Getting the label %d", label_id)
        try:
            return decode(_LABEL, await self._get(f"/tracers/{label_id}"))
        except TracerClientError as e:
            e.result = Label()
            logger.warning("Getting label %d failed: %s", label_id, e)
            raise
