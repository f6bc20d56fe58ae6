"""HTTP transport used by the tracer client."""

from typing import Protocol

import httpx

JSON_CONTENT_TYPE = "application/json; charset=UTF-8"


class ITransport(Protocol):
    """Send a request, receive a response.

    httpx.AsyncClient satisfies this protocol, so a client mounted on
    httpx.MockTransport or httpx.ASGITransport can be passed in tests.
    """

    async def send(self, request: httpx.Request) -> httpx.Response:
        """Send request and return the response."""
        ...


class HttpTransport:
    """Default transport: one short-lived httpx.AsyncClient per request."""

    async def send(self, request: httpx.Request) -> httpx.Response:
        """Send request over the network using library defaults."""
        async with httpx.AsyncClient() as client:
            return await client.send(request)
