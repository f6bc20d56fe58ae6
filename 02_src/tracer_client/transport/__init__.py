"""Transport module."""

from .http_transport import JSON_CONTENT_TYPE, HttpTransport, ITransport

__all__ = ["HttpTransport", "ITransport", "JSON_CONTENT_TYPE"]
