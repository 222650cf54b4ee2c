"""Transport adapters for the backend REST and SSE API."""

from unitdeck.api.client import ApiClient, build_http_client
from unitdeck.api.errors import (
    ApiError,
    ApiPayloadError,
    ApiResponseError,
    ApiTimeoutError,
    ApiTransportError,
    EntityNotFoundError,
    StreamError,
    StreamUnsupportedError,
)
from unitdeck.api.sse import EventStreamClient, ServerSentEvent, iter_sse_events

__all__ = [
    "ApiClient",
    "ApiError",
    "ApiPayloadError",
    "ApiResponseError",
    "ApiTimeoutError",
    "ApiTransportError",
    "EntityNotFoundError",
    "EventStreamClient",
    "ServerSentEvent",
    "StreamError",
    "StreamUnsupportedError",
    "build_http_client",
    "iter_sse_events",
]
