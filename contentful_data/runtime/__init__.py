"""Runtime layer: HTTP transport and endpoint execution."""

from .rest import HTTPClient, ResponseAdapter, RestEndpointSpec, RestRunner, RESTTransport

__all__ = [
    "HTTPClient",
    "RESTTransport",
    "RestRunner",
    "RestEndpointSpec",
    "ResponseAdapter",
]
