"""Transport module -- request interception and proxy client factories."""

from .clients import build_client, create_proxy_client, create_proxy_transport
from .interceptor import InterceptingTransport
from .interceptor_helpers import RequestContext, capture_context, restore_request, rewrite_to_proxy

__all__ = [
    "InterceptingTransport",
    "RequestContext",
    "build_client",
    "capture_context",
    "create_proxy_client",
    "create_proxy_transport",
    "restore_request",
    "rewrite_to_proxy",
]
