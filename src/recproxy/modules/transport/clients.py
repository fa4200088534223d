"""Factories for the shared proxy transport and the clients built on it."""

from typing import Any

import httpx

from recproxy.modules.session.models import ProxyMode, ProxySession
from recproxy.modules.transport.interceptor import InterceptingTransport


def create_proxy_transport(verify: bool = False, **kwargs: Any) -> httpx.HTTPTransport:
    """Create the connection pool shared by lifecycle calls and routed traffic.

    Certificate verification is off by default because the proxy presents a
    local development certificate. The proxy still makes real HTTPS calls
    upstream, so certificate problems with the real service surface there.
    """
    return httpx.HTTPTransport(verify=verify, **kwargs)


def create_proxy_client(transport: httpx.BaseTransport, timeout: float = 30.0) -> httpx.Client:
    """Client used by ``SessionController`` for start/stop calls."""
    return httpx.Client(transport=transport, timeout=timeout)


def build_client(
    session: ProxySession | None,
    transport: httpx.BaseTransport | None = None,
    **client_kwargs: Any,
) -> httpx.Client:
    """Return an application client, routed through the proxy when recording.

    In live mode, or without a session, the client talks to the real service
    directly with default certificate verification.
    """
    if session is None or session.mode is ProxyMode.LIVE:
        return httpx.Client(**client_kwargs)

    if transport is None:
        interceptor = InterceptingTransport(session, create_proxy_transport(), owns_transport=True)
    else:
        interceptor = InterceptingTransport(session, transport)
    return httpx.Client(transport=interceptor, **client_kwargs)
