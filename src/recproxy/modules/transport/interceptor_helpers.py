"""Helpers for rewriting requests onto the proxy and back."""

from dataclasses import dataclass

import httpx

from recproxy.modules.session.models import ProxySession, RecordingHeader


@dataclass(frozen=True)
class RequestContext:
    """Original target of one intercepted request, captured before rewrite."""

    url: httpx.URL
    scheme: str
    netloc: str
    host_header: str | None = None

    @property
    def upstream_base_uri(self) -> str:
        return f"{self.scheme}://{self.netloc}"


def capture_context(request: httpx.Request) -> RequestContext:
    """Record where ``request`` was going before it is pointed at the proxy."""
    return RequestContext(
        url=request.url,
        scheme=request.url.scheme,
        netloc=request.url.netloc.decode("ascii"),
        host_header=request.headers.get("Host"),
    )


def rewrite_to_proxy(request: httpx.Request, session: ProxySession, context: RequestContext) -> None:
    """Point ``request`` at the proxy and tag it with the session headers."""
    request.url = request.url.copy_with(
        scheme=session.scheme,
        host=session.host,
        port=session.port,
    )
    request.headers["Host"] = session.netloc
    request.headers[RecordingHeader.UPSTREAM_BASE_URI.value] = context.upstream_base_uri
    request.headers[RecordingHeader.MODE.value] = session.mode.value
    request.headers[RecordingHeader.RECORDING_ID.value] = session.recording_id


def restore_request(request: httpx.Request, context: RequestContext) -> None:
    """Put the original scheme and host back on ``request``, keeping its path."""
    request.url = request.url.copy_with(
        scheme=context.scheme,
        host=context.url.host,
        port=context.url.port,
    )
    # A caller-supplied Host (virtual hosting) wins over the URL authority
    request.headers["Host"] = context.host_header or context.netloc


def restore_response(response: httpx.Response, request: httpx.Request, context: RequestContext) -> None:
    """Make the response's originating request name the real endpoint again.

    Inner transports usually return a response without a request attached;
    the client attaches ``request`` afterwards, which is restored above.
    """
    try:
        origin = response.request
    except RuntimeError:
        # No request attached yet
        return
    if origin is not request:
        restore_request(origin, context)
