"""httpx transport that routes application traffic through the proxy."""

import logging

import httpx

from recproxy.exceptions import SessionStateError
from recproxy.modules.session.models import ProxySession
from recproxy.modules.transport.interceptor_helpers import (
    capture_context,
    restore_request,
    restore_response,
    rewrite_to_proxy,
)

logger = logging.getLogger(__name__)


class InterceptingTransport(httpx.BaseTransport):
    """Rewrites every request to target the proxy, then restores it.

    After the call, ``response.request.url`` names the real service again so
    follow-up URLs derived from it (long-running operation polling) keep
    pointing at the real endpoint.
    """

    def __init__(
        self,
        session: ProxySession,
        transport: httpx.BaseTransport,
        owns_transport: bool = False,
    ):
        self.session = session
        self.transport = transport
        self.owns_transport = owns_transport

    def handle_request(self, request: httpx.Request) -> httpx.Response:
        session = self.session
        if not session.started:
            raise SessionStateError(
                "proxy session is not active; start it before sending requests"
            )

        context = capture_context(request)
        rewrite_to_proxy(request, session, context)
        logger.debug(
            "Routing %s %s via %s (%s session %s)",
            request.method,
            context.url,
            session.netloc,
            session.mode.value,
            session.recording_id,
        )

        try:
            response = self.transport.handle_request(request)
        finally:
            restore_request(request, context)

        restore_response(response, request, context)
        return response

    def close(self) -> None:
        # A shared inner transport stays open for the session controller.
        if self.owns_transport:
            self.transport.close()
