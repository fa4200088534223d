"""pytest fixtures that run each test inside a proxy recording session.

Enable with ``pytest_plugins = ["recproxy.pytest_plugin"]`` in a conftest.
Requires the ``pytest`` extra (``pip install "recproxy[pytest]"``).
"""

from collections.abc import Generator

import httpx
import pytest

from recproxy.config import ProxySettings, get_proxy_settings
from recproxy.modules.session import ProxySession, SessionController, recording_session
from recproxy.modules.transport import build_client, create_proxy_client, create_proxy_transport


@pytest.fixture(scope="session")
def proxy_settings() -> ProxySettings:
    """Proxy settings resolved once per test run."""
    return get_proxy_settings()


@pytest.fixture(scope="session")
def proxy_transport() -> Generator[httpx.HTTPTransport, None, None]:
    """Connection pool shared by lifecycle calls and routed traffic."""
    transport = create_proxy_transport()
    yield transport
    transport.close()


@pytest.fixture(scope="session")
def proxy_controller(proxy_transport: httpx.HTTPTransport) -> SessionController:
    # Shares proxy_transport, which is closed by that fixture.
    return SessionController(create_proxy_client(proxy_transport))


@pytest.fixture
def proxy_session(
    request: pytest.FixtureRequest,
    proxy_settings: ProxySettings,
    proxy_controller: SessionController,
) -> Generator[ProxySession | None, None, None]:
    """Active session named after the current test, or None when not routed."""
    if not proxy_settings.routed:
        yield None
        return

    session = ProxySession.for_test(proxy_settings, request.node.name)
    with recording_session(proxy_controller, session):
        yield session


@pytest.fixture
def proxied_client(
    proxy_session: ProxySession | None,
    proxy_transport: httpx.HTTPTransport,
) -> Generator[httpx.Client, None, None]:
    """Application client routed through the proxy for the current test."""
    with build_client(proxy_session, proxy_transport) as client:
        yield client
