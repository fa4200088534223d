"""Test configuration and fixtures for recproxy."""

import tempfile
from collections.abc import Generator
from pathlib import Path

import httpx
import pytest

from recproxy.config import ENV_KEYS
from recproxy.modules.session import ProxyMode, ProxySession, SessionController


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for testing."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Path:
    """Keep the developer's environment and ~/.recproxy out of every test."""
    for key in ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setattr(Path, "home", lambda: home)
    return home


@pytest.fixture
def session(temp_dir: Path) -> ProxySession:
    """A record session against the default local proxy, not yet started."""
    return ProxySession(
        host="localhost",
        port=5001,
        mode=ProxyMode.RECORD,
        recording_path=temp_dir / "recordings" / "test_example.json",
    )


@pytest.fixture
def started_session(session: ProxySession) -> ProxySession:
    """Same session as if the proxy had returned ``x-recording-id: abc123``."""
    session.recording_id = "abc123"
    return session


@pytest.fixture
def proxy_client() -> Generator[httpx.Client, None, None]:
    """Client for lifecycle calls; traffic is mocked with respx."""
    with httpx.Client(verify=False) as client:
        yield client


@pytest.fixture
def controller(proxy_client: httpx.Client) -> SessionController:
    return SessionController(proxy_client)
