"""Resolved proxy connection settings."""

from dataclasses import dataclass, field
from pathlib import Path

from recproxy.exceptions import ProxyConfigError
from recproxy.modules.session.models import SECURE_PORT, ProxyMode, resolve_scheme

from .getters import get_bool, get_config, get_int

ENV_KEYS = (
    "USE_PROXY",
    "PROXY_MODE",
    "PROXY_HOST",
    "PROXY_PORT",
    "PROXY_SCHEME",
    "PROXY_RECORDING_ROOT",
)

DEFAULT_HOST = "localhost"
DEFAULT_MODE = ProxyMode.PLAYBACK
DEFAULT_SCHEME = "https"


@dataclass
class ProxySettings:
    """Where the proxy lives and how sessions against it should run.

    Attributes:
        use_proxy: Route application traffic through the proxy at all
        host: Proxy host
        port: Proxy port
        mode: record, playback or live
        scheme: https, http, or auto (https only on the secure port)
        recording_root: Directory holding the ``recordings/`` folder
    """

    use_proxy: bool = False
    host: str = DEFAULT_HOST
    port: int = SECURE_PORT
    mode: ProxyMode = DEFAULT_MODE
    scheme: str = DEFAULT_SCHEME
    recording_root: Path = field(default_factory=Path.cwd)

    def __post_init__(self) -> None:
        self.mode = ProxyMode.parse(self.mode)
        if not 0 < self.port < 65536:
            raise ProxyConfigError(f"PROXY_PORT out of range: {self.port}")
        if not self.host:
            raise ProxyConfigError("PROXY_HOST must not be empty")
        # Validates the value; "auto" stays unresolved until a session is built.
        resolve_scheme(self.scheme, self.port)
        self.scheme = self.scheme.strip().lower()
        self.recording_root = Path(self.recording_root)

    @property
    def routed(self) -> bool:
        """True when traffic should actually go through the proxy."""
        return self.use_proxy and self.mode is not ProxyMode.LIVE

    def as_dict(self) -> dict[str, str]:
        return {
            "USE_PROXY": str(self.use_proxy).lower(),
            "PROXY_MODE": self.mode.value,
            "PROXY_HOST": self.host,
            "PROXY_PORT": str(self.port),
            "PROXY_SCHEME": self.scheme,
            "PROXY_RECORDING_ROOT": str(self.recording_root),
        }


def get_proxy_settings(project_dir: Path | None = None) -> ProxySettings:
    """Resolve settings from the environment, project .env and global config."""
    root = get_config("PROXY_RECORDING_ROOT", project_dir)
    if not root:
        root = project_dir if project_dir is not None else Path.cwd()

    return ProxySettings(
        use_proxy=get_bool("USE_PROXY", project_dir, default=False),
        host=str(get_config("PROXY_HOST", project_dir, default=DEFAULT_HOST)),
        port=get_int("PROXY_PORT", project_dir, default=SECURE_PORT),
        mode=get_config("PROXY_MODE", project_dir, default=DEFAULT_MODE),
        scheme=str(get_config("PROXY_SCHEME", project_dir, default=DEFAULT_SCHEME)),
        recording_root=Path(root).resolve(),
    )
