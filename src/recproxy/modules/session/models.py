"""Session state and protocol constants for the record/playback proxy."""

from dataclasses import dataclass, field
from enum import StrEnum
from pathlib import Path
from typing import TYPE_CHECKING, Any

from recproxy.exceptions import ProxyConfigError

if TYPE_CHECKING:
    from recproxy.config.settings import ProxySettings

# Port the proxy serves TLS on by default (plain HTTP is on 5000).
SECURE_PORT = 5001

SCHEMES = ("https", "http", "auto")


class RecordingHeader(StrEnum):
    """Header names understood by the proxy."""

    RECORDING_ID = "x-recording-id"
    MODE = "x-recording-mode"
    UPSTREAM_BASE_URI = "x-recording-upstream-base-uri"
    RECORDING_FILE = "x-recording-file"
    SAVE = "x-recording-save"


class ProxyMode(StrEnum):
    """Operating mode of a session."""

    RECORD = "record"
    PLAYBACK = "playback"
    LIVE = "live"

    @classmethod
    def parse(cls, value: "str | ProxyMode") -> "ProxyMode":
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            allowed = ", ".join(m.value for m in cls)
            raise ProxyConfigError(
                f"Invalid proxy mode {value!r} (expected one of: {allowed})"
            ) from None


def resolve_scheme(scheme: str, port: int) -> str:
    """Turn a configured scheme into ``http`` or ``https``.

    ``auto`` picks ``https`` only for the proxy's secure port.
    """
    scheme = scheme.strip().lower()
    if scheme not in SCHEMES:
        raise ProxyConfigError(
            f"Invalid proxy scheme {scheme!r} (expected one of: {', '.join(SCHEMES)})"
        )
    if scheme == "auto":
        return "https" if port == SECURE_PORT else "http"
    return scheme


def recording_file_path(recording_root: Path | str, test_name: str) -> Path:
    """Return ``<root>/recordings/<test_name>.json``."""
    return Path(recording_root) / "recordings" / f"{test_name}.json"


@dataclass
class ProxySession:
    """One start-to-stop record/playback run against the proxy."""

    host: str
    port: int
    mode: ProxyMode
    recording_path: Path
    scheme: str = "https"

    # Assigned by the proxy on start
    recording_id: str = ""
    variables: dict[str, Any] = field(default_factory=dict)
    stopped: bool = False

    def __post_init__(self) -> None:
        self.mode = ProxyMode.parse(self.mode)
        self.scheme = resolve_scheme(self.scheme, self.port)
        self.recording_path = Path(self.recording_path)

    @classmethod
    def for_test(cls, settings: "ProxySettings", test_name: str) -> "ProxySession":
        """Build a session whose recording file is derived from ``test_name``."""
        return cls(
            host=settings.host,
            port=settings.port,
            mode=settings.mode,
            recording_path=recording_file_path(settings.recording_root, test_name),
            scheme=settings.scheme,
        )

    @property
    def netloc(self) -> str:
        return f"{self.host}:{self.port}"

    @property
    def base_url(self) -> str:
        return f"{self.scheme}://{self.netloc}"

    @property
    def started(self) -> bool:
        """True between a successful start and stop."""
        return bool(self.recording_id) and not self.stopped

    def endpoint(self, action: str) -> str:
        """URL of a lifecycle call, e.g. ``https://localhost:5001/record/start``."""
        return f"{self.base_url}/{self.mode.value}/{action}"
