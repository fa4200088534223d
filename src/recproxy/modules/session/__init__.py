"""Session module -- proxy session state and the start/stop protocol."""

from .controller import SessionController
from .models import (
    SECURE_PORT,
    ProxyMode,
    ProxySession,
    RecordingHeader,
    recording_file_path,
    resolve_scheme,
)
from .scope import recording_session

__all__ = [
    "SECURE_PORT",
    "ProxyMode",
    "ProxySession",
    "RecordingHeader",
    "SessionController",
    "recording_file_path",
    "recording_session",
    "resolve_scheme",
]
