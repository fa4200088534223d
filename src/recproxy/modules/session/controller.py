"""Start/stop protocol against a running record/playback proxy."""

import logging

import httpx

from recproxy.exceptions import (
    ProxyConfigError,
    ProxyProtocolError,
    RecordingIdMissingError,
    SessionStateError,
    StopRecordingError,
)
from recproxy.modules.session.models import ProxySession, RecordingHeader

logger = logging.getLogger(__name__)


class SessionController:
    """Issues lifecycle calls to the proxy over an injected HTTP client.

    The client should skip certificate verification: the proxy terminates
    TLS with a local development certificate.
    """

    def __init__(self, client: httpx.Client):
        self.client = client

    def start(self, session: ProxySession | None) -> str:
        """Begin a record or playback session and store its recording id.

        Raises:
            RecordingIdMissingError: the proxy did not return ``x-recording-id``.
            httpx.HTTPError: the proxy could not be reached.
            json.JSONDecodeError: the proxy returned a malformed variables body.
            ProxyProtocolError: the variables body is not a JSON object.
        """
        if session is None:
            raise ProxyConfigError("session must not be None")
        if session.recording_id or session.stopped:
            raise SessionStateError("session has already been started")

        response = self.client.post(
            session.endpoint("start"),
            headers={"Content-Type": "application/json"},
            json={RecordingHeader.RECORDING_FILE.value: str(session.recording_path)},
        )

        recording_id = response.headers.get(RecordingHeader.RECORDING_ID, "")
        if not recording_id:
            raise RecordingIdMissingError(response.text)

        # Variables the proxy hands back for use in playback
        variables = (response.json() if response.content else None) or {}
        if not isinstance(variables, dict):
            raise ProxyProtocolError(
                f"proxy returned non-object session variables: {response.text}",
                body=response.text,
            )

        session.recording_id = recording_id
        session.variables = variables
        logger.info(
            "Started %s session %s (recording file %s)",
            session.mode.value,
            recording_id,
            session.recording_path,
        )
        return recording_id

    def stop(self, session: ProxySession | None) -> None:
        """End the session and ask the proxy to save the recording.

        **If this call is skipped or fails, the recording is not saved.**
        """
        if session is None:
            raise ProxyConfigError("session must not be None")
        if not session.started:
            raise SessionStateError("session is not active; start it before stopping")

        response = self.client.post(
            session.endpoint("stop"),
            headers={
                RecordingHeader.RECORDING_ID.value: session.recording_id,
                RecordingHeader.SAVE.value: "true",
            },
        )
        if response.status_code != 200:
            try:
                detail = response.read().decode(response.encoding or "utf-8", errors="replace")
            except (httpx.HTTPError, httpx.StreamError) as exc:
                detail = str(exc)
            raise StopRecordingError(detail, status_code=response.status_code)

        session.stopped = True
        logger.info("Stopped %s session %s", session.mode.value, session.recording_id)
