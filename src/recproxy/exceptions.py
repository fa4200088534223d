"""Errors raised while talking to the record/playback proxy.

Transport failures are not wrapped: they surface as the ``httpx`` exception
raised by the underlying client. Malformed JSON from the proxy surfaces as
``json.JSONDecodeError``.
"""


class RecordingProxyError(Exception):
    """Base class for all recproxy errors."""


class ProxyConfigError(RecordingProxyError, ValueError):
    """Missing session or invalid proxy settings."""


class SessionStateError(RecordingProxyError, RuntimeError):
    """Operation not allowed in the session's current lifecycle state."""


class ProxyProtocolError(RecordingProxyError):
    """The proxy answered, but not with what the protocol requires."""

    def __init__(self, message: str, body: str = ""):
        super().__init__(message)
        self.body = body


class RecordingIdMissingError(ProxyProtocolError):
    """Start response did not carry an ``x-recording-id`` header."""

    def __init__(self, body: str = ""):
        super().__init__(
            f"recording ID was not returned by the response. Response body: {body}",
            body=body,
        )


class StopRecordingError(ProxyProtocolError):
    """Stop call returned something other than 200."""

    def __init__(self, detail: str, status_code: int | None = None):
        super().__init__(f"proxy did not stop the recording properly: {detail}", body=detail)
        self.status_code = status_code
