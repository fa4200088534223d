"""Scoped start/stop so a recording is always stopped on every exit path."""

import logging
from collections.abc import Generator
from contextlib import contextmanager

from recproxy.modules.session.controller import SessionController
from recproxy.modules.session.models import ProxySession

logger = logging.getLogger(__name__)


@contextmanager
def recording_session(
    controller: SessionController,
    session: ProxySession,
) -> Generator[ProxySession, None, None]:
    """Start ``session`` on entry and stop it on exit.

    A start failure propagates and nothing is stopped. If the body raises and
    stop fails as well, the body's exception wins and carries the stop error
    as a note. If only stop fails, its error propagates.
    """
    controller.start(session)
    try:
        yield session
    except BaseException as exc:
        try:
            controller.stop(session)
        except Exception as stop_exc:
            logger.error(
                "Failed to stop session %s after an earlier error: %s",
                session.recording_id,
                stop_exc,
            )
            exc.add_note(f"recording session {session.recording_id} was not stopped: {stop_exc}")
        raise
    controller.stop(session)
