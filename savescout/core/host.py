from __future__ import annotations

import logging
from typing import Protocol

from PySide6.QtCore import QObject, Signal

from core.logging import LogEvent

LOG_EVENT_NAME = "log"

_logger = logging.getLogger("savescout.host")


class HostHandle(Protocol):
    def emit_event(self, event: str, payload: object) -> None: ...


class HostBridge(QObject):
    """Qt-side handle the front-end connects to for events pushed by the core."""

    event_emitted = Signal(str, object)

    def emit_event(self, event: str, payload: object) -> None:
        self.event_emitted.emit(event, payload)


def emit_log_message(host: HostHandle, message: str, level: str = "info") -> None:
    event = LogEvent(level=level, message=message)
    try:
        host.emit_event(LOG_EVENT_NAME, event.to_payload())
    except Exception as exc:
        # Delivery to the host is best-effort.
        _logger.debug("Log event not delivered to host: %s", exc)
