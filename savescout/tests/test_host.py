from __future__ import annotations

import logging
from pathlib import Path

from PySide6.QtCore import QCoreApplication

from core.host import HostBridge, emit_log_message
from core.logging import LogEvent, setup_logging
from core.saves.watch import start_watching


class BrokenHost:
    def emit_event(self, event: str, payload: object) -> None:
        raise RuntimeError("front-end gone")


def test_host_bridge_emits_signal(qt_app: QCoreApplication) -> None:
    bridge = HostBridge()
    received: list[tuple[str, object]] = []
    bridge.event_emitted.connect(lambda event, payload: received.append((event, payload)))

    start_watching(bridge, "/saves/FarmA")

    assert received == [("log", {"level": "info", "message": "Watching directory /saves/FarmA"})]


def test_emit_log_message_ignores_delivery_failure() -> None:
    emit_log_message(BrokenHost(), "hello")


def test_emit_log_message_custom_level(qt_app: QCoreApplication) -> None:
    bridge = HostBridge()
    received: list[object] = []
    bridge.event_emitted.connect(lambda _event, payload: received.append(payload))

    emit_log_message(bridge, "disk almost full", level="warning")

    assert received == [{"level": "warning", "message": "disk almost full"}]


def test_setup_logging_forwards_records(qt_app: QCoreApplication, tmp_path: Path) -> None:
    logger, emitter = setup_logging("INFO", logs_dir=tmp_path)
    lines: list[str] = []
    events: list[LogEvent] = []
    emitter.log_message.connect(lines.append)
    emitter.log_event.connect(events.append)

    logger.getChild("resolver").info("Listed %s folders", 2)
    logger.debug("hidden")

    assert len(lines) == 1
    assert "INFO | savescout.resolver | Listed 2 folders" in lines[0]
    assert events == [LogEvent(level="info", message="Listed 2 folders")]
    assert (tmp_path / "app.log").exists()

    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)


def test_setup_logging_unknown_level_defaults_to_info(qt_app: QCoreApplication, tmp_path: Path) -> None:
    logger, _emitter = setup_logging("chatty", logs_dir=tmp_path)
    assert logger.level == logging.INFO

    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)
