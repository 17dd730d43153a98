from __future__ import annotations

from pathlib import Path

import pytest
from PySide6.QtCore import QCoreApplication

from app import bootstrap
from core.config import AppConfig


def test_bootstrap_wires_commands(qt_app: QCoreApplication, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    app_dir = tmp_path / "appdata"
    app_dir.mkdir()
    monkeypatch.setattr("core.paths.get_app_data_dir", lambda: app_dir)

    runtime = bootstrap(config=AppConfig(app_dir / "config.json"), working_dir=tmp_path)
    received: list[tuple[str, object]] = []
    runtime.host.event_emitted.connect(lambda event, payload: received.append((event, payload)))

    assert "list_all_save_folders" in runtime.commands.command_names()
    assert (app_dir / "logs" / "app.log").exists()

    runtime.commands.invoke("start_watching", path="/saves/FarmA")
    assert received == [("log", {"level": "info", "message": "Watching directory /saves/FarmA"})]

    for handler in list(runtime.logger.handlers):
        handler.close()
        runtime.logger.removeHandler(handler)
