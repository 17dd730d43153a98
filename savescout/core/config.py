from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from core.paths import get_config_path


class AppConfig:
    _SUPPORTED_LANGUAGES = {"en", "de"}
    _SUPPORTED_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR"}

    _DEFAULTS: dict[str, Any] = {
        "language": "en",
        "save_path": "",
        "log_level": "INFO",
    }

    def __init__(self, config_path: Path | None = None) -> None:
        self._config_path = config_path or get_config_path()
        self._data: dict[str, Any] = {}
        self._load_or_create()

    @property
    def path(self) -> Path:
        return self._config_path

    def _load_or_create(self) -> None:
        if not self._config_path.exists():
            self._data = dict(self._DEFAULTS)
            self.save()
            return

        try:
            content = self._config_path.read_text(encoding="utf-8")
            loaded = json.loads(content)
            if not isinstance(loaded, dict):
                loaded = {}
        except (json.JSONDecodeError, OSError):
            loaded = {}

        self._data = dict(self._DEFAULTS)
        self._data.update(loaded)

        language = str(self._data.get("language", self._DEFAULTS["language"])).strip().lower()
        if language not in self._SUPPORTED_LANGUAGES:
            language = self._DEFAULTS["language"]
        self._data["language"] = language

        log_level = str(self._data.get("log_level", self._DEFAULTS["log_level"])).strip().upper()
        if log_level not in self._SUPPORTED_LOG_LEVELS:
            log_level = self._DEFAULTS["log_level"]
        self._data["log_level"] = log_level

        if not isinstance(self._data.get("save_path"), str):
            self._data["save_path"] = self._DEFAULTS["save_path"]

        self.save()

    def save(self) -> None:
        self._config_path.parent.mkdir(parents=True, exist_ok=True)
        self._config_path.write_text(
            json.dumps(self._data, indent=2, ensure_ascii=False),
            encoding="utf-8",
        )

    def get(self, key: str, default: Any = None) -> Any:
        return self._data.get(key, default)

    def set(self, key: str, value: Any) -> None:
        self._data[key] = value
        self.save()

    def get_language(self) -> str:
        return str(self._data.get("language", self._DEFAULTS["language"]))

    def set_language(self, language: str) -> None:
        self._data["language"] = language
        self.save()

    def get_log_level(self) -> str:
        return str(self._data.get("log_level", self._DEFAULTS["log_level"]))

    def get_save_path(self) -> str | None:
        value = str(self._data.get("save_path", "")).strip()
        return value or None

    def set_save_path(self, save_path: str) -> None:
        self._data["save_path"] = str(save_path)
        self.save()

    def reset_save_path(self) -> None:
        self._data["save_path"] = ""
        self.save()
