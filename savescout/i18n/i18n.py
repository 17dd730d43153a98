from __future__ import annotations

import json
from pathlib import Path

from PySide6.QtCore import QObject, Signal

from core.resources import get_translations_dir

DEFAULT_LANGUAGE = "en"


class I18nManager(QObject):
    language_changed = Signal(str)

    def __init__(self, language: str = DEFAULT_LANGUAGE) -> None:
        super().__init__()
        self._language = language
        self._catalogs: dict[str, dict[str, str]] = {}

    def load_translations(self, translations_dir: Path | None = None) -> None:
        source_dir = translations_dir or get_translations_dir()
        self._catalogs.clear()

        if not source_dir.is_dir():
            return

        for catalog_path in sorted(source_dir.glob("*.json")):
            try:
                payload = json.loads(catalog_path.read_text(encoding="utf-8"))
            except (OSError, json.JSONDecodeError):
                continue
            if isinstance(payload, dict):
                self._catalogs[catalog_path.stem] = {str(key): str(value) for key, value in payload.items()}

        if self._language not in self._catalogs:
            self._language = DEFAULT_LANGUAGE

    def set_language(self, language: str, emit_signal: bool = True) -> None:
        if language not in self._catalogs:
            language = DEFAULT_LANGUAGE

        if self._language == language:
            return

        self._language = language
        if emit_signal:
            self.language_changed.emit(language)

    def translate(self, key: str, **kwargs: object) -> str:
        template = (
            self._catalogs.get(self._language, {}).get(key)
            or self._catalogs.get(DEFAULT_LANGUAGE, {}).get(key)
            or key
        )
        try:
            return template.format(**kwargs)
        except (KeyError, IndexError, ValueError):
            return template


_i18n = I18nManager()


def initialize_i18n(language: str) -> None:
    _i18n.load_translations()
    _i18n.set_language(language, emit_signal=False)


def get_i18n() -> I18nManager:
    return _i18n


def tr(key: str, **kwargs: object) -> str:
    return _i18n.translate(key, **kwargs)
