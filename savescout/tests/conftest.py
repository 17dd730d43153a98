from __future__ import annotations

from collections.abc import Iterator

import pytest
from PySide6.QtCore import QCoreApplication

from i18n.i18n import get_i18n, initialize_i18n


@pytest.fixture(autouse=True)
def english_catalog() -> None:
    initialize_i18n("en")
    get_i18n().set_language("en", emit_signal=False)


@pytest.fixture(scope="session")
def qt_app() -> Iterator[QCoreApplication]:
    app = QCoreApplication.instance() or QCoreApplication([])
    yield app
