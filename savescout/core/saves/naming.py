from __future__ import annotations

import platform
import re

from i18n.i18n import tr

_SAVE_ID_SUFFIX = re.compile(r"_\d+$")


def format_save_folder_name(folder_name: str) -> str:
    """Strip the numeric save id Stardew appends to farm folders, e.g. ``Hilltop_123456789``."""
    return _SAVE_ID_SUFFIX.sub("", folder_name)


def validate_save_path(save_path: str) -> str:
    if not isinstance(save_path, str) or save_path.strip() == "":
        raise ValueError(tr("saves.error.path_empty"))
    return save_path


def save_path_instructions(system: str | None = None) -> str:
    current = (system or platform.system()).strip().lower()
    if current == "windows":
        return tr("saves.instructions.windows")
    if current == "darwin":
        return tr("saves.instructions.macos")
    if current == "linux":
        return tr("saves.instructions.linux")
    return tr("saves.instructions.unknown")
