from __future__ import annotations

import logging
import os
from collections.abc import Callable
from datetime import datetime, timezone
from pathlib import Path

from core.paths import get_default_saves_dir, get_os_data_dir, path_to_display
from core.saves.errors import NoSaveFoldersError, SaveIOError
from core.saves.models import SaveFolder, SaveLocation, SaveLocationSource
from core.saves.naming import format_save_folder_name
from i18n.i18n import tr


def _mtime_utc(stat_info: os.stat_result) -> datetime:
    seconds, nanoseconds = divmod(stat_info.st_mtime_ns, 1_000_000_000)
    return datetime.fromtimestamp(seconds, tz=timezone.utc).replace(microsecond=nanoseconds // 1000)


def format_timestamp(value: datetime) -> str:
    utc_value = value.astimezone(timezone.utc)
    text = utc_value.strftime("%Y-%m-%d %H:%M:%S")
    if utc_value.microsecond:
        text += f".{utc_value.microsecond:06d}"
    return f"{text} UTC"


class SaveDirectoryResolver:
    def __init__(
        self,
        fallback_dir: Path,
        data_dir_provider: Callable[[], Path | None] = get_os_data_dir,
        logger: logging.Logger | None = None,
    ) -> None:
        self._fallback_dir = Path(fallback_dir)
        self._data_dir_provider = data_dir_provider
        self._logger = logger or logging.getLogger("savescout.resolver")

    def saves_dir(self) -> Path:
        data_dir = self._data_dir_provider()
        if data_dir is None:
            self._logger.debug("No OS data directory, using fallback %s", self._fallback_dir)
        return get_default_saves_dir(data_dir, self._fallback_dir)

    def default_saves_dir(self) -> str:
        return path_to_display(self.saves_dir())

    def list_save_folders(self, root: Path | None = None) -> list[str]:
        saves_root = Path(root) if root is not None else self.saves_dir()
        folders: list[str] = []

        if saves_root.is_dir():
            try:
                with os.scandir(saves_root) as entries:
                    for entry in entries:
                        folders.append(path_to_display(entry.path))
            except (OSError, ValueError) as exc:
                self._logger.warning("Reading save directory %s failed: %s", saves_root, exc)
                raise SaveIOError(str(exc)) from exc

        if not folders:
            self._logger.info("No save folders in %s", saves_root)
            raise NoSaveFoldersError(tr("saves.error.no_folders"))

        self._logger.info("Listed save folders: root=%s count=%s", saves_root, len(folders))
        return folders

    def scan_save_folders(self, root: Path | None = None) -> list[SaveFolder]:
        saves_root = Path(root) if root is not None else self.saves_dir()
        folders: list[SaveFolder] = []

        if saves_root.is_dir():
            try:
                with os.scandir(saves_root) as entries:
                    for entry in entries:
                        if not entry.is_dir():
                            continue
                        folders.append(
                            SaveFolder(
                                name=entry.name,
                                display_name=format_save_folder_name(entry.name),
                                path=Path(entry.path),
                                modified_at=_mtime_utc(entry.stat()),
                            )
                        )
            except (OSError, ValueError) as exc:
                self._logger.warning("Scanning save directory %s failed: %s", saves_root, exc)
                raise SaveIOError(str(exc)) from exc

        if not folders:
            raise NoSaveFoldersError(tr("saves.error.no_folders"))

        folders.sort(key=lambda folder: folder.name.lower())
        return folders

    def locate_saves_dir(self, cached_path: str | None = None) -> SaveLocation:
        if cached_path:
            cached = Path(cached_path).expanduser()
            if cached.exists():
                return SaveLocation(path=cached, source=SaveLocationSource.CACHED)
            self._logger.info("Cached save path no longer exists: %s", cached)

        auto_detected = self.saves_dir()
        if auto_detected.exists():
            self._logger.info("Auto-detected save path: %s", auto_detected)
            return SaveLocation(path=auto_detected, source=SaveLocationSource.AUTO)

        self._logger.info("Auto-detected save path does not exist: %s", auto_detected)
        return SaveLocation(path=auto_detected, source=SaveLocationSource.MISSING)

    def latest_update_time(self, save_folder: str | Path) -> datetime:
        try:
            stat_info = os.stat(save_folder)
        except (OSError, ValueError) as exc:
            self._logger.warning("Reading metadata of %s failed: %s", save_folder, exc)
            raise SaveIOError(str(exc)) from exc
        return _mtime_utc(stat_info)

    def check_for_updates(self, save_folder: str | Path) -> str:
        return format_timestamp(self.latest_update_time(save_folder))
