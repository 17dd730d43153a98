from __future__ import annotations

import inspect
import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from core.config import AppConfig
from core.host import HostHandle
from core.saves.errors import SaveLookupError
from core.saves.naming import save_path_instructions, validate_save_path
from core.saves.resolver import SaveDirectoryResolver
from core.saves.watch import start_watching
from i18n.i18n import tr

CommandHandler = Callable[..., Any]


@dataclass(slots=True)
class CommandResult:
    success: bool
    value: Any = None
    error: str | None = None

    def to_payload(self) -> dict[str, Any]:
        if self.success:
            return {"ok": True, "value": self.value}
        return {"ok": False, "error": self.error}


class SaveCommands:
    """Command table the host front-end invokes by name.

    Every invocation returns a CommandResult; lookup failures and bad
    arguments come back as failed results with a readable error.
    """

    def __init__(
        self,
        resolver: SaveDirectoryResolver,
        config: AppConfig | None = None,
        host: HostHandle | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self._resolver = resolver
        self._config = config
        self._host = host
        self._logger = logger or logging.getLogger("savescout.commands")
        self._handlers: dict[str, CommandHandler] = {}

        self.register("set_save_file_path", self.set_save_file_path)
        self.register("check_for_default_saves_folder", self.check_for_default_saves_folder)
        self.register("list_all_save_folders", self.list_all_save_folders)
        self.register("check_for_updates", self.check_for_updates)
        self.register("start_watching", self.start_watching)
        self.register("scan_save_folders", self.scan_save_folders)
        self.register("locate_saves_folder", self.locate_saves_folder)
        self.register("reset_save_file_path", self.reset_save_file_path)
        self.register("get_save_path_instructions", self.get_save_path_instructions)

    def register(self, name: str, handler: CommandHandler) -> None:
        self._handlers[name] = handler

    def command_names(self) -> list[str]:
        return sorted(self._handlers.keys())

    def invoke(self, command: str, /, **kwargs: Any) -> CommandResult:
        handler = self._handlers.get(command)
        if handler is None:
            self._logger.warning("Unknown command: %s", command)
            return CommandResult(success=False, error=tr("commands.error.unknown", name=command))

        try:
            inspect.signature(handler).bind(**kwargs)
        except TypeError as exc:
            self._logger.warning("Command %s rejected arguments: %s", command, exc)
            return CommandResult(success=False, error=str(exc))

        try:
            value = handler(**kwargs)
        except SaveLookupError as exc:
            self._logger.info("Command %s failed: %s", command, exc)
            return CommandResult(success=False, error=str(exc))
        except ValueError as exc:
            self._logger.warning("Command %s rejected input: %s", command, exc)
            return CommandResult(success=False, error=str(exc))
        except OSError as exc:
            self._logger.warning("Command %s failed on I/O: %s", command, exc)
            return CommandResult(success=False, error=str(exc))

        return CommandResult(success=True, value=value)

    def set_save_file_path(self, save_path: str) -> str:
        if self._config is not None and isinstance(save_path, str) and save_path.strip():
            self._config.set_save_path(save_path)
        return tr("commands.save_path_set", path=save_path)

    def reset_save_file_path(self) -> None:
        if self._config is not None:
            self._config.reset_save_path()

    def check_for_default_saves_folder(self) -> str:
        return self._resolver.default_saves_dir()

    def list_all_save_folders(self) -> list[str]:
        return self._resolver.list_save_folders()

    def check_for_updates(self, selected_save_file: str) -> str:
        return self._resolver.check_for_updates(validate_save_path(selected_save_file))

    def start_watching(self, path: str, host: HostHandle | None = None) -> None:
        target = host if host is not None else self._host
        if target is None:
            raise ValueError(tr("commands.error.no_host"))
        start_watching(target, path)

    def scan_save_folders(self) -> list[dict[str, str | None]]:
        root = self._resolver.locate_saves_dir(self._cached_save_path()).path
        return [folder.to_payload() for folder in self._resolver.scan_save_folders(root)]

    def locate_saves_folder(self) -> dict[str, str]:
        return self._resolver.locate_saves_dir(self._cached_save_path()).to_payload()

    def get_save_path_instructions(self) -> str:
        return save_path_instructions()

    def _cached_save_path(self) -> str | None:
        if self._config is None:
            return None
        return self._config.get_save_path()
