from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from core.commands import SaveCommands
from core.config import AppConfig
from core.host import HostBridge
from core.logging import LogEmitter, setup_logging
from core.paths import ensure_runtime_directories
from core.saves.resolver import SaveDirectoryResolver
from i18n.i18n import initialize_i18n, tr


@dataclass(slots=True)
class Runtime:
    config: AppConfig
    logger: logging.Logger
    log_emitter: LogEmitter
    host: HostBridge
    commands: SaveCommands


def bootstrap(config: AppConfig | None = None, working_dir: Path | None = None) -> Runtime:
    """Wire up config, i18n, logging and the command table for a host front-end."""
    ensure_runtime_directories()

    config = config or AppConfig()
    initialize_i18n(config.get_language())

    logger, log_emitter = setup_logging(config.get_log_level())

    resolver = SaveDirectoryResolver(
        fallback_dir=working_dir or Path.cwd(),
        logger=logger.getChild("resolver"),
    )
    host = HostBridge()
    commands = SaveCommands(
        resolver,
        config=config,
        host=host,
        logger=logger.getChild("commands"),
    )

    logger.info(tr("startup.ready", count=len(commands.command_names())))
    return Runtime(config=config, logger=logger, log_emitter=log_emitter, host=host, commands=commands)
