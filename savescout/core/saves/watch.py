from __future__ import annotations

import logging

from core.host import HostHandle, emit_log_message
from i18n.i18n import tr

_logger = logging.getLogger("savescout.watch")


def start_watching(host: HostHandle, path: str) -> None:
    # Announces the watch to the host only; no filesystem subscription is made yet.
    message = tr("watch.started", path=path)
    _logger.info(message)
    emit_log_message(host, message)
