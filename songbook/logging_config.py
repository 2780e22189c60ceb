from __future__ import annotations

import logging
from typing import Optional

from .config import Settings
from .diagnostics import DiagnosticReporter, set_reporter

LOG_FORMAT = "%(levelname).1s | %(name)s | %(message)s"

C_RESET = "\033[0m"
LEVEL_COLORS = {
    logging.DEBUG: "\033[36m",  # Cyan
    logging.INFO: "\033[37m",  # Light gray
    logging.WARNING: "\033[33m",  # Yellow
    logging.ERROR: "\033[31m",  # Red
    logging.CRITICAL: "\033[35m",  # Magenta
}


class ColorFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        color = LEVEL_COLORS.get(record.levelno)
        if not color:
            return message
        return f"{color}{message}{C_RESET}"


class WarningBufferHandler(logging.Handler):
    def __init__(self) -> None:
        super().__init__(level=logging.WARNING)
        self.records: list[str] = []

    def emit(self, record: logging.LogRecord) -> None:
        try:
            msg = self.format(record)
        except Exception:  # pragma: no cover
            msg = record.getMessage()
        self.records.append(msg)


def configure_logging(
    settings: Settings, logger: Optional[logging.Logger] = None
) -> WarningBufferHandler:
    """
    Attach handlers for ``settings`` and install the matching diagnostic reporter.

    Handlers go on the root logger unless ``logger`` is given. Returns the
    buffer that collects every warning and error emitted afterwards.
    """
    target = logger or logging.getLogger()
    target.handlers.clear()
    target.setLevel(getattr(logging, settings.logging.level, logging.INFO))

    stream_handler = logging.StreamHandler()
    if settings.logging.color:
        stream_handler.setFormatter(ColorFormatter(LOG_FORMAT))
    else:
        stream_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    target.addHandler(stream_handler)

    warn_buffer = WarningBufferHandler()
    warn_buffer.setFormatter(logging.Formatter(LOG_FORMAT))
    target.addHandler(warn_buffer)

    if settings.logging.warnings_log:
        warn_log_path = settings.logging.warnings_log
        warn_log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(warn_log_path, mode="w", encoding="utf-8")
        file_handler.setLevel(logging.WARNING)
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        target.addHandler(file_handler)

    set_reporter(DiagnosticReporter(settings.diagnostics.language))
    return warn_buffer
