from __future__ import annotations

import logging
import os

from rich.console import Console
from rich.text import Text

LOGGER_NAME = "firelit"


class _FirelitRichConsoleHandler(logging.Handler):
    """Console handler rendering firelit records with rich."""

    def __init__(self, level: int = logging.NOTSET) -> None:
        super().__init__(level)
        self._console = Console(stderr=True)

    @staticmethod
    def _format_location(record: logging.LogRecord) -> str:
        filename = os.path.basename(record.pathname)
        return f"[{filename}:{record.lineno}]"

    @staticmethod
    def _format_level(record: logging.LogRecord) -> Text:
        style = {
            logging.DEBUG: "dim",
            logging.WARNING: "yellow",
            logging.ERROR: "red",
            logging.CRITICAL: "bold red",
        }.get(record.levelno, "")
        return Text(record.levelname.ljust(8), style=style)

    def emit(self, record: logging.LogRecord) -> None:
        try:
            line = Text.assemble(
                self._format_level(record),
                " ",
                Text(self._format_location(record), style="dim"),
                " ",
                record.getMessage(),
            )
            self._console.print(line, highlight=False, soft_wrap=True)
        except Exception:
            self.handleError(record)


def get_logger() -> logging.Logger:
    return logging.getLogger(LOGGER_NAME)


def configure_logging(*, debug: bool = False) -> logging.Logger:
    """Attach the rich console handler to the firelit logger.

    Calling this repeatedly never adds a second handler; only the level is
    updated.
    """

    logger = get_logger()
    logger.setLevel(logging.DEBUG if debug else logging.INFO)
    if not any(isinstance(h, _FirelitRichConsoleHandler) for h in logger.handlers):
        logger.addHandler(_FirelitRichConsoleHandler())
    return logger
