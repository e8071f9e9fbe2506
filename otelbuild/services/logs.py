"""Phase log file and fatal exit for the otel tool."""
from __future__ import annotations

import logging
import sys
from typing import NoReturn

from otelbuild.services.runtime.context import RunContext
from otelbuild.services.runtime.phase import RunPhase

logger = logging.getLogger("otelbuild")

_RED = "\033[31m"
_RESET = "\033[0m"

_logger_path = ""


def configure_logging(ctx: RunContext) -> None:
    """Route the package logger into the current phase's debug log.

    The unset phase (version, set, usage) gets no log file.
    """
    global _logger_path
    if ctx.phase is RunPhase.UNSET:
        return

    path = ctx.workspace.subdir(ctx.phase) / ctx.settings.log_file_name
    handler = logging.FileHandler(path, encoding="utf-8")
    handler.setFormatter(
        logging.Formatter("%(asctime)s %(levelname)s [%(process)d] %(name)s: %(message)s")
    )
    for existing in list(logger.handlers):
        if isinstance(existing, logging.FileHandler):
            logger.removeHandler(existing)
            existing.close()
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if ctx.build_config.verbose else logging.INFO)
    _logger_path = str(path)


def get_logger_path() -> str:
    return _logger_path


def log_fatal(message: str) -> NoReturn:
    """Log ``message``, print it in red on stderr and exit with status 1."""
    logger.critical(message)
    sys.stderr.write(f"{_RED}{message}{_RESET}\n")
    sys.stderr.flush()
    sys.exit(1)
