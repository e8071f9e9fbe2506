from __future__ import annotations

"""otelbuild/services/commands/base.py

Shared utilities for the subcommand handlers.

This module provides:

- Handler: the call signature every subcommand implements
- CommandResult: structured result of a wrapped toolchain invocation
- run_command: low-level helper that executes a command, optionally
  capturing its output, and converts spawn failures into DiagnosticError
- tail: trims captured output for use as an error detail
"""

import logging
import os
import subprocess
from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Dict, List

from otelbuild.services.diagnostics.errors import DiagnosticError
from otelbuild.services.runtime.context import RunContext

logger = logging.getLogger(__name__)

Handler = Callable[[RunContext], None]


@dataclass
class CommandResult:
    """Result of a single wrapped command."""

    return_code: int
    command: list[str]
    output: str = ""
    error: str = ""
    started_at: datetime | None = None
    finished_at: datetime | None = None

    @property
    def success(self) -> bool:
        return self.return_code == 0

    @property
    def duration_seconds(self) -> float | None:
        if self.started_at is None or self.finished_at is None:
            return None
        return (self.finished_at - self.started_at).total_seconds()


def run_command(
    cmd: List[str],
    *,
    env: Dict[str, str] | None = None,
    capture: bool = False,
) -> CommandResult:
    """Run ``cmd`` to completion.

    With ``capture`` the output is returned on the result; otherwise it is
    forwarded to this process's stdout/stderr. A command that cannot be
    started raises DiagnosticError.
    """
    environment = os.environ.copy()
    environment.update(env or {})

    logger.debug("Running %s", " ".join(cmd))
    started_at = datetime.now()
    try:
        proc = subprocess.run(
            cmd,
            capture_output=capture,
            text=True,
            check=False,
            env=environment,
        )
    except OSError as exc:
        raise DiagnosticError(f"failed to start {cmd[0]}: {exc}").with_detail(
            "command", " ".join(cmd)
        ) from exc
    finished_at = datetime.now()

    result = CommandResult(
        return_code=proc.returncode,
        command=cmd,
        output=proc.stdout or "",
        error=proc.stderr or "",
        started_at=started_at,
        finished_at=finished_at,
    )
    logger.debug("%s exited with %d in %.2fs", cmd[0], result.return_code, result.duration_seconds)
    return result


def tail(text: str, lines: int = 20) -> str:
    """Return the last ``lines`` non-empty lines of ``text``."""
    kept = [line for line in text.strip().splitlines() if line.strip()]
    return "\n".join(kept[-lines:])
