from __future__ import annotations

"""otelbuild/services/commands/instrument.py

`remix` subcommand: the instrument phase.

Invoked by the go command via -toolexec as

    otel remix <tool path> <tool args...>

Each toolchain step is run unchanged; compile steps are recorded in the
instrument log together with the package being compiled. Output of the
tool is forwarded so the parent go command sees it as usual.
"""

import logging
import os
from typing import List

from otelbuild.services.commands.base import run_command
from otelbuild.services.diagnostics.errors import DiagnosticError
from otelbuild.services.runtime.context import RunContext

logger = logging.getLogger(__name__)


def tool_of(cmd: List[str]) -> str:
    name = os.path.basename(cmd[0])
    root, ext = os.path.splitext(name)
    return root if ext == ".exe" else name


def package_of(cmd: List[str]) -> str:
    """Return the import path passed as ``-p`` to the compiler, if any."""
    for i, arg in enumerate(cmd):
        if arg == "-p" and i + 1 < len(cmd):
            return cmd[i + 1]
        if arg.startswith("-p="):
            return arg[len("-p="):]
    return ""


def instrument(ctx: RunContext) -> None:
    cmd = ctx.args
    if not cmd:
        raise DiagnosticError("no toolchain command to run")

    if tool_of(cmd) == "compile":
        logger.info("Compiling package %s", package_of(cmd) or "<unknown>")

    result = run_command(cmd)
    if not result.success:
        raise DiagnosticError(f"{tool_of(cmd)} exited with status {result.return_code}").with_detail(
            "command", " ".join(cmd)
        ).with_detail("exitCode", str(result.return_code))
