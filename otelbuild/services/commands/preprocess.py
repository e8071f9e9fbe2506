from __future__ import annotations

"""otelbuild/services/commands/preprocess.py

`go` subcommand: the preprocess phase.

Wraps ``go build`` / ``go install`` so that every toolchain step is routed
back through this tool:

    otel go build -o app ./cmd
      -> go build -toolexec="<otel> remix" -o app ./cmd
           -> otel remix /usr/lib/go/pkg/tool/linux_amd64/compile ...

The children share the workspace prepared by this process; its root is
exported through OTEL_TEMP_BUILD_DIR so they resolve the same directory
regardless of their working directory.
"""

import logging
import os
import shlex
import shutil
import sys
from typing import List

from otelbuild.services.commands.base import run_command, tail
from otelbuild.services.diagnostics.errors import DiagnosticError
from otelbuild.services.runtime.context import RunContext
from otelbuild.services.runtime.phase import SUBCOMMAND_REMIX

logger = logging.getLogger(__name__)

SUPPORTED_GO_COMMANDS = ("build", "install")


def self_executable(argv0: str) -> str:
    """Absolute path of the running tool, as the go command must exec it."""
    found = shutil.which(argv0)
    path = os.path.abspath(found or argv0)
    if not os.access(path, os.X_OK):
        raise DiagnosticError("tool is not an executable, install it and run it as otel").with_detail(
            "executable", path
        )
    return path


def build_go_command(ctx: RunContext) -> List[str]:
    args = ctx.args
    if not args or args[0] not in SUPPORTED_GO_COMMANDS:
        raise DiagnosticError(
            "unsupported go command, expected one of: " + ", ".join(SUPPORTED_GO_COMMANDS)
        ).with_detail("command", " ".join(["go", *args]))

    toolexec = shlex.join([self_executable(ctx.argv[0]), SUBCOMMAND_REMIX])
    return [ctx.settings.go_binary, args[0], f"-toolexec={toolexec}", *args[1:]]


def preprocess(ctx: RunContext) -> None:
    cmd = build_go_command(ctx)
    logger.info("Preprocess workspace %s", ctx.workspace.root)

    result = run_command(
        cmd,
        env={"OTEL_TEMP_BUILD_DIR": str(ctx.workspace.root)},
        capture=True,
    )
    if result.output:
        logger.info("go output:\n%s", result.output)
        sys.stdout.write(result.output)
    if result.error:
        logger.info("go stderr:\n%s", result.error)
        sys.stderr.write(result.error)

    if not result.success:
        raise DiagnosticError("failed to run go command").with_detail(
            "command", " ".join(cmd)
        ).with_detail("exitCode", str(result.return_code)).with_detail(
            "stderr", tail(result.error)
        )
    logger.info("Build finished in %.2fs", result.duration_seconds or 0.0)
