# otelbuild/main.py
from __future__ import annotations

"""
Command line entry point.

This module depends on:
- otelbuild.services.runtime for phase classification and the workspace
- otelbuild.services.commands for the subcommand handlers
- otelbuild.services.diagnostics.fatal for the failure report
"""

import sys
from typing import Dict, List, Sequence

from otelbuild.schemas import load_build_config
from otelbuild.services import logs
from otelbuild.services.commands import get_default_handlers
from otelbuild.services.commands.base import Handler
from otelbuild.services.commands.version import tool_name
from otelbuild.services.diagnostics.fatal import fatal
from otelbuild.services.runtime.context import RunContext, create_run_context
from otelbuild.services.runtime.phase import SUBCOMMAND_REMIX, RunPhase
from otelbuild.services.runtime.workspace import ensure_workspace

USAGE = """Usage: {} <command> [args]
Example:
\t{} go build
\t{} go install
\t{} go build main.go
\t{} version
\t{} set -verbose -rule=custom.json

Command:
\tversion    print the version
\tset        set the configuration
\tgo         build the Go application
"""


def print_usage(argv: Sequence[str]) -> None:
    sys.stdout.write(USAGE.replace("{}", tool_name(list(argv))))


def init_env(argv: Sequence[str]) -> RunContext:
    """Classify the invocation and prepare workspace, config and logging."""
    ctx = create_run_context(argv)
    ensure_workspace(ctx.phase, ctx.workspace)

    if ctx.phase is not RunPhase.UNSET:
        ctx.build_config = load_build_config(ctx.workspace.config_path)
        logs.configure_logging(ctx)
    return ctx


def main(argv: List[str] | None = None, handlers: Dict[str, Handler] | None = None) -> int:
    argv = list(sys.argv if argv is None else argv)
    if len(argv) < 2:
        print_usage(argv)
        return 0

    try:
        ctx = init_env(argv)
    except Exception as exc:  # noqa: BLE001
        fatal(exc, argv)

    if handlers is None:
        handlers = get_default_handlers()
    handler = handlers.get(ctx.subcommand)
    if handler is None:
        print_usage(argv)
        return 0

    try:
        handler(ctx)
    except Exception as exc:  # noqa: BLE001
        if ctx.subcommand == SUBCOMMAND_REMIX:
            # The parent go command collects this output and reports it.
            sys.stderr.write(f"{exc}\n")
            sys.exit(1)
        fatal(exc, argv)
    return 0


def run() -> None:
    sys.exit(main())
