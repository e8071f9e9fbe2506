"""`version` subcommand."""
from __future__ import annotations

import os

from otelbuild.services.runtime.context import RunContext


def tool_name(argv: list[str]) -> str:
    return os.path.basename(argv[0]) if argv else "otel"


def print_version(ctx: RunContext) -> None:
    print(f"{tool_name(ctx.argv)} version {ctx.settings.tool_version}")
