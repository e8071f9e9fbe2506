from __future__ import annotations

"""otelbuild/services/diagnostics/fatal.py

The fatal report: the only user-facing rendering of a failure (except the
bare message printed by failing remix children, whose parent reports).

Layout:

    ===== Environments =====
    command    : otel go build
    errorLog   : /work/.otel-build/preprocess/debug.log
    workDir    : /work
    toolchain  : linux/x86_64, 3.12.1, 0.1.0
    <detail>   : <value>          (one per DiagnosticError detail)

    ===== Fatal Error ======

    <reason>
"""

import os
import platform
import sys
from dataclasses import dataclass
from typing import List, NoReturn, Sequence

from otelbuild.config import get_settings
from otelbuild.services import logs
from otelbuild.services.diagnostics.errors import DiagnosticError

LABEL_WIDTH = 11


@dataclass
class InvocationContext:
    """Environment facts shown at the top of the report."""

    command: str
    error_log: str
    work_dir: str
    toolchain: str


def collect_invocation_context(argv: Sequence[str]) -> InvocationContext:
    settings = get_settings()
    toolchain = ", ".join(
        [
            f"{sys.platform}/{platform.machine()}",
            platform.python_version(),
            settings.tool_version,
        ]
    )
    return InvocationContext(
        command=" ".join(argv),
        error_log=logs.get_logger_path(),
        work_dir=os.environ.get("PWD", ""),
        toolchain=toolchain,
    )


def _line(label: str, value: str) -> str:
    return f"{label:<{LABEL_WIDTH}}: {value}"


def render_fatal_report(err: BaseException, invocation: InvocationContext) -> str:
    lines: list[str] = []
    lines.append("===== Environments =====")
    lines.append(_line("command", invocation.command))
    lines.append(_line("errorLog", invocation.error_log))
    lines.append(_line("workDir", invocation.work_dir))
    lines.append(_line("toolchain", invocation.toolchain))

    if isinstance(err, DiagnosticError):
        for key, value in err.details.items():
            lines.append(_line(key, value))
        reason = err.reason
    else:
        reason = str(err)

    lines.append("")
    lines.append("===== Fatal Error ======")
    lines.append("")
    lines.append(reason)
    return "\n".join(lines)


def fatal(err: BaseException, argv: List[str] | None = None) -> NoReturn:
    """Render the report for ``err`` and terminate the process."""
    invocation = collect_invocation_context(sys.argv if argv is None else argv)
    logs.log_fatal(render_fatal_report(err, invocation))
