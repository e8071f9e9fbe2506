from __future__ import annotations

"""otelbuild/services/runtime/phase.py

Run phase classification.

`otel go build` runs in the preprocess phase. The go command then invokes
`otel remix <tool> <args>` once per toolchain step via -toolexec; those
children run in the instrument phase. Everything else (version, set, typos)
runs unset and needs no phase-specific state.
"""

import enum
from typing import Sequence

SUBCOMMAND_SET = "set"
SUBCOMMAND_GO = "go"
SUBCOMMAND_VERSION = "version"
SUBCOMMAND_REMIX = "remix"


class RunPhase(str, enum.Enum):
    UNSET = ""
    PREPROCESS = "preprocess"
    INSTRUMENT = "instrument"


_run_phase = RunPhase.UNSET


def determine_phase(args: Sequence[str]) -> RunPhase:
    """Classify the arguments following the program name."""
    if not args:
        return RunPhase.UNSET
    if args[0].endswith(SUBCOMMAND_GO):
        return RunPhase.PREPROCESS
    if args[0] == SUBCOMMAND_REMIX:
        return RunPhase.INSTRUMENT
    return RunPhase.UNSET


def get_run_phase() -> RunPhase:
    return _run_phase


def set_run_phase(phase: RunPhase) -> None:
    global _run_phase
    _run_phase = phase


def in_preprocess() -> bool:
    return _run_phase is RunPhase.PREPROCESS


def in_instrument() -> bool:
    return _run_phase is RunPhase.INSTRUMENT
