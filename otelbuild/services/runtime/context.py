from __future__ import annotations

"""otelbuild/services/runtime/context.py

RunContext bundles everything decided at start-up: the raw argv, the run
phase, the workspace, settings and the persisted build configuration.
It is created once by the dispatcher and passed to the selected handler.
"""

from dataclasses import dataclass, field
from typing import List, Sequence

from otelbuild.config import Settings, get_settings
from otelbuild.schemas import BuildConfig
from otelbuild.services.runtime.phase import RunPhase, determine_phase, set_run_phase
from otelbuild.services.runtime.workspace import TempWorkspace, build_workspace


@dataclass
class RunContext:
    """Data bundle passed to handlers.

    Contains:
    - argv: the full command line, program name included
    - phase: the classified run phase
    - workspace: the shared temporary workspace
    - settings: environment-driven tool settings
    - build_config: configuration persisted by `set`
    """

    argv: List[str]
    phase: RunPhase
    workspace: TempWorkspace
    settings: Settings
    build_config: BuildConfig = field(default_factory=BuildConfig)

    @property
    def subcommand(self) -> str:
        return self.argv[1] if len(self.argv) > 1 else ""

    @property
    def args(self) -> List[str]:
        """Arguments following the subcommand."""
        return self.argv[2:]


def create_run_context(argv: Sequence[str]) -> RunContext:
    """Classify ``argv`` and publish the phase for collaborators."""
    phase = determine_phase(argv[1:])
    set_run_phase(phase)
    settings = get_settings()
    return RunContext(
        argv=list(argv),
        phase=phase,
        workspace=build_workspace(settings.temp_build_dir),
        settings=settings,
    )
