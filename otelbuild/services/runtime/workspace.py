# otelbuild/services/runtime/workspace.py
from __future__ import annotations

"""
Temporary workspace management.

A build gets one scratch directory tree under the configured
temp_build_dir:

    <temp_build_dir>/
      conf.json     - persisted build configuration (written by `set`)
      preprocess/   - private scratch space of the `go` phase
      instrument/   - private scratch space of the `remix` children

The preprocess invocation owns the tree and resets both subdirectories on
start. Instrument invocations are children of a running preprocess and
must never touch the structure.
"""

from dataclasses import dataclass
import logging
import shutil
from pathlib import Path

from otelbuild.config import get_settings
from otelbuild.services.diagnostics.errors import DiagnosticError
from otelbuild.services.runtime.phase import RunPhase

logger = logging.getLogger(__name__)

# Every phase, including children spawned by the go command, writes here.
WORKSPACE_MODE = 0o777

PHASE_SUBDIRS = (RunPhase.PREPROCESS, RunPhase.INSTRUMENT)


@dataclass(frozen=True)
class TempWorkspace:
    """On-disk layout of the shared workspace."""

    root: Path

    @property
    def preprocess_dir(self) -> Path:
        return self.subdir(RunPhase.PREPROCESS)

    @property
    def instrument_dir(self) -> Path:
        return self.subdir(RunPhase.INSTRUMENT)

    @property
    def config_path(self) -> Path:
        return self.root / get_settings().config_file_name

    def subdir(self, phase: RunPhase) -> Path:
        if phase is RunPhase.UNSET:
            raise ValueError("unset phase has no private directory")
        return self.root / phase.value


def build_workspace(root: str | Path | None = None) -> TempWorkspace:
    """Return the workspace rooted at ``root`` or Settings.temp_build_dir."""
    if root is None:
        root = get_settings().temp_build_dir
    return TempWorkspace(root=Path(root).absolute())


def ensure_workspace(phase: RunPhase, workspace: TempWorkspace) -> None:
    """Prepare the workspace for ``phase``.

    The instrument phase relies on its parent having prepared everything and
    performs no filesystem access at all.
    """
    if phase is RunPhase.INSTRUMENT:
        return

    if not workspace.root.exists():
        try:
            workspace.root.mkdir(mode=WORKSPACE_MODE, parents=True, exist_ok=True)
        except OSError as exc:
            raise DiagnosticError(str(exc)).with_detail(
                "workspace", str(workspace.root)
            ) from exc

    for subdir in PHASE_SUBDIRS:
        path = workspace.subdir(subdir)
        shutil.rmtree(path, ignore_errors=True)
        try:
            path.mkdir(mode=WORKSPACE_MODE, parents=True, exist_ok=True)
        except OSError as exc:
            logger.warning("Could not recreate %s: %s", path, exc)
