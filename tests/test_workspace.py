"""Tests for the temporary workspace lifecycle."""
from __future__ import annotations

import shutil
from pathlib import Path

import pytest

from otelbuild.services.diagnostics.errors import DiagnosticError
from otelbuild.services.runtime.phase import RunPhase
from otelbuild.services.runtime.workspace import build_workspace, ensure_workspace


def _assert_clean(root: Path) -> None:
    for name in ("preprocess", "instrument"):
        sub = root / name
        assert sub.is_dir()
        assert list(sub.iterdir()) == []


def test_build_workspace_uses_settings(workspace_root) -> None:
    workspace = build_workspace()
    assert workspace.root == workspace_root
    assert workspace.preprocess_dir == workspace_root / "preprocess"
    assert workspace.instrument_dir == workspace_root / "instrument"
    assert workspace.config_path == workspace_root / "conf.json"


def test_unset_phase_has_no_private_directory(workspace_root) -> None:
    with pytest.raises(ValueError):
        build_workspace(workspace_root).subdir(RunPhase.UNSET)


@pytest.mark.parametrize("phase", [RunPhase.PREPROCESS, RunPhase.UNSET])
def test_ensure_workspace_is_idempotent(phase, workspace_root) -> None:
    workspace = build_workspace(workspace_root)

    ensure_workspace(phase, workspace)
    _assert_clean(workspace_root)

    (workspace.preprocess_dir / "leftover.go").write_text("package main\n")
    nested = workspace.instrument_dir / "pkg" / "deep"
    nested.mkdir(parents=True)
    (nested / "x.o").write_bytes(b"\x00")

    ensure_workspace(phase, workspace)
    _assert_clean(workspace_root)


def test_ensure_workspace_keeps_root_level_files(workspace_root) -> None:
    workspace = build_workspace(workspace_root)
    ensure_workspace(RunPhase.PREPROCESS, workspace)
    workspace.config_path.write_text("{}")

    ensure_workspace(RunPhase.PREPROCESS, workspace)
    assert workspace.config_path.read_text() == "{}"


def test_ensure_workspace_instrument_touches_nothing(workspace_root, monkeypatch) -> None:
    workspace = build_workspace(workspace_root)

    def forbidden(*args, **kwargs):
        raise AssertionError("filesystem mutated")

    with monkeypatch.context() as m:
        m.setattr(shutil, "rmtree", forbidden)
        m.setattr(Path, "mkdir", forbidden)
        m.setattr(Path, "exists", forbidden)
        ensure_workspace(RunPhase.INSTRUMENT, workspace)

    assert not workspace_root.exists()


def test_ensure_workspace_instrument_preserves_contents(workspace_root) -> None:
    workspace = build_workspace(workspace_root)
    ensure_workspace(RunPhase.PREPROCESS, workspace)
    marker = workspace.instrument_dir / "compile.log"
    marker.write_text("in progress")

    ensure_workspace(RunPhase.INSTRUMENT, workspace)
    assert marker.read_text() == "in progress"


def test_ensure_workspace_root_failure_is_diagnostic(tmp_path) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory")
    workspace = build_workspace(blocker / ".otel-build")

    with pytest.raises(DiagnosticError) as excinfo:
        ensure_workspace(RunPhase.PREPROCESS, workspace)
    assert excinfo.value.details["workspace"] == str(workspace.root)
