# otelbuild/schemas/__init__.py
from __future__ import annotations

"""
Pydantic schemas for persisted state.

BuildConfig is written by the `set` command into the workspace root and
read back by the go/remix phases before their handlers run.
"""

from pathlib import Path

from pydantic import BaseModel, ValidationError

from otelbuild.services.diagnostics.errors import DiagnosticError


class BuildConfig(BaseModel):
    verbose: bool = False
    debug: bool = False
    rule_json_path: str = ""
    disable_rules: str = ""


def load_build_config(path: Path) -> BuildConfig:
    """Load the persisted configuration; a missing file yields the defaults."""
    if not path.exists():
        return BuildConfig()
    try:
        return BuildConfig.model_validate_json(path.read_text(encoding="utf-8"))
    except ValidationError as exc:
        raise DiagnosticError("invalid build configuration").with_detail(
            "config", str(path)
        ).with_detail("validation", str(exc.error_count()) + " error(s)") from exc


def save_build_config(path: Path, config: BuildConfig) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(config.model_dump_json(indent=2), encoding="utf-8")
