# otelbuild/services/runtime/__init__.py
from __future__ import annotations

"""
Runtime state of a single invocation.

This package provides:
- Run phase classification and the process-wide phase value (phase.py)
- The temporary workspace layout and its lifecycle (workspace.py)
- RunContext, the start-up value handed to every handler (context.py)
"""

from .phase import RunPhase, determine_phase, get_run_phase, set_run_phase  # noqa: F401
from .workspace import TempWorkspace, build_workspace, ensure_workspace  # noqa: F401
from .context import RunContext, create_run_context  # noqa: F401
