from __future__ import annotations

"""
Diagnostics and fatal error reporting utilities.

This package provides:
- errors: DiagnosticError, an exception that carries a captured stack and
  key/value context accumulated while it travels up the call chain.
- fatal: the single sink that renders the user-facing failure report.

Only `fatal` writes failure text for the user; everything else raises.
"""

from .errors import DiagnosticError, annotate  # noqa: F401
