from __future__ import annotations

"""otelbuild/services/diagnostics/errors.py

DiagnosticError: an exception with a stable reason, the stack captured at
construction time, and free-form key/value details.

Callers enrich the error as it propagates:

    raise DiagnosticError("failed to run go command").with_detail("command", cmd)

and intermediate layers that do not know the concrete error type use
``annotate(err, key, value)``, which leaves foreign exceptions untouched.
"""

import traceback
from typing import Dict, TypeVar

E = TypeVar("E", bound=BaseException)


class DiagnosticError(Exception):
    """Error carrying a reason, a creation-time stack and diagnostic details.

    ``details`` is not synchronized; a single writer at a time is assumed.
    """

    def __init__(self, reason: str):
        super().__init__(reason)
        self._reason = reason
        # Drop this frame so the trace ends at the caller.
        self._cause = "".join(traceback.format_stack()[:-1])
        self.details: Dict[str, str] = {}

    @property
    def reason(self) -> str:
        return self._reason

    @property
    def cause(self) -> str:
        return self._cause

    def with_detail(self, key: str, value: str) -> "DiagnosticError":
        """Upsert ``key`` and return the same error for chaining."""
        self.details[key] = value
        return self

    def __str__(self) -> str:
        return self._reason + "\n" + self._cause


def annotate(err: E, key: str, value: str) -> E:
    """Attach ``key``/``value`` to ``err`` if it carries diagnostic context.

    Any other exception is returned as-is.
    """
    if isinstance(err, DiagnosticError):
        err.with_detail(key, value)
    return err
