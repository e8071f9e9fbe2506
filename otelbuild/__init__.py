# otelbuild/__init__.py
from __future__ import annotations

"""
otelbuild package.

Compile-time toolchain orchestrator: classifies the invocation into a run
phase, prepares the shared temporary workspace and dispatches to the
version / set / go / remix handlers.
"""

import logging

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())
