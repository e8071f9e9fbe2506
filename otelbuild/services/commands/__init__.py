from __future__ import annotations

"""otelbuild/services/commands/__init__.py

Subcommand handler registry.

This module exposes `get_default_handlers`, mapping each subcommand token
to the function that implements it:

- version (print the version)
- set     (persist the build configuration)
- go      (preprocess: wrap the go build)
- remix   (instrument: run one toolchain step for the go build)
"""

from typing import Dict

from otelbuild.services.commands import configure, instrument, preprocess, version
from otelbuild.services.commands.base import Handler
from otelbuild.services.runtime.phase import (
    SUBCOMMAND_GO,
    SUBCOMMAND_REMIX,
    SUBCOMMAND_SET,
    SUBCOMMAND_VERSION,
)


def get_default_handlers() -> Dict[str, Handler]:
    return {
        SUBCOMMAND_VERSION: version.print_version,
        SUBCOMMAND_SET: configure.configure,
        SUBCOMMAND_GO: preprocess.preprocess,
        SUBCOMMAND_REMIX: instrument.instrument,
    }
