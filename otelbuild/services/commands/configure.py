from __future__ import annotations

"""otelbuild/services/commands/configure.py

`set` subcommand: update the persisted build configuration.

Flags follow the go tool convention of a single dash:

    otel set -verbose -rule=custom.json -disable=net/http

Only flags given on the command line change; the rest of the existing
configuration is kept.
"""

import argparse
import logging
from pathlib import Path
from typing import List

from otelbuild.schemas import BuildConfig, load_build_config, save_build_config
from otelbuild.services.diagnostics.errors import DiagnosticError
from otelbuild.services.runtime.context import RunContext

logger = logging.getLogger(__name__)


class _FlagParser(argparse.ArgumentParser):
    def error(self, message: str):
        raise DiagnosticError(f"invalid flags: {message}")


def _build_parser() -> argparse.ArgumentParser:
    parser = _FlagParser(prog="set", add_help=False)
    parser.add_argument("-verbose", action="store_true", default=None)
    parser.add_argument("-debug", action="store_true", default=None)
    parser.add_argument("-rule", dest="rule_json_path", default=None)
    parser.add_argument("-disable", dest="disable_rules", default=None)
    return parser


def parse_flags(args: List[str], base: BuildConfig) -> BuildConfig:
    """Merge ``args`` into ``base`` and return the resulting configuration."""
    namespace = _build_parser().parse_args(args)
    updates = {key: value for key, value in vars(namespace).items() if value is not None}

    rule_path = updates.get("rule_json_path")
    if rule_path:
        path = Path(rule_path).expanduser()
        if not path.is_file():
            raise DiagnosticError("rule file does not exist").with_detail("rule", rule_path)
        updates["rule_json_path"] = str(path.absolute())

    return base.model_copy(update=updates)


def configure(ctx: RunContext) -> None:
    path = ctx.workspace.config_path
    config = parse_flags(ctx.args, load_build_config(path))
    save_build_config(path, config)
    logger.info("Configuration written to %s", path)
    print(f"Configured in {path}")
