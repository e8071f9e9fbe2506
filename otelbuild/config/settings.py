from __future__ import annotations

"""otelbuild/config/settings.py

Tool configuration using environment-driven settings.

This module centralizes:
- the tool version reported by `version` and the fatal report
- the temporary workspace root shared by the go/remix phases
- the Go binary used by the preprocess phase
- file names of the phase log and the persisted build configuration

Every field can be overridden with an ``OTEL_``-prefixed environment
variable, which is also how the preprocess phase hands the workspace root
down to its remix children.
"""
from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

from otelbuild import __version__


class Settings(BaseSettings):
  tool_version: str = __version__

  # Shared scratch space, relative to the working directory by default
  temp_build_dir: str = ".otel-build"

  # Toolchain
  go_binary: str = "go"

  log_file_name: str = "debug.log"
  config_file_name: str = "conf.json"

  model_config = SettingsConfigDict(
      env_prefix="OTEL_", env_file=".env", env_file_encoding="utf-8", extra="ignore"
  )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return a cached Settings instance."""
    return Settings()
