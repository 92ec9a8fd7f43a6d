"""Environment-driven client settings."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .command import DEFAULT_EXECUTABLE, DEFAULT_LOG_LEVEL

CLI_ENV = "CODEX_CLI"
LOG_LEVEL_ENV = "CODEX_LOG_LEVEL"


@dataclass
class ClientConfig:
    executable_path: str = DEFAULT_EXECUTABLE
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ClientConfig":
        env = os.environ if environ is None else environ
        return cls(
            executable_path=env.get(CLI_ENV) or DEFAULT_EXECUTABLE,
            log_level=env.get(LOG_LEVEL_ENV) or DEFAULT_LOG_LEVEL,
        )
