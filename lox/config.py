"""
Runtime settings for the Lox command line tool.

Defaults can be overridden from the environment (LOX_LOG_LEVEL,
LOX_PROMPT) and then from command line flags.
"""

import os
from dataclasses import dataclass, replace
from typing import Mapping, Optional

# sysexits.h codes used by the tool
EX_USAGE = 64
EX_DATAERR = 65
EX_NOINPUT = 66


@dataclass(frozen=True)
class LoxConfig:
    """Settings for one run of the tool."""
    log_level: str = "WARNING"
    prompt: str = "> "
    echo_tokens: bool = True
    encoding: str = "utf-8"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "LoxConfig":
        env = os.environ if environ is None else environ
        config = cls()
        if env.get("LOX_LOG_LEVEL"):
            config = replace(config, log_level=env["LOX_LOG_LEVEL"].upper())
        if "LOX_PROMPT" in env:
            config = replace(config, prompt=env["LOX_PROMPT"])
        return config

    def with_overrides(self, **overrides) -> "LoxConfig":
        """Return a copy with every non-None override applied."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **changes)
