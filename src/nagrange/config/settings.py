"""Unified settings — CLI flags and env vars in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — CLI flags passed by Click
  2. Env vars     — ``NAGRANGE_*`` prefix
  3. Code defaults

No configuration file is read; range specs always arrive as arguments.
"""

from __future__ import annotations

from typing import Any

from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_PREFIX = "NAGRANGE_"


class RangeSettings(BaseSettings):
    """Unified settings for the nagrange CLI.

    Stored on the :class:`~nagrange.commands._context.AppContext` at the
    CLI root and frozen after construction.
    """

    model_config = SettingsConfigDict(frozen=True, env_prefix=ENV_PREFIX)

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    @classmethod
    def from_cli(cls, **cli_flags: Any) -> RangeSettings:
        """Construct settings from a CLI invocation.

        Click passes every flag, including the ones the user did not set.
        Unset (False/None) flags are dropped so env vars can still apply.
        """
        overrides = {key: value for key, value in cli_flags.items() if value}
        return cls(**overrides)
