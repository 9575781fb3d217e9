"""CLI settings — flags and environment variables in one frozen object.

Priority chain (highest to lowest):
  1. Init kwargs  — CLI flags passed by Click
  2. Env vars     — ``FETCHFILE_*`` prefix
  3. Code defaults

Flags left unset on the command line are dropped before construction so
that an environment variable can still switch them on.
"""

from __future__ import annotations

from typing import Any

from pydantic_settings import BaseSettings, PydanticBaseSettingsSource


class FetchSettings(BaseSettings):
    """Unified settings for the fetchfile CLI.

    Attributes:
        atomic: Write config files via temp-file-then-rename. None defers
            to each config type's ``atomic_save`` class variable.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "FETCHFILE_",
    }

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False
    atomic: bool | None = None

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Only CLI kwargs and environment variables; no dotenv or secrets."""
        return (init_settings, env_settings)

    @classmethod
    def from_cli(cls, **cli_flags: Any) -> FetchSettings:
        """Construct settings from a CLI invocation.

        Flags that are falsy or None were not given on the command line
        and are left to the environment and code defaults.
        """
        given = {key: value for key, value in cli_flags.items() if value}
        return cls(**given)
