"""Runtime settings — explicit values passed by the embedding application.

slackfield reads no environment variables and no config files. Values come
only from init kwargs, falling back to code defaults.
"""

from __future__ import annotations

from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from slackfield.config.logging import configure_logging


class SlackFieldSettings(BaseSettings):
    """Settings for applications embedding slackfield, frozen after construction."""

    model_config = {"frozen": True}

    verbose: bool = False
    log_json: bool = False

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Keep init kwargs only; env, dotenv and secrets are not consulted."""
        return (init_settings,)

    def configure_logging(self) -> None:
        """Apply the logging settings via :func:`configure_logging`."""
        configure_logging(verbose=self.verbose, log_json=self.log_json)
