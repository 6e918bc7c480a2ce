"""Runtime settings — env-driven.

Reads ``FEATUREMODEL_*`` environment variables and an optional ``.env``
file. Only the command line consumes these; the models take no settings.
"""

from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict


class FeatureModelSettings(BaseSettings):
    """Settings with environment variable overrides.

    Examples
    --------
    Override via environment::

        export FEATUREMODEL_LOG_LEVEL=DEBUG
        export FEATUREMODEL_ENVIRONMENT=ci
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="FEATUREMODEL_",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    environment: str = "development"
    log_level: str = "WARNING"
    debug: bool = False

    @property
    def effective_log_level(self) -> str:
        """DEBUG when ``debug`` is set, otherwise ``log_level`` upper-cased."""
        return "DEBUG" if self.debug else self.log_level.upper()


# Module-level singleton — import as `from featuremodel.config import settings`
settings = FeatureModelSettings()
