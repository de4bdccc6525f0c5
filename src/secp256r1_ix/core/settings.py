"""Runtime settings for the secp256r1 instruction tooling.

Settings are loaded from environment variables (or an ``.env`` file) with
sensible defaults. The library itself is pure; only the command-line tool
reads these values to configure logging.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings loaded from ``SECP256R1_*`` environment variables."""

    app_name: str = Field(default="secp256r1-ix", alias="SECP256R1_APP_NAME")
    log_level: str = Field(default="WARNING", alias="SECP256R1_LOG_LEVEL")
    debug: bool = Field(default=False, alias="SECP256R1_DEBUG")

    model_config = SettingsConfigDict(
        env_file=".env",
        validate_assignment=True,
        extra="ignore",
    )

    @property
    def effective_log_level(self) -> str:
        """Return the log level name, forcing DEBUG when debug mode is on.

        Returns:
            Upper-cased logging level name
        """
        if self.debug:
            return "DEBUG"
        return self.log_level.upper()


settings = Settings()
