from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    # sportsdata
    sportsdata_api_key: str | None = Field(
        default=None,
        repr=False,
        validation_alias="SPORTSDATA_API_KEY",
    )
    sportsdata_base_url: str = "http://api.sportsdatallc.org"
    sportsdata_access_level: str = "t"
    sportsdata_version: str = "1"

    # http
    http_timeout_s: float = 30.0
    http_connect_timeout_s: float = 10.0

    log_level: str = "WARNING"

    # -----------------------------
    # Required-key helpers
    # -----------------------------

    def require_sportsdata_key(self) -> str:
        if not self.sportsdata_api_key:
            raise RuntimeError(
                "SPORTSDATA_API_KEY is not set. Set it in the environment or .env file."
            )
        return self.sportsdata_api_key


settings = Settings()
