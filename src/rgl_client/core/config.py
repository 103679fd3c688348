from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="RGL_", env_file=".env", env_file_encoding="utf-8")

    # upstream
    base_url: str = "https://api.rgl.gg/v0"
    user_agent: str = "rgl-client/1.0"

    # pacing: `rate_limit_burst` requests may go out back to back, after that
    # one token accrues every `rate_limit_interval_s` seconds.
    rate_limit_burst: int = Field(default=1, ge=1)
    rate_limit_interval_s: float = Field(default=15.0, gt=0.0)

    request_timeout_s: float = Field(default=15.0, gt=0.0)
    wait_timeout_s: float | None = Field(default=None, gt=0.0)

    # logging
    log_level: str = "WARNING"
    log_json: bool = False


settings = Settings()
