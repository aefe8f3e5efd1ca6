from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="UNITCONV_")

    app_name: str = "Đơn vị Vật Lý"
    debug: bool = True
    cors_origins: list[str] = ["http://localhost:3000", "http://localhost:5173"]
    number_locale: str = "vi-VN"
    strict_units: bool = False  # reject unknown unit keys instead of falling back
    log_level: str = "INFO"


settings = Settings()
