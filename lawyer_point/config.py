# lawyer_point/config.py

from functools import lru_cache
from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    database_url: str = Field(default="sqlite:///./lawyer_point.db", alias="DATABASE_URL")
    access_token_secret: str = Field(default="change-me-later", alias="ACCESS_TOKEN")
    access_token_expire_minutes: int = Field(default=60, alias="ACCESS_TOKEN_EXPIRE_MINUTES")
    stripe_secret_key: str = Field(default="", alias="STRIPE_SECRET_KEY")
    payment_currency: str = Field(default="usd", alias="PAYMENT_CURRENCY")
    allowed_origins: str = Field(default="*", alias="ALLOWED_ORIGINS")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    port: int = Field(default=5000, alias="PORT")

    model_config = SettingsConfigDict(env_file=".env", extra="ignore", populate_by_name=True)

    @property
    def allowed_origins_list(self) -> List[str]:
        return [origin.strip() for origin in self.allowed_origins.split(",") if origin.strip()]


@lru_cache
def get_settings() -> Settings:
    return Settings()
