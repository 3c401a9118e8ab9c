# orders_api/config.py

from typing import Optional
from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    DATABASE_URL: str = "sqlite+aiosqlite:///./orders.db"

    JWT_SECRET: str = "change_me"
    JWT_TTL: Optional[int] = None           # секунды, по умолчанию 7 дней
    JWT_AUDIENCE: str = "orders-api"
    JWT_ISSUER: str = "orders-api"

    # True - "не найдено" при update/delete отдаётся как 400 (старое поведение)
    MASK_NOT_FOUND_ON_WRITE: bool = False

    LOG_DIR: str = "orders_api/log"
    LOG_PRINT: str = "1"

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore"
    )

settings = Settings()
