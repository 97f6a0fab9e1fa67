from typing import List
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    # Настройки базы данных
    DATABASE_USER: str = "postgres"
    DATABASE_PASSWORD: str = ""
    DATABASE_HOST: str = "localhost"
    DATABASE_PORT: int = 5432
    DATABASE_NAME: str = "membership"
    # Полный URL, если задан, имеет приоритет над DATABASE_* (например, sqlite для локальной отладки)
    DATABASE_URL_OVERRIDE: str | None = None
    SQL_ECHO: bool = False

    # Настройки JWT токенов
    SECRET_KEY: str
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60 * 24 * 7 # 7 дней

    # Бизнес-настройки
    DEFAULT_CURRENCY: str = "USD"
    AFFILIATE_CODE_PREFIX: str = "AFF"
    REVENUE_MONTHS_DEFAULT: int = 12
    TOP_AFFILIATES_DEFAULT: int = 10

    CORS_ORIGINS_STR: str = Field(
        default="http://localhost,http://localhost:3000,http://localhost:5173",
        alias="CORS_ORIGINS",
    )

    @property
    def CORS_ORIGINS(self) -> List[str]:
        return [origin.strip() for origin in self.CORS_ORIGINS_STR.split(',') if origin.strip()]

    @property
    def DATABASE_URL(self) -> str:
        if self.DATABASE_URL_OVERRIDE:
            return self.DATABASE_URL_OVERRIDE
        return f"postgresql+psycopg2://{self.DATABASE_USER}:{self.DATABASE_PASSWORD}@{self.DATABASE_HOST}:{self.DATABASE_PORT}/{self.DATABASE_NAME}"

    model_config = SettingsConfigDict(env_file=".env", populate_by_name=True)

settings = Settings()
