from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List

# solo para desarrollo, en producción SIEMPRE definir SECRET_KEY
DEV_SECRET_KEY = "change-me"


class Settings(BaseSettings):
    SECRET_KEY: str = DEV_SECRET_KEY
    ACCESS_TOKEN_EXPIRE_MIN: int = 1440   # 24h
    DATABASE_URL: str = "sqlite+aiosqlite:///./brands.db"

    ALLOWED_ORIGINS: str = "http://localhost:3000"

    # ⏱️ rate limit de ventana fija por IP (100 req / 15 min)
    RATE_LIMIT_ENABLED: bool = True
    RATE_LIMIT_REQUESTS: int = 100
    RATE_LIMIT_WINDOW_SECONDS: int = 900

    # admin + marcas de ejemplo en el primer arranque
    SEED_DATA: bool = True
    LOG_LEVEL: str = "info"

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    @property
    def allow_origins_list(self) -> List[str]:
        if self.ALLOWED_ORIGINS == "*":
            return ["*"]
        return [o.strip() for o in self.ALLOWED_ORIGINS.split(",") if o.strip()]

    @property
    def uses_dev_secret(self) -> bool:
        return self.SECRET_KEY == DEV_SECRET_KEY

    @property
    def rate_limit(self) -> str:
        return f"{self.RATE_LIMIT_REQUESTS}/{self.RATE_LIMIT_WINDOW_SECONDS} seconds"
