from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List

BOOTSTRAP_ENVS = {"local", "test"}

class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )

    APP_ENV: str = "local"
    APP_NAME: str = "ra-json-server"
    API_PREFIX: str = "/api"

    DATABASE_URL: str = "sqlite+pysqlite:///./ra_server.db"

    CORS_ORIGINS: str = "*"
    LOG_LEVEL: str = "INFO"

    # Local sqlite convenience, honoured only in BOOTSTRAP_ENVS; real deployments run `alembic upgrade head`.
    AUTO_CREATE_SCHEMA: bool = False
    DEMO_SEED_ENABLED: bool = False

    @property
    def bootstrap_allowed(self) -> bool:
        return self.APP_ENV.strip().lower() in BOOTSTRAP_ENVS

    @property
    def cors_origins_list(self) -> List[str]:
        return [o.strip() for o in self.CORS_ORIGINS.split(",") if o.strip()]

settings = Settings()
