from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    ENV: str = "local"
    DB_HOST: str = "db"
    DB_PORT: int = 5432
    DB_USER: str = "postgres"
    DB_PASSWORD: str = "postgres"
    DB_NAME: str = "fitmarket"
    # Full SQLAlchemy URL; wins over the DB_* parts when set (tests use sqlite)
    DB_URL: str | None = None

    # Auth
    SECRET_KEY: str = "dev-secret-change-me"       # set a strong one in prod
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60

    # Object storage
    STORAGE_BACKEND: str = "local"                 # "local" | "supabase"
    STORAGE_ROOT: str = "media"
    STORAGE_PUBLIC_URL: str = "http://localhost:8000/media"
    SUPABASE_URL: str = ""
    SUPABASE_KEY: str = ""

    # Purchases are simulated; this is the fake payment processing time
    PURCHASE_DELAY_SECONDS: float = 2.0

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    @property
    def DATABASE_URL(self) -> str:
        if self.DB_URL:
            return self.DB_URL
        return (
            f"postgresql+psycopg://{self.DB_USER}:{self.DB_PASSWORD}"
            f"@{self.DB_HOST}:{self.DB_PORT}/{self.DB_NAME}"
        )

@lru_cache
def get_settings() -> Settings:
    return Settings()
