import os
from dotenv import load_dotenv
from pathlib import Path

# Build paths inside the project like this: BASE_DIR / 'subdir'.
# This makes the path OS-independent.
BASE_DIR = Path(__file__).resolve().parent.parent.parent
ENV_PATH = BASE_DIR / ".env"

load_dotenv(dotenv_path=ENV_PATH)


def _as_bool(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")


class Settings:
    """
    A class to hold all application settings.
    It reads settings from environment variables and .env file.
    """
    # --- Project Settings ---
    PROJECT_NAME: str = os.getenv("PROJECT_NAME", "Device Manager API")
    VERSION: str = "0.1.0"
    API_PREFIX: str = os.getenv("API_PREFIX", "/api")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()
    CORS_ORIGINS: list[str] = [
        origin.strip() for origin in os.getenv("CORS_ORIGINS", "*").split(",") if origin.strip()
    ]

    # --- Database Settings ---
    DATABASE_URL: str = os.getenv("DATABASE_URL", "")
    DB_ECHO: bool = _as_bool(os.getenv("DB_ECHO", "false"))
    CREATE_TABLES_ON_STARTUP: bool = _as_bool(os.getenv("CREATE_TABLES_ON_STARTUP", "true"))
    SEED_ON_STARTUP: bool = _as_bool(os.getenv("SEED_ON_STARTUP", "false"))

    # --- Pagination Settings ---
    DEFAULT_PAGE_SIZE: int = int(os.getenv("DEFAULT_PAGE_SIZE", "3"))
    MAX_PAGE_SIZE: int = int(os.getenv("MAX_PAGE_SIZE", "1000"))

    @property
    def async_database_url(self) -> str:
        """DATABASE_URL with an async driver, asyncpg for plain postgresql URLs."""
        if self.DATABASE_URL.startswith("postgresql://"):
            return self.DATABASE_URL.replace("postgresql://", "postgresql+asyncpg://", 1)
        return self.DATABASE_URL

settings = Settings()

if not settings.DATABASE_URL:
    raise ValueError("DATABASE_URL environment variable is not set.")
