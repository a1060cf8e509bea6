import os
from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv, find_dotenv

# Prefer loading environment variables from a .env file when one exists
_env_path = find_dotenv(usecwd=True)
if _env_path:
    load_dotenv(_env_path, override=False)

BASE_DIR = Path(__file__).resolve().parents[1]
APP_DIR = Path(__file__).resolve().parent


def _flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in {"1", "true", "yes", "on"}


class Settings:
    DATABASE_URL: str = os.getenv("DATABASE_URL")
    # Single operator secret; ADMIN_PASSWORD_HASH wins when both are set
    ADMIN_PASSWORD: str = os.getenv("ADMIN_PASSWORD")
    ADMIN_PASSWORD_HASH: str = os.getenv("ADMIN_PASSWORD_HASH")
    SECRET_KEY: str = os.getenv("SECRET_KEY")
    ALGORITHM: str = os.getenv("ALGORITHM", "HS256")
    # Default to one day of admin session
    ADMIN_SESSION_EXPIRE_MINUTES: int = int(os.getenv("ADMIN_SESSION_EXPIRE_MINUTES", str(24 * 60)))
    ADMIN_COOKIE_NAME: str = os.getenv("ADMIN_COOKIE_NAME", "admin_session")
    ADMIN_COOKIE_SECURE: bool = _flag("ADMIN_COOKIE_SECURE", "0")
    UPLOAD_DIR: str = os.getenv("UPLOAD_DIR", str(BASE_DIR / "uploads"))
    MAX_UPLOAD_BYTES: int = int(os.getenv("MAX_UPLOAD_BYTES", str(50 * 1024 * 1024)))
    TRANSLATIONS_FILE: str = os.getenv("TRANSLATIONS_FILE", str(APP_DIR / "data" / "translations.json"))
    CORS_ORIGINS: str = os.getenv("CORS_ORIGINS", "*")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()
    SETTINGS_REQUIRE_ADMIN: bool = _flag("SETTINGS_REQUIRE_ADMIN", "1")

    @property
    def cors_origins(self):
        return [o.strip() for o in (self.CORS_ORIGINS or "").split(",") if o.strip()]


@lru_cache
def get_settings():
    return Settings()
