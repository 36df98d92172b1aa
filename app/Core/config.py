from __future__ import annotations

import os
from functools import lru_cache
from dotenv import load_dotenv, find_dotenv

_env_path = find_dotenv(".env") or ".env"
load_dotenv(_env_path, override=False)


class Settings:
    """Central configuration (env driven)."""

    def __init__(self) -> None:
        # Database
        self.database_url: str = os.getenv("DATABASE_URL", "sqlite:///./codeclimb.db")
        self.db_pool_size: int = int(os.getenv("DB_POOL_SIZE", "5"))
        self.db_max_overflow: int = int(os.getenv("DB_MAX_OVERFLOW", "5"))
        self.db_pool_timeout: int = int(os.getenv("DB_POOL_TIMEOUT", "5"))
        self.db_connect_timeout: int = int(os.getenv("DB_CONNECT_TIMEOUT", "5"))
        # Auth
        self.jwt_secret: str = os.getenv("JWT_SECRET", "dev-only-change-me-dev-only-change-me")
        self.jwt_algorithm: str = os.getenv("JWT_ALGORITHM", "HS256")
        self.jwt_expiration_seconds: int = int(os.getenv("JWT_EXPIRATION_SECONDS", "86400"))
        # Catalog / signup defaults
        self.default_template_version: str = os.getenv("DEFAULT_TEMPLATE_VERSION", "neet250.v1")
        self.default_list_name: str = os.getenv("DEFAULT_LIST_NAME", "NeetCode 250")
        self.default_timezone: str = os.getenv("DEFAULT_TIMEZONE", "America/Chicago")
        # App meta
        self.app_name: str = "CodeClimb Backend"
        self.debug: bool = os.getenv("DEBUG", "False").lower() == "true"
        # Cookie configuration
        self.cookie_domain: str | None = os.getenv("COOKIE_DOMAIN") or None
        self.cookie_secure: bool = os.getenv("COOKIE_SECURE", "true").lower() != "false"
        self.cookie_samesite: str = os.getenv("COOKIE_SAMESITE", "lax").capitalize()  # Lax|Strict|None

    @property
    def is_sqlite(self) -> bool:
        return self.database_url.startswith("sqlite")

    def get_database_url(self) -> str:
        return self.database_url


@lru_cache()
def get_settings() -> Settings:
    return Settings()
