"""Environment-driven configuration, loaded from the process environment and .env."""

from pathlib import Path
from typing import Literal

from pydantic import SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

BASE_DIR = Path(__file__).resolve().parent.parent


class Environment(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=str(BASE_DIR / ".env"),
        env_ignore_empty=True,
        extra="ignore",
    )

    DEBUG: bool = False
    SECRET_KEY: SecretStr = SecretStr("insecure-dev-key-change-in-production")
    ALLOWED_HOSTS: str = "localhost,127.0.0.1"

    # Database
    DB_ENGINE: Literal["postgresql", "sqlite3"] = "postgresql"
    DB_NAME: str = "events"
    DB_USER: str = "events"
    DB_PASSWORD: SecretStr = SecretStr("")
    DB_HOST: str = "localhost"
    DB_PORT: int = 5432
    DB_CONN_MAX_AGE: int = 60  # seconds a connection is kept for reuse

    # Registration workflow
    EVENTS_LOCK_TIMEOUT_MS: int = 5000  # 0 waits forever

    LOG_LEVEL: str = "INFO"

    # Test suite: "postgresql" runs against DB_* instead of in-memory SQLite
    TEST_DB_ENGINE: Literal["postgresql", "sqlite3"] = "sqlite3"

    @property
    def allowed_hosts(self) -> list[str]:
        return [host.strip() for host in self.ALLOWED_HOSTS.split(",") if host.strip()]

    @property
    def database(self) -> dict:
        if self.DB_ENGINE == "sqlite3":
            return {
                "ENGINE": "django.db.backends.sqlite3",
                "NAME": str(BASE_DIR / f"{self.DB_NAME}.sqlite3"),
            }
        return self.postgresql_database

    @property
    def postgresql_database(self) -> dict:
        return {
            "ENGINE": "django.db.backends.postgresql",
            "NAME": self.DB_NAME,
            "USER": self.DB_USER,
            "PASSWORD": self.DB_PASSWORD.get_secret_value(),
            "HOST": self.DB_HOST,
            "PORT": self.DB_PORT,
            "CONN_MAX_AGE": self.DB_CONN_MAX_AGE,
            "CONN_HEALTH_CHECKS": True,
        }


env = Environment()
