import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv

load_dotenv()


def _flag(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


def _required(name: str) -> str:
    value = os.getenv(name)
    if not value:
        raise RuntimeError(f"{name} must be set")
    return value


def _database_url() -> str:
    url = os.getenv("DATABASE_URL")
    if url:
        return url
    return "mysql+aiomysql://{user}:{password}@{host}:{port}/{name}".format(
        user=os.getenv("DB_USER", "app"),
        password=os.getenv("DB_PASSWORD", "secret"),
        host=os.getenv("DB_HOST", "localhost"),
        port=os.getenv("DB_PORT", "3306"),
        name=os.getenv("DB_NAME", "appdb"),
    )


@dataclass(frozen=True)
class Settings:
    api_key: str | None
    access_secret: str
    refresh_secret: str
    access_token_ttl: int
    refresh_token_ttl: int
    database_url: str
    todo_ownership_check: bool
    log_level: str
    log_json: bool

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            api_key=os.getenv("API_KEY"),
            access_secret=_required("ACCESS_SECRET_KEY"),
            refresh_secret=_required("REFRESH_SECRET_KEY"),
            access_token_ttl=int(os.getenv("ACCESS_TOKEN_TTL_SECONDS", "60")),
            refresh_token_ttl=int(os.getenv("REFRESH_TOKEN_TTL_SECONDS", str(7 * 24 * 3600))),
            database_url=_database_url(),
            todo_ownership_check=_flag("TODO_OWNERSHIP_CHECK", True),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
            log_json=_flag("LOG_JSON", False),
        )


@lru_cache
def get_settings() -> Settings:
    return Settings.from_env()
