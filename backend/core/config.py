import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path


def _env_bool(name: str, default: bool) -> bool:
    v = (os.environ.get(name) or "").strip().lower()
    if not v:
        return default
    if v in ("true", "1", "yes", "on"):
        return True
    if v in ("false", "0", "no", "off"):
        return False
    return default


def _default_database_url() -> str:
    """Default DB path: backend/data/sports_prediction.db, directory created on demand."""
    data_dir = Path(__file__).resolve().parent.parent / "data"
    data_dir.mkdir(parents=True, exist_ok=True)
    db_path = (data_dir / "sports_prediction.db").resolve()
    return f"sqlite+aiosqlite:///{db_path.as_posix()}"


@dataclass
class Settings:
    """Application settings loaded from environment variables with safe defaults."""

    app_name: str = "Sports Prediction API"
    env: str = "development"
    database_url: str = ""  # set from from_env
    log_level: str = "INFO"
    frontend_url: str = "http://localhost:3000"
    seed_on_startup: bool = True
    host: str = "127.0.0.1"
    port: int = 3001

    @classmethod
    def from_env(cls) -> "Settings":
        """Create Settings from environment variables."""
        db_url = os.getenv("DATABASE_URL") or _default_database_url()
        return cls(
            app_name=os.getenv("APP_NAME", cls.app_name),
            env=os.getenv("ENV", cls.env),
            database_url=db_url,
            log_level=os.getenv("LOG_LEVEL", cls.log_level),
            frontend_url=os.getenv("FRONTEND_URL", cls.frontend_url),
            seed_on_startup=_env_bool("SEED_ON_STARTUP", cls.seed_on_startup),
            host=os.getenv("HOST", cls.host),
            port=int(os.getenv("PORT", str(cls.port))),
        )


@lru_cache
def get_settings() -> Settings:
    """Return a cached Settings instance."""
    return Settings.from_env()
