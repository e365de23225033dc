import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)

STORAGE_BACKENDS = ("file", "postgres", "memory")
DEFAULT_DATA_PATH = Path("~/.shortsided/round.json")
DEFAULT_STORAGE_KEY = "@golf_round_data"


@dataclass(frozen=True)
class Settings:
    storage_backend: str
    data_path: Path
    database_url: Optional[str]
    storage_key: str
    log_level: str
    host: str
    port: int


def _storage_backend_from_env() -> str:
    value = os.getenv("SHORTSIDED_STORAGE", "file").strip().lower()
    if value not in STORAGE_BACKENDS:
        logger.warning("Ignoring SHORTSIDED_STORAGE=%s (expected one of %s)", value, STORAGE_BACKENDS)
        return "file"
    return value


def _port_from_env() -> int:
    for key in ("APP_PORT", "PORT"):
        value = os.getenv(key)
        if value:
            try:
                return int(value)
            except ValueError:
                logger.warning("Ignoring %s=%s (not an integer)", key, value)
    return 8000


def load_settings() -> Settings:
    return Settings(
        storage_backend=_storage_backend_from_env(),
        data_path=Path(os.getenv("SHORTSIDED_DATA_PATH", str(DEFAULT_DATA_PATH))).expanduser(),
        database_url=os.getenv("DATABASE_URL") or None,
        storage_key=os.getenv("SHORTSIDED_STORAGE_KEY", DEFAULT_STORAGE_KEY),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        host=os.getenv("APP_HOST", "127.0.0.1"),
        port=_port_from_env(),
    )


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
