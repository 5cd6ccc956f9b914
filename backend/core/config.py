"""
Application configuration and constants
"""
import os
import logging
from pathlib import Path
from typing import Mapping, Optional, Tuple

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict

ROOT_DIR = Path(__file__).parent.parent

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

# Invite defaults
DEFAULT_TEMPLATE_KEY = "nikkah-classic-01"
SLUG_LENGTH = 6
MAX_CUSTOM_MESSAGE_LENGTH = 1000

# PDF export: A4 in PostScript points, rendered at PDF_DPI
A4_PAGE_SIZE = (595.28, 841.89)
PDF_DPI = 150.0
PNG_DATA_URI_PREFIX = "data:image/png;base64,"


class Settings(BaseModel):
    """Runtime settings, built once at startup"""
    model_config = ConfigDict(frozen=True)

    mongo_url: str
    db_name: str
    frontend_url: str = "http://localhost:3000"
    cors_origins: Tuple[str, ...] = ()
    port: int = 8000
    log_level: str = "INFO"


def _require(env: Mapping[str, str], name: str) -> str:
    value = env.get(name, '').strip()
    if not value:
        raise RuntimeError(f"Missing required environment variable {name}")
    return value


def load_settings(env: Optional[Mapping[str, str]] = None) -> Settings:
    """Read settings from the environment (and backend/.env if present)"""
    if env is None:
        load_dotenv(ROOT_DIR / '.env')
        env = os.environ

    frontend_url = env.get('FRONTEND_URL', '').strip().rstrip('/') or "http://localhost:3000"
    cors_origins = tuple(
        origin.strip()
        for origin in env.get('CORS_ORIGINS', frontend_url).split(',')
        if origin.strip()
    )

    return Settings(
        mongo_url=_require(env, 'MONGO_URL'),
        db_name=_require(env, 'DB_NAME'),
        frontend_url=frontend_url,
        cors_origins=cors_origins,
        port=_port(env),
        log_level=_log_level(env),
    )


def _port(env: Mapping[str, str]) -> int:
    value = env.get('PORT', '').strip() or '8000'
    try:
        port = int(value)
    except ValueError:
        raise RuntimeError(f"Invalid environment variable PORT: {value!r} is not an integer")
    if not 0 < port < 65536:
        raise RuntimeError(f"Invalid environment variable PORT: {port} is out of range")
    return port


def _log_level(env: Mapping[str, str]) -> str:
    value = env.get('LOG_LEVEL', '').strip().upper() or 'INFO'
    # getLevelName maps known names to their numeric level
    if not isinstance(logging.getLevelName(value), int):
        raise RuntimeError(f"Invalid environment variable LOG_LEVEL: {value!r} is not a logging level")
    return value


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(level=settings.log_level, format=LOG_FORMAT)
