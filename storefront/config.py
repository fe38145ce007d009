import os
import re
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv


@dataclass
class AppConfig:
    database_url: str
    jwt_key: str
    token_expiry: str
    token_ttl_seconds: int
    log_level: str
    page_size: int
    max_page_size: int
    description_length: int
    debug: bool = False
    host: str = "0.0.0.0"
    port: int = 5000


_DURATION_RE = re.compile(r"^\s*(\d+)\s*([smhd]?)\s*$")
_DURATION_UNITS = {"": 1, "s": 1, "m": 60, "h": 3600, "d": 86400}


def parse_duration(value: Optional[str]) -> int:
    """Convert '24h', '30m', '90s', '2d' or a bare number of seconds into seconds."""
    m = _DURATION_RE.match(value or "")
    if not m:
        raise ValueError(f"Invalid duration: {value!r}")
    seconds = int(m.group(1)) * _DURATION_UNITS[m.group(2)]
    if seconds <= 0:
        raise ValueError("Token expiry must be > 0")
    return seconds


def _positive_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer") from None
    if value <= 0:
        raise ValueError(f"{name} must be > 0")
    return value


def _flag(name: str) -> bool:
    return (os.getenv(name) or "").strip().lower() in {"1", "true", "yes", "on"}


def load_env(dotenv_path: Optional[str] = None) -> AppConfig:
    # .env is a fallback: variables already in the environment win
    load_dotenv(dotenv_path, override=False)
    token_expiry = os.getenv("DEFAULT_TOKEN_EXPIRY_TIME", "24h")
    page_size = _positive_int("PAGE_SIZE", 20)
    max_page_size = _positive_int("MAX_PAGE_SIZE", 100)
    if page_size > max_page_size:
        raise ValueError("PAGE_SIZE must not exceed MAX_PAGE_SIZE")
    return AppConfig(
        database_url=os.getenv("DATABASE_URL", "sqlite:///data/storefront.db"),
        jwt_key=os.getenv("JWT_KEY") or os.getenv("SECRET_KEY", "dev_secret"),
        token_expiry=token_expiry,
        token_ttl_seconds=parse_duration(token_expiry),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        page_size=page_size,
        max_page_size=max_page_size,
        description_length=_positive_int("DESCRIPTION_LENGTH", 200),
        debug=_flag("DEBUG"),
        host=os.getenv("HOST", "0.0.0.0"),
        port=_positive_int("PORT", 5000),
    )
