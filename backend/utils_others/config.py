import logging
import os
from dataclasses import dataclass, field
from typing import List, Optional

from dotenv import load_dotenv

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

DEV_ORIGINS = [
    "http://localhost:3000",
    "http://localhost:8000",
    "http://127.0.0.1:3000",
    "http://127.0.0.1:8000",
]

@dataclass
class Settings:
    log_level: int = logging.INFO
    logger_name: str = "notification"
    allowed_origins: List[str] = field(default_factory=lambda: list(DEV_ORIGINS))
    host: str = "0.0.0.0"
    port: int = 8000

def parse_log_level(value: Optional[str]) -> int:
    if not value:
        return logging.INFO
    level = logging.getLevelName(value.strip().upper())
    return level if isinstance(level, int) else logging.INFO

def parse_port(value: Optional[str], default: int = 8000) -> int:
    try:
        port = int(value) if value else default
    except ValueError:
        return default
    return port if 0 < port < 65536 else default

def validate_origins(origins_list: List[str]) -> List[str]:
    """Drop blank entries and anything that is not an http(s) origin."""
    validated_origins = []
    for origin in origins_list:
        origin = origin.strip()
        if not origin:
            continue
        if not origin.startswith(("http://", "https://")):
            logging.getLogger(__name__).warning("Ignoring invalid CORS origin: %s", origin)
            continue
        validated_origins.append(origin)
    return validated_origins

def load_settings() -> Settings:
    """
    Builds Settings from the environment. A local .env file is honoured but
    never overrides variables already set in the process.
    """
    load_dotenv()

    environment = os.getenv("ENVIRONMENT")
    raw_origins = os.getenv("ALLOWED_ORIGINS")
    if raw_origins:
        origins = validate_origins(raw_origins.split(","))
        if not origins:
            logging.getLogger(__name__).warning("No valid origins configured, using localhost fallback")
            origins = ["http://localhost:3000"]
    elif environment == "production":
        raise RuntimeError("ALLOWED_ORIGINS must be set when ENVIRONMENT=production")
    else:
        origins = list(DEV_ORIGINS)

    return Settings(
        log_level=parse_log_level(os.getenv("LOG_LEVEL")),
        logger_name=os.getenv("NOTIFICATION_LOGGER") or "notification",
        allowed_origins=origins,
        host=os.getenv("HOST") or "0.0.0.0",
        port=parse_port(os.getenv("PORT")),
    )

def configure_logging(level: int = logging.INFO) -> None:
    logging.basicConfig(level=level, format=LOG_FORMAT)
