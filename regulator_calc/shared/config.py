"""Configuration management for the application."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

DEFAULT_STORE_PATH = Path.home() / ".regulator_calc" / "fields.json"


@dataclass
class StoreConfig:
    """Configuration for the field value store."""

    backend: str = "json"
    path: Path = DEFAULT_STORE_PATH
    key_prefix: str = "mc34063:"

    # Redis
    redis_host: str = "localhost"
    redis_port: int = 6379
    redis_db: int = 0
    redis_password: Optional[str] = None


@dataclass
class LoggingConfig:
    """Configuration for application logging."""

    debug: bool = False
    log_file: Optional[Path] = None

    @property
    def level(self) -> int:
        return logging.DEBUG if self.debug else logging.INFO


@dataclass
class AppConfig:
    """Application configuration."""

    store: StoreConfig = field(default_factory=StoreConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def from_env(cls, env_file: Optional[str] = None) -> AppConfig:
        """Load configuration from environment variables."""
        load_dotenv(env_file or ".env")

        store = StoreConfig(
            backend=os.getenv("FIELD_STORE_BACKEND", "json").strip().lower(),
            path=Path(os.getenv("FIELD_STORE_PATH", str(DEFAULT_STORE_PATH))).expanduser(),
            key_prefix=os.getenv("FIELD_STORE_PREFIX", "mc34063:"),
            redis_host=os.getenv("REDIS_HOST", "localhost"),
            redis_port=int(os.getenv("REDIS_PORT", "6379")),
            redis_db=int(os.getenv("REDIS_DB", "0")),
            redis_password=os.getenv("REDIS_PASSWORD"),
        )

        log_file = os.getenv("LOG_TO_FILE")
        logging_config = LoggingConfig(
            debug=bool(os.getenv("DEBUG")),
            log_file=Path(log_file).expanduser() if log_file else None,
        )

        return cls(store=store, logging=logging_config)


def configure_logging(config: LoggingConfig) -> None:
    """Install root handlers; file logging is optional."""

    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if config.log_file is not None:
        handlers.append(logging.FileHandler(config.log_file, mode="w"))

    logging.basicConfig(level=config.level, format=LOG_FORMAT, handlers=handlers)

    # Silence noisy third-party loggers
    logging.getLogger("markdown_it").setLevel(logging.WARNING)
