#!filepath: src/wppages/utils/logger.py
from __future__ import annotations

import logging
from dataclasses import dataclass
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import List, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from rich.console import Console
from rich.logging import RichHandler

# Library modules only call logging.getLogger; handlers are installed by the CLI.
PACKAGE_LOGGER = "wppages"


class LoggingSettings(BaseSettings):
    """Command line logging, read from ``WPPAGES_*`` variables.

    Attributes:
        log_dir: Directory of the rotating log file.
        console_level: Level shown on stderr.
        log_to_file: Install the rotating file handler.
        file_name: Log file name inside ``log_dir``.
        max_bytes: Rotation threshold.
        backup_count: Rotated files kept.
        http_debug: Let urllib3 connection logs through.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
        env_prefix="WPPAGES_",
        populate_by_name=True,
    )

    log_dir: Path = Field(default=Path("data/logs"), validation_alias="WPPAGES_LOG_DIR")
    console_level: str = Field(default="WARNING", validation_alias="WPPAGES_CONSOLE_LEVEL")
    log_to_file: bool = Field(default=False, validation_alias="WPPAGES_LOG_TO_FILE")
    file_name: str = Field(default="wppages.log", validation_alias="WPPAGES_LOG_FILE")
    max_bytes: int = Field(default=1_000_000, validation_alias="WPPAGES_LOG_MAX_BYTES")
    backup_count: int = Field(default=3, validation_alias="WPPAGES_LOG_BACKUP_COUNT")
    http_debug: bool = Field(default=False, validation_alias="WPPAGES_HTTP_DEBUG")


@dataclass(slots=True)
class _Runtime:
    handlers: Optional[List[logging.Handler]] = None


_runtime: _Runtime = _Runtime()


def _level(name: str, default: int) -> int:
    value = logging.getLevelName(str(name).upper())
    return value if isinstance(value, int) else default


def configure_logging(
    *, settings: Optional[LoggingSettings] = None, verbose: bool = False
) -> logging.Logger:
    """Attach stderr and optional file handlers to the ``wppages`` logger.

    Only the package logger is touched, so embedding applications keep their
    own root configuration. Calling it again replaces the previous handlers.

    Args:
        settings: Override, read from the environment when omitted.
        verbose: Force DEBUG on the console, request URLs included.

    Returns:
        logging.Logger: The package logger.
    """
    s = settings or LoggingSettings()
    pkg = logging.getLogger(PACKAGE_LOGGER)

    for old in _runtime.handlers or []:
        pkg.removeHandler(old)
        old.close()

    console = RichHandler(
        console=Console(stderr=True),
        markup=False,
        show_path=False,
        log_time_format="[%X]",
    )
    console.setLevel(logging.DEBUG if verbose else _level(s.console_level, logging.WARNING))
    handlers: List[logging.Handler] = [console]

    if s.log_to_file:
        s.log_dir.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            filename=str(s.log_dir / s.file_name),
            maxBytes=int(s.max_bytes),
            backupCount=int(s.backup_count),
            encoding="utf_8",
        )
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)s | %(name)s | %(message)s")
        )
        handlers.append(file_handler)

    for h in handlers:
        pkg.addHandler(h)
    pkg.setLevel(logging.DEBUG)
    pkg.propagate = False

    logging.getLogger("urllib3").setLevel(logging.DEBUG if s.http_debug else logging.WARNING)

    _runtime.handlers = handlers
    return pkg
