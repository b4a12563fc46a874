"""Default configuration settings"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Annotated

import structlog
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .loggers import REST_FIREBASE_LOGGER

# general
BASE_DIR = Path(__file__).resolve(strict=True).parent
local_dotenv_path = BASE_DIR.parent / ".env"

AUTH_DEBUG_HEADER = "x-firebase-auth-debug"
JSON_SUFFIX = ".json"
RULES_PATH = ".settings/rules"


class DatabaseSettings(BaseSettings):
    """
    Remote database settings
    """

    default_domain: Annotated[
        str,
        Field(
            default="firebaseio.com",
            min_length=1,
            description="Domain appended to bare database ids",
        ),
    ]
    request_timeout: Annotated[
        float,
        Field(
            default=5.0,
            gt=0,
            description="Timeout, in seconds, applied to every request",
        ),
    ]

    model_config = SettingsConfigDict(
        env_prefix="REST_FIREBASE_", env_file=local_dotenv_path, extra="allow"
    )


database = DatabaseSettings()


# Logging
class LogSettings(BaseSettings):
    """
    Settings for loggers
    """

    log_level: int | str = logging.INFO  # client logger level

    model_config = SettingsConfigDict(
        env_prefix="REST_FIREBASE_", env_file=local_dotenv_path, extra="allow"
    )


log = LogSettings()


def setup_logging(level: int | str | None = None) -> logging.Logger:
    """
    Sends the client events (requests, responses, `auth_debug`
    warnings) to `stdout` as JSON lines.

    Only the client's own logger is touched: its level is set to `level`,
    or to `REST_FIREBASE_LOG_LEVEL` when omitted, and it gets a stdout
    handler of its own which does not propagate to the root logger. The
    root logging configuration of the application is left alone.

    Args:
        level (int | str | None): Level name ("DEBUG") or number.

    Returns:
        logging.Logger: The configured client logger.
    """
    level = level if level is not None else log.log_level
    if isinstance(level, str) and level.isdigit():
        level = int(level)
    elif isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            raise ValueError(f"Unknown log level: {level}")

    client_logger = logging.getLogger(REST_FIREBASE_LOGGER)
    client_logger.setLevel(level)
    client_logger.propagate = False
    if not any(
        getattr(handler, "rest_firebase", False)
        for handler in client_logger.handlers
    ):
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter("%(message)s"))
        handler.rest_firebase = True
        client_logger.addHandler(handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    return client_logger
