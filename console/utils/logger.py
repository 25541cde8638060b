"""
Logging for the admin console.

Every module logs through its own ConsoleLogger(__name__). Records are written
in color with the host name of the console process, and remote API tokens
(bearer headers, access/refresh token fields) are masked before any handler
sees the message.
"""

import logging
import os
import re
from typing import Optional

import coloredlogs

LOG_LEVEL_ENV = "CONSOLE_LOG_LEVEL"

LOG_LEVELS = {
    "CRITICAL": logging.CRITICAL,
    "ERROR": logging.ERROR,
    "WARNING": logging.WARNING,
    "INFO": logging.INFO,
    "DEBUG": logging.DEBUG
}

TOKEN_PATTERN = re.compile(
    r"(Bearer\s+|(?:access|refresh)_?token['\"]?\s*[:=]\s*['\"]?)[^\s'\",}&]+",
    re.IGNORECASE,
)
MASK = "***"

COLORED_FORMATTER = coloredlogs.ColoredFormatter(
    fmt="[%(asctime)s] [%(hostname)s] [%(name)s] [%(levelname)s] %(message)s",
    level_styles={
        'debug': {'color': 'white'},
        'info': {'color': 'green'},
        'warning': {'color': 'yellow', 'bright': True},
        'error': {'color': 'red', 'bold': True, 'bright': True},
        'critical': {'color': 'black', 'bold': True, 'background': 'red'}
    },
    field_styles={
        'asctime': {'color': 'white'},
        'hostname': {'color': 'magenta'},
        'name': {'color': 'blue', 'bright': True},
        'levelname': {'color': 'white', 'bold': True},
        'message': {'color': 'white'}
    },
    datefmt="%Y-%m-%d %H:%M:%S"
)


def log_level(level: Optional[str] = None) -> int:
    """Explicit level, else CONSOLE_LOG_LEVEL, else INFO; unknown names mean INFO"""
    name = (level or os.environ.get(LOG_LEVEL_ENV) or "INFO").upper()
    return LOG_LEVELS.get(name, logging.INFO)


def mask_tokens(message: str) -> str:
    return TOKEN_PATTERN.sub(lambda match: match.group(1) + MASK, message)


class TokenMaskFilter(logging.Filter):
    """Rewrites records whose message carries a remote API token"""

    def filter(self, record: logging.LogRecord) -> bool:
        message = record.getMessage()
        masked = mask_tokens(message)
        if masked != message:
            record.msg = masked
            record.args = ()
        return True


class ConsoleLogger:
    """
    Module logger of the console: logger = ConsoleLogger(__name__)

    The handler is installed once per logger name, so importing a module twice
    never duplicates output.
    """

    def __init__(self, module_name: str = "", level: Optional[str] = None) -> None:
        self.logger = logging.getLogger(module_name)

        if not self.logger.handlers:
            handler = logging.StreamHandler()
            handler.setFormatter(COLORED_FORMATTER)
            handler.addFilter(coloredlogs.HostNameFilter())
            self.logger.addHandler(handler)
            self.logger.addFilter(TokenMaskFilter())
            self.logger.setLevel(log_level(level))
            self.logger.propagate = False

    def debug(self, message: str) -> None:
        self.logger.debug(message)

    def info(self, message: str) -> None:
        self.logger.info(message)

    def warning(self, message: str) -> None:
        self.logger.warning(message)

    def error(self, message: str, exc_info: bool = False) -> None:
        """Log an error; exc_info=True adds the current traceback"""
        self.logger.error(message, exc_info=exc_info)

    def critical(self, message: str, exc_info: bool = False) -> None:
        self.logger.critical(message, exc_info=exc_info)
