"""
Centralized Logging Configuration
=================================

Console output is color coded with colorama; a rotating file under ``logs/``
keeps the full DEBUG stream without colors. Werkzeug access lines for the
health probe are suppressed, and the current Flask ``request_id`` (when any)
is attached to each record.
"""

import os
import sys
import logging
from pathlib import Path
from typing import Optional
from logging.handlers import RotatingFileHandler

from colorama import init, Fore, Style  # type: ignore

init(autoreset=True)

APP_LOGGER_NAME = "codegen"


class WerkzeugEndpointFilter(logging.Filter):
    """Filter to suppress high-frequency werkzeug request logs.

    Health probes and favicon requests only produce noise.
    """

    _suppressed_endpoints = (
        'GET /api/health ',
        'GET /favicon',
    )

    def filter(self, record: logging.LogRecord) -> bool:
        message = record.getMessage()
        return not any(endpoint in message for endpoint in self._suppressed_endpoints)


class RequestIdFilter(logging.Filter):
    """Inject the Flask ``g.request_id`` into records emitted during a request."""

    def filter(self, record: logging.LogRecord) -> bool:
        from flask import g, has_app_context

        if has_app_context() and not hasattr(record, 'request_id'):
            rid = g.get('request_id')
            if rid:
                record.request_id = rid  # type: ignore[attr-defined]
        return True


class ColoredSmartFormatter(logging.Formatter):
    """Formatter with color coding and shortened logger names."""

    def __init__(self, include_function: bool = False, use_colors: bool = True):
        self.include_function = include_function
        self.use_colors = use_colors
        super().__init__()

        self.level_colors = {
            logging.DEBUG: Fore.CYAN,
            logging.INFO: Fore.GREEN,
            logging.WARNING: Fore.YELLOW,
            logging.ERROR: Fore.RED,
            logging.CRITICAL: Fore.RED + Style.BRIGHT
        }

        self.service_colors = {
            'factory': Fore.BLUE,
            'generation': Fore.MAGENTA,
            'openrouter': Fore.YELLOW,
            'analyzer': Fore.CYAN,
            'history': Fore.GREEN,
        }

    def format(self, record: logging.LogRecord) -> str:
        timestamp = self.formatTime(record, '%H:%M:%S')
        level = record.levelname
        name = self._clean_logger_name(record.name)
        message = record.getMessage()
        rid = getattr(record, 'request_id', None)
        if rid:
            message = f"[{rid[:8]}] {message}"

        if self.use_colors:
            level_color = self.level_colors.get(record.levelno, "")
            service_color = self._get_service_color(name)
            colored_level = f"{level_color}{level:8}{Style.RESET_ALL}"
            colored_name = f"{service_color}{name:20}{Style.RESET_ALL}"
        else:
            colored_level = f"{level:8}"
            colored_name = f"{name:20}"

        line = f"[{timestamp}] {colored_level} {colored_name} {message}"
        if self.include_function and record.levelno >= logging.WARNING:
            location = f"{record.funcName}:{record.lineno}"
            if self.use_colors:
                location = f"{Fore.WHITE}{Style.DIM}[{location}]{Style.RESET_ALL}"
            else:
                location = f"[{location}]"
            line = f"[{timestamp}] {colored_level} {colored_name} {location} {message}"

        if record.exc_info:
            line = f"{line}\n{self.formatException(record.exc_info)}"
        return line

    def _clean_logger_name(self, name: str) -> str:
        """Shorten logger names for readability."""
        replacements = {
            'codegen.services.': 'svc.',
            'codegen.routes.': 'route.',
            'codegen.utils.': 'util.',
            'codegen.': '',
        }
        for old, new in replacements.items():
            if name.startswith(old):
                name = new + name[len(old):]
                break

        if len(name) > 20:
            name = name[:17] + "..."
        return name

    def _get_service_color(self, service_name: str) -> str:
        name_lower = service_name.lower()
        for service, color in self.service_colors.items():
            if service in name_lower:
                return color
        return Fore.WHITE


class LoggingConfig:
    """Centralized logging configuration for the application."""

    def __init__(self, app_name: str = APP_LOGGER_NAME, log_dir: Optional[Path] = None):
        self.app_name = app_name
        self.log_dir = Path(log_dir or os.environ.get('LOG_DIR') or Path(__file__).resolve().parents[3] / "logs")
        self.log_level = self._get_log_level()
        self.is_development = os.environ.get('FLASK_ENV', 'development') == 'development'

    def setup_logging(self, log_to_file: bool = True) -> logging.Logger:
        """Attach console (and file) handlers to the root logger.

        Only handlers previously attached here are replaced, so repeated calls
        are idempotent and foreign handlers (pytest's caplog) survive.
        """
        root_logger = logging.getLogger()
        for h in list(root_logger.handlers):
            if getattr(h, "_codegen", False):
                root_logger.removeHandler(h)
                h.close()
        root_logger.setLevel(self.log_level)

        req_filter = RequestIdFilter()

        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(self.log_level)
        console_handler.setFormatter(ColoredSmartFormatter(include_function=self.is_development, use_colors=True))
        console_handler.addFilter(req_filter)
        console_handler._codegen = True  # type: ignore[attr-defined]
        root_logger.addHandler(console_handler)

        if log_to_file:
            self.log_dir.mkdir(parents=True, exist_ok=True)
            file_handler = RotatingFileHandler(
                self.log_dir / "app.log",
                maxBytes=10 * 1024 * 1024,  # 10MB
                backupCount=5,
                encoding='utf-8'
            )
            file_handler.setLevel(logging.DEBUG)
            file_handler.setFormatter(ColoredSmartFormatter(include_function=True, use_colors=False))
            file_handler.addFilter(req_filter)
            file_handler._codegen = True  # type: ignore[attr-defined]
            root_logger.addHandler(file_handler)

        self._configure_specific_loggers()

        app_logger = logging.getLogger(self.app_name)
        app_logger.info(f"Logging configured - Level: {logging.getLevelName(self.log_level)}")
        return app_logger

    def _get_log_level(self) -> int:
        level_str = os.environ.get('LOG_LEVEL', 'INFO').upper()
        return getattr(logging, level_str, logging.INFO)

    def _configure_specific_loggers(self):
        """Quiet chatty third-party loggers."""
        if not self.is_development:
            logging.getLogger('werkzeug').setLevel(logging.WARNING)
            logging.getLogger('flask.app').setLevel(logging.WARNING)

        logging.getLogger('sqlalchemy.engine').setLevel(logging.WARNING)
        logging.getLogger('sqlalchemy.pool').setLevel(logging.WARNING)

        werkzeug_logger = logging.getLogger('werkzeug')
        if not any(isinstance(f, WerkzeugEndpointFilter) for f in werkzeug_logger.filters):
            werkzeug_logger.addFilter(WerkzeugEndpointFilter())


_logging_config: Optional[LoggingConfig] = None


def get_logging_config() -> LoggingConfig:
    global _logging_config
    if _logging_config is None:
        _logging_config = LoggingConfig()
    return _logging_config


def setup_application_logging(log_to_file: bool = True) -> logging.Logger:
    """Setup application logging - call this once at startup."""
    return get_logging_config().setup_logging(log_to_file=log_to_file)


def get_logger(name: str) -> logging.Logger:
    """Get a logger under the application namespace."""
    return logging.getLogger(f"{APP_LOGGER_NAME}.{name}")
