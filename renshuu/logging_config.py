"""
Logging Configuration
Sets up the 'renshuu' logger, either from explicit arguments or from the
RENSHUU_LOG_LEVEL / RENSHUU_LOG_FILE environment variables.
"""
import logging
import os
import sys
from typing import Mapping, Optional

LOG_LEVEL_ENV = "RENSHUU_LOG_LEVEL"
LOG_FILE_ENV = "RENSHUU_LOG_FILE"

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_DATE_FORMAT = '%H:%M:%S'


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
    """
    Configures the logger for the 'renshuu' namespace.

    Args:
        level: Logging level (e.g. logging.DEBUG, logging.INFO)
        log_file: Optional path to save logs to a file.

    Returns:
        The configured package logger
    """
    logger = logging.getLogger("renshuu")
    logger.setLevel(level)

    # Gradio reloads the app module; don't stack handlers on every reload
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)

    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='a', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.debug(f"Logging at {logging.getLevelName(level)}" + (f", also to {log_file}" if log_file else ""))
    return logger


def parse_log_level(value: Optional[str], default: int = logging.INFO) -> int:
    """Turn a level name ("debug") or number ("10") into a logging level."""
    if not value or not value.strip():
        return default

    value = value.strip()
    if value.isdigit():
        return int(value)

    level = logging.getLevelName(value.upper())
    # getLevelName returns "Level X" for names it doesn't know
    return level if isinstance(level, int) else default


def setup_logging_from_env(environ: Optional[Mapping[str, str]] = None) -> logging.Logger:
    """
    Configure logging from RENSHUU_LOG_LEVEL and RENSHUU_LOG_FILE.

    An unrecognised level falls back to INFO and is reported once logging is up.

    Args:
        environ: Variables to read; defaults to os.environ (after load_dotenv)
    """
    environ = os.environ if environ is None else environ

    raw_level = environ.get(LOG_LEVEL_ENV)
    level = parse_log_level(raw_level)
    logger = setup_logging(level=level, log_file=environ.get(LOG_FILE_ENV) or None)

    if raw_level and raw_level.strip() and parse_log_level(raw_level, default=-1) == -1:
        logger.warning(f"Unknown {LOG_LEVEL_ENV} '{raw_level}', using {logging.getLevelName(level)}")
    return logger
