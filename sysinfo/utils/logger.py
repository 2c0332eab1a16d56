"""
Logger setup for sysinfo.
Diagnostics go to stderr so they never mix with the report on stdout.
"""
import logging
import sys

logger = logging.getLogger(__name__)

DEFAULT_LEVEL_NAME = 'WARNING'
DEFAULT_LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def _get_log_level(level_name: str, default_level: int = logging.WARNING) -> int:
    """
    Convert log level string to logging level constant.

    :param level_name: Name of the log level (e.g., 'DEBUG')
    :param default_level: Default level to use if level_name is invalid
    :return: The corresponding logging level constant
    """
    level = logging.getLevelName(str(level_name).upper())
    if isinstance(level, int):
        return level
    logger.warning("Invalid log level name '%s'. Using default level %s.", level_name, logging.getLevelName(default_level))
    return default_level


def setup_logging(level_name: str = DEFAULT_LEVEL_NAME) -> logging.Logger:
    """
    Configure the package logger with a single stderr handler.

    Calling it again replaces the handler instead of stacking another one.

    :param level_name: Log level name for the package logger
    :return: The configured package logger
    """
    level = _get_log_level(level_name)
    root_logger = logging.getLogger('sysinfo')
    root_logger.setLevel(level)

    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(DEFAULT_LOG_FORMAT))
    root_logger.addHandler(handler)
    root_logger.propagate = False
    return root_logger
