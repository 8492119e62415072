"""Logging setup for services that embed the package sorter."""

import logging
import os

from dotenv import dotenv_values

LOG_LEVEL_VAR = "SORT_PACKAGES_LOG_LEVEL"
DEFAULT_LEVEL = "WARNING"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


def _get_log_level_name():
    """Resolve the configured log level name.

    Resolution order:
        1. .env file in the working directory (read only, never
           exported to os.environ)
        2. os.environ
        3. DEFAULT_LEVEL
    """
    env = dotenv_values(os.path.join(os.getcwd(), ".env"))
    name = env.get(LOG_LEVEL_VAR)
    if name:
        return name

    name = os.environ.get(LOG_LEVEL_VAR)
    if name:
        return name

    return DEFAULT_LEVEL


def resolve_level(name):
    """Turn a level name such as "debug" into its logging constant.

    Raises:
        ValueError: If the name is not a standard level.
    """
    try:
        return _LEVELS[name.strip().upper()]
    except KeyError:
        raise ValueError(
            f"{LOG_LEVEL_VAR} must be one of "
            f"{', '.join(_LEVELS)}, got {name!r}"
        ) from None


def configure_logging(level=None):
    """Install a root handler for the application.

    Args:
        level: A level name or logging constant. When omitted the
            level comes from SORT_PACKAGES_LOG_LEVEL.

    Returns:
        The numeric level that was applied.
    """
    if level is None:
        level = resolve_level(_get_log_level_name())
    elif isinstance(level, str):
        level = resolve_level(level)

    logging.basicConfig(level=level, format=LOG_FORMAT, force=True)
    logging.getLogger(__name__).debug(
        "Logging configured at %s", logging.getLevelName(level)
    )
    return level
