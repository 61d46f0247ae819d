"""
Logging Configuration.

The projection engine is a library: it logs sparingly. Construction and
orientation changes are reported at DEBUG, numerical failures of the
inverse projection at WARNING just before the corresponding exception is
raised.

The default level can be set without code changes through the
``ISEA_LOG_LEVEL`` environment variable (e.g. ``ISEA_LOG_LEVEL=DEBUG``).
"""

import logging
import os
import sys
from typing import Optional, Union


LOG_LEVEL_ENV_VAR = "ISEA_LOG_LEVEL"
DEFAULT_LOG_LEVEL = logging.WARNING


def _level_from_environment() -> int:
    """Resolve the default level from the environment."""
    value = os.environ.get(LOG_LEVEL_ENV_VAR)
    if not value:
        return DEFAULT_LOG_LEVEL
    if value.isdigit():
        return int(value)
    level = logging.getLevelName(value.upper())
    # getLevelName returns a string for unknown names
    return level if isinstance(level, int) else DEFAULT_LOG_LEVEL


def get_logger(name: str, level: Optional[Union[int, str]] = None) -> logging.Logger:
    """Get a logger configured for the projection engine.

    Parameters
    ----------
    name : str
        Logger name (typically __name__).
    level : int or str, optional
        Logging level. Defaults to ``ISEA_LOG_LEVEL`` or WARNING.

    Returns
    -------
    logging.Logger
        Configured logger instance.
    """
    logger = logging.getLogger(name)

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        formatter = logging.Formatter(
            '%(asctime)s | %(name)s | %(levelname)s | %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.setLevel(_level_from_environment() if level is None else level)
    return logger
