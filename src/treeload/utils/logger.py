"""Defines the style of the package logger and exposes it."""

import logging
import sys

# Configure the formatting of the logger
logging.basicConfig(format="%(message)s", stream=sys.stdout)
# logging.basicConfig(format='[%(levelname)s][%(name)s] %(message)s')

# Capture warning messages and redirect them through the logger
logging.captureWarnings(True)

# Initialize logger
logger = logging.getLogger("treeload")

# Level names accepted by `set_verbosity`
VALID_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def set_verbosity(verbosity):
    """Set the level of the package logger from a level name.

    Parameters
    ----------
    verbosity : str
        Name of the logging level (e.g. 'debug', 'info', 'warning')
    """
    level = verbosity.upper()
    if level not in VALID_LEVELS:
        raise ValueError(
            f"Logging level not recognized: {verbosity}. Must be one of "
            "debug, info, warning, error or critical."
        )

    logger.setLevel(level)
