"""
Utility functions for asciibanner.

.. currentmodule:: asciibanner.utils

.. autosummary::

    get_resources_dir
    get_font_names
    find_font_file
    logger

"""

import os
import logging

from ._dirs import get_resources_dir, get_font_names, find_font_file  # noqa: F401


logger = logging.getLogger("asciibanner")


def _set_log_level():
    # Set default level
    logger.setLevel(logging.WARN)
    # Set user-specified level
    level = os.getenv("ASCIIBANNER_LOG_LEVEL", "")
    if level:
        try:
            if level.isnumeric():
                logger.setLevel(int(level))
            else:
                logger.setLevel(level.upper())
        except Exception:
            logger.warning(f"Invalid asciibanner log level: {level}")


_set_log_level()
