# adminpanel/logging_utils.py
"""
Stdout loggers for adminpanel modules.

Messages carry a bracketed prefix naming the layer that wrote them:
``[ADMIN]`` for admin lifecycle, ``[ADMIN][LOCK]`` for version checks,
``[MODEL]`` for persistence and ``[FORM]`` for submissions.

The level comes from ``ADMINPANEL_LOG_LEVEL``, then ``LOG_LEVEL``, then INFO.
"""

import logging
import os
import sys


def _level_from_env() -> int:
    level_name = os.getenv("ADMINPANEL_LOG_LEVEL") or os.getenv("LOG_LEVEL", "INFO")
    return getattr(logging, level_name.upper(), logging.INFO)


def get_logger(name: str = "adminpanel") -> logging.Logger:
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger

    logger.setLevel(_level_from_env())
    handler = logging.StreamHandler(sys.stdout)
    formatter = logging.Formatter(
        "[%(asctime)s] [%(levelname)s] %(name)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)
    return logger
