from __future__ import annotations

import logging
import os

from nutpad.utils.constants import LOG_FORMAT, LOG_LEVEL_ENV

_HANDLER_NAME = "nutpad-console"


def configure_logging(level: str | int = "INFO") -> logging.Logger:
    """
    Attach one console handler to the ``nutpad`` logger.

    ``NUTPAD_LOG_LEVEL`` in the environment wins over ``level``. Calling this
    again only adjusts the level; it never stacks a second handler.
    """
    logger = logging.getLogger("nutpad")
    resolved = os.environ.get(LOG_LEVEL_ENV) or level
    if isinstance(resolved, str):
        resolved = logging.getLevelName(resolved.strip().upper())
        if not isinstance(resolved, int):
            resolved = logging.INFO
    logger.setLevel(resolved)

    if not any(h.get_name() == _HANDLER_NAME for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.set_name(_HANDLER_NAME)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    return logger
