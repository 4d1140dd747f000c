"""Logging helpers for the GUI.

Page-layer modules share the ``bizconsole.gui`` logger. This module does not
configure handlers itself; the root logger is set up by
``bizconsole.utils.logger`` the first time a core module asks for a logger.
"""

from __future__ import annotations

import logging
from typing import Union

logger = logging.getLogger("bizconsole.gui")


def log(message: str, level: Union[int, str] = logging.INFO) -> None:
    """Log under the GUI logger; ``level`` may be a number or a name like "WARNING"."""
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO
    logger.log(level, message)
