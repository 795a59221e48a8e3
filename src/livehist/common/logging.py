# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Opt-in Rich console logging for applications embedding livehist.

The library itself never installs handlers. Applications that want to see the
histogram's debug output call :func:`setup_rich_logging` once at startup::

    from livehist.common.logging import setup_rich_logging

    setup_rich_logging("DEBUG")
"""

import logging

from rich.console import Console
from rich.logging import RichHandler

from livehist.common.environment import Environment
from livehist.common.livehist_logger import _TRACE, LiveHistLogger

_logger = LiveHistLogger(__name__)

LIBRARY_LOGGER_NAME = "livehist"


def _resolve_level(level: str | int | None) -> int:
    if level is None:
        level = Environment.LOGGING.LEVEL
    if isinstance(level, int):
        return level
    level = level.upper()
    if level == "TRACE":
        return _TRACE
    resolved = logging.getLevelName(level)
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {level}")
    return resolved


def setup_rich_logging(
    level: str | int | None = None, console: Console | None = None
) -> RichHandler:
    """Attach a RichHandler to the livehist logger tree and set its level.

    Calling this again replaces the previously installed handler instead of
    adding a second one.

    Args:
        level: Level name (including ``TRACE``) or number. Defaults to
            ``Environment.LOGGING.LEVEL``.
        console: Console to render to. Defaults to a new stderr console.

    Returns:
        The installed handler.
    """
    resolved = _resolve_level(level)
    library_logger = logging.getLogger(LIBRARY_LOGGER_NAME)
    library_logger.setLevel(resolved)

    for handler in list(library_logger.handlers):
        if isinstance(handler, RichHandler):
            library_logger.removeHandler(handler)

    rich_handler = RichHandler(
        rich_tracebacks=Environment.LOGGING.RICH_TRACEBACKS,
        show_path=False,
        console=console or Console(stderr=True),
        show_time=False,
        tracebacks_show_locals=False,
    )
    library_logger.addHandler(rich_handler)

    _logger.debug(lambda: f"Logging initialized with level: {logging.getLevelName(resolved)}")
    return rich_handler
