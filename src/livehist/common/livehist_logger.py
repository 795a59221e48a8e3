# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Logger with a TRACE level and lazily evaluated messages.

Messages may be passed as callables, which are only invoked when the level is
enabled. This keeps f-string formatting off the hot path for samples::

    _logger.trace(lambda: f"Recycled slot {idx} for epoch {epoch}")
"""

import logging
from collections.abc import Callable

_TRACE = logging.DEBUG - 5
_DEBUG = logging.DEBUG

logging.addLevelName(_TRACE, "TRACE")


class LiveHistLogger:
    """Thin wrapper around a stdlib logger that accepts lazy messages."""

    __slots__ = ("_logger", "logger_name")

    def __init__(self, logger_name: str | None = None, **kwargs) -> None:
        self.logger_name = logger_name or self.__class__.__name__
        self._logger = logging.getLogger(self.logger_name)

    @property
    def is_trace_enabled(self) -> bool:
        return self._logger.isEnabledFor(_TRACE)

    @property
    def is_debug_enabled(self) -> bool:
        return self._logger.isEnabledFor(_DEBUG)

    def set_level(self, level: int | str) -> None:
        self._logger.setLevel(level)

    def log(self, level: int, message: str | Callable[..., str], *args, **kwargs) -> None:
        """Log a message, evaluating it first if it is a callable and the level is enabled."""
        if not self._logger.isEnabledFor(level):
            return
        if callable(message):
            message = message()
        # stacklevel=3 points the record at the caller of trace()/debug()/etc.
        kwargs.setdefault("stacklevel", 3)
        self._logger.log(level, message, *args, **kwargs)

    def trace_or_debug(
        self,
        trace_msg: str | Callable[..., str],
        debug_msg: str | Callable[..., str],
    ) -> None:
        """Log the detailed message at TRACE if enabled, otherwise the short one at DEBUG."""
        if self.is_trace_enabled:
            self.log(_TRACE, trace_msg)
        else:
            self.log(_DEBUG, debug_msg)

    def trace(self, message: str | Callable[..., str], *args, **kwargs) -> None:
        self.log(_TRACE, message, *args, **kwargs)

    def debug(self, message: str | Callable[..., str], *args, **kwargs) -> None:
        self.log(_DEBUG, message, *args, **kwargs)

    def info(self, message: str | Callable[..., str], *args, **kwargs) -> None:
        self.log(logging.INFO, message, *args, **kwargs)

    def warning(self, message: str | Callable[..., str], *args, **kwargs) -> None:
        self.log(logging.WARNING, message, *args, **kwargs)
