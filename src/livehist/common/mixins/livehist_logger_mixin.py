# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
from collections.abc import Callable

from livehist.common.livehist_logger import LiveHistLogger


class LiveHistLoggerMixin:
    """Mixin that gives a class its own logger and the lazy logging shortcuts.

    The logger is named after the concrete class and its module unless `logger_name`
    is passed, so it sits under the `livehist` logger tree.
    """

    def __init__(self, logger_name: str | None = None, **kwargs) -> None:
        cls = self.__class__
        self.logger = LiveHistLogger(logger_name or f"{cls.__module__}.{cls.__name__}")
        super().__init__(**kwargs)

    @property
    def is_trace_enabled(self) -> bool:
        return self.logger.is_trace_enabled

    @property
    def is_debug_enabled(self) -> bool:
        return self.logger.is_debug_enabled

    def trace(self, message: str | Callable[..., str], *args, **kwargs) -> None:
        kwargs.setdefault("stacklevel", 4)
        self.logger.trace(message, *args, **kwargs)

    def debug(self, message: str | Callable[..., str], *args, **kwargs) -> None:
        kwargs.setdefault("stacklevel", 4)
        self.logger.debug(message, *args, **kwargs)

    def warning(self, message: str | Callable[..., str], *args, **kwargs) -> None:
        kwargs.setdefault("stacklevel", 4)
        self.logger.warning(message, *args, **kwargs)
