# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Process-wide settings read from `LIVEHIST_*` environment variables.

Usage::

    from livehist.common.environment import Environment

    level = Environment.LOGGING.LEVEL
"""

from typing import Annotated, Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class _LoggingSettings(BaseSettings):
    """Logging settings (`LIVEHIST_LOGGING_*`)."""

    model_config = SettingsConfigDict(
        case_sensitive=False,
        env_prefix="LIVEHIST_LOGGING_",
    )

    LEVEL: Annotated[
        Literal["TRACE", "DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        Field(
            description="Level used by setup_rich_logging() for the livehist loggers",
        ),
    ] = "INFO"

    RICH_TRACEBACKS: Annotated[
        bool,
        Field(description="Render exception tracebacks with rich"),
    ] = False


class _Environment:
    """Namespace of settings sections, each loaded once at import time."""

    def __init__(self) -> None:
        self.LOGGING = _LoggingSettings()


Environment = _Environment()
