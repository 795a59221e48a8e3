# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0


class LiveHistError(Exception):
    """Base class for all exceptions raised by livehist."""

    def __str__(self) -> str:
        """Return the string representation of the exception with the class name."""
        return super().__str__()


class ConfigurationError(LiveHistError):
    """Exception raised when something fails to configure, or there is a configuration error."""


class InvalidConfigError(ConfigurationError):
    """Exception raised when histogram parameters violate their constraints.

    No partially-constructed histogram is ever returned when this is raised.
    """


class InvalidSampleError(LiveHistError):
    """Exception raised when a sample is not a non-negative integer. The sample is dropped."""

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(f"Sample must be a non-negative integer, got {value!r}")


class EmptyWindowError(LiveHistError):
    """Raised when a statistic is requested while the live window holds no samples."""


class UnknownPercentileError(LiveHistError):
    """Exception raised when a percentile selector matches neither a configured threshold nor a list index."""

    def __init__(self, selector: int, percentiles: tuple[int, ...]) -> None:
        self.selector = selector
        self.percentiles = percentiles
        super().__init__(
            f"Unknown percentile selector {selector}: not one of {list(percentiles)} "
            f"and not an index below {len(percentiles)}"
        )
