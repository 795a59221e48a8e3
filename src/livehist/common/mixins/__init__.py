# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from livehist.common.mixins.livehist_logger_mixin import LiveHistLoggerMixin

__all__ = ["LiveHistLoggerMixin"]
