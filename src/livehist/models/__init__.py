# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from livehist.models.base_models import LiveHistBaseModel
from livehist.models.summary_models import HistogramSummary, PercentileSummary

__all__ = ["HistogramSummary", "LiveHistBaseModel", "PercentileSummary"]
