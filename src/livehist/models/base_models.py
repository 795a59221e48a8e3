# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
from pydantic import BaseModel, ConfigDict


class LiveHistBaseModel(BaseModel):
    """Base model for all livehist pydantic models. Unknown fields are rejected."""

    model_config = ConfigDict(extra="forbid")
