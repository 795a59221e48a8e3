# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from livehist.histogram.bucket_ring import Bucket, BucketRing
from livehist.histogram.histogram import Histogram
from livehist.histogram.statistics import Snapshot

__all__ = ["Bucket", "BucketRing", "Histogram", "Snapshot"]
