################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""
Ring buffer parameters and configuration
"""

from __future__ import annotations

from oasis_ring_buff.config.ring_buff_config import RingBuffConfig
from oasis_ring_buff.config.ring_buff_params import RingBuffParams


__all__ = ["RingBuffConfig", "RingBuffParams"]
