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
Circular buffer engine
"""

from __future__ import annotations

from oasis_ring_buff.core.ring_buffer import RingBuffer


__all__ = ["RingBuffer"]
