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
Fixed-capacity circular byte buffer
"""

from __future__ import annotations

from oasis_ring_buff.config.ring_buff_config import RingBuffConfig
from oasis_ring_buff.config.ring_buff_params import RingBuffParams
from oasis_ring_buff.core.ring_buffer import WRITE_FAILED
from oasis_ring_buff.core.ring_buffer import RingBuffer
from oasis_ring_buff.provisioning.ring_buff_registry import RingBuffRegistry
from oasis_ring_buff.ring_buff_types.ring_buff_diagnostics import (
    RingBuffDiagnostics,
)
from oasis_ring_buff.ring_buff_types.ring_buff_state import RingBuffState


__all__ = [
    "WRITE_FAILED",
    "RingBuffConfig",
    "RingBuffDiagnostics",
    "RingBuffParams",
    "RingBuffRegistry",
    "RingBuffState",
    "RingBuffer",
]
