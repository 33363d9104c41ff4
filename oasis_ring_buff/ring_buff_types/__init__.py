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
Snapshot and diagnostics payloads
"""

from __future__ import annotations

from oasis_ring_buff.ring_buff_types.ring_buff_diagnostics import (
    RingBuffDiagnostics,
)
from oasis_ring_buff.ring_buff_types.ring_buff_state import RingBuffState


__all__ = ["RingBuffDiagnostics", "RingBuffState"]
