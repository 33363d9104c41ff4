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
Named instance provisioning
"""

from __future__ import annotations

from oasis_ring_buff.provisioning.ring_buff_registry import RingBuffRegistry


__all__ = ["RingBuffRegistry"]
