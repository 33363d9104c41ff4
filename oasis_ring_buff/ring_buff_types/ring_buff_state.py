################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class RingBuffState:
    """Snapshot of a ring buffer's cursors and occupancy.

    Data contract:
        capacity:
            Total slot count, one of which is reserved
        head:
            Index of the next slot to write, in [0, capacity)
        tail:
            Index of the next slot to read, in [0, capacity)
        is_full:
            True when capacity - 1 bytes are held
        used:
            Bytes waiting to be read
        available:
            Bytes that can still be written

    Determinism and edge cases:
        - used + available == capacity - 1
        - is_full holds exactly when available == 0
    """

    capacity: int
    head: int
    tail: int
    is_full: bool
    used: int
    available: int

    def validate(self) -> None:
        """Validate the snapshot invariants and raise ValueError on failure."""
        for name, value in (
            ("capacity", self.capacity),
            ("head", self.head),
            ("tail", self.tail),
            ("used", self.used),
            ("available", self.available),
        ):
            if not self._is_int(value):
                raise ValueError(f"{name} must be int")
        if self.capacity < 2:
            raise ValueError("capacity must be at least 2")
        if not 0 <= self.head < self.capacity:
            raise ValueError("head must be in [0, capacity)")
        if not 0 <= self.tail < self.capacity:
            raise ValueError("tail must be in [0, capacity)")
        if self.used + self.available != self.capacity - 1:
            raise ValueError("used + available must equal capacity - 1")
        if self.is_full != (self.available == 0):
            raise ValueError("is_full must match zero availability")

    @property
    def is_empty(self) -> bool:
        return self.used == 0

    def describe(self) -> str:
        """Return a one-line summary for log and debug output."""
        return (
            f"size={self.capacity} head={self.head} tail={self.tail} "
            f"full={int(self.is_full)} used={self.used} avail={self.available}"
        )

    def as_dict(self) -> dict[str, object]:
        """Return a JSON-serializable dict representation."""
        return {
            "capacity": self.capacity,
            "head": self.head,
            "tail": self.tail,
            "is_full": self.is_full,
            "used": self.used,
            "available": self.available,
        }

    @staticmethod
    def _is_int(value: object) -> bool:
        return isinstance(value, int) and not isinstance(value, bool)
