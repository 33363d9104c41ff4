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
from dataclasses import fields


@dataclass(frozen=True, slots=True)
class RingBuffDiagnostics:
    """Traffic counters for a ring buffer.

    Data contract:
        writes_accepted:
            Writes that stored all requested bytes
        writes_rejected:
            Writes that returned -1 and stored nothing
        bytes_written:
            Total bytes stored by accepted writes
        reads:
            Reads that copied at least one byte
        empty_reads:
            Reads that found nothing to copy
        bytes_read:
            Total bytes copied out by reads
        clears:
            Calls to clear(), including those made by scrub()

    Determinism and edge cases:
        - Counters are monotonic between resets
        - Reads rejected for a missing destination or zero length are not
          counted
    """

    writes_accepted: int = 0
    writes_rejected: int = 0
    bytes_written: int = 0
    reads: int = 0
    empty_reads: int = 0
    bytes_read: int = 0
    clears: int = 0

    def validate(self) -> None:
        """Validate counters and raise ValueError on failure."""
        for name, value in self.as_dict().items():
            if not self._is_int(value):
                raise ValueError(f"{name} must be int")
            if value < 0:
                raise ValueError(f"{name} must be non-negative")

    def as_dict(self) -> dict[str, int]:
        """Return a JSON-serializable dict representation."""
        return {field.name: getattr(self, field.name) for field in fields(self)}

    @staticmethod
    def _is_int(value: object) -> bool:
        return isinstance(value, int) and not isinstance(value, bool)
