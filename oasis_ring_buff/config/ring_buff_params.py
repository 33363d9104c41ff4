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
from typing import Mapping


@dataclass(frozen=True, slots=True)
class RingBuffParams:
    """Construction parameters for a single ring buffer instance.

    Data contract:
        - capacity: total slot count including the reserved slot. The
          buffer holds at most capacity - 1 bytes.

    Determinism and edge cases:
        - Parameters are fixed for the lifetime of an instance; there is no
          runtime resize.
        - validate() rejects a capacity below 2 and non-int values,
          including bool.
    """

    capacity: int

    @staticmethod
    def defaults() -> RingBuffParams:
        """Return a stable default parameter set."""
        params: RingBuffParams = RingBuffParams(capacity=16)
        params.validate()
        return params

    @classmethod
    def from_dict(cls, params: Mapping[str, object]) -> RingBuffParams:
        """Construct parameters from a mapping, rejecting unknown keys."""
        if not isinstance(params, Mapping):
            raise ValueError("params must be a mapping")
        unknown_keys: list[str] = sorted(set(params.keys()) - set(cls._field_order()))
        if unknown_keys:
            raise ValueError(f"unknown parameter: {unknown_keys[0]}")
        defaults: RingBuffParams = cls.defaults()
        result: RingBuffParams = cls(
            capacity=cls._as_int(
                "capacity", params.get("capacity", defaults.capacity)
            ),
        )
        result.validate()
        return result

    def validate(self) -> None:
        """Validate parameters and raise ValueError on failure."""
        if not self._is_int(self.capacity):
            raise ValueError("capacity must be int")
        if self.capacity < 2:
            raise ValueError("capacity must be at least 2")

    @property
    def usable_capacity(self) -> int:
        return self.capacity - 1

    def as_dict(self) -> dict[str, object]:
        """Return a JSON-serializable dict representation."""
        return {"capacity": self.capacity}

    @staticmethod
    def _field_order() -> tuple[str, ...]:
        return ("capacity",)

    @classmethod
    def _as_int(cls, name: str, value: object) -> int:
        if not cls._is_int(value):
            raise ValueError(f"{name} must be int")
        return int(value)  # type: ignore[call-overload]

    @staticmethod
    def _is_int(value: object) -> bool:
        return isinstance(value, int) and not isinstance(value, bool)
