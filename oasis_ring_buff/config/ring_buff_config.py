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

from oasis_ring_buff.config.ring_buff_params import RingBuffParams


@dataclass(frozen=True, slots=True)
class RingBuffConfig:
    """Configuration for a set of named ring buffer instances.

    Responsibility:
        Map instance names to validated RingBuffParams so a registry can
        declare every buffer up front.

    Data contract:
        - instances: mapping of non-empty instance names to RingBuffParams.

    Determinism and edge cases:
        - Configuration is immutable once constructed.
        - Construction does not allocate any storage.
        - Invalid names or parameters raise ValueError.
    """

    instances: Mapping[str, RingBuffParams]

    @classmethod
    def from_params(
        cls, params: Mapping[str, RingBuffParams | Mapping[str, object]]
    ) -> RingBuffConfig:
        """Construct a configuration from a mapping of names to parameters."""
        if not isinstance(params, Mapping):
            raise ValueError("params must be a mapping")
        instances: dict[str, RingBuffParams] = {}
        for name, value in params.items():
            if isinstance(value, RingBuffParams):
                value.validate()
                instances[name] = value
            elif isinstance(value, Mapping):
                instances[name] = RingBuffParams.from_dict(value)
            else:
                raise ValueError(
                    f"params for {name!r} must be RingBuffParams or mapping"
                )
        config: RingBuffConfig = cls(instances=instances)
        config.validate()
        return config

    def validate(self) -> None:
        """Validate configuration and raise ValueError on failure."""
        for name, params in self.instances.items():
            if not isinstance(name, str) or not name:
                raise ValueError("instance names must be non-empty strings")
            if not isinstance(params, RingBuffParams):
                raise ValueError(f"params for {name!r} must be RingBuffParams")
            params.validate()

    def as_dict(self) -> dict[str, object]:
        """Return a JSON-serializable dict representation."""
        return {name: params.as_dict() for name, params in self.instances.items()}
