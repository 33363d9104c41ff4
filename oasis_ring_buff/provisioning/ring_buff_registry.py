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
Registry of named ring buffer instances
"""

from __future__ import annotations

import logging
from typing import Iterator
from typing import Optional

from oasis_ring_buff.config.ring_buff_config import RingBuffConfig
from oasis_ring_buff.config.ring_buff_params import RingBuffParams
from oasis_ring_buff.core.ring_buffer import RingBuffer


_LOG: logging.Logger = logging.getLogger(__name__)


class RingBuffRegistry:
    """
    Hands out one ring buffer per name, allocating it on first use

    A name is declared with its parameters before any storage exists. The
    first create_or_get() allocates the storage; every later call returns the
    same instance with its data intact. get() never allocates.
    """

    def __init__(self) -> None:
        self._params: dict[str, RingBuffParams] = {}
        self._instances: dict[str, RingBuffer] = {}

    @classmethod
    def from_config(cls, config: RingBuffConfig) -> RingBuffRegistry:
        config.validate()
        registry: RingBuffRegistry = cls()
        for name, params in config.instances.items():
            registry.declare(name, params)
        return registry

    def declare(self, name: str, params: RingBuffParams) -> None:
        """
        Record the parameters for a named instance without allocating it.

        :param name: Instance name
        :param params: Construction parameters

        :raises ValueError: If the name is already declared with different
                            parameters
        """
        if not isinstance(name, str) or not name:
            raise ValueError("instance name must be a non-empty string")
        params.validate()

        existing: Optional[RingBuffParams] = self._params.get(name)
        if existing is not None:
            if existing != params:
                raise ValueError(
                    f"ring buffer {name!r} already declared with "
                    f"capacity {existing.capacity}"
                )
            return

        self._params[name] = params
        _LOG.debug("Declared ring buffer %s with capacity %d", name, params.capacity)

    def create_or_get(
        self, name: str, params: Optional[RingBuffParams] = None
    ) -> RingBuffer:
        """
        Return the named instance, allocating it on the first call.

        :param name: Instance name
        :param params: Parameters used to declare the name if it is unknown

        :raises KeyError: If the name is undeclared and no params are given
        """
        if params is not None:
            self.declare(name, params)

        instance: Optional[RingBuffer] = self._instances.get(name)
        if instance is not None:
            return instance

        declared: Optional[RingBuffParams] = self._params.get(name)
        if declared is None:
            raise KeyError(name)

        instance = RingBuffer(declared.capacity, name=name)
        self._instances[name] = instance
        _LOG.info(
            "Allocated ring buffer %s with capacity %d", name, declared.capacity
        )

        return instance

    def get(self, name: str) -> Optional[RingBuffer]:
        """
        Return the named instance without allocating it.

        :return: The instance, or None if it is declared but not yet created

        :raises KeyError: If the name was never declared
        """
        if name not in self._params:
            raise KeyError(name)
        return self._instances.get(name)

    def params(self, name: str) -> RingBuffParams:
        return self._params[name]

    def names(self) -> list[str]:
        return sorted(self._params)

    def __contains__(self, name: object) -> bool:
        return name in self._params

    def __iter__(self) -> Iterator[str]:
        return iter(self.names())

    def __len__(self) -> int:
        return len(self._params)
