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

import sys
import unittest
from pathlib import Path
from typing import Optional

import numpy as np


ROOT: Path = Path(__file__).resolve().parents[2]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from oasis_ring_buff.config.ring_buff_config import RingBuffConfig
from oasis_ring_buff.config.ring_buff_params import RingBuffParams
from oasis_ring_buff.core.ring_buffer import RingBuffer
from oasis_ring_buff.provisioning.ring_buff_registry import RingBuffRegistry


class TestRingBuffRegistry(unittest.TestCase):
    """Tests for RingBuffRegistry."""

    def setUp(self) -> None:
        self.registry: RingBuffRegistry = RingBuffRegistry()
        self.registry.declare("test", RingBuffParams(capacity=16))

    def test_create_or_get_allocates_once(self) -> None:
        """Repeated create_or_get calls return the same instance and storage."""
        rb1: RingBuffer = self.registry.create_or_get("test")
        storage1: np.ndarray = rb1.storage
        rb2: RingBuffer = self.registry.create_or_get("test")
        self.assertIs(rb1, rb2)
        self.assertIs(storage1, rb2.storage)
        self.assertEqual(rb1.capacity, 16)
        self.assertEqual(rb1.name, "test")

    def test_create_or_get_keeps_data(self) -> None:
        """A second create_or_get never clears existing data."""
        rb: RingBuffer = self.registry.create_or_get("test")
        self.assertEqual(rb.write(b"\x2a\x2b"), 2)
        again: RingBuffer = self.registry.create_or_get("test")
        self.assertEqual(again.used(), 2)
        self.assertEqual(again.read_bytes(2), b"\x2a\x2b")

    def test_get_before_create(self) -> None:
        """get() does not allocate a declared but unused instance."""
        fetched: Optional[RingBuffer] = self.registry.get("test")
        self.assertIsNone(fetched)
        created: RingBuffer = self.registry.create_or_get("test")
        self.assertIs(self.registry.get("test"), created)

    def test_shared_instance_operations(self) -> None:
        """Writes through one handle are readable through another."""
        producer: RingBuffer = self.registry.create_or_get("test")
        consumer: Optional[RingBuffer] = self.registry.get("test")
        assert consumer is not None
        data: bytes = bytes([42, 43, 44, 45])
        self.assertEqual(producer.write(data), 4)
        self.assertEqual(consumer.used(), 4)
        self.assertEqual(consumer.available(), 16 - 1 - 4)

        out: bytearray = bytearray(4)
        self.assertEqual(consumer.read(out), 4)
        self.assertEqual(bytes(out), data)
        self.assertTrue(producer.is_empty())

    def test_get_unknown_name(self) -> None:
        """get() raises KeyError for names never declared."""
        with self.assertRaises(KeyError):
            self.registry.get("missing")

    def test_create_unknown_name(self) -> None:
        """create_or_get() needs params for undeclared names."""
        with self.assertRaises(KeyError):
            self.registry.create_or_get("missing")
        rb: RingBuffer = self.registry.create_or_get(
            "missing", RingBuffParams(capacity=4)
        )
        self.assertEqual(rb.capacity, 4)
        self.assertIn("missing", self.registry)

    def test_declare_conflict(self) -> None:
        """Redeclaring a name with different params is rejected."""
        self.registry.declare("test", RingBuffParams(capacity=16))
        with self.assertRaises(ValueError):
            self.registry.declare("test", RingBuffParams(capacity=32))
        with self.assertRaises(ValueError):
            self.registry.create_or_get("test", RingBuffParams(capacity=8))

    def test_declare_rejects_bad_input(self) -> None:
        """Empty names and invalid params are rejected."""
        with self.assertRaises(ValueError):
            self.registry.declare("", RingBuffParams(capacity=16))
        with self.assertRaises(ValueError):
            self.registry.declare("tiny", RingBuffParams(capacity=1))
        self.assertNotIn("tiny", self.registry)

    def test_independent_instances(self) -> None:
        """Different names own different storage."""
        self.registry.declare("other", RingBuffParams(capacity=16))
        first: RingBuffer = self.registry.create_or_get("test")
        second: RingBuffer = self.registry.create_or_get("other")
        self.assertIsNot(first, second)
        first.write(b"abc")
        self.assertTrue(second.is_empty())

    def test_from_config(self) -> None:
        """from_config declares every configured instance."""
        config: RingBuffConfig = RingBuffConfig.from_params(
            {"uart_rx": {"capacity": 64}, "uart_tx": RingBuffParams(capacity=32)}
        )
        registry: RingBuffRegistry = RingBuffRegistry.from_config(config)
        self.assertEqual(registry.names(), ["uart_rx", "uart_tx"])
        self.assertEqual(len(registry), 2)
        self.assertEqual(list(registry), ["uart_rx", "uart_tx"])
        self.assertEqual(registry.params("uart_rx").capacity, 64)
        self.assertIsNone(registry.get("uart_tx"))
        self.assertEqual(registry.create_or_get("uart_tx").capacity, 32)

    def test_allocation_is_logged(self) -> None:
        """The first allocation of an instance is logged."""
        logger_name: str = "oasis_ring_buff.provisioning.ring_buff_registry"
        with self.assertLogs(logger_name, level="INFO") as logs:
            self.registry.create_or_get("test")
        self.assertEqual(len(logs.output), 1)
        self.assertIn("Allocated ring buffer test with capacity 16", logs.output[0])


if __name__ == "__main__":
    unittest.main()
