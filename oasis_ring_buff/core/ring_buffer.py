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

import logging
from typing import Optional
from typing import Union

import numpy as np

from oasis_ring_buff.ring_buff_types.ring_buff_diagnostics import (
    RingBuffDiagnostics,
)
from oasis_ring_buff.ring_buff_types.ring_buff_state import RingBuffState


_LOG: logging.Logger = logging.getLogger(__name__)


# Returned by write() when nothing was stored
WRITE_FAILED: int = -1

# Smallest capacity that leaves one usable slot next to the reserved slot
MIN_CAPACITY: int = 2


ByteSource = Union[np.ndarray, bytes, bytearray, memoryview]
ByteStorage = Union[np.ndarray, bytearray, memoryview]


class RingBuffer:
    """Fixed-capacity circular byte buffer.

    Purpose:
        Move bytes from a single producer to a single consumer through a
        storage region that is allocated once and never resized.

    Responsibility:
        Track the producer cursor (head), the consumer cursor (tail) and the
        full flag, and copy bytes in and out with at most one wraparound
        split per call.

    Public API:
        - write(data, length)
        - read(out, max_length)
        - read_bytes(max_length)
        - used(), available(), is_empty(), is_full()
        - clear(), scrub()
        - state(), diagnostics(), reset_diagnostics()

    Data contract:
        - One slot is reserved, so at most capacity - 1 bytes are held.
        - used() + available() == capacity - 1 at all times.
        - The full flag is set by the write that leaves head one slot behind
          tail and is cleared by any positive read or by clear().

    Determinism and edge cases:
        - write() is all-or-nothing: a None source, a non-positive length, a
          length longer than the source or larger than available() returns
          -1 and leaves the buffer untouched.
        - read() is partial: it returns min(max_length, used()) and returns
          0 without mutation for a None destination, a non-positive length
          or an empty buffer.
        - clear() does not touch storage contents; scrub() does.

    Concurrency:
        - No locking. One producer and one consumer must coordinate
          externally if they run on different threads.
    """

    def __init__(
        self,
        capacity: int,
        storage: Optional[ByteStorage] = None,
        *,
        name: str = "",
    ) -> None:
        """Bind the buffer to storage, allocating it if none is given."""
        if not self._is_int(capacity) or capacity < MIN_CAPACITY:
            raise ValueError(f"capacity must be an int >= {MIN_CAPACITY}")

        self._capacity: int = int(capacity)
        self._name: str = name
        self._storage: np.ndarray = self._bind_storage(capacity, storage)

        # Cursors
        self._head: int = 0
        self._tail: int = 0
        self._full: bool = False

        self._counters: dict[str, int] = self._zero_counters()

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def name(self) -> str:
        return self._name

    @property
    def storage(self) -> np.ndarray:
        return self._storage

    @property
    def head(self) -> int:
        return self._head

    @property
    def tail(self) -> int:
        return self._tail

    ############################################################################
    # Producer API
    ############################################################################

    def write(
        self, data: Optional[ByteSource], length: Optional[int] = None
    ) -> int:
        """
        Copy length bytes from data into the buffer.

        :param data: Bytes-like source, or None
        :param length: Number of bytes to copy, or None for len(data)

        :return: length on success, -1 if nothing was written
        """
        if data is None:
            return self._reject_write(0, "no source")

        source: np.ndarray = self._as_byte_array(data)
        if length is None:
            length = int(source.size)
        if not self._is_int(length) or length <= 0:
            return self._reject_write(0, "non-positive length")
        length = int(length)
        if length > source.size:
            return self._reject_write(length, "source shorter than length")

        free: int = self.available()
        if length > free:
            return self._reject_write(length, f"{free} bytes available")

        # Up to the end of storage, then from index 0
        first: int = min(length, self._capacity - self._head)
        self._storage[self._head : self._head + first] = source[:first]
        remaining: int = length - first
        if remaining > 0:
            self._storage[:remaining] = source[first:length]

        self._head = (self._head + length) % self._capacity
        self._full = (self._head + 1) % self._capacity == self._tail

        self._counters["writes_accepted"] += 1
        self._counters["bytes_written"] += length

        return length

    ############################################################################
    # Consumer API
    ############################################################################

    def read(
        self, out: Optional[ByteStorage], max_length: Optional[int] = None
    ) -> int:
        """
        Copy up to max_length bytes out of the buffer.

        :param out: Writable bytes-like destination, or None
        :param max_length: Upper bound on bytes to copy, or None for len(out)

        :return: The number of bytes copied, 0 if nothing was read
        """
        if out is None:
            return 0

        dest: np.ndarray = self._as_byte_array(out)
        if not dest.flags.writeable:
            raise ValueError("read destination must be writable")
        if max_length is None:
            max_length = int(dest.size)
        if not self._is_int(max_length) or max_length <= 0:
            return 0
        max_length = int(max_length)

        to_read: int = min(max_length, self.used(), int(dest.size))
        if to_read == 0:
            self._counters["empty_reads"] += 1
            return 0

        first: int = min(to_read, self._capacity - self._tail)
        dest[:first] = self._storage[self._tail : self._tail + first]
        remaining: int = to_read - first
        if remaining > 0:
            dest[first:to_read] = self._storage[:remaining]

        self._tail = (self._tail + to_read) % self._capacity
        self._full = False

        self._counters["reads"] += 1
        self._counters["bytes_read"] += to_read

        return to_read

    def read_bytes(self, max_length: int) -> bytes:
        """Read up to max_length bytes and return them as a new bytes object."""
        if not self._is_int(max_length) or max_length <= 0:
            return b""
        out: bytearray = bytearray(min(max_length, self._capacity - 1))
        count: int = self.read(out)
        return bytes(out[:count])

    ############################################################################
    # Queries
    ############################################################################

    def used(self) -> int:
        """Return the number of bytes waiting to be read."""
        if self._full:
            return self._capacity - 1
        return (self._head - self._tail + self._capacity) % self._capacity

    def available(self) -> int:
        """Return the number of bytes that can be written."""
        return self._capacity - 1 - self.used()

    def is_empty(self) -> bool:
        return self._head == self._tail and not self._full

    def is_full(self) -> bool:
        return self._full

    ############################################################################
    # Reset
    ############################################################################

    def clear(self) -> None:
        """Reset both cursors without touching the storage contents."""
        self._head = 0
        self._tail = 0
        self._full = False
        self._counters["clears"] += 1
        _LOG.debug("Cleared ring buffer %s", self._label())

    def scrub(self) -> None:
        """Reset both cursors and zero the storage."""
        self.clear()
        self._storage.fill(0)
        _LOG.debug(
            "Scrubbed %d bytes of ring buffer %s", self._capacity, self._label()
        )

    ############################################################################
    # Introspection
    ############################################################################

    def state(self) -> RingBuffState:
        """Return an immutable snapshot of the cursors and occupancy."""
        return RingBuffState(
            capacity=self._capacity,
            head=self._head,
            tail=self._tail,
            is_full=self._full,
            used=self.used(),
            available=self.available(),
        )

    def diagnostics(self) -> RingBuffDiagnostics:
        """Return the counters accumulated since construction or last reset."""
        return RingBuffDiagnostics(**self._counters)

    def reset_diagnostics(self) -> None:
        self._counters = self._zero_counters()

    def __repr__(self) -> str:
        return f"RingBuffer({self._label()}: {self.state().describe()})"

    ############################################################################
    # Helpers
    ############################################################################

    def _reject_write(self, length: int, reason: str) -> int:
        self._counters["writes_rejected"] += 1
        _LOG.debug(
            "Rejected write of %d bytes to ring buffer %s: %s",
            length,
            self._label(),
            reason,
        )
        return WRITE_FAILED

    def _label(self) -> str:
        return self._name or hex(id(self))

    @staticmethod
    def _bind_storage(capacity: int, storage: Optional[ByteStorage]) -> np.ndarray:
        if storage is None:
            return np.zeros(capacity, dtype=np.uint8)

        array: np.ndarray = RingBuffer._as_byte_array(storage)
        if array.size != capacity:
            raise ValueError(f"storage must hold exactly {capacity} bytes")
        if not array.flags.writeable:
            raise ValueError("storage must be writable")
        return array

    @staticmethod
    def _as_byte_array(data: object) -> np.ndarray:
        if isinstance(data, np.ndarray):
            if data.dtype != np.uint8:
                raise ValueError("byte arrays must have dtype uint8")
            if data.ndim != 1:
                raise ValueError("byte arrays must be one-dimensional")
            if not data.flags.c_contiguous:
                raise ValueError("byte arrays must be contiguous")
            return data
        view: memoryview = memoryview(data)  # type: ignore[arg-type]
        if view.nbytes == 0:
            return np.zeros(0, dtype=np.uint8)
        # Views the caller's memory without copying
        return np.frombuffer(view, dtype=np.uint8)

    @staticmethod
    def _zero_counters() -> dict[str, int]:
        return {
            "writes_accepted": 0,
            "writes_rejected": 0,
            "bytes_written": 0,
            "reads": 0,
            "empty_reads": 0,
            "bytes_read": 0,
            "clears": 0,
        }

    @staticmethod
    def _is_int(value: object) -> bool:
        return isinstance(value, (int, np.integer)) and not isinstance(value, bool)
