"""CAN bit rates, a bounded message queue and the abstract CAN controller."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections import deque
from enum import IntEnum

from .canmsg import CanMsg

__all__ = ["CanBitRate", "CanMsgRingbuffer", "HardwareCAN"]


class CanBitRate(IntEnum):
    """Supported bus bit rates in bits per second."""

    BR_125k = 125000
    BR_250k = 250000
    BR_500k = 500000
    BR_1000k = 1000000


class CanMsgRingbuffer:
    """A FIFO of CAN messages holding at most ``RING_BUFFER_SIZE`` entries.

    Messages enqueued while full are dropped; dequeuing from an empty
    buffer yields an empty ``CanMsg``.
    """

    RING_BUFFER_SIZE = 32

    def __init__(self) -> None:
        self._items: deque[CanMsg] = deque()

    def is_full(self) -> bool:
        """True if no more messages can be enqueued."""
        return len(self._items) == self.RING_BUFFER_SIZE

    def is_empty(self) -> bool:
        """True if there is nothing to dequeue."""
        return not self._items

    def enqueue(self, msg: CanMsg) -> None:
        """Append a message; dropped if the buffer is full."""
        if not self.is_full():
            self._items.append(msg)

    def dequeue(self) -> CanMsg:
        """Remove and return the oldest message, or an empty message."""
        if not self._items:
            return CanMsg()
        return self._items.popleft()

    def available(self) -> int:
        """Number of messages waiting."""
        return len(self._items)

    def __len__(self) -> int:
        return len(self._items)


class HardwareCAN(ABC):
    """Interface every CAN controller implements."""

    @abstractmethod
    def begin(self, bit_rate: CanBitRate) -> bool:
        """Initialise the controller; True if it is operational."""

    @abstractmethod
    def end(self) -> None:
        """Disable the controller."""

    @abstractmethod
    def write(self, msg: CanMsg) -> int:
        """Enqueue a message for transmission.

        Returns 1 when enqueued, or an implementation-defined negative code.
        """

    @abstractmethod
    def available(self) -> int:
        """Number of received messages not yet read."""

    @abstractmethod
    def read(self) -> CanMsg:
        """Oldest received message, or an empty message if none."""