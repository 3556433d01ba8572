"""CAN frames with standard (11-bit) or extended (29-bit) identifiers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

__all__ = [
    "MAX_DATA_LENGTH",
    "CAN_EFF_FLAG",
    "CAN_SFF_MASK",
    "CAN_EFF_MASK",
    "CanMsg",
    "can_standard_id",
    "can_extended_id",
]

MAX_DATA_LENGTH = 8
CAN_EFF_FLAG = 0x80000000
CAN_SFF_MASK = 0x000007FF  # standard frame format
CAN_EFF_MASK = 0x1FFFFFFF  # extended frame format


@dataclass(frozen=True)
class CanMsg:
    """A CAN message: 32-bit identifier word and up to eight data bytes.

    Bit 31 of ``can_id`` selects the extended frame format; bits 0-28 hold
    the identifier. Data longer than eight bytes is truncated.
    """

    MAX_DATA_LENGTH: ClassVar[int] = MAX_DATA_LENGTH
    CAN_EFF_FLAG: ClassVar[int] = CAN_EFF_FLAG
    CAN_SFF_MASK: ClassVar[int] = CAN_SFF_MASK
    CAN_EFF_MASK: ClassVar[int] = CAN_EFF_MASK

    can_id: int = 0
    data: bytes = b""

    def __post_init__(self) -> None:
        payload = b"" if self.data is None else bytes(self.data)
        object.__setattr__(self, "can_id", int(self.can_id) & 0xFFFFFFFF)
        object.__setattr__(self, "data", payload[:MAX_DATA_LENGTH])

    @property
    def data_length(self) -> int:
        """Number of data bytes."""
        return len(self.data)

    @property
    def standard_id(self) -> int:
        """The identifier masked to 11 bits."""
        return self.can_id & CAN_SFF_MASK

    @property
    def extended_id(self) -> int:
        """The identifier masked to 29 bits."""
        return self.can_id & CAN_EFF_MASK

    @property
    def is_standard_id(self) -> bool:
        """True if the frame uses the standard format."""
        return (self.can_id & CAN_EFF_FLAG) == 0

    @property
    def is_extended_id(self) -> bool:
        """True if the frame uses the extended format."""
        return (self.can_id & CAN_EFF_FLAG) == CAN_EFF_FLAG

    def __str__(self) -> str:
        if self.is_standard_id:
            header = f"[{self.standard_id:03X}] ({self.data_length}) : "
        else:
            header = f"[{self.extended_id:08X}] ({self.data_length}) : "
        return header + self.data.hex().upper()


def can_standard_id(can_id: int) -> int:
    """Identifier word for a standard-format frame."""
    return can_id & CAN_SFF_MASK


def can_extended_id(can_id: int) -> int:
    """Identifier word for an extended-format frame, with the format flag set."""
    return CAN_EFF_FLAG | (can_id & CAN_EFF_MASK)