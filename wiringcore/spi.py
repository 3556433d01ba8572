"""SPI bus settings and the abstract SPI controller interface."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from .common import BitOrder

__all__ = ["SPIMode", "SPISettings", "DEFAULT_SPI_SETTINGS", "HardwareSPI", "SPIClass"]

from enum import IntEnum


class SPIMode(IntEnum):
    """Clock polarity and phase combination."""

    MODE0 = 0
    MODE1 = 1
    MODE2 = 2
    MODE3 = 3


@dataclass(frozen=True)
class SPISettings:
    """Clock frequency, bit order and data mode for an SPI transaction.

    The defaults are 4 MHz, most significant bit first and mode 0.
    """

    clock_freq: int = 4000000
    bit_order: BitOrder = BitOrder.MSBFIRST
    data_mode: SPIMode = SPIMode.MODE0

    def __post_init__(self) -> None:
        object.__setattr__(self, "clock_freq", int(self.clock_freq) & 0xFFFFFFFF)
        object.__setattr__(self, "bit_order", BitOrder(self.bit_order))
        object.__setattr__(self, "data_mode", SPIMode(self.data_mode))


DEFAULT_SPI_SETTINGS = SPISettings()


class HardwareSPI(ABC):
    """Interface every SPI controller implements."""

    @abstractmethod
    def transfer(self, data: int) -> int:
        """Send one byte and return the byte received."""

    @abstractmethod
    def transfer16(self, data: int) -> int:
        """Send a 16-bit word and return the word received."""

    @abstractmethod
    def transfer_buffer(self, buf: bytes) -> bytes:
        """Send a buffer and return the bytes received in its place."""

    @abstractmethod
    def using_interrupt(self, interrupt_number: int) -> None:
        """Register an interrupt that uses the bus."""

    @abstractmethod
    def not_using_interrupt(self, interrupt_number: int) -> None:
        """Unregister an interrupt that used the bus."""

    @abstractmethod
    def begin_transaction(self, settings: SPISettings) -> None:
        """Claim the bus with the given settings."""

    @abstractmethod
    def end_transaction(self) -> None:
        """Release the bus."""

    @abstractmethod
    def attach_interrupt(self) -> None:
        """Enable the controller's interrupt."""

    @abstractmethod
    def detach_interrupt(self) -> None:
        """Disable the controller's interrupt."""

    @abstractmethod
    def begin(self) -> None:
        """Initialise the controller."""

    @abstractmethod
    def end(self) -> None:
        """Shut the controller down."""


SPIClass = HardwareSPI