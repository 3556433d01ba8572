"""Hardware-independent microcontroller core helpers: bit math, SPI settings, CAN frames, ring buffers and IP addresses."""

__version__ = "0.1.0"
__all__ = ["common", "spi", "canmsg", "ringbuffer", "can", "ipaddr"]