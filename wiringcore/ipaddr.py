"""IPv4 and IPv6 addresses stored in a single 16-byte representation."""

from __future__ import annotations

import operator
import struct
from enum import Enum
from typing import Iterator

__all__ = ["IPType", "IPAddress", "IN6ADDR_ANY", "INADDR_NONE"]

_V4_OFFSET = 12
_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")
_DEC_DIGITS = frozenset("0123456789")
_BYTES_LIKE = (bytes, bytearray, memoryview)


class IPType(Enum):
    """Address family."""

    IPv4 = 0
    IPv6 = 1


def _octets(values) -> bytes:
    """Validate a sequence of octet values and pack them."""
    packed = bytearray()
    for value in values:
        octet = operator.index(value)
        if not 0 <= octet <= 0xFF:
            raise ValueError(f"octet out of range: {octet}")
        packed.append(octet)
    return bytes(packed)


def _parse_v4(text: str) -> bytes | None:
    """Parse dotted-quad notation into four octets, or return None."""
    octets = bytearray()
    acc = -1
    for char in text:
        if char in _DEC_DIGITS:
            acc = int(char) if acc < 0 else acc * 10 + int(char)
            if acc > 255:
                return None
        elif char == ".":
            if len(octets) == 3 or acc < 0:
                return None
            octets.append(acc)
            acc = -1
        else:
            return None
    if len(octets) != 3 or acc < 0:
        return None
    octets.append(acc)
    return bytes(octets)


def _parse_v6(text: str) -> bytes | None:
    """Parse colon-separated hex notation into sixteen bytes, or return None."""
    buf = bytearray(16)
    acc = 0
    colons = 0
    double_colons = -1
    length = len(text)
    pos = 0
    while pos < length:
        char = text[pos]
        pos += 1
        if char in _HEX_DIGITS:
            acc = acc * 16 + int(char, 16)
            if acc > 0xFFFF:
                return None
        elif char == ":":
            following = text[pos] if pos < length else ""
            if following == ":":
                if double_colons >= 0:
                    return None
                if pos + 1 < length and text[pos + 1] == ":":
                    return None
                double_colons = colons + (1 if acc else 0)
                pos += 1
            elif following == "":
                return None
            if colons == 7:
                return None
            buf[colons * 2 : colons * 2 + 2] = acc.to_bytes(2, "big")
            colons += 1
            acc = 0
        else:
            return None

    if double_colons == -1 and colons != 7:
        return None
    if double_colons > -1 and colons > 6:
        return None
    buf[colons * 2 : colons * 2 + 2] = acc.to_bytes(2, "big")
    colons += 1

    if double_colons != -1:
        head = buf[: double_colons * 2]
        tail = buf[double_colons * 2 : colons * 2]
        buf = head + bytes(16 - len(head) - len(tail)) + tail
    return bytes(buf)


class IPAddress:
    """A mutable IPv4 or IPv6 address.

    Accepted constructor forms:

    * ``IPAddress()`` -- IPv4 ``0.0.0.0``
    * ``IPAddress(IPType)`` -- all-zero address of that family
    * ``IPAddress(a, b, c, d)`` -- IPv4 from four octets
    * ``IPAddress(o1, ..., o16)`` -- IPv6 from sixteen octets
    * ``IPAddress(int)`` -- IPv4 from a 32-bit word (little-endian octet order)
    * ``IPAddress(bytes)`` -- IPv4 from the first four bytes
    * ``IPAddress(IPType, bytes)`` -- address of that family from raw bytes
    * ``IPAddress(str)`` -- parsed text, IPv4 tried first, then IPv6
    * ``IPAddress(IPAddress)`` -- copy
    """

    __slots__ = ("_bytes", "_type")
    __hash__ = None  # mutable

    def __init__(self, *args) -> None:
        self._type = IPType.IPv4
        self._bytes = bytearray(16)
        if not args:
            return
        if len(args) == 1:
            (arg,) = args
            if isinstance(arg, IPType):
                self._type = arg
            elif isinstance(arg, IPAddress):
                self._type = arg._type
                self._bytes = bytearray(arg._bytes)
            elif isinstance(arg, str):
                if not self.from_string(arg):
                    raise ValueError(f"invalid IP address: {arg!r}")
            elif isinstance(arg, int):
                self._load_int(arg)
            else:
                self._load_bytes(arg, IPType.IPv4)
        elif len(args) == 2 and isinstance(args[0], IPType):
            self._load_bytes(args[1], args[0])
        elif len(args) == 4:
            self._bytes[_V4_OFFSET:] = _octets(args)
        elif len(args) == 16:
            self._type = IPType.IPv6
            self._bytes[:] = _octets(args)
        else:
            raise TypeError(f"cannot build an IPAddress from {len(args)} arguments")

    # -- alternative constructors -------------------------------------------

    @classmethod
    def from_type(cls, ip_type: IPType) -> IPAddress:
        """All-zero address of the given family."""
        return cls(IPType(ip_type))

    @classmethod
    def from_bytes(cls, data, ip_type: IPType = IPType.IPv4) -> IPAddress:
        """Address from raw bytes: the first 4 for IPv4, the first 16 for IPv6."""
        address = cls()
        address._load_bytes(data, IPType(ip_type))
        return address

    @classmethod
    def from_int(cls, value: int) -> IPAddress:
        """IPv4 address from a 32-bit word whose low byte is the first octet."""
        address = cls()
        address._load_int(value)
        return address

    @classmethod
    def parse(cls, text: str) -> IPAddress:
        """Parse IPv4 or IPv6 text; raises ValueError if neither matches."""
        address = cls()
        if not address.from_string(text):
            raise ValueError(f"invalid IP address: {text!r}")
        return address

    # -- mutation ----------------------------------------------------------

    def _load_bytes(self, data, ip_type: IPType) -> None:
        raw = bytes(data)
        needed = 4 if ip_type is IPType.IPv4 else 16
        if len(raw) < needed:
            raise ValueError(f"{ip_type.name} address needs {needed} bytes, got {len(raw)}")
        self._type = ip_type
        if ip_type is IPType.IPv4:
            self._bytes = bytearray(_V4_OFFSET) + bytearray(raw[:4])
        else:
            self._bytes = bytearray(raw[:16])

    def _load_int(self, value: int) -> None:
        word = operator.index(value)
        if not 0 <= word <= 0xFFFFFFFF:
            raise ValueError(f"IPv4 word out of range: {word}")
        self._type = IPType.IPv4
        self._bytes = bytearray(_V4_OFFSET) + bytearray(word.to_bytes(4, "little"))

    def from_string(self, text: str) -> bool:
        """Replace the address with parsed text; False (and unchanged) if invalid."""
        octets = _parse_v4(text)
        if octets is not None:
            self._type = IPType.IPv4
            self._bytes = bytearray(_V4_OFFSET) + bytearray(octets)
            return True
        raw = _parse_v6(text)
        if raw is not None:
            self._type = IPType.IPv6
            self._bytes = bytearray(raw)
            return True
        return False

    # -- inspection --------------------------------------------------------

    @property
    def type(self) -> IPType:
        """Address family."""
        return self._type

    def _raw(self) -> bytearray:
        return self._bytes[_V4_OFFSET:] if self._type is IPType.IPv4 else self._bytes

    def __bytes__(self) -> bytes:
        return bytes(self._raw())

    def __len__(self) -> int:
        return 4 if self._type is IPType.IPv4 else 16

    def __iter__(self) -> Iterator[int]:
        return iter(bytes(self._raw()))

    def __int__(self) -> int:
        """The IPv4 word with the first octet in the low byte; 0 for IPv6."""
        if self._type is not IPType.IPv4:
            return 0
        return int.from_bytes(self._bytes[_V4_OFFSET:], "little")

    def __eq__(self, other) -> bool:
        if isinstance(other, IPAddress):
            return self._type is other._type and self._bytes == other._bytes
        if isinstance(other, _BYTES_LIKE):
            raw = bytes(other)
            return (
                self._type is IPType.IPv4
                and len(raw) >= 4
                and raw[:4] == bytes(self._bytes[_V4_OFFSET:])
            )
        return NotImplemented

    def _position(self, index) -> int:
        width = len(self)
        index = operator.index(index)
        if index < 0:
            index += width
        if not 0 <= index < width:
            raise IndexError("IP address index out of range")
        return (_V4_OFFSET if self._type is IPType.IPv4 else 0) + index

    def __getitem__(self, index) -> int:
        return self._bytes[self._position(index)]

    def __setitem__(self, index, value) -> None:
        (octet,) = _octets([value])
        self._bytes[self._position(index)] = octet

    # -- formatting --------------------------------------------------------

    def _fields(self) -> tuple[int, ...]:
        return struct.unpack(">8H", bytes(self._bytes))

    def __str__(self) -> str:
        """Dotted quad for IPv4; canonical compressed lower-case form for IPv6."""
        if self._type is IPType.IPv4:
            return ".".join(str(octet) for octet in self._bytes[_V4_OFFSET:])

        fields = self._fields()
        best_start, best_len = -1, 1
        run_start, run_len = -1, 0
        for pos, value in enumerate(fields):
            if value == 0:
                if run_start == -1:
                    run_start, run_len = pos, 1
                else:
                    run_len += 1
                if run_len > best_len:
                    best_start, best_len = run_start, run_len
            else:
                run_start = -1

        if best_start == -1:
            return ":".join(f"{value:x}" for value in fields)
        head = ":".join(f"{value:x}" for value in fields[:best_start])
        tail = ":".join(f"{value:x}" for value in fields[best_start + best_len :])
        return f"{head}::{tail}"

    def to_string(self) -> str:
        """Dotted quad for IPv4; all eight zero-padded groups for IPv6."""
        if self._type is IPType.IPv4:
            return str(self)
        return ":".join(f"{value:04x}" for value in self._fields())

    def __repr__(self) -> str:
        return f"IPAddress({str(self)!r})"


IN6ADDR_ANY = IPAddress(IPType.IPv6)
INADDR_NONE = IPAddress(0, 0, 0, 0)