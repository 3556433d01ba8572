# wiringcore

Hardware-independent building blocks of a microcontroller core API, in
plain Python with no third-party dependencies.

## Modules

### `wiringcore.common`

- Enums `PinStatus` (`LOW`, `HIGH`, `CHANGE`, `FALLING`, `RISING`,
  `UNDEFINED`), `PinMode` (`INPUT`, `OUTPUT`, `INPUT_PULLUP`,
  `INPUT_PULLDOWN`, `OUTPUT_OPENDRAIN`) and `BitOrder` (`LSBFIRST`,
  `MSBFIRST`).
- Constants `PI`, `HALF_PI`, `TWO_PI`, `DEG_TO_RAD`, `RAD_TO_DEG`, `EULER`,
  `SERIAL` and `DISPLAY`.
- `map_range(x, in_min, in_max, out_min, out_max)` re-maps an integer
  between ranges with integer division that truncates toward zero; it raises
  `ZeroDivisionError` when `in_min == in_max`.
- `constrain`, `radians`, `degrees`, `sq`.
- `make_word(high, low)` builds a 16-bit word from two bytes;
  `make_word(value)` truncates a value to 16 bits.
- `low_byte`, `high_byte`, and the bit helpers `bit`, `bit_read`, `bit_set`,
  `bit_clear`, `bit_toggle` and `bit_write`. The setters return the new
  value rather than modifying their argument.

### `wiringcore.spi`

- `SPIMode` (`MODE0`–`MODE3`).
- `SPISettings`, a frozen dataclass with `clock_freq`, `bit_order` and
  `data_mode`; the defaults are 4 MHz, `MSBFIRST` and `MODE0`
  (`DEFAULT_SPI_SETTINGS`). Settings compare equal when all three fields
  match.
- `HardwareSPI` (alias `SPIClass`), an abstract base class with `transfer`,
  `transfer16`, `transfer_buffer`, `using_interrupt`, `not_using_interrupt`,
  `begin_transaction`, `end_transaction`, `attach_interrupt`,
  `detach_interrupt`, `begin` and `end`.

### `wiringcore.canmsg`

- `CanMsg(can_id, data)`, a frozen dataclass. `can_id` is kept as a 32-bit
  word whose bit 31 marks the extended frame format; `data` is truncated to
  eight bytes. Properties: `data_length`, `standard_id`, `extended_id`,
  `is_standard_id`, `is_extended_id`. `str()` gives
  `[ID] (length) : DATAHEX` with a 3-digit id for standard frames and an
  8-digit id for extended ones.
- `can_standard_id(can_id)` and `can_extended_id(can_id)` build identifier
  words; constants `MAX_DATA_LENGTH`, `CAN_EFF_FLAG`, `CAN_SFF_MASK`,
  `CAN_EFF_MASK`.

### `wiringcore.ringbuffer`

- `RingBuffer(size=SERIAL_BUFFER_SIZE)` (64 bytes by default), a byte FIFO
  that drops new bytes when full. `read_char()` and `peek()` return `-1`
  when empty. Also `store_char`, `clear`, `available`,
  `available_for_store`, `is_full`, `size` and `len()`.

### `wiringcore.can`

- `CanBitRate` (`BR_125k`, `BR_250k`, `BR_500k`, `BR_1000k`).
- `CanMsgRingbuffer`, a FIFO of at most 32 `CanMsg` frames: `enqueue` drops
  frames when full, `dequeue` returns an empty `CanMsg()` when empty; also
  `is_full`, `is_empty`, `available` and `len()`.
- `HardwareCAN`, an abstract base class with `begin`, `end`, `write`,
  `available` and `read`.

### `wiringcore.ipaddr`

- `IPType` (`IPv4`, `IPv6`) and `IPAddress`, a mutable address that accepts
  `()`, `(IPType)`, four octets, sixteen octets, a 32-bit int (first octet
  in the low byte), bytes, `(IPType, bytes)`, a string, or another
  `IPAddress`.
- Alternative constructors `from_type`, `from_bytes`, `from_int` and
  `parse` (raises `ValueError` on invalid text). `from_string(text)` updates
  the address in place and returns `False` if the text is invalid.
- Indexing reads and writes single octets; `int()` gives the IPv4 word
  (0 for IPv6); addresses compare equal only with the same family and
  bytes, and an IPv4 address also compares equal to its four raw bytes.
- `str()` gives a dotted quad or canonical compressed IPv6 text;
  `to_string()` gives a dotted quad or all eight zero-padded IPv6 groups.
- Constants `IN6ADDR_ANY` and `INADDR_NONE`.

## Examples

```python
from wiringcore.common import map_range, bit_set
from wiringcore.canmsg import CanMsg, can_extended_id
from wiringcore.ipaddr import IPAddress

map_range(512, 0, 1023, 0, 255)        # 127
bit_set(0b0001, 3)                     # 9

msg = CanMsg(can_extended_id(0x1234), b"\x01\x02")
str(msg)                               # "[00001234] (2) : 0102"

ip = IPAddress.parse("2001:db8::1")
str(ip)                                # "2001:db8::1"
IPAddress(192, 168, 1, 2).to_string()  # "192.168.1.2"
```

## What it does not do

`HardwareSPI` and `HardwareCAN` are interfaces only: the package contains no
driver that talks to a real SPI bus or CAN controller, and no pin I/O,
timing or interrupt functions. Implementations are expected to subclass
these interfaces.

## Running the tests

```
pip install "wiringcore[test]"
pytest
```