import pytest

from wiringcore.ringbuffer import SERIAL_BUFFER_SIZE, RingBuffer


def test_default_capacity_is_serial_buffer_size():
    buf = RingBuffer()
    assert buf.available_for_store() == SERIAL_BUFFER_SIZE == 64
    assert buf.available() == 0


def test_fifo_order():
    buf = RingBuffer(8)
    for value in (10, 20, 30):
        buf.store_char(value)
    assert [buf.read_char() for _ in range(3)] == [10, 20, 30]


def test_empty_read_and_peek_return_minus_one():
    buf = RingBuffer(4)
    assert buf.read_char() == -1
    assert buf.peek() == -1


def test_peek_does_not_consume():
    buf = RingBuffer(4)
    buf.store_char(5)
    assert buf.peek() == 5
    assert buf.available() == 1
    assert buf.read_char() == 5
    assert buf.available() == 0


def test_full_buffer_drops_new_bytes():
    buf = RingBuffer(3)
    for value in (1, 2, 3, 4):
        buf.store_char(value)
    assert buf.is_full()
    assert len(buf) == 3
    assert buf.available_for_store() == 0
    assert [buf.read_char() for _ in range(4)] == [1, 2, 3, -1]


def test_wraparound_keeps_order():
    buf = RingBuffer(3)
    expected = []
    got = []
    for value in range(10):
        buf.store_char(value)
        expected.append(value)
        if buf.is_full():
            got.append(buf.read_char())
    while buf.available():
        got.append(buf.read_char())
    assert got == expected


def test_clear_empties_buffer():
    buf = RingBuffer(4)
    buf.store_char(1)
    buf.store_char(2)
    buf.clear()
    assert buf.available() == 0
    assert buf.available_for_store() == 4
    assert buf.read_char() == -1


def test_available_plus_free_equals_size():
    buf = RingBuffer(5)
    for value in range(7):
        buf.store_char(value)
        assert buf.available() + buf.available_for_store() == buf.size


@pytest.mark.parametrize("size", [0, -1])
def test_invalid_size_rejected(size):
    with pytest.raises(ValueError):
        RingBuffer(size)