import pytest

from wiringcore.canmsg import (
    CAN_EFF_FLAG,
    CAN_EFF_MASK,
    CAN_SFF_MASK,
    MAX_DATA_LENGTH,
    CanMsg,
    can_extended_id,
    can_standard_id,
)


def test_default_message_is_empty_standard():
    msg = CanMsg()
    assert msg.can_id == 0
    assert msg.data == b""
    assert msg.data_length == 0
    assert msg.is_standard_id
    assert not msg.is_extended_id


def test_data_is_truncated_to_max_length():
    payload = bytes(range(12))
    msg = CanMsg(0x10, payload)
    assert msg.data_length == MAX_DATA_LENGTH
    assert msg.data == payload[:MAX_DATA_LENGTH]


def test_data_accepts_any_byte_sequence():
    msg = CanMsg(0x10, [1, 2, 3])
    assert msg.data == bytes([1, 2, 3])
    assert msg.data_length == len([1, 2, 3])


def test_none_data_gives_empty_message():
    assert CanMsg(0x10, None).data == b""


def test_invalid_byte_rejected():
    with pytest.raises(ValueError):
        CanMsg(0x10, [256])


def test_standard_id_helper_masks():
    assert can_standard_id(0xFFFFFFFF) == CAN_SFF_MASK
    msg = CanMsg(can_standard_id(0xFFFFFFFF))
    assert msg.is_standard_id
    assert msg.standard_id == CAN_SFF_MASK


def test_extended_id_helper_sets_flag():
    word = can_extended_id(0xFFFFFFFF)
    assert word & CAN_EFF_FLAG == CAN_EFF_FLAG
    msg = CanMsg(word)
    assert msg.is_extended_id
    assert not msg.is_standard_id
    assert msg.extended_id == CAN_EFF_MASK


@pytest.mark.parametrize("ident", [0, 0x1, 0x7FF, 0x1ABCDEF, CAN_EFF_MASK])
def test_extended_round_trip(ident):
    assert CanMsg(can_extended_id(ident)).extended_id == ident


@pytest.mark.parametrize("ident", [0, 0x1, 0x123, CAN_SFF_MASK])
def test_standard_round_trip(ident):
    assert CanMsg(can_standard_id(ident)).standard_id == ident


def test_str_standard_frame():
    assert str(CanMsg(0x123, b"\xca\xfe")) == "[123] (2) : CAFE"


def test_str_extended_frame():
    assert str(CanMsg(can_extended_id(0x123))) == "[00000123] (0) : "


def test_str_data_follows_header():
    payload = bytes([0x0A, 0xFF, 0x00])
    text = str(CanMsg(0x7FF, payload))
    header, body = text.split(" : ")
    assert bytes.fromhex(body) == payload
    assert header.endswith(f"({len(payload)})")


def test_equality_and_immutability():
    a = CanMsg(0x55, b"\x01\x02")
    b = CanMsg(0x55, b"\x01\x02")
    assert a == b
    assert a != CanMsg(0x55, b"\x01")
    with pytest.raises(AttributeError):
        a.can_id = 1


def test_class_constants_match_module():
    assert CanMsg.MAX_DATA_LENGTH == MAX_DATA_LENGTH
    assert CanMsg(CanMsg.CAN_EFF_FLAG).is_extended_id