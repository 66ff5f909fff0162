import math
import uuid

import pytest

from blockwire.wire import (
    Angle,
    BlockPosition,
    Buffer,
    NbtTextMessage,
    WireError,
    encode_nbt,
)


def _roundtrip(push, pull, value):
    writer = Buffer()
    getattr(writer, push)(value)
    reader = Buffer(writer.getvalue())
    result = getattr(reader, pull)()
    assert reader.remaining() == b""
    return result


@pytest.mark.parametrize(
    "value", [0, 1, 127, 128, 255, 300, 25565, 2097151, -1, -(1 << 31), (1 << 31) - 1]
)
def test_varint_roundtrip(value):
    assert _roundtrip("push_varint", "pull_varint", value) == value


def test_varint_known_encodings():
    writer = Buffer()
    writer.push_varint(300)
    assert writer.getvalue() == b"\xac\x02"
    writer = Buffer()
    writer.push_varint(-1)
    assert writer.getvalue() == b"\xff\xff\xff\xff\x0f"


def test_varint_small_values_are_one_byte():
    for value in (0, 5, 127):
        writer = Buffer()
        writer.push_varint(value)
        assert writer.getvalue() == bytes([value])


@pytest.mark.parametrize("value", [1 << 31, -(1 << 31) - 1])
def test_varint_out_of_range(value):
    with pytest.raises(WireError):
        Buffer().push_varint(value)


def test_varint_too_long():
    with pytest.raises(WireError):
        Buffer(b"\xff" * 6).pull_varint()


@pytest.mark.parametrize("value", [0, 1, -1, (1 << 63) - 1, -(1 << 63), 1 << 40])
def test_varlong_roundtrip(value):
    assert _roundtrip("push_varlong", "pull_varlong", value) == value


def test_varlong_out_of_range():
    with pytest.raises(WireError):
        Buffer().push_varlong(1 << 63)


@pytest.mark.parametrize(
    "push,pull,value",
    [
        ("push_i16", "pull_i16", -32768),
        ("push_i16", "pull_i16", 32767),
        ("push_u16", "pull_u16", 65535),
        ("push_i32", "pull_i32", -(1 << 31)),
        ("push_i64", "pull_i64", (1 << 63) - 1),
        ("push_f64", "pull_f64", 3.141592653589793),
        ("push_f32", "pull_f32", 0.5),
        ("push_byte", "pull_byte", 200),
        ("push_bool", "pull_bool", True),
        ("push_bool", "pull_bool", False),
        ("push_text", "pull_text", "héllo wörld"),
        ("push_text", "pull_text", ""),
    ],
)
def test_fixed_roundtrips(push, pull, value):
    assert _roundtrip(push, pull, value) == value


def test_f32_loses_precision_but_stays_close():
    result = _roundtrip("push_f32", "pull_f32", 0.1)
    assert math.isclose(result, 0.1, rel_tol=1e-6)


def test_byte_accepts_signed_values():
    writer = Buffer()
    writer.push_byte(-1)
    assert Buffer(writer.getvalue()).pull_byte() == 255


@pytest.mark.parametrize(
    "push,value",
    [("push_byte", 256), ("push_byte", -129), ("push_i16", 1 << 15), ("push_u16", -1)],
)
def test_fixed_out_of_range(push, value):
    with pytest.raises(WireError):
        getattr(Buffer(), push)(value)


def test_pull_past_end_raises():
    with pytest.raises(WireError):
        Buffer(b"\x00\x01").pull_i32()


def test_text_length_prefix_counts_bytes():
    writer = Buffer()
    writer.push_text("é")
    data = writer.getvalue()
    assert data[0] == len("é".encode("utf-8"))
    assert data[1:] == "é".encode("utf-8")


def test_truncated_text_raises():
    with pytest.raises(WireError):
        Buffer(b"\x05ab").pull_text()


def test_bytes_prefixed_and_raw():
    writer = Buffer()
    writer.push_bytes(b"abc", True)
    writer.push_bytes(b"xyz", False)
    reader = Buffer(writer.getvalue())
    assert reader.pull_bytes() == b"abc"
    assert reader.remaining() == b"xyz"
    assert reader.remaining() == b"xyz"


def test_uuid_roundtrip():
    value = uuid.UUID("12345678-1234-5678-1234-567812345678")
    writer = Buffer()
    writer.push_uuid(value)
    assert writer.getvalue() == value.bytes
    assert Buffer(writer.getvalue()).pull_uuid() == value


def test_position_known_packing():
    writer = Buffer()
    writer.push_position(BlockPosition(18357644, 831, -20882616))
    assert writer.getvalue() == bytes.fromhex("4607632c15b4833f")


@pytest.mark.parametrize(
    "position",
    [
        BlockPosition(0, 0, 0),
        BlockPosition(-1, -1, -1),
        BlockPosition(-(1 << 25), -2048, (1 << 25) - 1),
        BlockPosition(123, -64, -456),
    ],
)
def test_position_roundtrip(position):
    assert _roundtrip("push_position", "pull_position", position) == position


def test_position_out_of_range():
    with pytest.raises(WireError):
        BlockPosition(0, 2048, 0)


def test_getvalue_and_len():
    writer = Buffer()
    writer.push_i32(7)
    writer.push_bool(True)
    assert len(writer) == len(writer.getvalue()) == 5


def test_angle_push_and_range():
    writer = Buffer()
    Angle(64).push(writer)
    Angle(255).push(writer)
    assert writer.getvalue() == bytes([64, 255])
    with pytest.raises(WireError):
        Angle(256)


def test_encode_nbt_simple_compound():
    assert encode_nbt({"a": 1}) == b"\x0a\x03\x00\x01a\x00\x00\x00\x01\x00"


def test_encode_nbt_named_root_adds_name():
    value = {"k": "v"}
    nameless = encode_nbt(value)
    named = encode_nbt(value, "root")
    assert named[:1] == nameless[:1]
    assert named[1:3] == len("root").to_bytes(2, "big")
    assert named[3:7] == b"root"
    assert named[7:] == nameless[1:]


def test_encode_nbt_long_for_large_ints():
    assert encode_nbt(1 << 40)[0] == 4
    assert encode_nbt(5)[0] == 3
    assert encode_nbt(True)[0] == 1
    assert encode_nbt(1.5)[0] == 6


def test_encode_nbt_errors():
    with pytest.raises(WireError):
        encode_nbt(object())
    with pytest.raises(WireError):
        encode_nbt([1, "x"])
    with pytest.raises(WireError):
        encode_nbt({1: "x"})
    with pytest.raises(WireError):
        encode_nbt(1 << 70)


def test_encode_nbt_empty_list_uses_end_tag():
    data = encode_nbt([])
    assert data == bytes([9, 0]) + (0).to_bytes(4, "big")


def test_text_message_omits_empty_fields():
    message = NbtTextMessage(type="text", text="hi", bold=True)
    assert message.to_nbt() == {"type": "text", "text": "hi", "bold": True}


def test_text_message_extra_is_nested():
    message = NbtTextMessage(text="a", extra=[NbtTextMessage(text="b", color="red")])
    assert message.to_nbt() == {"text": "a", "extra": [{"text": "b", "color": "red"}]}


def test_text_message_push_matches_encoding():
    message = NbtTextMessage(type="text", text="hi")
    writer = Buffer()
    message.push(writer)
    assert writer.getvalue() == (
        b"\x0a"
        b"\x08\x00\x04type\x00\x04text"
        b"\x08\x00\x04text\x00\x02hi"
        b"\x00"
    )
    assert writer.getvalue() == encode_nbt(message)