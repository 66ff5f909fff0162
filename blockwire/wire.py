"""Binary primitives of the game protocol and network NBT encoding."""

from __future__ import annotations

import struct
import uuid as _uuid
from dataclasses import dataclass, field
from typing import Any


class WireError(ValueError):
    """Raised when a value cannot be written to or read from the wire."""


_I32_MIN, _I32_MAX = -(1 << 31), (1 << 31) - 1
_I64_MIN, _I64_MAX = -(1 << 63), (1 << 63) - 1


@dataclass(frozen=True)
class BlockPosition:
    """Integer block coordinates as packed into a single 64-bit value."""

    x: int
    y: int
    z: int

    def __post_init__(self) -> None:
        if not -(1 << 25) <= self.x < (1 << 25):
            raise WireError(f"x coordinate {self.x} does not fit in 26 bits")
        if not -(1 << 25) <= self.z < (1 << 25):
            raise WireError(f"z coordinate {self.z} does not fit in 26 bits")
        if not -(1 << 11) <= self.y < (1 << 11):
            raise WireError(f"y coordinate {self.y} does not fit in 12 bits")


def _signed(value: int, bits: int) -> int:
    value &= (1 << bits) - 1
    if value >= 1 << (bits - 1):
        value -= 1 << bits
    return value


class Buffer:
    """A growable byte buffer that is written at the end and read from the front."""

    def __init__(self, data: bytes = b"") -> None:
        self._data = bytearray(data)
        self._pos = 0

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"Buffer({bytes(self._data)!r}, read={self._pos})"

    # ---- internals ----

    def _take(self, count: int) -> bytes:
        end = self._pos + count
        if end > len(self._data):
            raise WireError(
                f"need {count} bytes at offset {self._pos}, "
                f"only {len(self._data) - self._pos} left"
            )
        chunk = bytes(self._data[self._pos:end])
        self._pos = end
        return chunk

    def _pack(self, fmt: str, value: Any) -> None:
        try:
            self._data += struct.pack(fmt, value)
        except (struct.error, OverflowError, TypeError) as exc:
            raise WireError(f"cannot encode {value!r} as {fmt}: {exc}") from exc

    def _unpack(self, fmt: str) -> Any:
        return struct.unpack(fmt, self._take(struct.calcsize(fmt)))[0]

    def _push_var(self, value: int, bits: int) -> None:
        low, high = -(1 << (bits - 1)), (1 << (bits - 1)) - 1
        if not low <= value <= high:
            raise WireError(f"{value} does not fit in a {bits}-bit variable integer")
        value &= (1 << bits) - 1
        while True:
            byte = value & 0x7F
            value >>= 7
            if value:
                self._data.append(byte | 0x80)
            else:
                self._data.append(byte)
                return

    def _pull_var(self, max_bytes: int, bits: int) -> int:
        result = 0
        for shift in range(0, 7 * max_bytes, 7):
            byte = self._take(1)[0]
            result |= (byte & 0x7F) << shift
            if not byte & 0x80:
                break
        else:
            raise WireError("variable-length integer is too long")
        return _signed(result, bits)

    # ---- variable-length integers ----

    def push_varint(self, value: int) -> None:
        self._push_var(value, 32)

    def pull_varint(self) -> int:
        return self._pull_var(5, 32)

    def push_varlong(self, value: int) -> None:
        self._push_var(value, 64)

    def pull_varlong(self) -> int:
        return self._pull_var(10, 64)

    # ---- fixed-width values ----

    def push_bool(self, value: bool) -> None:
        self._data.append(1 if value else 0)

    def pull_bool(self) -> bool:
        return self._take(1)[0] != 0

    def push_byte(self, value: int) -> None:
        """Write one byte; signed values from -128 are stored as their two's complement."""
        if not -128 <= value <= 255:
            raise WireError(f"{value} does not fit in a byte")
        self._data.append(value & 0xFF)

    def pull_byte(self) -> int:
        """Read one unsigned byte."""
        return self._take(1)[0]

    def push_i16(self, value: int) -> None:
        self._pack(">h", value)

    def pull_i16(self) -> int:
        return self._unpack(">h")

    def push_u16(self, value: int) -> None:
        self._pack(">H", value)

    def pull_u16(self) -> int:
        return self._unpack(">H")

    def push_i32(self, value: int) -> None:
        self._pack(">i", value)

    def pull_i32(self) -> int:
        return self._unpack(">i")

    def push_i64(self, value: int) -> None:
        self._pack(">q", value)

    def pull_i64(self) -> int:
        return self._unpack(">q")

    def push_f32(self, value: float) -> None:
        self._pack(">f", value)

    def pull_f32(self) -> float:
        return self._unpack(">f")

    def push_f64(self, value: float) -> None:
        self._pack(">d", value)

    def pull_f64(self) -> float:
        return self._unpack(">d")

    # ---- composite values ----

    def push_text(self, value: str) -> None:
        """Write a string as a varint byte length followed by UTF-8."""
        encoded = value.encode("utf-8")
        self.push_varint(len(encoded))
        self._data += encoded

    def pull_text(self) -> str:
        length = self.pull_varint()
        if length < 0:
            raise WireError(f"negative string length {length}")
        try:
            return self._take(length).decode("utf-8")
        except UnicodeDecodeError as exc:
            raise WireError(f"string is not valid UTF-8: {exc}") from exc

    def push_bytes(self, data: bytes, prefixed: bool) -> None:
        """Write raw bytes, preceded by their varint length when ``prefixed``."""
        if prefixed:
            self.push_varint(len(data))
        self._data += data

    def pull_bytes(self) -> bytes:
        """Read a varint-length-prefixed byte string."""
        length = self.pull_varint()
        if length < 0:
            raise WireError(f"negative byte array length {length}")
        return self._take(length)

    def push_uuid(self, value: _uuid.UUID) -> None:
        self._data += value.bytes

    def pull_uuid(self) -> _uuid.UUID:
        return _uuid.UUID(bytes=self._take(16))

    def push_position(self, position: BlockPosition) -> None:
        packed = (
            ((position.x & 0x3FFFFFF) << 38)
            | ((position.z & 0x3FFFFFF) << 12)
            | (position.y & 0xFFF)
        )
        self.push_i64(_signed(packed, 64))

    def pull_position(self) -> BlockPosition:
        packed = self.pull_i64()
        return BlockPosition(
            x=packed >> 38,
            y=_signed(packed, 12),
            z=_signed(packed >> 12, 26),
        )

    # ---- whole-buffer access ----

    def remaining(self) -> bytes:
        """Return the bytes not yet read, without consuming them."""
        return bytes(self._data[self._pos:])

    def getvalue(self) -> bytes:
        """Return everything written to the buffer."""
        return bytes(self._data)


class Angle(int):
    """A rotation in steps of 1/256 of a full turn, sent as one byte."""

    def __new__(cls, value: int = 0) -> "Angle":
        if not 0 <= value <= 255:
            raise WireError(f"angle {value} is outside 0..255")
        return super().__new__(cls, value)

    def push(self, writer: Buffer) -> None:
        writer.push_byte(int(self))


# ---- NBT ----

TAG_END = 0
TAG_BYTE = 1
TAG_SHORT = 2
TAG_INT = 3
TAG_LONG = 4
TAG_FLOAT = 5
TAG_DOUBLE = 6
TAG_BYTE_ARRAY = 7
TAG_STRING = 8
TAG_LIST = 9
TAG_COMPOUND = 10


def _modified_utf8(text: str) -> bytes:
    raw = text.encode("utf-16-be", "surrogatepass")
    out = bytearray()
    for (unit,) in struct.iter_unpack(">H", raw):
        if 0 < unit <= 0x7F:
            out.append(unit)
        elif unit <= 0x7FF:
            out += bytes((0xC0 | (unit >> 6), 0x80 | (unit & 0x3F)))
        else:
            out += bytes(
                (0xE0 | (unit >> 12), 0x80 | ((unit >> 6) & 0x3F), 0x80 | (unit & 0x3F))
            )
    return bytes(out)


def _nbt_string(text: str) -> bytes:
    encoded = _modified_utf8(text)
    if len(encoded) > 0xFFFF:
        raise WireError("NBT string is longer than 65535 bytes")
    return struct.pack(">H", len(encoded)) + encoded


def _normalise(value: Any) -> Any:
    to_nbt = getattr(value, "to_nbt", None)
    return to_nbt() if callable(to_nbt) else value


def _tag_of(value: Any) -> int:
    if isinstance(value, bool):
        return TAG_BYTE
    if isinstance(value, int):
        if _I32_MIN <= value <= _I32_MAX:
            return TAG_INT
        if _I64_MIN <= value <= _I64_MAX:
            return TAG_LONG
        raise WireError(f"integer {value} does not fit in an NBT long")
    if isinstance(value, float):
        return TAG_DOUBLE
    if isinstance(value, str):
        return TAG_STRING
    if isinstance(value, (bytes, bytearray)):
        return TAG_BYTE_ARRAY
    if isinstance(value, dict):
        return TAG_COMPOUND
    if isinstance(value, (list, tuple)):
        return TAG_LIST
    raise WireError(f"cannot encode {type(value).__name__} as NBT")


def _list_element_tag(items: list) -> int:
    tags = {_tag_of(item) for item in items}
    if not tags:
        return TAG_END
    if tags == {TAG_INT, TAG_LONG}:
        return TAG_LONG
    if len(tags) > 1:
        raise WireError("NBT list elements must all have the same type")
    return tags.pop()


def _payload(tag: int, value: Any) -> bytes:
    if tag == TAG_BYTE:
        return struct.pack(">b", 1 if value else 0)
    if tag == TAG_INT:
        return struct.pack(">i", value)
    if tag == TAG_LONG:
        return struct.pack(">q", value)
    if tag == TAG_DOUBLE:
        return struct.pack(">d", value)
    if tag == TAG_STRING:
        return _nbt_string(value)
    if tag == TAG_BYTE_ARRAY:
        return struct.pack(">i", len(value)) + bytes(value)
    if tag == TAG_LIST:
        items = [_normalise(item) for item in value]
        element_tag = _list_element_tag(items)
        body = b"".join(_payload(element_tag, item) for item in items)
        return struct.pack(">bi", element_tag, len(items)) + body
    if tag == TAG_COMPOUND:
        parts = []
        for key, item in value.items():
            if not isinstance(key, str):
                raise WireError(f"NBT compound key {key!r} is not a string")
            item = _normalise(item)
            item_tag = _tag_of(item)
            parts.append(bytes([item_tag]) + _nbt_string(key) + _payload(item_tag, item))
        return b"".join(parts) + bytes([TAG_END])
    raise WireError(f"unsupported NBT tag {tag}")


def encode_nbt(value: Any, name: str | None = None) -> bytes:
    """Encode a Python value as NBT.

    Without ``name`` the root tag is nameless, as the network format requires.
    Booleans become bytes, ints become ints or longs, floats doubles, strings
    strings, bytes byte arrays, lists lists and dicts compounds. Objects with a
    ``to_nbt`` method are encoded through it.
    """
    value = _normalise(value)
    tag = _tag_of(value)
    head = bytes([tag])
    if name is not None:
        head += _nbt_string(name)
    return head + _payload(tag, value)


@dataclass
class NbtTextMessage:
    """A chat text component as sent in NBT form."""

    type: str = ""
    text: str = ""
    color: str = ""
    font: str = ""
    bold: bool = False
    italic: bool = False
    underlined: bool = False
    strikethrough: bool = False
    obfuscated: bool = False
    extra: list["NbtTextMessage"] = field(default_factory=list)

    def to_nbt(self) -> dict[str, Any]:
        """Return the compound with empty fields left out."""
        compound: dict[str, Any] = {}
        for key in ("type", "text", "color", "font"):
            if getattr(self, key):
                compound[key] = getattr(self, key)
        for key in ("bold", "italic", "underlined", "strikethrough", "obfuscated"):
            if getattr(self, key):
                compound[key] = True
        if self.extra:
            compound["extra"] = [message.to_nbt() for message in self.extra]
        return compound

    def push(self, writer: Buffer) -> None:
        writer.push_bytes(encode_nbt(self.to_nbt()), False)