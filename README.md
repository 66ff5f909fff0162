# blockwire

Packet encoding and decoding for a block-game network protocol. It is plain
Python with no third-party dependencies.

## What it provides

- `blockwire.wire` provides the primitive types.
  - `Buffer` is a byte buffer. It has `push_*` and `pull_*` methods for
    VarInt, VarLong, bool, byte, i16, u16, i32, i64, f32, f64, length-prefixed
    text and byte arrays, UUIDs, and packed block positions (`BlockPosition`).
    `remaining()` returns the unread bytes. `getvalue()` returns everything
    written so far.
  - `Angle` is a one-byte rotation in 1/256 turns.
  - `encode_nbt(value, name=None)` encodes Python values as NBT: bool, int,
    float, str, bytes, list, dict, and any object that has a `to_nbt()`
    method.
  - `NbtTextMessage` is a text component that is written as nameless network
    NBT.
  - Values that cannot be encoded and input that is malformed or truncated
    raise `WireError`, which is a `ValueError`.
- `blockwire.serverbound` and `blockwire.serverbound_play` hold frozen
  dataclasses for the packets a client sends. Each has a `decode(reader)`
  classmethod and a `packet_id`. `serverbound` also defines `PacketState` and
  the enums `ChatMode`, `MainHand` and `SkinParts`. A value that falls outside
  one of the enums raises `WireError`.
- `blockwire.registry` maps a `PacketState` and a packet id to a packet class.
  - `incoming_packet_type(state, packet_id)` returns the class.
  - `decode_packet(state, packet_id, reader)` looks up the class and decodes
    the packet.
  - An id that is not registered raises `UnknownPacketError`.
- `blockwire.clientbound`, `blockwire.clientbound_entities` and
  `blockwire.clientbound_play` hold dataclasses for the packets a server
  sends. Each has a `packet_id` and a `push(writer)` method that writes the
  packet body.
  - `clientbound_play` also has action builders for `PlayerInfoUpdate`:
    `add_player_action`, `initialize_chat`, `update_game_mode`,
    `update_listed`, `update_latency`, `update_display_name`,
    `update_list_priority` and `update_hat`.
- `blockwire.entity_metadata` provides:
  - `EntityField` and the `MetadataType` enum.
  - The default field sets, returned by `base_fields()`,
    `living_entity_fields()` and `player_fields()`.
  - Encoding of byte, VarInt, VarLong, float, boolean and pose values, plus an
    absent optional text component. Value types it cannot encode raise
    `UnsupportedMetadataError`.
- `blockwire.entity_types` holds the read-only `ENTITY_TYPES` mapping.
  `entity_type(name)` returns the `EntityType` for a name, with its registry
  index, width and height. It raises `KeyError` for an unknown name.
- `blockwire.biomes` provides
  `load_closest_file(directory, target_temperature, target_downfall)`.
  - It walks a directory tree of `.json` climate files and returns
    `(ClimateData, path)` for the closest file, by squared distance.
  - It raises `FileNotFoundError` if no file is found.
  - It raises `ValueError` for a file that is not valid climate data.

## Example

```python
from blockwire.wire import Buffer
from blockwire.serverbound import PacketState
from blockwire.registry import decode_packet
from blockwire.clientbound import Pong

incoming = Buffer()
incoming.push_i64(1234)
ping = decode_packet(PacketState.STATUS, 0x01, Buffer(incoming.getvalue()))

reply = Buffer()
Pong(ping=ping.ping).push(reply)
payload = reply.getvalue()
```

## What it does not do

This is a codec library, not a server. It does not provide:

- Sockets, connection handling or a command to run.
- Packet framing: length prefixes, packet ids on the wire, compression or
  encryption. `push` writes only the body, and `decode` reads only the body.
- Decoding of the packets a server sends, or decoding of NBT. The NBT support
  is encode-only.
- World generation, players or game logic.

## Installing and testing

```
pip install .
pip install ".[test]"
pytest
```