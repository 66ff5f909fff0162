"""Packets sent by the server during status, login and configuration."""

from __future__ import annotations

import json
import uuid
from dataclasses import dataclass, field
from typing import Any, ClassVar

from .wire import Buffer, WireError, encode_nbt


def _json_text(value: Any) -> str:
    try:
        return json.dumps(value, separators=(",", ":"), ensure_ascii=False)
    except (TypeError, ValueError) as exc:
        raise WireError(f"cannot serialise {value!r} as JSON: {exc}") from exc


# ---- status ----


@dataclass
class StatusResponse:
    """Server list status, sent as a JSON document."""

    packet_id: ClassVar[int] = 0x00

    status: Any

    def push(self, writer: Buffer) -> None:
        writer.push_text(_json_text(self.status))


@dataclass
class Pong:
    packet_id: ClassVar[int] = 0x01

    ping: int

    def push(self, writer: Buffer) -> None:
        writer.push_i64(self.ping)


# ---- login ----


@dataclass
class Disconnect:
    """Login disconnect; ``reason`` is a chat component sent as JSON."""

    packet_id: ClassVar[int] = 0x00

    reason: Any

    def push(self, writer: Buffer) -> None:
        writer.push_text(_json_text(self.reason))


@dataclass
class EncryptionRequest:
    packet_id: ClassVar[int] = 0x01

    server: str
    public_key: bytes
    verify_token: bytes
    should_authenticate: bool

    def push(self, writer: Buffer) -> None:
        writer.push_text(self.server)
        writer.push_bytes(self.public_key, True)
        writer.push_bytes(self.verify_token, True)
        writer.push_bool(self.should_authenticate)


@dataclass
class Property:
    """A profile property such as the skin texture."""

    name: str
    value: str
    signature: str | None = None

    def push(self, writer: Buffer) -> None:
        writer.push_text(self.name)
        writer.push_text(self.value)
        writer.push_bool(self.signature is not None)
        if self.signature is not None:
            writer.push_text(self.signature)


@dataclass
class LoginSuccess:
    packet_id: ClassVar[int] = 0x02

    player_uuid: uuid.UUID
    player_name: str
    properties: list[Property] = field(default_factory=list)

    def push(self, writer: Buffer) -> None:
        writer.push_uuid(self.player_uuid)
        writer.push_text(self.player_name)
        writer.push_varint(len(self.properties))
        for prop in self.properties:
            prop.push(writer)


@dataclass
class SetCompression:
    packet_id: ClassVar[int] = 0x03

    threshold: int

    def push(self, writer: Buffer) -> None:
        writer.push_varint(self.threshold)


@dataclass
class LoginPluginRequest:
    packet_id: ClassVar[int] = 0x04

    message_id: int
    channel: str
    data: bytes = b""

    def push(self, writer: Buffer) -> None:
        writer.push_varint(self.message_id)
        writer.push_text(self.channel)
        writer.push_bytes(self.data, False)


# ---- configuration ----


@dataclass
class FinishConfiguration:
    packet_id: ClassVar[int] = 0x03

    def push(self, writer: Buffer) -> None:
        """Write the packet's body, which is empty."""
        writer.push_bytes(b"", False)


@dataclass
class CustomPayload:
    packet_id: ClassVar[int] = 0x01

    channel: str
    data: bytes

    def push(self, writer: Buffer) -> None:
        writer.push_text(self.channel)
        writer.push_bytes(self.data, True)


@dataclass
class UpdateEnabledFeatures:
    packet_id: ClassVar[int] = 0x0C

    features: list[str] = field(default_factory=list)

    def push(self, writer: Buffer) -> None:
        writer.push_varint(len(self.features))
        for feature in self.features:
            writer.push_text(feature)


@dataclass
class KnownPack:
    namespace: str
    id: str
    version: str

    def push(self, writer: Buffer) -> None:
        writer.push_text(self.namespace)
        writer.push_text(self.id)
        writer.push_text(self.version)


@dataclass
class SelectKnownPacks:
    packet_id: ClassVar[int] = 0x0E

    known_packs: list[KnownPack] = field(default_factory=list)

    def push(self, writer: Buffer) -> None:
        writer.push_varint(len(self.known_packs))
        for pack in self.known_packs:
            pack.push(writer)


@dataclass
class RegistryEntry:
    """A registry entry whose value is always present, sent as network NBT."""

    id: str
    value: Any

    def push(self, writer: Buffer) -> None:
        payload = encode_nbt(self.value)
        writer.push_text(self.id)
        writer.push_bool(True)
        writer.push_bytes(payload, False)


@dataclass
class RegistryData:
    packet_id: ClassVar[int] = 0x07

    id: str
    entries: list[RegistryEntry] = field(default_factory=list)

    def push(self, writer: Buffer) -> None:
        writer.push_text(self.id)
        writer.push_varint(len(self.entries))
        for entry in self.entries:
            entry.push(writer)


@dataclass
class LightUpdate:
    packet_id: ClassVar[int] = 0x2A

    chunk_x: int = 0
    chunk_z: int = 0
    sky_light_mask: int = 0
    block_light_mask: int = 0
    empty_sky_light_mask: int = 0
    empty_block_light_mask: int = 0
    sky_light: int = 0
    block_light: int = 0

    def push(self, writer: Buffer) -> None:
        for value in (
            self.chunk_x,
            self.chunk_z,
            self.sky_light_mask,
            self.block_light_mask,
            self.empty_sky_light_mask,
            self.empty_block_light_mask,
            self.sky_light,
            self.block_light,
        ):
            writer.push_i32(value)


@dataclass
class UpdateTags:
    """Tags sent as pre-encoded bytes."""

    packet_id: ClassVar[int] = 0x0D

    raw_data: bytes

    def push(self, writer: Buffer) -> None:
        writer.push_bytes(self.raw_data, False)