"""Packets sent by the client during handshake, status, login and configuration."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from enum import Enum, IntEnum, IntFlag
from typing import ClassVar, TypeVar

from .wire import Buffer, WireError

_E = TypeVar("_E", bound=Enum)


def _enum(enum_cls: type[_E], raw: int) -> _E:
    try:
        return enum_cls(raw)
    except ValueError:
        raise WireError(f"{raw} is not a valid {enum_cls.__name__}") from None


class PacketState(Enum):
    """Protocol state of a connection."""

    HANDSHAKE = "handshake"
    STATUS = "status"
    LOGIN = "login"
    CONFIGURATION = "configuration"
    PLAY = "play"

    @classmethod
    def from_intent(cls, intent: int) -> "PacketState":
        """Map the handshake's next-state field to a state."""
        states = {1: cls.STATUS, 2: cls.LOGIN, 3: cls.LOGIN}
        try:
            return states[intent]
        except KeyError:
            raise WireError(f"unknown handshake intent {intent}") from None


class ChatMode(IntEnum):
    ENABLED = 0
    COMMANDS_ONLY = 1
    HIDDEN = 2


class MainHand(IntEnum):
    LEFT = 0
    RIGHT = 1


class SkinParts(IntFlag):
    """Displayed skin layers, one bit each."""

    CAPE = 0x01
    BODY = 0x02
    ARM_LEFT = 0x04
    ARM_RIGHT = 0x08
    LEG_LEFT = 0x10
    LEG_RIGHT = 0x20
    HEAD = 0x40


# ---- handshake ----


@dataclass(frozen=True)
class Handshake:
    packet_id: ClassVar[int] = 0x00

    protocol_version: int
    host: str
    port: int
    next_state: PacketState

    @classmethod
    def decode(cls, reader: Buffer) -> "Handshake":
        return cls(
            protocol_version=reader.pull_varint(),
            host=reader.pull_text(),
            port=reader.pull_u16(),
            next_state=PacketState.from_intent(reader.pull_varint()),
        )


# ---- status ----


@dataclass(frozen=True)
class StatusRequest:
    packet_id: ClassVar[int] = 0x00

    @classmethod
    def decode(cls, reader: Buffer) -> "StatusRequest":
        return cls()


@dataclass(frozen=True)
class Ping:
    packet_id: ClassVar[int] = 0x01

    ping: int

    @classmethod
    def decode(cls, reader: Buffer) -> "Ping":
        return cls(ping=reader.pull_i64())


# ---- login ----


@dataclass(frozen=True)
class LoginStart:
    packet_id: ClassVar[int] = 0x00

    player_name: str

    @classmethod
    def decode(cls, reader: Buffer) -> "LoginStart":
        return cls(player_name=reader.pull_text())


@dataclass(frozen=True)
class EncryptionResponse:
    packet_id: ClassVar[int] = 0x01

    shared_secret: bytes
    verify_token: bytes

    @classmethod
    def decode(cls, reader: Buffer) -> "EncryptionResponse":
        return cls(shared_secret=reader.pull_bytes(), verify_token=reader.pull_bytes())


@dataclass(frozen=True)
class LoginPluginResponse:
    packet_id: ClassVar[int] = 0x02

    message_id: int
    success: bool
    data: bytes

    @classmethod
    def decode(cls, reader: Buffer) -> "LoginPluginResponse":
        message_id = reader.pull_varint()
        success = reader.pull_bool()
        return cls(message_id=message_id, success=success, data=reader.remaining())


@dataclass(frozen=True)
class LoginAcknowledged:
    packet_id: ClassVar[int] = 0x03

    @classmethod
    def decode(cls, reader: Buffer) -> "LoginAcknowledged":
        return cls()


# ---- configuration ----


@dataclass(frozen=True)
class CustomPayload:
    packet_id: ClassVar[int] = 0x02

    channel: str
    data: bytes

    @classmethod
    def decode(cls, reader: Buffer) -> "CustomPayload":
        return cls(channel=reader.pull_text(), data=reader.pull_bytes())


@dataclass(frozen=True)
class KnownPack:
    namespace: str
    id: str
    version: str


@dataclass(frozen=True)
class SelectKnownPacks:
    packet_id: ClassVar[int] = 0x07

    known_packs: list[KnownPack] = field(default_factory=list)

    @classmethod
    def decode(cls, reader: Buffer) -> "SelectKnownPacks":
        count = reader.pull_varint()
        if count < 0:
            raise WireError(f"negative known pack count {count}")
        packs = [
            KnownPack(
                namespace=reader.pull_text(),
                id=reader.pull_text(),
                version=reader.pull_text(),
            )
            for _ in range(count)
        ]
        return cls(known_packs=packs)


@dataclass(frozen=True)
class FinishConfiguration:
    packet_id: ClassVar[int] = 0x03

    @classmethod
    def decode(cls, reader: Buffer) -> "FinishConfiguration":
        return cls()


@dataclass(frozen=True)
class ClientInformation:
    packet_id: ClassVar[int] = 0x05

    locale: str
    view_distance: int
    chat_mode: ChatMode
    chat_colors: bool
    skin_parts: SkinParts
    main_hand: MainHand
    enable_text_filtering: bool
    allow_server_listings: bool
    particle_status: int

    @classmethod
    def decode(cls, reader: Buffer) -> "ClientInformation":
        return cls(
            locale=reader.pull_text(),
            view_distance=reader.pull_byte(),
            chat_mode=_enum(ChatMode, reader.pull_varint()),
            chat_colors=reader.pull_bool(),
            skin_parts=SkinParts(reader.pull_byte()),
            main_hand=_enum(MainHand, reader.pull_varint()),
            enable_text_filtering=reader.pull_bool(),
            allow_server_listings=reader.pull_bool(),
            particle_status=reader.pull_varint(),
        )


__all__ = [
    "ChatMode",
    "ClientInformation",
    "CustomPayload",
    "EncryptionResponse",
    "FinishConfiguration",
    "Handshake",
    "KnownPack",
    "LoginAcknowledged",
    "LoginPluginResponse",
    "LoginStart",
    "MainHand",
    "PacketState",
    "Ping",
    "SelectKnownPacks",
    "SkinParts",
    "StatusRequest",
    "uuid",
]