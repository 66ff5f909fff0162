"""Packets sent by the client while in the play state."""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import ClassVar, TypeVar

from .wire import BlockPosition, Buffer, WireError

_E = TypeVar("_E", bound=Enum)


def _enum(enum_cls: type[_E], raw: int) -> _E:
    try:
        return enum_cls(raw)
    except ValueError:
        raise WireError(f"{raw} is not a valid {enum_cls.__name__}") from None


@dataclass(frozen=True)
class KeepAlive:
    packet_id: ClassVar[int] = 0x1A

    keep_alive_id: int

    @classmethod
    def decode(cls, reader: Buffer) -> "KeepAlive":
        return cls(keep_alive_id=reader.pull_i64())


@dataclass(frozen=True)
class ChatMessage:
    packet_id: ClassVar[int] = 0x03

    message: str

    @classmethod
    def decode(cls, reader: Buffer) -> "ChatMessage":
        return cls(message=reader.pull_text())


@dataclass(frozen=True)
class TeleportConfirm:
    packet_id: ClassVar[int] = 0x00

    teleport_id: int

    @classmethod
    def decode(cls, reader: Buffer) -> "TeleportConfirm":
        return cls(teleport_id=reader.pull_varint())


@dataclass(frozen=True)
class QueryBlockNbt:
    packet_id: ClassVar[int] = 0x01

    transaction_id: int
    position: BlockPosition

    @classmethod
    def decode(cls, reader: Buffer) -> "QueryBlockNbt":
        return cls(transaction_id=reader.pull_varint(), position=reader.pull_position())


@dataclass(frozen=True)
class SetDifficulty:
    packet_id: ClassVar[int] = 0x02

    difficulty: int

    @classmethod
    def decode(cls, reader: Buffer) -> "SetDifficulty":
        return cls(difficulty=reader.pull_byte())


@dataclass(frozen=True)
class ClientStatus:
    packet_id: ClassVar[int] = 0x04

    action: int

    @classmethod
    def decode(cls, reader: Buffer) -> "ClientStatus":
        return cls(action=reader.pull_varint())


@dataclass(frozen=True)
class PlayerAbilities:
    packet_id: ClassVar[int] = 0x26

    flags: int

    @classmethod
    def decode(cls, reader: Buffer) -> "PlayerAbilities":
        return cls(flags=reader.pull_byte())


@dataclass(frozen=True)
class PlayerPosition:
    packet_id: ClassVar[int] = 0x11

    x: float
    y: float
    z: float
    on_ground: bool

    @classmethod
    def decode(cls, reader: Buffer) -> "PlayerPosition":
        return cls(
            x=reader.pull_f64(),
            y=reader.pull_f64(),
            z=reader.pull_f64(),
            on_ground=reader.pull_bool(),
        )


@dataclass(frozen=True)
class PlayerLocation:
    packet_id: ClassVar[int] = 0x12

    x: float
    y: float
    z: float
    yaw: float
    pitch: float
    on_ground: bool

    @classmethod
    def decode(cls, reader: Buffer) -> "PlayerLocation":
        return cls(
            x=reader.pull_f64(),
            y=reader.pull_f64(),
            z=reader.pull_f64(),
            yaw=reader.pull_f32(),
            pitch=reader.pull_f32(),
            on_ground=reader.pull_bool(),
        )


@dataclass(frozen=True)
class PlayerRotation:
    packet_id: ClassVar[int] = 0x13

    yaw: float
    pitch: float
    on_ground: bool

    @classmethod
    def decode(cls, reader: Buffer) -> "PlayerRotation":
        return cls(
            yaw=reader.pull_f32(),
            pitch=reader.pull_f32(),
            on_ground=reader.pull_bool(),
        )


@dataclass(frozen=True)
class ChatSessionUpdate:
    packet_id: ClassVar[int] = 0x08

    session_id: uuid.UUID
    expires_at: int
    public_key: bytes
    key_signature: bytes

    @classmethod
    def decode(cls, reader: Buffer) -> "ChatSessionUpdate":
        return cls(
            session_id=reader.pull_uuid(),
            expires_at=reader.pull_i64(),
            public_key=reader.pull_bytes(),
            key_signature=reader.pull_bytes(),
        )


@dataclass(frozen=True)
class ClientTickEnd:
    packet_id: ClassVar[int] = 0x0B

    tick_delta: int

    @classmethod
    def decode(cls, reader: Buffer) -> "ClientTickEnd":
        return cls(tick_delta=reader.pull_varint())


@dataclass(frozen=True)
class MovePlayerPosRot:
    packet_id: ClassVar[int] = 0x1D

    x: float
    y: float
    z: float
    yaw: float
    pitch: float
    flags: int

    @classmethod
    def decode(cls, reader: Buffer) -> "MovePlayerPosRot":
        return cls(
            x=reader.pull_f64(),
            y=reader.pull_f64(),
            z=reader.pull_f64(),
            yaw=reader.pull_f32(),
            pitch=reader.pull_f32(),
            flags=reader.pull_byte(),
        )


@dataclass(frozen=True)
class MovePlayerPos:
    packet_id: ClassVar[int] = 0x1C

    x: float
    y: float
    z: float
    flags: int

    @classmethod
    def decode(cls, reader: Buffer) -> "MovePlayerPos":
        return cls(
            x=reader.pull_f64(),
            y=reader.pull_f64(),
            z=reader.pull_f64(),
            flags=reader.pull_byte(),
        )


@dataclass(frozen=True)
class MovePlayerRot:
    packet_id: ClassVar[int] = 0x1E

    yaw: float
    pitch: float
    flags: int

    @classmethod
    def decode(cls, reader: Buffer) -> "MovePlayerRot":
        return cls(
            yaw=reader.pull_f32(),
            pitch=reader.pull_f32(),
            flags=reader.pull_byte(),
        )


@dataclass(frozen=True)
class MovePlayerStatusOnly:
    packet_id: ClassVar[int] = 0x1F

    flags: int

    @classmethod
    def decode(cls, reader: Buffer) -> "MovePlayerStatusOnly":
        return cls(flags=reader.pull_byte())


@dataclass(frozen=True)
class PlayerInput:
    packet_id: ClassVar[int] = 0x29

    flags: int

    @classmethod
    def decode(cls, reader: Buffer) -> "PlayerInput":
        return cls(flags=reader.pull_byte())


@dataclass(frozen=True)
class ChatCommand:
    packet_id: ClassVar[int] = 0x05

    command: str

    @classmethod
    def decode(cls, reader: Buffer) -> "ChatCommand":
        return cls(command=reader.pull_text())


@dataclass(frozen=True)
class PlayerLoaded:
    packet_id: ClassVar[int] = 0x2A

    @classmethod
    def decode(cls, reader: Buffer) -> "PlayerLoaded":
        return cls()


@dataclass(frozen=True)
class PlayerCommand:
    packet_id: ClassVar[int] = 0x28

    entity_id: int
    action_id: int
    jump_boost: int

    @classmethod
    def decode(cls, reader: Buffer) -> "PlayerCommand":
        return cls(
            entity_id=reader.pull_varint(),
            action_id=reader.pull_varint(),
            jump_boost=reader.pull_varint(),
        )


@dataclass(frozen=True)
class ContainerClose:
    packet_id: ClassVar[int] = 0x11

    container_id: int

    @classmethod
    def decode(cls, reader: Buffer) -> "ContainerClose":
        return cls(container_id=reader.pull_varint())


@dataclass(frozen=True)
class AcceptTeleportation:
    packet_id: ClassVar[int] = 0x00

    teleport_id: int

    @classmethod
    def decode(cls, reader: Buffer) -> "AcceptTeleportation":
        return cls(teleport_id=reader.pull_varint())


@dataclass(frozen=True)
class ChunkBatchReceived:
    packet_id: ClassVar[int] = 0x09

    chunks_per_tick: float

    @classmethod
    def decode(cls, reader: Buffer) -> "ChunkBatchReceived":
        return cls(chunks_per_tick=reader.pull_f32())


class PlayerActionStatus(IntEnum):
    STARTED_DIGGING = 0
    CANCELLED_DIGGING = 1
    FINISHED_DIGGING = 2
    DROP_ITEM_STACK = 3
    DROP_ITEM = 4
    SHOOT_ARROW = 5
    SWAP_ITEM_IN_HAND = 6


class PlayerActionFace(IntEnum):
    BOTTOM = 0
    TOP = 1
    NORTH = 2
    SOUTH = 3
    WEST = 4
    EAST = 5


@dataclass(frozen=True)
class PlayerAction:
    packet_id: ClassVar[int] = 0x27

    status: PlayerActionStatus
    location: BlockPosition
    face: PlayerActionFace
    sequence: int

    @classmethod
    def decode(cls, reader: Buffer) -> "PlayerAction":
        return cls(
            status=_enum(PlayerActionStatus, reader.pull_varint()),
            location=reader.pull_position(),
            face=_enum(PlayerActionFace, reader.pull_byte()),
            sequence=reader.pull_varint(),
        )


class SwingHand(IntEnum):
    MAIN_HAND = 0
    OFFHAND = 1


@dataclass(frozen=True)
class Swing:
    packet_id: ClassVar[int] = 0x3A

    hand: SwingHand

    @classmethod
    def decode(cls, reader: Buffer) -> "Swing":
        return cls(hand=_enum(SwingHand, reader.pull_byte()))