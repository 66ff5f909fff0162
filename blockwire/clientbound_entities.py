"""Play-state packets that spawn, animate and remove entities and change blocks."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from enum import IntEnum
from typing import ClassVar

from .wire import Angle, BlockPosition, Buffer


@dataclass
class AddEntity:
    """Spawn an entity; angles are in 1/256 turns."""

    packet_id: ClassVar[int] = 0x01

    entity_id: int
    entity_uuid: uuid.UUID
    type: int
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    pitch: int = 0
    yaw: int = 0
    head_yaw: int = 0
    data: int = 0
    velocity_x: int = 0
    velocity_y: int = 0
    velocity_z: int = 0

    def push(self, writer: Buffer) -> None:
        angles = [Angle(self.pitch), Angle(self.yaw), Angle(self.head_yaw)]
        writer.push_varint(self.entity_id)
        writer.push_uuid(self.entity_uuid)
        writer.push_varint(self.type)
        writer.push_f64(self.x)
        writer.push_f64(self.y)
        writer.push_f64(self.z)
        for angle in angles:
            angle.push(writer)
        writer.push_varint(self.data)
        writer.push_i16(self.velocity_x)
        writer.push_i16(self.velocity_y)
        writer.push_i16(self.velocity_z)


class Animation(IntEnum):
    SWING = 0
    LEAVE_BED = 1
    SWING_OFFHAND = 2
    CRITICAL_EFFECT = 3
    MAGIC_CRITICAL_EFFECT = 4


@dataclass
class Animate:
    packet_id: ClassVar[int] = 0x03

    entity_id: int
    animation: Animation

    def push(self, writer: Buffer) -> None:
        writer.push_varint(self.entity_id)
        writer.push_byte(int(self.animation))


@dataclass
class BlockChangedAck:
    packet_id: ClassVar[int] = 0x05

    sequence: int

    def push(self, writer: Buffer) -> None:
        writer.push_varint(self.sequence)


class BlockEventAction(IntEnum):
    BREAK = 0
    PLACE = 1


class BlockType(IntEnum):
    AIR = 0
    STONE = 1
    GRASS = 2


@dataclass
class BlockEvent:
    packet_id: ClassVar[int] = 0x08

    location: BlockPosition
    action_id: BlockEventAction
    action_parameter: BlockEventAction
    block_type: BlockType

    def push(self, writer: Buffer) -> None:
        writer.push_position(self.location)
        writer.push_i32(int(self.action_id))
        writer.push_i32(int(self.action_parameter))
        writer.push_i32(int(self.block_type))


@dataclass
class BlockUpdate:
    packet_id: ClassVar[int] = 0x09

    location: BlockPosition
    block_id: int

    def push(self, writer: Buffer) -> None:
        writer.push_position(self.location)
        writer.push_varint(self.block_id)


@dataclass
class ForgetLevelChunk:
    """Unload a chunk; the wire order is z before x."""

    packet_id: ClassVar[int] = 0x22

    x: int
    z: int

    def push(self, writer: Buffer) -> None:
        writer.push_i32(self.z)
        writer.push_i32(self.x)


@dataclass
class PlayerInfoRemove:
    packet_id: ClassVar[int] = 0x3F

    uuids: list[uuid.UUID] = field(default_factory=list)

    def push(self, writer: Buffer) -> None:
        writer.push_varint(len(self.uuids))
        for player in self.uuids:
            writer.push_uuid(player)


@dataclass
class RemoveEntities:
    packet_id: ClassVar[int] = 0x47

    entity_ids: list[int] = field(default_factory=list)

    def push(self, writer: Buffer) -> None:
        writer.push_varint(len(self.entity_ids))
        for entity_id in self.entity_ids:
            writer.push_varint(entity_id)