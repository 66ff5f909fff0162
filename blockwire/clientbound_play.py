"""Packets sent by the server while in the play state."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from typing import Callable, ClassVar, Iterable

from .clientbound import Property
from .entity_metadata import EntityField
from .wire import Angle, Buffer, NbtTextMessage

PlayerInfoAction = Callable[[Buffer], None]
"""Writes one action's data for a player in a player info update."""


def _push_longs(writer: Buffer, values: Iterable[int]) -> None:
    items = list(values)
    writer.push_varlong(len(items))
    for value in items:
        writer.push_i64(value)


# ---- joining ----


@dataclass
class JoinGame:
    """Login (play) packet. A death location is never sent."""

    packet_id: ClassVar[int] = 0x2C

    entity_id: int
    hardcore: bool = False
    dimension_names: list[str] = field(default_factory=list)
    max_players: int = 0
    view_distance: int = 0
    simulation_distance: int = 0
    reduce_debug: bool = False
    respawn_screen: bool = False
    do_limited_crafting: bool = False
    dimension_type: int = 0
    dimension_name: str = ""
    hashed_seed: int = 0
    game_mode: int = 0
    previous_game_mode: int = 0
    is_debug: bool = False
    is_flat: bool = False
    portal_cooldown: int = 0
    sea_level: int = 0
    enforce_secure_chat: bool = False

    def push(self, writer: Buffer) -> None:
        writer.push_i32(self.entity_id)
        writer.push_bool(self.hardcore)
        writer.push_varint(len(self.dimension_names))
        for name in self.dimension_names:
            writer.push_text(name)
        writer.push_varint(self.max_players)
        writer.push_varint(self.view_distance)
        writer.push_varint(self.simulation_distance)
        writer.push_bool(self.reduce_debug)
        writer.push_bool(self.respawn_screen)
        writer.push_bool(self.do_limited_crafting)
        writer.push_varint(self.dimension_type)
        writer.push_text(self.dimension_name)
        writer.push_i64(self.hashed_seed)
        writer.push_byte(self.game_mode)
        writer.push_byte(self.previous_game_mode)
        writer.push_bool(self.is_debug)
        writer.push_bool(self.is_flat)
        writer.push_bool(False)
        writer.push_varint(self.portal_cooldown)
        writer.push_varint(self.sea_level)
        writer.push_bool(self.enforce_secure_chat)


@dataclass
class KeepAlive:
    packet_id: ClassVar[int] = 0x27

    keep_alive_id: int

    def push(self, writer: Buffer) -> None:
        writer.push_i64(self.keep_alive_id)


@dataclass
class ServerDifficulty:
    packet_id: ClassVar[int] = 0x0E

    difficulty: int
    locked: bool = True

    def push(self, writer: Buffer) -> None:
        writer.push_byte(self.difficulty)
        writer.push_bool(self.locked)


@dataclass
class HeldItemChange:
    packet_id: ClassVar[int] = 0x40

    slot: int

    def push(self, writer: Buffer) -> None:
        writer.push_byte(self.slot)


@dataclass
class DeclareRecipes:
    """Only the number of recipes is sent."""

    packet_id: ClassVar[int] = 0x5B

    recipe_count: int = 0

    def push(self, writer: Buffer) -> None:
        writer.push_varint(self.recipe_count)


# ---- chunks ----


@dataclass
class PalettedContainer:
    bits_per_entry: int = 0
    palette: list[int] = field(default_factory=list)
    data_array: list[int] = field(default_factory=list)

    def push(self, writer: Buffer) -> None:
        writer.push_byte(self.bits_per_entry)
        writer.push_varint(len(self.palette))
        for entry in self.palette:
            writer.push_varint(entry)
        _push_longs(writer, self.data_array)


@dataclass
class ChunkSection:
    block_count: int = 0
    block_states: PalettedContainer = field(default_factory=PalettedContainer)
    biomes: PalettedContainer = field(default_factory=PalettedContainer)

    def push(self, writer: Buffer) -> None:
        writer.push_i16(self.block_count)
        self.block_states.push(writer)
        self.biomes.push(writer)


@dataclass
class Heightmap:
    type: int
    data: list[int] = field(default_factory=list)

    def push(self, writer: Buffer) -> None:
        writer.push_varint(self.type)
        _push_longs(writer, self.data)


@dataclass
class BlockEntity:
    packed_xz: int
    y: int
    type: int
    data: bytes = b""

    def push(self, writer: Buffer) -> None:
        writer.push_byte(self.packed_xz)
        writer.push_i16(self.y)
        writer.push_varint(self.type)
        writer.push_bytes(self.data, True)


@dataclass
class ChunkData:
    """Chunk body; ``data`` groups sections, its length is the group count."""

    heightmaps: list[Heightmap] = field(default_factory=list)
    data: list[list[ChunkSection]] = field(default_factory=list)
    block_entities: list[BlockEntity] = field(default_factory=list)

    def push(self, writer: Buffer) -> None:
        writer.push_varint(len(self.heightmaps))
        for heightmap in self.heightmaps:
            heightmap.push(writer)
        writer.push_varint(len(self.data))
        for group in self.data:
            for section in group:
                section.push(writer)
        writer.push_varint(len(self.block_entities))
        for entity in self.block_entities:
            entity.push(writer)


@dataclass
class BitSet:
    bits: list[int] = field(default_factory=list)

    def push(self, writer: Buffer) -> None:
        _push_longs(writer, self.bits)


# ---- attributes and metadata ----


@dataclass
class ModifierData:
    id: int
    amount: float
    operation: int

    def push(self, writer: Buffer) -> None:
        writer.push_varint(self.id)
        writer.push_f64(self.amount)
        writer.push_byte(self.operation)


@dataclass
class AttrProperty:
    id: int
    value: float
    modifiers: list[ModifierData] = field(default_factory=list)

    def push(self, writer: Buffer) -> None:
        writer.push_varint(self.id)
        writer.push_f64(self.value)
        writer.push_varint(len(self.modifiers))
        for modifier in self.modifiers:
            modifier.push(writer)


@dataclass
class UpdateAttributes:
    packet_id: ClassVar[int] = 0x7C

    entity_id: int
    attributes: list[AttrProperty] = field(default_factory=list)

    def push(self, writer: Buffer) -> None:
        writer.push_varint(self.entity_id)
        writer.push_varint(len(self.attributes))
        for attribute in self.attributes:
            attribute.push(writer)


@dataclass
class EntityEvent:
    packet_id: ClassVar[int] = 0x1F

    entity_id: int
    event_id: int

    def push(self, writer: Buffer) -> None:
        writer.push_i32(self.entity_id)
        writer.push_byte(self.event_id)


@dataclass
class SetEntityMetadata:
    """Metadata entries followed by the 0xFF terminator."""

    packet_id: ClassVar[int] = 0x5D

    entity_id: int
    metadata: list[EntityField] = field(default_factory=list)

    def push(self, writer: Buffer) -> None:
        writer.push_varint(self.entity_id)
        for entry in self.metadata:
            entry.push(writer)
        writer.push_byte(0xFF)


# ---- light ----


@dataclass
class LightData:
    sky_light_mask: BitSet = field(default_factory=BitSet)
    block_light_mask: BitSet = field(default_factory=BitSet)
    empty_sky_light_mask: BitSet = field(default_factory=BitSet)
    empty_block_light_mask: BitSet = field(default_factory=BitSet)
    sky_light_arrays: list[bytes] = field(default_factory=list)
    block_light_arrays: list[bytes] = field(default_factory=list)

    def push(self, writer: Buffer) -> None:
        self.sky_light_mask.push(writer)
        self.block_light_mask.push(writer)
        self.empty_sky_light_mask.push(writer)
        self.empty_block_light_mask.push(writer)
        for arrays in (self.sky_light_arrays, self.block_light_arrays):
            writer.push_varint(len(arrays))
            for array in arrays:
                writer.push_bytes(array, True)


@dataclass
class LevelChunkWithLight:
    packet_id: ClassVar[int] = 0x28

    chunk_x: int
    chunk_z: int
    data: ChunkData = field(default_factory=ChunkData)
    light: LightData = field(default_factory=LightData)

    def push(self, writer: Buffer) -> None:
        writer.push_i32(self.chunk_x)
        writer.push_i32(self.chunk_z)
        self.data.push(writer)
        self.light.push(writer)


@dataclass
class RawLevelChunkWithLight:
    """A chunk packet whose body is already encoded."""

    packet_id: ClassVar[int] = 0x28

    data: bytes

    def push(self, writer: Buffer) -> None:
        writer.push_bytes(self.data, False)


@dataclass
class ChunkBatchStart:
    packet_id: ClassVar[int] = 0x0D

    def push(self, writer: Buffer) -> None:
        """The packet has no body."""


@dataclass
class ChunkBatchFinished:
    packet_id: ClassVar[int] = 0x0C

    batch_size: int

    def push(self, writer: Buffer) -> None:
        writer.push_varint(self.batch_size)


@dataclass
class GameEvent:
    packet_id: ClassVar[int] = 0x23

    event_id: int
    data: float = 0.0

    def push(self, writer: Buffer) -> None:
        writer.push_byte(self.event_id)
        writer.push_f32(self.data)


@dataclass
class PlayerPosition:
    """Synchronize the player position (teleport)."""

    packet_id: ClassVar[int] = 0x42

    teleport_id: int
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    speed_x: float = 0.0
    speed_y: float = 0.0
    speed_z: float = 0.0
    yaw: float = 0.0
    pitch: float = 0.0
    flags: int = 0

    def push(self, writer: Buffer) -> None:
        writer.push_varint(self.teleport_id)
        for value in (self.x, self.y, self.z, self.speed_x, self.speed_y, self.speed_z):
            writer.push_f64(value)
        writer.push_f32(self.yaw)
        writer.push_f32(self.pitch)
        writer.push_i32(self.flags)


@dataclass
class ChunkBiomeData:
    """Biomes of one chunk; the wire order is z before x."""

    z: int
    x: int
    data: bytes = b""

    def push(self, writer: Buffer) -> None:
        writer.push_i32(self.z)
        writer.push_i32(self.x)
        writer.push_bytes(self.data, True)


@dataclass
class ChunkBiomes:
    packet_id: ClassVar[int] = 0x0E

    biomes: list[ChunkBiomeData] = field(default_factory=list)

    def push(self, writer: Buffer) -> None:
        writer.push_varint(len(self.biomes))
        for biome in self.biomes:
            biome.push(writer)


@dataclass
class InitializeBorder:
    packet_id: ClassVar[int] = 0x26

    x: float = 0.0
    z: float = 0.0
    old_diameter: float = 0.0
    new_diameter: float = 0.0
    speed: int = 0
    portal_teleport_boundary: int = 0
    warning_blocks: int = 0
    warning_time: int = 0

    def push(self, writer: Buffer) -> None:
        writer.push_f64(self.x)
        writer.push_f64(self.z)
        writer.push_f64(self.old_diameter)
        writer.push_f64(self.new_diameter)
        writer.push_varlong(self.speed)
        writer.push_varint(self.portal_teleport_boundary)
        writer.push_varint(self.warning_blocks)
        writer.push_varint(self.warning_time)


@dataclass
class SetChunkCacheCenter:
    packet_id: ClassVar[int] = 0x58

    x: int
    z: int

    def push(self, writer: Buffer) -> None:
        writer.push_varint(self.x)
        writer.push_varint(self.z)


# ---- player info update actions ----


def add_player_action(name: str, properties: Iterable[Property]) -> PlayerInfoAction:
    """Action data adding a player with its profile properties."""
    props = list(properties)

    def write(writer: Buffer) -> None:
        writer.push_text(name)
        writer.push_varint(len(props))
        for prop in props:
            prop.push(writer)

    return write


def initialize_chat(chat_session_id: uuid.UUID) -> PlayerInfoAction:
    """Action data for chat initialization; no session is ever announced."""

    def write(writer: Buffer) -> None:
        writer.push_byte(0)

    return write


def update_game_mode(game_mode: int) -> PlayerInfoAction:
    return lambda writer: writer.push_byte(game_mode)


def update_listed(listed: bool) -> PlayerInfoAction:
    return lambda writer: writer.push_bool(listed)


def update_latency(latency: int) -> PlayerInfoAction:
    return lambda writer: writer.push_varint(latency)


def update_display_name(display_name: str) -> PlayerInfoAction:
    """Action data setting a white text display name."""
    message = NbtTextMessage(type="text", text=display_name, color="white")

    def write(writer: Buffer) -> None:
        writer.push_byte(1)
        message.push(writer)

    return write


def update_list_priority(list_priority: int) -> PlayerInfoAction:
    return lambda writer: writer.push_varint(list_priority)


def update_hat(hat: bool) -> PlayerInfoAction:
    return lambda writer: writer.push_bool(hat)


@dataclass
class PlayerInfoUpdatePlayer:
    uuid: uuid.UUID
    actions: list[PlayerInfoAction] = field(default_factory=list)

    def push(self, writer: Buffer) -> None:
        writer.push_uuid(self.uuid)
        for action in self.actions:
            action(writer)


@dataclass
class PlayerInfoUpdate:
    """``actions`` is the bit mask of the actions each player carries."""

    packet_id: ClassVar[int] = 0x40

    actions: int
    players: list[PlayerInfoUpdatePlayer] = field(default_factory=list)

    def push(self, writer: Buffer) -> None:
        writer.push_byte(self.actions)
        writer.push_varint(len(self.players))
        for player in self.players:
            player.push(writer)


@dataclass
class SystemChat:
    packet_id: ClassVar[int] = 0x73

    message: NbtTextMessage
    overlay: bool = False

    def push(self, writer: Buffer) -> None:
        self.message.push(writer)
        writer.push_bool(self.overlay)


@dataclass
class Bundle:
    """Bundle delimiter; it has no body."""

    packet_id: ClassVar[int] = 0x00

    def push(self, writer: Buffer) -> None:
        """The packet has no body."""


# ---- entity movement ----


@dataclass
class MoveEntityPos:
    packet_id: ClassVar[int] = 0x2F

    entity_id: int
    delta_x: int = 0
    delta_y: int = 0
    delta_z: int = 0
    on_ground: bool = False

    def push(self, writer: Buffer) -> None:
        writer.push_varint(self.entity_id)
        writer.push_i16(self.delta_x)
        writer.push_i16(self.delta_y)
        writer.push_i16(self.delta_z)
        writer.push_bool(self.on_ground)


@dataclass
class RotateHead:
    """Head rotation; ``yaw`` is in 1/256 turns."""

    packet_id: ClassVar[int] = 0x4D

    entity_id: int
    yaw: int = 0

    def push(self, writer: Buffer) -> None:
        yaw = Angle(self.yaw)
        writer.push_varint(self.entity_id)
        yaw.push(writer)


@dataclass
class MoveEntityRot:
    """Body rotation; angles are in 1/256 turns."""

    packet_id: ClassVar[int] = 0x32

    entity_id: int
    yaw: int = 0
    pitch: int = 0
    on_ground: bool = False

    def push(self, writer: Buffer) -> None:
        yaw, pitch = Angle(self.yaw), Angle(self.pitch)
        writer.push_varint(self.entity_id)
        yaw.push(writer)
        pitch.push(writer)
        writer.push_bool(self.on_ground)


@dataclass
class EntityPositionSync:
    packet_id: ClassVar[int] = 0x20

    entity_id: int
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    velocity_x: float = 0.0
    velocity_y: float = 0.0
    velocity_z: float = 0.0
    yaw: float = 0.0
    pitch: float = 0.0
    on_ground: bool = False

    def push(self, writer: Buffer) -> None:
        writer.push_varint(self.entity_id)
        for value in (
            self.x,
            self.y,
            self.z,
            self.velocity_x,
            self.velocity_y,
            self.velocity_z,
        ):
            writer.push_f64(value)
        writer.push_f32(self.yaw)
        writer.push_f32(self.pitch)
        writer.push_bool(self.on_ground)