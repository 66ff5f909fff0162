"""Entity metadata fields and their wire encoding."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, Callable

from .wire import Buffer, WireError


class UnsupportedMetadataError(WireError):
    """Raised for a metadata type whose value encoding is not supported."""


class MetadataType(IntEnum):
    """Serializer identifiers of entity metadata values."""

    BYTE = 0
    VARINT = 1
    VARLONG = 2
    FLOAT = 3
    STRING = 4
    TEXT_COMPONENT = 5
    OPTIONAL_TEXT_COMPONENT = 6
    SLOT = 7
    BOOLEAN = 8
    ROTATIONS = 9
    POSITION = 10
    OPTIONAL_POSITION = 11
    DIRECTION = 12
    OPTIONAL_LIVING_ENTITY_REFERENCE = 13
    BLOCK_STATE = 14
    OPTIONAL_BLOCK_STATE = 15
    NBT = 16
    PARTICLE = 17
    PARTICLES = 18
    VILLAGER_DATA = 19
    OPTIONAL_VARINT = 20
    POSE = 21
    CAT_VARIANT = 22
    COW_VARIANT = 23
    WOLF_VARIANT = 24
    WOLF_SOUND_VARIANT = 25
    FROG_VARIANT = 26
    PIG_VARIANT = 27
    CHICKEN_VARIANT = 28
    OPTIONAL_GLOBAL_POSITION = 29
    PAINTING_VARIANT = 30
    SNIFFER_STATE = 31
    ARMADILLO_STATE = 32
    VECTOR3 = 33
    QUATERNION = 34


def _require_int(value: Any, type_id: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise WireError(f"metadata type {type_id} needs an integer, got {value!r}")
    return value


def _require_float(value: Any, type_id: int) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise WireError(f"metadata type {type_id} needs a number, got {value!r}")
    return float(value)


def _require_bool(value: Any, type_id: int) -> bool:
    if not isinstance(value, bool):
        raise WireError(f"metadata type {type_id} needs a boolean, got {value!r}")
    return value


@dataclass
class EntityField:
    """One metadata entry: its index, serializer type and value."""

    index: int
    type: int
    value: Any = None

    def _encoder(self) -> Callable[[Buffer], None]:
        kind, value = self.type, self.value
        if kind == MetadataType.BYTE:
            number = _require_int(value, kind)
            return lambda writer: writer.push_byte(number)
        if kind in (MetadataType.VARINT, MetadataType.POSE):
            number = _require_int(value, kind)
            return lambda writer: writer.push_varint(number)
        if kind == MetadataType.VARLONG:
            number = _require_int(value, kind)
            return lambda writer: writer.push_varlong(number)
        if kind == MetadataType.FLOAT:
            real = _require_float(value, kind)
            return lambda writer: writer.push_f32(real)
        if kind == MetadataType.STRING:
            # Values of this type are sent as a double.
            real = _require_float(value, kind)
            return lambda writer: writer.push_f64(real)
        if kind == MetadataType.OPTIONAL_TEXT_COMPONENT:
            if value is not None:
                raise UnsupportedMetadataError(
                    "optional text component values are unsupported"
                )
            return lambda writer: writer.push_bool(False)
        if kind == MetadataType.BOOLEAN:
            flag = _require_bool(value, kind)
            return lambda writer: writer.push_bool(flag)
        if MetadataType.TEXT_COMPONENT <= kind <= MetadataType.QUATERNION:
            name = MetadataType(kind).name.lower().replace("_", " ")
            raise UnsupportedMetadataError(f"{name} values are unsupported")
        return lambda writer: None

    def push(self, writer: Buffer) -> None:
        """Write index, type and value; nothing is written if the value is rejected."""
        encode = self._encoder()
        writer.push_byte(self.index)
        writer.push_byte(self.type)
        encode(writer)


@dataclass(frozen=True)
class BaseFields:
    """Metadata shared by every entity."""

    entity_meta_bit_mask: EntityField = field(default_factory=lambda: EntityField(0, 0, 0))
    air_ticks: EntityField = field(default_factory=lambda: EntityField(1, 1, 300))
    custom_name: EntityField = field(default_factory=lambda: EntityField(2, 6, None))
    is_custom_name_visible: EntityField = field(
        default_factory=lambda: EntityField(3, 8, False)
    )
    is_silent: EntityField = field(default_factory=lambda: EntityField(4, 8, False))
    has_no_gravity: EntityField = field(default_factory=lambda: EntityField(5, 8, False))
    pose: EntityField = field(default_factory=lambda: EntityField(6, 21, 0))
    ticks_frozen: EntityField = field(default_factory=lambda: EntityField(7, 1, 0))


@dataclass(frozen=True)
class LivingEntityFields:
    """Metadata of living entities."""

    hand_states: EntityField = field(default_factory=lambda: EntityField(8, 0, 0))
    health: EntityField = field(default_factory=lambda: EntityField(9, 3, 1.0))
    potion_effect_color: EntityField = field(default_factory=lambda: EntityField(10, 18, 0))
    is_potion_effect_ambient: EntityField = field(
        default_factory=lambda: EntityField(11, 8, False)
    )
    number_of_arrows_in_body: EntityField = field(
        default_factory=lambda: EntityField(12, 1, 0)
    )
    number_of_bee_stingers_in_body: EntityField = field(
        default_factory=lambda: EntityField(13, 1, 0)
    )
    location_of_bed: EntityField = field(default_factory=lambda: EntityField(14, 11, None))


@dataclass(frozen=True)
class PlayerFields:
    """Metadata of players."""

    additional_hearts: EntityField = field(default_factory=lambda: EntityField(15, 3, 0))
    score: EntityField = field(default_factory=lambda: EntityField(16, 1, 0))
    displayed_skin_parts: EntityField = field(default_factory=lambda: EntityField(17, 0, 0))
    main_hand: EntityField = field(default_factory=lambda: EntityField(18, 0, 1))
    left_shoulder_entity_data: EntityField = field(
        default_factory=lambda: EntityField(19, 16, None)
    )
    right_shoulder_entity_data: EntityField = field(
        default_factory=lambda: EntityField(20, 16, None)
    )


def base_fields() -> BaseFields:
    """Fresh default metadata common to all entities."""
    return BaseFields()


def living_entity_fields() -> LivingEntityFields:
    """Fresh default metadata of a living entity."""
    return LivingEntityFields()


def player_fields() -> PlayerFields:
    """Fresh default metadata of a player."""
    return PlayerFields()