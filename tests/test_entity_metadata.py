import pytest

from blockwire.entity_metadata import (
    EntityField,
    MetadataType,
    UnsupportedMetadataError,
    base_fields,
    living_entity_fields,
    player_fields,
)
from blockwire.wire import Buffer, WireError


def _pushed(entry):
    buffer = Buffer()
    entry.push(buffer)
    return buffer


def test_base_field_defaults_match_source():
    fields = base_fields()
    assert fields.air_ticks == EntityField(1, 1, 300)
    assert fields.pose == EntityField(6, 21, 0)
    assert fields.custom_name == EntityField(2, 6, None)


def test_player_main_hand_default():
    assert player_fields().main_hand == EntityField(18, 0, 1)


def test_defaults_are_fresh_objects():
    first = base_fields()
    first.air_ticks.value = 10
    assert base_fields().air_ticks.value == 300


def test_byte_field_bytes():
    assert _pushed(EntityField(0, 0, 5)).getvalue() == bytes([0, 0, 5])


def test_varint_field_round_trip():
    buffer = _pushed(base_fields().air_ticks)
    assert buffer.pull_byte() == 1
    assert buffer.pull_byte() == MetadataType.VARINT
    assert buffer.pull_varint() == 300
    assert buffer.remaining() == b""


def test_varlong_field_round_trip():
    buffer = _pushed(EntityField(3, 2, 1 << 40))
    buffer.pull_byte()
    buffer.pull_byte()
    assert buffer.pull_varlong() == 1 << 40


def test_float_field_round_trip():
    buffer = _pushed(living_entity_fields().health)
    assert buffer.pull_byte() == 9
    assert buffer.pull_byte() == 3
    assert buffer.pull_f32() == pytest.approx(1.0)


def test_type_four_written_as_double():
    buffer = _pushed(EntityField(4, 4, 2.5))
    buffer.pull_byte()
    buffer.pull_byte()
    assert buffer.pull_f64() == 2.5
    assert buffer.remaining() == b""


def test_empty_optional_text_component():
    assert _pushed(base_fields().custom_name).getvalue() == bytes([2, 6, 0])


def test_present_optional_text_component_rejected():
    buffer = Buffer()
    with pytest.raises(UnsupportedMetadataError):
        EntityField(2, 6, "name").push(buffer)
    assert buffer.getvalue() == b""


def test_boolean_field():
    assert _pushed(EntityField(4, 8, True)).getvalue() == bytes([4, 8, 1])


def test_pose_field():
    assert _pushed(base_fields().pose).getvalue() == bytes([6, 21, 0])


@pytest.mark.parametrize("kind", [5, 7, 9, 11, 16, 18, 34])
def test_unsupported_types_raise_without_writing(kind):
    buffer = Buffer()
    with pytest.raises(UnsupportedMetadataError):
        EntityField(1, kind, None).push(buffer)
    assert buffer.getvalue() == b""


def test_bed_location_unsupported():
    with pytest.raises(UnsupportedMetadataError):
        living_entity_fields().location_of_bed.push(Buffer())


def test_wrong_value_type_rejected():
    with pytest.raises(WireError):
        EntityField(4, 8, "yes").push(Buffer())
    with pytest.raises(WireError):
        EntityField(1, 1, 1.5).push(Buffer())


def test_unknown_type_writes_header_only():
    assert _pushed(EntityField(3, 99, "ignored")).getvalue() == bytes([3, 99])