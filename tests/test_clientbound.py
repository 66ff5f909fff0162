import json
import uuid

import pytest

from blockwire.clientbound import (
    CustomPayload,
    Disconnect,
    EncryptionRequest,
    FinishConfiguration,
    KnownPack,
    LightUpdate,
    LoginPluginRequest,
    LoginSuccess,
    Pong,
    Property,
    RegistryData,
    RegistryEntry,
    SelectKnownPacks,
    SetCompression,
    StatusResponse,
    UpdateEnabledFeatures,
    UpdateTags,
)
from blockwire.wire import Buffer, WireError, encode_nbt


def _written(packet):
    buf = Buffer()
    packet.push(buf)
    return Buffer(buf.getvalue())


def test_status_response_round_trip():
    status = {"version": {"name": "1.21", "protocol": 770}, "players": {"max": 20}}
    reader = _written(StatusResponse(status))
    assert json.loads(reader.pull_text()) == status
    assert reader.remaining() == b""


def test_status_response_rejects_unserialisable():
    with pytest.raises(WireError):
        StatusResponse({"bad": object()}).push(Buffer())


def test_pong_round_trip():
    reader = _written(Pong(-1234567890123))
    assert reader.pull_i64() == -1234567890123


def test_disconnect_json_reason():
    reason = {"text": "bye", "color": "red"}
    reader = _written(Disconnect(reason))
    assert json.loads(reader.pull_text()) == reason


def test_encryption_request_round_trip():
    reader = _written(EncryptionRequest("", b"\x01\x02\x03", b"abcd", True))
    assert reader.pull_text() == ""
    assert reader.pull_bytes() == b"\x01\x02\x03"
    assert reader.pull_bytes() == b"abcd"
    assert reader.pull_bool() is True
    assert reader.remaining() == b""


def test_property_without_signature():
    reader = _written(Property("textures", "value"))
    assert reader.pull_text() == "textures"
    assert reader.pull_text() == "value"
    assert reader.pull_bool() is False
    assert reader.remaining() == b""


def test_login_success_round_trip():
    player = uuid.UUID("12345678-1234-5678-1234-567812345678")
    props = [Property("textures", "v1", "sig"), Property("other", "v2")]
    reader = _written(LoginSuccess(player, "Steve", props))
    assert reader.pull_uuid() == player
    assert reader.pull_text() == "Steve"
    assert reader.pull_varint() == len(props)
    assert reader.pull_text() == "textures"
    assert reader.pull_text() == "v1"
    assert reader.pull_bool() is True
    assert reader.pull_text() == "sig"
    assert reader.pull_text() == "other"
    assert reader.pull_text() == "v2"
    assert reader.pull_bool() is False
    assert reader.remaining() == b""


def test_set_compression_round_trip_and_range():
    assert _written(SetCompression(256)).pull_varint() == 256
    with pytest.raises(WireError):
        SetCompression(1 << 40).push(Buffer())


def test_login_plugin_request_data_unprefixed():
    reader = _written(LoginPluginRequest(7, "mod:chan", b"payload"))
    assert reader.pull_varint() == 7
    assert reader.pull_text() == "mod:chan"
    assert reader.remaining() == b"payload"


def test_finish_configuration_is_empty():
    assert _written(FinishConfiguration()).getvalue() == b""


def test_custom_payload_round_trip():
    reader = _written(CustomPayload("minecraft:brand", b"vanilla"))
    assert reader.pull_text() == "minecraft:brand"
    assert reader.pull_bytes() == b"vanilla"


def test_update_enabled_features():
    features = ["minecraft:vanilla", "minecraft:bundle"]
    reader = _written(UpdateEnabledFeatures(features))
    count = reader.pull_varint()
    assert [reader.pull_text() for _ in range(count)] == features


def test_select_known_packs_round_trip():
    packs = [KnownPack("minecraft", "core", "1.21"), KnownPack("a", "b", "c")]
    reader = _written(SelectKnownPacks(packs))
    count = reader.pull_varint()
    decoded = [
        KnownPack(reader.pull_text(), reader.pull_text(), reader.pull_text())
        for _ in range(count)
    ]
    assert decoded == packs


def test_registry_entry_uses_nameless_nbt():
    value = {"height": 384, "name": "overworld"}
    reader = _written(RegistryEntry("minecraft:overworld", value))
    assert reader.pull_text() == "minecraft:overworld"
    assert reader.pull_bool() is True
    assert reader.remaining() == encode_nbt(value)


def test_registry_data_counts_entries():
    entries = [RegistryEntry("a", {"x": 1}), RegistryEntry("b", {"y": 2})]
    reader = _written(RegistryData("minecraft:dimension_type", entries))
    assert reader.pull_text() == "minecraft:dimension_type"
    assert reader.pull_varint() == len(entries)


def test_light_update_field_order():
    packet = LightUpdate(1, 2, 3, 4, 5, 6, 7, 8)
    reader = _written(packet)
    assert [reader.pull_i32() for _ in range(8)] == [1, 2, 3, 4, 5, 6, 7, 8]
    assert reader.remaining() == b""


def test_update_tags_raw():
    assert _written(UpdateTags(b"\x00\x01raw")).getvalue() == b"\x00\x01raw"