import pytest

from blockwire.entity_types import ENTITY_TYPES, EntityType, entity_type


def test_player_entry():
    assert entity_type("minecraft:player") == EntityType(147, 0.6, 1.8)


def test_first_and_last_entries():
    assert entity_type("minecraft:acacia_boat") == EntityType(0, 1.375, 0.5625)
    assert entity_type("minecraft:fishing_bobber") == EntityType(150, 0.25, 0.25)


def test_ender_dragon_size():
    dragon = entity_type("minecraft:ender_dragon")
    assert dragon.index == 41
    assert (dragon.width, dragon.height) == (16.0, 8.0)


def test_shared_indices_are_kept():
    assert entity_type("minecraft:zombie_villager").index == entity_type("minecraft:zombie").index
    assert (
        entity_type("minecraft:zombified_piglin").index
        == entity_type("minecraft:zombie_horse").index
    )


def test_unknown_name_raises():
    with pytest.raises(KeyError):
        entity_type("minecraft:unicorn")


def test_name_must_carry_namespace():
    with pytest.raises(KeyError):
        entity_type("player")


def test_registry_invariants():
    for name, kind in ENTITY_TYPES.items():
        assert name.startswith("minecraft:")
        assert kind.width >= 0 and kind.height >= 0
        assert entity_type(name) is kind


def test_registry_is_read_only():
    with pytest.raises(TypeError):
        ENTITY_TYPES["minecraft:new"] = EntityType(999, 1.0, 1.0)