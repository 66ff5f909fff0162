"""The entity type registry: protocol index and bounding box of each entity."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping


@dataclass(frozen=True)
class EntityType:
    """Registry index and bounding-box size of an entity type."""

    index: int
    width: float
    height: float


_RAW: dict[str, tuple[int, float, float]] = {
    "minecraft:acacia_boat": (0, 1.375, 0.5625),
    "minecraft:acacia_chest_boat": (1, 1.375, 0.5625),
    "minecraft:allay": (2, 0.35, 0.6),
    "minecraft:area_effect_cloud": (3, 2.0, 0.5),
    "minecraft:armadillo": (4, 0.7, 0.65),
    "minecraft:armor_stand": (5, 0.5, 1.975),
    "minecraft:arrow": (6, 0.5, 0.5),
    "minecraft:axolotl": (7, 0.75, 0.42),
    "minecraft:bamboo_chest_raft": (8, 1.375, 0.5625),
    "minecraft:bamboo_raft": (9, 1.375, 0.5625),
    "minecraft:bat": (10, 0.5, 0.9),
    "minecraft:bee": (11, 0.7, 0.6),
    "minecraft:birch_boat": (12, 1.375, 0.5625),
    "minecraft:birch_chest_boat": (13, 1.375, 0.5625),
    "minecraft:blaze": (14, 0.6, 1.8),
    "minecraft:block_display": (15, 0.0, 0.0),
    "minecraft:bogged": (16, 0.6, 1.99),
    "minecraft:breeze": (17, 0.6, 1.77),
    "minecraft:breeze_wind_charge": (18, 0.3125, 0.3125),
    "minecraft:camel": (19, 1.7, 2.375),
    "minecraft:cat": (20, 0.6, 0.7),
    "minecraft:cave_spider": (21, 0.7, 0.5),
    "minecraft:cherry_boat": (22, 1.375, 0.5625),
    "minecraft:cherry_chest_boat": (23, 1.375, 0.5625),
    "minecraft:chest_minecart": (24, 0.98, 0.7),
    "minecraft:chicken": (25, 0.4, 0.7),
    "minecraft:cod": (26, 0.5, 0.3),
    "minecraft:command_block_minecart": (27, 0.98, 0.7),
    "minecraft:cow": (28, 0.9, 1.4),
    "minecraft:creaking": (29, 0.9, 2.7),
    "minecraft:creeper": (30, 0.6, 1.7),
    "minecraft:dark_oak_boat": (31, 1.375, 0.5625),
    "minecraft:dark_oak_chest_boat": (32, 1.375, 0.5625),
    "minecraft:dolphin": (33, 0.9, 0.6),
    "minecraft:donkey": (34, 1.3964844, 1.5),
    "minecraft:dragon_fireball": (35, 1.0, 1.0),
    "minecraft:drowned": (36, 0.6, 1.95),
    "minecraft:egg": (37, 0.25, 0.25),
    "minecraft:elder_guardian": (38, 1.9975, 1.9975),
    "minecraft:enderman": (39, 0.6, 2.9),
    "minecraft:endermite": (40, 0.4, 0.3),
    "minecraft:ender_dragon": (41, 16.0, 8.0),
    "minecraft:ender_pearl": (42, 0.25, 0.25),
    "minecraft:end_crystal": (43, 2.0, 2.0),
    "minecraft:evoker": (44, 0.6, 1.95),
    "minecraft:evoker_fangs": (45, 0.5, 0.8),
    "minecraft:experience_bottle": (46, 0.25, 0.25),
    "minecraft:experience_orb": (47, 0.5, 0.5),
    "minecraft:eye_of_ender": (48, 0.25, 0.25),
    "minecraft:falling_block": (49, 0.98, 0.98),
    "minecraft:fireball": (50, 1.0, 1.0),
    "minecraft:firework_rocket": (51, 0.25, 0.25),
    "minecraft:fox": (52, 0.6, 0.7),
    "minecraft:frog": (53, 0.5, 0.5),
    "minecraft:furnace_minecart": (54, 0.98, 0.7),
    "minecraft:ghast": (55, 4.0, 4.0),
    "minecraft:happy_ghast": (56, 4.0, 4.0),
    "minecraft:giant": (57, 3.6, 12.0),
    "minecraft:glow_item_frame": (58, 0.75, 0.75),
    "minecraft:glow_squid": (59, 0.8, 0.8),
    "minecraft:goat": (60, 1.3, 0.9),
    "minecraft:guardian": (61, 0.85, 0.85),
    "minecraft:hoglin": (62, 1.3964844, 1.4),
    "minecraft:hopper_minecart": (63, 0.98, 0.7),
    "minecraft:horse": (64, 1.3964844, 1.6),
    "minecraft:husk": (65, 0.6, 1.95),
    "minecraft:illusioner": (66, 0.6, 1.95),
    "minecraft:interaction": (67, 0.0, 0.0),
    "minecraft:iron_golem": (68, 1.4, 2.7),
    "minecraft:item": (69, 0.25, 0.25),
    "minecraft:item_display": (70, 0.0, 0.0),
    "minecraft:item_frame": (71, 0.75, 0.75),
    "minecraft:jungle_boat": (72, 1.375, 0.5625),
    "minecraft:jungle_chest_boat": (73, 1.375, 0.5625),
    "minecraft:leash_knot": (74, 0.375, 0.5),
    "minecraft:lightning_bolt": (75, 0.0, 0.0),
    "minecraft:llama": (76, 0.9, 1.87),
    "minecraft:llama_spit": (77, 0.25, 0.25),
    "minecraft:magma_cube": (78, 0.5202, 0.5202),
    "minecraft:mangrove_boat": (79, 1.375, 0.5625),
    "minecraft:mangrove_chest_boat": (80, 1.375, 0.5625),
    "minecraft:marker": (81, 0.0, 0.0),
    "minecraft:minecart": (82, 0.98, 0.7),
    "minecraft:mooshroom": (83, 0.9, 1.4),
    "minecraft:mule": (84, 1.3964844, 1.6),
    "minecraft:oak_boat": (85, 1.375, 0.5625),
    "minecraft:oak_chest_boat": (86, 1.375, 0.5625),
    "minecraft:ocelot": (87, 0.6, 0.7),
    "minecraft:ominous_item_spawner": (88, 0.25, 0.25),
    "minecraft:painting": (89, 0.0, 0.0),
    "minecraft:pale_oak_boat": (90, 1.375, 0.5625),
    "minecraft:pale_oak_chest_boat": (91, 1.375, 0.5625),
    "minecraft:panda": (92, 1.3, 1.25),
    "minecraft:parrot": (93, 0.5, 0.9),
    "minecraft:phantom": (94, 0.9, 0.5),
    "minecraft:pig": (95, 0.9, 0.9),
    "minecraft:piglin": (96, 0.6, 1.95),
    "minecraft:piglin_brute": (97, 0.6, 1.95),
    "minecraft:pillager": (98, 0.6, 1.95),
    "minecraft:polar_bear": (99, 1.4, 1.4),
    "minecraft:splash_potion": (100, 0.25, 0.25),
    "minecraft:lingering_potion": (101, 0.25, 0.25),
    "minecraft:pufferfish": (102, 0.7, 0.7),
    "minecraft:rabbit": (103, 0.4, 0.5),
    "minecraft:ravager": (104, 1.95, 2.2),
    "minecraft:salmon": (105, 0.7, 0.4),
    "minecraft:sheep": (106, 0.9, 1.3),
    "minecraft:shulker": (107, 1.0, 1.0),
    "minecraft:shulker_bullet": (108, 0.3125, 0.3125),
    "minecraft:silverfish": (109, 0.4, 0.3),
    "minecraft:skeleton": (110, 0.6, 1.99),
    "minecraft:skeleton_horse": (111, 1.3964844, 1.6),
    "minecraft:slime": (112, 0.5202, 0.5202),
    "minecraft:small_fireball": (113, 0.3125, 0.3125),
    "minecraft:sniffer": (114, 1.9, 1.75),
    "minecraft:snowball": (115, 0.25, 0.25),
    "minecraft:snow_golem": (116, 0.7, 1.9),
    "minecraft:spawner_minecart": (117, 0.98, 0.7),
    "minecraft:spectral_arrow": (118, 0.5, 0.5),
    "minecraft:spider": (119, 1.4, 0.9),
    "minecraft:spruce_boat": (120, 1.375, 0.5625),
    "minecraft:spruce_chest_boat": (121, 1.375, 0.5625),
    "minecraft:squid": (122, 0.8, 0.8),
    "minecraft:stray": (123, 0.6, 1.99),
    "minecraft:strider": (124, 0.9, 1.7),
    "minecraft:tadpole": (125, 0.4, 0.3),
    "minecraft:text_display": (126, 0.0, 0.0),
    "minecraft:tnt": (127, 0.98, 0.98),
    "minecraft:tnt_minecart": (128, 0.98, 0.7),
    "minecraft:trader_llama": (129, 0.9, 1.87),
    "minecraft:trident": (130, 0.5, 0.5),
    "minecraft:tropical_fish": (131, 0.5, 0.4),
    "minecraft:turtle": (132, 1.2, 0.4),
    "minecraft:vex": (133, 0.4, 0.8),
    "minecraft:villager": (134, 0.6, 1.95),
    "minecraft:vindicator": (135, 0.6, 1.95),
    "minecraft:wandering_trader": (136, 0.6, 1.95),
    "minecraft:warden": (137, 0.9, 2.9),
    "minecraft:wind_charge": (138, 0.3125, 0.3125),
    "minecraft:witch": (139, 0.6, 1.95),
    "minecraft:wither": (140, 0.9, 3.5),
    "minecraft:wither_skeleton": (141, 0.7, 2.4),
    "minecraft:wither_skull": (142, 0.3125, 0.3125),
    "minecraft:wolf": (143, 0.6, 0.85),
    "minecraft:zoglin": (144, 1.3964844, 1.4),
    "minecraft:zombie": (145, 0.6, 1.95),
    "minecraft:zombie_horse": (146, 1.3964844, 1.6),
    "minecraft:zombie_villager": (145, 0.6, 1.95),
    "minecraft:zombified_piglin": (146, 0.6, 1.95),
    "minecraft:player": (147, 0.6, 1.8),
    "minecraft:fishing_bobber": (150, 0.25, 0.25),
}

ENTITY_TYPES: Mapping[str, EntityType] = MappingProxyType(
    {name: EntityType(*values) for name, values in _RAW.items()}
)


def entity_type(name: str) -> EntityType:
    """Look up an entity type by its namespaced name; raises KeyError if unknown."""
    try:
        return ENTITY_TYPES[name]
    except KeyError:
        raise KeyError(f"unknown entity type {name!r}") from None