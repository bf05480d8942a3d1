"""Static variant names per item group (index order matters)."""
from __future__ import annotations

from typing import Dict, List

ITEM_VARIANTS: Dict[int, List[str]] = {
    0: ["Aegrotat", "Indulcet", "Quaesto Vil", "Sursum"],
    1: ["Glass Jar", "Glass Bottle", "Decanter", "Clay Jar", "Small Sack", "Large Sack", "Quiver", "Backpack"],
    2: [
        "Cuirass",
        "Gauntlets",
        "Greaves",
        "Left Pauldron",
        "Right Pauldron",
        "Helm",
        "Boots",
        "Buckler",
        "Round Shield",
        "Kite Shield",
        "Tower Shield",
    ],
    3: [
        "Dagger",
        "Tanto",
        "Staff",
        "Shortsword",
        "Wakazashi",
        "Broadsword",
        "Saber",
        "Longsword",
        "Katana",
        "Claymore",
        "Dai-Katana",
        "Mace",
        "Flail",
        "Warhammer",
        "Battle Axe",
        "War Axe",
        "Short Bow",
        "Long Bow",
        "Arrow",
    ],
    4: ["Magic Item"],
    5: ["Masque of Clavicus", "Mehrunes Razor", "Mace of Molag Bal", "Ring of Khajiit", "Wabbajack"],
    6: ["Straps", "Armbands", "Kimono", "Fancy Armbands", "Sash", "Eodoric", "Shoes", "Tall Boots", "Boots", "Sandals"],
    7: ["Book", "Parchment"],
    8: ["Chair", "Table", "Bed"],
    9: ["Torch", "Lantern", "Bandage", "Oil", "Candle", "Parchment", "Small Mirror", "Holy Water"],
    10: [
        "Prayer Beads",
        "Rare Symbol",
        "Common Symbol",
        "Bell",
        "Holy Water",
        "Talisman",
        "Religious Item",
        "Small Statue",
        "Icon",
        "Scarab",
        "Holy Candle",
        "Holy Dagger",
        "Holy Tome",
    ],
    11: ["Map"],
    12: ["Brassier", "Formal Brassier", "Peasant Blouse", "Eodoric", "Shoes", "Tall Boots", "Boots", "Sandals"],
    13: ["Painting"],
    14: ["Ruby", "Emerald", "Sapphire", "Diamond", "Jade", "Turquoise", "Malachite", "Amber"],
    15: ["Twigs", "Green Leaves", "Red Flowers", "Yellow Flowers", "Root Tendrils", "Root Bulb", "Pine Branch"],
    16: ["Bamboo", "Palm", "Aloe", "Ginkgo Leaves", "Big Cactus", "Cactus", "Red Berries"],
    17: [
        "Werewolf's Blood",
        "Fairy Dragon's Scales",
        "Wraith Essence",
        "Ectoplasm",
        "Ghoul's Tongue",
        "Spider Venom",
        "Troll's Blood",
        "Snake Venom",
        "Gorgon Snake",
        "Lich Dust",
        "Giant's Blood",
        "Basilisk's Eye",
        "Daedra's Heart",
        "Saint's Hair",
        "Orc's Blood",
    ],
    18: ["Dragon's Scales", "Giant Scorpion Stinger", "Small Scorpion Stinger", "Mummy Wrappings", "Gryphon's Feather"],
    19: ["Wereboar's Tusk", "Nymph Hair", "Unicorn Horn"],
    20: ["Holy Relic", "Big Tooth", "Medium Tooth", "Small Tooth", "Pure Water", "Rain Water", "Elixir Vitae", "Nectar"],
    21: ["Mercury", "Tin", "Brass", "Lodestone", "Sulphur", "Lead", "Iron", "Silver", "Gold"],
    22: ["Ivory", "Pearl"],
    23: ["Small Cart", "Horse", "Rope", "Ship"],
    24: ["House Deed", "Ship Deed"],
    25: ["Amulet", "Bracer", "Ring", "Bracelet", "Mark", "Torc", "Cloth Amulet", "Wand"],
    26: ["Telescope", "Scales", "Glass Bottle", "Finger", "Dead Body"],
    27: ["Spellbook", "Soul Trap", "Letter", "Potion Recipe", "Potion", "Ruby", "Trapped Soul"],
    28: ["Gold Pieces", "Letter of Credit"],
}


def variant_count(item_group: int) -> int:
    """Number of valid subclass variants in a group (0 for unknown groups)."""
    return len(ITEM_VARIANTS.get(int(item_group), []))


def variant_name(item_group: int, group_index: int) -> str:
    variants = ITEM_VARIANTS.get(int(item_group))
    if not variants:
        raise ValueError(f"Unknown item group: {item_group}")
    if group_index < 0 or group_index >= len(variants):
        raise ValueError(f"Item group {item_group} has no variant at index {group_index}")
    return variants[group_index]
