import pytest

from quest_items.config import default_config
from quest_items.engine.player import PlayerState
from quest_items.engine.random_source import FixedRandom, SeededRandom
from quest_items.models.items import ItemGroups
from quest_items.questing.declaration import UNSPECIFIED, ByClass, ByName, Gold
from quest_items.questing.errors import InvalidClassError, ItemLookupError
from quest_items.questing.factory import ItemFactory, gold_amount
from quest_items.world.content.item_templates import variant_count
from quest_items.world.items_table import ItemsTable


def make_table() -> ItemsTable:
    return ItemsTable(
        {
            "talisman": {"p1": 9, "p2": 3},
            "book2": {"p1": 7, "p2": 0},
            "Ring_of_Khajiit": {"p1": 5, "p2": 3},
        }
    )


def make_factory(rng=None, *, level: int = 1, region_price: int = 0) -> ItemFactory:
    return ItemFactory(
        config=default_config(),
        items_table=make_table(),
        rng=rng or SeededRandom(11),
        player=PlayerState(level=level, region_price_adjustments={0: region_price}),
    )


def test_by_name_uses_lookup_params():
    factory = make_factory()
    table = make_table()
    for name in ["talisman", "book2", "Ring_of_Khajiit"]:
        item = factory.create(ByName(name), quest_uid=3, symbol=f"_{name}_")
        assert int(item.item_group) == table.get_param("p1", name)
        assert item.group_index == table.get_param("p2", name)


def test_create_links_item_to_quest():
    item = make_factory().create(ByName("talisman"), quest_uid=42, symbol="talisman")
    assert item.is_quest_item is True
    assert item.quest_uid == 42
    assert item.quest_symbol == "talisman"


def test_unknown_name_raises_lookup_error():
    with pytest.raises(ItemLookupError) as excinfo:
        make_factory().create(ByName("unicorn_saddle"), quest_uid=1, symbol="_x_")
    assert excinfo.value.name == "unicorn_saddle"
    assert isinstance(excinfo.value, LookupError)


def test_explicit_subclass_is_not_randomized():
    rng = FixedRandom([])
    item = make_factory(rng).create(ByClass(17, 13), quest_uid=1, symbol="_I.06_")
    assert item.item_group == ItemGroups.CREATURE_INGREDIENTS_1
    assert item.group_index == 13
    assert rng.calls == []


def test_random_subclass_stays_in_valid_variants():
    factory = make_factory(SeededRandom(5))
    count = variant_count(17)
    seen = set()
    for _ in range(60):
        item = factory.create(ByClass(17, UNSPECIFIED), quest_uid=1, symbol="_I.06_")
        assert int(item.item_group) == 17
        assert 0 <= item.group_index < count
        seen.add(item.group_index)
    assert len(seen) > 1


def test_unspecified_class_raises():
    with pytest.raises(InvalidClassError):
        make_factory().create(ByClass(UNSPECIFIED, 2), quest_uid=1, symbol="_x_")


def test_unknown_class_and_out_of_range_subclass_raise():
    with pytest.raises(InvalidClassError):
        make_factory().create_by_class(99, 0)
    with pytest.raises(InvalidClassError) as excinfo:
        make_factory().create_by_class(17, 500)
    assert excinfo.value.item_subclass == 500


def test_random_magic_item_is_redirected_and_enchanted():
    cfg = default_config()
    rng = FixedRandom([1, 2])
    item = make_factory(rng).create(ByClass(4, UNSPECIFIED), quest_uid=1, symbol="_magic_")
    assert item.item_group == ItemGroups.WEAPONS
    assert item.group_index == 2
    assert item.legacy_magic == list(cfg.items.placeholder_enchantment)
    assert item.is_enchanted is True
    assert item.long_name == "Magic Staff"
    assert rng.calls[0] == (0, len(cfg.items.magic_redirect_classes) - 1)


def test_magic_item_with_explicit_subclass_is_not_redirected():
    item = make_factory(FixedRandom([])).create(ByClass(4, 0), quest_uid=1, symbol="_m_")
    assert item.item_group == ItemGroups.MAGIC_ITEMS
    assert item.legacy_magic is None


def test_gold_range_is_inclusive_and_bounded():
    factory = make_factory(SeededRandom(3))
    amounts = set()
    for _ in range(200):
        item = factory.create(Gold(5, 25), quest_uid=1, symbol="_gold1_")
        assert item.item_group == ItemGroups.CURRENCY
        assert item.group_index == 0
        assert 5 <= item.stack_count <= 25
        amounts.add(item.stack_count)
    assert 5 in amounts and 25 in amounts


def test_gold_formula_uses_level_and_region():
    rng = FixedRandom([150])
    player = PlayerState(level=1, region_price_adjustments={0: 100})
    # player_mod 1, region_mod 50: 150 * 550 / 1000 = 82, then * 100 / 100
    assert gold_amount(player, rng) == 82
    assert rng.calls == [(150, 200)]


def test_gold_player_mod_is_capped():
    rng = FixedRandom([2000])
    player = PlayerState(level=40)
    assert gold_amount(player, rng) == 1000
    assert rng.calls == [(1500, 2000)]


def test_gold_is_never_below_one():
    for level in [0, 1, 2]:
        for region_price in [-5000, -1000, 0]:
            player = PlayerState(level=level, region_price_adjustments={0: region_price})
            assert gold_amount(player, FixedRandom([0])) >= 1
    item = make_factory(FixedRandom([0]), region_price=-5000).create(Gold(), quest_uid=1, symbol="_gold_")
    assert item.stack_count == 1
