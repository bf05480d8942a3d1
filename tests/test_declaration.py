import pytest

from quest_items.questing.declaration import (
    UNSPECIFIED,
    ByClass,
    ByName,
    Gold,
    parse_item_declaration,
)
from quest_items.questing.errors import ParseError


def test_gold_with_range():
    decl = parse_item_declaration("Item _gold1_ gold range 5 to 25")
    assert decl.symbol == "_gold1_"
    assert decl.artifact is False
    assert decl.source == Gold(5, 25)
    assert decl.source.has_range is True


def test_gold_without_range():
    decl = parse_item_declaration("Item _gold_ gold")
    assert decl.source == Gold()
    assert decl.source.has_range is False


def test_by_name_and_lowercase_keyword():
    assert parse_item_declaration("Item talisman talisman").source == ByName("talisman")
    decl = parse_item_declaration("item _womensclothing_ womens_clothing")
    assert decl.symbol == "_womensclothing_"
    assert decl.source == ByName("womens_clothing")


def test_artifact_form():
    decl = parse_item_declaration("Item _artifact_ artifact Ring_of_Khajiit anyInfo 1014")
    assert decl.symbol == "_artifact_"
    assert decl.artifact is True
    assert decl.source == ByName("Ring_of_Khajiit")


def test_class_clause_with_random_subclass():
    decl = parse_item_declaration("Item _I.06_ item class 17 subclass -1")
    assert decl.symbol == "_I.06_"
    assert decl.source == ByClass(17, UNSPECIFIED)


def test_class_clause_with_explicit_subclass():
    decl = parse_item_declaration("Item _I.06_ item class 17 subclass 13")
    assert decl.source == ByClass(17, 13)


def test_lowercase_keyword_with_class_clause():
    decl = parse_item_declaration("item _ingredient_ item class 17 subclass 2 anyInfo 1011")
    assert decl.symbol == "_ingredient_"
    assert decl.source == ByClass(17, 2)


def test_item_name_wins_over_trailing_class_clause():
    decl = parse_item_declaration("Item _t_ talisman item class 17 subclass 3")
    assert decl.source == ByName("talisman")


def test_gold_keyword_overrides_class_clause():
    decl = parse_item_declaration("Item _g_ gold item class 17 subclass 2 range 1 to 3")
    assert decl.source == Gold(1, 3)


def test_options_are_order_independent():
    a = parse_item_declaration("Item _g_ gold range 10 to 20 anyInfo 1011")
    b = parse_item_declaration("Item _g_ gold anyInfo 1011 range 10 to 20")
    assert a.source == b.source == Gold(10, 20)


def test_custom_gold_keyword():
    decl = parse_item_declaration("Item _coins_ septims", gold_keyword="septims")
    assert decl.source == Gold()


def test_subclass_only_clause_is_ignored():
    # Class and subclass are only read from the combined clause.
    decl = parse_item_declaration("Item _t_ talisman subclass 3")
    assert decl.source == ByName("talisman")


def test_missing_item_name_raises_parse_error():
    with pytest.raises(ParseError) as excinfo:
        parse_item_declaration("Item _bad_")
    assert excinfo.value.line == "Item _bad_"
    assert "Item _bad_" in str(excinfo.value)


def test_wrong_keyword_case_raises_parse_error():
    with pytest.raises(ParseError):
        parse_item_declaration("ITEM _x_ talisman")


def test_empty_range_raises_parse_error():
    with pytest.raises(ParseError):
        parse_item_declaration("Item _g_ gold range 30 to 5")
