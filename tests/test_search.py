"""Tests for autocomplete search ranking and lookups."""

from onepiecedle.search import (
    all_names,
    find_by_id,
    find_by_name,
    normalize_name,
    score_match,
    search_entities,
)


def test_normalize_name():
    assert normalize_name("  Nico Róbin! ") == "nico robin"
    assert normalize_name("Trafalgar D. Water Law") == "trafalgar d water law"


def test_empty_query(roster):
    assert search_entities(roster, "") == []
    assert search_entities(roster, "   ") == []
    assert search_entities(roster, "!!") == []


def test_score_tiers(make_entity):
    entity = make_entity(name="Nami", aliases=["Cat Burglar"])
    assert score_match(entity, "nami") == 100
    assert score_match(entity, "na") == 90
    assert score_match(entity, "am") == 80
    assert score_match(entity, "cat burglar") == 70
    assert score_match(entity, "cat") == 60
    assert score_match(entity, "burg") == 50
    assert score_match(entity, "zoro") == 0


def test_ranking_order(make_entity):
    """exact > prefix > substring > alias tiers."""
    exact = make_entity(id="a", name="Ace", aliases=[])
    prefix = make_entity(id="b", name="Aces High", aliases=[])
    substring = make_entity(id="c", name="Grace", aliases=[])
    alias = make_entity(id="d", name="Portgas", aliases=["Ace"])
    roster = [alias, substring, prefix, exact]
    assert [e.id for e in search_entities(roster, "ace")] == ["a", "b", "c", "d"]


def test_ties_keep_roster_order(make_entity):
    first = make_entity(id="x1", name="Marco", aliases=[])
    second = make_entity(id="x2", name="Marcus", aliases=[])
    assert [e.id for e in search_entities([first, second], "marc")] == ["x1", "x2"]


def test_limit(roster):
    assert len(search_entities(roster, "a", limit=3)) == 3


def test_alias_search(roster):
    assert search_entities(roster, "straw hat")[0].id == "luffy"
    assert search_entities(roster, "big mom")[0].id == "big-mom"


def test_find_by_name(roster):
    assert find_by_name(roster, "nami").id == "nami"
    assert find_by_name(roster, "Pirate Hunter").id == "zoro"
    assert find_by_name(roster, "Pirate") is None


def test_find_by_id(roster):
    assert find_by_id(roster, "sanji").name == "Vinsmoke Sanji"
    assert find_by_id(roster, "unknown") is None


def test_all_names(make_entity):
    assert all_names(make_entity()) == ["Monkey D. Luffy", "Luffy", "Straw Hat"]
