from cardzones.services.zones import (
    Zone,
    empty_zones,
    find_active,
    put_card,
    take_card,
)


def test_empty_zones_has_four_empty_containers():
    assert empty_zones() == {"hand": [], "active": [], "discard": [], "lost": []}


def test_put_into_active_wraps_with_zero_counter():
    zones = empty_zones()
    put_card(zones, Zone.ACTIVE, 7)
    put_card(zones, Zone.DISCARD, 7)
    assert zones["active"] == [{"cardId": 7, "counter": 0}]
    assert zones["discard"] == [7]


def test_take_card_matches_by_embedded_id_in_active():
    zones = empty_zones()
    zones["active"] = [{"cardId": 3, "counter": 2}, {"cardId": 4, "counter": 0}]
    assert take_card(zones, Zone.ACTIVE, 4) is True
    assert zones["active"] == [{"cardId": 3, "counter": 2}]
    assert find_active(zones, 3)["counter"] == 2
    assert find_active(zones, 4) is None


def test_take_card_absent_leaves_container_untouched():
    zones = empty_zones()
    zones["hand"] = [1, 2]
    assert take_card(zones, Zone.HAND, 9) is False
    assert zones["hand"] == [1, 2]


def test_take_card_removes_first_occurrence_only():
    zones = empty_zones()
    zones["hand"] = [1, 2, 1]
    take_card(zones, Zone.HAND, 1)
    assert zones["hand"] == [2, 1]


def test_zone_accepts_plain_strings():
    assert Zone("lost") is Zone.LOST
