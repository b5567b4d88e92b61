import pytest

from cardzones.main import app
from cardzones.services.container import build_services

ALICE = {"username": "alice", "role": "player"}


@pytest.fixture
def services(tmp_path):
    return build_services(tmp_path / "db.json")


@pytest.fixture
def catalog(services):
    """One game, one class with a hand of 2, cards [L1, L1, L2] plus a foreign-class card."""
    game = services.catalog.create_game("Gloomhaven")
    brute = services.catalog.create_class(game["id"], "Brute", 2)
    other = services.catalog.create_class(game["id"], "Tinkerer", 2)
    cards = {
        "trample": services.catalog.create_card(brute["id"], "Trample", 1, "trample.png"),
        "eye": services.catalog.create_card(brute["id"], "Eye for an Eye", 1),
        "skewer": services.catalog.create_card(brute["id"], "Skewer", 2),
        "foreign": services.catalog.create_card(other["id"], "Proximity Mine", 1),
    }
    return {"game": game, "class": brute, "other_class": other, "cards": cards}


@pytest.fixture
def players(services):
    services.identity.create_user("alice", "player")
    services.identity.create_user("bob", "player")
    return services


@pytest.fixture
def character(services, catalog, players):
    return services.characters.create_character(
        ALICE, "Grok", catalog["game"]["id"], catalog["class"]["id"], 1
    )


@pytest.fixture
def app_services(services):
    previous = app.state.services
    app.state.services = services
    try:
        yield services
    finally:
        app.state.services = previous
