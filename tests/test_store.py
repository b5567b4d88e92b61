import pytest

from cardzones.services.io_utils import read_json, write_json
from cardzones.services.store import JsonStore, next_id


def test_missing_file_yields_default_document(tmp_path):
    store = JsonStore(tmp_path / "data" / "db.json")
    doc = store.load()
    assert doc["users"] == [{"username": "admin", "passwordHash": None, "role": "admin"}]
    assert doc["characters"] == []
    assert doc["nextIds"] == {"gameId": 1, "classId": 1, "cardId": 1, "characterId": 1}
    assert (tmp_path / "data" / "db.json").exists()


def test_transaction_persists_on_success(tmp_path):
    store = JsonStore(tmp_path / "db.json")
    with store.transaction() as doc:
        doc["games"].append({"id": next_id(doc, "gameId"), "name": "Gloomhaven"})
    on_disk = read_json(tmp_path / "db.json")
    assert on_disk["games"] == [{"id": 1, "name": "Gloomhaven"}]
    assert on_disk["nextIds"]["gameId"] == 2


def test_transaction_discards_changes_on_error(tmp_path):
    store = JsonStore(tmp_path / "db.json")
    store.load()
    with pytest.raises(RuntimeError):
        with store.transaction() as doc:
            doc["games"].append({"id": 1, "name": "half-done"})
            raise RuntimeError("boom")
    assert store.load()["games"] == []


def test_ids_are_monotonic(tmp_path):
    store = JsonStore(tmp_path / "db.json")
    with store.transaction() as doc:
        ids = [next_id(doc, "cardId") for _ in range(3)]
    assert ids == [1, 2, 3]
    with store.transaction() as doc:
        assert next_id(doc, "cardId") == 4


def test_unencodable_document_leaves_file_untouched(tmp_path):
    store = JsonStore(tmp_path / "db.json")
    store.load()
    before = (tmp_path / "db.json").read_bytes()
    with pytest.raises(TypeError):
        write_json(tmp_path / "db.json", {"counter": 2 ** 64})
    assert (tmp_path / "db.json").read_bytes() == before
    assert not (tmp_path / "db.json.tmp").exists()
