import json

from src.infraction_tracker.infraction_tracker.storage.json_file_storage import JsonFileStorage


def test_missing_file_reads_empty(tmp_path):
    assert JsonFileStorage(tmp_path / "nope.json").get_item("k") is None


def test_set_get_remove(tmp_path):
    path = tmp_path / "data" / "tracker.json"
    storage = JsonFileStorage(path)

    storage.set_item("a", "[1]")
    storage.set_item("b", "light")

    assert storage.get_item("a") == "[1]"
    assert json.loads(path.read_text(encoding="utf-8")) == {"a": "[1]", "b": "light"}
    assert not path.with_suffix(".json.tmp").exists()

    storage.remove_item("a")
    assert storage.get_item("a") is None
    assert storage.get_item("b") == "light"


def test_corrupt_file_reads_empty_and_is_replaced(tmp_path):
    path = tmp_path / "tracker.json"
    path.write_text("{ not json", encoding="utf-8")
    storage = JsonFileStorage(path)

    assert storage.get_item("a") is None
    storage.set_item("a", "x")
    assert storage.get_item("a") == "x"


def test_non_object_file_reads_empty(tmp_path):
    path = tmp_path / "tracker.json"
    path.write_text("[1, 2]", encoding="utf-8")
    assert JsonFileStorage(path).get_item("a") is None
