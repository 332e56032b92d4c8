import pytest

from mazechase.database import Database, Element

RECORDS = [
    "|", "battle", "100", "120", "1.5", "3.25", "0.5",
    "|", "scout", "40", "50", "0", "6", "0.75",
]


def test_load_reads_every_field():
    db = Database()
    db.load(RECORDS)
    battle = db["battle"]
    assert battle == Element("battle", 100, 120, 1.5, 0.5, 3.25)


def test_second_record_is_read_too():
    db = Database()
    db.load(RECORDS)
    scout = db["scout"]
    assert scout.name == "scout"
    assert scout.current_hp == 40
    assert scout.max_hp == 50
    assert scout.max_speed == 6.0
    assert scout.acceleration == 0.75
    assert len(db) == 2
    assert list(db) == ["battle", "scout"]


def test_numbers_are_parsed_leniently():
    db = Database()
    db.load(["|", "x", "12abc", "junk", "2.5deg", "", "-1e1"])
    element = db["x"]
    assert element.current_hp == 12
    assert element.max_hp == 0
    assert element.angle == 2.5
    assert element.max_speed == 0.0
    assert element.acceleration == -10.0


def test_missing_name_raises_key_error():
    db = Database()
    db.load(RECORDS)
    with pytest.raises(KeyError):
        db["missing"]
    assert "missing" not in db


def test_elements_can_be_changed_in_place():
    db = Database()
    db.load(RECORDS)
    db["battle"].angle += 0.2
    assert db["battle"].angle == pytest.approx(1.7)


def test_data_without_separator_is_rejected():
    with pytest.raises(ValueError):
        Database().load(["battle", "100"])


def test_trailing_separator_is_rejected():
    with pytest.raises(ValueError):
        Database().load(["|"])


def test_repeated_name_updates_existing_element():
    db = Database()
    db.load(["|", "a", "1", "2", "0", "0", "0", "|", "a", "5"])
    assert len(db) == 1
    assert db["a"].current_hp == 5
    assert db["a"].max_hp == 2