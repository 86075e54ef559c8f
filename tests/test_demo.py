"""Tests for the demo world seeder."""

from backend import storage
from backend.demo import DEMO_AREAS, DEMO_ENEMIES, DEMO_QUESTS, create_demo_data


def test_demo_seeds_world():
    create_demo_data()
    areas = storage.list_areas()
    assert [a["name"] for a in areas] == [a["name"] for a in DEMO_AREAS]

    by_name = {a["name"]: a["id"] for a in areas}
    for area_name, enemies in DEMO_ENEMIES.items():
        seeded = storage.list_enemies(by_name[area_name])
        assert [e["name"] for e in seeded] == [e["name"] for e in enemies]

    quests = storage.list_open_quests()
    assert len(quests) == len(DEMO_QUESTS)
    assert all(q["target_area_id"] in by_name.values() for q in quests)


def test_demo_starting_area_exists():
    create_demo_data()
    names = {a["name"] for a in storage.list_areas()}
    assert storage.get_config()["starting_area"] in names


def test_demo_wipes_previous_data():
    storage.create_player("Old Save")
    create_demo_data()
    create_demo_data()
    assert storage.read_rows("players") == []
    assert len(storage.list_areas()) == len(DEMO_AREAS)
