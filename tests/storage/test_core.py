"""Tests for table file helpers: ids, timestamps, missing files."""

from backend import storage
from backend.storage.core import find_row, insert_row, next_id, update_row


def test_missing_table_reads_empty():
    assert storage.read_rows("players") == []
    assert not storage.table_path("players").exists()


def test_next_id_empty():
    assert next_id([]) == 1


def test_next_id_after_gap():
    assert next_id([{"id": 1}, {"id": 5}, {"id": 3}]) == 6


def test_insert_sets_id_and_timestamps():
    row = insert_row("areas", {"name": "Praia"})
    assert row["id"] == 1
    assert row["created_at"] == row["updated_at"]
    assert find_row("areas", 1)["name"] == "Praia"


def test_update_bumps_updated_at():
    row = insert_row("areas", {"name": "Praia"})
    updated = update_row("areas", row["id"], {"name": "Praia Limpa"})
    assert updated["name"] == "Praia Limpa"
    assert updated["created_at"] == row["created_at"]
    assert updated["updated_at"] >= row["updated_at"]


def test_update_missing_returns_none():
    assert update_row("areas", 42, {"name": "x"}) is None


def test_non_ascii_round_trip():
    insert_row("enemies", {"name": "Mancha de Óleo"})
    assert "Óleo" in storage.table_path("enemies").read_text(encoding="utf-8")
    assert find_row("enemies", 1)["name"] == "Mancha de Óleo"
