"""Storage initialization, path helpers, and table file utilities."""

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

_data_dir: Path | None = None

TABLES = ("players", "enemies", "areas", "quests")


def init_storage(data_dir: Path) -> None:
    global _data_dir
    _data_dir = data_dir
    _data_dir.mkdir(parents=True, exist_ok=True)


def data_dir() -> Path:
    assert _data_dir is not None, "Call init_storage() before using storage"
    return _data_dir


def table_path(table: str) -> Path:
    return data_dir() / f"{table}.json"


def read_rows(table: str) -> list[dict[str, Any]]:
    """Load all rows of a table. Returns [] if the file is missing."""
    path = table_path(table)
    if not path.is_file():
        return []
    return json.loads(path.read_text(encoding="utf-8"))


def write_rows(table: str, rows: list[dict[str, Any]]) -> None:
    table_path(table).write_text(json.dumps(rows, indent=2, ensure_ascii=False), encoding="utf-8")


def find_row(table: str, row_id: int) -> dict[str, Any] | None:
    for row in read_rows(table):
        if row["id"] == row_id:
            return row
    return None


def next_id(rows: list[dict[str, Any]]) -> int:
    """Autoincrement: one past the highest id in the table."""
    return max((r["id"] for r in rows), default=0) + 1


def now() -> str:
    return datetime.now(timezone.utc).isoformat()


def insert_row(table: str, fields: dict[str, Any]) -> dict[str, Any]:
    """Append a row with a fresh id and timestamps. Returns the stored row."""
    rows = read_rows(table)
    ts = now()
    row = {"id": next_id(rows), **fields, "created_at": ts, "updated_at": ts}
    rows.append(row)
    write_rows(table, rows)
    return row


def update_row(table: str, row_id: int, fields: dict[str, Any]) -> dict[str, Any] | None:
    """Overwrite fields on one row and bump updated_at. Returns None if missing."""
    rows = read_rows(table)
    for row in rows:
        if row["id"] == row_id:
            row.update(fields)
            row["updated_at"] = now()
            write_rows(table, rows)
            return row
    return None
