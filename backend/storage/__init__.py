"""File-based JSON storage, one file per table.

Data layout:
  data/
    players.json    Player rows (health, experience, position)
    enemies.json    Enemy rows seeded per area
    areas.json      Area rows (pollution level, restored flag)
    quests.json     Quest rows (completion flag)
    config.json     App settings (narrative language, CORS, starting stats)

Every table is a JSON list of row dicts. Ids autoincrement from the highest
stored id; created_at/updated_at are ISO-8601 UTC strings, and updated_at is
bumped on every write to a row.

Config: get_config() returns defaults merged with stored values.
update_config() overwrites known keys and ignores the rest.

Combat goes through JsonCombatStore, which wraps the player/enemy helpers
in the narrow interface the resolver expects.
"""

# Re-export all public symbols so `from backend import storage` keeps working.

from .core import (  # noqa: F401
    TABLES,
    data_dir,
    init_storage,
    read_rows,
    table_path,
    write_rows,
)

from .players import (  # noqa: F401
    create_player,
    get_player,
    increment_player_experience,
    update_player_health,
    update_player_position,
)

from .world import (  # noqa: F401
    create_area,
    create_enemy,
    create_quest,
    get_area,
    get_enemy,
    list_areas,
    list_enemies,
    list_open_quests,
)

from .config import (  # noqa: F401
    get_config,
    update_config,
)

from .combat_store import JsonCombatStore  # noqa: F401
