"""Seed a demo world (areas, enemies, quests) for development/testing."""

from backend import storage

DEMO_AREAS = [
    {
        "name": "Vila Costeira",
        "type": "village",
        "description": "A fishing village where the journey begins. The tide brings "
        "more plastic than fish these days.",
        "pollution_level": 20,
    },
    {
        "name": "Recife de Coral",
        "type": "ocean",
        "description": "Once a rainbow of coral, now bleached white by warming water.",
        "pollution_level": 65,
    },
    {
        "name": "Manguezal",
        "type": "mangrove",
        "description": "Tangled roots shelter young fish, and oil slicks creep between them.",
        "pollution_level": 45,
    },
    {
        "name": "Foz do Rio",
        "type": "river",
        "description": "The river mouth where factory runoff meets the sea.",
        "pollution_level": 85,
    },
]

# area name -> enemies seeded there
DEMO_ENEMIES = {
    "Vila Costeira": [
        {"name": "Monstro de Plástico", "type": "pollution", "health": 60, "attack_power": 8,
         "description": "A shambling heap of bottles and bags."},
    ],
    "Recife de Coral": [
        {"name": "Onda de Calor", "type": "climate", "health": 90, "attack_power": 15,
         "description": "Water so warm the coral gives up its colour."},
    ],
    "Manguezal": [
        {"name": "Mancha de Óleo", "type": "pollution", "health": 80, "attack_power": 12,
         "description": "A slick that smothers everything it touches."},
        {"name": "Pescador Ilegal", "type": "human", "health": 70, "attack_power": 10,
         "description": "Nets where no nets should be."},
    ],
    "Foz do Rio": [
        {"name": "Esgoto Tóxico", "type": "pollution", "health": 120, "attack_power": 20,
         "description": "The factory's outflow given a will of its own."},
    ],
}

DEMO_QUESTS = [
    {"title": "Limpar a Praia", "description": "Defeat the plastic monster on the village beach.",
     "type": "combat", "target_area": "Vila Costeira", "reward_experience": 50},
    {"title": "Salvar o Recife", "description": "Drive the heat wave away from the coral reef.",
     "type": "combat", "target_area": "Recife de Coral", "reward_experience": 100},
    {"title": "Explorar o Manguezal", "description": "Visit the mangrove and see the damage for yourself.",
     "type": "exploration", "target_area": "Manguezal", "reward_experience": 30},
]


def create_demo_data() -> None:
    """Wipe every table (players included) and create a fresh demo world."""
    for table in storage.TABLES:
        path = storage.table_path(table)
        if path.exists():
            path.unlink()

    area_ids: dict[str, int] = {}
    for area in DEMO_AREAS:
        created = storage.create_area(**area)
        area_ids[created["name"]] = created["id"]

    for area_name, enemies in DEMO_ENEMIES.items():
        for enemy in enemies:
            storage.create_enemy(area_id=area_ids[area_name], **enemy)

    for quest in DEMO_QUESTS:
        fields = dict(quest)
        target = fields.pop("target_area")
        storage.create_quest(target_area_id=area_ids[target], **fields)
