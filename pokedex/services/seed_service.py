"""데모 트레이너 시드

트레이너 i (0부터):
- 도감 순서 5i ~ 5i+4 포켓몬
- Rare Candy 10개, Moon Stone 5개 지급 (카탈로그에 있을 때)
- 구매 가능 아이템 3i, 3i+1, 3i+2 번째를 1~5개씩 구매
"""

from __future__ import annotations

import random

from pokedex.core.item.catalog import ItemDatabase
from pokedex.core.logging import get_logger
from pokedex.core.pokemon.dex import Pokedex
from pokedex.core.trainer.models import Trainer
from pokedex.services.trainer_service import TrainerService

logger = get_logger(__name__)

DEMO_TRAINERS: tuple[dict[str, str], ...] = (
    {"name": "Ash Ketchum", "sex": "M", "hometown": "Pallet Town",
     "birthdate": "1987-05-22", "description": "Wants to be the very best."},
    {"name": "Misty", "sex": "F", "hometown": "Cerulean City",
     "birthdate": "1986-04-01", "description": "Cerulean Gym Leader."},
    {"name": "Brock", "sex": "M", "hometown": "Pewter City",
     "birthdate": "1982-07-15", "description": "Pewter Gym Leader."},
    {"name": "Gary Oak", "sex": "M", "hometown": "Pallet Town",
     "birthdate": "1987-11-01", "description": "Ash's rival."},
    {"name": "Professor Oak", "sex": "M", "hometown": "Pallet Town",
     "birthdate": "1947-03-10", "description": "Pokemon researcher."},
)

POKEMON_PER_TRAINER = 5
PURCHASES_PER_TRAINER = 3
GRANTED_ITEMS: tuple[tuple[str, int], ...] = (("Rare Candy", 10), ("Moon Stone", 5))


def seed_demo_trainers(
    service: TrainerService,
    pokedex: Pokedex,
    items: ItemDatabase,
    rng: random.Random | None = None,
) -> list[Trainer]:
    rng = rng or random.Random()
    dex_entries = pokedex.get_all()
    purchasable = items.get_purchasable()

    seeded: list[Trainer] = []
    for i, profile in enumerate(DEMO_TRAINERS):
        trainer = service.register_trainer(**profile)

        start = i * POKEMON_PER_TRAINER
        for entry in dex_entries[start:start + POKEMON_PER_TRAINER]:
            service.add_pokemon(trainer.trainer_id, entry.pokedex_number)

        for item_name, quantity in GRANTED_ITEMS:
            if items.find_by_name(item_name) is not None:
                service.add_item(trainer.trainer_id, item_name, quantity)

        start = i * PURCHASES_PER_TRAINER
        for item in purchasable[start:start + PURCHASES_PER_TRAINER]:
            service.buy_item(trainer.trainer_id, item.name, rng.randint(1, 5))

        seeded.append(trainer)

    logger.info("Seeded %d demo trainers", len(seeded))
    return seeded
