"""Shared test fixtures."""

import pytest

from pokedex.config import DEFAULT_DATA_DIR
from pokedex.core.event_bus import EventBus
from pokedex.core.item.catalog import ItemDatabase
from pokedex.core.move.catalog import MoveDatabase
from pokedex.core.pokemon.dex import Pokedex
from pokedex.core.trainer.registry import TrainerDatabase
from pokedex.services.trainer_service import TrainerService


@pytest.fixture()
def bus() -> EventBus:
    return EventBus()


@pytest.fixture()
def catalogs(bus):
    """패키지 CSV로 채운 (Pokedex, MoveDatabase, ItemDatabase)"""
    moves = MoveDatabase(bus)
    moves.load_from_csv(DEFAULT_DATA_DIR / "moves.csv")
    items = ItemDatabase(bus)
    items.load_from_csv(DEFAULT_DATA_DIR / "items.csv")
    dex = Pokedex(bus)
    dex.load_from_csv(DEFAULT_DATA_DIR / "pokemons.csv", moves)
    return dex, moves, items


@pytest.fixture()
def setup(bus, catalogs):
    """카탈로그 + TrainerService + 트레이너 1명"""
    dex, moves, items = catalogs
    trainers = TrainerDatabase()
    service = TrainerService(trainers, dex, moves, items, bus)
    trainer = service.register_trainer("Ash Ketchum", sex="M", hometown="Pallet Town")
    return service, trainer, bus
