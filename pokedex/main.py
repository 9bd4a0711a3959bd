"""Console application entrypoint."""

from __future__ import annotations

import argparse
import random
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Sequence

from pokedex.config import Settings, settings as default_settings
from pokedex.console import Console
from pokedex.core.event_bus import EventBus
from pokedex.core.item.catalog import ItemDatabase
from pokedex.core.logging import get_logger, setup_logging
from pokedex.core.move.catalog import MoveDatabase
from pokedex.core.pokemon.dex import Pokedex
from pokedex.core.trainer.registry import TrainerDatabase
from pokedex.services.seed_service import seed_demo_trainers
from pokedex.services.trainer_service import TrainerService

logger = get_logger(__name__)

MOVES_FILE = "moves.csv"
ITEMS_FILE = "items.csv"
POKEMON_FILE = "pokemons.csv"


@dataclass
class AppContext:
    """카탈로그 + 서비스 묶음"""

    event_bus: EventBus
    pokedex: Pokedex
    moves: MoveDatabase
    items: ItemDatabase
    trainers: TrainerDatabase
    service: TrainerService


def load_catalogs(app: AppContext, data_dir: Path) -> None:
    """기술 → 아이템 → 포켓몬 순서로 로드. 없는 파일은 건너뛴다."""
    moves_path = data_dir / MOVES_FILE
    items_path = data_dir / ITEMS_FILE
    pokemon_path = data_dir / POKEMON_FILE

    if moves_path.exists():
        app.moves.load_from_csv(moves_path)
    else:
        logger.warning("Move data not found: %s", moves_path)

    if items_path.exists():
        app.items.load_from_csv(items_path)
    else:
        logger.warning("Item data not found: %s", items_path)

    if pokemon_path.exists():
        app.pokedex.load_from_csv(pokemon_path, app.moves)
    else:
        logger.warning("Pokemon data not found: %s", pokemon_path)


def build_app(config: Optional[Settings] = None) -> AppContext:
    config = config or default_settings
    bus = EventBus()
    pokedex = Pokedex(bus)
    moves = MoveDatabase(bus)
    items = ItemDatabase(bus)
    trainers = TrainerDatabase()
    service = TrainerService(
        trainers, pokedex, moves, items, bus, starting_money=config.STARTING_MONEY
    )
    app = AppContext(
        event_bus=bus,
        pokedex=pokedex,
        moves=moves,
        items=items,
        trainers=trainers,
        service=service,
    )

    load_catalogs(app, Path(config.DATA_DIR))

    if config.SEED_DEMO_DATA:
        seed_demo_trainers(service, pokedex, items, random.Random(config.DEMO_SEED))

    logger.info(
        "Pokedex ready: %d pokemon, %d moves, %d items, %d trainers",
        pokedex.count(),
        moves.count(),
        items.count(),
        trainers.count(),
    )
    return app


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pokedex",
        description="Enhanced Pokedex: browse Pokemon, moves and items, and manage trainers.",
    )
    parser.add_argument(
        "--data-dir",
        type=Path,
        default=None,
        help="Directory containing pokemons.csv, moves.csv and items.csv.",
    )
    parser.add_argument(
        "--no-seed",
        action="store_true",
        help="Start without the demo trainers.",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for demo purchases.",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default from LOG_LEVEL).",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    overrides = {}
    if args.data_dir is not None:
        overrides["DATA_DIR"] = args.data_dir
    if args.no_seed:
        overrides["SEED_DEMO_DATA"] = False
    if args.seed is not None:
        overrides["DEMO_SEED"] = args.seed
    if args.log_level is not None:
        overrides["LOG_LEVEL"] = args.log_level
    config = default_settings.model_copy(update=overrides)

    setup_logging(config.LOG_LEVEL)
    app = build_app(config)
    Console(app).run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
