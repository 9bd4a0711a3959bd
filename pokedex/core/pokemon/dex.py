"""포켓몬 도감 카탈로그 - CSV 로드 + 동적 등록

도감 번호와 이름(대소문자 무시)은 각각 유일.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from pokedex.core.errors import DuplicateEntryError, InvalidEntryError
from pokedex.core.event_bus import DexEvent, EventBus
from pokedex.core.event_types import EventTypes
from pokedex.core.move.catalog import MoveDatabase
from pokedex.core.pokemon.models import Pokemon
from pokedex.core.pokemon.moveset import learn_move

logger = logging.getLogger(__name__)


class Pokedex:
    def __init__(self, event_bus: Optional[EventBus] = None) -> None:
        self._entries: list[Pokemon] = []
        self._bus = event_bus

    def add(self, pokemon: Pokemon) -> None:
        if not pokemon.name or not pokemon.name.strip():
            raise InvalidEntryError("Pokemon name cannot be empty")
        if self.get_by_number(pokemon.pokedex_number) is not None:
            raise DuplicateEntryError("Pokemon number", pokemon.pokedex_number)
        if self.get_by_name(pokemon.name) is not None:
            raise DuplicateEntryError("Pokemon", pokemon.name)

        self._entries.append(pokemon)
        logger.debug("Registered #%03d %s", pokemon.pokedex_number, pokemon.name)
        if self._bus is not None:
            self._bus.emit(
                DexEvent(
                    event_type=EventTypes.POKEMON_REGISTERED,
                    data={"pokedex_number": pokemon.pokedex_number, "name": pokemon.name},
                    source="pokedex",
                )
            )

    def load_from_csv(self, path: str | Path, moves: MoveDatabase) -> int:
        """pokemons.csv 로드. 반환: 로드된 수량.

        뒤쪽 기술 컬럼은 MoveDatabase.find_by_name으로 해석한다.
        모르는 기술은 건너뛰고, 찾은 기술은 learn_move 규칙(4개 제한, HM)을 따른다.
        """
        from pokedex.schemas import PokemonRow, iter_csv_rows

        path = Path(path)
        count = 0
        for line_no, cells in iter_csv_rows(path):
            try:
                row = PokemonRow.from_cells(cells)
                pokemon = row.to_pokemon()
                for move_name in row.moves:
                    move = moves.find_by_name(move_name)
                    if move is None:
                        logger.debug("Unknown move %r for %s", move_name, row.name)
                        continue
                    learn_move(pokemon, move)
                self.add(pokemon)
                count += 1
            except (ValidationError, ValueError) as e:
                logger.warning(
                    "Skipped pokemon row %d in %s: %s", line_no, path.name, e
                )

        logger.info("Loaded %d pokemon from %s", count, path)
        return count

    def get_by_number(self, number: int) -> Pokemon | None:
        for entry in self._entries:
            if entry.pokedex_number == number:
                return entry
        return None

    def get_by_name(self, name: str) -> Pokemon | None:
        """정확한 이름(대소문자 무시) 조회."""
        key = name.strip().lower()
        for entry in self._entries:
            if entry.name.lower() == key:
                return entry
        return None

    def get_all(self) -> list[Pokemon]:
        return list(self._entries)

    def count(self) -> int:
        return len(self._entries)

    def search_by_name(self, term: str) -> list[Pokemon]:
        key = term.strip().lower()
        if not key:
            return []
        return [p for p in self._entries if key in p.name.lower()]

    def search_by_type(self, term: str) -> list[Pokemon]:
        key = term.strip().lower()
        if not key:
            return []
        return [p for p in self._entries if any(key in t.lower() for t in p.types)]
