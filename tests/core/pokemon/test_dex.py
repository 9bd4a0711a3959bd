"""Pokedex 카탈로그 + CSV 로드 테스트"""

import logging
from pathlib import Path

import pytest

from pokedex.core.errors import DuplicateEntryError, InvalidEntryError
from pokedex.core.event_bus import EventBus
from pokedex.core.event_types import EventTypes
from pokedex.core.move.catalog import MoveDatabase
from pokedex.core.move.models import Move
from pokedex.core.pokemon.dex import Pokedex
from pokedex.core.pokemon.models import EvolutionMethod, Pokemon

HEADER = (
    "number,name,type1,type2,level,hp,attack,defense,speed,"
    "evolves_from,evolves_to,evolution_level,evolution_method,evolution_stone_type,"
    "move1,move2,move3\n"
)


def _make(number: int, name: str, type1: str = "Normal", type2: str | None = None) -> Pokemon:
    return Pokemon(pokedex_number=number, name=name, type1=type1, type2=type2)


def _write_csv(tmp_path: Path, rows: list[str]) -> Path:
    path = tmp_path / "pokemons.csv"
    path.write_text(HEADER + "\n".join(rows) + "\n", encoding="utf-8")
    return path


@pytest.fixture()
def moves() -> MoveDatabase:
    db = MoveDatabase()
    db.add(Move(name="Thunder Shock", classification="Special", type1="Electric"))
    db.add(Move(name="Thunderbolt", classification="TM", type1="Electric"))
    db.add(Move(name="Flash", classification="HM", type1="Electric"))
    db.add(Move(name="Quick Attack", classification="Physical", type1="Normal"))
    return db


class TestAdd:
    def test_add_and_lookup(self) -> None:
        dex = Pokedex()
        dex.add(_make(25, "Pikachu", "Electric"))
        assert dex.count() == 1
        assert dex.get_by_number(25).name == "Pikachu"
        assert dex.get_by_number(26) is None

    def test_duplicate_number(self) -> None:
        dex = Pokedex()
        dex.add(_make(25, "Pikachu"))
        with pytest.raises(DuplicateEntryError):
            dex.add(_make(25, "Raichu"))

    def test_duplicate_name_case_insensitive(self) -> None:
        dex = Pokedex()
        dex.add(_make(25, "Pikachu"))
        with pytest.raises(DuplicateEntryError):
            dex.add(_make(26, "PIKACHU"))

    def test_blank_name(self) -> None:
        with pytest.raises(InvalidEntryError):
            Pokedex().add(_make(1, "  "))

    def test_emits_registered(self) -> None:
        bus = EventBus()
        received = []
        bus.subscribe(EventTypes.POKEMON_REGISTERED, lambda e: received.append(e.data))
        Pokedex(bus).add(_make(1, "Bulbasaur"))
        assert received == [{"pokedex_number": 1, "name": "Bulbasaur"}]

    def test_get_all_is_copy(self) -> None:
        dex = Pokedex()
        dex.add(_make(1, "Bulbasaur"))
        dex.get_all().clear()
        assert dex.count() == 1


class TestSearch:
    def test_by_name_substring(self) -> None:
        dex = Pokedex()
        dex.add(_make(25, "Pikachu"))
        dex.add(_make(26, "Raichu"))
        dex.add(_make(1, "Bulbasaur"))
        assert [p.name for p in dex.search_by_name("chu")] == ["Pikachu", "Raichu"]

    def test_by_type_checks_both_types(self) -> None:
        dex = Pokedex()
        dex.add(_make(1, "Bulbasaur", "Grass", "Poison"))
        dex.add(_make(23, "Ekans", "Poison"))
        dex.add(_make(4, "Charmander", "Fire"))
        assert [p.name for p in dex.search_by_type("poison")] == ["Bulbasaur", "Ekans"]

    def test_blank_term(self) -> None:
        dex = Pokedex()
        dex.add(_make(1, "Bulbasaur"))
        assert dex.search_by_name("") == []


class TestLoadFromCsv:
    def test_loads_rows(self, tmp_path, moves) -> None:
        path = _write_csv(
            tmp_path,
            [
                "25,Pikachu,Electric,,5,35,55,40,90,0,26,0,stone,Thunder Stone,Thunder Shock,Quick Attack",
                "26,Raichu,Electric,,20,60,90,55,110,25,0,0,,,Thunderbolt,,",
            ],
        )
        dex = Pokedex()
        assert dex.load_from_csv(path, moves) == 2

        pikachu = dex.get_by_number(25)
        assert pikachu.type2 is None
        assert pikachu.evolution_method is EvolutionMethod.STONE
        assert pikachu.evolution_stone_type == "Thunder Stone"
        assert [m.name for m in pikachu.move_set] == [
            "Tackle",
            "Defend",
            "Thunder Shock",
            "Quick Attack",
        ]
        assert dex.get_by_number(26).evolution_method is None

    def test_move_resolution_and_limits(self, tmp_path, moves) -> None:
        """모르는 기술은 건너뛰고, 부분 일치를 허용하며, HM은 4개 제한 무시"""
        path = _write_csv(
            tmp_path,
            ["25,Pikachu,Electric,,5,35,55,40,90,0,0,0,,,Mystery Move,thunderb,Thunder Shock,Flash"],
        )
        dex = Pokedex()
        dex.load_from_csv(path, moves)
        names = [m.name for m in dex.get_by_number(25).move_set]
        assert names == ["Tackle", "Defend", "Thunderbolt", "Thunder Shock", "Flash"]

    def test_bad_rows_skipped(self, tmp_path, moves, caplog) -> None:
        caplog.set_level(logging.WARNING)
        path = _write_csv(
            tmp_path,
            [
                "1,Bulbasaur,Grass,Poison,5,45,49,49,45,0,2,16,level,,",
                "2,Ivysaur,Grass,Poison,200,60,62,63,60,1,3,32,level,,",
                "x,Broken,Grass,,5,1,1,1,1,0,0,0,,,",
                "3,bulbasaur,Grass,,5,1,1,1,1,0,0,0,,,",
                "4,Charmander,Fire,,5,39,52,43,65,0,5,16,evolve-ish,,",
                "",
            ],
        )
        dex = Pokedex()
        assert dex.load_from_csv(path, moves) == 1
        assert dex.get_by_number(1).name == "Bulbasaur"
        assert "Skipped pokemon row" in caplog.text

    def test_packaged_data_loads(self, catalogs) -> None:
        dex, _, _ = catalogs
        assert dex.count() == 40
        assert dex.get_by_number(35).evolution_stone_type == "Moon Stone"
