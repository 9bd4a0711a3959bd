"""MoveDatabase 테스트"""

import logging

import pytest

from pokedex.core.errors import DuplicateEntryError, InvalidEntryError
from pokedex.core.move.catalog import MoveDatabase
from pokedex.core.move.models import Move


def _db() -> MoveDatabase:
    db = MoveDatabase()
    db.add(Move("Thunder Shock", "A jolt of electricity.", "Special", "Electric"))
    db.add(Move("Thunder", "A lightning bolt.", "TM", "Electric"))
    db.add(Move("Surf", "A big wave.", "HM", "Water"))
    db.add(Move("Gust", "A gust of wind.", "Special", "Normal", "Flying"))
    return db


class TestMoveModel:
    def test_is_hm_case_insensitive(self) -> None:
        assert Move("Cut", classification="hm").is_hm
        assert not Move("Ember", classification="TM").is_hm

    def test_str(self) -> None:
        move = Move("Gust", "A gust of wind.", "Special", "Normal", "Flying")
        assert str(move) == "Gust [Normal/Flying] (Special) - A gust of wind."


class TestMoveDatabase:
    def test_duplicate_name(self) -> None:
        db = _db()
        with pytest.raises(DuplicateEntryError):
            db.add(Move("surf", type1="Water"))

    def test_blank_name(self) -> None:
        with pytest.raises(InvalidEntryError):
            MoveDatabase().add(Move(" "))

    def test_find_prefers_exact(self) -> None:
        assert _db().find_by_name("thunder").name == "Thunder"

    def test_find_falls_back_to_substring(self) -> None:
        assert _db().find_by_name("shock").name == "Thunder Shock"
        assert _db().find_by_name("Hydro") is None

    def test_search_by_name(self) -> None:
        assert [m.name for m in _db().search_by_name("thun")] == ["Thunder Shock", "Thunder"]

    def test_search_by_type_second_type(self) -> None:
        assert [m.name for m in _db().search_by_type("fly")] == ["Gust"]

    def test_search_by_classification(self) -> None:
        assert [m.name for m in _db().search_by_classification("hm")] == ["Surf"]

    def test_load_from_csv(self, tmp_path) -> None:
        path = tmp_path / "moves.csv"
        path.write_text(
            "name,description,classification,type1,type2\n"
            "Ember,Small flames.,Special,Fire,\n"
            ",Nameless.,Special,Fire,\n"
            "Ember,Again.,Special,Fire,\n"
            "Gust,Wind.,Special,Normal,Flying\n",
            encoding="utf-8",
        )
        db = MoveDatabase()
        assert db.load_from_csv(path) == 2
        assert db.get("gust").type2 == "Flying"
        assert db.get("ember").type2 is None

    def test_load_skips_undecodable_line(self, tmp_path, caplog) -> None:
        caplog.set_level(logging.WARNING)
        path = tmp_path / "moves.csv"
        path.write_bytes(
            b"name,description,classification,type1,type2\n"
            b"Ember,Small flames.,Special,Fire,\n"
            b"Bad\xff\xfe,Broken.,Special,Fire,\n"
            b"Gust,Wind.,Special,Normal,Flying\n"
        )
        db = MoveDatabase()
        assert db.load_from_csv(path) == 2
        assert [m.name for m in db.get_all()] == ["Ember", "Gust"]
        assert "undecodable line 3" in caplog.text
