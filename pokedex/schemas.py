"""입력 검증 스키마 - CSV 행과 콘솔 입력 공용"""

from __future__ import annotations

import csv
from pathlib import Path
from typing import Iterable, Iterator, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from pokedex.core.item.models import Item
from pokedex.core.logging import get_logger
from pokedex.core.move.models import Move
from pokedex.core.pokemon.models import EvolutionMethod, Pokemon

POKEMON_COLUMNS = (
    "number",
    "name",
    "type1",
    "type2",
    "level",
    "hp",
    "attack",
    "defense",
    "speed",
    "evolves_from",
    "evolves_to",
    "evolution_level",
    "evolution_method",
    "evolution_stone_type",
)
MOVE_COLUMNS = ("name", "description", "classification", "type1", "type2")
ITEM_COLUMNS = ("name", "category", "description", "effect", "buy_price", "sell_price")

logger = get_logger(__name__)


def _decoded_lines(raw_lines: Iterable[bytes], path: Path) -> Iterator[str]:
    """UTF-8로 디코딩 안 되는 줄은 경고 후 건너뜀"""
    for line_no, raw in enumerate(raw_lines, start=1):
        try:
            yield raw.decode("utf-8-sig" if line_no == 1 else "utf-8")
        except UnicodeDecodeError as e:
            logger.warning("Skipped undecodable line %d in %s: %s", line_no, path.name, e)


def iter_csv_rows(path: str | Path) -> Iterator[tuple[int, list[str]]]:
    """헤더 1줄을 건너뛰고 (줄 번호, 셀 목록) 반환. 빈 줄과 깨진 줄 무시."""
    path = Path(path)
    with path.open("rb") as f:
        reader = csv.reader(_decoded_lines(f, path))
        next(reader, None)
        for row in reader:
            cells = [c.strip() for c in row]
            if not any(cells):
                continue
            yield reader.line_num, cells


def cells_to_dict(columns: tuple[str, ...], cells: list[str]) -> dict[str, str]:
    """빈 셀은 빼서 필드 기본값이 적용되게 한다."""
    return {col: cell for col, cell in zip(columns, cells) if cell}


class _RowModel(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)


# === Catalog rows ===


class MoveRow(_RowModel):
    """기술 행: name,description,classification,type1,type2"""

    name: str = Field(..., min_length=1)
    description: str = ""
    classification: str = ""
    type1: str = Field(..., min_length=1)
    type2: Optional[str] = None

    @classmethod
    def from_cells(cls, cells: list[str]) -> MoveRow:
        return cls(**cells_to_dict(MOVE_COLUMNS, cells))

    def to_move(self) -> Move:
        return Move(
            name=self.name,
            description=self.description,
            classification=self.classification,
            type1=self.type1,
            type2=self.type2,
        )


class ItemRow(_RowModel):
    """아이템 행: name,category,description,effect,buy_price,sell_price"""

    name: str = Field(..., min_length=1)
    category: str = ""
    description: str = ""
    effect: str = ""
    buy_price: int = Field(0, ge=0)
    sell_price: int = Field(0, ge=0)

    @classmethod
    def from_cells(cls, cells: list[str]) -> ItemRow:
        return cls(**cells_to_dict(ITEM_COLUMNS, cells))

    def to_item(self) -> Item:
        return Item(
            name=self.name,
            category=self.category,
            description=self.description,
            effect=self.effect,
            buy_price=self.buy_price,
            sell_price=self.sell_price,
        )


class PokemonRow(_RowModel):
    """포켓몬 행. 14개 고정 컬럼 뒤에 기술 이름이 임의 개수로 붙는다."""

    number: int = Field(..., ge=1, le=999)
    name: str = Field(..., min_length=1)
    type1: str = Field(..., min_length=1)
    type2: Optional[str] = None
    level: int = Field(1, ge=1, le=100)
    hp: int = Field(0, ge=0)
    attack: int = Field(0, ge=0)
    defense: int = Field(0, ge=0)
    speed: int = Field(0, ge=0)
    evolves_from: int = Field(0, ge=0, le=999)
    evolves_to: int = Field(0, ge=0, le=999)
    evolution_level: int = Field(0, ge=0, le=100)
    evolution_method: Optional[EvolutionMethod] = None
    evolution_stone_type: Optional[str] = None
    moves: list[str] = Field(default_factory=list)

    @field_validator("evolution_method", mode="before")
    @classmethod
    def _parse_method(cls, value):
        if isinstance(value, str):
            return EvolutionMethod.parse(value)
        return value

    @classmethod
    def from_cells(cls, cells: list[str]) -> PokemonRow:
        data: dict = cells_to_dict(POKEMON_COLUMNS, cells)
        data["moves"] = [c for c in cells[len(POKEMON_COLUMNS):] if c]
        return cls(**data)

    def to_pokemon(self) -> Pokemon:
        """기술은 MoveDatabase 조회가 필요하므로 여기서 채우지 않는다."""
        return Pokemon(
            pokedex_number=self.number,
            name=self.name,
            type1=self.type1,
            type2=self.type2,
            level=self.level,
            hp=self.hp,
            attack=self.attack,
            defense=self.defense,
            speed=self.speed,
            evolves_from=self.evolves_from,
            evolves_to=self.evolves_to,
            evolution_level=self.evolution_level,
            evolution_method=self.evolution_method,
            evolution_stone_type=self.evolution_stone_type,
        )


# === Console input ===


class TrainerProfile(_RowModel):
    """트레이너 등록 입력"""

    name: str = Field(..., min_length=1)
    birthdate: Optional[str] = None
    sex: Optional[Literal["M", "F", "O"]] = None
    hometown: Optional[str] = None
    description: Optional[str] = None

    @field_validator("birthdate", "hometown", "description", mode="before")
    @classmethod
    def _blank_to_none(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("sex", mode="before")
    @classmethod
    def _upper_sex(cls, value):
        if isinstance(value, str):
            value = value.strip().upper()
            return value or None
        return value
