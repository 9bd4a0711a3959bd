"""레벨업, 진화, 비타민 효과

모든 능력치 변화는 int() 절사.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from pokedex.core.item.models import Item, ItemCategory
from pokedex.core.pokemon.models import (
    MAX_LEVEL,
    STAT_NAMES,
    EvolutionMethod,
    Pokemon,
)

logger = logging.getLogger(__name__)

LEVEL_UP_MULTIPLIER = 1.1

# 비타민 이름(소문자) → (능력치, 배율)
VITAMIN_EFFECTS: dict[str, tuple[tuple[str, ...], float]] = {
    "hp up": (("hp",), 1.1),
    "protein": (("attack",), 1.1),
    "iron": (("defense",), 1.1),
    "carbos": (("speed",), 1.1),
    "zinc": (STAT_NAMES, 1.05),
}


@dataclass
class LevelUpResult:
    leveled: bool
    can_evolve: bool = False
    message: str = ""


def can_evolve_by_level(pokemon: Pokemon) -> bool:
    return (
        pokemon.evolves_to != 0
        and pokemon.evolution_level > 0
        and pokemon.evolution_method in (None, EvolutionMethod.LEVEL)
        and pokemon.level >= pokemon.evolution_level
    )


def can_evolve_by_stone(pokemon: Pokemon, item: Item) -> bool:
    if not item.is_category(ItemCategory.EVOLUTION_STONE):
        return False
    if pokemon.evolution_method != EvolutionMethod.STONE:
        return False
    if not pokemon.evolution_stone_type:
        return False
    return item.name.strip().lower() == pokemon.evolution_stone_type.strip().lower()


def level_up(pokemon: Pokemon) -> LevelUpResult:
    if pokemon.level >= MAX_LEVEL:
        return LevelUpResult(
            leveled=False,
            message=f"{pokemon.name} is already at maximum level.",
        )

    pokemon.level += 1
    for stat in STAT_NAMES:
        setattr(pokemon, stat, int(getattr(pokemon, stat) * LEVEL_UP_MULTIPLIER))

    logger.debug("%s grew to Lv.%d", pokemon.name, pokemon.level)
    return LevelUpResult(
        leveled=True,
        can_evolve=can_evolve_by_level(pokemon),
        message=f"{pokemon.name} grew to Lv.{pokemon.level}! {pokemon.cry()}",
    )


def apply_evolution(pokemon: Pokemon, evolved_form: Pokemon) -> str:
    """진화형 카탈로그 엔트리의 정체성과 진화 정보를 가져온다.
    레벨, 기술, 지닌 물건, instance_id는 유지.
    능력치는 max(현재, 진화형 기본값).
    """
    old_name = pokemon.name
    pokemon.pokedex_number = evolved_form.pokedex_number
    pokemon.name = evolved_form.name
    pokemon.type1 = evolved_form.type1
    pokemon.type2 = evolved_form.type2
    pokemon.evolves_from = evolved_form.evolves_from
    pokemon.evolves_to = evolved_form.evolves_to
    pokemon.evolution_level = evolved_form.evolution_level
    pokemon.evolution_method = evolved_form.evolution_method
    pokemon.evolution_stone_type = evolved_form.evolution_stone_type
    for stat in STAT_NAMES:
        setattr(pokemon, stat, max(getattr(pokemon, stat), getattr(evolved_form, stat)))

    logger.info("%s evolved into %s", old_name, pokemon.name)
    return f"{old_name} evolved into {pokemon.name}!"


def apply_vitamin(pokemon: Pokemon, item: Item) -> bool:
    """알려진 비타민이면 능력치 상승 후 True. 모르는 이름은 변화 없이 False."""
    effect = VITAMIN_EFFECTS.get(item.name.strip().lower())
    if effect is None:
        return False

    stats, multiplier = effect
    for stat in stats:
        setattr(pokemon, stat, int(getattr(pokemon, stat) * multiplier))
    return True
