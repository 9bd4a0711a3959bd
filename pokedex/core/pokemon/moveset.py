"""기술 습득/망각/교체 규칙

- 같은 이름(대소문자 무시) 기술은 중복 습득 불가
- HM 기술은 4개 제한 무시
- HM, 기본 기술(Tackle/Defend)은 잊을 수 없음
반환: (성공 여부, 메시지)
"""

from __future__ import annotations

import logging

from pokedex.core.move.models import Move
from pokedex.core.pokemon.models import MAX_MOVES, Pokemon, is_default_move

logger = logging.getLogger(__name__)


def is_move_compatible(pokemon: Pokemon, move: Move) -> bool:
    """포켓몬 타입과 기술 타입이 하나라도 겹치는지"""
    pokemon_types = {t.lower() for t in pokemon.types}
    return any(t.lower() in pokemon_types for t in move.types)


def learn_move(pokemon: Pokemon, move: Move) -> tuple[bool, str]:
    if pokemon.knows_move(move.name):
        return False, f"{pokemon.name} already knows {move.name}."

    if move.is_hm:
        pokemon.move_set.append(move)
        logger.debug("%s learned HM %s", pokemon.name, move.name)
        return True, f"{pokemon.name} learned {move.name}!"

    if len(pokemon.move_set) >= MAX_MOVES:
        return False, f"{pokemon.name} already knows {MAX_MOVES} moves."

    pokemon.move_set.append(move)
    logger.debug("%s learned %s", pokemon.name, move.name)
    return True, f"{pokemon.name} learned {move.name}!"


def _check_removable(pokemon: Pokemon, name: str) -> tuple[Move | None, str]:
    if not name or not name.strip():
        return None, "Move name cannot be empty."
    move = pokemon.find_move(name)
    if move is None:
        return None, f"{pokemon.name} does not know {name.strip()}."
    if move.is_hm:
        return None, f"HM moves cannot be forgotten: {move.name}."
    if is_default_move(move.name):
        return None, f"Default moves cannot be forgotten: {move.name}."
    return move, ""


def forget_move(pokemon: Pokemon, name: str) -> tuple[bool, str]:
    move, reason = _check_removable(pokemon, name)
    if move is None:
        return False, reason

    pokemon.move_set.remove(move)
    logger.debug("%s forgot %s", pokemon.name, move.name)
    return True, f"{pokemon.name} forgot {move.name}."


def replace_move(pokemon: Pokemon, old_name: str, new_move: Move) -> tuple[bool, str]:
    """기존 기술을 지우고 새 기술 습득. 습득 실패 시 원래 자리로 복구."""
    old_move, reason = _check_removable(pokemon, old_name)
    if old_move is None:
        return False, reason

    index = pokemon.move_set.index(old_move)
    pokemon.move_set.pop(index)
    ok, message = learn_move(pokemon, new_move)
    if not ok:
        pokemon.move_set.insert(index, old_move)
        return False, message

    return True, f"{pokemon.name} forgot {old_move.name} and learned {new_move.name}!"
