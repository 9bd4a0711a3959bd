"""팀/보관함 배치 규칙

- 팀은 최대 6마리, 넘치면 보관함으로 (보관함 무제한)
- 팀 → 보관함 이동은 보관함 6마리 미만일 때만
- 보관함 → 팀 이동은 팀 6마리 미만일 때만
"""

from __future__ import annotations

import logging

from pokedex.core.pokemon.models import Pokemon
from pokedex.core.trainer.models import Trainer

logger = logging.getLogger(__name__)

MAX_ACTIVE_POKEMON = 6
MAX_STORAGE_ON_SWITCH = 6

SLOT_TEAM = "team"
SLOT_STORAGE = "storage"


def add_pokemon(trainer: Trainer, pokemon: Pokemon) -> tuple[Pokemon, str]:
    """독립 사본을 만들어 팀 또는 보관함에 배치. 반환: (사본, 배치 위치)"""
    owned = pokemon.owned_copy()
    if len(trainer.active_team) < MAX_ACTIVE_POKEMON:
        trainer.active_team.append(owned)
        slot = SLOT_TEAM
    else:
        trainer.storage.append(owned)
        slot = SLOT_STORAGE

    logger.debug("%s received %s (%s)", trainer.name, owned.name, slot)
    return owned, slot


def release_pokemon(trainer: Trainer, instance_id: str) -> Pokemon | None:
    """팀 → 보관함 순으로 찾아 제거. 없으면 None."""
    for container in (trainer.active_team, trainer.storage):
        for pokemon in container:
            if pokemon.instance_id == instance_id:
                container.remove(pokemon)
                return pokemon
    return None


def locate(trainer: Trainer, instance_id: str) -> str | None:
    if any(p.instance_id == instance_id for p in trainer.active_team):
        return SLOT_TEAM
    if any(p.instance_id == instance_id for p in trainer.storage):
        return SLOT_STORAGE
    return None


def switch_pokemon(trainer: Trainer, instance_id: str) -> tuple[bool, str]:
    slot = locate(trainer, instance_id)
    if slot is None:
        return False, "Pokemon not found in team or storage."

    pokemon = trainer.find_pokemon(instance_id)
    if slot == SLOT_TEAM:
        if len(trainer.storage) >= MAX_STORAGE_ON_SWITCH:
            return False, "Storage is full."
        trainer.active_team.remove(pokemon)
        trainer.storage.append(pokemon)
        return True, f"{pokemon.name} was moved to storage."

    if len(trainer.active_team) >= MAX_ACTIVE_POKEMON:
        return False, "Active team is full."
    trainer.storage.remove(pokemon)
    trainer.active_team.append(pokemon)
    return True, f"{pokemon.name} joined the active team."
