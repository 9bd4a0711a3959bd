"""트레이너 Service - 카탈로그 ↔ 트레이너 보유물 연결, EventBus 통신

규칙 위반(팀 가득, 잔액 부족, 한도 초과 등)은 ActionResult(success=False).
미등록 트레이너/카탈로그 항목은 NotFoundError.
"""

from __future__ import annotations

from typing import Any, Optional

from pokedex.core.errors import NotFoundError
from pokedex.core.event_bus import DexEvent, EventBus
from pokedex.core.event_types import EventTypes
from pokedex.core.item.catalog import ItemDatabase
from pokedex.core.item.inventory import (
    check_can_add,
    consume,
    find_entry,
    stack_item,
)
from pokedex.core.item.models import RARE_CANDY, Item, ItemCategory
from pokedex.core.logging import get_logger
from pokedex.core.move.catalog import MoveDatabase
from pokedex.core.move.models import Move
from pokedex.core.pokemon.dex import Pokedex
from pokedex.core.pokemon.growth import (
    apply_evolution,
    apply_vitamin,
    can_evolve_by_stone,
    level_up,
)
from pokedex.core.pokemon.models import Pokemon
from pokedex.core.pokemon.moveset import (
    forget_move,
    is_move_compatible,
    learn_move,
    replace_move,
)
from pokedex.core.results import ActionResult
from pokedex.core.trainer import roster
from pokedex.core.trainer.models import DEFAULT_STARTING_MONEY, Trainer
from pokedex.core.trainer.registry import TrainerDatabase

logger = get_logger(__name__)


class TrainerService:
    """트레이너 등록 + 팀/기술/인벤토리 비즈니스 로직"""

    def __init__(
        self,
        trainers: TrainerDatabase,
        pokedex: Pokedex,
        moves: MoveDatabase,
        items: ItemDatabase,
        event_bus: EventBus,
        starting_money: int = DEFAULT_STARTING_MONEY,
    ):
        self._trainers = trainers
        self._pokedex = pokedex
        self._moves = moves
        self._items = items
        self._bus = event_bus
        self._starting_money = starting_money

    def _emit(self, event_type: str, data: dict[str, Any]) -> None:
        self._bus.emit(DexEvent(event_type=event_type, data=data, source="trainer_service"))

    def _fail(self, action_type: str, message: str, **data: Any) -> ActionResult:
        logger.info("%s rejected: %s", action_type, message)
        return ActionResult(False, action_type, message, data or None)

    # === 트레이너 관리 ===

    def get_trainer(self, trainer_id: int) -> Trainer:
        trainer = self._trainers.get_by_id(trainer_id)
        if trainer is None:
            raise NotFoundError("Trainer", trainer_id)
        return trainer

    def register_trainer(
        self,
        name: str,
        *,
        birthdate: Optional[str] = None,
        sex: Optional[str] = None,
        hometown: Optional[str] = None,
        description: Optional[str] = None,
    ) -> Trainer:
        trainer = self._trainers.add_trainer(
            name,
            birthdate=birthdate,
            sex=sex,
            hometown=hometown,
            description=description,
            money=self._starting_money,
        )
        self._emit(
            EventTypes.TRAINER_REGISTERED,
            {"trainer_id": trainer.trainer_id, "name": trainer.name},
        )
        return trainer

    def remove_trainer(self, trainer_id: int) -> bool:
        removed = self._trainers.remove(trainer_id)
        if removed:
            self._emit(EventTypes.TRAINER_REMOVED, {"trainer_id": trainer_id})
        return removed

    # === 포켓몬 ===

    def _get_dex_entry(self, dex_number: int) -> Pokemon:
        entry = self._pokedex.get_by_number(dex_number)
        if entry is None:
            raise NotFoundError("Pokemon number", dex_number)
        return entry

    def add_pokemon(self, trainer_id: int, dex_number: int) -> ActionResult:
        """도감 엔트리의 사본을 팀(6마리 미만) 또는 보관함에 추가."""
        trainer = self.get_trainer(trainer_id)
        entry = self._get_dex_entry(dex_number)

        owned, slot = roster.add_pokemon(trainer, entry)
        self._emit(
            EventTypes.POKEMON_ADDED,
            {
                "trainer_id": trainer_id,
                "instance_id": owned.instance_id,
                "pokedex_number": owned.pokedex_number,
                "slot": slot,
            },
        )
        where = "the active team" if slot == roster.SLOT_TEAM else "storage"
        return ActionResult(
            True,
            "add_pokemon",
            f"{owned.name} was added to {where}.",
            {"instance_id": owned.instance_id, "slot": slot},
        )

    def release_pokemon(self, trainer_id: int, instance_id: str) -> ActionResult:
        trainer = self.get_trainer(trainer_id)
        released = roster.release_pokemon(trainer, instance_id)
        if released is None:
            return self._fail(
                "release_pokemon",
                "Pokemon not found in team or storage.",
                instance_id=instance_id,
            )

        self._emit(
            EventTypes.POKEMON_RELEASED,
            {"trainer_id": trainer_id, "instance_id": instance_id},
        )
        return ActionResult(
            True,
            "release_pokemon",
            f"{released.name} was released. Bye, {released.name}!",
            {"instance_id": instance_id},
        )

    def switch_pokemon(self, trainer_id: int, instance_id: str) -> ActionResult:
        """팀 ↔ 보관함 이동"""
        trainer = self.get_trainer(trainer_id)
        ok, message = roster.switch_pokemon(trainer, instance_id)
        if not ok:
            return self._fail("switch_pokemon", message, instance_id=instance_id)

        slot = roster.locate(trainer, instance_id)
        self._emit(
            EventTypes.POKEMON_SWITCHED,
            {"trainer_id": trainer_id, "instance_id": instance_id, "slot": slot},
        )
        return ActionResult(
            True, "switch_pokemon", message, {"instance_id": instance_id, "slot": slot}
        )

    # === 기술 ===

    def _get_move(self, move_name: str) -> Move:
        move = self._moves.get(move_name)
        if move is None:
            raise NotFoundError("Move", move_name)
        return move

    def teach_move(self, trainer_id: int, instance_id: str, move_name: str) -> ActionResult:
        """보유 포켓몬에게 타입이 맞는 기술을 가르친다."""
        trainer = self.get_trainer(trainer_id)
        move = self._get_move(move_name)
        pokemon = trainer.find_pokemon(instance_id)
        if pokemon is None:
            return self._fail(
                "teach_move", "This Pokemon does not belong to the trainer."
            )
        if not is_move_compatible(pokemon, move):
            return self._fail(
                "teach_move",
                f"{pokemon.name} ({pokemon.type_label}) cannot learn "
                f"{move.name} ({'/'.join(move.types)}).",
            )

        ok, message = learn_move(pokemon, move)
        if not ok:
            return self._fail("teach_move", message)

        self._emit(
            EventTypes.MOVE_LEARNED,
            {"trainer_id": trainer_id, "instance_id": instance_id, "move": move.name},
        )
        return ActionResult(True, "teach_move", message, {"move": move.name})

    def forget_move(self, trainer_id: int, instance_id: str, move_name: str) -> ActionResult:
        trainer = self.get_trainer(trainer_id)
        pokemon = trainer.find_pokemon(instance_id)
        if pokemon is None:
            return self._fail(
                "forget_move", "This Pokemon does not belong to the trainer."
            )

        ok, message = forget_move(pokemon, move_name)
        if not ok:
            return self._fail("forget_move", message)

        self._emit(
            EventTypes.MOVE_FORGOTTEN,
            {"trainer_id": trainer_id, "instance_id": instance_id, "move": move_name.strip()},
        )
        return ActionResult(True, "forget_move", message)

    def replace_move(
        self, trainer_id: int, instance_id: str, old_move_name: str, new_move_name: str
    ) -> ActionResult:
        trainer = self.get_trainer(trainer_id)
        new_move = self._get_move(new_move_name)
        pokemon = trainer.find_pokemon(instance_id)
        if pokemon is None:
            return self._fail(
                "replace_move", "This Pokemon does not belong to the trainer."
            )
        if not is_move_compatible(pokemon, new_move):
            return self._fail(
                "replace_move",
                f"{pokemon.name} ({pokemon.type_label}) cannot learn {new_move.name}.",
            )

        ok, message = replace_move(pokemon, old_move_name, new_move)
        if not ok:
            return self._fail("replace_move", message)

        self._emit(
            EventTypes.MOVE_FORGOTTEN,
            {"trainer_id": trainer_id, "instance_id": instance_id, "move": old_move_name.strip()},
        )
        self._emit(
            EventTypes.MOVE_LEARNED,
            {"trainer_id": trainer_id, "instance_id": instance_id, "move": new_move.name},
        )
        return ActionResult(True, "replace_move", message, {"move": new_move.name})

    # === 인벤토리 ===

    def _get_item(self, item_name: str) -> Item:
        item = self._items.find_by_name(item_name)
        if item is None:
            raise NotFoundError("Item", item_name)
        return item

    def add_item(self, trainer_id: int, item_name: str, quantity: int = 1) -> ActionResult:
        """돈을 쓰지 않는 지급. 한도 검사는 동일."""
        trainer = self.get_trainer(trainer_id)
        item = self._get_item(item_name)

        reason = check_can_add(trainer.inventory, item.name, quantity)
        if reason is not None:
            return self._fail("add_item", reason, item=item.name)

        entry = stack_item(trainer.inventory, item, quantity)
        self._emit(
            EventTypes.ITEM_ADDED,
            {"trainer_id": trainer_id, "item": item.name, "quantity": quantity},
        )
        return ActionResult(
            True,
            "add_item",
            f"Added {quantity} {item.name}.",
            {"item": item.name, "quantity": entry.quantity},
        )

    def buy_item(self, trainer_id: int, item_name: str, quantity: int = 1) -> ActionResult:
        trainer = self.get_trainer(trainer_id)
        item = self._get_item(item_name)

        if quantity <= 0:
            return self._fail("buy_item", "Quantity must be greater than 0.")
        if not item.is_purchasable:
            return self._fail("buy_item", f"{item.name} cannot be purchased.")

        cost = item.buy_price * quantity
        if trainer.money < cost:
            return self._fail(
                "buy_item",
                f"Not enough money. Need {cost}, have {trainer.money}.",
                cost=cost,
            )

        reason = check_can_add(trainer.inventory, item.name, quantity)
        if reason is not None:
            return self._fail("buy_item", reason, item=item.name)

        trainer.money -= cost
        stack_item(trainer.inventory, item, quantity)
        self._emit(
            EventTypes.ITEM_BOUGHT,
            {"trainer_id": trainer_id, "item": item.name, "quantity": quantity, "cost": cost},
        )
        return ActionResult(
            True,
            "buy_item",
            f"Bought {quantity} {item.name} for {cost}.",
            {"item": item.name, "cost": cost, "money": trainer.money},
        )

    def sell_item(self, trainer_id: int, item_name: str, quantity: int = 1) -> ActionResult:
        trainer = self.get_trainer(trainer_id)
        if quantity <= 0:
            return self._fail("sell_item", "Quantity must be greater than 0.")

        entry = find_entry(trainer.inventory, item_name)
        if entry is None:
            return self._fail("sell_item", f"You don't have any {item_name.strip()}.")
        if entry.quantity < quantity:
            return self._fail(
                "sell_item",
                f"Not enough {entry.name}. You have {entry.quantity}.",
            )

        earned = entry.item.sell_price * quantity
        trainer.money += earned
        consume(trainer.inventory, entry, quantity)
        self._emit(
            EventTypes.ITEM_SOLD,
            {
                "trainer_id": trainer_id,
                "item": entry.name,
                "quantity": quantity,
                "earned": earned,
            },
        )
        return ActionResult(
            True,
            "sell_item",
            f"Sold {quantity} {entry.name} for {earned}.",
            {"item": entry.name, "earned": earned, "money": trainer.money},
        )

    def use_item(self, trainer_id: int, item_name: str, instance_id: str) -> ActionResult:
        """카테고리별 효과 적용. 성공 시에만 1개 소모."""
        trainer = self.get_trainer(trainer_id)
        entry = find_entry(trainer.inventory, item_name)
        if entry is None:
            return self._fail("use_item", f"You don't have any {item_name.strip()}.")
        pokemon = trainer.find_pokemon(instance_id)
        if pokemon is None:
            return self._fail("use_item", "This Pokemon does not belong to the trainer.")

        item = entry.item
        data: dict[str, Any] = {"item": item.name, "instance_id": instance_id}

        if item.is_category(ItemCategory.VITAMIN):
            if not apply_vitamin(pokemon, item):
                return self._fail("use_item", f"{item.name} has no effect.")
            message = f"{pokemon.name}'s stats rose! {pokemon}"

        elif item.is_category(ItemCategory.LEVELING_ITEM):
            if item.name.lower() != RARE_CANDY.lower():
                return self._fail("use_item", f"{item.name} has no effect.")
            result = level_up(pokemon)
            if not result.leveled:
                return self._fail("use_item", result.message)
            self._emit(
                EventTypes.POKEMON_LEVELED_UP,
                {"trainer_id": trainer_id, "instance_id": instance_id, "level": pokemon.level},
            )
            message = result.message
            if result.can_evolve:
                message += " " + self._evolve_after_level_up(trainer_id, pokemon, data)

        elif item.is_category(ItemCategory.EVOLUTION_STONE):
            if not can_evolve_by_stone(pokemon, item):
                return self._fail("use_item", f"{item.name} has no effect on {pokemon.name}.")
            evolved_form = self._pokedex.get_by_number(pokemon.evolves_to)
            if evolved_form is None:
                return self._fail("use_item", "Evolution data not found.")
            message = self._evolve(trainer_id, pokemon, evolved_form, data)

        else:
            return self._fail("use_item", f"{item.name} cannot be used this way.")

        consume(trainer.inventory, entry)
        self._emit(
            EventTypes.ITEM_USED,
            {"trainer_id": trainer_id, "item": item.name, "instance_id": instance_id},
        )
        return ActionResult(True, "use_item", message, data)

    def _evolve_after_level_up(
        self, trainer_id: int, pokemon: Pokemon, data: dict[str, Any]
    ) -> str:
        evolved_form = self._pokedex.get_by_number(pokemon.evolves_to)
        if evolved_form is None:
            logger.warning(
                "Evolution target #%03d missing for %s", pokemon.evolves_to, pokemon.name
            )
            return "Evolution data not found."
        return self._evolve(trainer_id, pokemon, evolved_form, data)

    def _evolve(
        self,
        trainer_id: int,
        pokemon: Pokemon,
        evolved_form: Pokemon,
        data: dict[str, Any],
    ) -> str:
        from_number = pokemon.pokedex_number
        message = apply_evolution(pokemon, evolved_form)
        data["evolved_to"] = pokemon.pokedex_number
        self._emit(
            EventTypes.POKEMON_EVOLVED,
            {
                "trainer_id": trainer_id,
                "instance_id": pokemon.instance_id,
                "from": from_number,
                "to": pokemon.pokedex_number,
            },
        )
        return message

    def give_held_item(self, trainer_id: int, item_name: str, instance_id: str) -> ActionResult:
        """인벤토리에서 1개를 꺼내 지니게 한다. 이전에 지닌 물건은 사라진다."""
        trainer = self.get_trainer(trainer_id)
        entry = find_entry(trainer.inventory, item_name)
        if entry is None:
            return self._fail("give_held_item", f"You don't have any {item_name.strip()}.")
        pokemon = trainer.find_pokemon(instance_id)
        if pokemon is None:
            return self._fail(
                "give_held_item", "This Pokemon does not belong to the trainer."
            )

        previous = pokemon.held_item
        pokemon.held_item = entry.item
        consume(trainer.inventory, entry)

        message = f"{pokemon.name} is now holding {entry.item.name}."
        if previous is not None:
            self._emit(
                EventTypes.HELD_ITEM_DISCARDED,
                {"trainer_id": trainer_id, "instance_id": instance_id, "item": previous.name},
            )
            message += f" {previous.name} was discarded."
        return ActionResult(
            True, "give_held_item", message, {"item": entry.item.name, "instance_id": instance_id}
        )
