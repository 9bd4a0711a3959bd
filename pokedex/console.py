"""메뉴 기반 콘솔

입력/출력 함수를 주입받아 테스트에서 스크립트로 구동할 수 있다.
도메인 예외(PokedexError)와 입력 검증 실패(ValidationError)는
메뉴 경계에서 잡아 "Error: ..."로 출력하고 루프를 유지한다.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Optional, Sequence

from pydantic import ValidationError

from pokedex.core.errors import PokedexError
from pokedex.core.logging import get_logger
from pokedex.core.pokemon.models import Pokemon
from pokedex.core.pokemon.moveset import learn_move
from pokedex.core.results import ActionResult
from pokedex.core.trainer.models import Trainer
from pokedex.schemas import (
    MOVE_COLUMNS,
    POKEMON_COLUMNS,
    MoveRow,
    PokemonRow,
    TrainerProfile,
    cells_to_dict,
)

if TYPE_CHECKING:
    from pokedex.main import AppContext

logger = get_logger(__name__)

InputFn = Callable[[str], str]
OutputFn = Callable[[str], None]

POKEMON_PROMPTS = {
    "number": "Pokedex number: ",
    "name": "Name: ",
    "type1": "Primary type: ",
    "type2": "Secondary type (blank for none): ",
    "level": "Level [1]: ",
    "hp": "HP: ",
    "attack": "Attack: ",
    "defense": "Defense: ",
    "speed": "Speed: ",
    "evolves_from": "Evolves from (dex number, blank for none): ",
    "evolves_to": "Evolves to (dex number, blank for none): ",
    "evolution_level": "Evolution level (blank for none): ",
    "evolution_method": "Evolution method (level/stone/trade, blank for none): ",
    "evolution_stone_type": "Evolution stone (blank for none): ",
}

MOVE_PROMPTS = {
    "name": "Move name: ",
    "description": "Description: ",
    "classification": "Classification (e.g. Physical, Special, Status, TM, HM): ",
    "type1": "Primary type: ",
    "type2": "Secondary type (blank for none): ",
}


class Console:
    """도감 콘솔 메뉴 루프"""

    def __init__(
        self,
        app: AppContext,
        input_fn: InputFn = input,
        output_fn: OutputFn = print,
    ):
        self._app = app
        self._input = input_fn
        self._out = output_fn

    # === 입력 도우미 ===

    def _ask(self, prompt: str) -> str:
        return self._input(prompt).strip()

    def _ask_int(self, prompt: str) -> Optional[int]:
        """정수 입력. 빈 입력은 None(취소), 잘못된 입력은 재질문."""
        while True:
            raw = self._ask(prompt)
            if not raw:
                return None
            try:
                return int(raw)
            except ValueError:
                self._out("Please enter a valid number.")

    def _header(self, title: str) -> None:
        self._out("\n" + "=" * 50)
        self._out(f"  {title}")
        self._out("=" * 50)

    def _menu(self, title: str, options: Sequence[str]) -> str:
        self._header(title)
        for i, option in enumerate(options, start=1):
            self._out(f"{i}. {option}")
        return self._ask("Choose an option: ")

    def _pick(self, label: str, entries: Sequence) -> Optional[int]:
        """번호 목록에서 하나 선택. 반환: 0-based 인덱스 또는 None"""
        if not entries:
            self._out(f"No {label} available.")
            return None
        for i, entry in enumerate(entries, start=1):
            self._out(f"  {i}. {entry}")
        choice = self._ask_int(f"Select {label} (blank to cancel): ")
        if choice is None:
            return None
        if not 1 <= choice <= len(entries):
            self._out("Invalid selection.")
            return None
        return choice - 1

    def _show_list(self, label: str, entries: Sequence) -> None:
        if not entries:
            self._out(f"No {label} found.")
            return
        for entry in entries:
            self._out(f"  {entry}")

    def _show_result(self, result: ActionResult) -> None:
        prefix = "" if result.success else "Failed: "
        self._out(prefix + result.message)

    def _guarded(self, action: Callable[[], None]) -> None:
        try:
            action()
        except (PokedexError, ValidationError) as e:
            logger.info("Console action failed: %s", e)
            self._out(f"Error: {e}")

    # === 메인 루프 ===

    def run(self) -> None:
        self._header("ENHANCED POKEDEX")
        menus = {
            "1": self.pokemon_menu,
            "2": self.move_menu,
            "3": self.item_menu,
            "4": self.trainer_menu,
        }
        try:
            while True:
                choice = self._menu(
                    "MAIN MENU", ["Pokemon", "Moves", "Items", "Trainers", "Exit"]
                )
                if choice == "5":
                    break
                handler = menus.get(choice)
                if handler is None:
                    self._out("Invalid option.")
                    continue
                handler()
        except (EOFError, KeyboardInterrupt):
            self._out("")
        self._out("Goodbye!")

    # === Pokemon ===

    def pokemon_menu(self) -> None:
        while True:
            choice = self._menu("POKEMON", ["Add Pokemon", "View All", "Search", "Back"])
            if choice == "1":
                self._guarded(self._add_pokemon)
            elif choice == "2":
                self._view_all_pokemon()
            elif choice == "3":
                self._search_pokemon()
            elif choice == "4":
                return
            else:
                self._out("Invalid option.")

    def _add_pokemon(self) -> None:
        answers = {field: self._ask(prompt) for field, prompt in POKEMON_PROMPTS.items()}
        move_names = self._ask("Moves (comma separated, blank for defaults): ")

        cells = [answers[col] for col in POKEMON_COLUMNS]
        row = PokemonRow(**cells_to_dict(POKEMON_COLUMNS, cells))
        pokemon = row.to_pokemon()
        for name in (n.strip() for n in move_names.split(",")):
            if not name:
                continue
            move = self._app.moves.find_by_name(name)
            if move is None:
                self._out(f"Unknown move skipped: {name}")
                continue
            ok, message = learn_move(pokemon, move)
            if not ok:
                self._out(message)

        self._app.pokedex.add(pokemon)
        self._out(f"Added {pokemon}")

    def _evolution_label(self, number: int) -> str:
        if number == 0:
            return "-"
        entry = self._app.pokedex.get_by_number(number)
        return entry.name if entry is not None else f"#{number:03d}"

    def _view_all_pokemon(self) -> None:
        entries = self._app.pokedex.get_all()
        if not entries:
            self._out("No Pokemon registered.")
            return
        self._out(
            f"{'No.':<5}{'Name':<12}{'Type':<16}{'Lv':>4}{'HP':>5}{'ATK':>5}"
            f"{'DEF':>5}{'SPD':>5}  {'From':<12}{'To':<12}"
        )
        for p in entries:
            self._out(
                f"{p.pokedex_number:<5}{p.name:<12}{p.type_label:<16}{p.level:>4}"
                f"{p.hp:>5}{p.attack:>5}{p.defense:>5}{p.speed:>5}  "
                f"{self._evolution_label(p.evolves_from):<12}"
                f"{self._evolution_label(p.evolves_to):<12}"
            )

    def _search_pokemon(self) -> None:
        choice = self._menu("SEARCH POKEMON", ["By name", "By type"])
        term = self._ask("Search term: ")
        if choice == "1":
            self._show_list("Pokemon", self._app.pokedex.search_by_name(term))
        elif choice == "2":
            self._show_list("Pokemon", self._app.pokedex.search_by_type(term))
        else:
            self._out("Invalid option.")

    # === Moves ===

    def move_menu(self) -> None:
        while True:
            choice = self._menu("MOVES", ["Add Move", "View All", "Search", "Back"])
            if choice == "1":
                self._guarded(self._add_move)
            elif choice == "2":
                self._show_list("moves", self._app.moves.get_all())
            elif choice == "3":
                self._search_moves()
            elif choice == "4":
                return
            else:
                self._out("Invalid option.")

    def _add_move(self) -> None:
        cells = [self._ask(MOVE_PROMPTS[col]) for col in MOVE_COLUMNS]
        move = MoveRow(**cells_to_dict(MOVE_COLUMNS, cells)).to_move()
        self._app.moves.add(move)
        self._out(f"Added {move}")

    def _search_moves(self) -> None:
        choice = self._menu("SEARCH MOVES", ["By name", "By type", "By classification"])
        term = self._ask("Search term: ")
        moves = self._app.moves
        searches = {
            "1": moves.search_by_name,
            "2": moves.search_by_type,
            "3": moves.search_by_classification,
        }
        search = searches.get(choice)
        if search is None:
            self._out("Invalid option.")
            return
        self._show_list("moves", search(term))

    # === Items ===

    def item_menu(self) -> None:
        while True:
            choice = self._menu("ITEMS", ["View All", "Search", "Back"])
            if choice == "1":
                self._show_list("items", self._app.items.get_all())
            elif choice == "2":
                sub = self._menu("SEARCH ITEMS", ["By name", "By category"])
                term = self._ask("Search term: ")
                if sub == "1":
                    self._show_list("items", self._app.items.search_by_name(term))
                elif sub == "2":
                    self._show_list("items", self._app.items.search_by_category(term))
                else:
                    self._out("Invalid option.")
            elif choice == "3":
                return
            else:
                self._out("Invalid option.")

    # === Trainers ===

    def trainer_menu(self) -> None:
        trainers = self._app.trainers
        while True:
            choice = self._menu(
                "TRAINERS",
                [
                    "Register Trainer",
                    "View All",
                    "Search by Name",
                    "Search by Pokemon",
                    "Manage Trainer",
                    "Back",
                ],
            )
            if choice == "1":
                self._guarded(self._register_trainer)
            elif choice == "2":
                self._show_list("trainers", trainers.get_all())
            elif choice == "3":
                self._show_list("trainers", trainers.search_by_name(self._ask("Name: ")))
            elif choice == "4":
                self._show_list(
                    "trainers", trainers.search_by_pokemon(self._ask("Pokemon name: "))
                )
            elif choice == "5":
                self._guarded(self._manage_trainer)
            elif choice == "6":
                return
            else:
                self._out("Invalid option.")

    def _register_trainer(self) -> None:
        profile = TrainerProfile(
            name=self._ask("Name: "),
            birthdate=self._ask("Birthdate (YYYY-MM-DD, optional): "),
            sex=self._ask("Sex (M/F/O, optional): "),
            hometown=self._ask("Hometown (optional): "),
            description=self._ask("Description (optional): "),
        )
        trainer = self._app.service.register_trainer(**profile.model_dump())
        self._out(f"Registered {trainer}")

    def _manage_trainer(self) -> None:
        trainer_id = self._ask_int("Trainer ID: ")
        if trainer_id is None:
            return
        trainer = self._app.service.get_trainer(trainer_id)

        actions: dict[str, Callable[[Trainer], None]] = {
            "1": self._view_team,
            "2": self._view_storage,
            "3": self._view_inventory,
            "4": self._give_pokemon,
            "5": self._release_pokemon,
            "6": self._switch_pokemon,
            "7": self._teach_move,
            "8": self._forget_move,
            "9": self._buy_item,
            "10": self._sell_item,
            "11": self._use_item,
            "12": self._give_held_item,
        }
        while True:
            choice = self._menu(
                f"MANAGE {trainer.name.upper()} (Money: {trainer.money})",
                [
                    "View Team",
                    "View Storage",
                    "View Inventory",
                    "Add Pokemon",
                    "Release Pokemon",
                    "Switch Pokemon",
                    "Teach Move",
                    "Forget Move",
                    "Buy Item",
                    "Sell Item",
                    "Use Item",
                    "Give Held Item",
                    "Back",
                ],
            )
            if choice == "13":
                return
            action = actions.get(choice)
            if action is None:
                self._out("Invalid option.")
                continue
            self._guarded(lambda: action(trainer))

    def _describe(self, pokemon: Pokemon) -> str:
        moves = ", ".join(m.name for m in pokemon.move_set)
        held = pokemon.held_item.name if pokemon.held_item else "None"
        return f"{pokemon} | Moves: {moves} | Held: {held}"

    def _view_team(self, trainer: Trainer) -> None:
        self._show_list("Pokemon in team", [self._describe(p) for p in trainer.get_team()])

    def _view_storage(self, trainer: Trainer) -> None:
        self._show_list(
            "Pokemon in storage", [self._describe(p) for p in trainer.get_storage()]
        )

    def _view_inventory(self, trainer: Trainer) -> None:
        self._out(f"Money: {trainer.money}")
        self._show_list("items", trainer.get_inventory())

    def _select_owned(self, trainer: Trainer) -> Optional[Pokemon]:
        owned = trainer.all_pokemon()
        index = self._pick("Pokemon", owned)
        return None if index is None else owned[index]

    def _give_pokemon(self, trainer: Trainer) -> None:
        query = self._ask("Pokedex number or name: ")
        if not query:
            return
        if query.isdigit():
            number = int(query)
        else:
            matches = self._app.pokedex.search_by_name(query)
            index = self._pick("Pokemon", matches)
            if index is None:
                return
            number = matches[index].pokedex_number
        self._show_result(self._app.service.add_pokemon(trainer.trainer_id, number))

    def _release_pokemon(self, trainer: Trainer) -> None:
        pokemon = self._select_owned(trainer)
        if pokemon is not None:
            self._show_result(
                self._app.service.release_pokemon(trainer.trainer_id, pokemon.instance_id)
            )

    def _switch_pokemon(self, trainer: Trainer) -> None:
        pokemon = self._select_owned(trainer)
        if pokemon is not None:
            self._show_result(
                self._app.service.switch_pokemon(trainer.trainer_id, pokemon.instance_id)
            )

    def _teach_move(self, trainer: Trainer) -> None:
        pokemon = self._select_owned(trainer)
        if pokemon is None:
            return
        move_name = self._ask("Move name: ")
        self._show_result(
            self._app.service.teach_move(trainer.trainer_id, pokemon.instance_id, move_name)
        )

    def _forget_move(self, trainer: Trainer) -> None:
        pokemon = self._select_owned(trainer)
        if pokemon is None:
            return
        index = self._pick("move", pokemon.move_set)
        if index is None:
            return
        self._show_result(
            self._app.service.forget_move(
                trainer.trainer_id, pokemon.instance_id, pokemon.move_set[index].name
            )
        )

    def _buy_item(self, trainer: Trainer) -> None:
        for_sale = self._app.items.get_purchasable()
        index = self._pick("item", for_sale)
        if index is None:
            return
        quantity = self._ask_int("Quantity: ")
        if quantity is None:
            return
        self._show_result(
            self._app.service.buy_item(trainer.trainer_id, for_sale[index].name, quantity)
        )

    def _select_inventory(self, trainer: Trainer) -> Optional[str]:
        inventory = trainer.get_inventory()
        index = self._pick("item", inventory)
        return None if index is None else inventory[index].name

    def _sell_item(self, trainer: Trainer) -> None:
        item_name = self._select_inventory(trainer)
        if item_name is None:
            return
        quantity = self._ask_int("Quantity: ")
        if quantity is None:
            return
        self._show_result(
            self._app.service.sell_item(trainer.trainer_id, item_name, quantity)
        )

    def _use_item(self, trainer: Trainer) -> None:
        item_name = self._select_inventory(trainer)
        if item_name is None:
            return
        pokemon = self._select_owned(trainer)
        if pokemon is None:
            return
        self._show_result(
            self._app.service.use_item(trainer.trainer_id, item_name, pokemon.instance_id)
        )

    def _give_held_item(self, trainer: Trainer) -> None:
        item_name = self._select_inventory(trainer)
        if item_name is None:
            return
        pokemon = self._select_owned(trainer)
        if pokemon is None:
            return
        self._show_result(
            self._app.service.give_held_item(
                trainer.trainer_id, item_name, pokemon.instance_id
            )
        )
