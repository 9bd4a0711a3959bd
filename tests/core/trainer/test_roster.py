"""팀/보관함 배치 테스트"""

from pokedex.core.pokemon.models import Pokemon
from pokedex.core.trainer.models import Trainer
from pokedex.core.trainer.roster import (
    MAX_ACTIVE_POKEMON,
    SLOT_STORAGE,
    SLOT_TEAM,
    add_pokemon,
    locate,
    release_pokemon,
    switch_pokemon,
)


def _entry() -> Pokemon:
    return Pokemon(pokedex_number=25, name="Pikachu", type1="Electric", level=5)


def _trainer_with(count: int) -> Trainer:
    trainer = Trainer(trainer_id=1, name="Ash")
    for _ in range(count):
        add_pokemon(trainer, _entry())
    return trainer


class TestAddPokemon:
    def test_goes_to_team_until_full(self) -> None:
        trainer = _trainer_with(MAX_ACTIVE_POKEMON - 1)
        _, slot = add_pokemon(trainer, _entry())
        assert slot == SLOT_TEAM
        assert len(trainer.active_team) == MAX_ACTIVE_POKEMON

    def test_overflow_to_storage(self) -> None:
        trainer = _trainer_with(MAX_ACTIVE_POKEMON)
        _, slot = add_pokemon(trainer, _entry())
        assert slot == SLOT_STORAGE
        assert len(trainer.storage) == 1

    def test_storage_unbounded_for_overflow(self) -> None:
        trainer = _trainer_with(MAX_ACTIVE_POKEMON + 10)
        assert len(trainer.storage) == 10

    def test_catalog_entry_untouched(self) -> None:
        entry = _entry()
        trainer = Trainer(trainer_id=1, name="Ash")
        owned, _ = add_pokemon(trainer, entry)
        owned.level = 50
        assert entry.level == 5
        assert entry.instance_id is None


class TestReleaseAndSwitch:
    def test_release_from_storage(self) -> None:
        trainer = _trainer_with(MAX_ACTIVE_POKEMON + 1)
        target = trainer.storage[0]
        assert release_pokemon(trainer, target.instance_id) is target
        assert trainer.storage == []

    def test_release_unknown(self) -> None:
        assert release_pokemon(_trainer_with(1), "missing") is None

    def test_team_to_storage(self) -> None:
        trainer = _trainer_with(2)
        target = trainer.active_team[0]
        ok, _ = switch_pokemon(trainer, target.instance_id)
        assert ok
        assert locate(trainer, target.instance_id) == SLOT_STORAGE

    def test_storage_full_blocks_switch(self) -> None:
        trainer = _trainer_with(12)
        ok, message = switch_pokemon(trainer, trainer.active_team[0].instance_id)
        assert not ok
        assert message == "Storage is full."

    def test_team_full_blocks_switch(self) -> None:
        trainer = _trainer_with(7)
        ok, message = switch_pokemon(trainer, trainer.storage[0].instance_id)
        assert not ok
        assert message == "Active team is full."

    def test_storage_to_team(self) -> None:
        trainer = _trainer_with(7)
        trainer.active_team.pop()
        target = trainer.storage[0]
        ok, _ = switch_pokemon(trainer, target.instance_id)
        assert ok
        assert locate(trainer, target.instance_id) == SLOT_TEAM

    def test_switch_unknown(self) -> None:
        ok, _ = switch_pokemon(_trainer_with(1), "missing")
        assert not ok
