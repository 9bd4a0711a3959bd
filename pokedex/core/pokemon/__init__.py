"""포켓몬 Core - 순수 Python"""

from .dex import Pokedex
from .models import DEFAULT_MOVES, EvolutionMethod, Pokemon

__all__ = ["DEFAULT_MOVES", "EvolutionMethod", "Pokedex", "Pokemon"]
