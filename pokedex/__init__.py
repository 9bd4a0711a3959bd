"""Enhanced Pokedex - 포켓몬/기술/아이템/트레이너 도감"""

__version__ = "0.1.0"
