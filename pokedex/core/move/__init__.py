"""기술 Core - 순수 Python"""

from .catalog import MoveDatabase
from .models import Move

__all__ = ["Move", "MoveDatabase"]
