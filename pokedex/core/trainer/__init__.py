"""트레이너 Core - 순수 Python"""

from .models import Trainer
from .registry import TrainerDatabase

__all__ = ["Trainer", "TrainerDatabase"]
