"""서비스 행동 결과"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class ActionResult:
    """행동 결과"""

    success: bool
    action_type: str
    message: str
    data: Optional[dict] = None

