"""기술(Move) 데이터 모델"""

from __future__ import annotations

from dataclasses import dataclass

HM_CLASSIFICATION = "HM"


@dataclass(frozen=True)
class Move:
    """기술 카탈로그 레코드 (불변)"""

    name: str
    description: str = ""
    classification: str = ""
    type1: str = ""
    type2: str | None = None

    @property
    def is_hm(self) -> bool:
        """HM 기술은 4개 제한을 무시하고 잊을 수 없다."""
        return self.classification.strip().upper() == HM_CLASSIFICATION

    @property
    def types(self) -> tuple[str, ...]:
        return tuple(t for t in (self.type1, self.type2) if t)

    def __str__(self) -> str:
        type_label = "/".join(self.types)
        return f"{self.name} [{type_label}] ({self.classification}) - {self.description}"
