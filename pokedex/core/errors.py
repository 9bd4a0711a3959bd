"""도감 공통 예외

카탈로그 무결성 위반(빈 이름, 중복, 미등록 ID)만 예외로 올린다.
팀/인벤토리 규칙 위반은 ActionResult(success=False)로 반환한다.
"""

from __future__ import annotations


class PokedexError(ValueError):
    """도감 예외 기본 클래스"""


class InvalidEntryError(PokedexError):
    """필드 값이 규칙을 벗어남 (빈 이름, 잘못된 성별 코드 등)"""


class DuplicateEntryError(PokedexError):
    def __init__(self, entity_type: str, key: str | int) -> None:
        super().__init__(f"{entity_type} already exists: {key}")
        self.entity_type = entity_type
        self.key = key


class NotFoundError(PokedexError, LookupError):
    def __init__(self, entity_type: str, key: str | int) -> None:
        super().__init__(f"{entity_type} not found: {key}")
        self.entity_type = entity_type
        self.key = key
