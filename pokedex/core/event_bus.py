"""EventBus - 카탈로그/서비스 간 이벤트 통신

규칙:
- 이벤트는 식별자(번호, 이름, ID)만 전달한다
- 전파 깊이 최대 MAX_DEPTH 단계
- 하나의 전파 체인 안에서 동일 source:event_type 중복 발행 금지
- 최상위 emit이 끝나면 체인 추적을 초기화한다
"""

from collections import defaultdict
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Set

from pokedex.core.logging import get_logger

logger = get_logger(__name__)

MAX_DEPTH = 5  # 한 체인 내 이벤트 전파 최대 깊이


@dataclass
class DexEvent:
    """이벤트 데이터 컨테이너

    Args:
        event_type: 이벤트 유형 (예: "pokemon_added", "item_bought")
        data: 이벤트 데이터 (ID 위주, 무거운 객체 금지)
        source: 발행한 카탈로그/서비스 이름
    """

    event_type: str
    data: Dict[str, Any]
    source: str

    # 내부 추적용 (외부에서 설정하지 않음)
    _depth: int = field(default=0, repr=False)


EventHandler = Callable[[DexEvent], None]


class EventBus:
    """동기식 이벤트 버스

    사용 패턴:
        bus = EventBus()
        bus.subscribe("pokemon_added", log_roster_change)
        bus.emit(DexEvent(event_type="pokemon_added", data={"trainer_id": 1}, source="trainer_service"))
    """

    def __init__(self) -> None:
        self._handlers: Dict[str, List[EventHandler]] = defaultdict(list)
        self._current_depth: int = 0
        self._emitted_in_chain: Set[str] = set()

    def subscribe(self, event_type: str, handler: EventHandler) -> None:
        """이벤트 구독 등록"""
        self._handlers[event_type].append(handler)
        logger.debug("EventBus subscribe: %s -> %s", event_type, handler.__qualname__)

    def unsubscribe(self, event_type: str, handler: EventHandler) -> None:
        """이벤트 구독 해제"""
        if event_type in self._handlers:
            try:
                self._handlers[event_type].remove(handler)
                logger.debug(
                    "EventBus unsubscribe: %s -> %s", event_type, handler.__qualname__
                )
            except ValueError:
                logger.warning(
                    "Handler not registered: %s -> %s",
                    event_type,
                    handler.__qualname__,
                )

    def emit(self, event: DexEvent) -> None:
        """이벤트 발행. 등록된 핸들러를 동기 호출.

        안전장치:
        1. 전파 깊이 MAX_DEPTH 초과 시 무시
        2. 같은 체인에서 동일 source:event_type 재발행 시 무시
        """
        if self._current_depth >= MAX_DEPTH:
            logger.warning(
                "EventBus depth limit (%d) reached: %s:%s dropped",
                MAX_DEPTH,
                event.source,
                event.event_type,
            )
            return

        chain_key = f"{event.source}:{event.event_type}"
        if chain_key in self._emitted_in_chain:
            logger.warning("EventBus duplicate event blocked: %s", chain_key)
            return

        self._emitted_in_chain.add(chain_key)
        event._depth = self._current_depth

        handlers = list(self._handlers.get(event.event_type, []))
        if not handlers:
            logger.debug("EventBus: no subscribers for %s", event.event_type)
            if self._current_depth == 0:
                self.reset_chain()
            return

        logger.debug(
            "EventBus dispatch: %s (source=%s, depth=%d, handlers=%d)",
            event.event_type,
            event.source,
            self._current_depth,
            len(handlers),
        )

        self._current_depth += 1
        try:
            for handler in handlers:
                try:
                    handler(event)
                except Exception:
                    logger.exception(
                        "EventBus handler error: %s (event=%s)",
                        handler.__qualname__,
                        event.event_type,
                    )
        finally:
            self._current_depth -= 1
            if self._current_depth == 0:
                self.reset_chain()

    def reset_chain(self) -> None:
        """중복 추적 초기화."""
        self._emitted_in_chain.clear()
        self._current_depth = 0

    def clear(self) -> None:
        """모든 구독 해제 (테스트용)"""
        self._handlers.clear()
        self.reset_chain()

    @property
    def handler_count(self) -> int:
        """등록된 총 핸들러 수"""
        return sum(len(h) for h in self._handlers.values())
