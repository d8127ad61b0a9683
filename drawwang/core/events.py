# drawwang/core/events.py

"""
프로세스 내부 도메인 이벤트의 발행/구독을 담당하는 모듈입니다.

- 서비스 계층은 상태 변경 후 이벤트 객체를 `publisher.publish()`로 발행합니다.
- 다른 컴포넌트(알림, 모더레이션 등)는 관심 있는 이벤트 타입에 리스너를 등록합니다.
- 리스너는 동기 함수 또는 코루틴 함수 모두 가능합니다.
"""

import inspect
import logging
from collections import defaultdict
from typing import Any, Awaitable, Callable, DefaultDict, List, Optional, Type, Union

logger = logging.getLogger(__name__)


class DomainEvent:
    """모든 도메인 이벤트의 기반 클래스입니다."""


Listener = Callable[[Any], Union[None, Awaitable[None]]]


class EventPublisher:
    """
    이벤트 타입별 리스너 레지스트리입니다.
    발행된 이벤트는 해당 타입(또는 상위 타입)에 등록된 모든 리스너에게 전달됩니다.
    """

    def __init__(self) -> None:
        self._listeners: DefaultDict[Type[DomainEvent], List[Listener]] = defaultdict(list)

    def subscribe(self, event_type: Type[DomainEvent], listener: Listener) -> None:
        if listener not in self._listeners[event_type]:
            self._listeners[event_type].append(listener)

    def unsubscribe(self, event_type: Type[DomainEvent], listener: Listener) -> None:
        if listener in self._listeners.get(event_type, []):
            self._listeners[event_type].remove(listener)

    def listener(self, event_type: Type[DomainEvent]) -> Callable[[Listener], Listener]:
        """
        데코레이터 형태로 리스너를 등록합니다.

            @publisher.listener(SubmittedBoardEvent)
            async def notify(event): ...
        """
        def decorator(func: Listener) -> Listener:
            self.subscribe(event_type, func)
            return func
        return decorator

    def listeners_for(self, event: DomainEvent) -> List[Listener]:
        matched: List[Listener] = []
        for event_type, listeners in self._listeners.items():
            if isinstance(event, event_type):
                matched.extend(listeners)
        return matched

    async def publish(self, event: DomainEvent) -> None:
        """
        이벤트를 등록된 리스너들에게 순서대로 전달합니다.
        리스너의 실패는 기록만 하고 발행자에게 전파하지 않습니다 (fire-and-forget).
        """
        for listener in self.listeners_for(event):
            try:
                result = listener(event)
                if inspect.isawaitable(result):
                    await result
            except Exception:
                logger.exception(
                    "Event listener %s failed for %s",
                    getattr(listener, "__name__", repr(listener)), type(event).__name__,
                )

    def clear(self, event_type: Optional[Type[DomainEvent]] = None) -> None:
        if event_type is None:
            self._listeners.clear()
        else:
            self._listeners.pop(event_type, None)


# 애플리케이션 전역 이벤트 발행기
publisher = EventPublisher()
