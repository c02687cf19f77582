"""핸들러 레지스트리 생성과 컴포지션 진입점.

레지스트리는 컴포지션 시점에 한 번 만들어지고 이후에는 읽기 전용입니다.
"""
from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING, Iterable, Optional, Sequence

from fastmediator.core import (
    HandlerClass,
    NotificationHandlerMap,
    NotificationType,
    PipelineBehavior,
    RequestHandlerMap,
    RequestType,
    Resolver,
    get_logger,
)
from fastmediator.metadata import get_notification_type, get_request_type

if TYPE_CHECKING:
    from fastmediator.mediator import Mediator

logger = get_logger("fastmediator.registry")


@dataclass(frozen=True)
class HandlerRegistry:
    """요청/알림 타입 -> 핸들러 클래스 레지스트리."""

    request_handlers: RequestHandlerMap = field(
        default_factory=lambda: MappingProxyType({})
    )
    notification_handlers: NotificationHandlerMap = field(
        default_factory=lambda: MappingProxyType({})
    )

    def handler_for(self, request_type: RequestType) -> Optional[HandlerClass]:
        return self.request_handlers.get(request_type)

    def handlers_for(self, notification_type: NotificationType) -> tuple[HandlerClass, ...]:
        return self.notification_handlers.get(notification_type, ())


def build_registry(classes: Iterable[type]) -> HandlerRegistry:
    """클래스들의 연관 정보를 읽어 :class:`HandlerRegistry` 를 만듭니다.

    - 요청 핸들러는 요청 타입당 하나이며, 같은 타입이 다시 나오면 나중 것이 덮어씁니다.
    - 알림 핸들러는 등록 순서대로 리스트에 추가되며 이 순서가 곧 호출 순서입니다.
    - 연관 정보가 없는 클래스는 무시합니다.
    """
    request_handlers: dict[RequestType, HandlerClass] = {}
    notification_handlers = defaultdict[NotificationType, list[HandlerClass]](list)

    for cls in classes:
        request_type = get_request_type(cls)
        if request_type:
            previous = request_handlers.get(request_type)
            if previous and previous is not cls:
                logger.warning(
                    "handler for %s is overwritten: %s -> %s",
                    request_type.__name__,
                    previous.__name__,
                    cls.__name__,
                )
            request_handlers[request_type] = cls

        notification_type = get_notification_type(cls)
        if notification_type:
            notification_handlers[notification_type].append(cls)

    return HandlerRegistry(
        MappingProxyType(request_handlers),
        MappingProxyType({k: tuple(v) for k, v in notification_handlers.items()}),
    )


@dataclass(frozen=True)
class MediatorProviders:
    """:func:`provide_mediator` 의 결과.

    ``providers`` 는 입력 클래스 리스트 앞에 :class:`~fastmediator.mediator.Mediator`
    를 붙인 것으로, 외부 DI 컨테이너에 그대로 등록할 수 있습니다.
    """

    registry: HandlerRegistry
    providers: list[type]

    @property
    def request_handlers(self) -> RequestHandlerMap:
        return self.registry.request_handlers

    @property
    def notification_handlers(self) -> NotificationHandlerMap:
        return self.registry.notification_handlers

    def create_mediator(
        self,
        resolver: Optional[Resolver] = None,
        behaviors: Sequence[PipelineBehavior] = (),
    ) -> Mediator:
        """컴포지션 루트마다 하나의 :class:`Mediator` 를 만듭니다.

        ``resolver`` 가 없으면 ``providers`` 로 :class:`~fastmediator.container.Container`
        를 만들어 사용합니다.
        """
        from fastmediator.container import Container
        from fastmediator.mediator import Mediator

        if resolver is None:
            resolver = Container(self.providers)

        mediator = Mediator(self.registry, resolver, behaviors)
        if isinstance(resolver, Container):
            # 핸들러가 `mediator` 라는 이름의 파라메터로 미디에이터를 받을 수 있습니다.
            resolver.register_instance(Mediator, mediator)
            resolver.dependencies.setdefault("mediator", mediator)
        return mediator


def provide_mediator(classes: Sequence[type]) -> MediatorProviders:
    """핸들러(및 관계없는 클래스) 리스트로 레지스트리와 프로바이더 목록을 만듭니다."""
    from fastmediator.mediator import Mediator

    return MediatorProviders(build_registry(classes), [Mediator, *classes])
