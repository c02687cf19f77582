"""요청 디스패처와 알림 발행자.

주의:

    미디에이터는 한 번에 하나의 호출 트리만 실행하며 동시성을 제공하지 않습니다.
    핸들러나 behavior 에서 발생한 예외는 감싸거나 재시도하지 않고 호출자에게
    그대로 전달됩니다. 복구가 필요하다면 pipeline behavior 로 구현하세요
    (:mod:`fastmediator.behaviors` 참고).
"""
from __future__ import annotations

import asyncio
import inspect
from typing import Any, Sequence, TypeVar

from fastmediator.core import (
    HandlerNotFound,
    Notification,
    PipelineBehavior,
    Request,
    Resolver,
    SynchronousContractViolation,
    get_logger,
)
from fastmediator.pipeline import compose
from fastmediator.registry import HandlerRegistry
from fastmediator.stream import Stream, is_async_result

R = TypeVar("R")

logger = get_logger("fastmediator.mediator")


class Mediator:
    """요청을 핸들러에게, 알림을 핸들러들에게 전달합니다.

    Params:
        - registry: 컴포지션 시점에 만들어진 핸들러 레지스트리
        - resolver: 핸들러 클래스 -> 인스턴스 해석기
        - behaviors: 요청 디스패치를 감쌀 pipeline behavior 들 (등록 순서가 바깥쪽부터)
    """

    def __init__(
        self,
        registry: HandlerRegistry,
        resolver: Resolver,
        behaviors: Sequence[PipelineBehavior] = (),
    ):
        self.registry = registry
        self.resolver = resolver
        self._behaviors = tuple(behaviors)
        self._background_tasks = set[asyncio.Task]()

    @property
    def behaviors(self) -> tuple[PipelineBehavior, ...]:
        return self._behaviors

    def send(self, request: Request[R]) -> Stream[R]:
        """요청을 처리하고 결과를 :class:`Stream` 으로 리턴합니다.

        핸들러 결과가 동기 값, awaitable, 비동기 이터러블 중 무엇이든
        behavior 체인에 들어가기 전에 :class:`Stream` 으로 정규화 됩니다.
        """
        handler = self.get_handler(request)
        logger.debug("send request: %r, handler: %r", request, handler)

        def _handle():
            return Stream.from_result(handler.handle(request))

        return Stream.from_result(compose(self._behaviors, request, _handle)())

    async def send_async(self, request: Request[R]) -> R:
        """요청을 처리하고 첫 번째 결과 값을 기다려 리턴합니다."""
        return await self.send(request).first()

    def send_simple(self, request: Request[R]) -> R:
        """동기 핸들러 전용 디스패치.

        behavior 체인의 결과가 awaitable 이나 스트림이면
        :class:`~fastmediator.core.SynchronousContractViolation` 을 발생시킵니다.
        """
        handler = self.get_handler(request)
        logger.debug("send_simple request: %r, handler: %r", request, handler)

        result = compose(self._behaviors, request, lambda: handler.handle(request))()

        if is_async_result(result):
            if inspect.iscoroutine(result):
                result.close()  # 실행되지 않은 코루틴 경고 방지
            raise SynchronousContractViolation()

        return result

    def publish(self, notification: Notification):
        """알림을 등록된 모든 핸들러에게 등록 순서대로 전달합니다.

        핸들러가 예외를 발생시키면 나머지 핸들러는 실행되지 않습니다.
        비동기 핸들러가 돌려준 코루틴은 기다리지 않고 실행 중인 이벤트 루프에
        태스크로 넘깁니다. 태스크에서 발생한 예외는 에러 로그로 남깁니다.
        """
        for handler in self._notification_handlers(notification):
            result = handler.handle(notification)
            if inspect.iscoroutine(result):
                self._fire_and_forget(result, handler)

    async def publish_async(self, notification: Notification):
        """:meth:`publish` 와 같지만 각 핸들러의 결과를 기다린 후 다음 핸들러를 호출합니다."""
        for handler in self._notification_handlers(notification):
            result = handler.handle(notification)
            if inspect.isawaitable(result):
                await result

    def get_handler(self, request: Request) -> Any:
        """요청의 런타임 타입에 등록된 핸들러 인스턴스를 리턴합니다."""
        request_type = type(request)
        handler_class = self.registry.handler_for(request_type)

        if handler_class is None:
            raise HandlerNotFound(request_type)

        return self.resolver.get(handler_class)

    def _notification_handlers(self, notification: Notification):
        handler_classes = self.registry.handlers_for(type(notification))
        logger.debug(
            "publish notification: %r, handlers: %r", notification, handler_classes
        )
        for handler_class in handler_classes:
            yield self.resolver.get(handler_class)

    def _fire_and_forget(self, coro, handler: Any):
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            logger.warning(
                "no running event loop, coroutine from %r is dropped", handler
            )
            coro.close()
            return

        def _done(task: asyncio.Task):
            self._background_tasks.discard(task)
            if not task.cancelled() and task.exception() is not None:
                logger.error(
                    "Exception handling notification in %r",
                    handler,
                    exc_info=task.exception(),
                )

        task = loop.create_task(coro)
        self._background_tasks.add(task)
        task.add_done_callback(_done)
