"""애플리케이션이 선택적으로 등록할 수 있는 기본 pipeline behavior 들."""
from __future__ import annotations

import asyncio
import logging
from typing import Any, Optional, Sequence, Type

from tenacity import (
    AsyncRetrying,
    RetryCallState,
    Retrying,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)
from tenacity.wait import wait_base

from fastmediator.config import MediatorSetupConfig
from fastmediator.core import Next, get_logger
from fastmediator.stream import Stream

logger = get_logger("fastmediator.behaviors")


class LoggingBehavior:
    """요청 처리 전후와 실패를 로그로 남깁니다. 예외는 그대로 다시 발생시킵니다."""

    def __init__(self, logger: Optional[logging.Logger] = None, level=logging.DEBUG):
        self.logger = logger or get_logger("fastmediator.behaviors.logging")
        self.level = level

    def handle(self, request: Any, next: Next) -> Any:
        name = type(request).__name__
        self.logger.log(self.level, "handling %s: %r", name, request)
        try:
            result = next()
        except Exception:
            self.logger.exception("Exception handling request %s", name)
            raise
        self.logger.log(self.level, "handled %s", name)
        return result


class RetryBehavior:
    """``next()`` 호출이 실패하면 재시도 합니다.

    마지막 시도의 예외는 감싸지 않고 그대로 발생시킵니다.

    실행 중인 이벤트 루프가 없으면 :class:`tenacity.Retrying` 으로 그 자리에서
    재시도합니다. 이벤트 루프 안에서는 루프를 막지 않도록
    :class:`tenacity.AsyncRetrying` 으로 재시도하는 :class:`Stream` 을 리턴하므로
    ``send`` / ``send_async`` 와 함께 사용해야 합니다. 이 경우 스트림 구독 중에
    발생한 예외도 재시도 대상이며, 성공한 시도의 값들을 모아서 내보냅니다.
    """

    def __init__(
        self,
        attempts: int = 3,
        wait: Optional[wait_base] = None,
        retry_on: Sequence[Type[BaseException]] = (Exception,),
    ):
        self.attempts = attempts
        self.wait = wait if wait is not None else wait_exponential()
        self.retry_on = tuple(retry_on)

    @classmethod
    def from_config(cls, config: MediatorSetupConfig, **kwargs) -> RetryBehavior:
        """``setup.cfg`` 의 ``retry_attempts`` 를 시도 횟수로 사용합니다."""
        return cls(attempts=config.retry_attempts, **kwargs)

    def handle(self, request: Any, next: Next) -> Any:
        try:
            asyncio.get_running_loop()
        except RuntimeError:
            return Retrying(**self._retry_options(request))(next)

        return Stream(lambda: self._retry_async(request, next))

    async def _retry_async(self, request: Any, next: Next):
        values: list[Any] = []
        async for attempt in AsyncRetrying(**self._retry_options(request)):
            with attempt:
                values = await Stream.from_result(next()).to_list()
        for value in values:
            yield value

    def _retry_options(self, request: Any) -> dict[str, Any]:
        return dict(
            stop=stop_after_attempt(self.attempts),
            wait=self.wait,
            retry=retry_if_exception_type(self.retry_on),
            before_sleep=self._before_sleep(request),
            reraise=True,
        )

    @staticmethod
    def _before_sleep(request: Any):
        def _log(state: RetryCallState):
            logger.warning(
                "retrying %s (attempt %s failed)",
                type(request).__name__,
                state.attempt_number,
            )

        return _log
