"""핸들러 결과를 하나의 모양으로 다루기 위한 지연(lazy) 값 시퀀스.

핸들러는 동기 값, awaitable(코루틴, Future), 비동기 이터러블 중 어느 것이든
돌려줄 수 있습니다. 디스패처는 이 결과를 모두 :class:`Stream` 으로 정규화한 뒤
호출자에게 넘깁니다.

:class:`Stream` 은 구독(``async for``)되기 전에는 아무 일도 하지 않습니다.
"""
from __future__ import annotations

import asyncio
import inspect
from collections.abc import AsyncIterable
from typing import (
    Any,
    AsyncIterator,
    Awaitable,
    Callable,
    Generator,
    Generic,
    Optional,
    TypeVar,
)

from fastmediator.core import EmptyStreamError

T = TypeVar("T")
U = TypeVar("U")


class Stream(Generic[T]):
    """0 개 이상의 값을 비동기로 흘려보내는 시퀀스.

    ``subscribe`` 는 호출될 때마다 새 비동기 이터레이터를 만들어야 합니다.
    """

    def __init__(self, subscribe: Callable[[], AsyncIterator[T]]):
        self._subscribe = subscribe

    def __aiter__(self) -> AsyncIterator[T]:
        return self._subscribe()

    def __await__(self) -> Generator[Any, None, T]:
        return self.first().__await__()

    def __repr__(self):
        return f"<Stream {self._subscribe!r}>"

    @classmethod
    def of(cls, *values: T) -> Stream[T]:
        """주어진 값을 순서대로 내보내는 스트림."""

        async def _values():
            for value in values:
                yield value

        return cls(_values)

    @classmethod
    def from_awaitable(cls, aw: Awaitable[T]) -> Stream[T]:
        """awaitable 의 결과 하나를 내보내는 스트림.

        awaitable 은 첫 구독 때 한 번만 스케줄되고, 이후 구독자들은 같은 결과
        (또는 같은 예외)를 받습니다.
        """
        future: Optional[asyncio.Future] = None

        async def _resolved():
            nonlocal future
            if future is None:
                future = asyncio.ensure_future(aw)
            yield await future

        return cls(_resolved)

    @classmethod
    def from_async_iterable(cls, iterable: AsyncIterable) -> Stream:
        """비동기 이터러블을 감싼 스트림.

        비동기 제너레이터처럼 한 번만 순회 가능한 소스라면 두 번째 구독부터는
        값이 없습니다.
        """

        async def _iterate():
            async for value in iterable:
                yield value

        return cls(_iterate)

    @classmethod
    def error(cls, exc: BaseException) -> Stream:
        """구독하는 순간 ``exc`` 를 발생시키는 스트림."""

        async def _raise():
            raise exc
            yield  # pragma: no cover

        return cls(_raise)

    @classmethod
    def from_result(cls, result: Any) -> Stream:
        """핸들러 결과를 :class:`Stream` 으로 정규화 합니다.

        - :class:`Stream` 은 그대로 돌려줍니다.
        - 비동기 이터러블은 :meth:`from_async_iterable`
        - awaitable 은 :meth:`from_awaitable`
        - 그 외(리스트, 제너레이터 같은 동기 이터러블 포함)는 :meth:`of`
        """
        if isinstance(result, Stream):
            return result
        if isinstance(result, AsyncIterable):
            return cls.from_async_iterable(result)
        if inspect.isawaitable(result):
            return cls.from_awaitable(result)
        return cls.of(result)

    def map(self, func: Callable[[T], U]) -> Stream[U]:
        async def _mapped():
            async for value in self:
                yield func(value)

        return Stream(_mapped)

    def tap(self, func: Callable[[T], Any]) -> Stream[T]:
        """값을 바꾸지 않고 ``func`` 로 들여다봅니다."""

        async def _tapped():
            async for value in self:
                func(value)
                yield value

        return Stream(_tapped)

    async def first(self) -> T:
        """첫 번째 값을 기다렸다가 돌려주고 구독을 끝냅니다."""
        iterator = self.__aiter__()
        try:
            return await iterator.__anext__()
        except StopAsyncIteration:
            raise EmptyStreamError() from None
        finally:
            aclose = getattr(iterator, "aclose", None)
            if aclose:
                await aclose()

    async def to_list(self) -> list[T]:
        return [value async for value in self]


def is_async_result(value: Any) -> bool:
    """동기적으로 바로 쓸 수 없는 결과인지 확인합니다."""
    return (
        isinstance(value, (Stream, AsyncIterable)) or inspect.isawaitable(value)
    )
