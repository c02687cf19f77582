from __future__ import annotations

from typing import (
    Any,
    Awaitable,
    AsyncIterable,
    Callable,
    Generic,
    Mapping,
    Protocol,
    Type,
    TypeVar,
    Union,
)

R = TypeVar("R")
T = TypeVar("T")


class Request(Generic[R]):
    """Request 객체.

    응답 타입 ``R`` 을 갖는 메세지이며, 정확히 하나의 핸들러에게 전달됩니다.
    디스패치 키는 객체의 런타임 타입(``type(request)``) 뿐이므로 미디에이터는
    필드 내용을 보지 않습니다.

    Example: ::

        @dataclass
        class GetUser(Request[User]):
            user_id: int
    """


class Notification:
    """Notification 객체.

    0 개 이상의 핸들러에게 순서대로 전달되는 메세지입니다. 각 핸들러는
    부수 효과를 위해 호출되며 응답은 없습니다.
    """


Message = Union[Request, Notification]

RequestType = Type[Request]
NotificationType = Type[Notification]

Next = Callable[[], Any]
"""파이프라인에서 "나머지 체인"을 나타내는 인자 없는 continuation."""


class RequestHandler(Protocol[T]):
    def handle(self, request: T) -> Union[Any, Awaitable[Any], AsyncIterable[Any]]:
        ...


class NotificationHandler(Protocol[T]):
    def handle(self, notification: T) -> None:
        ...


class PipelineBehavior(Protocol):
    """요청 디스패치를 감싸는 미들웨어.

    ``next()`` 를 호출하지 않으면 뒤쪽 behavior 와 핸들러는 실행되지 않습니다.
    """

    def handle(self, request: Any, next: Next) -> Any:
        ...


class Resolver(Protocol):
    """핸들러 클래스를 받아 사용 가능한 인스턴스를 돌려주는 협력 객체."""

    def get(self, cls: Type[T]) -> T:
        ...


HandlerClass = Type[Any]
RequestHandlerMap = Mapping[RequestType, HandlerClass]
NotificationHandlerMap = Mapping[NotificationType, tuple[HandlerClass, ...]]
