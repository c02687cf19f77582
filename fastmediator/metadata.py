"""핸들러 클래스와 메세지 타입의 연관 정보(metadata)를 관리합니다.

연관 정보는 클래스 정의와 별도로 이 모듈의 테이블에 기록됩니다.
데코레이터는 명시적 등록 함수(:func:`associate_request`,
:func:`associate_notification`)를 호출하는 편의 기능일 뿐입니다. ::

    @request_handler(GetUser)
    class GetUserHandler:
        def handle(self, request: GetUser) -> User:
            ...
"""
from typing import Callable, Optional, Type, TypeVar

from fastmediator.core import NotificationType, RequestType

C = TypeVar("C", bound=type)

REQUEST_METADATA: dict[type, RequestType] = {}
"""핸들러 클래스 -> 요청 타입."""
NOTIFICATION_METADATA: dict[type, NotificationType] = {}
"""핸들러 클래스 -> 알림 타입."""


def associate_request(handler_class: C, request_type: RequestType) -> C:
    """``handler_class`` 가 ``request_type`` 을 처리한다고 기록합니다.

    같은 클래스에 다시 호출하면 마지막 요청 타입이 남습니다.
    """
    REQUEST_METADATA[handler_class] = request_type
    return handler_class


def associate_notification(handler_class: C, notification_type: NotificationType) -> C:
    """``handler_class`` 가 ``notification_type`` 을 처리한다고 기록합니다."""
    NOTIFICATION_METADATA[handler_class] = notification_type
    return handler_class


def request_handler(request_type: RequestType) -> Callable[[C], C]:
    """요청 핸들러 데코레이터.

    클래스를 ``request_type`` 의 핸들러로 표시합니다.
    """

    def _wrapper(cls: C) -> C:
        return associate_request(cls, request_type)

    return _wrapper


def notification_handler(notification_type: NotificationType) -> Callable[[C], C]:
    """알림 핸들러 데코레이터.

    여러 클래스가 같은 알림 타입을 처리할 수 있습니다.
    """

    def _wrapper(cls: C) -> C:
        return associate_notification(cls, notification_type)

    return _wrapper


def _lookup(table: dict[type, Type], cls: type) -> Optional[Type]:
    # 상속받은 핸들러도 부모의 연관 정보를 그대로 사용합니다.
    for klass in getattr(cls, "__mro__", (cls,)):
        if klass in table:
            return table[klass]
    return None


def get_request_type(cls: type) -> Optional[RequestType]:
    return _lookup(REQUEST_METADATA, cls)


def get_notification_type(cls: type) -> Optional[NotificationType]:
    return _lookup(NOTIFICATION_METADATA, cls)


def is_handler_class(cls: type) -> bool:
    """요청이나 알림 연관 정보를 가진 클래스인지 확인합니다."""
    return get_request_type(cls) is not None or get_notification_type(cls) is not None


def clear_metadata():
    """연관 정보 테이블을 초기화 합니다."""
    REQUEST_METADATA.clear()
    NOTIFICATION_METADATA.clear()
