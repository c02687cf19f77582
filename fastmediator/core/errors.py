class MediatorError(Exception):
    """``FastMediator`` 와 관련된 모든 에러의 기본 클래스."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    ...


class HandlerNotFound(MediatorError):
    """요청 타입에 등록된 핸들러가 없을 때 발생하는 에러."""

    def __init__(self, request_type: type):
        super().__init__(f"No handler found for request: {request_type.__name__}")
        self.request_type = request_type


class SynchronousContractViolation(MediatorError):
    """`send_simple` 에서 핸들러 결과가 동기 값이 아닐 때 발생하는 에러."""

    def __init__(self, message="send_simple can only be used with synchronous handlers"):
        super().__init__(message)


class ResolutionError(MediatorError):
    """핸들러 인스턴스를 만들 수 없을 때 발생하는 에러."""

    ...


class EmptyStreamError(MediatorError):
    """값 없이 종료된 :class:`~fastmediator.stream.Stream` 에서 첫 값을 요청한 경우."""

    def __init__(self, message="no elements in stream"):
        super().__init__(message)
