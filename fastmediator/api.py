"""FastAPI 앱에서 미디에이터를 사용하기 위한 연동 기능.

전역 싱글톤 대신 앱마다 하나의 미디에이터를 ``app.state`` 에 두고, 엔드포인트는
``Depends(get_mediator)`` 로 받아 씁니다. ::

    app = FastAPI()
    install_mediator(app, provide_mediator(handlers).create_mediator())

    @app.get("/users/{user_id}")
    async def read_user(user_id: int, mediator: Mediator = Depends(get_mediator)):
        return await mediator.send_async(GetUser(user_id))
"""
from fastapi import FastAPI, Request

from fastmediator.core import MediatorError
from fastmediator.mediator import Mediator


def install_mediator(app: FastAPI, mediator: Mediator) -> FastAPI:
    """FastAPI 앱에 미디에이터를 설치합니다."""
    app.state.mediator = mediator
    return app


def get_mediator(request: Request) -> Mediator:
    """엔드포인트에서 ``Depends`` 로 사용할 의존성 함수."""
    mediator = getattr(request.app.state, "mediator", None)
    if mediator is None:
        raise MediatorError("mediator is not installed on this app")
    return mediator
