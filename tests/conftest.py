# pylint: disable=redefined-outer-name
"""pytest 에서 사용될 전역 Fixture들을 정의합니다."""
from __future__ import annotations

from typing import Generator

import pytest

from fastmediator import Container, Mediator, MediatorProviders, provide_mediator
from fastmediator import metadata as mediator_metadata
from tests.app.adapters import AccountStore, Outbox
from tests.app.handlers import accounts, greeting

APP_HANDLERS = [
    greeting.GetGreetingHandler,
    greeting.GetGreetingLaterHandler,
    greeting.CountToHandler,
    accounts.OpenAccountHandler,
    accounts.SendWelcomeMail,
    accounts.NotifyAdmin,
    accounts.SendGoodbyeMail,
    accounts.AccountFormatter,
]
"""테스트 앱의 컴포지션 루트에 등록되는 클래스 목록."""


@pytest.fixture
def clean_metadata() -> Generator[None, None, None]:
    """테스트 동안 연관 정보 테이블을 비우고, 끝나면 원래대로 되돌립니다."""
    saved = (
        dict(mediator_metadata.REQUEST_METADATA),
        dict(mediator_metadata.NOTIFICATION_METADATA),
    )
    mediator_metadata.clear_metadata()

    yield

    mediator_metadata.clear_metadata()
    mediator_metadata.REQUEST_METADATA.update(saved[0])
    mediator_metadata.NOTIFICATION_METADATA.update(saved[1])


@pytest.fixture
def outbox() -> Outbox:
    return Outbox()


@pytest.fixture
def store() -> AccountStore:
    return AccountStore()


@pytest.fixture
def providers() -> MediatorProviders:
    return provide_mediator(APP_HANDLERS)


@pytest.fixture
def container(store: AccountStore, outbox: Outbox) -> Container:
    return Container(dependencies={"store": store, "outbox": outbox})


@pytest.fixture
def mediator(providers: MediatorProviders, container: Container) -> Mediator:
    return providers.create_mediator(container)
