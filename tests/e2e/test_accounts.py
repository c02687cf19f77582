"""테스트 앱 전체를 컴포지션 루트에서 조립해서 실행하는 시나리오 테스트."""
import pytest

from fastmediator import HandlerNotFound, Mediator
from fastmediator.test.unit import RecordingBehavior
from tests.app.adapters import AccountStore, Outbox
from tests.app.domain.notifications import AccountClosed, AccountOpened
from tests.app.domain.requests import (
    CountTo,
    GetGreeting,
    GetGreetingLater,
    OpenAccount,
    Unhandled,
)
from tests.app.handlers.accounts import AccountFormatter


def test_send_simple(mediator: Mediator):
    assert mediator.send_simple(GetGreeting("kim")) == "Hello, kim!"


@pytest.mark.asyncio
async def test_send_async(mediator: Mediator):
    assert await mediator.send_async(GetGreeting("kim")) == "Hello, kim!"
    assert await mediator.send_async(GetGreetingLater("lee")) == "Hello later, lee!"


@pytest.mark.asyncio
async def test_send_stream(mediator: Mediator):
    assert [i async for i in mediator.send(CountTo(3))] == [1, 2, 3]


def test_unhandled(mediator: Mediator):
    with pytest.raises(HandlerNotFound, match="Unhandled"):
        mediator.send_simple(Unhandled())


def test_open_account_publishes_notification(
    mediator: Mediator, store: AccountStore, outbox: Outbox
):
    account_id = mediator.send_simple(OpenAccount("kim@example.com"))

    assert store.accounts == {account_id: "kim@example.com"}
    # 등록 순서: SendWelcomeMail -> NotifyAdmin
    assert outbox.sent == [
        ("kim@example.com", f"Welcome! ({account_id})"),
        ("admin", f"New account {account_id}"),
    ]


def test_publish(mediator: Mediator, outbox: Outbox):
    mediator.publish(AccountClosed("acc-9"))
    assert outbox.sent == [("owner", "Goodbye (acc-9)")]


def test_handlers_are_singletons(providers, container):
    mediator = providers.create_mediator(container)

    mediator.send_simple(OpenAccount("a"))
    mediator.send_simple(OpenAccount("b"))

    assert container.get(Mediator) is mediator
    assert AccountFormatter not in container


def test_composition_with_behaviors(providers, container, outbox: Outbox):
    log = list[str]()
    mediator = providers.create_mediator(
        container, behaviors=[RecordingBehavior("outer", log)]
    )

    mediator.send_simple(OpenAccount("kim"))
    mediator.publish(AccountOpened("acc-x", "lee"))

    # 알림 발행은 behavior 를 거치지 않습니다.
    assert log == ["outer start", "outer end"]
    assert len(outbox.sent) == 4


def test_default_resolver(providers):
    mediator = providers.create_mediator()
    assert mediator.send_simple(GetGreeting("park")) == "Hello, park!"
