"""레지스트리 생성과 컴포지션 진입점 테스트."""
import logging

import pytest

from fastmediator import Mediator, Notification, Request, provide_mediator
from fastmediator.metadata import notification_handler, request_handler
from fastmediator.registry import HandlerRegistry, build_registry


class TestRequest(Request[str]):
    __test__ = False


class AnotherTestRequest(Request[int]):
    ...


class TestNotification(Notification):
    __test__ = False


class AnotherTestNotification(Notification):
    ...


@request_handler(TestRequest)
class TestRequestHandler:
    __test__ = False

    def handle(self, request: TestRequest) -> str:
        return "handled"


@request_handler(AnotherTestRequest)
class AnotherTestRequestHandler:
    def handle(self, request: AnotherTestRequest) -> int:
        return 123


@request_handler(TestRequest)
class OverridingTestRequestHandler:
    def handle(self, request: TestRequest) -> str:
        return "overridden"


@notification_handler(TestNotification)
class TestNotificationHandler:
    __test__ = False

    def handle(self, notification: TestNotification):
        ...


@notification_handler(TestNotification)
class AnotherTestNotificationHandler:
    def handle(self, notification: TestNotification):
        ...


@notification_handler(AnotherTestNotification)
class YetAnotherNotificationHandler:
    def handle(self, notification: AnotherTestNotification):
        ...


class NonHandlerClass:
    ...


class TestProvideMediator:
    def test_empty_list(self):
        providers = provide_mediator([])

        assert providers.providers == [Mediator]
        assert len(providers.request_handlers) == 0
        assert len(providers.notification_handlers) == 0

    def test_empty_registry_still_works(self):
        registry = build_registry([])

        assert registry.handler_for(TestRequest) is None
        assert registry.handlers_for(TestNotification) == ()

    def test_single_request_handler(self):
        providers = provide_mediator([TestRequestHandler])

        assert len(providers.request_handlers) == 1
        assert providers.request_handlers[TestRequest] is TestRequestHandler
        assert TestRequestHandler in providers.providers

    def test_single_notification_handler(self):
        providers = provide_mediator([TestNotificationHandler])

        assert len(providers.notification_handlers) == 1
        assert providers.notification_handlers[TestNotification] == (
            TestNotificationHandler,
        )
        assert TestNotificationHandler in providers.providers

    def test_multiple_handlers_for_same_notification(self):
        providers = provide_mediator(
            [TestNotificationHandler, AnotherTestNotificationHandler]
        )

        assert len(providers.notification_handlers) == 1
        assert providers.notification_handlers[TestNotification] == (
            TestNotificationHandler,
            AnotherTestNotificationHandler,
        )

    def test_mix_of_handlers(self):
        handlers = [
            TestRequestHandler,
            AnotherTestRequestHandler,
            TestNotificationHandler,
            AnotherTestNotificationHandler,
            YetAnotherNotificationHandler,
            NonHandlerClass,
        ]
        providers = provide_mediator(handlers)

        assert providers.providers == [Mediator, *handlers]

        assert dict(providers.request_handlers) == {
            TestRequest: TestRequestHandler,
            AnotherTestRequest: AnotherTestRequestHandler,
        }
        assert dict(providers.notification_handlers) == {
            TestNotification: (TestNotificationHandler, AnotherTestNotificationHandler),
            AnotherTestNotification: (YetAnotherNotificationHandler,),
        }

    def test_input_list_is_not_modified(self):
        handlers = [TestRequestHandler, NonHandlerClass]
        provide_mediator(handlers)
        assert handlers == [TestRequestHandler, NonHandlerClass]


class TestBuildRegistry:
    def test_duplicate_request_handler_last_wins(self, caplog):
        with caplog.at_level(logging.WARNING, logger="fastmediator.registry"):
            registry = build_registry(
                [TestRequestHandler, OverridingTestRequestHandler]
            )

        assert registry.handler_for(TestRequest) is OverridingTestRequestHandler
        assert "overwritten" in caplog.text

    def test_notification_order_follows_registration_order(self):
        registry = build_registry(
            [AnotherTestNotificationHandler, TestNotificationHandler]
        )
        assert registry.handlers_for(TestNotification) == (
            AnotherTestNotificationHandler,
            TestNotificationHandler,
        )

    def test_registry_is_read_only(self):
        registry = build_registry([TestRequestHandler, TestNotificationHandler])

        with pytest.raises(TypeError):
            registry.request_handlers[AnotherTestRequest] = AnotherTestRequestHandler  # type: ignore
        with pytest.raises(TypeError):
            registry.notification_handlers[TestNotification] = ()  # type: ignore
        with pytest.raises(AttributeError):
            registry.handlers_for(TestNotification).append(NonHandlerClass)  # type: ignore

    def test_round_trip(self):
        classes = [
            TestRequestHandler,
            AnotherTestRequestHandler,
            TestNotificationHandler,
            AnotherTestNotificationHandler,
            YetAnotherNotificationHandler,
        ]
        registry = build_registry(classes)

        assert registry.handler_for(TestRequest) is TestRequestHandler
        assert registry.handler_for(AnotherTestRequest) is AnotherTestRequestHandler
        assert registry.handlers_for(TestNotification) == (
            TestNotificationHandler,
            AnotherTestNotificationHandler,
        )
        assert registry.handlers_for(AnotherTestNotification) == (
            YetAnotherNotificationHandler,
        )

    def test_default_registry_is_empty(self):
        registry = HandlerRegistry()
        assert registry.handler_for(TestRequest) is None
        assert registry.handlers_for(TestNotification) == ()
