"""FastMediator - in-process mediator for requests and notifications."""
from fastmediator.container import Container  # noqa
from fastmediator.core import (  # noqa
    EmptyStreamError,
    HandlerNotFound,
    MediatorError,
    Notification,
    NotificationHandler,
    PipelineBehavior,
    Request,
    RequestHandler,
    ResolutionError,
    Resolver,
    SynchronousContractViolation,
)
from fastmediator.mediator import Mediator  # noqa
from fastmediator.metadata import (  # noqa
    associate_notification,
    associate_request,
    notification_handler,
    request_handler,
)
from fastmediator.registry import (  # noqa
    HandlerRegistry,
    MediatorProviders,
    build_registry,
    provide_mediator,
)
from fastmediator.stream import Stream  # noqa
