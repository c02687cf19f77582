from ._logging import get_logger, set_log_level  # noqa
from .errors import (  # noqa
    EmptyStreamError,
    HandlerNotFound,
    MediatorError,
    ResolutionError,
    SynchronousContractViolation,
)
from .models import (  # noqa
    HandlerClass,
    Message,
    Next,
    Notification,
    NotificationHandler,
    NotificationHandlerMap,
    NotificationType,
    PipelineBehavior,
    Request,
    RequestHandler,
    RequestHandlerMap,
    RequestType,
    Resolver,
)
