"""그룹 채팅 로봇 Webhook 클라이언트 패키지."""

from typing import Any

from .clients.errors import (  # noqa: F401
    STATUS_ERRORS,
    BadGateway,
    BadRequest,
    Conflict,
    DingBotError,
    Forbidden,
    InternalServerError,
    MethodNotAllowed,
    MissingCredentialsError,
    NotFound,
    ParsingError,
    ResponseError,
    ServiceUnavailable,
    Unauthorized,
    Unprocessable,
)
from .clients.robot import DingBotClient  # noqa: F401
from .config.settings import (  # noqa: F401
    DEFAULT_ENDPOINT,
    DingBotSettings,
    configure,
    default_options,
    get_settings,
    reset,
)
from .data import (  # noqa: F401
    ClientAware,
    HeaderAware,
    MarkdownMessage,
    Message,
    RobotResponse,
    TextMessage,
)


def client(**options: Any) -> DingBotClient:
    """전역 기본값 위에 ``options`` 를 덮어쓴 새 클라이언트를 만든다."""

    return DingBotClient(**options)


__all__ = [
    "BadGateway",
    "BadRequest",
    "ClientAware",
    "Conflict",
    "DEFAULT_ENDPOINT",
    "DingBotClient",
    "DingBotError",
    "DingBotSettings",
    "Forbidden",
    "HeaderAware",
    "InternalServerError",
    "MarkdownMessage",
    "Message",
    "MethodNotAllowed",
    "MissingCredentialsError",
    "NotFound",
    "ParsingError",
    "ResponseError",
    "RobotResponse",
    "STATUS_ERRORS",
    "ServiceUnavailable",
    "TextMessage",
    "Unauthorized",
    "Unprocessable",
    "client",
    "configure",
    "default_options",
    "get_settings",
    "reset",
]
