"""메시지와 응답 모델 서브패키지."""

from .messages import MarkdownMessage, Message, TextMessage
from .responses import ClientAware, HeaderAware, RobotResponse, decorate

__all__ = [
    "ClientAware",
    "HeaderAware",
    "MarkdownMessage",
    "Message",
    "RobotResponse",
    "TextMessage",
    "decorate",
]
