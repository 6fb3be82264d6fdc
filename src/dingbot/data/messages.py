"""로봇 Webhook 으로 전송하는 메시지 모델."""

from __future__ import annotations

import json
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, Tuple


class Message(ABC):
    """``msgtype`` 판별자와 타입별 payload 로 직렬화되는 메시지."""

    __slots__ = ()

    msgtype: str

    @abstractmethod
    def serialize(self) -> Dict[str, Any]:
        """Webhook 이 기대하는 JSON 객체를 만든다."""

    def to_json(self) -> str:
        return json.dumps(self.serialize(), ensure_ascii=False, separators=(",", ":"))


@dataclass(frozen=True, slots=True)
class TextMessage(Message):
    """일반 텍스트 메시지."""

    content: str

    msgtype = "text"

    def serialize(self) -> Dict[str, Any]:
        return {"msgtype": self.msgtype, "text": {"content": self.content}}


@dataclass(frozen=True, slots=True)
class MarkdownMessage(Message):
    """제목, 본문과 멘션할 휴대폰 번호 목록을 갖는 마크다운 메시지."""

    title: str
    text: str
    at_mobiles: Tuple[str, ...] = ()

    msgtype = "markdown"

    def __post_init__(self) -> None:
        # 번호 하나를 문자열로 넘기면 한 글자씩 쪼개지지 않도록 감싼다.
        mobiles = (self.at_mobiles,) if isinstance(self.at_mobiles, str) else tuple(self.at_mobiles)
        object.__setattr__(self, "at_mobiles", mobiles)

    def serialize(self) -> Dict[str, Any]:
        return {
            "msgtype": self.msgtype,
            "markdown": {"title": self.title, "text": self.text},
            "at": {"atMobiles": list(self.at_mobiles)},
        }


__all__ = ["MarkdownMessage", "Message", "TextMessage"]
