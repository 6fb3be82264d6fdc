"""디코딩된 Webhook 응답 모델과 장식(decoration) 인터페이스."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Dict, Mapping, Optional

from pydantic import BaseModel, ConfigDict, PrivateAttr

if TYPE_CHECKING:  # pragma: no cover
    from ..clients.robot import DingBotClient


class ClientAware(ABC):
    """응답을 만든 클라이언트 참조를 받을 수 있는 타입."""

    @abstractmethod
    def attach_client(self, client: "DingBotClient") -> None:
        ...


class HeaderAware(ABC):
    """HTTP 응답 헤더를 받을 수 있는 타입."""

    @abstractmethod
    def parse_headers(self, headers: Mapping[str, str]) -> None:
        ...


class RobotResponse(BaseModel, ClientAware, HeaderAware):
    """로봇 Webhook 의 ``errcode``/``errmsg`` 응답.

    ``errcode`` 가 0 이 아니어도 예외를 던지지 않는다. 애플리케이션 수준 오류
    판단은 호출자의 몫이며 :attr:`ok` 로 확인할 수 있다.
    """

    model_config = ConfigDict(extra="allow")

    errcode: int = 0
    errmsg: str = ""

    _client: Any = PrivateAttr(default=None)
    _headers: Dict[str, str] = PrivateAttr(default_factory=dict)

    @property
    def ok(self) -> bool:
        return self.errcode == 0

    @property
    def client(self) -> Optional["DingBotClient"]:
        return self._client

    @property
    def headers(self) -> Dict[str, str]:
        return dict(self._headers)

    def attach_client(self, client: "DingBotClient") -> None:
        self._client = client

    def parse_headers(self, headers: Mapping[str, str]) -> None:
        self._headers = {key.lower(): value for key, value in headers.items()}


def decorate(result: Any, client: "DingBotClient", headers: Mapping[str, str]) -> Any:
    """결과 타입이 지원하는 인터페이스에 한해 클라이언트와 헤더를 주입한다."""

    if isinstance(result, ClientAware):
        result.attach_client(client)
    if isinstance(result, HeaderAware):
        result.parse_headers(headers)
    return result


__all__ = ["ClientAware", "HeaderAware", "RobotResponse", "decorate"]
