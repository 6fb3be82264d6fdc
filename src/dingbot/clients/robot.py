"""그룹 채팅 로봇 Webhook 클라이언트."""

from __future__ import annotations

import logging
from typing import Any, Optional, Sequence, Tuple, Type

import httpx
from pydantic import BaseModel, ValidationError

from ..config.settings import DingBotSettings, merge_options
from ..data import MarkdownMessage, Message, TextMessage, decorate
from .errors import MissingCredentialsError, ParsingError, error_for_response

logger = logging.getLogger(__name__)


class DingBotClient:
    """로봇 Webhook 으로 메시지를 전송하는 동기 클라이언트.

    설정은 생성 시점에 한 번만 병합되어 인스턴스 속성(``endpoint``,
    ``access_token``, ``verify_tls``)으로 적용된다. 각 전송은 재시도 없는
    단일 POST 요청이다.
    """

    def __init__(
        self,
        settings: Optional[DingBotSettings] = None,
        *,
        client: Optional[httpx.Client] = None,
        response_model: Optional[Type[BaseModel]] = None,
        **options: Any,
    ) -> None:
        self.endpoint: Optional[str] = None
        self.access_token: Optional[str] = None
        self.verify_tls: bool = True
        self._settings = merge_options(options, settings=settings)
        self._settings.apply(self)
        self._client = client or httpx.Client(verify=self.verify_tls)
        self._owns_client = client is None
        self._response_model = response_model

    def __enter__(self) -> "DingBotClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    @property
    def settings(self) -> DingBotSettings:
        return self._settings

    def close(self) -> None:
        """내부 HTTP 클라이언트를 종료한다."""

        if self._owns_client:
            self._client.close()

    def send(self, message: Message) -> Any:
        """메시지를 직렬화해 Webhook 으로 전송하고 디코딩된 응답을 반환한다.

        매핑된 HTTP 상태 코드는 대응하는 :class:`ResponseError` 하위 타입으로,
        JSON 으로 해석할 수 없는 본문은 :class:`ParsingError` 로 보고한다.
        """

        endpoint, access_token = self._require_credentials()
        logger.debug("로봇 메시지 전송: msgtype=%s", message.msgtype)
        url = httpx.URL(endpoint).copy_merge_params({"access_token": access_token})
        response = self._client.post(
            url,
            content=message.to_json().encode("utf-8"),
            headers={
                "Accept": "application/json",
                "Content-Type": "application/json",
            },
        )
        return self._validate(response)

    def send_text(self, content: str) -> Any:
        """텍스트 메시지를 전송한다."""

        return self.send(TextMessage(content))

    def send_markdown(self, title: str, text: str, at_mobiles: Sequence[str] = ()) -> Any:
        """마크다운 메시지를 전송하고 ``at_mobiles`` 번호를 멘션한다."""

        return self.send(MarkdownMessage(title, text, at_mobiles))

    @staticmethod
    def parse(response: httpx.Response) -> Any:
        """응답 본문을 JSON 으로 디코딩한다."""

        try:
            return response.json()
        except ValueError as exc:
            raise ParsingError("응답 본문이 올바른 JSON 이 아닙니다.") from exc

    def _validate(self, response: httpx.Response) -> Any:
        logger.debug("로봇 응답 수신: status=%s", response.status_code)
        error = error_for_response(response)
        if error is not None:
            logger.warning("로봇 Webhook 오류 응답: %s", error)
            raise error
        payload = self.parse(response)
        result = self._build_result(payload)
        return decorate(result, self, response.headers)

    def _build_result(self, payload: Any) -> Any:
        if self._response_model is None:
            return payload
        try:
            return self._response_model.model_validate(payload)
        except ValidationError as exc:
            raise ParsingError("응답 본문을 해석할 수 없습니다.") from exc

    def _require_credentials(self) -> Tuple[str, str]:
        missing = [name for name in ("endpoint", "access_token") if not getattr(self, name)]
        if missing:
            raise MissingCredentialsError(missing)
        return self.endpoint, self.access_token  # type: ignore[return-value]


__all__ = ["DingBotClient"]
