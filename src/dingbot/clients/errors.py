"""로봇 Webhook 호출 오류 정의."""

from __future__ import annotations

import json
from types import MappingProxyType
from typing import Any, Mapping, Optional, Type

import httpx


class DingBotError(RuntimeError):
    """dingbot 오류의 최상위 타입."""


class MissingCredentialsError(DingBotError):
    """엔드포인트나 access_token 없이 전송을 시도할 때 발생."""

    def __init__(self, missing: Optional[list[str]] = None) -> None:
        self.missing = list(missing or [])
        detail = ", ".join(self.missing) or "endpoint, access_token"
        super().__init__(f"로봇 Webhook 호출에 필요한 설정이 없습니다: {detail}")


class ParsingError(DingBotError):
    """응답 본문을 JSON 으로 해석할 수 없을 때 발생."""


class ResponseError(DingBotError):
    """HTTP 상태 코드로 식별되는 오류 응답.

    원본 ``httpx.Response`` 를 그대로 보관하므로 호출자가 상태 코드와 본문을
    직접 확인할 수 있다.
    """

    def __init__(self, response: httpx.Response) -> None:
        self.response = response
        self.status_code = response.status_code
        self.body = _decode_body(response)
        self.error_code, self.error_message = _extract_error(self.body)
        super().__init__(self._build_message())

    def _build_message(self) -> str:
        message = self.error_message or "알 수 없는 오류"
        return (
            f"Server responded with code {self.status_code}, message: {message}. "
            f"Request URI: {_request_uri(self.response)}"
        )


class BadRequest(ResponseError):
    """400"""


class Unauthorized(ResponseError):
    """401"""


class Forbidden(ResponseError):
    """403"""


class NotFound(ResponseError):
    """404"""


class MethodNotAllowed(ResponseError):
    """405"""


class Conflict(ResponseError):
    """409"""


class Unprocessable(ResponseError):
    """422"""


class InternalServerError(ResponseError):
    """500"""


class BadGateway(ResponseError):
    """502"""


class ServiceUnavailable(ResponseError):
    """503"""


STATUS_ERRORS: Mapping[int, Type[ResponseError]] = MappingProxyType(
    {
        400: BadRequest,
        401: Unauthorized,
        403: Forbidden,
        404: NotFound,
        405: MethodNotAllowed,
        409: Conflict,
        422: Unprocessable,
        500: InternalServerError,
        502: BadGateway,
        503: ServiceUnavailable,
    }
)


def error_for_response(response: httpx.Response) -> Optional[ResponseError]:
    """상태 코드에 대응하는 오류 인스턴스를 만든다. 대응 항목이 없으면 ``None``."""

    error_cls = STATUS_ERRORS.get(response.status_code)
    if error_cls is None:
        return None
    return error_cls(response)


def _decode_body(response: httpx.Response) -> Any:
    text = response.text
    try:
        return json.loads(text)
    except ValueError:
        return text


def _extract_error(body: Any) -> tuple[Optional[int], Optional[str]]:
    if isinstance(body, Mapping):
        code = body.get("errcode")
        message = body.get("errmsg") or body.get("message") or body.get("error")
        return (code if isinstance(code, int) else None), (str(message) if message else None)
    if isinstance(body, str) and body.strip():
        return None, body.strip()
    return None, None


def _request_uri(response: httpx.Response) -> str:
    # access_token 이 메시지에 남지 않도록 쿼리 문자열은 제외한다.
    try:
        url = response.request.url
    except RuntimeError:
        return "-"
    return str(url).split("?", 1)[0]


__all__ = [
    "BadGateway",
    "BadRequest",
    "Conflict",
    "DingBotError",
    "Forbidden",
    "InternalServerError",
    "MethodNotAllowed",
    "MissingCredentialsError",
    "NotFound",
    "ParsingError",
    "ResponseError",
    "STATUS_ERRORS",
    "ServiceUnavailable",
    "Unauthorized",
    "Unprocessable",
    "error_for_response",
]
