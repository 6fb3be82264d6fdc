"""로봇 클라이언트 설정 로더."""

from __future__ import annotations

from functools import lru_cache
from typing import Any, Dict, Mapping, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_ENDPOINT = "https://oapi.dingtalk.com/robot/send"

VALID_OPTION_KEYS = ("endpoint", "access_token", "verify_tls")


class DingBotSettings(BaseSettings):
    """환경 변수 기반 로봇 Webhook 설정."""

    model_config = SettingsConfigDict(
        env_prefix="DINGBOT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    endpoint: Optional[str] = Field(
        default=DEFAULT_ENDPOINT,
        description="로봇 Webhook 엔드포인트 URL",
    )
    access_token: Optional[str] = Field(
        default=None,
        description="로봇 access_token (쿼리 파라미터로 전달)",
    )
    verify_tls: bool = Field(
        default=True,
        description="HTTPS 인증서 검증 여부",
    )

    def apply(self, target: Any) -> None:
        """설정된 옵션 값을 대상 객체의 같은 이름 속성에 기록한다.

        값이 없는 옵션은 건너뛴다. 필수 값 검증은 전송 시점에 수행된다.
        """

        for key in VALID_OPTION_KEYS:
            value = getattr(self, key)
            if value is not None:
                setattr(target, key, value)


_process_defaults: Dict[str, Any] = {}


def _recognized(options: Mapping[str, Any]) -> Dict[str, Any]:
    return {key: value for key, value in options.items() if key in VALID_OPTION_KEYS and value is not None}


@lru_cache(maxsize=1)
def get_settings() -> DingBotSettings:
    """환경 변수와 기본값으로 만든 설정을 싱글턴 형태로 반환한다."""

    return DingBotSettings()


def merge_options(
    overrides: Optional[Mapping[str, Any]] = None,
    *,
    settings: Optional[DingBotSettings] = None,
) -> DingBotSettings:
    """호출 단위 옵션을 기본값 위에 덮어쓴 새 설정을 만든다.

    우선순위는 호출 단위 옵션, 프로세스 기본값(:func:`configure`), 환경 변수,
    내장 기본값 순이다. ``settings`` 를 직접 넘기면 그 값이 프로세스 기본값을
    대신한다. 인식하지 못하는 키와 ``None`` 값은 무시한다.
    """

    if settings is None:
        values = get_settings().model_dump()
        values.update(_recognized(_process_defaults))
    else:
        values = settings.model_dump()
    values.update(_recognized(overrides or {}))
    return DingBotSettings(**values)


def configure(**options: Any) -> DingBotSettings:
    """프로세스 전역 기본 옵션을 갱신한다."""

    _process_defaults.update(_recognized(options))
    return merge_options()


def default_options() -> Dict[str, Any]:
    """현재 프로세스 전역 기본 옵션의 사본."""

    return dict(_process_defaults)


def reset() -> None:
    """전역 기본 옵션과 캐시된 환경 설정을 초기화한다."""

    _process_defaults.clear()
    get_settings.cache_clear()


__all__ = [
    "DEFAULT_ENDPOINT",
    "DingBotSettings",
    "VALID_OPTION_KEYS",
    "configure",
    "default_options",
    "get_settings",
    "merge_options",
    "reset",
]
