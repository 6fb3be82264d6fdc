import pytest

from dingbot.config.settings import (
    DEFAULT_ENDPOINT,
    DingBotSettings,
    configure,
    default_options,
    get_settings,
    merge_options,
    reset,
)


def test_builtin_defaults() -> None:
    settings = merge_options()

    assert settings.endpoint == DEFAULT_ENDPOINT
    assert settings.access_token is None
    assert settings.verify_tls is True


def test_environment_overrides_builtin_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DINGBOT_ACCESS_TOKEN", "env-token")
    monkeypatch.setenv("DINGBOT_VERIFY_TLS", "false")
    get_settings.cache_clear()

    settings = merge_options()

    assert settings.access_token == "env-token"
    assert settings.verify_tls is False


def test_precedence_call_over_process_over_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DINGBOT_ACCESS_TOKEN", "env-token")
    monkeypatch.setenv("DINGBOT_ENDPOINT", "https://env.test/robot")
    get_settings.cache_clear()
    configure(access_token="process-token")

    settings = merge_options({"access_token": "call-token"})

    assert settings.access_token == "call-token"
    assert settings.endpoint == "https://env.test/robot"
    assert merge_options().access_token == "process-token"


def test_merge_ignores_unknown_keys_and_none_values() -> None:
    configure(endpoint="https://example.test/webhook", color="blue")

    settings = merge_options({"access_token": None, "timeout": 3})

    assert default_options() == {"endpoint": "https://example.test/webhook"}
    assert settings.endpoint == "https://example.test/webhook"
    assert settings.access_token is None


def test_merge_is_pure() -> None:
    configure(access_token="abc")
    merge_options({"access_token": "other"})

    assert default_options() == {"access_token": "abc"}


def test_explicit_settings_replace_process_defaults() -> None:
    configure(access_token="process-token")
    explicit = DingBotSettings(access_token="explicit-token")

    settings = merge_options({"verify_tls": False}, settings=explicit)

    assert settings.access_token == "explicit-token"
    assert settings.verify_tls is False
    assert explicit.verify_tls is True


def test_reset_clears_process_defaults() -> None:
    configure(access_token="abc")
    reset()

    assert default_options() == {}
    assert merge_options().access_token is None


def test_apply_sets_only_present_options() -> None:
    class Target:
        endpoint = "unchanged"
        access_token = "unchanged"
        verify_tls = True

    target = Target()
    DingBotSettings(endpoint=None, access_token="abc", verify_tls=False).apply(target)

    assert target.endpoint == "unchanged"
    assert target.access_token == "abc"
    assert target.verify_tls is False
