import httpx

from dingbot.clients.errors import (
    BadRequest,
    DingBotError,
    MissingCredentialsError,
    ParsingError,
    ServiceUnavailable,
    error_for_response,
)


def test_error_for_unmapped_status_is_none() -> None:
    assert error_for_response(httpx.Response(200, json={"errcode": 0})) is None
    assert error_for_response(httpx.Response(504, text="timeout")) is None


def test_error_extracts_webhook_error_fields() -> None:
    request = httpx.Request("POST", "https://example.test/webhook?access_token=secret")
    response = httpx.Response(400, json={"errcode": 40035, "errmsg": "invalid parameter"}, request=request)

    error = error_for_response(response)

    assert isinstance(error, BadRequest)
    assert error.error_code == 40035
    assert error.error_message == "invalid parameter"
    assert str(error) == (
        "Server responded with code 400, message: invalid parameter. "
        "Request URI: https://example.test/webhook"
    )


def test_error_without_request_or_body() -> None:
    error = error_for_response(httpx.Response(503))

    assert isinstance(error, ServiceUnavailable)
    assert error.body == ""
    assert error.error_message is None
    assert "Request URI: -" in str(error)


def test_error_hierarchy() -> None:
    assert issubclass(BadRequest, DingBotError)
    assert issubclass(ParsingError, DingBotError)
    assert issubclass(MissingCredentialsError, DingBotError)
    assert issubclass(DingBotError, RuntimeError)
