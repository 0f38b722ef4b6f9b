from __future__ import annotations

import json
from datetime import timedelta

import httpx
import pytest
from pydantic import ValidationError

from untappd_client.errors import ApiError, ContentTypeError, EndOfInputError, UnexpectedEndOfInputError
from untappd_client.transport import check_response

from payloads import API_ERR_JSON, INVALID_USER_ERR_JSON


def _response(code: int, content_type: str, body: bytes = b"") -> httpx.Response:
    return httpx.Response(code, headers={"Content-Type": content_type}, content=body)


def test_check_response_wrong_content_type() -> None:
    with pytest.raises(ContentTypeError) as exc:
        check_response(_response(200, "foo/bar"))
    assert str(exc.value) == "expected application/json content type, but received foo/bar"
    assert exc.value.expected == "application/json"
    assert exc.value.actual == "foo/bar"


def test_check_response_content_type_checked_before_status() -> None:
    with pytest.raises(ContentTypeError):
        check_response(_response(500, "text/plain", API_ERR_JSON))


def test_check_response_content_type_is_exact() -> None:
    with pytest.raises(ContentTypeError):
        check_response(_response(200, "application/json; charset=utf-8", b"{}"))


def test_check_response_json_eof() -> None:
    with pytest.raises(EndOfInputError):
        check_response(_response(500, "application/json"))


def test_check_response_json_unexpected_eof() -> None:
    with pytest.raises(UnexpectedEndOfInputError):
        check_response(_response(500, "application/json", b"{"))


def test_check_response_json_syntax_error() -> None:
    with pytest.raises(json.JSONDecodeError) as exc:
        check_response(_response(502, "application/json", b"<html>"))
    assert type(exc.value) is json.JSONDecodeError


def test_check_response_error_ok() -> None:
    res = _response(500, "application/json", API_ERR_JSON)
    with pytest.raises(ApiError) as exc:
        check_response(res)

    err = exc.value
    assert str(err) == "500 [invalid_auth]: The user has not authorized this application or the token is invalid."
    assert err.code == 500
    assert err.error_type == "invalid_auth"
    assert err.detail == "The user has not authorized this application or the token is invalid."
    assert err.developer_friendly == err.detail
    assert err.duration == timedelta(0)
    assert err.response is res


def test_check_response_invalid_user() -> None:
    with pytest.raises(ApiError) as exc:
        check_response(_response(404, "application/json", INVALID_USER_ERR_JSON))

    err = exc.value
    assert err.code == 404
    assert err.detail == "Invalid user."
    assert err.error_type == "invalid_user"
    assert err.developer_friendly == ""
    assert str(err) == "404 [invalid_user]: Invalid user."


def test_check_response_reports_response_time() -> None:
    body = b'{"meta":{"code":429,"error_type":"invalid_limit","response_time":{"time":0.5,"measure":"seconds"}}}'
    with pytest.raises(ApiError) as exc:
        check_response(_response(429, "application/json", body))
    assert exc.value.duration == timedelta(milliseconds=500)


def test_check_response_envelope_wrong_shape() -> None:
    with pytest.raises(ValidationError):
        check_response(_response(500, "application/json", b'{"meta":{"code":"not a number"}}'))


@pytest.mark.parametrize("code", [200, 201, 204, 299])
@pytest.mark.parametrize("body", [b"", b"{}"])
def test_check_response_ok(code, body) -> None:
    assert check_response(_response(code, "application/json", body)) is None


@pytest.mark.parametrize("code", [199, 300, 301, 400])
def test_check_response_outside_success_range(code) -> None:
    with pytest.raises(ApiError):
        check_response(_response(code, "application/json", API_ERR_JSON))


def test_check_response_non_utf8_envelope() -> None:
    body = b'{"meta":{"code":500,"error_type":"invalid_auth","error_detail":"caf\xe9"}}'
    with pytest.raises(ApiError) as exc:
        check_response(_response(500, "application/json", body))
    assert exc.value.detail == "caf\ufffd"
    assert str(exc.value) == "500 [invalid_auth]: caf\ufffd"


def test_check_response_truncated_number() -> None:
    with pytest.raises(UnexpectedEndOfInputError):
        check_response(_response(500, "application/json", b'{"meta":{"code":5.'))
