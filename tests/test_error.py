import json

import pytest

from proxy6.error import (
    ApiError,
    DocumentedError,
    DocumentedErrorCode,
    RequestError,
    SuccessButCannotParse,
    TooManyRequests,
    UnknownError,
)


@pytest.mark.parametrize(
    ("number", "code"),
    [
        (30, DocumentedErrorCode.UNKNOWN),
        (100, DocumentedErrorCode.KEY),
        (105, DocumentedErrorCode.IP),
        (110, DocumentedErrorCode.METHOD),
        (200, DocumentedErrorCode.COUNT),
        (210, DocumentedErrorCode.PERIOD),
        (220, DocumentedErrorCode.COUNTRY),
        (230, DocumentedErrorCode.IDS),
        (240, DocumentedErrorCode.VERSION),
        (250, DocumentedErrorCode.DESCRIPTION),
        (260, DocumentedErrorCode.TYPE),
        (270, DocumentedErrorCode.PORT),
        (280, DocumentedErrorCode.PROXY_STRING),
        (300, DocumentedErrorCode.ACTIVE_PROXY_ALLOW),
        (400, DocumentedErrorCode.NO_MONEY),
        (404, DocumentedErrorCode.NOT_FOUND),
        (410, DocumentedErrorCode.PRICE),
    ],
)
def test_parse_documented_codes(number, code):
    body = json.dumps({"status": "no", "error_id": number, "error": "x"})
    assert DocumentedErrorCode.parse_from_response_body(body) is code
    assert code.code == number


@pytest.mark.parametrize(
    "body",
    [
        "not json",
        "",
        "[1, 2]",
        '{"status": "yes"}',
        '{"error_id": 999}',
        '{"error_id": 100.0}',
        '{"error_id": "100"}',
        '{"error_id": -100}',
        '{"error_id": true}',
    ],
)
def test_parse_returns_none(body):
    assert DocumentedErrorCode.parse_from_response_body(body) is None


def test_code_descriptions():
    key_code = DocumentedErrorCode.parse_from_response_body('{"error_id": 100}')
    assert str(key_code) == "Authorization error, wrong key"
    not_found = DocumentedErrorCode.parse_from_response_body('{"error_id": 404}')
    assert not_found.description == (
        "Element error. The requested item was not found"
    )


def test_documented_error_keeps_code_and_body():
    body = '{"error_id": 400}'
    error = DocumentedError(DocumentedErrorCode.NO_MONEY, body)
    assert isinstance(error, ApiError)
    assert error.code is DocumentedErrorCode.NO_MONEY
    assert error.response == body
    assert body in str(error)


def test_too_many_requests():
    error = TooManyRequests("slow down")
    assert str(error) == "Too many requests"
    assert error.response == "slow down"


def test_unknown_error_message():
    error = UnknownError("boom")
    assert str(error) == "Unknown API error: boom"
    assert error.response == "boom"


def test_request_error_keeps_source():
    source = ConnectionError("refused")
    error = RequestError(source)
    assert error.source is source
    assert "refused" in str(error)


def test_success_but_cannot_parse():
    source = ValueError("bad field")
    error = SuccessButCannotParse(source, "{}")
    assert error.source is source
    assert error.response == "{}"
    assert str(error).startswith("Success response but cannot parse body: bad field")