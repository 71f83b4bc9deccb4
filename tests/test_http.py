import json

import pytest
import requests

from getresponse_client.exceptions import DecodeError, RemoteError, RequestConstructionError
from getresponse_client.http import build_request, encode_json, interpret_response, is_success


@pytest.mark.parametrize(
    ("status_code", "expected"),
    [(199, False), (200, True), (204, True), (302, True), (399, True), (400, False), (503, False)],
)
def test_success_range_is_200_to_399(status_code, expected):
    assert is_success(status_code) is expected


def test_redirect_status_is_decoded_as_success():
    assert interpret_response(302, b'{"name": "foobar"}') == {"name": "foobar"}


def test_void_success_discards_body():
    assert interpret_response(200, b"<html>", expect_json=False) is None


def test_informational_status_is_a_failure():
    with pytest.raises(RemoteError) as excinfo:
        interpret_response(101, b'{"message": "switching"}')

    assert excinfo.value.status_code == 101


def test_remote_error_string_is_message():
    with pytest.raises(RemoteError) as excinfo:
        interpret_response(409, b'{"code":1008,"message":"conflict"}', expect_json=False)

    assert str(excinfo.value) == "conflict"
    assert excinfo.value.more_info == ""
    assert excinfo.value.context == []


def test_empty_error_body_is_decode_error():
    with pytest.raises(DecodeError) as excinfo:
        interpret_response(502, b"")

    assert excinfo.value.status_code == 502
    assert excinfo.value.body == b""
    assert isinstance(excinfo.value.__cause__, ValueError)


def test_non_numeric_error_code_is_decode_error():
    with pytest.raises(DecodeError):
        interpret_response(400, b'{"code": "oops", "message": "bad"}')


def test_success_with_empty_body_fails_for_payload_operations():
    with pytest.raises(DecodeError):
        interpret_response(200, b"")


def test_build_request_attaches_body_verbatim():
    body = encode_json({"email": "a@b.c"})

    prepared = build_request(
        requests.Session(),
        "post",
        "https://api.test/v3/contacts",
        headers={"Content-Type": "application/json"},
        body=body,
    )

    assert prepared.method == "POST"
    assert prepared.body == b'{"email":"a@b.c"}'
    assert json.loads(prepared.body) == {"email": "a@b.c"}


def test_build_request_without_body_has_none():
    prepared = build_request(
        requests.Session(), "GET", "https://api.test/v3/contacts/1", params={"fields": "name"}
    )

    assert prepared.body is None
    assert prepared.url == "https://api.test/v3/contacts/1?fields=name"


@pytest.mark.parametrize("url", ["http://", "not a url"])
def test_build_request_rejects_malformed_url(url):
    with pytest.raises(RequestConstructionError):
        build_request(requests.Session(), "GET", url)


@pytest.mark.parametrize(
    "body",
    [
        b'{"code": "1008", "message": "conflict"}',
        b'{"code": 1008, "message": 123}',
        b'{"httpStatus": "409", "message": "conflict"}',
        b'{"code": true, "message": "conflict"}',
        b'{"message": "conflict", "context": "email"}',
        b'{"message": "conflict", "context": [1, 2]}',
    ],
)
def test_mistyped_error_fields_are_decode_errors(body):
    with pytest.raises(DecodeError) as excinfo:
        interpret_response(409, body)

    assert excinfo.value.body == body
    assert isinstance(excinfo.value.__cause__, TypeError)


def test_null_error_fields_fall_back_to_empty_values():
    with pytest.raises(RemoteError) as excinfo:
        interpret_response(500, b'{"code": null, "message": "boom", "context": null}')

    assert excinfo.value.code == 0
    assert excinfo.value.context == []
    assert str(excinfo.value) == "boom"


def test_build_request_merges_session_headers():
    session = requests.Session()
    session.headers["X-Trace"] = "t1"
    session.headers["Accept"] = "*/*"

    prepared = build_request(
        session,
        "GET",
        "https://api.test/v3/contacts",
        headers={"Accept": "application/json"},
    )

    assert prepared.headers["X-Trace"] == "t1"
    assert prepared.headers["Accept"] == "application/json"
