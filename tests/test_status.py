import logging
from http import HTTPStatus

import pytest

from fake_server.http.status import (
    CLIENT_ERROR,
    SERVER_ERROR,
    STATUS_CODES,
    SUCCESS,
    UnknownStatusError,
    code_for,
    reason_phrase,
)


def test_tables_families():
    assert all(200 <= code < 300 for _, code in SUCCESS)
    assert all(400 <= code < 500 for _, code in CLIENT_ERROR)
    assert all(500 <= code < 600 for _, code in SERVER_ERROR)


def test_names_and_codes_unique():
    table = SUCCESS + CLIENT_ERROR + SERVER_ERROR
    assert len(STATUS_CODES) == len(table) == 48
    assert len({code for _, code in table}) == len(table)


@pytest.mark.parametrize(
    "name, code",
    [("ok", 200), ("im_used", 226), ("im_a_teapot", 418), ("unavailable_for_legal_reasons", 451), ("not_extended", 510)],
)
def test_code_for(name, code):
    assert code_for(name) == code


def test_code_for_unknown(caplog):
    caplog.set_level(logging.DEBUG, logger="fake_server")
    with pytest.raises(UnknownStatusError):
        code_for("teapot")
    assert "teapot" in caplog.text


def test_unknown_status_is_value_error():
    with pytest.raises(ValueError):
        code_for("")


def test_reason_phrase():
    assert reason_phrase(404) == HTTPStatus.NOT_FOUND.phrase
    assert reason_phrase(503) == "Service Unavailable"
    assert reason_phrase(299) == ""


def test_reason_phrase_covers_every_status():
    for _, code in SUCCESS + CLIENT_ERROR + SERVER_ERROR:
        assert reason_phrase(code), code
    assert reason_phrase(418) == "I'm a Teapot"
