# Copyright 2026, typofix developers
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.
from __future__ import annotations

from _pytest.logging import LogCaptureFixture, LogCaptureHandler
from http import HTTPStatus
from pathlib import Path
from typofix.client import Error, HTTP_HANDLER_NAME, RetrySpec, WordListClient
from unittest import mock

import datetime
import logging
import pytest
import requests

NO_SLEEP = RetrySpec(attempts=3, sleep=datetime.timedelta(0))
WORDS_URL = "https://words.example/words.txt"


class MockResponse:
    def __init__(
        self,
        status_code: int | HTTPStatus,
        text: str = "",
        headers: dict[str, str] | None = None,
    ):
        self.status_code = status_code.value if isinstance(status_code, HTTPStatus) else status_code
        self.text = text
        self.content = text.encode("utf-8")
        self.headers = {"Content-Type": "text/plain"} if headers is None else headers
        self.reason = ""


def test_fetch() -> None:
    client = WordListClient(retry_spec=NO_SLEEP)
    with mock.patch.object(client.session, "get", return_value=MockResponse(HTTPStatus.OK, "hello\ncat\n")) as get:
        assert client.fetch(WORDS_URL) == "hello\ncat\n"
    get.assert_called_once_with(WORDS_URL)


def test_fetch_words() -> None:
    client = WordListClient(retry_spec=NO_SLEEP)
    with mock.patch.object(client.session, "get", return_value=MockResponse(HTTPStatus.OK, "Hello\r\n\r\ncat\n")):
        assert client.fetch_words(WORDS_URL) == frozenset(["hello", "cat"])


@pytest.mark.parametrize("status", [HTTPStatus.NOT_FOUND, HTTPStatus.INTERNAL_SERVER_ERROR, HTTPStatus.MOVED_PERMANENTLY])
def test_fetch_error_status(status: HTTPStatus) -> None:
    client = WordListClient(retry_spec=NO_SLEEP)
    with mock.patch.object(client.session, "get", return_value=MockResponse(status, "nope")) as get:
        with pytest.raises(Error) as excinfo:
            client.fetch(WORDS_URL)
    # only connection errors are retried
    assert get.call_count == 1
    assert excinfo.value.status == status.value
    assert str(excinfo.value) == f"nope, status={status.value}"


def test_fetch_retries_connection_errors(caplog: LogCaptureFixture) -> None:
    client = WordListClient(retry_spec=NO_SLEEP)
    side_effect = [
        requests.exceptions.ConnectionError("reset"),
        requests.exceptions.ConnectionError("reset"),
        MockResponse(HTTPStatus.OK, "hello\n"),
    ]
    with mock.patch.object(client.session, "get", side_effect=side_effect) as get:
        assert client.fetch(WORDS_URL) == "hello\n"
    assert get.call_count == 3
    assert "1 attempts left" in caplog.text


def test_fetch_gives_up() -> None:
    client = WordListClient(retry_spec=NO_SLEEP)
    with mock.patch.object(client.session, "get", side_effect=requests.exceptions.ConnectionError("down")) as get:
        with pytest.raises(requests.exceptions.ConnectionError):
            client.fetch(WORDS_URL, retry=2)
    assert get.call_count == 2


def test_fetch_without_retry() -> None:
    client = WordListClient()
    with mock.patch.object(client.session, "get", side_effect=requests.exceptions.ConnectionError("down")) as get:
        with pytest.raises(requests.exceptions.ConnectionError):
            client.fetch(WORDS_URL, retry=WordListClient.NO_RETRY)
    assert get.call_count == 1


def test_download(tmp_path: Path) -> None:
    client = WordListClient(retry_spec=NO_SLEEP)
    target = tmp_path / "cache" / "words.txt"
    with mock.patch.object(client.session, "get", return_value=MockResponse(HTTPStatus.OK, "hello\ncool\n\n")):
        assert client.download(WORDS_URL, str(target)) == 2
    assert target.read_text(encoding="utf-8") == "hello\ncool\n\n"


def test_set_ca() -> None:
    client = WordListClient()
    assert client.session.verify is True
    client.set_ca("/etc/ssl/ca.pem")
    assert client.session.verify == "/etc/ssl/ca.pem"


def own_http_handlers(client: WordListClient) -> list[logging.Handler]:
    return [handler for handler in client.http_log.handlers if not isinstance(handler, LogCaptureHandler)]


def test_http_logging_level() -> None:
    verbose = WordListClient(show_http=True)
    assert verbose.http_log.isEnabledFor(logging.DEBUG)
    handlers = own_http_handlers(verbose)

    quiet = WordListClient(show_http=False)
    assert not quiet.http_log.isEnabledFor(logging.DEBUG)
    assert not quiet.http_log.propagate
    # constructing more clients reuses the same trace handler
    assert own_http_handlers(quiet) == handlers
    assert [handler.name for handler in handlers] == [HTTP_HANDLER_NAME]
