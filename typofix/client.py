# Copyright 2026, typofix developers
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.
"""HTTP access to published word lists"""
from __future__ import annotations

from .dictionary import parse_word_list
from .session import get_requests_session
from requests import Response
from typing import Final, NamedTuple

import datetime
import logging
import os
import requests
import time

HTTP_HANDLER_NAME = "typofix_http"


class RetrySpec(NamedTuple):
    attempts: int = 3
    sleep: datetime.timedelta = datetime.timedelta(milliseconds=200)


class Error(Exception):
    """Request error"""

    def __init__(self, response: Response, status: int = 520) -> None:
        Exception.__init__(self, response.text, status)
        self.response = response
        self.status = status

    def __str__(self) -> str:
        response_text, status = self.args
        return f"{response_text}, status={status}"


class WordListClient:
    """Downloads newline-delimited word lists over HTTP"""

    NO_RETRY: Final = RetrySpec(attempts=1)
    DEFAULT_RETRY: Final = RetrySpec()

    def __init__(
        self,
        show_http: bool = False,
        request_timeout: int | None = None,
        retry_spec: RetrySpec = DEFAULT_RETRY,
    ) -> None:
        self.log = logging.getLogger("WordListClient")
        self.session = get_requests_session(timeout=request_timeout)
        self.http_log = logging.getLogger("typofix_http")
        self.init_http_logging(show_http)
        self.retry_spec: Final = retry_spec

    def init_http_logging(self, show_http: bool) -> None:
        if not any(handler.name == HTTP_HANDLER_NAME for handler in self.http_log.handlers):
            http_handler = logging.StreamHandler()
            http_handler.set_name(HTTP_HANDLER_NAME)
            http_handler.setFormatter(logging.Formatter("%(message)s"))
            self.http_log.addHandler(http_handler)
        self.http_log.propagate = False
        self.http_log.setLevel(logging.DEBUG if show_http else logging.INFO)

    def set_ca(self, ca: str) -> None:
        self.session.verify = ca

    def _execute(self, url: str) -> Response:
        self.http_log.debug("-----Request Begin-----")
        self.http_log.debug("GET %s", url)
        for header, header_value in self.session.headers.items():
            self.http_log.debug("%s: %s", header, header_value)
        self.http_log.debug("-----Request End-----")

        response = self.session.get(url)

        self.http_log.debug("-----Response Begin-----")
        self.http_log.debug("%s %s", response.status_code, response.reason)
        for header, header_value in response.headers.items():
            self.http_log.debug("%s: %s", header, header_value)
        self.http_log.debug("%d bytes", len(response.content))
        self.http_log.debug("-----Response End-----")

        if not str(response.status_code).startswith("2"):
            raise Error(response, status=response.status_code)

        return response

    def fetch(self, url: str, retry: int | RetrySpec | None = None) -> str:
        """Return the body of `url`, retrying connection failures"""
        if retry is None:
            retry_spec = self.retry_spec
        elif isinstance(retry, int):
            retry_spec = self.retry_spec._replace(attempts=retry)
        else:
            retry_spec = retry

        attempts = retry_spec.attempts
        while True:
            attempts -= 1
            try:
                response = self._execute(url)
                break
            except requests.exceptions.ConnectionError as ex:
                if attempts <= 0:
                    raise
                self.log.warning(
                    "GET %s failed: %s: %s; retrying in %s seconds, %s attempts left",
                    url,
                    ex.__class__.__name__,
                    ex,
                    retry_spec.sleep.total_seconds(),
                    attempts,
                )
                time.sleep(retry_spec.sleep.total_seconds())

        return response.text

    def fetch_words(self, url: str) -> frozenset[str]:
        return parse_word_list(self.fetch(url))

    def download(self, url: str, path: str) -> int:
        """Store the word list from `url` at `path`, returning the number of words in it"""
        text = self.fetch(url)
        words = parse_word_list(text)

        target_dir = os.path.dirname(path)
        if target_dir and not os.path.isdir(target_dir):
            os.makedirs(target_dir)

        with open(path, "w", encoding="utf-8") as fp:
            fp.write(text)

        self.log.info("stored %d words from %s in %s", len(words), url, path)
        return len(words)
