# Copyright 2026, typofix developers
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.
from __future__ import annotations

from . import argx, speller
from .argx import arg
from .client import WordListClient
from .dictionary import WordList
from argparse import ArgumentParser
from typing import Any, Callable, Iterator, Protocol, TextIO
from typofix import envdefault

import re
import requests.exceptions
import sys

WORD_RE = re.compile(r"[A-Za-z]+")

CHECK_COLUMNS = ["line", "word", "correction"]
INFO_COLUMNS = ["source", "state", "words"]
LOOKUP_COLUMNS = ["word", "known"]


class ClientFactory(Protocol):
    def __call__(self, show_http: bool, request_timeout: int | None) -> WordListClient:
        ...


def iter_tokens(lines: TextIO) -> Iterator[tuple[int, str]]:
    """Yield (line number, word) for every run of ASCII letters"""
    for line_number, line in enumerate(lines, start=1):
        for match in WORD_RE.finditer(line):
            yield line_number, match.group()


class SpellerCLI(argx.CommandLineTool):
    client: WordListClient

    def __init__(self, client_factory: ClientFactory = WordListClient):
        argx.CommandLineTool.__init__(self, "typofix")
        self.client_factory = client_factory
        self._word_list: WordList | None = None

    def add_args(self, parser: ArgumentParser) -> None:
        parser.add_argument(
            "--words-file",
            help="Newline-delimited word list to use [TYPOFIX_WORDS_FILE], default %(default)r",
            default=envdefault.TYPOFIX_WORDS_FILE,
            metavar="FILE",
        )
        parser.add_argument(
            "--words-url",
            help="URL of a word list to download [TYPOFIX_WORDS_URL], default %(default)r",
            default=envdefault.TYPOFIX_WORDS_URL,
            metavar="URL",
        )
        parser.add_argument("--ca-cert", help="CA certificate to verify the word list server with", metavar="FILE")
        parser.add_argument("--show-http", help="Show HTTP requests and responses", action="store_true")
        parser.add_argument(
            "--request-timeout",
            type=int,
            default=envdefault.TYPOFIX_REQUEST_TIMEOUT,
            help="Wait for up to N seconds for a response to a request [TYPOFIX_REQUEST_TIMEOUT] (default: infinite)",
        )

    def pre_run(self, func: Callable[[], int | None]) -> None:
        request_timeout = self.args.request_timeout
        if request_timeout is None:
            request_timeout = self.config.get("request_timeout")
        self.client = self.client_factory(show_http=self.args.show_http, request_timeout=request_timeout)
        if self.args.ca_cert is not None:
            self.client.set_ca(self.args.ca_cert)

    def get_words_file(self) -> str | None:
        return self.args.words_file or self.config.get("words_file")

    def get_words_url(self) -> str | None:
        return self.args.words_url or self.config.get("words_url")

    def get_word_list(self) -> WordList:
        """Word list from the command line, the environment or the config file, loaded"""
        if self._word_list is not None:
            return self._word_list

        words_file = self.get_words_file()
        words_url = self.get_words_url()
        if words_file:
            word_list = WordList.from_file(words_file)
        elif words_url:
            word_list = WordList.from_url(words_url, client=self.client)
        else:
            raise argx.UserError(
                "No word list configured: use --words-file or --words-url, or run 'typofix words fetch' first"
            )

        try:
            word_list.load()
        except requests.exceptions.RequestException:
            raise
        except OSError as ex:
            raise argx.UserError("Failed to read word list {!r}: {}".format(words_file, ex)) from ex

        self.log.debug("using %r", word_list)
        self._word_list = word_list
        return word_list

    @arg.json
    @arg("word", nargs="+", help="Word to correct")
    def correct(self) -> None:
        """Suggest a correction for each word"""
        word_list = self.get_word_list()
        if self.args.json:
            results = []
            for word in self.args.word:
                correction = speller.correct(word, word_list)
                results.append({"word": word, "correction": correction, "changed": correction != word})
            self.print_response(results, json=True)
        else:
            for word in self.args.word:
                print(speller.correct(word, word_list))

    @arg.json
    @arg("file", nargs="?", help="Text file to check (default: standard input)")
    def check(self) -> int | None:
        """List misspelled words in a text and their corrections"""
        word_list = self.get_word_list()
        findings: list[dict[str, Any]] = []

        def check_lines(lines: TextIO) -> None:
            for line_number, word in iter_tokens(lines):
                correction = speller.correct(word, word_list)
                if correction != word:
                    findings.append({"line": line_number, "word": word, "correction": correction})

        if self.args.file in (None, "-"):
            check_lines(sys.stdin)
        else:
            try:
                with open(self.args.file, encoding="utf-8") as fp:
                    check_lines(fp)
            except OSError as ex:
                raise argx.UserError("Failed to read {!r}: {}".format(self.args.file, ex)) from ex

        self.print_response(findings, json=self.args.json, table_layout=CHECK_COLUMNS)
        return 1 if findings else None

    @arg("-o", "--output", help="Where to store the word list", default=envdefault.DEFAULT_WORDS_CACHE)
    def words__fetch(self) -> None:
        """Download the word list and use it from the local copy from now on"""
        words_url = self.get_words_url()
        if not words_url:
            raise argx.UserError("No word list URL: use --words-url, TYPOFIX_WORDS_URL or 'words_url' in the config file")

        try:
            count = self.client.download(words_url, self.args.output)
        except requests.exceptions.RequestException:
            raise
        except OSError as ex:
            raise argx.UserError("Failed to store word list in {!r}: {}".format(self.args.output, ex)) from ex

        self.config["words_file"] = self.args.output
        self.config["words_url"] = words_url
        try:
            self.config.save()
        except OSError as ex:
            raise argx.UserError("Failed to save configuration file {!r}: {}".format(self.config.file_path, ex)) from ex
        print("Stored {} words in {}".format(count, self.args.output))

    @arg.json
    def words__info(self) -> None:
        """Show the configured word list"""
        word_list = self.get_word_list()
        info = {"source": word_list.description, "state": word_list.state.value, "words": len(word_list)}
        self.print_response(info if self.args.json else [info], json=self.args.json, table_layout=INFO_COLUMNS)

    @arg.json
    @arg("word", nargs="+", help="Word to look up")
    def words__lookup(self) -> None:
        """Check whether words are in the word list"""
        word_list = self.get_word_list()
        results = [{"word": word, "known": word_list.has_word(word.lower())} for word in self.args.word]
        self.print_response(results, json=self.args.json, table_layout=LOOKUP_COLUMNS)


def main(args: list[str] | None = None) -> None:
    SpellerCLI().main(args)


if __name__ == "__main__":
    main()
