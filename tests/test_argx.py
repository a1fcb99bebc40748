# Copyright 2026, typofix developers
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.
from __future__ import annotations

from _pytest.logging import LogCaptureFixture
from functools import cached_property
from pathlib import Path
from typing import Callable, NoReturn
from typofix.argx import arg, CommandLineTool, Config, name_to_cmd_parts, UserError

import json
import os
import pytest


class TestCLI(CommandLineTool):
    __test__ = False  # to avoid PytestCollectionWarning

    @arg()
    def xxx(self) -> None:
        """3"""

    @arg()
    def aaa(self) -> None:
        """1"""

    @arg("word")
    def words__lookup(self) -> None:
        """Look up

        With more explaining
        """

    @arg()
    def ccc(self) -> None:
        """2"""


def test_commands_are_alphabetically_ordered() -> None:
    cli = TestCLI("testcli")
    cli.parse_args(["aaa"])

    action_order = [item.dest for item in cli.subparsers._choices_actions]
    assert action_order == ["aaa", "ccc", "words", "xxx"]


def test_multi_level_command() -> None:
    cli = TestCLI("testcli")
    cli.parse_args(["words", "lookup", "hello"])
    assert cli.args.func == cli.words__lookup
    assert cli.args.word == "hello"

    help_text = cli._cats[("words",)].choices["lookup"].format_help()
    assert cli.words__lookup.__doc__ is not None
    assert cli.words__lookup.__doc__ in help_text


class DescriptorCLI(CommandLineTool):
    @property
    def raise1(self) -> NoReturn:
        raise RuntimeError("evaluated raise1")

    @cached_property
    def raise2(self) -> NoReturn:
        raise RuntimeError("evaluated raise2")

    @arg("something")
    def example_command(self) -> None:
        """Example command."""


def test_descriptors_are_not_eagerly_evaluated() -> None:
    cli = DescriptorCLI("DescriptorCLI")
    calls: list[Callable] = []
    cli.add_cmds(calls.append)
    assert calls == [cli.example_command]


@pytest.mark.parametrize(
    "name,parts",
    [
        ("correct", ["correct"]),
        ("words__fetch", ["words", "fetch"]),
        ("words__lookup_all", ["words", "lookup-all"]),
    ],
)
def test_name_to_cmd_parts(name: str, parts: list[str]) -> None:
    assert name_to_cmd_parts(name) == parts


def test_config_missing_file(tmp_path: Path) -> None:
    config = Config(tmp_path / "missing.json")
    assert config == {}


def test_config_invalid_json(tmp_path: Path) -> None:
    config_file = tmp_path / "typofix.json"
    config_file.write_text("{not json", encoding="utf-8")
    with pytest.raises(UserError):
        Config(config_file)


def test_config_save_and_load(tmp_path: Path) -> None:
    config_file = tmp_path / "config" / "typofix.json"
    config = Config(config_file)
    config["words_file"] = "/tmp/words.txt"
    config["request_timeout"] = 10
    config.save()

    assert os.stat(config_file).st_mode & 0o777 == 0o600
    assert json.loads(config_file.read_text(encoding="utf-8")) == {"request_timeout": 10, "words_file": "/tmp/words.txt"}
    assert Config(config_file) == {"request_timeout": 10, "words_file": "/tmp/words.txt"}


def test_user_error_exits_cleanly(tmp_path: Path, caplog: LogCaptureFixture) -> None:
    class T(CommandLineTool):
        """Test class"""

        @arg()
        def fail(self) -> None:
            """fail"""
            raise UserError("something is wrong")

    ret = T("typofix").run(args=["--config", str(tmp_path / "typofix.json"), "fail"])
    assert ret == 1
    assert "command failed: UserError: something is wrong" in caplog.text


def test_broken_pipe_exits_with_sigpipe(tmp_path: Path) -> None:
    class T(CommandLineTool):
        """Test class"""

        @arg()
        def pipe(self) -> None:
            """pipe"""
            raise BrokenPipeError(32, "Broken pipe")

    assert T("typofix").run(args=["--config", str(tmp_path / "typofix.json"), "pipe"]) == 13
