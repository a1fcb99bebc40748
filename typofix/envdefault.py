# Copyright 2026, typofix developers
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.
"""
Configurable parameters via environment variables
"""

import os

USER_HOME = os.path.expanduser("~")

TYPOFIX_CONFIG_DIR = os.environ.get("TYPOFIX_CONFIG_DIR", os.path.join(USER_HOME, ".config", "typofix"))

TYPOFIX_CLIENT_CONFIG = os.environ.get("TYPOFIX_CLIENT_CONFIG", os.path.join(TYPOFIX_CONFIG_DIR, "typofix.json"))
TYPOFIX_WORDS_FILE = os.environ.get("TYPOFIX_WORDS_FILE")
TYPOFIX_WORDS_URL = os.environ.get("TYPOFIX_WORDS_URL")
TYPOFIX_REQUEST_TIMEOUT = os.environ.get("TYPOFIX_REQUEST_TIMEOUT")
DEFAULT_WORDS_CACHE = os.path.join(TYPOFIX_CONFIG_DIR, "words.txt")
