# tests/conftest.py - shared fixtures
import io

import pytest

from trie_autocompleter.cli.cli import CLI
from trie_autocompleter.core.engine import DictionaryEngine
from trie_autocompleter.core.trie import Trie
from trie_autocompleter.utils.config_manager import Config


@pytest.fixture
def trie():
    return Trie()


@pytest.fixture
def engine():
    return DictionaryEngine()


@pytest.fixture
def make_trie():
    def _make(*words):
        t = Trie()
        for w in words:
            t.insert(w)
        return t
    return _make


class Session:
    """CLI wired to in-memory streams."""

    def __init__(self, config=None):
        self.out = io.StringIO()
        self.err = io.StringIO()
        self.cli = CLI(config=config or Config(), out=self.out, err=self.err)

    def run(self, script):
        self.cli.run(io.StringIO(script))
        return self.lines()

    def lines(self):
        return self.out.getvalue().splitlines()

    def errors(self):
        return self.err.getvalue()


@pytest.fixture
def session():
    return Session()
