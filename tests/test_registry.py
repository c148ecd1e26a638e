# tests/test_registry.py
import pytest

from trie_autocompleter.cli.registry import CommandRegistry, UnknownCommandError
from trie_autocompleter.core.errors import InvalidInputError


@pytest.fixture
def registry():
    reg = CommandRegistry()
    calls = []
    reg.add_command("PING", lambda: calls.append("ping"), 0)
    reg.add_command("ECHO", lambda a, b: calls.append((a, b)), 2, "ECHO <a> <b>")
    reg.add_validator("ECHO", lambda args: None if args[0] != "bad" else "bad first arg")
    reg.calls = calls
    return reg


def test_dispatch(registry):
    registry.dispatch("PING", [])
    registry.dispatch("ECHO", ["x", "y"])
    assert registry.calls == ["ping", ("x", "y")]


def test_arity_checked(registry):
    with pytest.raises(InvalidInputError, match="usage: ECHO <a> <b>"):
        registry.dispatch("ECHO", ["x"])
    assert registry.calls == []


def test_validator_runs(registry):
    assert registry.validate("ECHO", ["bad", "y"]) == "bad first arg"
    with pytest.raises(InvalidInputError):
        registry.dispatch("ECHO", ["bad", "y"])


def test_unknown_command(registry):
    assert "NOPE" not in registry
    with pytest.raises(UnknownCommandError):
        registry.dispatch("NOPE", [])


def test_names_sorted(registry):
    assert registry.names() == ["ECHO", "PING"]
