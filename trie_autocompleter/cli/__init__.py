from trie_autocompleter.cli.cli import CLI, main
from trie_autocompleter.cli.registry import CommandRegistry, UnknownCommandError

__all__ = ["CLI", "main", "CommandRegistry", "UnknownCommandError"]
