"""
trie_autocompleter - prefix-tree dictionary with autocomplete and autocorrect.
"""

from trie_autocompleter.core import (
    AutocompleteMode,
    DictionaryEngine,
    Trie,
)

__all__ = ["AutocompleteMode", "DictionaryEngine", "Trie"]

__version__ = "0.1.0"
