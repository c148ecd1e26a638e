"""
trie_autocompleter.core

The dictionary engine.
Contains:
 - the prefix tree with insert and pruning removal (Trie, TrieNode)
 - three autocomplete strategies and their dispatcher
 - Hamming-distance autocorrect
 - the session facade (DictionaryEngine)
"""

from .errors import (
    DictionaryLoadError,
    InvalidInputError,
    InvalidWordError,
    ResourceExhaustedError,
    TrieError,
)
from .trie import ALPHABET, MAX_WORD_LENGTH, Trie, TrieNode
from .autocomplete import AutocompleteMode, autocomplete
from .autocorrect import autocorrect, hamming_distance, iter_corrections
from .engine import DictionaryEngine, LoadReport

__all__ = [
    "ALPHABET",
    "MAX_WORD_LENGTH",
    "Trie",
    "TrieNode",
    "AutocompleteMode",
    "autocomplete",
    "autocorrect",
    "hamming_distance",
    "iter_corrections",
    "DictionaryEngine",
    "LoadReport",
    "TrieError",
    "InvalidInputError",
    "InvalidWordError",
    "DictionaryLoadError",
    "ResourceExhaustedError",
]
