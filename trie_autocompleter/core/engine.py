# engine.py
"""
DictionaryEngine - application facade over the trie.

Purpose:
 - Own exactly one Trie for the lifetime of a session
 - Simple public API for the CLI/tests:
     insert(word), remove(word), autocomplete(prefix, mode),
     autocorrect(word, k), load(path), insert_many(words), close(), stats()
 - Never print: every query returns values, the caller decides on output

Not thread-safe. Wrap every call in one lock if the engine is shared.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional

from trie_autocompleter.core.autocomplete import AutocompleteMode, autocomplete
from trie_autocompleter.core.autocorrect import autocorrect
from trie_autocompleter.core.errors import InvalidWordError
from trie_autocompleter.core.loader import PathLike, read_tokens
from trie_autocompleter.core.trie import MAX_WORD_LENGTH, Trie

logger = logging.getLogger(__name__)


@dataclass
class LoadReport:
    """Outcome of a bulk insert."""
    source: str
    inserted: int = 0
    skipped: List[str] = field(default_factory=list)


class DictionaryEngine:
    """Session-owned dictionary: one trie, no globals."""

    def __init__(self, max_word_length: int = MAX_WORD_LENGTH):
        self.trie = Trie(max_word_length=max_word_length)
        self.closed = False

    # mutation ------------------------------------------------------------------
    def insert(self, word: str) -> int:
        count = self.trie.insert(word)
        logger.debug("insert %r -> count %d", word, count)
        return count

    def remove(self, word: str) -> int:
        cleared = self.trie.remove(word)
        if not cleared:
            logger.debug("remove %r: not present", word)
        return cleared

    def insert_many(self, words: Iterable[str], source: str = "<iterable>") -> LoadReport:
        """
        Insert every word; words that fail validation are skipped and listed
        in the report instead of aborting the batch.
        """
        report = LoadReport(source=source)
        for w in words:
            try:
                self.trie.insert(w)
            except InvalidWordError as e:
                logger.warning("%s: skipping %s", source, e)
                report.skipped.append(w)
                continue
            report.inserted += 1
        return report

    def load(self, path: PathLike) -> LoadReport:
        """Insert every whitespace separated token of a file."""
        tokens = read_tokens(path)  # raises DictionaryLoadError, trie untouched
        report = self.insert_many(tokens, source=str(path))
        logger.info("loaded %d word(s) from %s (%d skipped)",
                    report.inserted, path, len(report.skipped))
        return report

    # queries --------------------------------------------------------------------
    def autocomplete(self, prefix: str, mode=AutocompleteMode.ALL) -> List[Optional[str]]:
        return autocomplete(self.trie, prefix, mode)

    def autocorrect(self, word: str, k: int) -> List[str]:
        return autocorrect(self.trie, word, k)

    def __contains__(self, word: object) -> bool:
        return word in self.trie

    def __len__(self) -> int:
        return len(self.trie)

    def stats(self) -> Dict[str, Any]:
        return {
            "words": len(self.trie),
            "occurrences": sum(c for _w, c in self.trie.items()),
            "nodes": self.trie.node_count,
        }

    # teardown -------------------------------------------------------------------
    def close(self) -> None:
        """Release every node. Safe to call twice."""
        if self.closed:
            return
        freed = self.trie.clear()
        self.closed = True
        logger.debug("engine closed, freed %d node(s)", freed)
