# autocorrect.py
# Substitution-only fuzzy lookup: finds stored words of exactly the same length
# as the query that differ in at most k positions (Hamming distance).
# Insertions and deletions are never considered, so "cats" or "at" can not
# correct "cat".
# The walk abandons a branch as soon as its mismatch count passes k and never
# goes deeper than the query length.

from __future__ import annotations

import logging
from typing import Iterator, List, Tuple

from trie_autocompleter.core.errors import InvalidInputError
from trie_autocompleter.core.trie import Trie, TrieNode, validate_word

logger = logging.getLogger(__name__)

Correction = Tuple[str, int]  # (word, distance)


def hamming_distance(a: str, b: str) -> int:
    """Number of positions where two equal-length strings differ."""
    if len(a) != len(b):
        raise ValueError(f"hamming distance needs equal lengths ({len(a)} != {len(b)})")
    return sum(1 for x, y in zip(a, b) if x != y)


def iter_corrections(trie: Trie, word: str, max_mismatches: int) -> Iterator[Correction]:
    """
    Lazily yield (candidate, distance) for every stored word with
    len(candidate) == len(word) and distance <= max_mismatches,
    in alphabetical order.
    """
    validate_word(word, max_length=None)
    if isinstance(max_mismatches, bool) or not isinstance(max_mismatches, int):
        raise InvalidInputError(f"k must be an integer (got {max_mismatches!r})")
    if max_mismatches < 0:
        raise InvalidInputError(f"k must be >= 0 (got {max_mismatches})")

    return _walk(trie.root, word, max_mismatches, 0, 0, [])


def _walk(node: TrieNode, word: str, k: int, depth: int, mismatches: int,
          path: List[str]) -> Iterator[Correction]:
    if depth == len(word):
        if node.end_of_word > 0:
            yield "".join(path), mismatches
        return
    expected = word[depth]
    for child in node.iter_children():
        cost = mismatches + (child.symbol != expected)
        if cost > k:
            continue
        path.append(child.symbol)
        yield from _walk(child, word, k, depth + 1, cost, path)
        path.pop()


def autocorrect(trie: Trie, word: str, max_mismatches: int) -> List[str]:
    """All corrections for `word` within `max_mismatches`; empty list if none."""
    out = [candidate for candidate, _dist in iter_corrections(trie, word, max_mismatches)]
    logger.debug("autocorrect %r k=%d -> %d match(es)", word, max_mismatches, len(out))
    return out
