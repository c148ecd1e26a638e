# autocomplete.py
"""
Prefix completion strategies over a Trie.

Every strategy starts from the node reached by the prefix (the subtree root)
and returns at most one completed word, or None when the subtree holds no
word. Children are always visited in ascending symbol order, so "first found"
also means "lexicographically smallest" whenever a tie has to be broken.

 - first_lexicographic(): stops at the first word end in depth-first order
 - shortest(): exhaustive walk, keeps the shortest word (ties: first seen)
 - most_frequent(): exhaustive walk, keeps the highest count (ties: first seen)
 - autocomplete(): resolves the prefix and dispatches on AutocompleteMode
"""

from __future__ import annotations

import logging
from enum import IntEnum
from typing import Callable, Dict, List, Optional, Tuple

from trie_autocompleter.core.errors import InvalidInputError
from trie_autocompleter.core.trie import Trie, TrieNode

logger = logging.getLogger(__name__)

Strategy = Callable[[TrieNode, str], Optional[str]]


class AutocompleteMode(IntEnum):
    ALL = 0
    LEXICOGRAPHIC = 1
    SHORTEST = 2
    MOST_FREQUENT = 3


# strategies ------------------------------------------------------------------
def first_lexicographic(subtree_root: TrieNode, prefix: str) -> Optional[str]:
    """Smallest stored word starting with `prefix`."""
    if subtree_root.end_of_word > 0:
        return prefix

    path: List[str] = []
    if _descend_to_first_word(subtree_root, path):
        return prefix + "".join(path)
    return None


def _descend_to_first_word(node: TrieNode, path: List[str]) -> bool:
    for child in node.iter_children():
        path.append(child.symbol)
        if child.end_of_word > 0 or _descend_to_first_word(child, path):
            return True
        path.pop()
    return False


def shortest(subtree_root: TrieNode, prefix: str) -> Optional[str]:
    """Shortest stored word starting with `prefix`."""
    if subtree_root.end_of_word > 0:
        return prefix

    # best = (suffix length, suffix); length -1 means nothing found yet
    best: List[Tuple[int, str]] = [(-1, "")]
    path: List[str] = []

    def _walk(node: TrieNode) -> None:
        for child in node.iter_children():
            path.append(child.symbol)
            depth = len(path)
            if child.end_of_word > 0:
                if best[0][0] == -1 or depth < best[0][0]:
                    best[0] = (depth, "".join(path))
                # anything below is longer
            elif best[0][0] == -1 or depth < best[0][0]:
                _walk(child)
            path.pop()

    _walk(subtree_root)
    length, suffix = best[0]
    if length == -1:
        return None
    return prefix + suffix


def most_frequent(subtree_root: TrieNode, prefix: str) -> Optional[str]:
    """Stored word starting with `prefix` with the highest insert count."""
    best_count = 0
    best_suffix: Optional[str] = None
    path: List[str] = []

    # explicit stack of (node, depth); children pushed in reverse so the
    # lowest symbol is popped first, keeping ascending depth-first order
    stack: List[Tuple[TrieNode, int]] = [(subtree_root, 0)]
    while stack:
        node, depth = stack.pop()
        del path[depth:]
        if node is not subtree_root:
            path.append(node.symbol)
        if node.end_of_word > best_count:
            best_count = node.end_of_word
            best_suffix = "".join(path)
        children = list(node.iter_children())
        for child in reversed(children):
            stack.append((child, len(path)))

    if best_suffix is None:
        return None
    return prefix + best_suffix


STRATEGIES: Dict[AutocompleteMode, Strategy] = {
    AutocompleteMode.LEXICOGRAPHIC: first_lexicographic,
    AutocompleteMode.SHORTEST: shortest,
    AutocompleteMode.MOST_FREQUENT: most_frequent,
}


# dispatch ---------------------------------------------------------------------
def parse_mode(mode) -> AutocompleteMode:
    """Accept an AutocompleteMode, an int, or a numeric string."""
    try:
        return AutocompleteMode(int(mode))
    except (TypeError, ValueError):
        raise InvalidInputError(
            f"autocomplete mode must be one of 0, 1, 2, 3 (got {mode!r})"
        ) from None


def autocomplete(trie: Trie, prefix: str, mode=AutocompleteMode.ALL) -> List[Optional[str]]:
    """
    Complete `prefix` with the strategy picked by `mode`.

    Returns one entry per strategy run, in the order lexicographic, shortest,
    most frequent for mode ALL, otherwise a single entry. An entry is None
    when that strategy found nothing; if the prefix itself is absent no
    strategy runs and every entry is None.
    """
    mode = parse_mode(mode)
    if mode is AutocompleteMode.ALL:
        selected = [STRATEGIES[m] for m in (AutocompleteMode.LEXICOGRAPHIC,
                                            AutocompleteMode.SHORTEST,
                                            AutocompleteMode.MOST_FREQUENT)]
    else:
        selected = [STRATEGIES[mode]]

    subtree_root = trie.find_node(prefix)
    if subtree_root is None:
        logger.debug("prefix %r not in trie", prefix)
        return [None] * len(selected)

    return [strategy(subtree_root, prefix) for strategy in selected]
