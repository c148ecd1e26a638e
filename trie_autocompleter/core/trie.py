# trie.py
# Prefix tree over the lowercase alphabet a-z.
# Keeps an end-of-word counter per node, used both as a "this is a word" marker
# and as the frequency signal for ranking completions.
# Children live in a fixed 26-slot table so traversals visit edges in
# ascending symbol order without sorting.

from __future__ import annotations

import logging
import string
from typing import Iterator, List, Optional, Tuple

from trie_autocompleter.core.errors import (
    InvalidWordError,
    ResourceExhaustedError,
)

logger = logging.getLogger(__name__)

ALPHABET = string.ascii_lowercase
ALPHABET_SIZE = len(ALPHABET)
MAX_WORD_LENGTH = 50

_BASE = ord("a")


def symbol_index(ch: str) -> int:
    """Slot of `ch` in a node's children table."""
    return ord(ch) - _BASE


def validate_word(word: str, max_length: Optional[int] = MAX_WORD_LENGTH,
                  allow_empty: bool = False) -> str:
    """
    Check that `word` only uses a-z and respects the length bound.
    Returns the word unchanged so callers can validate inline.
    """
    if not isinstance(word, str):
        raise InvalidWordError(repr(word), "not a string")
    if not word and not allow_empty:
        raise InvalidWordError(word, "empty")
    if max_length is not None and len(word) > max_length:
        raise InvalidWordError(word, f"longer than {max_length} symbols")
    for ch in word:
        if ch not in ALPHABET:
            raise InvalidWordError(word, f"symbol {ch!r} is outside a-z")
    return word


class TrieNode:
    """
    A single vertex of the trie.
    symbol: letter on the incoming edge ("" for the root)
    end_of_word: how many inserts ended exactly here (0 = not a word)
    children: 26 slots, None where no edge exists
    n_children: number of non-empty slots
    """

    __slots__ = ("symbol", "end_of_word", "children", "n_children")

    def __init__(self, symbol: str = "") -> None:
        self.symbol = symbol
        self.end_of_word = 0
        self.children: List[Optional[TrieNode]] = [None] * ALPHABET_SIZE
        self.n_children = 0

    def child(self, ch: str) -> Optional[TrieNode]:
        return self.children[symbol_index(ch)]

    def iter_children(self) -> Iterator[TrieNode]:
        """Yield existing children in ascending symbol order."""
        if self.n_children == 0:
            return
        for node in self.children:
            if node is not None:
                yield node

    def is_prunable(self) -> bool:
        return self.n_children == 0 and self.end_of_word == 0

    def __repr__(self) -> str:
        return (f"TrieNode({self.symbol!r}, end_of_word={self.end_of_word}, "
                f"n_children={self.n_children})")


class Trie:
    """
    Dictionary of lowercase words with per-word insertion counts.
    Used by the DictionaryEngine for:
     - insert / remove with pruning of dead branches
     - prefix lookup feeding the autocomplete strategies
     - root access for the autocorrect traversal
    """

    def __init__(self, max_word_length: int = MAX_WORD_LENGTH) -> None:
        self.max_word_length = max_word_length
        self.root = TrieNode()
        self._size = 0  # distinct words
        self._nodes = 0  # non-root nodes

    # insertion -----------------------------------------------------
    def insert(self, word: str) -> int:
        """
        Add one occurrence of `word`, creating missing edges on the way down.
        Returns the word's count after the insert.

        If allocation fails, the edge grafted by this call is unlinked again
        before ResourceExhaustedError is raised, so no dangling corridor is
        left behind.
        """
        validate_word(word, self.max_word_length)

        node = self.root
        graft: Optional[Tuple[TrieNode, int]] = None
        created = 0
        try:
            for ch in word:
                idx = symbol_index(ch)
                nxt = node.children[idx]
                if nxt is None:
                    nxt = TrieNode(ch)
                    node.children[idx] = nxt
                    node.n_children += 1
                    created += 1
                    if graft is None:
                        graft = (node, idx)
                node = nxt
        except MemoryError as exc:
            if graft is not None:
                parent, idx = graft
                parent.children[idx] = None
                parent.n_children -= 1
            logger.error("allocation failed inserting %r", word)
            raise ResourceExhaustedError(f"out of memory inserting {word!r}") from exc

        self._nodes += created
        if node.end_of_word == 0:
            self._size += 1
        node.end_of_word += 1
        return node.end_of_word

    # removal -------------------------------------------------------
    def remove(self, word: str) -> int:
        """
        Remove `word` completely: every duplicate insert is cleared at once.
        Returns how many occurrences were cleared (0 when it was absent).

        The walk remembers the last node that has to survive (the root, a
        branching node, or a word end). If the terminal node ends up with no
        children, everything below that anchor on this path is freed.
        """
        validate_word(word, max_length=None)

        node = self.root
        anchor, anchor_idx = self.root, symbol_index(word[0])
        for ch in word:
            idx = symbol_index(ch)
            nxt = node.children[idx]
            if nxt is None:
                return 0
            if node is self.root or node.n_children > 1 or node.end_of_word > 0:
                anchor, anchor_idx = node, idx
            node = nxt

        cleared = node.end_of_word
        node.end_of_word = 0
        if cleared:
            self._size -= 1

        # still a prefix of longer words
        if node.n_children > 0:
            return cleared

        freed = self._destroy(anchor.children[anchor_idx])
        anchor.children[anchor_idx] = None
        anchor.n_children -= 1
        self._nodes -= freed
        logger.debug("removed %r (x%d), pruned %d node(s)", word, cleared, freed)
        return cleared

    def _destroy(self, node: TrieNode) -> int:
        """Recursively unlink a subtree. Returns the number of nodes freed."""
        freed = 1
        for i in range(ALPHABET_SIZE):
            if node.n_children == 0:
                break
            child = node.children[i]
            if child is not None:
                freed += self._destroy(child)
                node.children[i] = None
                node.n_children -= 1
        return freed

    def clear(self) -> int:
        """Tear down every node below the root. Returns the number freed."""
        freed = 0
        for i, child in enumerate(self.root.children):
            if child is not None:
                freed += self._destroy(child)
                self.root.children[i] = None
        self.root.n_children = 0
        self._size = 0
        self._nodes = 0
        return freed

    # lookup --------------------------------------------------------
    def find_node(self, prefix: str) -> Optional[TrieNode]:
        """
        Node reached by consuming `prefix` from the root, or None as soon as
        an edge is missing. The empty prefix resolves to the root.
        """
        validate_word(prefix, max_length=None, allow_empty=True)
        node = self.root
        for ch in prefix:
            node = node.children[symbol_index(ch)]
            if node is None:
                return None
        return node

    def count(self, word: str) -> int:
        """How many times `word` is currently stored."""
        node = self.find_node(word)
        return 0 if node is None else node.end_of_word

    def __contains__(self, word: object) -> bool:
        if not isinstance(word, str) or not word:
            return False
        node = self.root
        for ch in word:
            if ch not in ALPHABET:
                return False
            node = node.children[symbol_index(ch)]
            if node is None:
                return False
        return node.end_of_word > 0

    # convenience/debugging -----------------------------------------
    def items(self) -> Iterator[Tuple[str, int]]:
        """Yield (word, count) pairs in lexicographic order."""
        path: List[str] = []

        def _walk(node: TrieNode) -> Iterator[Tuple[str, int]]:
            if node.end_of_word > 0:
                yield "".join(path), node.end_of_word
            for child in node.iter_children():
                path.append(child.symbol)
                yield from _walk(child)
                path.pop()

        yield from _walk(self.root)

    def __iter__(self) -> Iterator[str]:
        for word, _count in self.items():
            yield word

    def __len__(self) -> int:
        return self._size

    @property
    def node_count(self) -> int:
        """Number of nodes below the root."""
        return self._nodes
