# tests/test_autocomplete.py
# the three completion strategies and the mode dispatcher

import pytest

from trie_autocompleter.core.autocomplete import (
    AutocompleteMode,
    autocomplete,
    first_lexicographic,
    most_frequent,
    parse_mode,
    shortest,
)
from trie_autocompleter.core.errors import InvalidInputError


def test_prefix_that_is_a_word_completes_to_itself(make_trie):
    t = make_trie("do", "dog", "dot")
    assert autocomplete(t, "do", 1) == ["do"]
    assert autocomplete(t, "do", 2) == ["do"]


def test_lexicographic_descends_in_symbol_order(make_trie):
    t = make_trie("zebra", "carpet", "carbon", "cart")
    assert autocomplete(t, "car", AutocompleteMode.LEXICOGRAPHIC) == ["carbon"]
    assert autocomplete(t, "z", 1) == ["zebra"]


def test_lexicographic_prefers_shallow_word_on_same_branch(make_trie):
    t = make_trie("abcd", "abc", "abd")
    assert autocomplete(t, "a", 1) == ["abc"]


def test_shortest_tie_breaks_by_symbol_order(make_trie):
    t = make_trie("dog", "dot", "dodge")
    assert autocomplete(t, "do", 2) == ["dog"]


def test_shortest_beats_lexicographic(make_trie):
    t = make_trie("abcdef", "az")
    assert autocomplete(t, "a", 1) == ["abcdef"]
    assert autocomplete(t, "a", 2) == ["az"]


def test_most_frequent(make_trie):
    t = make_trie("cap", "cap", "car")
    assert autocomplete(t, "ca", 3) == ["cap"]


def test_most_frequent_tie_keeps_first(make_trie):
    t = make_trie("car", "cap", "cab", "cab", "car")
    assert autocomplete(t, "ca", 3) == ["cab"]


def test_most_frequent_counts_the_prefix_itself(make_trie):
    t = make_trie("car", "car", "car", "cart", "cart")
    assert autocomplete(t, "car", 3) == ["car"]


def test_most_frequent_deep_word_wins(make_trie):
    t = make_trie("an", "ant", "antelope", "antelope")
    assert autocomplete(t, "a", 3) == ["antelope"]


def test_mode_all_runs_every_strategy_in_order(make_trie):
    t = make_trie("cards", "cat", "cat", "car")
    assert autocomplete(t, "ca", 0) == ["car", "car", "cat"]


def test_missing_prefix(make_trie):
    t = make_trie("cat")
    assert autocomplete(t, "dog", 0) == [None, None, None]
    assert autocomplete(t, "cats", 2) == [None]


def test_empty_trie(trie):
    assert autocomplete(trie, "a", 0) == [None, None, None]
    assert autocomplete(trie, "", 1) == [None]


def test_empty_prefix_covers_whole_trie(make_trie):
    t = make_trie("b", "ab", "ab")
    assert autocomplete(t, "", 0) == ["ab", "b", "ab"]


def test_strategies_on_subtree_without_words():
    # a bare node: no word ends anywhere below
    from trie_autocompleter.core.trie import TrieNode
    node = TrieNode("x")
    assert first_lexicographic(node, "x") is None
    assert shortest(node, "x") is None
    assert most_frequent(node, "x") is None


@pytest.mark.parametrize("mode", [0, 1, 2, 3, "2", AutocompleteMode.SHORTEST])
def test_parse_mode_accepts(mode):
    assert parse_mode(mode) == AutocompleteMode(int(mode))


@pytest.mark.parametrize("mode", [4, -1, "x", None, "1.5"])
def test_parse_mode_rejects(mode, make_trie):
    with pytest.raises(InvalidInputError):
        parse_mode(mode)
    with pytest.raises(InvalidInputError):
        autocomplete(make_trie("cat"), "c", mode)


def test_queries_do_not_mutate(make_trie):
    t = make_trie("dog", "dot", "dodge", "dog")
    before = list(t.items()), t.node_count
    for mode in range(4):
        autocomplete(t, "do", mode)
    assert (list(t.items()), t.node_count) == before
