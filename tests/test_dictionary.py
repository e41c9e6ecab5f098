import pytest

from wordtrie.dictionary import AddResult, PrefixDictionary


@pytest.fixture
def animals():
    d = PrefixDictionary()
    for w in ["cat", "car", "cart", "dog"]:
        assert d.add(w) is AddResult.ADDED
    return d


def test_scenario(animals):
    d = animals
    assert sorted(d.query("ca*")) == ["car", "cart", "cat"]
    assert d.contains("car") is True
    assert d.delete("car") == "car"
    assert sorted(d.query("ca*")) == ["cart", "cat"]
    assert d.count_words() == 3
    assert d.all_words_sorted() == ["cart", "cat", "dog"]


@pytest.mark.parametrize("raw", [None, "", "   ", "\t\n"])
def test_invalid_input_is_a_no_op(animals, raw):
    d = animals
    assert d.add(raw) is AddResult.INVALID
    assert d.delete(raw) is None
    assert d.contains(raw) is False
    assert d.query(raw) == []
    assert d.count_words() == 4


def test_normalize():
    assert PrefixDictionary.normalize("  word\t") == "word"
    assert PrefixDictionary.normalize(" ") is None
    assert PrefixDictionary.normalize(None) is None


def test_whitespace_is_trimmed():
    d = PrefixDictionary()
    assert d.add("  hello ") is AddResult.ADDED
    assert d.contains("hello") is True
    assert d.query(" hello  ") == ["hello"]
    assert d.delete("hello  ") == "hello"


def test_duplicate_counts_once():
    d = PrefixDictionary()
    assert d.add("word") is AddResult.ADDED
    assert d.add("word") is AddResult.DUPLICATE
    assert d.count_words() == 1
    assert len(d) == 1


def test_case_sensitive():
    d = PrefixDictionary()
    assert d.add("Word") is AddResult.ADDED
    assert d.add("word") is AddResult.ADDED
    assert d.count_words() == 2
    assert "Word" in d
    assert "WORD" not in d
    assert d.query("W*") == ["Word"]


def test_delete_missing_leaves_counter(animals):
    d = animals
    assert d.delete("ca") is None
    assert d.delete("cow") is None
    assert d.delete("carts") is None
    assert d.count_words() == 4


def test_delete_then_contains(animals):
    d = animals
    assert d.delete("cart") == "cart"
    assert d.contains("cart") is False
    assert d.contains("car") is True
    assert d.delete("cart") is None


def test_delete_all_prunes_tree(animals):
    d = animals
    for w in ["cat", "car", "cart", "dog"]:
        assert d.delete(w) == w
    assert d.count_words() == 0
    assert d.all_words_sorted() == []
    assert d.trie.node_count() == 1

    assert d.add("car") is AddResult.ADDED
    assert d.query("*") == ["car"]


def test_count_matches_contains():
    d = PrefixDictionary()
    words = ["a", "ab", "abc", "b", "ba", "ab"]
    d.add_many(words)
    d.delete("ab")
    d.delete("zz")
    stored = [w for w in set(words) if d.contains(w)]
    assert d.count_words() == len(stored) == 4


def test_add_many_returns_new_words():
    d = PrefixDictionary()
    assert d.add_many(["one", "two", "one", " ", "three"]) == 3
    assert d.count_words() == 3


def test_query_exact(animals):
    assert animals.query("cat") == ["cat"]
    assert animals.query("ca") == []


def test_query_star_lists_everything(animals):
    d = animals
    everything = d.query("*")
    assert sorted(everything) == sorted(d.all_words_sorted())
    assert len(everything) == len(set(everything)) == d.count_words()


def test_query_prefix_includes_full_word(animals):
    assert sorted(animals.query("car*")) == ["car", "cart"]
    assert animals.query("cart*") == ["cart"]
    assert animals.query("cow*") == []


def test_query_matches_prefix_filter():
    d = PrefixDictionary()
    words = ["alpha", "alphabet", "alp", "beta", "al", "a", "b"]
    d.add_many(words)
    for prefix in ["", "a", "al", "alp", "alpha", "alphabet", "b", "x"]:
        expected = sorted(w for w in words if w.startswith(prefix))
        assert sorted(d.query(prefix + "*")) == expected


def test_embedded_wildcard_is_literal():
    d = PrefixDictionary()
    d.add_many(["ab", "a*b", "a*bc"])
    assert d.query("a*b") == ["a*b"]
    assert d.query("a*c") == []
    assert sorted(d.query("a**")) == ["a*b", "a*bc"]


def test_dictionaries_do_not_share_state():
    first = PrefixDictionary()
    second = PrefixDictionary()
    first.add("only")
    assert second.count_words() == 0
    assert second.contains("only") is False


def test_collation_is_configurable():
    d = PrefixDictionary(collation="codepoint")
    d.add_many(["b", "B", "a", "A"])
    assert d.all_words_sorted() == ["A", "B", "a", "b"]

    d = PrefixDictionary(collation=len)
    d.add_many(["ccc", "a", "bb"])
    assert d.all_words_sorted() == ["a", "bb", "ccc"]


def test_unknown_collation():
    with pytest.raises(ValueError):
        PrefixDictionary(collation="klingon")
