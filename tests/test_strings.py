import pytest

from fdfview.strings import (
    bounded_concat,
    bounded_copy,
    compare_n,
    find_bounded,
    find_char,
    iter_indexed,
    join,
    map_indexed,
    rfind_char,
    split_words,
    substring,
    trim,
)


@pytest.mark.parametrize(
    "text",
    ["a b c", "  leading", "trailing  ", "   ", "", "one", "x  y   z"],
)
def test_split_words_invariants(text):
    words = split_words(text, " ")
    assert all(words)
    assert all(" " not in w for w in words)
    assert "".join(words) == text.replace(" ", "")


def test_split_words_map_row():
    assert split_words("0 10,0xFF  3\n", " ") == ["0", "10,0xFF", "3\n"]


def test_split_words_integer_separator():
    assert split_words("a,b,,c", ord(",")) == ["a", "b", "c"]


def test_split_words_rejects_long_separator():
    with pytest.raises(ValueError):
        split_words("abc", "ab")


@pytest.mark.parametrize("text,c", [("hello", "l"), ("abcabc", "c"), ("x", "x")])
def test_find_char_first_occurrence(text, c):
    index = find_char(text, c)
    assert text[index] == c
    assert c not in text[:index]


@pytest.mark.parametrize("text,c", [("hello", "l"), ("abcabc", "c"), ("x", "x")])
def test_rfind_char_last_occurrence(text, c):
    index = rfind_char(text, c)
    assert text[index] == c
    assert c not in text[index + 1:]


def test_find_char_missing_and_nul():
    assert find_char("abc", "z") is None
    assert rfind_char("abc", "z") is None
    assert find_char("abc", "\0") == len("abc")
    assert rfind_char("abc", 0) == len("abc")


def test_find_bounded():
    big = "foo bar baz"
    assert find_bounded(big, "", 0) == 0
    assert find_bounded(big, "bar", len(big)) == big.index("bar")
    assert find_bounded(big, "bar", big.index("bar") + 2) is None
    assert find_bounded(big, "bar", big.index("bar") + 3) == big.index("bar")
    assert find_bounded(big, "qux", len(big)) is None


def test_compare_n():
    assert compare_n("abc", "abc", 3) == 0
    assert compare_n("abc", "abd", 2) == 0
    assert compare_n("abc", "abd", 3) < 0
    assert compare_n("abd", "abc", 3) > 0
    assert compare_n("a", "", 1) == ord("a")
    assert compare_n("", "", 5) == 0
    assert compare_n("abc", "xyz", 0) == 0


def test_compare_n_antisymmetric():
    for s1, s2 in [("hello", "help"), ("a", "ab"), ("zz", "z")]:
        assert compare_n(s1, s2, 10) == -compare_n(s2, s1, 10)


def test_substring():
    text = "hello world"
    part = substring(text, 1, 3)
    assert len(part) == 3
    assert text.startswith(part, 1)
    assert substring(text, 50, 3) == ""
    assert substring(text, 6, 100) == "world"
    with pytest.raises(ValueError):
        substring(text, -1, 2)


def test_join():
    assert join("foo", "bar") == "foobar"
    assert join("", "x") == "x"
    assert join("x", "") == "x"


def test_trim():
    assert trim("xxhixx", "x") == "hi"
    assert trim("  \t", " \t") == ""
    assert trim("abc", None) == "abc"
    assert trim("abc", "") == "abc"


def test_bounded_copy():
    src = "hello"
    copied, total = bounded_copy(src, 3)
    assert total == len(src)
    assert len(copied) == 2
    assert src.startswith(copied)
    assert bounded_copy(src, 100) == (src, len(src))
    assert bounded_copy(src, 0) == ("", len(src))


def test_bounded_concat():
    assert bounded_concat("ab", "cd", 10) == ("abcd", 4)
    result, total = bounded_concat("ab", "cdef", 4)
    assert len(result) == 3
    assert result.startswith("ab")
    assert total == len("ab") + len("cdef")
    assert bounded_concat("abcdef", "gh", 3) == ("abcdef", 3 + len("gh"))
    assert bounded_concat("ab", "cd", 0) == ("ab", len("cd"))


def test_map_indexed_order_and_result():
    calls = []

    def upper_at(index, ch):
        calls.append(index)
        return ch.upper()

    assert map_indexed("abc", upper_at) == "ABC"
    assert calls == [2, 1, 0]


def test_iter_indexed_replaces_and_keeps():
    calls = []

    def every_other(index, ch):
        calls.append(index)
        return "_" if index % 2 else None

    assert iter_indexed("abcd", every_other) == "a_c_"
    assert calls == [0, 1, 2, 3]