import pytest

from gemheist import strops


def test_find_char_first_occurrence():
    s = "teste"
    index = strops.find_char(s, "e")
    assert index == s.index("e")
    assert s[index:] == "este"


def test_find_char_missing_returns_none():
    assert strops.find_char("teste", "z") is None


def test_find_char_nul_gives_end():
    assert strops.find_char("teste", "\0") == len("teste")


def test_find_char_rejects_long_needle():
    with pytest.raises(ValueError):
        strops.find_char("abc", "ab")


def test_find_last_char():
    s = "teste"
    index = strops.find_last_char(s, "t")
    assert s[index:] == "te"
    assert strops.find_last_char(s, "q") is None
    assert strops.find_last_char(s, "\0") == len(s)


def test_compare_equal_and_bounded():
    assert strops.compare("abc", "abc", 3) == 0
    assert strops.compare("abcX", "abcY", 3) == 0
    assert strops.compare("anything", "other", 0) == 0


def test_compare_sign_and_difference():
    assert strops.compare("abd", "abc", 3) == ord("d") - ord("c")
    assert strops.compare("abc", "abd", 3) < 0


def test_compare_shorter_string_counts_as_nul():
    assert strops.compare("ab", "abc", 5) == -ord("c")
    assert strops.compare("ab", "ab", 10) == 0


def test_find_bounded_worked_example():
    haystack = "cououaisssno"
    index = strops.find_bounded(haystack, "n", 12)
    assert haystack[index:] == "no"


def test_find_bounded_respects_length():
    haystack = "cououaisssno"
    assert strops.find_bounded(haystack, "no", 11) is None
    assert strops.find_bounded(haystack, "no", len(haystack)) == haystack.index("no")


def test_find_bounded_empty_needle():
    assert strops.find_bounded("abc", "", 0) == 0


def test_substring_worked_example():
    assert strops.substring("hola", 0, 10) == "hola"


def test_substring_past_end_is_empty():
    assert strops.substring("hola", 4, 2) == ""
    assert strops.substring("hola", 100, 2) == ""


def test_substring_length_invariant():
    s = "abcdefgh"
    for start in range(len(s)):
        for length in range(len(s) + 2):
            part = strops.substring(s, start, length)
            assert len(part) == min(length, len(s) - start)
            assert s.startswith(part, start)


def test_substring_negative_rejected():
    with pytest.raises(ValueError):
        strops.substring("abc", -1, 2)


def test_join():
    assert strops.join("foo", "bar") == "foobar"
    assert strops.join("", "") == ""
    with pytest.raises(TypeError):
        strops.join(None, "x")


def test_trim_both_ends():
    assert strops.trim("xxhixyx", "xy") == "hi"


def test_trim_all_removed_and_empty():
    assert strops.trim("aaaa", "a") == ""
    assert strops.trim("", "a") == ""
    assert strops.trim(" keep ", "") == " keep "


def test_split_drops_empty_words():
    assert strops.split("  hello  world ", " ") == ["hello", "world"]
    assert strops.split("", " ") == []
    assert strops.split("   ", " ") == []


def test_split_rejoin_invariant():
    s = ",a,,b,c,,"
    words = strops.split(s, ",")
    assert ",".join(words) == "a,b,c"
    assert all("," not in w and w for w in words)


def test_split_bad_separator():
    with pytest.raises(ValueError):
        strops.split("a b", "")


def test_map_indexed():
    result = strops.map_indexed("abcd", lambda i, c: c.upper() if i % 2 == 0 else c)
    assert result == "AbCd"


def test_iter_indexed_in_place():
    chars = list("abc")
    seen = []

    def visit(index, ch):
        seen.append(index)
        return ch.upper() if index == 1 else None

    assert strops.iter_indexed(chars, visit) is None
    assert chars == ["a", "B", "c"]
    assert seen == [0, 1, 2]


def test_bounded_copy_truncates():
    text, total = strops.bounded_copy("hello", 3)
    assert text == "he"
    assert total == len("hello")


def test_bounded_copy_fits_and_zero():
    assert strops.bounded_copy("hi", 10) == ("hi", 2)
    assert strops.bounded_copy("hi", 0) == ("", 2)


def test_bounded_concat_fits():
    assert strops.bounded_concat("foo", "bar", 10) == ("foobar", 6)


def test_bounded_concat_truncates_to_size_minus_one():
    text, total = strops.bounded_concat("foo", "barbaz", 6)
    assert len(text) == 5
    assert text.startswith("foo")
    assert total == len("foo") + len("barbaz")


def test_bounded_concat_dest_fills_buffer():
    text, total = strops.bounded_concat("foobar", "xyz", 4)
    assert text == "foobar"
    assert total == 4 + len("xyz")


def test_bounded_concat_negative_size():
    with pytest.raises(ValueError):
        strops.bounded_concat("a", "b", -1)