import pytest

from ftkit.transform import (
    split,
    strjoin,
    striteri,
    strlcat,
    strlcpy,
    strmapi,
    strtrim,
    substr,
)

SENTENCE = "El gato estaba en el tejado"


def test_substr_extracts_word():
    assert substr(SENTENCE, 3, 4) == "gato"


def test_substr_length_clipped_to_end():
    assert substr(SENTENCE, 21, 100) == "tejado"


@pytest.mark.parametrize("start", [len(SENTENCE), len(SENTENCE) + 5])
def test_substr_start_at_or_past_end_is_empty(start):
    assert substr(SENTENCE, start, 3) == ""


@pytest.mark.parametrize("start,length", [(-1, 2), (0, -2)])
def test_substr_rejects_negative(start, length):
    with pytest.raises(ValueError):
        substr(SENTENCE, start, length)


def test_strjoin_concatenates():
    left, right = "hola", " que tal"
    joined = strjoin(left, right)
    assert joined.startswith(left)
    assert joined.endswith(right)
    assert len(joined) == len(left) + len(right)


def test_strjoin_with_empty():
    assert strjoin("", "gato") == "gato"
    assert strjoin("gato", "") == "gato"


def test_strtrim_both_ends():
    assert strtrim("  xxhola  x", " x") == "hola"


def test_strtrim_keeps_inner_characters():
    assert strtrim("--hola-que--", "-") == "hola-que"


def test_strtrim_everything_trimmed():
    assert strtrim("aaaa", "a") == ""


def test_strtrim_empty_set_is_identity():
    assert strtrim("  hola  ", "") == "  hola  "


def test_split_drops_empty_words():
    assert split("hola    que tal", " ") == ["hola", "que", "tal"]


def test_split_leading_and_trailing_separators():
    assert split("  hola  ", " ") == ["hola"]


def test_split_only_separators():
    assert split("    ", " ") == []


def test_split_rejects_multichar_separator():
    with pytest.raises(ValueError):
        split("a,b", ",,")


def test_strlcpy_fits():
    src = "hola que"
    assert strlcpy(src, 10) == (src, len(src))


def test_strlcpy_truncates():
    src = "hola que"
    copied, total = strlcpy(src, 5)
    assert copied == "hola"
    assert total == len(src)


def test_strlcpy_zero_size():
    assert strlcpy("hola", 0) == ("", 4)


def test_strlcat_zero_size():
    assert strlcat("", "123", 0) == ("", 3)


def test_strlcat_fits():
    result, total = strlcat("ab", "cd", 10)
    assert result == strjoin("ab", "cd")
    assert total == len(result)


def test_strlcat_truncates():
    result, total = strlcat("ab", "cdef", 4)
    assert result == "abc"
    assert total == len("ab") + len("cdef")


def test_strlcat_size_smaller_than_dst():
    result, total = strlcat("abcdef", "xyz", 3)
    assert result == "abcdef"
    assert total == 3 + len("xyz")


def test_strlcat_size_equal_to_dst():
    result, total = strlcat("abc", "xyz", 3)
    assert result == "abc"
    assert total == 6


def test_strmapi_uppercases():
    assert strmapi("probando", lambda i, c: c.upper()) == "probando".upper()


def test_strmapi_passes_index():
    assert strmapi("abc", lambda i, c: str(i)) == "012"


def test_striteri_in_place():
    chars = list("probando")
    striteri(chars, lambda i, c: c.upper() if i % 2 == 0 else None)
    assert "".join(chars) == "PrObAnDo"


def test_striteri_bytearray():
    data = bytearray(b"gato")
    striteri(data, lambda i, b: b - 32)
    assert bytes(data) == b"GATO"