import pytest

from berchk.strbuild import atoi, itoa, split, strdup, strjoin, strmapi, strtrim, substr


@pytest.mark.parametrize(
    "text, expected",
    [
        ("42", 42),
        ("   42", 42),
        ("-42", -42),
        ("+42", 42),
        ("0042", 42),
        ("-2147483648", -2147483648),
        ("2147483647", 2147483647),
        ("", 0),
        ("invalid123", 0),
        ("123abc456", 123),
        ("   -42abc", -42),
        ("-+42", 0),
        ("----42", 0),
        ("  00000000000123456789", 123456789),
    ],
)
def test_atoi_cases(text, expected):
    assert atoi(text) == expected


def test_atoi_wraps_past_int_range():
    assert atoi("2147483648") == -2147483648
    assert atoi("-2147483649") == 2147483647


def test_atoi_stops_at_nul():
    assert atoi("12\x0034") == 12


@pytest.mark.parametrize("number", [0, 1, -1, 1234, -1234, 2147483647, -2147483648])
def test_itoa_round_trip(number):
    text = itoa(number)
    assert atoi(text) == number
    assert text == str(number)


def test_itoa_pins_extremes():
    assert itoa(-2147483648) == "-2147483648"
    assert itoa(0) == "0"


def test_split_words():
    words = split("hello world how are you today", " ")
    assert words == ["hello", "world", "how", "are", "you", "today"]


def test_split_drops_empty_words():
    assert split("  a  b ", " ") == ["a", "b"]
    assert split("", " ") == []
    assert split("   ", " ") == []


def test_split_nul_separator_keeps_whole_text():
    assert split("abc def", "\0") == ["abc def"]


def test_split_rejects_bad_separator():
    with pytest.raises(ValueError):
        split("a,b", ",,")


def test_strtrim_source_cases():
    assert strtrim("123hello world123", "123") == "hello world"
    assert strtrim("hello world", "123") == "hello world"


def test_strtrim_everything_and_nothing():
    assert strtrim("xxxx", "x") == ""
    assert strtrim("xax", "") == "xax"


def test_substr_source_case():
    assert substr("hello world how are you", 6, 10) == "world how "


def test_substr_past_end_and_clamping():
    assert substr("abc", 3, 2) == ""
    assert substr("abc", 10, 2) == ""
    assert substr("abc", 1, 100) == "bc"


def test_substr_rejects_negative():
    with pytest.raises(ValueError):
        substr("abc", -1, 2)
    with pytest.raises(ValueError):
        substr("abc", 0, -2)


def test_strjoin():
    assert strjoin("Hello, ", "World!") == "Hello, World!"
    assert strjoin("", "") == ""


def test_strdup_copies_up_to_nul():
    assert strdup("Test string") == "Test string"
    assert strdup("") == ""
    assert strdup("ab\0cd") == "ab"


def test_strmapi_uppercase():
    assert strmapi("hello world", lambda i, c: c.upper()) == "HELLO WORLD"


def test_strmapi_passes_index():
    seen = []
    strmapi("abc", lambda i, c: seen.append((i, c)) or c)
    assert seen == [(0, "a"), (1, "b"), (2, "c")]


def test_strmapi_nul_result_ends_string():
    assert strmapi("abcd", lambda i, c: "\0" if i == 2 else c) == "ab"


def test_strmapi_rejects_multi_char_result():
    with pytest.raises(ValueError):
        strmapi("ab", lambda i, c: c * 2)