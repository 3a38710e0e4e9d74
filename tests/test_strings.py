import pytest

from cubeshell.strings import atoi, itoa, join_tokens, string_split, strsep, strtok


@pytest.mark.parametrize(
    "text, expected",
    [
        ("42", 42),
        ("  \t\n-17", -17),
        ("+8", 8),
        ("12abc", 12),
        ("abc", 0),
        ("", 0),
        (None, 0),
    ],
)
def test_atoi(text, expected):
    assert atoi(text) == expected


def test_atoi_sign_without_digits():
    assert atoi("-") == 0


@pytest.mark.parametrize("value", [0, 1, 9, 10, 255, 123456, -1, -98765])
def test_itoa_decimal_round_trip(value):
    assert atoi(itoa(value, "d")) == value


@pytest.mark.parametrize("value", [0, 15, 16, 255, 4096, 0xDEADBEEF])
def test_itoa_hex_round_trip(value):
    assert int(itoa(value, "x"), 16) == value


def test_itoa_hex_is_lower_case():
    text = itoa(0xABCDEF, "x")
    assert text == text.lower()
    assert text == "abcdef"


def test_itoa_hex_negative_is_unsigned():
    assert int(itoa(-1, "x"), 16) == (1 << 64) - 1


def test_itoa_other_base_is_unsigned_decimal():
    assert itoa(200, 10) == "200"
    assert int(itoa(-1, 10)) == (1 << 64) - 1


def test_strsep_splits_first_token():
    assert strsep("a,b,c", ",") == ("a", "b,c")


def test_strsep_any_delimiter():
    assert strsep("a;b,c", ",;") == ("a", "b,c")


def test_strsep_last_token():
    assert strsep("abc", ",") == ("abc", None)


def test_strsep_none():
    assert strsep(None, ",") == (None, None)


def test_strsep_empty_token():
    assert strsep(",x", ",") == ("", "x")


def test_strtok_skips_delimiter_runs():
    assert list(strtok("  a  bc d ", " ")) == ["a", "bc", "d"]


def test_strtok_only_delimiters():
    assert list(strtok(" , ,", " ,")) == []


def test_strtok_tokens_never_contain_delimiters():
    tokens = list(strtok("x,y;;z,,", ",;"))
    assert tokens == ["x", "y", "z"]
    assert all("," not in t and ";" not in t for t in tokens)


def test_string_split_resolves_dots():
    assert string_split("/usr/./bin/../lib", "/") == ["", "usr", "lib"]


def test_string_split_parent_on_empty_is_ignored():
    assert string_split("../a", "/") == ["a"]


def test_string_split_parent_removes_previous():
    assert string_split("a/..", "/") == []


def test_join_tokens():
    assert join_tokens(["usr", "lib"], "/") == "/usr/lib"


def test_join_tokens_empty():
    assert join_tokens([], "/") == ""


def test_split_then_join_round_trip():
    assert join_tokens(string_split("etc/./x/../shrc", "/"), "/") == "/etc/shrc"