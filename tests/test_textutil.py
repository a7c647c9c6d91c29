import pytest

from mysh.textutil import (
    clean_line,
    count_char,
    count_lines,
    find_entry,
    leading_int,
    lookup,
    power,
    selected_field,
    signed_number,
    split_words,
)

ENTRIES = ["HOME=/home/user", "PATH=/bin:/usr/bin:/opt/bin", "PWD=/tmp"]


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("  ls   -l \t\n", "ls -l"),
        ("\techo\thi\n", "echo hi"),
        ("pwd", "pwd"),
        ("\n", ""),
        ("cd  ..   \n", "cd .."),
    ],
)
def test_clean_line(raw, expected):
    assert clean_line(raw) == expected


def test_clean_line_is_idempotent():
    once = clean_line("  setenv \t A    b  \n")
    assert clean_line(once) == once


@pytest.mark.parametrize(
    "line, expected",
    [
        ("setenv A b", ["setenv", "A", "b"]),
        ("a  b", ["a", "", "b"]),
        ("", [""]),
        ("env", ["env"]),
    ],
)
def test_split_words(line, expected):
    assert split_words(line) == expected


def test_split_words_count_follows_spaces():
    line = "one two three four"
    assert len(split_words(line)) == count_char(line, " ") + 1


@pytest.mark.parametrize(
    "text, expected",
    [("42", 42), ("7abc", 7), ("-3", 0), ("", 0), ("0012", 12)],
)
def test_leading_int(text, expected):
    assert leading_int(text) == expected


@pytest.mark.parametrize(
    "text, expected",
    [("-8", -8), ("--5", 5), ("-+-12x", 12), ("+", 0), ("31", 31)],
)
def test_signed_number(text, expected):
    assert signed_number(text) == expected


@pytest.mark.parametrize("base, exponent", [(2, 10), (3, 4), (7, 1), (10, 3)])
def test_power_matches_exponentiation(base, exponent):
    assert power(base, exponent) == base ** exponent


def test_power_edge_cases():
    assert power(5, 0) == 1
    assert power(3, -1) == 0


def test_count_char_and_lines():
    assert count_char("a:b:c", ":") == 2
    assert count_lines("a\nb\n") == 2
    assert count_lines("no newline") == 0


def test_find_entry():
    assert find_entry(ENTRIES, "PATH=") == 1
    assert find_entry(ENTRIES, "PW") == 2
    assert find_entry(ENTRIES, "OLDPWD=") is None
    assert find_entry([], "HOME=") is None


def test_lookup():
    assert lookup(ENTRIES, "PWD=") == "/tmp"
    assert lookup(ENTRIES, "HOME=") == "/home/user"


def test_lookup_missing_raises():
    with pytest.raises(KeyError):
        lookup(ENTRIES, "SHELL=")


def test_selected_field():
    assert selected_field(ENTRIES, "PATH=", ":", 0) == "/bin"
    assert selected_field(ENTRIES, "PATH=", ":", 1) == "/usr/bin"
    assert selected_field(ENTRIES, "PATH=", ":", 2) == "/opt/bin"


def test_selected_field_covers_every_field():
    value = lookup(ENTRIES, "PATH=")
    fields = [
        selected_field(ENTRIES, "PATH=", ":", index)
        for index in range(count_char(value, ":") + 1)
    ]
    assert ":".join(fields) == value


@pytest.mark.parametrize("index", [3, -1])
def test_selected_field_bad_index(index):
    with pytest.raises(IndexError):
        selected_field(ENTRIES, "PATH=", ":", index)


def test_selected_field_missing_entry():
    with pytest.raises(KeyError):
        selected_field(ENTRIES, "LD_PATH=", ":", 0)