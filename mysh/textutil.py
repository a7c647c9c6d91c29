"""Small text helpers for command lines and ``NAME=value`` entries."""

import re

_BLANKS = re.compile(r"[ \t]+")
_DIGITS = re.compile(r"[0-9]*")
_SIGNED = re.compile(r"([+-]*)([0-9]*)")


def clean_line(line):
    """Drop leading blanks, squeeze blank runs to one space, trim the end."""
    return _BLANKS.sub(" ", line.lstrip(" \t")).rstrip(" \n")


def split_words(line):
    """Split on every single space; adjacent spaces give empty words."""
    return line.split(" ")


def leading_int(text):
    """Value of the decimal digits at the start of ``text`` (0 if none)."""
    digits = _DIGITS.match(text).group()
    return int(digits) if digits else 0


def signed_number(text):
    """Read any run of signs followed by decimal digits."""
    match = _SIGNED.match(text)
    signs, digits = match.groups()
    value = int(digits) if digits else 0
    return -value if signs.count("-") % 2 else value


def power(base, exponent):
    """``base`` raised to ``exponent``; negative exponents give 0."""
    if exponent < 0:
        return 0
    return base ** exponent


def count_char(text, char):
    """Number of occurrences of ``char`` in ``text``."""
    return text.count(char)


def count_lines(text):
    """Number of newline characters in ``text``."""
    return text.count("\n")


def find_entry(entries, prefix):
    """Index of the first entry starting with ``prefix``, or None."""
    return next(
        (index for index, entry in enumerate(entries) if entry.startswith(prefix)),
        None,
    )


def lookup(entries, prefix):
    """Rest of the first entry starting with ``prefix``.

    Raises KeyError when no entry matches.
    """
    index = find_entry(entries, prefix)
    if index is None:
        raise KeyError(prefix)
    return entries[index][len(prefix):]


def selected_field(entries, prefix, separator, index):
    """Field number ``index`` of the value found by :func:`lookup`."""
    if index < 0:
        raise IndexError(f"field index {index} is negative")
    fields = lookup(entries, prefix).split(separator)
    if index >= len(fields):
        raise IndexError(f"no field {index} in {prefix!r}")
    return fields[index]