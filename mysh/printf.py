"""A small printf supporting d i c f s x X o u p e E and %%."""

import math
import sys

_LOWER_DIGITS = "0123456789abcdef"
_UPPER_DIGITS = "0123456789ABCDEF"


def _int32(value):
    value = int(value) & 0xFFFFFFFF
    return value - (1 << 32) if value & 0x80000000 else value


def int_to_str(num):
    """Decimal digits of a non-negative number; zero gives an empty string."""
    if num < 0:
        raise ValueError("negative numbers are not supported")
    return str(num) if num else ""


def format_int(number, precision=-1):
    """Decimal integer, zero-padded up to ``precision`` digits.

    Only the digits of a positive value count toward the precision, so
    zero and negative values receive the full padding before their text.
    """
    padding = 0
    if precision != -1:
        padding = precision
        remaining = number
        while remaining > 0:
            remaining //= 10
            padding -= 1
    return "0" * max(padding, 0) + str(number)


def format_str(text, precision=-1):
    """The text, cut to ``precision`` characters when one is given."""
    return text if precision < 0 else text[:precision]


def format_float(number, precision=-1):
    """Fixed-point text with ``precision`` decimals (6 when -1)."""
    number = float(number)
    if not math.isfinite(number):
        raise ValueError("cannot format a non-finite number")
    if precision < -1:
        raise ValueError(f"invalid precision {precision}")
    dot = 6 if precision == -1 else precision
    steps = dot + 1
    parts = []
    if number < 0:
        parts.append("-")
        number = -number
    while steps:
        whole = int(number)
        number = (number - whole) * 10
        if number > 9:
            number = 0.0
            whole += 1
        steps -= 1
        if steps == 0 and number >= 5:
            whole += 1
        parts.append(str(whole))
        if steps == dot and dot >= 1:
            parts.append(".")
    return "".join(parts)


def format_exponent(number, upper=False, precision=6):
    """Scientific notation with a mantissa in [1, 10)."""
    number = float(number)
    if number == 0 or not math.isfinite(number):
        raise ValueError("cannot format zero or a non-finite number in exponent form")
    sign = ""
    if number < 0:
        sign = "-"
        number = -number
    exponent = 0
    while number < 1:
        exponent -= 1
        number *= 10
    while number >= 10:
        exponent += 1
        number /= 10
    mark = "E" if upper else "e"
    exponent_sign = "+" if exponent >= 0 else "-"
    return f"{sign}{format_float(number, precision)}{mark}{exponent_sign}0{abs(exponent)}"


def format_base(number, base, upper=False, width=-1):
    """Digits of a non-negative number in ``base``, zero-padded to ``width``."""
    if number < 0:
        raise ValueError("negative numbers are not supported")
    if not 2 <= base <= 16:
        raise ValueError(f"unsupported base {base}")
    digits = _UPPER_DIGITS if upper else _LOWER_DIGITS
    out = []
    while True:
        number, remainder = divmod(number, base)
        out.append(digits[remainder])
        if number == 0:
            break
    return "".join(reversed(out)).rjust(width, "0")


def _next(values):
    try:
        return next(values)
    except StopIteration:
        raise TypeError("not enough arguments for format string") from None


def _char(value):
    if isinstance(value, str):
        if len(value) != 1:
            raise TypeError("%c requires a single character")
        return value
    return chr(_int32(value) & 0xFF)


def _convert(conversion, precision, values):
    """Text for one conversion, or None when the conversion is unknown."""
    if conversion in ("d", "i"):
        return format_int(_int32(_next(values)), precision)
    if conversion == "c":
        return _char(_next(values))
    if conversion == "f":
        return format_float(_next(values), precision)
    if conversion == "s":
        return format_str(str(_next(values)), precision)
    if conversion == "x":
        return format_base(_int32(_next(values)), 16, False, precision)
    if conversion == "X":
        return format_base(_int32(_next(values)), 16, True, precision)
    if conversion == "p":
        return "0x" + format_base(int(_next(values)), 16, False, precision)
    if conversion == "e":
        return format_exponent(_next(values), False)
    if conversion == "E":
        return format_exponent(_next(values), True)
    if conversion == "u":
        return format_base(_int32(_next(values)), 10, False, precision)
    if conversion == "o":
        return format_base(_int32(_next(values)), 8, True, precision)
    if conversion == "%":
        return "%"
    return None


def sprintf(fmt, *args):
    """Format ``args`` according to ``fmt`` and return the text.

    An unknown conversion is replaced by a bare ``%`` (nothing when a
    precision was given) and its letter is dropped.
    """
    values = iter(args)
    out = []
    position = 0
    length = len(fmt)
    while position < length:
        char = fmt[position]
        position += 1
        if char != "%":
            out.append(char)
            continue
        precision = -1
        explicit = False
        if position < length and fmt[position] == ".":
            explicit = True
            position += 1
            start = position
            while position < length and fmt[position] in "0123456789":
                position += 1
            precision = int(fmt[start:position] or 0)
        conversion = fmt[position] if position < length else ""
        position += 1
        text = _convert(conversion, precision, values)
        if text is not None:
            out.append(text)
        elif not explicit:
            out.append("%")
    return "".join(out)


def printf(fmt, *args, file=None):
    """Write the formatted text to ``file`` (stdout by default)."""
    text = sprintf(fmt, *args)
    stream = file if file is not None else sys.stdout
    stream.write(text)
    stream.flush()
    return len(text)