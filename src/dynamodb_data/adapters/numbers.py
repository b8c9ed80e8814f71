"""
Number rendering and parsing.

Numbers travel as decimal text. Integers render without a fractional part and
floats always render with one (or an exponent), so the lexical shape of the
text tells the decoder which kind to rebuild.

Store limits: 38 significant digits, magnitudes from 1E-130 up to but not
including 1E+126. Zero is always allowed.
"""
import math
import re
from decimal import Decimal, InvalidOperation

from dynamodb_data.exceptions import NumberOutOfRange, NumberParse

MAX_PRECISION = 38
MIN_EXPONENT = -130
MAX_EXPONENT = 125

NUMBER_PATTERN = re.compile(r'[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?')


def is_number(value) -> bool:
    """Check if a value is a number kind (``bool`` is not).

    >>> is_number(1), is_number(1.5), is_number(Decimal('2')), is_number(True)
    (True, True, True, False)
    """
    return isinstance(value, int | float | Decimal) and not isinstance(value, bool)


def check_range(value: Decimal, path: str | None = None) -> None:
    """Raise NumberOutOfRange when a finite decimal exceeds store limits.
    """
    if not value.is_finite():
        raise NumberOutOfRange(f'{value} is not a finite number', path)
    if value.is_zero():
        return
    digits = value.normalize().as_tuple().digits
    if len(digits) > MAX_PRECISION:
        raise NumberOutOfRange(
            f'{value} has {len(digits)} significant digits, '
            f'at most {MAX_PRECISION} are supported', path)
    exponent = value.adjusted()
    if not MIN_EXPONENT <= exponent <= MAX_EXPONENT:
        raise NumberOutOfRange(
            f'{value} magnitude is outside 1E{MIN_EXPONENT}..1E{MAX_EXPONENT + 1}', path)


def format_number(value: int | float | Decimal, path: str | None = None) -> str:
    """Render a number as canonical decimal text.

    >>> format_number(0)
    '0'
    >>> format_number(-42)
    '-42'
    >>> format_number(1.0)
    '1.0'
    >>> format_number(1e16)
    '1e+16'
    >>> format_number(Decimal('12.50'))
    '12.50'
    """
    if isinstance(value, bool):
        raise NumberOutOfRange(f'{value!r} is a boolean, not a number', path)
    if isinstance(value, float):
        if math.isnan(value) or math.isinf(value):
            raise NumberOutOfRange(f'{value!r} is not a finite number', path)
        text = repr(value)
    elif isinstance(value, int):
        text = str(value)
    elif isinstance(value, Decimal):
        text = str(value)
    else:
        raise NumberOutOfRange(f'{type(value).__name__} is not a number', path)
    check_range(Decimal(text), path)
    return text


def is_integral_text(text: str) -> bool:
    """Check if decimal text has neither a fractional nor an exponent part.
    """
    return not any(c in text for c in '.eE')


def parse_number(text: str, use_decimal: bool = False,
                 path: str | None = None) -> int | float | Decimal:
    """Parse decimal text back into the number kind it was rendered from.

    >>> parse_number('0')
    0
    >>> parse_number('-17')
    -17
    >>> parse_number('2.5')
    2.5
    >>> parse_number('1e+16')
    1e+16
    >>> parse_number('2.50', use_decimal=True)
    Decimal('2.50')
    """
    if not isinstance(text, str) or not NUMBER_PATTERN.fullmatch(text):
        raise NumberParse(f'Malformed number text {text!r}', path)
    if is_integral_text(text):
        try:
            return int(text)
        except ValueError as exc:
            raise NumberParse(f'Number text {text[:20]!r}... is too long', path) from exc
    if use_decimal:
        try:
            return Decimal(text)
        except InvalidOperation as exc:
            raise NumberParse(f'Malformed number text {text!r}', path) from exc
    result = float(text)
    if math.isinf(result):
        raise NumberParse(f'Number text {text!r} overflows a float', path)
    return result


if __name__ == '__main__':
    __import__('doctest').testmod(optionflags=4 | 8 | 32)
