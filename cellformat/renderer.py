from decimal import Decimal
from functools import lru_cache
import logging
import math
import numbers
import operator

from .builder import parse
from .structs import LiteralPart, Percent, RenderResult


logger = logging.getLogger(__name__)

CACHE_SIZE = 256

_comparisons = {
    '>': operator.gt,
    '<': operator.lt,
    '>=': operator.ge,
    '<=': operator.le,
    '=': operator.eq,
    '<>': operator.ne,
}


class NumberFormat:
    '''
    A parsed number format. Parse once, then render any number of values:

        >>> NumberFormat('#,##0.00').render(1234.5)
        RenderResult(text='1,234.50', color=None)
    '''
    def __init__(self, format):
        self.format = format
        self.ast = parse(format)

    def __repr__(self):
        return f'NumberFormat({self.format!r})'

    @property
    def sections(self):
        return self.ast.sections

    def render(self, value):
        return _render_ast(self.ast, value)


@lru_cache(maxsize=CACHE_SIZE)
def _compile(format):
    return NumberFormat(format)


def render(value, format):
    '''
    Renders a number or a string through a spreadsheet number format.
    Returns a RenderResult of (text, color).
    '''
    if not isinstance(format, str):
        raise TypeError(f'Expected str, received {type(format).__name__}')
    return _compile(format).render(value)


def _render_ast(ast, value):
    value = _check_value(value)
    section = select_section(ast, value)

    if section is None:
        logger.debug('No section matches %r; rendering it as plain text', value)
        return RenderResult(plain_text(value), None)

    if section.condition is not None and not evaluate(section.condition, value):
        logger.debug('Condition %r rejects %r; rendering it as plain text',
            section.condition, value)
        return RenderResult(plain_text(value), None)

    if isinstance(value, str):
        text = _render_text(section)
    else:
        text = _render_number(section, value)
    return RenderResult(text, section.color)


def select_section(ast, value):
    '''
    Chooses the section that formats the value, or returns None when the
    format has conditions and none of them accepts the value.
    '''
    value = _check_value(value)
    sections = ast.sections
    is_text = isinstance(value, str)

    if not sections:
        return None

    if len(sections) == 1:
        return sections[0]

    if ast.has_conditions() and not is_text:
        for section in sections:
            if section.condition is not None and evaluate(section.condition, value):
                return section
        for section in sections:
            if section.condition is None:
                return section
        return None

    if is_text:
        return sections[3] if len(sections) == 4 else sections[0]

    if len(sections) == 2:
        return sections[1] if value < 0 else sections[0]

    if len(sections) in (3, 4):
        if value > 0:
            return sections[0]
        if value < 0:
            return sections[1]
        return sections[2]

    return sections[0]


def evaluate(condition, value):
    # Text never satisfies a condition.
    if isinstance(value, str):
        return False
    compare = _comparisons[condition.operator]
    return compare(value, condition.threshold)


def plain_text(value):
    if isinstance(value, str):
        return value
    if not _is_finite(value):
        return str(value)
    sign = '-' if value < 0 else ''
    return sign + decimal_string(abs(value))


def decimal_string(magnitude):
    '''
    Returns the shortest decimal string that round-trips to the magnitude,
    without exponent notation. Integral values have no fractional part:

        >>> decimal_string(1e16)
        '10000000000000000'
        >>> decimal_string(2.50)
        '2.5'
    '''
    if isinstance(magnitude, int):
        return str(magnitude)

    if isinstance(magnitude, float):
        magnitude = Decimal(repr(magnitude))

    return format(magnitude.normalize(), 'f')


def _check_value(value):
    if isinstance(value, bool):
        raise TypeError('Expected a number or str, received bool')
    if isinstance(value, (str, int, float, Decimal)):
        return value
    if isinstance(value, numbers.Real):
        return float(value)
    raise TypeError(f'Expected a number or str, received {type(value).__name__}')


def _is_finite(value):
    if isinstance(value, int):
        return True
    if isinstance(value, Decimal):
        return value.is_finite()
    return math.isfinite(value)


def _render_text(section):
    return ''.join(x.char for x in section.parts if isinstance(x, LiteralPart))


def _render_number(section, value):
    if not _is_finite(value):
        return str(value)

    is_negative = value < 0
    magnitude = abs(value)

    if section.percent_count:
        magnitude = magnitude * 100 ** section.percent_count

    int_digits, _, frac_digits = decimal_string(magnitude).partition('.')
    int_parts, frac_parts = section.split_parts()

    text = _format_integer(int_digits, int_parts, section.thousand_separator)
    if is_negative:
        text = '-' + text

    # Without a decimal point the fraction is dropped, not rounded.
    if frac_parts is None:
        return text

    return text + '.' + _format_fraction(frac_digits, frac_parts)


def _format_integer(digits, parts, grouped):
    # Build the result backwards, walking both the parts and the digits from
    # right to left.
    result = []
    remaining = list(digits)
    count = 0

    def push_digit(digit):
        nonlocal count
        if grouped and count > 0 and count % 3 == 0:
            result.append(',')
        count += 1
        result.append(digit)

    leftmost = next((i for i, x in enumerate(parts) if x.is_placeholder), None)

    for index in reversed(range(len(parts))):
        part = parts[index]

        if part.is_placeholder:
            if remaining:
                push_digit(remaining.pop())
            elif part.pad == '0':
                push_digit('0')
            elif part.pad:
                result.append(part.pad)

            # The leftmost placeholder takes every digit that is left.
            if index == leftmost:
                while remaining:
                    push_digit(remaining.pop())

        elif isinstance(part, LiteralPart):
            result.append(part.char)

        elif isinstance(part, Percent):
            result.append('%')

    result.reverse()
    return ''.join(result)


def _format_fraction(digits, parts):
    result = []
    pos = 0
    last = max((i for i, x in enumerate(parts) if x.is_placeholder), default=None)

    for index, part in enumerate(parts):
        if part.is_placeholder:
            if pos < len(digits):
                digit = digits[pos]
                # Round half up at the last placeholder. There is no carry,
                # so a 9 becomes 10.
                if index == last and digits[pos + 1:pos + 2] in tuple('56789'):
                    digit = str(int(digit) + 1)
                result.append(digit)
            else:
                result.append(part.pad)
            pos += 1

        elif isinstance(part, LiteralPart):
            result.append(part.char)

        elif isinstance(part, Percent):
            result.append('%')

    return ''.join(result)
