import logging
import re

from .structs import (
    Color, ConditionToken, DateToken, DecimalPoint, Escape, Fill, Literal,
    Locale, PercentMark, Placeholder, Quoted, Scientific, SectionSeparator,
    Space, TextPlaceholder, ThousandSep,
)


logger = logging.getLogger(__name__)

COLORS = frozenset([
    'Black', 'Blue', 'Cyan', 'Green', 'Magenta', 'Red', 'White', 'Yellow',
])

# Longer patterns come before the shorter patterns that are their prefixes.
DATE_PATTERNS = (
    'yyyy', 'yyy', 'yy', 'y',
    'mmmmm', 'mmmm', 'mmm', 'mm', 'm',
    'dddd', 'ddd', 'dd', 'd',
    'hh', 'h',
    'ss', 's',
    'AM/PM', 'am/pm',
)

_condition = re.compile(r'(<=|>=|<>|<|>|=)([-+]?\d+(?:\.\d+)?)\Z')


def Regex(pattern):
    return re.compile(pattern, re.DOTALL)


class Tokenizer:
    '''
    Scans text with an ordered list of rules. Each rule is a regular
    expression and a function that turns the match into a token. At each
    position the first rule that matches wins.
    '''
    def __init__(self):
        self.rules = []

    def __call__(self, pattern):
        regex = Regex(pattern)
        def register(build):
            self.rules.append((regex, build))
            return build
        return register

    def run(self, source):
        if not isinstance(source, str):
            raise TypeError(f'Expected str, received {type(source).__name__}')

        tokens, pos = [], 0
        while pos < len(source):
            for regex, build in self.rules:
                match = regex.match(source, pos)
                if match:
                    tokens.append(build(match))
                    pos = match.end()
                    break
        return tokens


tokenizer = Tokenizer()


def tokenize(format):
    return tokenizer.run(format)


@tokenizer(r';')
def _section_separator(match):
    return SectionSeparator()


# A doubled quote stands for one quote. A missing close quote is tolerated.
@tokenizer(r'"((?:[^"]|"")*)(?:"|\Z)')
def _quoted(match):
    return Quoted(match.group(1).replace('""', '"'))


@tokenizer(r'\\(.?)')
def _escape(match):
    return Escape(match.group(1))


@tokenizer(r'\*(.?)')
def _fill(match):
    return Fill(match.group(1))


@tokenizer(r'_(.?)')
def _space(match):
    return Space(match.group(1))


@tokenizer(r'\[([^\]]*)\]?')
def _bracket(match):
    content = match.group(1)

    condition = _condition.match(content)
    if condition:
        operator, number = condition.groups()
        value = float(number) if '.' in number else int(number)
        return ConditionToken(operator, value)

    if content in COLORS:
        return Color(content)

    logger.debug('Treating bracket content %r as an inert locale code', content)
    return Locale(content)


@tokenizer(r'[0#?]')
def _placeholder(match):
    return Placeholder(match.group(0))


@tokenizer(r'\.')
def _decimal_point(match):
    return DecimalPoint()


@tokenizer(r',')
def _thousand_sep(match):
    return ThousandSep()


@tokenizer(r'%')
def _percent(match):
    return PercentMark()


@tokenizer(r'[Ee]([+-])')
def _scientific(match):
    return Scientific(match.group(1))


@tokenizer(r'@')
def _text_placeholder(match):
    return TextPlaceholder()


@tokenizer('|'.join(re.escape(x) for x in DATE_PATTERNS))
def _date(match):
    return DateToken(match.group(0))


@tokenizer(r'.')
def _literal(match):
    return Literal(match.group(0))
