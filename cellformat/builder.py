from .lexer import tokenize
from .structs import (
    Color, Condition, ConditionToken, DecimalPoint, Digit, Dot, Escape,
    FormatAST, Literal, LiteralPart, Percent, PercentMark, Placeholder,
    Quoted, Scientific, Section, SectionSeparator, SpaceDigit, ThousandSep,
    ZeroDigit,
)


_placeholder_parts = {
    '#': Digit,
    '0': ZeroDigit,
    '?': SpaceDigit,
}


def parse(format):
    return build(tokenize(format))


def build(tokens):
    builder = Builder(tokens)
    return builder.run()


class Builder:
    def __init__(self, tokens):
        self.tokens = list(tokens)
        self.sections = []
        self.section = None
        self.parts = None

    def run(self):
        self._start_section()

        for index, token in enumerate(self.tokens):
            self._apply(index, token)

        # A trailing section without parts is dropped.
        if self.parts:
            self._finish_section()

        return FormatAST(tuple(self.sections)).freeze()

    def _start_section(self):
        self.section = Section()
        self.parts = []

    def _finish_section(self):
        self.section.parts = tuple(self.parts)
        self.section.freeze()
        self.sections.append(self.section)
        self._start_section()

    def _apply(self, index, token):
        section, parts = self.section, self.parts

        if isinstance(token, Color):
            section.color = token.name

        elif isinstance(token, ConditionToken):
            section.condition = Condition(token.operator, token.value)

        elif isinstance(token, SectionSeparator):
            self._finish_section()

        elif isinstance(token, DecimalPoint):
            parts.append(Dot())

        elif isinstance(token, PercentMark):
            section.percent_count += 1
            parts.append(Percent())

        elif isinstance(token, Scientific):
            section.scientific = token.sign

        elif isinstance(token, (Literal, Escape)):
            if token.char:
                parts.append(LiteralPart(token.char))

        elif isinstance(token, Quoted):
            parts.extend(LiteralPart(x) for x in token.text)

        elif isinstance(token, Placeholder):
            parts.append(_placeholder_parts[token.char]())

        elif isinstance(token, ThousandSep):
            self._apply_comma(index)

        # Everything else (text placeholder, fill, space, locale and date
        # tokens) is inert.

    def _apply_comma(self, index):
        prev = self.tokens[index - 1] if index > 0 else None
        next = self.tokens[index + 1] if index + 1 < len(self.tokens) else None

        if prev is not None and prev.is_placeholder:
            if next is not None and next.is_placeholder:
                self.section.thousand_separator = True
            elif not any(x.is_placeholder for x in self.tokens[index + 1:]):
                self.section.scale *= 1000

        elif isinstance(prev, Literal):
            self.parts.append(LiteralPart(','))
