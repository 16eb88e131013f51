from .builder import build, parse
from .lexer import COLORS, DATE_PATTERNS, Tokenizer, tokenize
from .renderer import (
    NumberFormat, decimal_string, evaluate, plain_text, render, select_section,
)
from .structs import (
    Condition, Digit, Dot, FormatAST, LiteralPart, Percent, RenderResult,
    Section, SpaceDigit, ZeroDigit,
)
