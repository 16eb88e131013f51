from collections import namedtuple


# The value returned by `render`. The color is None when the selected section
# does not name one.
RenderResult = namedtuple('RenderResult', 'text, color')


class Node:
    _fields = ()
    _frozen = False

    def __setattr__(self, name, value):
        if self._frozen:
            raise AttributeError(f'{self.__class__.__name__} is read-only')
        super().__setattr__(name, value)

    def freeze(self):
        object.__setattr__(self, '_frozen', True)
        return self

    def __eq__(self, other):
        if not isinstance(other, self.__class__):
            return False
        for field in self._fields:
            if getattr(self, field) != getattr(other, field):
                return False
        return True

    def __repr__(self):
        args = ', '.join(f'{x}={getattr(self, x)!r}' for x in self._fields)
        return f'{self.__class__.__name__}({args})'

    def _asdict(self):
        return {k: getattr(self, k) for k in self._fields}

    def _replace(self, **kw):
        for field in self._fields:
            if field not in kw:
                kw[field] = getattr(self, field)
        return self.__class__(**kw)


# Tokens.

class Token(Node):
    is_placeholder = False


class SectionSeparator(Token):
    pass


class DecimalPoint(Token):
    pass


class ThousandSep(Token):
    pass


class PercentMark(Token):
    pass


class TextPlaceholder(Token):
    pass


class Placeholder(Token):
    _fields = ('char',)
    is_placeholder = True

    def __init__(self, char):
        self.char = char


class Literal(Token):
    _fields = ('char',)

    def __init__(self, char):
        self.char = char


class Escape(Token):
    _fields = ('char',)

    def __init__(self, char):
        self.char = char


class Fill(Token):
    _fields = ('char',)

    def __init__(self, char):
        self.char = char


class Space(Token):
    _fields = ('char',)

    def __init__(self, char):
        self.char = char


class Color(Token):
    _fields = ('name',)

    def __init__(self, name):
        self.name = name


class ConditionToken(Token):
    _fields = ('operator', 'value')

    def __init__(self, operator, value):
        self.operator = operator
        self.value = value


class Quoted(Token):
    _fields = ('text',)

    def __init__(self, text):
        self.text = text


class Locale(Token):
    _fields = ('raw',)

    def __init__(self, raw):
        self.raw = raw


class Scientific(Token):
    _fields = ('sign',)

    def __init__(self, sign=None):
        self.sign = sign


class DateToken(Token):
    _fields = ('pattern',)

    def __init__(self, pattern):
        self.pattern = pattern


# The parsed format.

class Condition(Node):
    _fields = ('operator', 'threshold')

    def __init__(self, operator, threshold):
        self.operator = operator
        self.threshold = threshold


class Part(Node):
    is_placeholder = False

    # What a placeholder emits once the digits run out.
    pad = ''


class Digit(Part):
    is_placeholder = True


class ZeroDigit(Part):
    is_placeholder = True
    pad = '0'


class SpaceDigit(Part):
    is_placeholder = True
    pad = ' '


class Percent(Part):
    pass


class Dot(Part):
    pass


class LiteralPart(Part):
    _fields = ('char',)

    def __init__(self, char):
        self.char = char


class Section(Node):
    _fields = (
        'condition',
        'color',
        'parts',
        'percent_count',
        'thousand_separator',
        'scale',
        'scientific',
    )

    def __init__(self, condition=None, color=None, parts=(), percent_count=0,
            thousand_separator=False, scale=1, scientific=None):
        self.condition = condition
        self.color = color
        self.parts = parts
        self.percent_count = percent_count
        self.thousand_separator = thousand_separator
        self.scale = scale
        self.scientific = scientific

    def split_parts(self):
        '''
        Splits the parts at the first Dot. Returns a pair of (integer parts,
        decimal parts). The decimal parts are None when there is no Dot.
        '''
        for index, part in enumerate(self.parts):
            if isinstance(part, Dot):
                return self.parts[:index], self.parts[index + 1:]
        return self.parts, None

    def freeze(self):
        for node in (self.condition,) + tuple(self.parts):
            if node is not None:
                node.freeze()
        return Node.freeze(self)


class FormatAST(Node):
    _fields = ('sections',)

    def __init__(self, sections):
        self.sections = sections

    def has_conditions(self):
        return any(x.condition is not None for x in self.sections)
