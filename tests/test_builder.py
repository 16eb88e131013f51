import pytest

from cellformat.builder import build, parse
from cellformat.lexer import tokenize
from cellformat.structs import (
    Condition, Digit, Dot, FormatAST, LiteralPart, Percent, Section,
    SpaceDigit, ZeroDigit,
)


D, Z, S, L = Digit, ZeroDigit, SpaceDigit, LiteralPart


def test_build_consumes_tokens():
    assert build(tokenize('0.0')) == parse('0.0')


def test_simple_placeholders():
    result = parse('#0?')
    assert result == FormatAST((Section(parts=(D(), Z(), S())),))


def test_literals_and_percent():
    result = parse('"OK"&#%00')
    assert result.sections == (
        Section(
            parts=(L('O'), L('K'), L('&'), D(), Percent(), Z(), Z()),
            percent_count=1,
        ),
    )


def test_repeated_percent_compounds():
    [section] = parse('0%%').sections
    assert section.percent_count == 2
    assert section.parts == (Z(), Percent(), Percent())


def test_dot_part():
    [section] = parse('0.00').sections
    assert section.parts == (Z(), Dot(), Z(), Z())
    assert section.split_parts() == ((Z(),), (Z(), Z()))


def test_only_first_dot_splits():
    [section] = parse('0.0.0').sections
    assert section.split_parts() == ((Z(),), (Z(), Dot(), Z()))


def test_no_dot():
    [section] = parse('00').sections
    assert section.split_parts() == ((Z(), Z()), None)


def test_thousands_separator():
    [section] = parse('#,##0').sections
    assert section.thousand_separator
    assert section.scale == 1
    assert section.parts == (D(), D(), D(), Z())


def test_trailing_commas_scale():
    [section] = parse('0,').sections
    assert section.scale == 1000
    assert not section.thousand_separator

    [section] = parse('0,,').sections
    assert section.scale == 1000

    [section] = parse('#,##0,').sections
    assert section.thousand_separator
    assert section.scale == 1000


def test_comma_between_placeholder_and_literal():
    # A placeholder follows later in the section, so the comma is dropped.
    [section] = parse('0,x0').sections
    assert section.parts == (Z(), L('x'), Z())
    assert section.scale == 1
    assert not section.thousand_separator

    # No placeholder follows, so the comma scales.
    [section] = parse('0,"k"').sections
    assert section.scale == 1000
    assert section.parts == (Z(), L('k'))


def test_comma_after_literal():
    [section] = parse('0ok,').sections
    assert section.parts == (Z(), L('o'), L('k'), L(','))


def test_ignored_commas():
    [section] = parse(',0').sections
    assert section.parts == (Z(),)
    assert section.scale == 1

    [section] = parse('" ",0').sections
    assert section.parts == (L(' '), Z())


def test_color_and_condition():
    [section] = parse('[Red][>=10.5]0').sections
    assert section.color == 'Red'
    assert section.condition == Condition('>=', 10.5)


def test_repeated_color_overwrites():
    [section] = parse('[Red][Blue]0').sections
    assert section.color == 'Blue'


def test_scientific_marker():
    [section] = parse('0.0E+0').sections
    assert section.scientific == '+'
    assert section.parts == (Z(), Dot(), Z(), Z())


def test_inert_tokens():
    [section] = parse('[$-409]*x_)yyyy0').sections
    assert section.parts == (Z(),)
    assert section.color is None
    assert section.condition is None


def test_escaped_characters_are_literals():
    # Escapes are kept as literal parts, like an unquoted character, rather
    # than dropped. These asserts fix that behavior.
    [section] = parse('\\$0').sections
    assert section.parts == (L('$'), Z())

    [section] = parse('0\\;').sections
    assert section.parts == (Z(), L(';'))


def test_text_placeholder_is_inert():
    [section] = parse('"<"@">"').sections
    assert section.parts == (L('<'), L('>'))

    # A section holding only @ has no parts, so it is dropped at the end.
    assert len(parse('0;@').sections) == 1
    assert len(parse('0;@;0').sections) == 3


def test_sections():
    result = parse('0;-0;"zero";"text"')
    assert len(result.sections) == 4

    # An empty trailing section is dropped.
    assert len(parse('0;').sections) == 1

    # An empty section in the middle is kept.
    result = parse('0;;0')
    assert len(result.sections) == 3
    assert result.sections[1] == Section()

    # A section with only a color or condition and no parts is also dropped
    # when it comes last.
    assert len(parse('0;[Red]').sections) == 1


def test_every_section_is_kept():
    result = parse('0;1;2;3;4;5')
    assert len(result.sections) == 6


def test_empty_format():
    assert parse('') == FormatAST(())


def test_ast_is_frozen():
    result = parse('0;0')
    assert isinstance(result.sections, tuple)
    assert all(isinstance(x.parts, tuple) for x in result.sections)

    section = result.sections[0]
    with pytest.raises(AttributeError):
        section.color = 'Red'
    with pytest.raises(AttributeError):
        section.parts = ()
    with pytest.raises(AttributeError):
        section.parts[0].char = 'x'
    with pytest.raises(AttributeError):
        result.sections = ()

    [section] = parse('[>1]"a"').sections
    with pytest.raises(AttributeError):
        section.condition.threshold = 5

    # A replaced copy can be changed again.
    copy = section._replace(color='Blue')
    copy.color = 'Red'
    assert copy.color == 'Red'


def test_parse_is_deterministic():
    formats = [
        '[Green][>100]$#,##0.00" USD";[Red][<=100]0.00;"N/A"',
        '#,##0,;(0);-',
        '0.00%',
    ]
    for format in formats:
        assert parse(format) == parse(format)


def test_node_helpers():
    section = Section(color='Red')
    assert section._asdict()['color'] == 'Red'
    assert section._replace(color='Blue').color == 'Blue'
    assert repr(Condition('>', 1)) == "Condition(operator='>', threshold=1)"
