from text_tools.engine import format_text, format_values, join_values, parse_input, transform_values
from text_tools.models import CaseMode, DelimiterKind, FormattingOptions, Wrapper

PLAIN = FormattingOptions(wrapper=Wrapper.NONE, dedup=False)


def test_parse_empty_input():
    assert parse_input("") == []
    assert parse_input(",,;|\n\n") == []
    assert parse_input("   ") == []


def test_parse_collapses_mixed_delimiter_runs():
    assert parse_input("a,,;;\n\nb") == ["a", "b"]
    assert parse_input("a|b;c\nd,e") == ["a", "b", "c", "d", "e"]


def test_parse_strips_one_layer_of_wrapping():
    assert parse_input("\"a\", 'b', (c)") == ["a", "b", "c"]
    assert parse_input("  '  value  '  ") == ["value"]
    # only the outer layer goes
    assert parse_input("\"  'value'  \"") == ["'value'"]
    assert parse_input("\"('value')\"") == ["('value')"]


def test_parse_leaves_mismatched_wrapping_alone():
    assert parse_input('(mismatched"') == ['(mismatched"']
    assert parse_input("'half") == ["'half"]


def test_parse_drops_fragments_empty_after_unwrap():
    assert parse_input("a, '', \"  \", (), \", b") == ["a", "b"]


def test_parse_keeps_inner_spaces_and_order():
    assert parse_input("z z, a a\r\n") == ["z z", "a a"]


def test_transform_fixed_order():
    options = FormattingOptions(case=CaseMode.LOWER, wrapper=Wrapper.DOUBLE_QUOTE)
    assert transform_values([" Foo", "foo ", "BAR", "FOO"], options) == ['"foo"', '"bar"']


def test_transform_without_trim_keeps_whitespace_distinct():
    options = FormattingOptions(wrapper=Wrapper.NONE, trim=False)
    assert transform_values([" a", "a", "a "], options) == [" a", "a", "a "]


def test_transform_case_leaves_digits_and_symbols():
    upper = FormattingOptions(wrapper=Wrapper.NONE, case=CaseMode.UPPER)
    assert transform_values(["abc-1_x.y@z"], upper) == ["ABC-1_X.Y@Z"]


def test_transform_wrappers():
    values = ["a", "b"]
    assert transform_values(values, FormattingOptions()) == ["'a'", "'b'"]
    assert transform_values(values, FormattingOptions(wrapper=Wrapper.DOUBLE_QUOTE)) == ['"a"', '"b"']
    assert transform_values(values, FormattingOptions(wrapper=Wrapper.PARENTHESIS)) == ["(a)", "(b)"]


def test_transform_does_not_escape_embedded_wrapper():
    assert transform_values(["it's"], FormattingOptions()) == ["'it's'"]


def test_transform_does_not_mutate_input():
    values = [" b ", "a", "a"]
    transform_values(values, FormattingOptions(case=CaseMode.UPPER))
    assert values == [" b ", "a", "a"]


def test_transform_preserves_length_and_order_without_dedup():
    values = parse_input("c, a, c, b, a")
    out = transform_values(values, FormattingOptions(dedup=False, case=CaseMode.UPPER))
    assert out == ["'C'", "'A'", "'C'", "'B'", "'A'"]


def test_join_separators():
    values = ["a", "b", "c"]
    assert join_values(values, DelimiterKind.COMMA) == "a,b,c"
    assert join_values(values, DelimiterKind.SEMICOLON) == "a;b;c"
    assert join_values(values, DelimiterKind.NEWLINE) == "a\nb\nc"
    assert join_values(values, DelimiterKind.COMMA_NEWLINE) == "a,\nb,\nc"
    assert join_values(values, DelimiterKind.PIPE) == "a|b|c"
    assert join_values(values, DelimiterKind.CUSTOM, " OR ") == "a OR b OR c"


def test_join_zero_and_one_value():
    assert join_values([], DelimiterKind.COMMA_NEWLINE) == ""
    assert join_values(["only"], DelimiterKind.CUSTOM, "--") == "only"


def test_join_ignores_custom_delimiter_for_named_kinds():
    assert join_values(["a", "b"], DelimiterKind.PIPE, ";;") == "a|b"


def test_format_defaults():
    assert format_text("x\ny\nx") == "'x','y'"


def test_format_empty_input():
    assert format_text("") == ""
    assert format_text("", FormattingOptions(delimiter=DelimiterKind.CUSTOM, custom_delimiter="!")) == ""


def test_format_rewraps_stripped_values():
    options = FormattingOptions(dedup=False)
    assert format_text("\"a\", 'b', (c)", options) == "'a','b','c'"


def test_format_dedup_after_case_conversion():
    options = FormattingOptions(case=CaseMode.LOWER, wrapper=Wrapper.NONE)
    assert format_text("Foo, foo, FOO", options) == "foo"


def test_format_custom_delimiter_verbatim():
    options = FormattingOptions(
        delimiter=DelimiterKind.CUSTOM,
        custom_delimiter=" | ",
        wrapper=Wrapper.NONE,
        dedup=False,
    )
    assert format_text("a,b,c", options) == "a | b | c"


def test_format_noop_options_round_trip():
    options = FormattingOptions(wrapper=Wrapper.NONE, dedup=False, trim=False)
    assert format_text("a, b,,c , a", options) == "a,b,c,a"
    assert format_text("a,b,c", PLAIN) == "a,b,c"


def test_format_sql_in_list():
    options = FormattingOptions(delimiter=DelimiterKind.COMMA_NEWLINE)
    assert format_text("1001\n1002\n1001\n1003\n") == "'1001','1002','1003'"
    assert format_text("1001\n1002", options) == "'1001',\n'1002'"


def test_format_is_idempotent_under_dedup():
    options = FormattingOptions(case=CaseMode.UPPER)
    first = format_text("b, a, B, c, a", options)
    second = format_text(first, options)
    assert first == "'B','A','C'"
    assert second == first


def test_parse_strips_byte_order_mark():
    assert parse_input("\ufeffa,b") == ["a", "b"]
    assert format_text("\ufeff\"a\", b\ufeff") == "'a','b'"


def test_transform_trim_strips_byte_order_mark():
    options = FormattingOptions(wrapper=Wrapper.NONE)
    assert transform_values(["\ufeff a"], options) == ["a"]


def test_format_values_returns_unjoined_list():
    options = FormattingOptions(wrapper=Wrapper.PARENTHESIS)
    assert format_values("b, a, b", options) == ["(b)", "(a)"]
    assert format_values("", options) == []
