"""
Tests for core.formatter module.

These tests verify comma splitting, bracket balance checking and string
handling of the pure comma formatter.
"""

import threading

import pytest

from core.config import FormatConfig, NO_PARENS_CONFIG, SHALLOW_CONFIG
from core.formatter import CommaFormatter, format_commas
from core.types import UNBALANCED_ARRAY, UNBALANCED_PARENTHESIS


class TestCommaSplitting:
    """Test which commas receive a line break."""

    def test_top_level_comma_split(self) -> None:
        result = format_commas("a,b")
        assert result.ok is True
        assert result.text == "a,\nb"

    def test_nested_paren_comma_not_split(self) -> None:
        result = format_commas("a,(b,c)")
        assert result.ok is True
        assert result.text == "a,\n(b,c)"

    def test_array_commas_not_split(self) -> None:
        result = format_commas("[a,b],c")
        assert result.text == "[a,b],\nc"

    def test_nested_array_in_parens(self) -> None:
        result = format_commas("f([1,2]),g", NO_PARENS_CONFIG)
        assert result.text == "f([1,2]),\ng"

    def test_existing_newline_not_duplicated(self) -> None:
        result = format_commas("a,\nb")
        assert result.ok is True
        assert result.text == "a,\nb"

    def test_trailing_comma_gets_newline(self) -> None:
        assert format_commas("a,").text == "a,\n"

    def test_consecutive_commas(self) -> None:
        assert format_commas("a,,b").text == "a,\n,\nb"

    def test_comma_followed_by_space_still_split(self) -> None:
        assert format_commas("a, b").text == "a,\n b"

    def test_no_commas_unchanged(self) -> None:
        assert format_commas("t*(t>>8|t>>9)").text == "t*(t>>8|t>>9)"

    def test_empty_string(self) -> None:
        result = format_commas("")
        assert result.ok is True
        assert result.text == ""

    def test_multiple_top_level_commas(self) -> None:
        code = "x=t>>4,y=x&7,x*y"
        assert format_commas(code).text == "x=t>>4,\ny=x&7,\nx*y"


class TestParenDepthConfig:
    """Test consider_parens / max_paren_depth gating."""

    def test_consider_parens_false_splits_inside_call(self) -> None:
        result = format_commas("f(a,b)", FormatConfig(consider_parens=False))
        assert result.text == "f(a,\nb)"

    def test_consider_parens_false_still_respects_arrays(self) -> None:
        result = format_commas("f([a,b],c)", NO_PARENS_CONFIG)
        assert result.text == "f([a,b],\nc)"

    def test_max_depth_one(self) -> None:
        result = format_commas("a,f(b,g(c,d))", SHALLOW_CONFIG)
        assert result.text == "a,\nf(b,\ng(c,d))"

    def test_max_depth_large(self) -> None:
        result = format_commas("f(g(h(a,b)))", FormatConfig(max_paren_depth=3))
        assert result.text == "f(g(h(a,\nb)))"

    def test_default_keeps_call_arguments_inline(self) -> None:
        code = "lpf=(a,c)=>(z+=(a-z)*c),lpf(t,.2)"
        assert format_commas(code).text == "lpf=(a,c)=>(z+=(a-z)*c),\nlpf(t,.2)"


class TestStringLiterals:
    """Test that string content is inert."""

    def test_double_quoted_comma(self) -> None:
        result = format_commas('"a,b",c')
        assert result.text == '"a,b",\nc'

    def test_single_quoted_comma(self) -> None:
        assert format_commas("'a,b',c").text == "'a,b',\nc"

    def test_template_literal_comma(self) -> None:
        assert format_commas("`a,b`,c").text == "`a,b`,\nc"

    def test_brackets_in_string_ignored(self) -> None:
        result = format_commas('"(["+x,y')
        assert result.ok is True
        assert result.text == '"(["+x,\ny'

    def test_other_quote_inside_string_is_inert(self) -> None:
        result = format_commas("\"it's,fine\",x")
        assert result.text == "\"it's,fine\",\nx"

    def test_escaped_quote_does_not_close(self) -> None:
        result = format_commas('"a\\",b",c')
        assert result.text == '"a\\",b",\nc'

    def test_escaped_other_quote_keeps_string(self) -> None:
        result = format_commas("\"a\\'b,c\",d")
        assert result.text == "\"a\\'b,c\",\nd"

    def test_unterminated_string_is_not_an_error(self) -> None:
        result = format_commas('a,"b,c')
        assert result.ok is True
        assert result.text == 'a,\n"b,c'


class TestUnbalanced:
    """Test bracket balance errors."""

    def test_unclosed_paren(self) -> None:
        result = format_commas("a,(b,c")
        assert result.ok is False
        assert result.reason == UNBALANCED_PARENTHESIS
        assert result.text is None

    def test_premature_close_paren(self) -> None:
        result = format_commas("a),(b")
        assert result.ok is False
        assert result.reason == "unbalanced parenthesis"

    def test_unclosed_array(self) -> None:
        result = format_commas("[a,b")
        assert result.reason == UNBALANCED_ARRAY

    def test_premature_close_array(self) -> None:
        result = format_commas("a]")
        assert result.reason == "unbalanced array"

    def test_array_reported_before_paren_at_end(self) -> None:
        result = format_commas("([")
        assert result.reason == UNBALANCED_ARRAY

    def test_close_inside_string_does_not_count(self) -> None:
        result = format_commas('")",a')
        assert result.ok is True

    def test_error_result_uses_editor_shape(self) -> None:
        result = format_commas("(")
        assert result.error == "unbalanced parenthesis"
        assert result.code is None


class TestInsertionInvariant:
    """Output differs from input only by inserted newlines after commas."""

    @pytest.mark.parametrize(
        "code",
        [
            "a,b,c",
            "t?0:z=[],c=0,f=(a,b)=>a+b,f(t,1)",
            '"x,y",[1,2,3],(a,b),`q,r`',
            "a,\nb,c,\n\nd",
        ],
    )
    def test_removing_inserted_newlines_restores_input(self, code: str) -> None:
        result = format_commas(code, NO_PARENS_CONFIG)
        assert result.ok is True
        assert result.text.replace(",\n", ",") == code.replace(",\n", ",")
        assert len(result.text) >= len(code)

    def test_idempotent(self) -> None:
        once = format_commas("a,b,(c,d),[e,f]").text
        assert format_commas(once).text == once


class TestCommaFormatter:
    """Test the CommaFormatter facade."""

    def test_uses_bound_config(self) -> None:
        formatter = CommaFormatter(NO_PARENS_CONFIG)
        assert formatter.format("f(a,b)").text == "f(a,\nb)"

    def test_call_config_overrides_bound(self) -> None:
        formatter = CommaFormatter(NO_PARENS_CONFIG)
        assert formatter.format("f(a,b)", FormatConfig()).text == "f(a,b)"

    def test_config_property(self) -> None:
        assert CommaFormatter().config == FormatConfig()

    def test_shared_instance_across_threads(self) -> None:
        formatter = CommaFormatter()
        inputs = ["a,(b,c)" * 200, "[a,b],c" * 200, "a,(b" * 200]
        expected = [format_commas(code) for code in inputs]
        results: dict[int, object] = {}

        def worker(index: int) -> None:
            results[index] = formatter.format(inputs[index % 3])

        threads = [threading.Thread(target=worker, args=(i,)) for i in range(12)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        for index, result in results.items():
            assert result == expected[index % 3]
