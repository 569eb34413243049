"""
Tests for the code tools (tools/code/).

Covers format_code, pack_code, unpack_code and code_size, including the
editor rules layered on top of core/ (already packed, revert on mismatch).
"""

from core.packer import encode, normalize
from tools.code.code_size import CodeSize
from tools.code.format_code import FormatCode
from tools.code.pack_code import (
    ALREADY_PACKED_ERROR,
    REVERTED_ERROR,
    PackCode,
)
from tools.code.unpack_code import UnpackCode


class TestFormatCode:
    """Test the format_code tool."""

    def test_properties(self):
        tool = FormatCode()
        assert tool.name == "format_code"
        assert [p.name for p in tool.parameters] == [
            "code",
            "consider_parens",
            "max_paren_depth",
        ]

    def test_formats_with_defaults(self):
        result = FormatCode()(code="a,(b,c)")
        assert result.success is True
        assert result.data == {"code": "a,\n(b,c)", "changed": True}
        assert result.metadata == {"line_breaks_inserted": 1}

    def test_no_change_reported(self):
        result = FormatCode()(code="a,\nb")
        assert result.success is True
        assert result.data["changed"] is False

    def test_consider_parens_false(self):
        result = FormatCode()(code="f(a,b)", consider_parens=False)
        assert result.data["code"] == "f(a,\nb)"

    def test_max_paren_depth(self):
        result = FormatCode()(code="f(a,g(b,c))", max_paren_depth=1)
        assert result.data["code"] == "f(a,\ng(b,c))"

    def test_unbalanced_reported_as_error(self):
        result = FormatCode()(code="a,(b,c")
        assert result.success is False
        assert result.error == "Format failed: unbalanced parenthesis!"
        assert result.metadata == {"reason": "unbalanced parenthesis"}

    def test_unbalanced_array(self):
        result = FormatCode()(code="[a,b")
        assert result.error == "Format failed: unbalanced array!"

    def test_negative_depth_rejected(self):
        result = FormatCode()(code="a,b", max_paren_depth=-2)
        assert result.success is False
        assert "max_paren_depth must be non-negative" in result.error

    def test_wrong_type_rejected(self):
        result = FormatCode()(code="a,b", max_paren_depth="1")
        assert result.success is False
        assert "must be int" in result.error

    def test_song_snippet(self, song_snippet):
        result = FormatCode()(code=song_snippet)
        lines = result.data["code"].split("\n")
        assert lines[0] == "t?0:z1=[],"
        assert lines[1] == "callCount=0,"
        assert lines[-1] == "hpf(t*(t>>8|t>>9)&255,.1)"
        assert len(lines) == 5


class TestPackCode:
    """Test the pack_code tool."""

    def test_packs_code(self):
        result = PackCode()(code="t*(t>>8)")
        assert result.success is True
        assert result.data["code"] == encode("t*(t>>8)")
        assert result.data["original_size"] == "8B"
        assert result.metadata["original_length"] == 8
        assert result.metadata["lossy"] is False

    def test_refuses_already_packed(self):
        result = PackCode()(code=encode("t*(t>>8)"))
        assert result.success is False
        assert result.error == ALREADY_PACKED_ERROR

    def test_packs_empty_code(self):
        result = PackCode()(code="")
        assert result.success is True
        assert result.data["code"] == encode("")
        assert UnpackCode()(code=result.data["code"]).data["code"] == ""

    def test_packs_whitespace_only_code(self):
        result = PackCode()(code="   ")
        assert result.success is True
        assert result.data["code"] == encode("   ")

    def test_reverts_on_wide_characters(self):
        result = PackCode()(code="t*\u0101")
        assert result.success is False
        assert result.error == REVERTED_ERROR

    def test_reverts_on_nul_first_pair(self):
        result = PackCode()(code="\x00ab ")
        assert result.success is False
        assert result.error == REVERTED_ERROR

    def test_lossy_flagged(self):
        result = PackCode()(code="f(a, b)")
        assert result.success is True
        assert result.metadata["lossy"] is True

    def test_song_snippet_round_trips(self, song_snippet):
        packed = PackCode()(code=song_snippet).data["code"]
        unpacked = UnpackCode()(code=packed).data["code"]
        assert unpacked == normalize(song_snippet)


class TestUnpackCode:
    """Test the unpack_code tool."""

    def test_unpacks(self):
        result = UnpackCode()(code=encode("t&t>>8"))
        assert result.success is True
        assert result.data == {"code": "t&t>>8", "changed": True}

    def test_not_packed_is_noop(self):
        result = UnpackCode()(code="  t*2  ")
        assert result.success is True
        assert result.data == {"code": "t*2", "changed": False}

    def test_missing_code_rejected(self):
        result = UnpackCode()()
        assert result.success is False
        assert "Required parameter 'code' is missing" in result.error


class TestCodeSize:
    """Test the code_size tool."""

    def test_small(self):
        result = CodeSize()(code="t*2")
        assert result.data == {"bytes": 3, "label": "3B"}

    def test_large_compact(self):
        result = CodeSize()(code="t" * 3000, compact=True)
        assert result.data["label"] == "2.93KiB/3.00KB"
        assert result.metadata == {"length": 3000}
