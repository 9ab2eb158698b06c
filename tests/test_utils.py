import pathlib
import sys

import pytest

ROOT = pathlib.Path(__file__).resolve().parents[1]  # project root
sys.path.insert(0, str(ROOT))
from pajeknet.io._utils import (
    count_to_string,
    format_weight,
    iter_lines,
    line_for_display,
    split_line,
    split_vertex_line,
    try_parse_coordinates,
    try_parse_float,
    try_parse_int,
)


class TestLines:
    def test_iter_lines_skips_blank_and_comment_lines(self):
        lines = ["/* c */\n", "\n", "  *vertices 1 \n", "\t/* c */\n", '1 "a"\n']
        assert list(iter_lines(lines)) == [(3, "*vertices 1"), (5, '1 "a"')]

    def test_comment_must_lead_the_line(self):
        assert list(iter_lines(["1 2 3 /* trailing */"])) == [(1, "1 2 3 /* trailing */")]

    def test_split_line_tabs_and_spaces(self):
        assert split_line("1 \t 2\t\t3   4") == ["1", "2", "3", "4"]


class TestVertexSplit:
    def test_quoted_name_with_spaces(self):
        assert split_vertex_line('1 "Vertex 1" 0.1 0.2 0.3') == (
            "1",
            "Vertex 1",
            ["0.1", "0.2", "0.3"],
        )

    def test_unquoted_name(self):
        assert split_vertex_line("12 W9") == ("12", "W9", [])

    def test_empty_quoted_name(self):
        assert split_vertex_line('1 "" 0 0 0') == ("1", "", ["0", "0", "0"])

    def test_unterminated_quote(self):
        assert split_vertex_line('1 "Vertex1 0.1 0.2') == ("1", '"Vertex1', ["0.1", "0.2"])

    def test_closing_quote_glued_to_next_field(self):
        assert split_vertex_line('1 "a b"0.5 0.5 0') == ("1", "a b", ["0.5", "0.5", "0"])

    def test_too_short(self):
        assert split_vertex_line("1") is None


class TestNumbers:
    @pytest.mark.parametrize("token, value", [("1", 1), ("+7", 7), ("-3", -3), ("007", 7)])
    def test_int(self, token, value):
        assert try_parse_int(token) == value

    @pytest.mark.parametrize("token", ["1yz", "1.0", "", " 1", "1_000", "2147483648", "\u0663"])
    def test_int_rejects(self, token):
        assert try_parse_int(token) is None

    @pytest.mark.parametrize(
        "token, value", [("3.1", 3.1), ("-2", -2.0), (".5", 0.5), ("5.", 5.0), ("1e3", 1000.0)]
    )
    def test_float(self, token, value):
        assert try_parse_float(token) == value

    @pytest.mark.parametrize("token", ["a3.1", "3.1.2", "nan", "inf", "1_0.0", "1e999", ""])
    def test_float_rejects(self, token):
        assert try_parse_float(token) is None

    def test_coordinates(self):
        assert try_parse_coordinates(["0.1", "0.2", "0.3", "extra"]) == (0.1, 0.2, 0.3)
        assert try_parse_coordinates(["0.1", "0.2"]) is None
        assert try_parse_coordinates(["c", "blue", "[5-10]"]) is None


class TestFormatting:
    @pytest.mark.parametrize(
        "weight, text", [(1.0, "1"), (5.11, "5.11"), (123.34, "123.34"), (-2.0, "-2"), (0.1, "0.1")]
    )
    def test_format_weight(self, weight, text):
        assert format_weight(weight) == text

    @pytest.mark.parametrize("weight", [float("inf"), float("-inf"), float("nan")])
    def test_format_weight_rejects_non_finite(self, weight):
        with pytest.raises(ValueError):
            format_weight(weight)

    @pytest.mark.parametrize(
        "count, text", [(0, "0 vertices"), (1, "1 vertex"), (2, "2 vertices"), (12345, "12,345 vertices")]
    )
    def test_count_to_string(self, count, text):
        assert count_to_string(count) == text

    def test_line_for_display(self):
        assert line_for_display("short") == "short"
        assert line_for_display("y" * 81) == "y" * 80 + "..."
        assert line_for_display("a\x00b\x1fc") == "a\u25a1b\u25a1c"
