"""Tests for greedy line breaking (Courier 10pt: every glyph is 6pt wide)."""

import pytest

from cellflow.text import break_lines


class TestForcedBreaks:
    def test_text_that_fits_is_one_line(self, doc):
        assert break_lines(doc, "Hello world", 100) == ["Hello world"]

    def test_each_segment_that_fits_is_kept(self, doc):
        assert break_lines(doc, "Line1\nLine2", 100) == ["Line1", "Line2"]

    def test_k_breaks_give_k_plus_one_lines(self, doc):
        segments = ["alpha", "beta gamma", "delta", "e"]
        assert break_lines(doc, "\n".join(segments), 200) == segments

    def test_windows_line_endings(self, doc):
        assert break_lines(doc, "one\r\ntwo", 100) == ["one", "two"]

    def test_trailing_break_adds_no_line(self, doc):
        assert break_lines(doc, "one\n", 100) == ["one"]

    def test_blank_segment_is_kept_as_empty_line(self, doc):
        assert break_lines(doc, "a\n\nb", 100) == ["a", "", "b"]

    def test_empty_text_gives_no_lines(self, doc):
        assert break_lines(doc, "", 100) == []

    def test_fitting_segment_is_not_rewrapped(self, doc):
        # Each segment fits on its own; the whole text does not
        assert break_lines(doc, "aaa bbb\nccc ddd", 50) == ["aaa bbb", "ccc ddd"]


class TestWordWrap:
    def test_words_are_packed_greedily(self, doc):
        # "aaa bbb" = 42pt; adding " ccc" would make 66pt
        assert break_lines(doc, "aaa bbb ccc ddd", 50) == ["aaa bbb", "ccc ddd"]

    def test_line_exactly_as_wide_as_column_does_not_fit(self, doc):
        # "aaa bbb" = 42pt == col_width, so bbb moves to the next line
        assert break_lines(doc, "aaa bbb ccc", 42) == ["aaa", "bbb", "ccc"]

    def test_runs_of_whitespace_collapse_when_wrapping(self, doc):
        assert break_lines(doc, "aaa   bbb\tccc ddd", 50) == ["aaa bbb", "ccc ddd"]

    def test_wrapped_lines_have_no_leading_space(self, doc):
        for line in break_lines(doc, "one two three four five six seven", 60):
            assert line == line.strip()


class TestLongWords:
    def test_long_word_is_split_between_code_points(self, doc):
        word = "Supercalifragilisticexpialidocious"
        lines = break_lines(doc, word, 50)

        # 8 glyphs = 48pt < 50pt; a 9th would reach 54pt
        assert lines == ["Supercal", "ifragili", "sticexpi", "alidocio", "us"]
        assert "".join(lines) == word
        assert all(doc.get_string_width(line) < 50 for line in lines)

    def test_word_exactly_as_wide_as_column_is_split(self, doc):
        assert break_lines(doc, "abcde", 30) == ["abcd", "e"]

    def test_buffer_is_flushed_before_long_word(self, doc):
        assert break_lines(doc, "hi abcdefghij", 40) == ["hi", "abcdef", "ghij"]

    def test_words_continue_after_split_tail(self, doc):
        assert break_lines(doc, "abcdefghij x", 40) == ["abcdef", "ghij x"]
        assert break_lines(doc, "abcdefghij xy", 40) == ["abcdef", "ghij", "xy"]

    def test_glyph_wider_than_column_gets_its_own_line(self, doc):
        assert break_lines(doc, "ab", 5) == ["a", "b"]

    def test_split_keeps_multibyte_code_points_whole(self, doc):
        # Each accented letter is two bytes in UTF-8 but one glyph
        assert break_lines(doc, "éèêëàâ", 20) == ["éèê", "ëàâ"]

    def test_split_uses_code_points_with_any_width_oracle(self, fake_font):
        assert break_lines(fake_font, "日本語テキスト", 35) == ["日本語", "テキス", "ト"]


SAMPLES = [
    "The quick brown fox jumps over the lazy dog",
    "Pneumonoultramicroscopicsilicovolcanoconiosis is a word",
    "short\nand a considerably longer second paragraph\n\nlast",
    "a b c d e f g h i j k l m n o p",
]


@pytest.mark.parametrize("text", SAMPLES)
@pytest.mark.parametrize("col_width", [13, 40, 75, 200])
class TestProperties:
    def test_lines_are_narrower_than_column(self, doc, text, col_width):
        for line in break_lines(doc, text, col_width):
            if len(line) > 1:
                assert doc.get_string_width(line) < col_width

    def test_rewrapping_a_line_returns_it_unchanged(self, doc, text, col_width):
        for line in break_lines(doc, text, col_width):
            if line:
                assert break_lines(doc, line, col_width) == [line]
