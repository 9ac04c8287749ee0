"""Tests for line counting and block height (Courier 10pt: every glyph is 6pt wide)."""

import math

from cellflow.text import break_lines, count_lines, normalize, text_height


class TestFastPath:
    def test_text_that_fits_counts_one(self, doc, courier):
        assert count_lines(doc, "Hello world", courier, 100) == 1

    def test_single_long_word_counts_one(self, doc, courier):
        # Renders as several lines, but a lone word is reported as one
        assert count_lines(doc, "Supercalifragilisticexpialidocious", courier, 50) == 1

    def test_extrapolate_counts_one(self, doc, courier):
        props = courier.model_copy(update={"extrapolate": True})
        assert count_lines(doc, "aaa bbb ccc ddd eee fff", props, 30) == 1

    def test_empty_text_counts_one(self, doc, courier):
        assert count_lines(doc, "", courier, 100) == 1


class TestWrappedCount:
    def test_count_matches_breaker(self, doc, courier):
        text = "aaa bbb ccc ddd"
        expected = len(break_lines(doc, normalize(doc, text, courier.family), 50))

        assert count_lines(doc, text, courier, 50) == expected == 2

    def test_forced_breaks_are_counted(self, doc, courier):
        assert count_lines(doc, "one two\nthree four five six", courier, 50) == 4

    def test_count_is_at_least_one(self, doc, courier):
        for width in (5, 20, 60, 500):
            assert count_lines(doc, "several words of text here", courier, width) >= 1


class TestFontState:
    def test_font_is_set_from_properties(self, doc, courier):
        props = courier.model_copy(update={"style": "bold", "size": 12.0})
        count_lines(doc, "text", props, 100)

        assert doc.get_font() == ("courier", "bold", 12.0)
        assert doc.font_name == "Courier-Bold"

    def test_color_is_untouched(self, doc, courier):
        doc.set_color((0.2, 0.4, 0.6))
        props = courier.model_copy(update={"color": (1.0, 0.0, 0.0)})
        count_lines(doc, "aaa bbb ccc ddd", props, 50)

        assert doc.get_color() == (0.2, 0.4, 0.6)


class TestTextHeight:
    def test_height_of_one_line(self, doc, courier):
        assert math.isclose(text_height(doc, "Hello", courier, 100), 10.0)

    def test_height_includes_padding_between_lines(self, doc, courier):
        props = courier.model_copy(update={"vertical_padding": 2.0})
        # 2 lines × 10pt + 1 gap × 2pt
        assert math.isclose(text_height(doc, "aaa bbb ccc ddd", props, 50), 22.0)
