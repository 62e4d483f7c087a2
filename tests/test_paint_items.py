"""
Unit tests for paint line item parsing and aggregation.

Sample lines are modelled on real body-shop supplier invoices after OCR,
where the table columns collapse into a single line of text.
"""

import pytest
from src.services.paint_items import (
    parse_paint_line,
    is_candidate_line,
    extract_paint_items,
    format_paint_items,
    extract_paint_lines_fallback,
)


class TestParsePaintLine:
    def test_anchor_precedence(self):
        item = parse_paint_line("Paint 0.5 Pint GM/CHEV WA8624 WHITE 85-26")
        assert item is not None
        assert item.make == "GM/CHEV"
        assert item.code == "WA8624"
        assert item.color == "WHITE 85-26"
        assert item.quantity == 0.5
        assert item.unit == "Pint"

    def test_brand_words_filtered_from_make(self):
        item = parse_paint_line("Paint 1 Pint MIPA GM/CHEV WA8624 WHITE")
        assert "MIPA" not in item.make
        assert item.make == "GM/CHEV"
        assert item.color == "WHITE"

    def test_make_before_quantity(self):
        item = parse_paint_line("Paint GM/CHEV 0.5 Pint WA8624 White")
        assert item.make == "GM/CHEV"
        assert item.code == "WA8624"
        assert item.color == "White"

    def test_make_falls_back_when_span_is_only_brands(self):
        item = parse_paint_line("Paint FORD 1 qt PPG WA123 BLUE")
        assert item.make == "FORD"
        assert item.unit == "Quart"

    def test_make_unknown_when_nothing_left(self):
        item = parse_paint_line("Paint 1 Pint WA8624 GM/CHEV WHITE")
        assert item.make == "Unknown"
        assert item.code == "WA8624"
        assert item.color == "GM/CHEV WHITE"

    def test_trailing_price_dropped_from_color(self):
        item = parse_paint_line("Paint 2 Quarts k3g 122.00 122.00")
        assert item.code == "k3g"
        assert item.quantity == 2
        assert item.unit == "Quart"
        assert item.color == "122.00"

    def test_code_is_last_token(self):
        item = parse_paint_line("Paint 1 Gal TOYOTA WA040")
        assert item.code == "WA040"
        assert item.color == ""
        assert item.unit == "Gallon"

    def test_wa_code_preferred_over_earlier_short_code(self):
        item = parse_paint_line("Paint 1 Pint a5g WA8624 SILVER")
        assert item.code == "WA8624"
        assert item.make == "a5g"

    def test_no_quantity_is_not_an_item(self):
        assert parse_paint_line("Paint Job Special") is None

    def test_no_unit_is_not_an_item(self):
        assert parse_paint_line("Paint 3 cans WA8624") is None

    def test_unit_too_far_from_quantity(self):
        assert parse_paint_line("Paint 1 a b c Pint WA8624") is None

    def test_embedded_unit_recovered(self):
        item = parse_paint_line("Paint 1pint GM/CHEV WA8624 WHITE")
        assert item.quantity == 1
        assert item.unit == "Pint"
        assert item.make == "GM/CHEV"
        assert item.code == "WA8624"

    def test_line_without_keyword_token_anchors_at_start(self):
        item = parse_paint_line("Paint: 1 Pint NH578 TAFFETA")
        assert item.quantity == 1
        assert item.code == "NH578"
        assert item.color == "TAFFETA"

    def test_no_code_found(self):
        item = parse_paint_line("Paint 1 Pint")
        assert item.code == ""
        assert item.color == ""
        assert item.make == "Unknown"

    @pytest.mark.parametrize(
        "line",
        ["", "   ", "\x00\x01\xff paint", "paint paint paint", "Paint 9" * 50, "1 2 3 4 5 6 7"],
    )
    def test_never_raises(self, line):
        parse_paint_line(line)


def test_candidate_line_filter():
    assert is_candidate_line("Paint 1 Pint WA8624")
    assert not is_candidate_line("Paint Job Special")
    assert not is_candidate_line("Primer 1 Pint")
    assert not is_candidate_line("Paint 12 cans")


def test_extract_paint_items_keeps_document_order_and_requires_code():
    text = "\n".join([
        "AUTO PAINT SUPPLY",
        "Paint 1 Pint GM/CHEV WA8624 WHITE 45.00",
        "Paint 1 Pint",
        "Paint 2 Quarts k3g 122.00 122.00",
    ])
    items = extract_paint_items(text)
    assert [i.code for i in items] == ["WA8624", "k3g"]


def test_format_paint_items():
    text = "Paint 0.5 Pint GM/CHEV WA8624 WHITE 85-26\nPaint 2 Quarts k3g 122.00 122.00"
    assert format_paint_items(text) == (
        "GM/CHEV | WA8624 | WHITE 85-26 | 0.5 Pint\n"
        "Unknown | k3g | 122.00 | 2 Quart"
    )


def test_format_paint_items_empty_when_nothing_parses():
    assert format_paint_items("Paint Job Special\nTotal $10.00") == ""
    assert format_paint_items("") == ""


def test_loose_fallback_keeps_paint_lines_verbatim():
    text = "Shop\n  Paint Job Special \nLabor 2 hrs\nTouch-up PAINT pen"
    assert extract_paint_lines_fallback(text) == "Paint Job Special\nTouch-up PAINT pen"
    assert extract_paint_lines_fallback("Labor only") == ""
