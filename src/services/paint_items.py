"""
Paint line item extraction from OCR text.

OCR collapses invoice tables into a flat stream, so there is no column
layout to rely on. Each candidate line is parsed by landmarks instead:
the "paint" keyword, then a quantity, then a unit word, then a product
code. Make and color are whatever spans are left between those anchors.

Lines like:
    Paint 0.5 Pint MIPA GM/CHEV WA8624 WHITE 85-26
    Paint 1 Pint WA8624 GM/CHEV WHITE
    Paint GM/CHEV 0.5 Pint WA8624 White
    Paint 2 Quarts k3g 122.00 122.00
"""

import re
from typing import Optional
from loguru import logger

from .invoice_types import PaintLineItem
from .units import normalize_unit
from .token_scanner import (
    split_lines,
    tokenize,
    find_keyword,
    find_first_number,
    find_unit,
    find_embedded_unit,
    find_code_token,
)

KEYWORD = "paint"
QUANTITY_WINDOW = 6
UNIT_WINDOW = 4

# Paint manufacturers, not vehicle makes
BRAND_WORDS = ("mipa", "ppg", "basf", "sherwin", "dupont", "spi", "standox")

_PAINT_RE = re.compile(r"paint", re.IGNORECASE)
_DIGIT_RE = re.compile(r"\d")
_UNIT_HINT_RE = re.compile(r"pint|quart|gallon|pt|qt|gal", re.IGNORECASE)
_PRICE_RE = re.compile(r"\d+\.\d{2}")


def _without_brands(tokens: list[str]) -> list[str]:
    return [t for t in tokens if t.lower() not in BRAND_WORDS]


def parse_paint_line(line: str) -> Optional[PaintLineItem]:
    """
    Parse one candidate line into a PaintLineItem.

    Returns None when the line has no quantity near the keyword or no
    unit near the quantity; those two anchors are what make a line a
    purchasable item rather than a heading or a note.
    """
    tokens = tokenize(line)
    if not tokens:
        return None

    keyword_idx = find_keyword(tokens, KEYWORD)
    anchor_idx = keyword_idx if keyword_idx is not None else 0

    qty = find_first_number(tokens, anchor_idx, QUANTITY_WINDOW)
    if qty is None:
        return None

    unit = find_unit(tokens, qty.index, UNIT_WINDOW)
    if unit is None:
        unit = find_embedded_unit(tokens, qty.index)
    if unit is None:
        return None

    code = find_code_token(tokens, unit.index + 1)

    make_tokens: list[str] = []
    if code is not None:
        make_tokens = _without_brands(tokens[unit.index + 1:code.index])
    if not make_tokens:
        # e.g. "Paint GM/CHEV 0.5 Pint WA8624 White"
        make_tokens = _without_brands(tokens[anchor_idx + 1:qty.index])
    make = " ".join(make_tokens) or "Unknown"

    color = ""
    if code is not None:
        color_tokens = tokens[code.index + 1:]
        if color_tokens and _PRICE_RE.search(color_tokens[-1]):
            color_tokens = color_tokens[:-1]
        color = " ".join(color_tokens)

    return PaintLineItem(
        make=make,
        code=code.value if code is not None else "",
        color=color,
        quantity=qty.value,
        unit=normalize_unit(unit.value),
    )


def is_candidate_line(line: str) -> bool:
    """Cheap pre-filter: mentions paint, has a digit and a unit word"""
    return bool(_PAINT_RE.search(line) and _DIGIT_RE.search(line) and _UNIT_HINT_RE.search(line))


def extract_paint_items(text: str) -> list[PaintLineItem]:
    """Parse every candidate line; items without a product code are dropped"""
    items = []
    for line in split_lines(text):
        if not is_candidate_line(line):
            continue
        item = parse_paint_line(line)
        if item is not None and item.code:
            items.append(item)
    return items


def format_paint_items(text: str) -> str:
    """
    Newline-joined 'MAKE | CODE | COLOR | QTY UNIT' lines, or "" if
    nothing parsed.
    """
    items = extract_paint_items(text)
    logger.debug("Structured paint items parsed", count=len(items))
    return "\n".join(item.format_line() for item in items)


def extract_paint_lines_fallback(text: str) -> str:
    """Any line that mentions paint, verbatim"""
    return "\n".join(line for line in split_lines(text) if _PAINT_RE.search(line))
