"""
Turns a raw OCR transcript into the flat InvoiceSummary record.

The header extractors and the paint item aggregator each scan the same
text independently; their results are only merged here.
"""

from loguru import logger
from .invoice_types import InvoiceSummary
from .header_fields import extract_supplier, extract_invoice_number, extract_total
from .paint_items import format_paint_items, extract_paint_lines_fallback

NO_TEXT_NOTES = "No text detected"
DEFAULT_EXCERPT_CHARS = 800


def build_notes(text: str, excerpt_chars: int = DEFAULT_EXCERPT_CHARS) -> str:
    """Structured paint items, else loose paint lines, else a raw excerpt"""
    notes = format_paint_items(text)
    if notes:
        return notes

    notes = extract_paint_lines_fallback(text)
    if notes:
        logger.debug("No structured paint items, using loose paint lines")
        return notes

    logger.debug("No paint lines, using raw text excerpt", excerpt_chars=excerpt_chars)
    return (text or "")[:excerpt_chars]


def parse_invoice_text(text: str, excerpt_chars: int = DEFAULT_EXCERPT_CHARS) -> InvoiceSummary:
    text = text or ""
    return InvoiceSummary(
        supplier=extract_supplier(text),
        invoice_number=extract_invoice_number(text),
        cost=extract_total(text),
        notes=build_notes(text, excerpt_chars),
    )


def empty_summary() -> InvoiceSummary:
    """Summary returned when OCR succeeded but found no text"""
    return InvoiceSummary(supplier="", invoice_number="", cost=None, notes=NO_TEXT_NOTES)
