"""
Invoice header field extraction: supplier, invoice number, total.

Each extractor is an independent scan over the raw transcript and never
raises; a miss degrades to "" or None.
"""

import re
from typing import Optional
from loguru import logger

from .token_scanner import split_lines

SUPPLIER_SCAN_LINES = 10
SUPPLIER_MIN_LETTERS = 4

# Lines carrying any of these are boilerplate, not the supplier's name
SUPPLIER_SKIP_MARKERS = (
    "invoice",
    "bill to",
    "ship to",
    "date",
    "total",
    "www",
    ".com",
)
# State abbreviations of the shop's locality, matched as whole words
# ("Tucker, GA") so names like "Garage Supply" survive
SUPPLIER_SKIP_LOCALITIES = ("ga",)

_LOCALITY_RE = re.compile(
    r"\b(?:" + "|".join(re.escape(loc) for loc in SUPPLIER_SKIP_LOCALITIES) + r")\b",
    re.IGNORECASE,
)
_LETTER_RE = re.compile(r"[A-Za-z]")

INVOICE_NUMBER_RE = re.compile(r"Invoice\s*#\s*([0-9]+)", re.IGNORECASE)

TOTAL_RE = re.compile(r"\bTotal\s*\$?\s*([\d,]+\.\d{2})", re.IGNORECASE)
AMOUNT_DUE_RE = re.compile(r"(?:amount due|balance due)\s*\$?\s*([\d,]+\.\d{2})", re.IGNORECASE)


def _is_boilerplate(line: str) -> bool:
    lower = line.lower()
    if any(marker in lower for marker in SUPPLIER_SKIP_MARKERS):
        return True
    return bool(_LOCALITY_RE.search(line))


def extract_supplier(text: str) -> str:
    """
    First of the top lines that isn't boilerplate and has at least four
    letters. Falls back to the document's first line.
    """
    lines = split_lines(text)
    for line in lines[:SUPPLIER_SCAN_LINES]:
        if _is_boilerplate(line):
            continue
        if len(_LETTER_RE.findall(line)) >= SUPPLIER_MIN_LETTERS:
            return line

    return lines[0] if lines else ""


def extract_invoice_number(text: str) -> str:
    m = INVOICE_NUMBER_RE.search(text or "")
    if m:
        return m.group(1)

    for line in split_lines(text):
        if "invoice" in line.lower():
            return line
    return ""


def _parse_amount(raw: str) -> Optional[float]:
    try:
        return float(raw.replace(",", ""))
    except ValueError:
        logger.debug("Unparseable amount ignored", raw=raw)
        return None


def extract_total(text: str) -> Optional[float]:
    """
    'Total $202.00' first, then 'Amount Due'/'Balance Due'. Amounts need
    exactly two decimals; thousands separators are dropped.
    """
    for pattern in (TOTAL_RE, AMOUNT_DUE_RE):
        m = pattern.search(text or "")
        if not m:
            continue
        amount = _parse_amount(m.group(1))
        if amount is not None:
            return amount
    return None
