"""
Anchor search over the tokens of a single OCR line.

Every search is bounded to a small window past the previous anchor so a
stray number or word far along a collapsed table row can't be mistaken
for the field we want. Indexes are always relative to the line's own
token list.
"""

import re
from dataclasses import dataclass
from typing import Any, Optional

from .units import UNIT_WORDS

# Known product-code family, e.g. WA8624
WA_CODE_RE = re.compile(r"^wa\d{3,5}$", re.IGNORECASE)
# Generic short mix code, e.g. k3g, a5g
SHORT_CODE_RE = re.compile(r"^[A-Za-z0-9]{2,6}$")

# Leading number of a digits-and-dots residue ("1.2.3" -> 1.2, "." -> none)
_LEADING_NUMBER_RE = re.compile(r"\d+\.?\d*|\.\d+")
_NON_NUMERIC_RE = re.compile(r"[^\d.]")
_DIGITS_THEN_LETTERS_RE = re.compile(r"\d[\d.,]*([A-Za-z]+)")
_EMBEDDED_UNIT_RE = re.compile(r"pints?|quarts?|gallons?|pt|qt|gal", re.IGNORECASE)


@dataclass(frozen=True)
class TokenMatch:
    index: int
    value: Any


def split_lines(text: str) -> list[str]:
    """Trimmed, non-empty lines in document order"""
    lines = re.split(r"\r?\n", text or "")
    return [line.strip() for line in lines if line.strip()]


def tokenize(line: str) -> list[str]:
    """Split on any run of whitespace"""
    return (line or "").split()


def find_keyword(tokens: list[str], keyword: str) -> Optional[int]:
    target = keyword.lower()
    for i, tok in enumerate(tokens):
        if tok.lower() == target:
            return i
    return None


def parse_leading_number(token: str) -> Optional[float]:
    """Strip everything but digits and dots, then read the leading number"""
    cleaned = _NON_NUMERIC_RE.sub("", token)
    m = _LEADING_NUMBER_RE.match(cleaned)
    if not m:
        return None
    return float(m.group(0))


def find_first_number(tokens: list[str], start: int, window: int) -> Optional[TokenMatch]:
    """First token in [start+1, start+window) that carries a number"""
    for i in range(start + 1, min(len(tokens), start + window)):
        value = parse_leading_number(tokens[i])
        if value is not None:
            return TokenMatch(i, value)
    return None


def find_unit(tokens: list[str], start: int, window: int) -> Optional[TokenMatch]:
    """First token in [start+1, start+window) that is exactly a unit word"""
    for i in range(start + 1, min(len(tokens), start + window)):
        if tokens[i].lower() in UNIT_WORDS:
            return TokenMatch(i, tokens[i])
    return None


def find_embedded_unit(tokens: list[str], index: int) -> Optional[TokenMatch]:
    """
    Recover a unit glued onto another token by OCR ("1pint", "0.5QT").

    Only letters that follow a digit are considered, so a code-like
    token such as "GAL2" isn't read as a unit.
    """
    if not 0 <= index < len(tokens):
        return None
    tok = tokens[index]
    m = _DIGITS_THEN_LETTERS_RE.search(tok)
    if not m:
        return None
    unit = _EMBEDDED_UNIT_RE.match(m.group(1))
    if not unit:
        return None
    return TokenMatch(index, unit.group(0))


def find_code_token(tokens: list[str], start: int) -> Optional[TokenMatch]:
    """
    Locate the product code at or after ``start``.

    A WA-family code anywhere in the remainder beats a generic short code,
    even one that appears earlier on the line.
    """
    start = max(start, 0)
    for i in range(start, len(tokens)):
        if WA_CODE_RE.match(tokens[i]):
            return TokenMatch(i, tokens[i])
    for i in range(start, len(tokens)):
        if SHORT_CODE_RE.match(tokens[i]):
            return TokenMatch(i, tokens[i])
    return None
