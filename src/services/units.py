"""
Volume-unit normalization for paint line items.

Invoices spell units every which way (PT, pints, Qt., GAL). Everything
downstream works with the canonical vocabulary below.
"""

PINT = "Pint"
QUART = "Quart"
GALLON = "Gallon"

# Exact tokens accepted as a standalone unit anchor on a line
UNIT_WORDS = (
    "pint",
    "pints",
    "pt",
    "quart",
    "quarts",
    "qt",
    "gallon",
    "gallons",
    "gal",
)


def normalize_unit(unit: str) -> str:
    """Map a raw unit token to Pint/Quart/Gallon, or return it unchanged"""
    low = (unit or "").lower()
    if low.startswith("pint") or low == "pt":
        return PINT
    if low.startswith("quart") or low == "qt":
        return QUART
    if low.startswith("gallon") or low == "gal":
        return GALLON
    return unit
