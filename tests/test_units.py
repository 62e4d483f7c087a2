"""Unit tests for volume-unit normalization"""

import pytest
from src.services.units import normalize_unit


@pytest.mark.parametrize("raw", ["pint", "pt", "PINT", "Pints", "PT", "pints"])
def test_pint_variants(raw):
    assert normalize_unit(raw) == "Pint"


@pytest.mark.parametrize("raw", ["quart", "qt", "QUART", "Quarts", "QT"])
def test_quart_variants(raw):
    assert normalize_unit(raw) == "Quart"


@pytest.mark.parametrize("raw", ["gallon", "gal", "GALLON", "Gallons", "GAL"])
def test_gallon_variants(raw):
    assert normalize_unit(raw) == "Gallon"


@pytest.mark.parametrize("raw", ["liter", "oz", "ea", "", "pts"])
def test_unrecognized_returned_unchanged(raw):
    assert normalize_unit(raw) == raw
