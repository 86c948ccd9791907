# tests/test_names.py

import pytest

import frcal
from frcal.names import format_date, month_name, to_numeral, weekday_name

ROMME_ID = frcal.EngineId("arithmetic", "romme", "1")


@pytest.mark.parametrize("value, expected", [
    (1, "I"), (4, "IV"), (5, "V"), (9, "IX"), (10, "X"), (40, "XL"),
    (50, "L"), (90, "XC"), (100, "C"), (400, "CD"), (500, "D"), (900, "CM"),
    (1000, "M"), (3, "III"), (14, "XIV"), (58, "LVIII"), (1994, "MCMXCIV"),
    (2024, "MMXXIV"), (3999, "MMMCMXCIX"),
])
def test_numerals(value, expected):
    assert to_numeral(value) == expected


@pytest.mark.parametrize("value", [0, -5, 4000])
def test_numerals_out_of_range(value):
    assert to_numeral(value) is None


def test_month_names():
    assert month_name(1) == "Vendémiaire"
    assert month_name(12) == "Fructidor"
    assert month_name(13) == "Complémentaires"
    with pytest.raises(frcal.InvalidCalendarComponents):
        month_name(0)


def test_weekday_names():
    assert weekday_name(1, 1) == "Primidi"
    assert weekday_name(1, 10) == "Décadi"
    assert weekday_name(1, 11) == "Primidi"
    assert weekday_name(2, 18) == "Octidi"
    assert weekday_name(4, 30) == "Décadi"
    assert weekday_name(13, 1) == "La Fête de la Vertu"
    assert weekday_name(13, 6) == "La Fête de la Révolution"
    with pytest.raises(frcal.InvalidCalendarComponents):
        weekday_name(13, 7)
    with pytest.raises(frcal.InvalidCalendarComponents):
        weekday_name(3, 31)


def test_format_date():
    assert format_date(frcal.FrcDate(ROMME_ID, 233, 2, 1)) == "1 Brumaire An CCXXXIII"
    assert format_date(frcal.FrcDate(ROMME_ID, 3, 13, 6)) == "6 Complémentaires An III"
    # years without a Roman numeral fall back to digits
    assert format_date(frcal.FrcDate(ROMME_ID, 4000, 1, 1)) == "1 Vendémiaire An 4000"
    assert format_date(frcal.FrcDate(ROMME_ID, -3, 1, 1)) == "1 Vendémiaire An -3"
