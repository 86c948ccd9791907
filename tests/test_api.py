# tests/test_api.py

from datetime import date, datetime, timedelta, timezone
from unittest.mock import patch

import pytest

import frcal
from frcal.core import time as frtime


def test_engines_registered():
    assert frcal.list_engines() == ["equinox", "historical", "romme"]
    assert frcal.engine_info("romme")["centurial_exception"] is True
    assert frcal.engine_info("historical")["centurial_exception"] is False
    assert frcal.engine_info("equinox")["start_year"] == 1


def test_unknown_engine():
    with pytest.raises(frcal.UnknownEngine):
        frcal.from_offset(0, engine="gregorian")


def test_engine_is_required():
    with pytest.raises(TypeError):
        frcal.from_offset(0)


@pytest.mark.parametrize("engine", ["equinox", "romme", "historical"])
def test_epoch(engine):
    t = frcal.from_gregorian(date(1792, 9, 22), engine=engine)
    assert t.ymd == (1, 1, 1)
    assert t.engine.name == engine
    assert frcal.to_offset(1, 1, 1, engine=engine) == 0
    assert frcal.to_jdn(1, 1, 1, engine=engine) == frcal.EPOCH_JDN
    assert frcal.to_gregorian(t) == date(1792, 9, 22)


def test_eighteenth_brumaire():
    # coup of 18 Brumaire An VIII, 9 November 1799
    d = date(1799, 11, 9)
    assert frcal.from_gregorian(d, engine="equinox").ymd == (8, 2, 18)
    assert frcal.from_gregorian(d, engine="historical").ymd == (8, 2, 19)
    assert frcal.from_gregorian(d, engine="romme").ymd == (8, 2, 19)


def test_end_of_year():
    leap_day = frcal.from_gregorian((1795, 9, 22), engine="equinox")
    assert leap_day.ymd == (3, 13, 6)
    assert leap_day.is_complementary
    assert leap_day.day_of_year == 366
    assert frcal.is_leap_year(3, engine="equinox")

    regular = frcal.from_gregorian(date(1793, 9, 21), engine="equinox")
    assert regular.ymd == (1, 13, 5)
    assert regular.day_of_year == 365
    assert not frcal.is_leap_year(1, engine="equinox")


def test_cross_rule_divergence():
    # An III: sextile by the equinox, common for Romme
    assert frcal.days_in_year(3, engine="equinox") == 366
    assert frcal.days_in_year(3, engine="romme") == 365
    assert frcal.to_jdn(3, 13, 6, engine="equinox") == 2376935
    with pytest.raises(frcal.InvalidCalendarComponents):
        frcal.to_jdn(3, 13, 6, engine="romme")

    # An C: the arithmetic rules part at the first century
    assert not frcal.is_leap_year(99, engine="historical")
    assert not frcal.is_leap_year(99, engine="romme")
    assert frcal.is_leap_year(100, engine="historical")
    assert not frcal.is_leap_year(100, engine="romme")
    assert frcal.to_jdn(101, 1, 1, engine="historical") == frcal.to_jdn(101, 1, 1, engine="romme") + 1


def test_to_gregorian_with_other_engine():
    t = frcal.from_gregorian(date(1795, 9, 22), engine="equinox")
    for other in ("romme", "historical"):
        with pytest.raises(frcal.InvalidCalendarComponents):
            frcal.to_gregorian(t, engine=other)
    brumaire = frcal.from_gregorian(date(1799, 11, 9), engine="equinox")
    assert frcal.to_gregorian(brumaire, engine="historical") == date(1799, 11, 8)


def test_gregorian_tuple_and_date_agree():
    assert frcal.from_gregorian((2024, 2, 29), engine="romme") == frcal.from_gregorian(date(2024, 2, 29), engine="romme")


@pytest.mark.parametrize("bad", [(2023, 2, 29), (1900, 2, 29), (2024, 13, 1), (2024, 0, 10), (2024, 4, 31), "1792-09-22"])
def test_invalid_gregorian_source(bad):
    with pytest.raises(frcal.InvalidGregorianSource):
        frcal.from_gregorian(bad, engine="romme")


def test_proleptic_gregorian_before_year_one():
    # arithmetic engines are total; datetime.date is not needed on the way in
    t = frcal.from_gregorian((-100, 3, 1), engine="romme")
    assert t.year < -1800
    jdn = frcal.to_jdn(*t.ymd, engine="romme")
    assert frtime.jdn_to_gregorian(jdn) == (-100, 3, 1)


def test_out_of_range_table():
    with pytest.raises(frcal.OutOfRange):
        frcal.from_gregorian(date(1700, 1, 1), engine="equinox")
    # the same date is fine for an arithmetic rule
    assert frcal.from_gregorian(date(1700, 1, 1), engine="romme").year == -92


def test_today_utc():
    now = datetime(2024, 9, 22, 23, 30, tzinfo=timezone(timedelta(hours=-5)))
    # 04:30 UTC on 2024-09-23
    t = frcal.today(engine="romme", now=now)
    assert t == frcal.from_gregorian(date(2024, 9, 23), engine="romme")


def test_today_local():
    now = datetime(2024, 9, 22, 12, 0, tzinfo=timezone.utc)
    t = frcal.today(engine="equinox", local=True, now=now)
    local = now.astimezone().date()
    assert t == frcal.from_gregorian(local, engine="equinox")


def test_today_uses_clock():
    fixed = datetime(1799, 11, 9, 12, 0, tzinfo=timezone.utc)
    with patch("frcal.core.time.datetime") as mock_dt:
        mock_dt.now.return_value = fixed
        t = frcal.today(engine="equinox")
    assert t.ymd == (8, 2, 18)


def test_clock_unavailable():
    now = datetime(2024, 1, 1, tzinfo=timezone.utc)

    class BrokenNow(datetime):
        def astimezone(self, tz=None):
            if tz is None:
                raise OSError("no local zone")
            return super().astimezone(tz)

    broken = BrokenNow(2024, 1, 1, tzinfo=timezone.utc)
    with pytest.raises(frcal.ClockUnavailable):
        frcal.today(engine="romme", local=True, now=broken)
    assert frcal.today(engine="romme", now=broken) == frcal.from_gregorian(now.date(), engine="romme")


def test_naive_now_rejected():
    with pytest.raises(ValueError):
        frcal.today(engine="romme", now=datetime(2024, 1, 1))


def test_day_of_year():
    assert frcal.day_of_year(1, 1) == 1
    assert frcal.day_of_year(2, 1) == 31
    assert frcal.day_of_year(13, 6) == 366
    with pytest.raises(frcal.InvalidCalendarComponents):
        frcal.day_of_year(14, 1)
    with pytest.raises(frcal.InvalidCalendarComponents):
        frcal.day_of_year(1, 31)
    with pytest.raises(frcal.InvalidCalendarComponents):
        frcal.day_of_year(13, 7)
    with pytest.raises(frcal.InvalidCalendarComponents):
        frcal.day_of_year(13, 30)


def test_format_date():
    t = frcal.from_gregorian(date(1799, 11, 9), engine="equinox")
    assert frcal.format_date(t) == "18 Brumaire An VIII"


def test_register_engine(monkeypatch):
    from frcal import api
    from frcal.core.engine import EngineRegistry
    from frcal.engines.arithmetic import ArithmeticEngine, ROMME

    monkeypatch.setattr(api, "_registry", EngineRegistry(dict(api._reg()._engines)))
    eng = ArithmeticEngine(frcal.EngineId("arithmetic", "romme-copy", "1"), ROMME)
    frcal.register_engine("romme-copy", eng)
    assert frcal.from_offset(2603, engine="romme-copy").ymd == (8, 2, 18)
    with pytest.raises(KeyError):
        frcal.register_engine("romme-copy", eng)
    frcal.register_engine("romme-copy", eng, overwrite=True)
    assert "romme-copy" in frcal.list_engines()


def test_gregorian_jdn_helpers():
    assert frtime.gregorian_to_jdn(1792, 9, 22) == frcal.EPOCH_JDN
    assert frtime.jdn_to_gregorian(frcal.EPOCH_JDN) == (1792, 9, 22)
    assert frtime.from_jdn(2451545) == date(2000, 1, 1)
    with pytest.raises(frcal.OutOfRange):
        frtime.from_jdn(0)
