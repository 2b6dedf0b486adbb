from __future__ import annotations

import logging
from datetime import date, datetime, timedelta, timezone

import pytest

from jwcal.core.config import EPOCH_UTC, WIB, JavaneseCalendarConfig, default_resolve_strategy
from jwcal.core.timeutil import civil_midnight, elapsed_days
from jwcal.features.converter import javanese_dates_between, javanese_for_date, to_javanese


def _tuple(jd):
    return (jd.year, jd.month, jd.day, jd.month_name, jd.day_name, jd.pasaran.name, jd.wuku.name)


def test_epoch_fixed_point():
    jd = to_javanese(EPOCH_UTC)
    assert (jd.year, jd.month, jd.day) == (1795, 1, 1)
    assert jd.month_name == "Sura"
    assert jd.wuku.day == 0


def test_epoch_is_civil_midnight_in_wib():
    assert civil_midnight(date(1867, 3, 5)) == EPOCH_UTC
    jd = javanese_for_date(date(1867, 3, 5))
    assert _tuple(jd) == (1795, 1, 1, "Sura", "Selasa", "Pon", "Sinta")


def test_weekday_follows_callers_wall_clock():
    # 17:00 UTC Monday == 00:00 WIB Tuesday, same elapsed day
    assert to_javanese(EPOCH_UTC).day_name == "Senin"
    assert to_javanese(EPOCH_UTC.astimezone(WIB)).day_name == "Selasa"


def test_last_second_of_first_day():
    jd = to_javanese(EPOCH_UTC + timedelta(days=1) - timedelta(microseconds=1))
    assert (jd.year, jd.month, jd.day) == (1795, 1, 1)
    jd = to_javanese(EPOCH_UTC + timedelta(days=1))
    assert (jd.year, jd.month, jd.day) == (1795, 1, 2)


@pytest.mark.parametrize(
    "d, expected",
    [
        (date(2000, 1, 1), (1931, 11, 25, "Sela", "Sabtu", "Pahing", "Kurantil")),
        (date(2001, 1, 23), (1932, 12, 29, "Besar", "Selasa", "Pon", "Tolu")),
        (date(2001, 1, 24), (1933, 1, 1, "Sura", "Rabu", "Wage", "Sinta")),
        (date(2002, 1, 13), (1933, 12, 30, "Besar", "Ahad", "Legi", "Tolu")),
        (date(2002, 1, 14), (1934, 1, 1, "Sura", "Senin", "Pahing", "Sinta")),
        (date(2024, 1, 1), (1956, 8, 20, "Ruwah", "Senin", "Pahing", "Wukir")),
    ],
)
def test_reference_dates(d, expected):
    assert _tuple(javanese_for_date(d)) == expected


def test_elapsed_days_reference():
    assert elapsed_days(civil_midnight(date(2000, 1, 1)), EPOCH_UTC) == 48514


def test_to_dict_shape():
    out = javanese_for_date(date(2002, 1, 13)).to_dict()
    assert out == {
        "year": 1933,
        "month": 12,
        "day": 30,
        "monthName": "Besar",
        "dayName": "Ahad",
        "pasaran": {"day": 1, "name": "Legi"},
        "wuku": {"day": 4, "name": "Tolu"},
    }


def test_label():
    assert javanese_for_date(date(1867, 3, 5)).label == "Selasa Pon, 1 Sura 1795"


def test_naive_datetime_rejected():
    with pytest.raises(ValueError):
        to_javanese(datetime(2000, 1, 1))


def test_pre_epoch_is_documented_not_rejected(caplog):
    with caplog.at_level(logging.WARNING, logger="jwcal.features.converter"):
        jd = javanese_for_date(date(1867, 3, 4))
    assert (jd.year, jd.month, jd.day) == (1795, 1, 0)
    assert 0 <= jd.wuku.day <= 29
    assert "precedes the epoch" in caplog.text


def test_pre_epoch_far_back():
    jd = javanese_for_date(date(1800, 1, 1))
    assert (jd.year, jd.month) == (1795, 1)
    assert jd.day < 0


def test_strategies_agree_through_converter():
    greedy = JavaneseCalendarConfig(resolve_strategy="greedy")
    cycle = JavaneseCalendarConfig(resolve_strategy="cycle")
    for k in range(0, 60_000, 211):
        t = EPOCH_UTC + timedelta(days=k, hours=3)
        assert to_javanese(t, config=greedy) == to_javanese(t, config=cycle)


def test_year_monotonic_over_dates():
    years = [javanese_for_date(date(y, 6, 1)).year for y in range(1870, 2100, 9)]
    assert all(b > a for a, b in zip(years, years[1:]))


def test_day_within_month_length_for_range():
    from jwcal.core.year_rule import days_in_month

    for _, jd in javanese_dates_between(date(1999, 1, 1), date(2003, 1, 1)):
        assert 1 <= jd.day <= days_in_month(jd.year, jd.month)
        assert 0 <= jd.pasaran.day <= 4
        assert 0 <= jd.wuku.day <= 29


def test_dates_between_is_half_open():
    rows = list(javanese_dates_between(date(2002, 1, 13), date(2002, 1, 15)))
    assert [d for d, _ in rows] == [date(2002, 1, 13), date(2002, 1, 14)]
    assert list(javanese_dates_between(date(2002, 1, 13), date(2002, 1, 13))) == []
    with pytest.raises(ValueError):
        list(javanese_dates_between(date(2002, 1, 14), date(2002, 1, 13)))


def test_tzinfo_other_than_wib_counts_from_its_midnight():
    # midnight UTC is 07:00 WIB, same Javanese day
    a = javanese_for_date(date(2024, 1, 1), tzinfo=timezone.utc)
    b = javanese_for_date(date(2024, 1, 1))
    assert (a.year, a.month, a.day) == (b.year, b.month, b.day)


def test_env_strategy(monkeypatch):
    monkeypatch.setenv("JWCAL_RESOLVE_STRATEGY", "greedy")
    assert JavaneseCalendarConfig().resolve_strategy == "greedy"
    monkeypatch.setenv("JWCAL_RESOLVE_STRATEGY", "")
    assert default_resolve_strategy() == "cycle"


def test_bad_env_strategy_falls_back_to_cycle(monkeypatch, caplog):
    monkeypatch.setenv("JWCAL_RESOLVE_STRATEGY", "closed-form")
    with caplog.at_level(logging.WARNING, logger="jwcal.core.config"):
        assert JavaneseCalendarConfig().resolve_strategy == "cycle"
        jd = javanese_for_date(date(2024, 1, 1))
    assert (jd.year, jd.month, jd.day) == (1956, 8, 20)
    assert "JWCAL_RESOLVE_STRATEGY" in caplog.text
