from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from jwcal.core.config import WIB
from jwcal.features.config import (
    DINTEN,
    PASARAN,
    SASIH,
    WULAN,
    WUKU,
    day_name_from_weekday,
    month_name_from_month_no,
    pasaran_name_from_index,
    wuku_name_from_index,
)
from jwcal.features.pasaran import (
    Pasaran,
    pasaran_for_datetime,
    pasaran_from_weekday,
    pasaran_index_from_weekday,
)
from jwcal.features.wuku import Wuku, wuku_from_offset, wuku_index_from_offset


def test_table_sizes():
    assert len(DINTEN) == 7
    assert len(PASARAN) == 5
    assert len(WULAN) == 12
    assert len(SASIH) == 12
    assert len(WUKU) == 30
    assert isinstance(WUKU, tuple)


def test_month_name_conventions():
    assert month_name_from_month_no(1) == "Sura"
    assert month_name_from_month_no(11) == "Sela"
    assert month_name_from_month_no(11, "sasih") == "Dulkangidah"
    assert month_name_from_month_no(5, "sasih") == "Jumadilawal"
    assert month_name_from_month_no(12) == month_name_from_month_no(12, "sasih") == "Besar"


@pytest.mark.parametrize("bad", [0, 13])
def test_month_name_out_of_range(bad):
    with pytest.raises(ValueError):
        month_name_from_month_no(bad)


def test_month_name_unknown_convention():
    with pytest.raises(ValueError):
        month_name_from_month_no(1, "hijri")  # type: ignore[arg-type]


def test_name_lookups():
    assert day_name_from_weekday(0) == "Ahad"
    assert day_name_from_weekday(6) == "Sabtu"
    assert pasaran_name_from_index(0) == "Kliwon"
    assert wuku_name_from_index(29) == "Watugunung"
    with pytest.raises(ValueError):
        day_name_from_weekday(7)
    with pytest.raises(ValueError):
        wuku_name_from_index(30)


@pytest.mark.parametrize(
    "weekday, expected",
    [
        (0, Pasaran(1, "Legi")),
        (1, Pasaran(2, "Pahing")),
        (2, Pasaran(3, "Pon")),
        (3, Pasaran(4, "Wage")),
        (4, Pasaran(0, "Kliwon")),
        (5, Pasaran(1, "Legi")),
        (6, Pasaran(2, "Pahing")),
    ],
)
def test_pasaran_from_weekday(weekday, expected):
    assert pasaran_from_weekday(weekday) == expected


def test_pasaran_advances_one_step_from_sunday_to_saturday():
    for w in range(0, 6):
        assert pasaran_index_from_weekday(w + 1) == (pasaran_index_from_weekday(w) + 1) % 5


def test_pasaran_rejects_bad_weekday():
    with pytest.raises(ValueError):
        pasaran_index_from_weekday(7)


def test_pasaran_for_datetime_uses_wall_clock():
    # same instant: Monday in UTC, Tuesday in WIB
    t = datetime(1867, 3, 4, 17, 0, tzinfo=timezone.utc)
    assert pasaran_for_datetime(t).name == "Pahing"
    assert pasaran_for_datetime(t.astimezone(WIB)).name == "Pon"


def test_pasaran_repeats_weekly():
    t = datetime(2024, 1, 1, tzinfo=WIB)
    for k in range(1, 20):
        assert pasaran_for_datetime(t + timedelta(days=7 * k)) == pasaran_for_datetime(t)


def test_pasaran_for_naive_datetime_raises():
    with pytest.raises(ValueError):
        pasaran_for_datetime(datetime(2024, 1, 1))


@pytest.mark.parametrize(
    "offset, expected",
    [
        (0, 0),
        (5, 0),
        (6, 1),
        (13, 2),
        (19, 2),
        (24, 3),
        (28, 4),
        (29, 4),
    ],
)
def test_wuku_index_from_offset(offset, expected):
    assert wuku_index_from_offset(offset) == expected


def test_wuku_wraps_after_thirty_weeks():
    assert wuku_index_from_offset(209) == 0
    assert wuku_index_from_offset(202) == 29
    assert wuku_index_from_offset(6 + 210) == wuku_index_from_offset(6)


def test_wuku_negative_offset_stays_in_table():
    w = wuku_from_offset(-10)
    assert w == Wuku(28, "Dukut")


def test_wuku_names():
    assert wuku_from_offset(0) == Wuku(0, "Sinta")
    assert str(wuku_from_offset(24)) == "Kurantil"
