# src/jwcal/features/config.py
from __future__ import annotations

"""
Feature-level name tables.

- dinten (weekday): Gregorian weekday 0=Sunday .. 6=Saturday => name
- pasaran (5-day market week): index 0..4 => name
- wulan / sasih (month): month 1..12 => name
- wuku (30-week cycle): index 0..29 => name

All tables are positional tuples. Cycle semantics depend on the index,
so they are never keyed maps.
"""

from typing import Literal, Tuple

MonthNameConvention = Literal["wulan", "sasih"]

DINTEN: Tuple[str, ...] = (
    "Ahad",
    "Senin",
    "Selasa",
    "Rabu",
    "Kamis",
    "Jumat",
    "Sabtu",
)

PASARAN: Tuple[str, ...] = (
    "Kliwon",
    "Legi",
    "Pahing",
    "Pon",
    "Wage",
)

# ============================================================
# Month names
#   Two spellings are in circulation. WULAN is the table that
#   conversion results carry; SASIH is kept for callers that want
#   the other convention (Dulkangidah instead of Sela, etc.).
# ============================================================

WULAN: Tuple[str, ...] = (
    "Sura",
    "Sapar",
    "Mulud",
    "Bakda Mulud",
    "Jumadil Awal",
    "Jumadil Akhir",
    "Rejeb",
    "Ruwah",
    "Pasa",
    "Sawal",
    "Sela",
    "Besar",
)

SASIH: Tuple[str, ...] = (
    "Sura",
    "Sapar",
    "Mulud",
    "Bakda Mulud",
    "Jumadilawal",
    "Jumadilakir",
    "Rejeb",
    "Ruwah",
    "Pasa",
    "Sawal",
    "Dulkangidah",
    "Besar",
)

WUKU: Tuple[str, ...] = (
    "Sinta", "Landep", "Wukir", "Kurantil", "Tolu", "Gumbreg",
    "Warigalit", "Warigagung", "Julungwangi", "Sungsang", "Galungan",
    "Kuningan", "Langkir", "Mandasiya", "Julungpujut", "Pahang",
    "Kuruwelut", "Marakeh", "Tambir", "Medangkungan", "Maktal",
    "Wuye", "Manahil", "Prangbakat", "Bala", "Wugu", "Wayang",
    "Kulawu", "Dukut", "Watugunung",
)

MONTH_TABLES = {
    "wulan": WULAN,
    "sasih": SASIH,
}


def _lookup(table: Tuple[str, ...], i: int, what: str) -> str:
    n = int(i)
    if not (0 <= n < len(table)):
        raise ValueError(f"{what} out of range: {i} (expected 0..{len(table) - 1})")
    return table[n]


def day_name_from_weekday(weekday: int) -> str:
    """
    0=Sunday .. 6=Saturday => Ahad .. Sabtu
    """
    return _lookup(DINTEN, weekday, "weekday")


def pasaran_name_from_index(i: int) -> str:
    return _lookup(PASARAN, i, "pasaran index")


def wuku_name_from_index(i: int) -> str:
    return _lookup(WUKU, i, "wuku index")


def month_name_from_month_no(month_no: int, convention: MonthNameConvention = "wulan") -> str:
    try:
        table = MONTH_TABLES[convention]
    except KeyError as e:
        raise ValueError(f"unknown month name convention: {convention!r}") from e
    m = int(month_no)
    if not (1 <= m <= 12):
        raise ValueError(f"invalid javanese month_no: {month_no}")
    return table[m - 1]
