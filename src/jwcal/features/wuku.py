from __future__ import annotations

from dataclasses import dataclass

from jwcal.features.config import WUKU, wuku_name_from_index


@dataclass(frozen=True)
class Wuku:
    """
    Thirty-week cycle entry (index 0..29 into WUKU).
    """
    day: int
    name: str

    def __str__(self) -> str:
        return self.name


def wuku_index_from_offset(offset: int) -> int:
    """
    floor((offset + 1) / 7) % 30

    offset is the zero-based residual day inside the resolved month
    (ResolvedDay.offset), not the day count since the epoch.
    Floor division and % keep the index in 0..29 for negative offsets too.
    """
    return ((int(offset) + 1) // 7) % len(WUKU)


def wuku_from_offset(offset: int) -> Wuku:
    i = wuku_index_from_offset(offset)
    return Wuku(day=i, name=wuku_name_from_index(i))
