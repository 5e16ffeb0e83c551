"""Live event records and the value objects passed between modules.

Per-year files hold plain JSON dicts.  LiveEvent.from_dict() converts
one record, treating every missing optional field as absent rather than
as an error.  Records are never mutated after loading; filtering always
produces new lists.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Union

from setlistsearch.config import ALL_YEARS_LABEL
from setlistsearch.normalize import clean_title

# Year selector meaning "merge every year in the index"
ALL_YEARS = ALL_YEARS_LABEL

_DAY_NAMES = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")


def _opt_str(value):
    """None for missing/blank values, otherwise the value as a string."""
    if value is None:
        return None
    s = str(value)
    return s if s.strip() else None


@dataclass(frozen=True)
class SongPerformance:
    title: str                  # raw display title; blank entries are skipped by search
    note: Optional[str] = None  # e.g. "acoustic", display only

    @classmethod
    def from_dict(cls, raw):
        if isinstance(raw, str):
            return cls(title=raw)
        if not isinstance(raw, dict):
            return cls(title="")
        title = raw.get("title")
        return cls(
            title=title if isinstance(title, str) else "",
            note=_opt_str(raw.get("note")),
        )

    @property
    def clean_title(self):
        return clean_title(self.title)


@dataclass(frozen=True)
class LiveEvent:
    id: str
    date: str                   # "YYYY.MM.DD"
    title: str = ""
    venue: str = ""
    type: Optional[str] = None  # categorical, e.g. "broadcast"
    slot: Optional[str] = None  # same-day disambiguator, e.g. "day" / "night"
    tour: Optional[str] = None
    setlist: tuple = ()         # SongPerformance, in performance order
    year: Optional[int] = None  # provenance tag added by the loader

    @classmethod
    def from_dict(cls, raw, year=None):
        """Build a LiveEvent from one per-year record.

        *year* is the provenance tag attached by the loader; per-year
        files do not carry it themselves.
        """
        setlist = raw.get("setlist") or ()
        if not isinstance(setlist, (list, tuple)):
            setlist = ()
        return cls(
            id=str(raw.get("id") or ""),
            date=str(raw.get("date") or ""),
            title=str(raw.get("title") or ""),
            venue=str(raw.get("venue") or ""),
            type=_opt_str(raw.get("type")),
            slot=_opt_str(raw.get("slot")),
            tour=_opt_str(raw.get("tour")),
            setlist=tuple(SongPerformance.from_dict(s) for s in setlist),
            year=year,
        )

    @property
    def sort_key(self):
        """Date first, then slot lexicographically (missing slot sorts first)."""
        return (self.date, self.slot or "")


@dataclass
class FilterCriteria:
    """Current filter inputs; None or "" means the criterion is unset."""
    year: Union[int, str, None] = None  # specific year or ALL_YEARS
    type: Optional[str] = None
    live_title_query: Optional[str] = None
    song_title_query: Optional[str] = None


@dataclass(frozen=True)
class RankingEntry:
    display_title: str  # first literal title seen for the normalized key
    count: int


@dataclass(frozen=True)
class SongMatch:
    """One setlist hit in song-count search mode."""
    date: str
    title: str  # live title
    venue: str
    year: Optional[int] = None
    song: str = ""  # the matching setlist title as written


def parse_year_selector(value):
    """Convert "all" / "2025" / 2025 into ALL_YEARS or an int year.

    Returns None for empty input.  Raises ValueError for anything else.
    """
    if value is None:
        return None
    if isinstance(value, int):
        return value
    s = str(value).strip()
    if not s:
        return None
    if s.lower() == ALL_YEARS:
        return ALL_YEARS
    return int(s)


def format_date_with_day(date_str):
    """'2025.09.13' → '2025.09.13 (Sat)'.  Unparseable dates pass through."""
    try:
        d = datetime.strptime(date_str, "%Y.%m.%d")
    except (TypeError, ValueError):
        return date_str
    return f"{date_str} ({_DAY_NAMES[d.weekday()]})"
