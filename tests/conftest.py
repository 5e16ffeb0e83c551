"""Shared fixtures for setlistsearch tests."""

import json

import pytest

from setlistsearch.models import LiveEvent

YEAR_2024 = [
    {
        "id": "2024-01",
        "date": "2024.03.10",
        "title": "Spring Tour 2024",
        "venue": "Zepp Tokyo",
        "type": "live",
        "tour": "Spring Tour",
        "setlist": [
            {"title": "Hello World"},
            {"title": "World Tour"},
            {"title": "Ｈｅｌｌｏ Ｗｏｒｌｄ", "note": "encore"},
        ],
    },
    {
        "id": "2024-02",
        "date": "2024.05.02",
        "title": "Radio Session",
        "venue": "FM Studio",
        "type": "broadcast",
        "setlist": [{"title": "Hell's Kitchen"}],
    },
]

YEAR_2025 = [
    {
        "id": "2025-01",
        "date": "2025.09.13",
        "slot": "night",
        "title": "Autumn Hall Show",
        "venue": "Budokan",
        "type": "live",
        "setlist": [{"title": "Hello World"}, {"title": "Blue Moon", "note": "acoustic"}],
    },
    {
        "id": "2025-02",
        "date": "2025.09.13",
        "slot": "day",
        "title": "Autumn Hall Show",
        "venue": "Budokan",
        "type": "live",
        "setlist": [{"title": "blue moon"}, {"title": "  "}],
    },
    {
        "id": "2025-03",
        "date": "2025.07.01",
        "title": "TV Special",
        "venue": "NHK Hall",
        "type": "broadcast",
        "setlist": [],
    },
]

SONG_MASTER = {"songs": ["Hello World", "Hell's Kitchen", "World Tour", "Blue Moon"]}


def make_live(*titles, live_id="L1", date="2025.01.01", title="Live", venue="Hall",
              live_type=None, slot=None, year=None):
    """Build a LiveEvent whose setlist has the given song titles."""
    return LiveEvent.from_dict({
        "id": live_id,
        "date": date,
        "title": title,
        "venue": venue,
        "type": live_type,
        "slot": slot,
        "setlist": [{"title": t} for t in titles],
    }, year=year)


def write_data_dir(path, years=None, index=None, song_master=SONG_MASTER):
    """Write index.json, per-year files and the song master under *path*."""
    if years is None:
        years = {2024: YEAR_2024, 2025: YEAR_2025}
    if index is None:
        index = {"years": list(years)}
    path.mkdir(parents=True, exist_ok=True)
    (path / "index.json").write_text(json.dumps(index), encoding="utf-8")
    for year, lives in years.items():
        (path / f"{year}.json").write_text(
            json.dumps(lives, ensure_ascii=False), encoding="utf-8")
    if song_master is not None:
        (path / "songs.raw.json").write_text(
            json.dumps(song_master, ensure_ascii=False), encoding="utf-8")
    return path


@pytest.fixture
def data_dir(tmp_path):
    """Two-year data directory (2024, 2025) with a song master."""
    return write_data_dir(tmp_path / "data")


@pytest.fixture
def lives_2025():
    return [LiveEvent.from_dict(r, year=2025) for r in YEAR_2025]
