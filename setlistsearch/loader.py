"""Fetch the year index, per-year live files, and the song master.

A data source is either a local directory or an http(s):// base URL
containing:

    index.json       {"years": [2024, "2025", ...]}
    2025.json        [{id, date, title, venue, type, setlist, ...}, ...]
    songs.raw.json   song master in any shape (see songs.py)

Every failure (network, HTTP status, unreadable file, bad JSON, wrong
document shape) surfaces as LoadError naming the document.  Nothing is
retried automatically.
"""

import time
from concurrent.futures import ThreadPoolExecutor, as_completed
from pathlib import Path

import requests

from setlistsearch.config import (
    DEFAULT_DATA_SOURCE,
    HTTP_USER_AGENT,
    INDEX_FILE,
    LOAD_WORKERS,
    SONG_MASTER_FILE,
    YEAR_FILE_TEMPLATE,
)
from setlistsearch.http_utils import api_get, create_session, is_url, join_url, progress_line
from setlistsearch.jsonfile import read_json
from setlistsearch.models import ALL_YEARS, LiveEvent
from setlistsearch.songs import extract_song_titles


class LoadError(Exception):
    """A data document could not be fetched or parsed."""


def _parse_year(value):
    if isinstance(value, bool):
        raise ValueError(f"not a year: {value!r}")
    return int(str(value).strip())


class DatasetLoader:
    """Reads documents from one data source.

    The requests session is created lazily, so local-directory sources
    never touch the network stack.
    """

    def __init__(self, source=DEFAULT_DATA_SOURCE, session=None,
                 workers=LOAD_WORKERS, verbose=False):
        self.source = source
        self.workers = workers
        self.verbose = verbose
        self._session = session

    @property
    def session(self):
        if self._session is None:
            self._session = create_session(HTTP_USER_AGENT)
        return self._session

    def fetch_document(self, name):
        """Return the parsed JSON for one file name under the source."""
        try:
            if is_url(self.source):
                return api_get(self.session, join_url(self.source, name))
            return read_json(Path(self.source) / name)
        except (requests.RequestException, OSError, ValueError) as e:
            raise LoadError(f"{name} load failed: {e}") from e

    # ── Year index ─────────────────────────────────────────────────────

    def index_years(self):
        """Years in index order, parsed to int."""
        data = self.fetch_document(INDEX_FILE)
        years = data.get("years") if isinstance(data, dict) else None
        if not isinstance(years, list):
            raise LoadError(f"{INDEX_FILE} load failed: no 'years' list")
        try:
            return [_parse_year(y) for y in years]
        except ValueError as e:
            raise LoadError(f"{INDEX_FILE} load failed: {e}") from e

    def load_years(self):
        """Distinct years, newest first (selector order)."""
        return sorted(set(self.index_years()), reverse=True)

    # ── Lives ──────────────────────────────────────────────────────────

    def load_lives(self, year):
        """All lives of one year, tagged with that year, in file order."""
        name = YEAR_FILE_TEMPLATE.format(year=year)
        data = self.fetch_document(name)
        if not isinstance(data, list):
            raise LoadError(f"{name} load failed: expected a list of lives")
        lives = [LiveEvent.from_dict(rec, year=year)
                 for rec in data if isinstance(rec, dict)]
        if self.verbose:
            print(f"  Loaded {len(lives)} lives from {name}")
        return lives

    def load_all_lives(self):
        """Every year's lives merged in index order.

        Years are fetched in parallel; the merge order does not depend on
        which fetch finishes first.  Any failing year fails the whole load.
        """
        years = list(dict.fromkeys(self.index_years()))
        if not years:
            return []

        by_year = {}
        t_start = time.monotonic()
        with ThreadPoolExecutor(max_workers=max(1, self.workers or 1)) as pool:
            futures = {pool.submit(self.load_lives, y): y for y in years}
            for future in as_completed(futures):
                by_year[futures[future]] = future.result()
                if self.verbose:
                    elapsed = time.monotonic() - t_start
                    print(f"    {progress_line(len(by_year), len(years), elapsed)} "
                          f"{futures[future]}")

        merged = []
        for y in years:
            merged.extend(by_year[y])
        return merged

    def load_target_lives(self, year):
        """Lives for a year selector: one year, or ALL_YEARS merged."""
        if year == ALL_YEARS:
            return self.load_all_lives()
        return self.load_lives(year)

    # ── Song master ────────────────────────────────────────────────────

    def load_song_master(self):
        """Raw song master document (shape is not validated here)."""
        return self.fetch_document(SONG_MASTER_FILE)

    def load_song_titles(self):
        """Song master flattened to a de-duplicated title corpus."""
        titles = extract_song_titles(self.load_song_master())
        if self.verbose:
            print(f"  Loaded {len(titles)} song titles from {SONG_MASTER_FILE}")
        return titles
