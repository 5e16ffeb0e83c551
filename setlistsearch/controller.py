"""Single owner of the current view: loaded lives plus filter inputs.

The controller replaces the loose page-level globals of a typical
setlist viewer with one ViewState.  Every input change re-runs
apply_filters() over the lives already in memory; only a year change
loads data.

Year loads are split into begin_load() / finish_load() so that a slow
response for a year the user has already moved away from is dropped:
each begin_load() bumps a generation counter, and finish_load() only
applies a result whose token is still current.  select_year() runs both
halves synchronously.
"""

from dataclasses import dataclass, field
from typing import Optional

from setlistsearch.filters import apply_filters, find_live, find_song_matches, live_types, sort_lives
from setlistsearch.loader import LoadError
from setlistsearch.models import FilterCriteria
from setlistsearch.ranking import RankingView


@dataclass
class ViewState:
    criteria: FilterCriteria = field(default_factory=FilterCriteria)
    years: list = field(default_factory=list)   # newest first
    lives: list = field(default_factory=list)   # current year selection, file order
    filtered: list = field(default_factory=list)
    types: list = field(default_factory=list)   # type options for the loaded lives
    error: Optional[str] = None                 # last load failure, if any
    generation: int = 0


class SetlistController:

    def __init__(self, loader):
        self.loader = loader
        self.state = ViewState()

    @property
    def default_year(self):
        return self.state.years[0] if self.state.years else None

    def start(self):
        """Load the year index and show the newest year.

        Raises LoadError if the index itself cannot be read; the page has
        nothing to offer without it.
        """
        self.state.years = self.loader.load_years()
        if self.state.years:
            self.select_year(self.default_year)
        return self.state

    # ── Loading ────────────────────────────────────────────────────────

    def begin_load(self, year):
        """Record *year* as the current selection; return its request token."""
        self.state.generation += 1
        self.state.criteria.year = year
        return self.state.generation

    def finish_load(self, token, lives=None, error=None):
        """Apply a finished load if *token* is still current.

        Returns False (and changes nothing) for a stale token.  On error
        the view is emptied and the message kept in state.error.
        """
        if token != self.state.generation:
            return False
        if error is not None:
            self.state.lives = []
            self.state.types = []
            self.state.filtered = []
            self.state.error = str(error)
            return True

        self.state.error = None
        self.state.lives = list(lives or [])
        self.state.types = live_types(self.state.lives)
        # Keep the selected type only if the new year has it
        if self.state.criteria.type not in self.state.types:
            self.state.criteria.type = None
        self.refresh()
        return True

    def select_year(self, year):
        token = self.begin_load(year)
        try:
            lives = self.loader.load_target_lives(year)
        except LoadError as e:
            self.finish_load(token, error=e)
            return self.state
        self.finish_load(token, lives=lives)
        return self.state

    # ── Criteria ───────────────────────────────────────────────────────

    def refresh(self):
        self.state.filtered = apply_filters(self.state.lives, self.state.criteria)
        return self.state.filtered

    def set_type(self, live_type):
        self.state.criteria.type = live_type or None
        return self.refresh()

    def set_live_query(self, text):
        self.state.criteria.live_title_query = text or None
        return self.refresh()

    def set_song_query(self, text):
        self.state.criteria.song_title_query = text or None
        return self.refresh()

    def reset(self):
        """Clear every criterion and go back to the newest year."""
        self.state.criteria = FilterCriteria()
        if self.default_year is None:
            self.refresh()
            return self.state
        return self.select_year(self.default_year)

    # ── Views ──────────────────────────────────────────────────────────

    def sorted_lives(self):
        return sort_lives(self.state.filtered)

    def live(self, live_id):
        return find_live(self.state.filtered, live_id)

    def ranking(self, **kwargs):
        return RankingView.from_lives(self.state.filtered, **kwargs)

    def song_matches(self, query=None):
        """Match list over the loaded lives for *query* (default: song query)."""
        if query is None:
            query = self.state.criteria.song_title_query
        return find_song_matches(self.state.lives, query)
