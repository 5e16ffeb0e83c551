"""Song performance counts across a live collection.

Titles are grouped by normalized form ("Song", "song", "ＳＯＮＧ" are one
song) and shown with the first spelling encountered.  Entries are sorted
by count, highest first; equal counts keep first-occurrence order.
"""

from setlistsearch.config import RANKING_EXPANDED_LIMIT, RANKING_INITIAL_LIMIT
from setlistsearch.models import RankingEntry
from setlistsearch.normalize import normalize_text


def count_songs(lives):
    """normalized key → [display_title, count], in first-occurrence order."""
    counts = {}
    for live in lives:
        for song in live.setlist:
            title = song.clean_title
            if not title:
                continue
            key = normalize_text(title)
            if key in counts:
                counts[key][1] += 1
            else:
                counts[key] = [title, 1]
    return counts


def rank_songs(lives):
    """Ranking entries sorted by count descending (stable on ties)."""
    counts = count_songs(lives)
    # sorted() is stable and dicts keep insertion order
    ordered = sorted(counts.values(), key=lambda pair: pair[1], reverse=True)
    return [RankingEntry(display_title=t, count=n) for t, n in ordered]


def total_performances(entries):
    return sum(e.count for e in entries)


class RankingView:
    """Top-N slice of a computed ranking with an expand/collapse toggle.

    Toggling only changes the slice; the ranking is computed once.
    """

    def __init__(self, entries, initial_limit=RANKING_INITIAL_LIMIT,
                 expanded_limit=RANKING_EXPANDED_LIMIT):
        self.entries = list(entries)
        self.initial_limit = initial_limit
        self.expanded_limit = expanded_limit
        self.expanded = False

    @classmethod
    def from_lives(cls, lives, **kwargs):
        return cls(rank_songs(lives), **kwargs)

    @property
    def limit(self):
        return self.expanded_limit if self.expanded else self.initial_limit

    @property
    def visible(self):
        return self.entries[:self.limit]

    @property
    def can_expand(self):
        """True when the other cap would show a different number of rows."""
        return len(self.entries) > self.initial_limit

    def toggle(self):
        self.expanded = not self.expanded
        return self.visible

    def __len__(self):
        return len(self.entries)
