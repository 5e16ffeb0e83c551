"""Incremental song-title search (autocomplete).

suggest() is the pure ranking step: titles whose normalized form starts
with the query come first, then titles that merely contain it.  Both
groups keep corpus order and the result is capped at SUGGEST_LIMIT.

Autocomplete wraps suggest() with the selection state a text box needs
(open/closed list, highlighted row, commit, dismiss).  Debouncer sits
between raw keystrokes and Autocomplete.update_query() so recomputation
only happens once typing pauses; the engine itself is synchronous.
"""

import threading

from setlistsearch.config import SUGGEST_DEBOUNCE_SECONDS, SUGGEST_LIMIT
from setlistsearch.normalize import normalize_text

UP = "up"
DOWN = "down"


def suggest(query, corpus, limit=SUGGEST_LIMIT):
    """Candidate titles for *query*: prefix matches, then substring matches."""
    q = normalize_text(query)
    if not q:
        return []
    return _rank_candidates(q, ((t, normalize_text(t)) for t in corpus), limit)


def _rank_candidates(q, pairs, limit):
    prefix = []
    substring = []
    for title, norm in pairs:
        if norm.startswith(q):
            prefix.append(title)
            if len(prefix) >= limit:
                break
        elif q in norm and len(substring) < limit:
            substring.append(title)
    return (prefix + substring)[:limit]


class Autocomplete:
    """Candidate list and keyboard selection state for one input box.

    active_index is -1 when nothing is highlighted, otherwise a valid
    index into candidates.
    """

    def __init__(self, corpus, limit=SUGGEST_LIMIT):
        # Normalize the corpus once; every keystroke reuses it
        self._corpus = [(t, normalize_text(t)) for t in corpus]
        self.limit = limit
        self.query_text = ""
        self.candidates = []
        self.active_index = -1
        self.is_open = False

    def update_query(self, text):
        """Recompute candidates for *text* and clear the highlight."""
        self.query_text = text or ""
        q = normalize_text(text)
        if not q:
            self.dismiss()
            return self.candidates
        self.candidates = _rank_candidates(q, self._corpus, self.limit)
        self.active_index = -1
        # Open even with no candidates so callers can show "no matches"
        self.is_open = True
        return self.candidates

    def move_selection(self, direction):
        """Move the highlight up or down, clamped to the list (no wrap)."""
        if not self.is_open or not self.candidates:
            return self.active_index
        last = len(self.candidates) - 1
        if direction == DOWN:
            self.active_index = min(self.active_index + 1, last)
        elif direction == UP:
            self.active_index = max(self.active_index - 1, 0)
        else:
            raise ValueError(f"unknown direction: {direction!r}")
        return self.active_index

    @property
    def active(self):
        """Highlighted title, or None."""
        if 0 <= self.active_index < len(self.candidates):
            return self.candidates[self.active_index]
        return None

    def select(self, index):
        """Commit the candidate at *index* (pointer click)."""
        if not 0 <= index < len(self.candidates):
            return None
        self.active_index = index
        return self.commit()

    def commit(self):
        """Return the highlighted title and close the list.

        With nothing highlighted, returns None and leaves the state as is;
        the caller decides what a plain submit means.
        """
        title = self.active
        if title is None:
            return None
        self.query_text = title
        self.dismiss()
        return title

    def dismiss(self):
        """Close the list without committing anything."""
        self.candidates = []
        self.active_index = -1
        self.is_open = False


class Debouncer:
    """Deliver only the last submitted value, *delay* seconds after it.

    Each submit() restarts the timer.  flush() delivers a pending value
    right away; cancel() drops it.  The callback runs on the timer thread
    unless flush() is used.
    """

    def __init__(self, callback, delay=SUGGEST_DEBOUNCE_SECONDS):
        self.callback = callback
        self.delay = delay
        self._lock = threading.Lock()
        self._timer = None
        self._pending = None
        self._has_pending = False
        self._generation = 0

    def submit(self, value):
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
            self._generation += 1
            self._pending = value
            self._has_pending = True
            self._timer = threading.Timer(self.delay, self._fire, args=(self._generation,))
            self._timer.daemon = True
            self._timer.start()

    def _pop_pending(self):
        # Caller holds self._lock
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None
        if not self._has_pending:
            return False, None
        value = self._pending
        self._pending = None
        self._has_pending = False
        return True, value

    def _take(self):
        with self._lock:
            return self._pop_pending()

    def _fire(self, generation):
        with self._lock:
            # A newer submit() superseded this timer after it started firing
            if generation != self._generation:
                return
            ok, value = self._pop_pending()
        if ok:
            self.callback(value)

    def flush(self):
        """Deliver the pending value now.  Returns True if there was one."""
        ok, value = self._take()
        if ok:
            self.callback(value)
        return ok

    def cancel(self):
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
                self._timer = None
            self._pending = None
            self._has_pending = False

    @property
    def pending(self):
        return self._has_pending
