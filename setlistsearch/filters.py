"""AND-composed filters over a loaded live collection.

Year selection happens upstream (which files were loaded), so the
predicates here cover type, live title, and song title only.  Results
are always an order-preserving subsequence of the input.
"""

from setlistsearch.models import SongMatch
from setlistsearch.normalize import normalize_text


def _has_song(live, q):
    return any(q in normalize_text(song.title) for song in live.setlist)


def apply_filters(lives, criteria):
    """Lives matching every set criterion, in input order.

    Type is an exact, case-sensitive match.  Title and song queries are
    normalized substring matches; blank queries are ignored.
    """
    want_type = criteria.type or None
    live_q = normalize_text(criteria.live_title_query)
    song_q = normalize_text(criteria.song_title_query)

    result = []
    for live in lives:
        if want_type is not None and live.type != want_type:
            continue
        if live_q and live_q not in normalize_text(live.title):
            continue
        if song_q and not _has_song(live, song_q):
            continue
        result.append(live)
    return result


def sort_lives(lives):
    """Lives by date, ties broken by slot."""
    return sorted(lives, key=lambda live: live.sort_key)


def live_types(lives):
    """Distinct non-empty types in first-seen order."""
    types = []
    for live in lives:
        if live.type and live.type not in types:
            types.append(live.type)
    return types


def find_live(lives, live_id):
    live_id = str(live_id)
    return next((live for live in lives if live.id == live_id), None)


def find_song_matches(lives, query):
    """One SongMatch per setlist entry whose title contains *query*.

    Event order, then setlist order.  A live that played the song twice
    contributes two matches.
    """
    q = normalize_text(query)
    if not q:
        return []
    matches = []
    for live in lives:
        for song in live.setlist:
            if q in normalize_text(song.title):
                matches.append(SongMatch(
                    date=live.date,
                    title=live.title,
                    venue=live.venue,
                    year=live.year,
                    song=song.title,
                ))
    return matches
