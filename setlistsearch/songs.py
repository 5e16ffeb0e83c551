"""Song master parsing: recover a flat title corpus from loose JSON.

The song master has no fixed schema.  Accepted shapes include:

    ["Song A", "Song B"]
    [{"title": "Song A"}, {"name": "Song B"}, "Song C"]
    {"songs": [...]}            (also titles/items/data/list/results)
    {"payload": {"rows": [...]}}  (first list found up to two levels deep)

extract_song_titles() tries each container shape in turn and stops at
the first that yields a list.  Anything unrecognised gives an empty
corpus, which simply leaves autocomplete without candidates.
"""

from setlistsearch.config import SONG_MASTER_KEYS, SONG_TITLE_KEYS
from setlistsearch.normalize import normalize_text


# ── Container shapes ─────────────────────────────────────────────────
# Each returns the list holding the entries, or None if the shape does
# not apply.

def _top_level_list(raw):
    return raw if isinstance(raw, list) else None


def _known_key_list(raw):
    if not isinstance(raw, dict):
        return None
    for key in SONG_MASTER_KEYS:
        value = raw.get(key)
        if isinstance(value, list):
            return value
    return None


def _nested_list(raw):
    """First list among the object's values, or one level below them."""
    if not isinstance(raw, dict):
        return None
    for value in raw.values():
        if isinstance(value, list):
            return value
        if isinstance(value, dict):
            for inner in value.values():
                if isinstance(inner, list):
                    return inner
    return None


_CONTAINER_SHAPES = (_top_level_list, _known_key_list, _nested_list)


def _entry_title(item):
    """Title string for one entry, or None to skip it."""
    if isinstance(item, str):
        return item
    if isinstance(item, dict):
        for key in SONG_TITLE_KEYS:
            value = item.get(key)
            if value is not None:
                return value if isinstance(value, str) else None
    return None


def titles_from_list(items):
    """Titles from a list of strings/objects, de-duplicated by normalized form.

    Keeps the first literal spelling and first-seen order.
    """
    seen = set()
    titles = []
    for item in items:
        title = _entry_title(item)
        if title is None:
            continue
        key = normalize_text(title)
        if not key or key in seen:
            continue
        seen.add(key)
        titles.append(title)
    return titles


def extract_song_titles(raw):
    """Flatten a song master payload of any supported shape into titles."""
    for shape in _CONTAINER_SHAPES:
        items = shape(raw)
        if items is not None:
            return titles_from_list(items)
    return []


def build_song_master(lives):
    """Song master document listing every distinct setlist title, sorted.

    Distinctness is on the trimmed literal title, matching what the
    archive itself spells; extract_song_titles() folds variants later.
    """
    songs = set()
    for live in lives:
        for song in live.setlist:
            title = song.clean_title
            if title:
                songs.add(title)
    return {"songs": sorted(songs)}
