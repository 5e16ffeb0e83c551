"""Constants, limits, and data file names."""

# ── Data source ────────────────────────────────────────────────────────
# Either a local directory or an http(s):// base URL.
DEFAULT_DATA_SOURCE = "data"

INDEX_FILE = "index.json"            # {"years": [2024, 2025, ...]}
YEAR_FILE_TEMPLATE = "{year}.json"   # [live, live, ...]
SONG_MASTER_FILE = "songs.raw.json"  # any shape, see songs.extract_song_titles

# Spelling of the "all years" selector on the command line
ALL_YEARS_LABEL = "all"

# ── HTTP ───────────────────────────────────────────────────────────────
HTTP_USER_AGENT = "SetlistSearch/1.0 (setlist archive viewer)"
HTTP_TIMEOUT = 10.0  # seconds per request

# Parallel fetch workers when merging every year
LOAD_WORKERS = 4

# ── Autocomplete ──────────────────────────────────────────────────────
SUGGEST_LIMIT = 20
SUGGEST_DEBOUNCE_SECONDS = 0.1

# ── Ranking ───────────────────────────────────────────────────────────
RANKING_INITIAL_LIMIT = 10
RANKING_EXPANDED_LIMIT = 40

# ── Song master probing ───────────────────────────────────────────────
# Container keys tried in order when the song master is an object.
SONG_MASTER_KEYS = ("songs", "titles", "items", "data", "list", "results")

# Keys tried in order when a song master entry is an object.
SONG_TITLE_KEYS = ("title", "name", "song", "label")
