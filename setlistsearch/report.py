"""Plain-text rendering of lives, setlists, match lists and rankings."""

from setlistsearch.models import ALL_YEARS, format_date_with_day
from setlistsearch.ranking import total_performances


def year_label(year):
    if year == ALL_YEARS:
        return "All years"
    return str(year)


def print_lives(lives):
    if not lives:
        print("  No matching lives.")
        return
    for live in lives:
        slot = f" [{live.slot}]" if live.slot else ""
        kind = f"  ({live.type})" if live.type else ""
        print(f"  {live.id:<12} {live.date}{slot} / {live.title}{kind}")
    print(f"\n  {len(lives)} lives")


def print_live(live):
    """Date with weekday, title, venue and type, then the numbered setlist."""
    print(f"  {format_date_with_day(live.date)}")
    print(f"  {live.title}")
    meta = " · ".join(p for p in (live.venue, live.type) if p)
    if meta:
        print(f"  {meta}")
    if live.tour:
        print(f"  Tour: {live.tour}")
    print()
    if not live.setlist:
        print("  (no setlist)")
        return
    for i, song in enumerate(live.setlist, 1):
        note = f" ({song.note})" if song.note else ""
        print(f"  {i:>3}. {song.title}{note}")


def print_matches(query, year, matches):
    if not matches:
        print("  No matching performances.")
        return
    print(f"  {year_label(year)} “{query}”")
    print(f"  Performed {len(matches)} times\n")
    for m in matches:
        venue = f" ({m.venue})" if m.venue else ""
        print(f"  {m.date} / {m.title}{venue}")


def print_ranking(view):
    entries = view.visible
    if not entries:
        print("  No songs to rank.")
        return
    width = max(len(e.display_title) for e in entries)
    width = min(max(width, 4), 50)
    print(f"  {'#':>3} {'Song':<{width}} {'N':>4}")
    print(f"  {'-'*3} {'-'*width} {'-'*4}")
    for i, e in enumerate(entries, 1):
        print(f"  {i:>3} {e.display_title:<{width}} {e.count:>4}")
    print(f"\n  Performances: {total_performances(view.entries)} across {len(view)} songs")
    if len(view) > len(entries):
        print(f"  Showing {len(entries)} of {len(view)} songs")
    if view.can_expand and not view.expanded:
        print(f"  (--all shows up to {view.expanded_limit})")


def print_suggestions(candidates):
    if not candidates:
        print("  No candidates.")
        return
    for title in candidates:
        print(f"  {title}")
