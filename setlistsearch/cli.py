"""CLI with subcommands for browsing and searching the setlist archive."""

import argparse
import json
import sys

from setlistsearch import report
from setlistsearch.autocomplete import suggest
from setlistsearch.config import DEFAULT_DATA_SOURCE, SUGGEST_LIMIT
from setlistsearch.controller import SetlistController
from setlistsearch.jsonfile import write_json
from setlistsearch.loader import DatasetLoader, LoadError
from setlistsearch.models import ALL_YEARS, parse_year_selector
from setlistsearch.songs import build_song_master


def _year_arg(value):
    try:
        return parse_year_selector(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a year or '{ALL_YEARS}': {value!r}")


def _controller(args):
    """Controller loaded for args.year (default: newest year)."""
    loader = DatasetLoader(args.data, verbose=args.verbose)
    ctl = SetlistController(loader)
    if args.year is None:
        ctl.start()
    else:
        ctl.select_year(args.year)
    if ctl.state.error:
        raise LoadError(ctl.state.error)
    return ctl


def cmd_years(args):
    """List available years, newest first."""
    loader = DatasetLoader(args.data, verbose=args.verbose)
    for year in loader.load_years():
        print(f"  {year}")


def cmd_lives(args):
    """List lives matching the filters, ordered by date."""
    ctl = _controller(args)
    ctl.set_type(args.type)
    ctl.set_live_query(args.title)
    ctl.set_song_query(args.song)
    if ctl.state.types:
        print(f"  Types: {', '.join(ctl.state.types)}")
    report.print_lives(ctl.sorted_lives())


def cmd_show(args):
    """Show one live with its setlist."""
    ctl = _controller(args)
    live = ctl.live(args.id)
    if live is None:
        print(f"  No live with id {args.id!r} in {report.year_label(ctl.state.criteria.year)}.")
        return
    report.print_live(live)


def cmd_search(args):
    """Count performances of songs matching a title query."""
    ctl = _controller(args)
    matches = ctl.song_matches(args.song)
    report.print_matches(args.song, ctl.state.criteria.year, matches)


def cmd_rank(args):
    """Rank songs by number of performances."""
    ctl = _controller(args)
    ctl.set_type(args.type)
    ctl.set_song_query(args.song)
    view = ctl.ranking()
    if args.all:
        view.toggle()
    report.print_ranking(view)


def cmd_suggest(args):
    """Autocomplete song titles from the song master."""
    loader = DatasetLoader(args.data, verbose=args.verbose)
    titles = loader.load_song_titles()
    report.print_suggestions(suggest(args.query, titles, limit=args.limit))


def cmd_songs(args):
    """Build the song master from every year's setlists."""
    loader = DatasetLoader(args.data, verbose=args.verbose)
    master = build_song_master(loader.load_all_lives())
    if args.output == "-":
        json.dump(master, sys.stdout, ensure_ascii=False, indent=2)
        print()
        return
    write_json(args.output, master)
    print(f"  Extracted {len(master['songs'])} songs to {args.output}")


def build_parser():
    parser = argparse.ArgumentParser(
        prog="setlistsearch",
        description="Setlist archive search",
    )
    parser.add_argument("--data", default=DEFAULT_DATA_SOURCE,
                        help=f"Data directory or base URL (default: {DEFAULT_DATA_SOURCE})")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Print load progress")
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    year_help = f"Year or '{ALL_YEARS}' (default: newest year)"

    # years
    p_years = subparsers.add_parser("years", help="List available years")
    p_years.set_defaults(func=cmd_years)

    # lives
    p_lives = subparsers.add_parser("lives", help="List lives with filters")
    p_lives.add_argument("--year", type=_year_arg, default=None, help=year_help)
    p_lives.add_argument("--type", default=None, help="Exact live type")
    p_lives.add_argument("--title", default=None, help="Live title contains")
    p_lives.add_argument("--song", default=None, help="Setlist has a song containing")
    p_lives.set_defaults(func=cmd_lives)

    # show
    p_show = subparsers.add_parser("show", help="Show a live's setlist")
    p_show.add_argument("id", help="Live id")
    p_show.add_argument("--year", type=_year_arg, default=None, help=year_help)
    p_show.set_defaults(func=cmd_show)

    # search
    p_search = subparsers.add_parser("search", help="Count performances of a song")
    p_search.add_argument("song", help="Song title (substring)")
    p_search.add_argument("--year", type=_year_arg, default=ALL_YEARS,
                          help=f"Year or '{ALL_YEARS}' (default: {ALL_YEARS})")
    p_search.set_defaults(func=cmd_search)

    # rank
    p_rank = subparsers.add_parser("rank", help="Most performed songs")
    p_rank.add_argument("--year", type=_year_arg, default=ALL_YEARS,
                        help=f"Year or '{ALL_YEARS}' (default: {ALL_YEARS})")
    p_rank.add_argument("--type", default=None, help="Exact live type")
    p_rank.add_argument("--song", default=None, help="Only lives with a song containing")
    p_rank.add_argument("--all", action="store_true",
                        help="Show the expanded ranking instead of the top entries")
    p_rank.set_defaults(func=cmd_rank)

    # suggest
    p_suggest = subparsers.add_parser("suggest", help="Autocomplete a song title")
    p_suggest.add_argument("query", help="Partial song title")
    p_suggest.add_argument("--limit", type=int, default=SUGGEST_LIMIT,
                           help=f"Max candidates (default: {SUGGEST_LIMIT})")
    p_suggest.set_defaults(func=cmd_suggest)

    # songs
    p_songs = subparsers.add_parser("songs", help="Build the song master JSON")
    p_songs.add_argument("-o", "--output", default="-",
                         help="Output file (default: stdout)")
    p_songs.set_defaults(func=cmd_songs)

    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    if not args.command:
        parser.print_help()
        sys.exit(1)

    try:
        args.func(args)
    except LoadError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
