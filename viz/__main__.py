"""Allow running as `python -m viz`."""

import argparse
import sys

from setlistsearch.config import ALL_YEARS_LABEL, DEFAULT_DATA_SOURCE, RANKING_INITIAL_LIMIT
from setlistsearch.loader import LoadError
from setlistsearch.models import parse_year_selector
from viz.ranking_chart import main

parser = argparse.ArgumentParser(prog="python -m viz")
parser.add_argument("--data", default=DEFAULT_DATA_SOURCE,
                    help=f"Data directory or base URL (default: {DEFAULT_DATA_SOURCE})")
parser.add_argument("--year", default=ALL_YEARS_LABEL,
                    help=f"Year or '{ALL_YEARS_LABEL}' (default: {ALL_YEARS_LABEL})")
parser.add_argument("--limit", type=int, default=RANKING_INITIAL_LIMIT,
                    help=f"Number of songs (default: {RANKING_INITIAL_LIMIT})")
parser.add_argument("-o", "--output", default="ranking.png",
                    help="Output image (default: ranking.png)")
args = parser.parse_args()

try:
    main(args.data, parse_year_selector(args.year), limit=args.limit, output=args.output)
except (LoadError, ValueError) as e:
    print(f"Error: {e}", file=sys.stderr)
    sys.exit(1)
