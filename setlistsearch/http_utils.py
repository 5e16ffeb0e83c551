"""Shared HTTP utilities for remote data sources."""

import requests

from setlistsearch.config import HTTP_TIMEOUT


def create_session(user_agent):
    """Create a requests.Session with a User-Agent header."""
    s = requests.Session()
    s.headers["User-Agent"] = user_agent
    return s


def api_get(session, url, params=None, timeout=HTTP_TIMEOUT):
    """GET *url* and decode the JSON body.

    Non-success responses raise requests.HTTPError; there is no retry,
    a failed document stays failed until the caller asks again.
    """
    resp = session.get(url, params=params, timeout=timeout)
    resp.raise_for_status()
    return resp.json()


def is_url(source):
    return str(source).startswith(("http://", "https://"))


def join_url(base, name):
    return f"{str(base).rstrip('/')}/{name}"


def progress_line(done, total, elapsed):
    """Format a progress string like ``[done/total pct% elapsed_s eta eta_s]``."""
    pct = done * 100 // total if total else 0
    rate = done / elapsed if elapsed > 0 else 0
    eta = (total - done) / rate if rate > 0 else 0
    return f"[{done}/{total} {pct:>3}% {elapsed:.0f}s eta {eta:.0f}s]"
