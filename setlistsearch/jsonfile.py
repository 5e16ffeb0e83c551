"""Local JSON helpers (plain reads, atomic writes)."""

import json
import os
import tempfile
from pathlib import Path


def read_json(path):
    """Parse a JSON file.  Raises OSError / json.JSONDecodeError."""
    return json.loads(Path(path).read_text(encoding="utf-8"))


def write_json(path, data):
    """Atomically write *data* as pretty-printed UTF-8 JSON."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    # Atomic write: write to temp file then rename
    fd, tmp = tempfile.mkstemp(dir=path.parent, suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            json.dump(data, f, ensure_ascii=False, indent=2)
            f.write("\n")
        os.replace(tmp, path)
    except BaseException:
        try:
            os.unlink(tmp)
        except OSError:
            pass
        raise
