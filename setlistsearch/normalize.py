"""Text normalization for search and aggregation.

Every comparison in the package (autocomplete, filters, ranking keys)
runs both sides through normalize_text(), so full-width/half-width
variants and letter case never split a match:

    normalize_text("ＡＢＣ ") == normalize_text("abc") == "abc"
"""

import unicodedata


def normalize_text(value):
    """Canonical comparison form: NFKC, lower case, trimmed.

    None maps to "".  Non-string values are converted with str() first
    (year numbers, ids).  Idempotent.
    """
    if value is None:
        return ""
    if not isinstance(value, str):
        value = str(value)
    # Lowering can leave composable sequences (capital Greek + accent),
    # so recompose after the case fold.
    folded = unicodedata.normalize("NFKC", value).lower()
    return unicodedata.normalize("NFKC", folded).strip()


def clean_title(raw):
    """Trimmed display title, or "" when the title is missing or blank."""
    if not isinstance(raw, str):
        return ""
    return raw.strip()
