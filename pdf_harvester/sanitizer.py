"""URL to filesystem-safe filename conversion.

``url_to_filename`` never raises: any string maps to a name made of
``[a-z0-9_]`` plus at most one extension, e.g.::

    https://example.com/Data-Sheets/SDS_2024.PDF  ->  sds_2024.pdf
    https://site/a/B File (1).pdf                 ->  b_file_1.pdf

A URL whose last segment has no extension keeps none.
"""

import re

_NON_ALNUM = re.compile(r"[^a-z0-9]")
_UNDERSCORES = re.compile(r"_+")
_EXT_CHARS = re.compile(r"[a-z0-9]*")

# Type names left behind once the dot before an extension became "_"
INVALID_SUBSTRINGS = ("_pdf", "_zip")


def final_segment(path: str) -> str:
    """Return the text after the last ``/``, ignoring trailing slashes."""
    return path.rstrip("/").rsplit("/", 1)[-1]


def file_extension(name: str) -> str:
    """Return ``.ext`` for the last dot in ``name``, or ``""``.

    Only the leading run of letters and digits after the dot counts, so a
    query string glued to the extension (``.pdf?v=2``) is dropped.
    """
    dot = name.rfind(".")
    if dot == -1:
        return ""
    ext = _EXT_CHARS.match(name, dot + 1).group(0)
    return f".{ext}" if ext else ""


def url_to_filename(raw_url: str) -> str:
    lower = final_segment(raw_url.lower())
    ext = file_extension(lower)

    safe = _NON_ALNUM.sub("_", lower)
    safe = _UNDERSCORES.sub("_", safe).strip("_")

    for invalid in INVALID_SUBSTRINGS:
        safe = safe.replace(invalid, "")

    if not file_extension(safe):
        safe += ext
    return safe
