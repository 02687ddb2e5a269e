"""LRC line parsing and translation merging.

Lyric blobs from the lyric backend are plain LRC text: one line per lyric,
each prefixed with a fixed-width ``[mm:ss.xx]`` time tag, plus a few
untimed header lines such as ``[ar:Artist]`` or ``[by:someone]``.

Merge algorithm
---------------

Both the original and the translated lyric are ordered by time.  The merge is
a two-pointer walk: the original lines are visited once, in order, and a
cursor into the translated lines only ever moves forward.  For each timed
original line the translated lines are scanned from the cursor until either
a line with the very same tag is found (it is attached and the cursor steps
past it) or a line later than the original is reached (nothing is attached
and the cursor parks on that line).  Translated lines without an exact
counterpart are dropped.

Example::

    original   = "[00:01.00]Hello\\n[00:02.00]World\\n"
    translated = "[00:01.00]你好\\n"
    merge_translation(original, translated)
    # "[00:01.00]Hello 【你好】\\n[00:02.00]World\\n"
"""

import re

from .log import get_logger
from .models import LyricLine

logger = get_logger(__name__)

TIME_TAG_LENGTH = 10

_TAG_CHARS = frozenset("0123456789:.")
_LEADING_DIGITS_RE = re.compile(r"\d*")


# ---------------------------------------------------------------------------
# Time tags
# ---------------------------------------------------------------------------


def is_time_tag(text: str) -> bool:
    """Return True if *text* is exactly a 10-character ``[mm:ss.xx]``-style tag.

    Only the shape is checked: brackets at both ends and digits, ``:`` or
    ``.`` in between.
    """
    if len(text) != TIME_TAG_LENGTH or text[0] != "[" or text[-1] != "]":
        return False
    return all(ch in _TAG_CHARS for ch in text[1:-1])


def time_tag_to_centis(tag: str | None) -> int:
    """Convert a time tag to hundredths of a second, for ordering only.

    Minutes, seconds and hundredths are read from fixed positions; each field
    counts its leading digits only, so a malformed field (or a missing tag)
    contributes 0.
    """
    if not tag:
        return 0
    minutes = _leading_int(tag[1:3])
    seconds = _leading_int(tag[4:6])
    hundredths = _leading_int(tag[7:9])
    return minutes * 6000 + seconds * 100 + hundredths


def _leading_int(field: str) -> int:
    digits = _LEADING_DIGITS_RE.match(field).group()
    return int(digits) if digits else 0


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------


def parse_lines(blob: str) -> list[LyricLine]:
    """Split *blob* on ``\\n`` into :class:`LyricLine` objects, in order.

    A line whose first ten characters form a time tag is split into tag and
    text; any other line is kept whole as untimed text.  Splitting an empty
    blob yields one empty untimed line.
    """
    lines: list[LyricLine] = []
    for line in blob.split("\n"):
        tag = line[:TIME_TAG_LENGTH]
        if is_time_tag(tag):
            lines.append(LyricLine(time_tag=tag, text=line[TIME_TAG_LENGTH:]))
        else:
            lines.append(LyricLine(time_tag=None, text=line))
    return lines


# ---------------------------------------------------------------------------
# Merging
# ---------------------------------------------------------------------------


def merge_translation(original: str, translated: str) -> str:
    """Interleave *translated* into *original* and return the merged blob.

    Produces exactly one output line per original line, each terminated by
    ``\\n``; a matched translation is appended as `` 【text】``.
    """
    org_lines = parse_lines(original)
    if original.endswith("\n"):
        # The empty segment after the final newline is already accounted for
        # by the terminator written after the last real line.
        org_lines = org_lines[:-1]
    trans_lines = parse_lines(translated)

    out: list[str] = []
    cursor = 0
    matched = 0
    for line in org_lines:
        out.append(line.raw)
        if line.time_tag is not None:
            text, cursor = _find_translation(line.time_tag, trans_lines, cursor)
            if text.strip():
                out.append(f" 【{text}】")
                matched += 1
        out.append("\n")

    logger.debug(
        "Merged translation: %d of %d original lines matched (%d translated lines)",
        matched,
        len(org_lines),
        len(trans_lines),
    )
    return "".join(out)


def _find_translation(tag: str, trans_lines: list[LyricLine], cursor: int) -> tuple[str, int]:
    """Scan *trans_lines* from *cursor* for a line tagged exactly *tag*.

    Returns ``(text, new_cursor)``.  *text* is empty when nothing matched.  The
    returned cursor is never smaller than *cursor*.
    """
    time = time_tag_to_centis(tag)
    for i in range(cursor, len(trans_lines)):
        candidate = trans_lines[i]
        if time_tag_to_centis(candidate.time_tag) > time:
            return "", i
        if candidate.time_tag == tag:
            return candidate.text, i + 1
    return "", cursor
