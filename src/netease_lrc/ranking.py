"""Rank raw search results against an (artist, title) query.

Selection
---------

Results are first bucketed by title, comparing lower-cased strings:

* *exact*: the result title equals the query title;
* *partial*: one title contains the other.

The exact bucket is used if it is non-empty, else the partial bucket, else
every result.  Each bucket keeps the backend's order.

Scoring
-------

Every selected result becomes a :class:`~netease_lrc.models.Candidate` whose
``best_artist_name`` is the credited artist most similar to the query artist.
Candidates are then sorted (stably) by descending::

    similarity(query_artist, best_artist_name) + similarity(query_title, title)

Scoring uses the strings as given, not lower-cased.
"""

from collections.abc import Sequence

from .log import get_logger
from .models import Candidate, SearchResult
from .similarity import similarity

logger = get_logger(__name__)


def rank_candidates(
    query_artist: str, query_title: str, results: Sequence[SearchResult]
) -> list[Candidate]:
    """Return one candidate per distinct result id, best match first.

    Returns an empty list when there are no results or the title is blank.
    """
    query_artist = query_artist.strip()
    query_title = query_title.strip()
    if not results or not query_title:
        return []

    candidates: list[Candidate] = []
    seen: set[str] = set()
    for result in select_results(query_title, results):
        if result.id in seen:
            continue
        seen.add(result.id)
        candidates.append(_to_candidate(query_artist, query_title, result))
    # sorted() is stable: equal scores keep the bucket order.
    candidates = sorted(candidates, key=lambda c: c.score, reverse=True)

    for candidate in candidates:
        logger.debug(
            "Candidate %s: %r by %r (score %.2f)",
            candidate.id,
            candidate.title,
            candidate.best_artist_name,
            candidate.score,
        )
    return candidates


def select_results(query_title: str, results: Sequence[SearchResult]) -> list[SearchResult]:
    """Pick the exact-title bucket, else the partial bucket, else all results."""
    low_query = query_title.lower()
    exact: list[SearchResult] = []
    partial: list[SearchResult] = []
    for result in results:
        low_title = result.title.lower()
        if low_title == low_query:
            exact.append(result)
        elif low_query in low_title or low_title in low_query:
            partial.append(result)

    logger.debug(
        "Title buckets for %r: %d exact, %d partial, %d total",
        query_title,
        len(exact),
        len(partial),
        len(results),
    )
    if exact:
        return exact
    if partial:
        return partial
    return list(results)


def best_artist(query_artist: str, artists: Sequence[str]) -> str:
    """Return the name in *artists* most similar to *query_artist*.

    Defaults to the first artist (or ``""`` when there are none); only a
    strictly higher score replaces it, so the first maximal match wins.
    """
    best_name = artists[0] if artists else ""
    best_score = 0.0
    for name in artists:
        score = similarity(query_artist, name)
        if score > best_score:
            best_score = score
            best_name = name
    return best_name


def _to_candidate(query_artist: str, query_title: str, result: SearchResult) -> Candidate:
    artist = best_artist(query_artist, result.artists)
    alias = result.alias[0] if result.alias else ""
    return Candidate(
        id=result.id,
        title=result.title,
        best_artist_name=artist,
        display_note=f"{alias}; Album: {result.album_name}",
        score=similarity(query_artist, artist) + similarity(query_title, result.title),
    )
