"""Public entry point: search, rank, download and merge.

:class:`LyricLookup` ties a :class:`~netease_lrc.backends.base.LyricBackend`
to the ranking and merging functions.  Every "nothing found" outcome (blank
title, backend failure, no songs, no lyric) comes back as an empty list or
``None``; backend errors are logged, never raised.

Usage::

    from netease_lrc.lookup import LyricLookup
    lookup = LyricLookup()
    candidates = lookup.list_candidates("初音ミク", "tell your world")
    if candidates:
        text = lookup.fetch_lyric(candidates[0].id)
"""

from .backends.base import LyricBackend
from .backends.netease import NeteaseBackend
from .config import Settings
from .exceptions import FetchError, ParseError
from .log import get_logger
from .lrc import merge_translation
from .models import Candidate
from .ranking import rank_candidates
from .sink import ResultSink

logger = get_logger(__name__)


class LyricLookup:
    """Find and download lyrics through a backend.

    Args:
        backend:  Service to query; defaults to :class:`NeteaseBackend`.
        settings: Switches; defaults to :class:`Settings` defaults.
        sink:     Optional receiver notified of every candidate and lyric.
    """

    def __init__(
        self,
        backend: LyricBackend | None = None,
        settings: Settings | None = None,
        sink: ResultSink | None = None,
    ):
        self.settings = settings or Settings()
        self.backend = backend or NeteaseBackend(self.settings)
        self.sink = sink

    def list_candidates(self, artist: str, title: str) -> list[Candidate]:
        """Search by *title* and return candidates ranked against *artist* and *title*."""
        artist = artist.strip()
        title = title.strip()
        if not title:
            logger.debug("Empty title, skipping search")
            return []

        try:
            results = self.backend.search(title)
        except (FetchError, ParseError) as exc:
            logger.warning("Search failed: %s", exc)
            return []
        if not results:
            logger.debug("No songs found for %r", title)
            return []

        candidates = rank_candidates(artist, title, results)
        if self.sink is not None:
            for candidate in candidates:
                self.sink.add_candidate(
                    candidate.best_artist_name, candidate.title, candidate.id, candidate.note
                )
        return candidates

    def fetch_lyric(self, song_id: str) -> str | None:
        """Return the lyric text for *song_id*, or None if there is none.

        With translation enabled and a translated lyric available, the
        translation is merged in line by line.
        """
        try:
            payload = self.backend.fetch_lyric(song_id)
        except (FetchError, ParseError) as exc:
            logger.warning("Lyric download failed for %s: %s", song_id, exc)
            return None

        text = payload.original
        if self.settings.translation_enabled and payload.translated.strip():
            text = merge_translation(payload.original, payload.translated)
        if not text.strip():
            logger.debug("No lyric available for %s", song_id)
            return None

        if self.sink is not None:
            self.sink.add_lyric(text, song_id)
        return text

    def find_best_lyric(self, artist: str, title: str) -> str | None:
        """Return the lyric of the top-ranked candidate, or None."""
        candidates = self.list_candidates(artist, title)
        if not candidates:
            return None
        return self.fetch_lyric(candidates[0].id)
