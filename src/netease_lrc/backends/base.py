from abc import ABC, abstractmethod

from ..models import LyricPayload, SearchResult


class LyricBackend(ABC):
    """Abstract base class for song search / lyric download services."""

    @abstractmethod
    def search(self, query: str) -> list[SearchResult]:
        """Search songs by title and return the raw results in backend order.

        Raises FetchError on transport failures, non-200 responses and empty
        bodies; ParseError if the body is not JSON.
        """

    @abstractmethod
    def fetch_lyric(self, song_id: str) -> LyricPayload:
        """Download the original and translated lyric for *song_id*.

        Missing lyric fields come back as empty strings.  Raises FetchError /
        ParseError like :meth:`search`.
        """
