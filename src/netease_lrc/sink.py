from abc import ABC, abstractmethod
from dataclasses import dataclass, field


class ResultSink(ABC):
    """Receiver for lookup results, in the shape a host media player expects."""

    @abstractmethod
    def add_candidate(self, artist: str, title: str, song_id: str, note: str) -> None:
        """Called once per ranked candidate, best match first."""

    @abstractmethod
    def add_lyric(self, text: str, song_id: str) -> None:
        """Called once with the final (possibly merged) lyric text."""


@dataclass
class SinkEntry:
    artist: str
    title: str
    song_id: str
    note: str


@dataclass
class CollectingSink(ResultSink):
    """Sink that records every call in order."""

    candidates: list[SinkEntry] = field(default_factory=list)
    lyrics: list[tuple[str, str]] = field(default_factory=list)

    def add_candidate(self, artist: str, title: str, song_id: str, note: str) -> None:
        self.candidates.append(SinkEntry(artist, title, song_id, note))

    def add_lyric(self, text: str, song_id: str) -> None:
        self.lyrics.append((text, song_id))
