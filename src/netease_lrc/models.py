from dataclasses import dataclass


def _text(value) -> str:
    """Coerce a JSON scalar to ``str``; ``None`` becomes the empty string."""
    if value is None:
        return ""
    return str(value)


def _list(value) -> list:
    """Return *value* if it is a JSON array, else an empty list."""
    return value if isinstance(value, list) else []


@dataclass(frozen=True)
class SearchResult:
    """One song object from the search backend, reduced to the fields we rank on."""

    id: str
    title: str
    artists: tuple[str, ...] = ()
    album_name: str = ""
    alias: tuple[str, ...] = ()

    @classmethod
    def from_json(cls, song: dict) -> "SearchResult":
        """Build from a raw ``result.songs[]`` entry.

        Missing or null fields become empty strings / empty tuples.
        """
        artists = _list(song.get("artists"))
        album = song.get("album") or {}
        return cls(
            id=_text(song.get("id")),
            title=_text(song.get("name")),
            artists=tuple(_text(a.get("name")) for a in artists if isinstance(a, dict)),
            album_name=_text(album.get("name")) if isinstance(album, dict) else "",
            alias=tuple(_text(a) for a in _list(song.get("alias"))),
        )


@dataclass
class Candidate:
    """A ranked view of one search result.

    ``score`` is the combined artist + title similarity (0-200). It is
    recomputed for every query and never persisted.
    """

    id: str
    title: str
    best_artist_name: str
    display_note: str = ""
    score: float = 0.0

    @property
    def note(self) -> str:
        """The note string handed to the host sink: ``"<id>; <display_note>"``."""
        return f"{self.id}; {self.display_note}"


@dataclass(frozen=True)
class LyricLine:
    """A single lyric line.

    ``time_tag`` is the raw ``[mm:ss.xx]`` tag, or None for metadata/comment
    lines, in which case ``text`` holds the whole line.
    """

    time_tag: str | None
    text: str

    @property
    def raw(self) -> str:
        return (self.time_tag or "") + self.text


@dataclass(frozen=True)
class LyricPayload:
    """The lyric fields of one lyric backend response."""

    original: str = ""
    translated: str = ""
