"""Backend for the NetEase Cloud Music web API.

Search:
    ``POST http://music.163.com/api/search/get/web`` with form fields
    ``s`` (query), ``offset``, ``limit``, ``total`` and ``type=1`` (songs).
    JSON path::

        result.songs[]
            .id            → SearchResult.id
            .name          → SearchResult.title
            .artists[].name
            .alias[]
            .album.name

Lyric:
    ``GET http://music.163.com/api/song/lyric?os=pc&id=<id>&lv=-1&kv=0&tv=-1``
    (``lv``/``tv``/``kv`` request the original, translated and karaoke
    versions; the karaoke one is not used).  JSON path::

        lrc.lyric      → LyricPayload.original
        tlyric.lyric   → LyricPayload.translated (only some songs have one)

The search endpoint is region-restricted; the ``X-Real-IP`` header makes it
answer from outside mainland China.
"""

import json

import httpx

from ..config import LYRIC_URL, SEARCH_URL, Settings
from ..exceptions import FetchError, ParseError
from ..log import get_logger
from ..models import LyricPayload, SearchResult
from .base import LyricBackend

logger = get_logger(__name__)

_SEARCH_HEADERS = {"X-Real-IP": "1.1.0.0"}

# type codes: song 1, album 10, artist 100, playlist 1000, user 1002
_SONG_SEARCH_TYPE = "1"


class NeteaseBackend(LyricBackend):
    """Backend for music.163.com."""

    def __init__(self, settings: Settings | None = None):
        self.settings = settings or Settings()

    def search(self, query: str) -> list[SearchResult]:
        data = {
            "s": query,
            "offset": "0",
            "limit": str(self.settings.search_limit),
            "total": "true",
            "type": _SONG_SEARCH_TYPE,
        }
        logger.debug("Searching %s for %r", SEARCH_URL, query)
        try:
            resp = httpx.post(
                SEARCH_URL,
                data=data,
                headers=_SEARCH_HEADERS,
                timeout=self.settings.timeout,
            )
        except httpx.RequestError as exc:
            raise FetchError(SEARCH_URL, 0) from exc
        payload = _decode(resp, SEARCH_URL)
        return _songs_from_payload(payload)

    def fetch_lyric(self, song_id: str) -> LyricPayload:
        params = {"os": "pc", "id": song_id, "lv": "-1", "kv": "0", "tv": "-1"}
        logger.debug("Downloading lyric %s", song_id)
        try:
            resp = httpx.get(LYRIC_URL, params=params, timeout=self.settings.timeout)
        except httpx.RequestError as exc:
            raise FetchError(LYRIC_URL, 0) from exc
        payload = _decode(resp, LYRIC_URL)
        return LyricPayload(
            original=_lyric_text(payload, "lrc"),
            translated=_lyric_text(payload, "tlyric"),
        )


def _decode(resp: httpx.Response, url: str) -> dict:
    """Return the JSON object of *resp*.

    Raises FetchError for non-200 and blank responses, ParseError for bodies
    that are not a JSON object.
    """
    if resp.status_code != 200:
        raise FetchError(url, resp.status_code)
    if not resp.text.strip():
        raise FetchError(url, 0)
    try:
        payload = resp.json()
    except json.JSONDecodeError as exc:
        raise ParseError(url, f"invalid JSON: {exc}") from exc
    if not isinstance(payload, dict):
        raise ParseError(url, "expected a JSON object")
    return payload


def _songs_from_payload(payload: dict) -> list[SearchResult]:
    result = payload.get("result") or {}
    songs = result.get("songs") if isinstance(result, dict) else None
    if not isinstance(songs, list):
        return []
    return [SearchResult.from_json(song) for song in songs if isinstance(song, dict)]


def _lyric_text(payload: dict, key: str) -> str:
    section = payload.get(key) or {}
    if not isinstance(section, dict):
        return ""
    lyric = section.get("lyric")
    return lyric if isinstance(lyric, str) else ""
