import re
import sys
from pathlib import Path

import click

from .config import Settings, load_settings
from .exceptions import ConfigError
from .log import setup_logging
from .lookup import LyricLookup
from .sink import CollectingSink


def _slugify(text: str) -> str:
    """Convert a string to a lowercase hyphenated slug suitable for filenames."""
    text = text.lower()
    text = re.sub(r"[^\w\s-]", "", text)   # drop punctuation
    text = re.sub(r"[\s_]+", "-", text)     # spaces/underscores → hyphens
    text = re.sub(r"-{2,}", "-", text)      # collapse multiple hyphens
    return text.strip("-")


def _default_filename(artist: str, title: str) -> str:
    return f"{_slugify(artist)}-{_slugify(title)}.lrc"


def _resolve_settings(translate: bool | None, debug: bool, timeout: float | None) -> Settings:
    settings = load_settings()
    if translate is not None:
        settings.translation_enabled = translate
    if debug:
        settings.debug = True
    if timeout is not None:
        settings.timeout = timeout
    # Re-run validation after applying overrides
    return Settings(**vars(settings))


@click.command()
@click.argument("artist")
@click.argument("title")
@click.option("-o", "--output", "output_path", default=None, metavar="PATH",
              help="Output file path (default: <artist>-<title>.lrc)")
@click.option("--stdout", is_flag=True, default=False,
              help="Print the lyric to stdout instead of writing a file.")
@click.option("--list", "list_only", is_flag=True, default=False,
              help="Only list the ranked candidates.")
@click.option("--pick", default=1, show_default=True,
              help="Download the lyric of candidate N from the ranked list.")
@click.option("--id", "song_id", default=None, metavar="ID",
              help="Skip the search and download the lyric with this song id.")
@click.option("--translate/--no-translate", default=None,
              help="Merge the translated lyric in, when one exists.")
@click.option("--debug", is_flag=True, default=False, help="Enable debug logging.")
@click.option("--timeout", type=float, default=None, help="HTTP timeout in seconds.")
def main(
    artist: str,
    title: str,
    output_path: str | None,
    stdout: bool,
    list_only: bool,
    pick: int,
    song_id: str | None,
    translate: bool | None,
    debug: bool,
    timeout: float | None,
) -> None:
    """Find the lyric of TITLE by ARTIST on NetEase Cloud Music.

    \b
    Candidates are ranked by how closely their artist and title match the
    query.  Set NETEASE_LRC_TRANSLATE=1 (or pass --translate) to merge the
    translated lyric into the original.
    """
    try:
        settings = _resolve_settings(translate, debug, timeout)
    except ConfigError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    setup_logging(level="DEBUG" if settings.debug else "WARNING", verbose=settings.debug)

    sink = CollectingSink()
    lookup = LyricLookup(settings=settings, sink=sink)

    # --- Search + rank ---
    if song_id is None:
        candidates = lookup.list_candidates(artist, title)
        if not candidates:
            click.echo(f"Error: No songs found for '{title}' by '{artist}'", err=True)
            sys.exit(1)

        # Keep stdout clean for the lyric itself
        if list_only or not stdout:
            for index, entry in enumerate(sink.candidates, start=1):
                click.echo(f"{index:>2}. [{entry.artist}] {entry.title}  ({entry.note})")
        if list_only:
            return

        if not 1 <= pick <= len(candidates):
            click.echo(f"Error: --pick must be between 1 and {len(candidates)}", err=True)
            sys.exit(1)
        song_id = candidates[pick - 1].id

    # --- Download ---
    lyric = lookup.fetch_lyric(song_id)
    if lyric is None:
        click.echo(f"Error: No lyric available for song {song_id}", err=True)
        sys.exit(1)

    # --- Output ---
    if stdout:
        click.echo(lyric, nl=not lyric.endswith("\n"))
        return

    dest = Path(output_path) if output_path else Path(_default_filename(artist, title))
    dest.write_text(lyric, encoding="utf-8")
    click.echo(f"Written to {dest}")
