"""Songs and the genre, artist and tempo indexes built over them."""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass, field
from itertools import islice

from .csvline import split_string

_ID = 0
_ARTISTS = 2
_ALBUM = 3
_TRACK = 4
_TEMPO = 18
_GENRE = 20
_MIN_FIELDS = _GENRE + 1

_FLOAT_PREFIX = re.compile(
    r"\s*([+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan))",
    re.IGNORECASE,
)


def _parse_float_prefix(text: str) -> float:
    """Parse the leading number of ``text``; 0.0 when there is none."""
    match = _FLOAT_PREFIX.match(text)
    return float(match.group(1)) if match else 0.0


def tempo_category(tempo: float) -> str:
    """Name the speed band of a tempo in BPM."""
    if tempo < 80:
        return "Lento"
    if 80 <= tempo <= 120:
        return "Moderado"
    return "Rapido"


@dataclass
class Song:
    """One track of the dataset."""

    id: str
    artists: list[str] = field(default_factory=list)
    album_name: str = ""
    track_name: str = ""
    track_genre: str = ""
    tempo: float = 0.0

    @property
    def category(self) -> str:
        return tempo_category(self.tempo)

    @classmethod
    def from_fields(cls, fields: Iterable[str]) -> Song:
        """Build a song from the fields of one dataset row."""
        fields = list(fields)
        if len(fields) < _MIN_FIELDS:
            raise ValueError(
                f"expected at least {_MIN_FIELDS} fields, got {len(fields)}"
            )
        return cls(
            id=fields[_ID],
            artists=split_string(fields[_ARTISTS], ";"),
            album_name=fields[_ALBUM],
            track_name=fields[_TRACK],
            track_genre=fields[_GENRE],
            tempo=_parse_float_prefix(fields[_TEMPO]),
        )

    def format(self) -> str:
        """Describe the song as shown in search results."""
        artists = ", ".join(self.artists)
        return (
            f"\nID: {self.id} {'Artistas(s): [':>40}{artists}]\n"
            f'Nombre: "{self.track_name}"\n'
            f'Album : "{self.album_name}"\n'
            f'Genero: "{self.track_genre}"\n'
            f"Tempo : {self.tempo:.2f} BPM ({self.category}) "
        )


class MusicLibrary:
    """Songs indexed by genre, by each artist and by tempo band."""

    def __init__(self) -> None:
        self._genres: dict[str, dict[str, Song]] = {}
        self._artists: dict[str, dict[str, Song]] = {}
        self._tempos: dict[str, dict[str, Song]] = {}

    @staticmethod
    def _index(table: dict[str, dict[str, Song]], key: str, song: Song) -> None:
        # The first song seen with a given id under a key wins.
        table.setdefault(key, {}).setdefault(song.id, song)

    def add(self, song: Song) -> None:
        """Index ``song`` under its genre, each artist and its tempo band."""
        self._index(self._genres, song.track_genre, song)
        for artist in song.artists:
            self._index(self._artists, artist, song)
        self._index(self._tempos, song.category, song)

    def load_rows(self, rows: Iterable[list[str]], limit: int | None = None) -> int:
        """Add a song for each row, reading at most ``limit`` rows.

        Returns the number of rows read. Raises ValueError on a row with
        too few fields.
        """
        count = 0
        for fields in islice(rows, limit):
            self.add(Song.from_fields(fields))
            count += 1
        return count

    def by_genre(self, genre: str) -> list[Song]:
        return list(self._genres.get(genre, {}).values())

    def by_artist(self, artist: str) -> list[Song]:
        return list(self._artists.get(artist, {}).values())

    def by_tempo(self, tempo: float | str) -> list[Song]:
        """Songs in the same tempo band as ``tempo``.

        Text is read for its leading number; a tempo of zero matches nothing.
        """
        if isinstance(tempo, str):
            tempo = _parse_float_prefix(tempo)
        if not tempo:
            return []
        return list(self._tempos.get(tempo_category(tempo), {}).values())