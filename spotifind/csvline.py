"""Line-oriented CSV reading and delimiter splitting for song data files."""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator

MAX_LINE_LENGTH = 1024
MAX_FIELDS = 300


def parse_csv_line(line: str, separator: str = ",") -> list[str]:
    """Split one line into fields.

    Everything from the first newline on is ignored. A field that starts with
    a double quote runs until a quote directly followed by the separator. A
    separator that immediately follows a field terminator is skipped, so two
    adjacent separators produce no empty field between them. At most
    ``MAX_FIELDS - 1`` fields are returned.
    """
    line = line.split("\n", 1)[0]
    length = len(line)
    fields: list[str] = []
    pos = 0
    while pos < length and len(fields) < MAX_FIELDS - 1:
        if line[pos] == '"':
            start = pos + 1
            found = line.find('"' + separator, start)
        else:
            start = pos
            found = line.find(separator, start)
        end = found if found >= 0 else length

        if end < length:
            following = end + 1
            if following < length and line[following] == separator:
                following += 1
        else:
            following = length

        field = line[start:end]
        # A quote two positions before the resume point closes the field.
        quote_at = following - 2
        if start <= quote_at < end and line[quote_at] == '"':
            field = line[start:quote_at]
        fields.append(field)
        pos = following
    return fields


def read_csv_rows(stream: Iterable[str], separator: str = ",") -> Iterator[list[str]]:
    """Yield the fields of each line read from ``stream``.

    Lines longer than ``MAX_LINE_LENGTH - 1`` characters are read in pieces,
    each piece parsed as a row of its own.
    """
    chunk_size = MAX_LINE_LENGTH - 1
    for line in stream:
        while line:
            chunk, line = line[:chunk_size], line[chunk_size:]
            yield parse_csv_line(chunk, separator)


def split_string(text: str, delim: str) -> list[str]:
    """Split ``text`` on any character of ``delim``, dropping empty pieces.

    Leading and trailing spaces are removed from each piece.
    """
    if delim:
        pieces = re.split("[" + re.escape(delim) + "]", text)
    else:
        pieces = [text]
    return [piece.strip(" ") for piece in pieces if piece]