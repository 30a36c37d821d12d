# spotifind

A small interactive terminal program for browsing a song catalogue stored
as a CSV file. Songs are indexed by genre, by each of their artists and by
tempo category, so they can be looked up once they are loaded. The prompts
and messages are in Spanish.

## Installing

```
pip install .
```

For running the tests:

```
pip install .[test]
pytest
```

## Running

```
spotifind
```

The main menu offers:

```
(1). Cargar Canciones
(2). Buscar por Género
(3). Buscar por Artista
(4). Buscar por Tempo
(0). Salir
```

Only the first character of what you type is taken as the option. The
screen is cleared with the system's `clear` (or `cls` on Windows) command
before each menu and screen.

1. **Load songs** – enter the path of a CSV file and confirm. The first
   line is taken as a header and skipped. The first 10,000 songs are
   loaded; you are then asked whether to load the rest of the file
   (`S` or `s` loads it). Loading can only be done once per session.
   A file with fewer than 10,000 songs after the header is read, but the
   session is not marked as loaded, so searches still report that no
   songs are loaded.
2. **Search by genre** – type a genre exactly as it appears in the file.
3. **Search by artist** – type one artist's name. Songs with several
   artists (separated by `;` in the file) are listed under each of them.
4. **Search by tempo** – type a number of BPM. It is mapped to a category
   and every song in that category is listed:
   - `Lento`: below 80 BPM
   - `Moderado`: 80 to 120 BPM
   - `Rapido`: above 120 BPM

   Only the leading number of the input is read; zero or text without a
   number matches nothing.

Results are paged: you are asked whether to go on after the 11th result
and after every ten more (`S`, `s` or `1` continues). At end of input the
program leaves the menu.

## CSV layout

Each line is split on commas. A field that starts with a double quote runs
until a quote directly followed by a comma. Two adjacent commas do not
produce an empty field between them. The columns used are:

| column | meaning                 |
|--------|-------------------------|
| 0      | track id                |
| 2      | artists (`;`-separated) |
| 3      | album name              |
| 4      | track name              |
| 18     | tempo (BPM)             |
| 20     | genre                   |

A row with fewer than 21 fields stops loading with an error message.
A song whose id is already listed under a key is not added to that key
again; the first one seen is kept.

## Using it as a library

```python
from spotifind.csvline import read_csv_rows
from spotifind.library import MusicLibrary

library = MusicLibrary()
with open("songs.csv", encoding="utf-8") as stream:
    rows = read_csv_rows(stream, ",")
    next(rows)  # header
    library.load_rows(rows, 10000)

for song in library.by_tempo(95.0):
    print(song.format())
```

- `spotifind.csvline`: `parse_csv_line(line, separator)`,
  `read_csv_rows(stream, separator)` and `split_string(text, delim)`.
- `spotifind.library`: `Song` (with `Song.from_fields(fields)`,
  `format()` and the `category` property), `tempo_category(tempo)` and
  `MusicLibrary` with `add`, `load_rows(rows, limit)`, `by_genre`,
  `by_artist` and `by_tempo`. `Song.from_fields` raises `ValueError`
  for a row with too few fields.
- `spotifind.console`: screen clearing, banners and line input helpers.
- `spotifind.app`: `Session`, which drives the menu, and `main()`, the
  entry point of the `spotifind` command.

## What it does not do

Songs are held in memory only: nothing is saved between runs, and the
catalogue cannot be edited from the program.