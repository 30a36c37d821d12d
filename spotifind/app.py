"""Interactive menu for loading a song dataset and searching it."""

from __future__ import annotations

import sys
from collections.abc import Callable, Iterable
from typing import TextIO

from .console import (
    clear_screen,
    print_banner,
    print_main_menu,
    read_input,
    read_option,
    wait_for_enter,
)
from .csvline import read_csv_rows
from .library import MusicLibrary, Song

FIRST_BATCH = 10_000
PAGE_SIZE = 10
_YES = ("S", "s", "1")

_CAT = "\n".join(
    [
        r" \    /\               |'/-..--.",
        r"  )  ( ')             / _ _   ,  ;",
        r" (  /  )             `~=`Y'~_<._./",
        r"  \(__)|             <`-....__.'",
    ]
)


class Session:
    """State of one interactive run: the library and whether it was loaded."""

    def __init__(self, library: MusicLibrary | None = None) -> None:
        self.library = library if library is not None else MusicLibrary()
        self.loaded = False

    def load(self) -> None:
        """Ask for a dataset path and load songs from it."""
        if self.loaded:
            print("YA SE CARGARON LAS CANCIONES!")
            return
        clear_screen()
        print_banner("Por favor, ingrese la ruta donde se ubica el archivo de canciones:")
        print('Si trabaja con el repositorio, puede usar la ruta "Data/song_dataset_.csv"\n')
        path = read_input("Ingrese la ruta del archivo con canciones, sin comillas: ")
        try:
            stream = open(path, encoding="utf-8", errors="replace")
        except OSError as exc:
            print(
                f"La ruta proporcionada no es válida: {exc.strerror or exc}",
                file=sys.stderr,
            )
            return
        with stream:
            self._load_from(stream)

    def _load_from(self, stream: TextIO) -> None:
        clear_screen()
        print_banner("Se cargarán las primeras 10.000 canciones. ¿Desea seguir? [S/N]")
        answer = read_option()
        if answer == "":
            print("Introduzca una opción válida.")
        elif answer not in _YES:
            return
        clear_screen()
        print_banner("Cargando canciones...")
        print(_CAT)

        rows = read_csv_rows(stream, ",")
        next(rows, None)  # header
        try:
            if self.library.load_rows(rows, FIRST_BATCH) < FIRST_BATCH:
                return
            self.loaded = True
            print("SE CARGARON LAS PRIMERAS 10.000 CANCIONES.")
            wait_for_enter()
            clear_screen()
            print_banner("¿Desea leer todas las canciones disponibles? [S/N]")
            print("Si acepta, cargará todas las canciones disponibles (puede tardar un rato).")
            print("Si no, estarán cargadas las primeras 10.000 canciones.")
            answer = read_option()
            clear_screen()
            if answer not in ("S", "s"):
                print_banner("¡Se han cargado las primeras 10.000 canciones!")
                return
            print_banner("Cargando canciones...")
            print(_CAT)
            self.library.load_rows(rows)
            clear_screen()
            print_banner("SE HAN CARGADO TODAS LAS CANCIONES DISPONIBLES.")
        except ValueError as exc:
            print(f"NO SE PUEDEN AGREGAR MAS CANCIONES: {exc}", file=sys.stderr)

    def _search(self, title: str, lookup: Callable[[str], list[Song]]) -> None:
        if not self.loaded:
            print("NO HAY CANCIONES CARGADAS.")
            return
        clear_screen()
        print_banner(title)
        songs = lookup(read_input("Ingrese su opción: "))
        if not songs:
            print("NO SE ENCONTRÓ EL DATO A BUSCAR")
            return
        self.show_results(songs)

    def search_genre(self) -> None:
        self._search("Ingrese el género a buscar:", self.library.by_genre)

    def search_artist(self) -> None:
        self._search("Ingrese el artista a buscar:", self.library.by_artist)

    def search_tempo(self) -> None:
        self._search(
            "Ingrese la velocidad (tempo) a buscar (valor numérico):",
            self.library.by_tempo,
        )

    def show_results(self, songs: Iterable[Song]) -> None:
        """Print songs, asking whether to go on after each page."""
        shown = 0
        for song in songs:
            print(song.format())
            if shown == PAGE_SIZE:
                print()
                print_banner("¿Desea ver más canciones? [S/N]")
                if read_option() in _YES:
                    shown = 0
                else:
                    print("Se cargaron las canciones deseadas!")
                    break
            shown += 1
        else:
            print()
            print_banner("¡Llegó al final de la lista!")

    def handle_option(self, option: str) -> bool:
        """Carry out one menu option; return False when it ends the session."""
        actions = {
            "1": self.load,
            "2": self.search_genre,
            "3": self.search_artist,
            "4": self.search_tempo,
        }
        if option in actions:
            actions[option]()
        elif option == "0":
            print("Saliendo del programa...")
        elif option == "":
            print("Por favor, introduzca una opción válida.")
        else:
            print("Opción no válida. Vuelva a introducir una opción.")
        if option != "0":
            wait_for_enter()
        return option != "0"

    def run(self) -> None:
        """Show the menu and handle options until the user leaves."""
        while True:
            print_main_menu()
            try:
                if not self.handle_option(read_option()):
                    break
            except EOFError:
                print()
                break


def main(argv: list[str] | None = None) -> int:
    Session().run()
    return 0


if __name__ == "__main__":
    sys.exit(main())