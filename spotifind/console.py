"""Terminal helpers: screen clearing, banners, menu and line input."""

from __future__ import annotations

import os
import subprocess

MAX_INPUT_LENGTH = 199
OPTION_PROMPT = "Ingrese su opción: "


def clear_screen() -> None:
    """Clear the terminal using the platform's clear command."""
    try:
        if os.name == "nt":
            subprocess.run("cls", shell=True, check=False)
        else:
            subprocess.run(["clear"], check=False)
    except OSError:
        pass


def banner(message: str) -> str:
    """Return ``message`` framed by two ruled lines."""
    rule = "#" + "=" * (len(message) + 12) + "#"
    return f"{rule}\n       {message}\n{rule}"


def print_banner(message: str) -> None:
    """Print ``message`` framed by two ruled lines."""
    print(banner(message))


def print_main_menu() -> None:
    """Clear the screen and show the main menu."""
    clear_screen()
    print_banner("SPOTIFIND")
    print("(1). Cargar Canciones")
    print("(2). Buscar por Género")
    print("(3). Buscar por Artista")
    print("(4). Buscar por Tempo")
    print("(0). Salir")


def wait_for_enter() -> None:
    """Ask for ENTER and consume one line of input."""
    print("Presione ENTER para continuar...")
    try:
        input()
    except EOFError:
        pass


def read_input(prompt: str = "") -> str:
    """Read one line, without its newline, limited to ``MAX_INPUT_LENGTH`` characters.

    Raises EOFError when input is exhausted.
    """
    return input(prompt)[:MAX_INPUT_LENGTH]


def read_option(prompt: str = OPTION_PROMPT) -> str:
    """Read one line and return its first character, or "" for an empty line."""
    return read_input(prompt)[:1]