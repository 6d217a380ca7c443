"""Interactive menu for managing cities and the people living in them."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable
from typing import TextIO

from .linked import STR_MAX
from .metro import Directory, MetroError, menu_text

_PAUSE = "\n(Press ENTER untuk melanjutkan)"
_CLEAR = "\033[2J\033[H"


class _Console:
    """Line-oriented prompt/answer helper over a pair of text streams."""

    def __init__(self, input_stream: TextIO, output_stream: TextIO) -> None:
        self._in = input_stream
        self._out = output_stream
        isatty = getattr(output_stream, "isatty", None)
        self._interactive = bool(isatty and isatty())

    def write(self, text: str) -> None:
        self._out.write(text)
        self._out.flush()

    def clear(self) -> None:
        if self._interactive:
            self.write(_CLEAR)

    def read_line(self) -> str:
        line = self._in.readline()
        if not line:
            raise EOFError
        return line.rstrip("\r\n")

    def ask(self, prompt: str) -> str:
        """Prompt for a value, keeping at most STR_MAX - 1 characters."""
        self.write(prompt)
        return self.read_line()[: STR_MAX - 1]

    def read_choice(self) -> int | None:
        """Read the menu choice, skipping blank lines; None if not a number."""
        while True:
            text = self.read_line().strip()
            if text:
                break
        try:
            return int(text)
        except ValueError:
            return None

    def pause(self) -> None:
        self.write(_PAUSE)
        self.read_line()


def _report(console: _Console, action: Callable[[], str]) -> None:
    try:
        message = action()
    except MetroError as exc:
        message = str(exc)
    console.write(f"\n {message}\n")


def _show(console: _Console, action: Callable[[], str]) -> None:
    try:
        console.write(action())
    except MetroError as exc:
        console.write(f"\n {exc}\n")


def _find_person(console: _Console, directory: Directory, person: str) -> None:
    cities = directory.find_person(person)
    if not cities:
        console.write(f"\n Nama '{person}' tidak ditemukan di kota manapun.\n")
        return
    for city in cities:
        console.write(f"\n Nama '{person}' ditemukan di kota '{city}'.\n")


def _handle(console: _Console, directory: Directory, choice: int) -> None:
    ask = console.ask
    if choice == 1:
        name = ask("\nMasukkan nama kota baru: ")
        _report(console, lambda: directory.add_city(name))
    elif choice == 2:
        before = ask("\nMasukkan nama kota sebelum: ")
        name = ask("Masukkan nama kota baru: ")
        _report(console, lambda: directory.insert_city_after(before, name))
    elif choice == 3:
        name = ask("\nMasukkan nama kota yang akan dihapus: ")
        _report(console, lambda: directory.remove_city(name))
    elif choice == 4:
        old = ask("\nMasukkan nama kota lama: ")
        new = ask("Masukkan nama kota baru: ")
        _report(console, lambda: directory.rename_city(old, new))
    elif choice == 5:
        city = ask("Masukkan nama kota: ")
        person = ask("Masukkan nama orang: ")
        _report(console, lambda: directory.add_person(city, person))
    elif choice == 6:
        city = ask("Masukkan nama kota: ")
        before = ask("Masukkan nama sebelum: ")
        person = ask("Masukkan nama yang ingin disisipkan: ")
        _report(console, lambda: directory.insert_person_after(city, before, person))
    elif choice == 7:
        city = ask("Masukkan nama kota: ")
        person = ask("Masukkan nama orang yang ingin dihapus: ")
        _report(console, lambda: directory.remove_person(city, person))
    elif choice == 8:
        city = ask("Masukkan nama kota: ")
        old = ask("Masukkan nama lama: ")
        new = ask("Masukkan nama baru: ")
        _report(console, lambda: directory.rename_person(city, old, new))
    elif choice == 9:
        person = ask("Masukkan nama orang yang ingin dicari: ")
        _find_person(console, directory, person)
    elif choice == 10:
        city = ask("Masukkan nama kota yang ingin ditampilkan: ")
        _show(console, lambda: directory.show_city(city))
    elif choice == 11:
        _show(console, directory.show_all)
    elif choice == 12:
        _show(console, directory.show_cities_reversed)
    elif choice == 13:
        city = ask("Masukkan nama kota untuk menampilkan nama secara terbalik: ")
        _show(console, lambda: directory.show_people_reversed(city))


def run(input_stream: TextIO, output_stream: TextIO) -> int:
    """Run the menu loop until the user picks 0 or input runs out."""
    console = _Console(input_stream, output_stream)
    directory = Directory()
    try:
        while True:
            console.clear()
            console.write(menu_text())
            choice = console.read_choice()
            if choice == 0:
                console.write("\nProgram selesai.\n")
                return 0
            if choice is None or not 1 <= choice <= 13:
                console.write("\n? Pilihan tidak valid. Silakan coba lagi.\n")
                continue
            console.clear()
            _handle(console, directory, choice)
            console.pause()
    except EOFError:
        return 0


def main(argv: list[str] | None = None) -> int:
    """Command entry point."""
    parser = argparse.ArgumentParser(
        prog="metrolist",
        description="Manage cities and the people living in them.",
    )
    parser.parse_args(argv)
    return run(sys.stdin, sys.stdout)


if __name__ == "__main__":
    sys.exit(main())