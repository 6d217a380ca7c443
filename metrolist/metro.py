"""City and resident directory with capacity and duplicate rules."""

from __future__ import annotations

from .linked import (
    MAX_CITIES,
    CityList,
    CityNode,
    format_names,
    format_names_reversed,
)


class MetroError(Exception):
    """Base class for directory errors; the message is user-facing."""


class CapacityError(MetroError):
    """The directory already holds the maximum number of cities."""


class CityNotFoundError(MetroError):
    """The requested city does not exist."""


class DuplicateCityError(MetroError):
    """A city with that name already exists."""


class NameNotFoundError(MetroError):
    """The requested person is not in the city."""


class DuplicateNameError(MetroError):
    """The person is already listed in the city."""


_NO_CITIES = "\n Tidak ada kota yang terdaftar.\n"


class Directory:
    """Cities in order, each with its ordered list of people.

    Mutating methods return a confirmation message and raise a
    MetroError subclass when the operation is refused.
    """

    def __init__(self, capacity: int = MAX_CITIES) -> None:
        self.capacity = capacity
        self.cities = CityList()

    def _city(self, name: str, context: str) -> CityNode:
        city = self.cities.find(name)
        if city is None:
            raise CityNotFoundError(f"Kota '{name}' tidak ditemukan.{context}")
        return city

    # --- cities -------------------------------------------------------

    def add_city(self, name: str) -> str:
        if len(self.cities) >= self.capacity:
            raise CapacityError(
                f"Kapasitas maksimum kota ({self.capacity}) telah tercapai."
            )
        if name in self.cities:
            raise DuplicateCityError(
                f"Kota '{name}' sudah ada. Tidak dapat menambahkan duplikat."
            )
        self.cities.append(name)
        return f"Kota '{name}' berhasil ditambahkan."

    def insert_city_after(self, before: str, name: str) -> str:
        if len(self.cities) >= self.capacity:
            raise CapacityError(
                "Tidak dapat menyisipkan. Kapasitas maksimum kota telah tercapai."
            )
        if name in self.cities:
            raise DuplicateCityError(
                f"Kota '{name}' sudah ada. Tidak dapat menambahkan duplikat."
            )
        self._city(before, " Gagal menyisipkan.")
        self.cities.insert_after(before, name)
        return f"Kota '{name}' berhasil disisipkan setelah kota '{before}'."

    def remove_city(self, name: str) -> str:
        city = self._city(name, " Tidak ada yang dihapus.")
        city.people.clear()
        self.cities.remove(name)
        return f"Kota '{name}' berhasil dihapus beserta semua datanya."

    def rename_city(self, old: str, new: str) -> str:
        self._city(old, " Tidak dapat mengedit.")
        if new in self.cities:
            raise DuplicateCityError(
                f"Kota '{new}' sudah ada. Tidak dapat menggunakan nama yang sama."
            )
        self.cities.rename(old, new)
        return f"Nama kota '{old}' berhasil diubah menjadi '{new}'."

    # --- people -------------------------------------------------------

    def add_person(self, city: str, person: str) -> str:
        node = self._city(city, " Tidak dapat menambahkan nama.")
        if person in node.people:
            raise DuplicateNameError(f"Nama '{person}' sudah ada di kota '{city}'.")
        node.people.append(person)
        return f"Nama '{person}' berhasil ditambahkan ke kota '{city}'."

    def insert_person_after(self, city: str, before: str, person: str) -> str:
        node = self._city(city, " Tidak dapat menyisipkan nama.")
        if person in node.people:
            raise DuplicateNameError(f"Nama '{person}' sudah ada di kota '{city}'.")
        if before not in node.people:
            raise NameNotFoundError(
                f"Nama '{before}' tidak ditemukan di kota '{city}'."
            )
        node.people.insert_after(before, person)
        return (
            f"Nama '{person}' berhasil disisipkan setelah '{before}' "
            f"di kota '{city}'."
        )

    def remove_person(self, city: str, person: str) -> str:
        node = self._city(city, " Tidak dapat menghapus nama.")
        if person not in node.people:
            raise NameNotFoundError(
                f"Nama '{person}' tidak ditemukan di kota '{city}'."
            )
        node.people.remove(person)
        return f"Nama '{person}' berhasil dihapus dari kota '{city}'."

    def rename_person(self, city: str, old: str, new: str) -> str:
        node = self._city(city, " Tidak dapat mengedit nama.")
        if old not in node.people:
            raise NameNotFoundError(f"Nama '{old}' tidak ditemukan di kota '{city}'.")
        if new in node.people:
            raise DuplicateNameError(
                f"Nama '{new}' sudah ada di kota '{city}'. Tidak dapat mengganti."
            )
        node.people.rename(old, new)
        return f"Nama '{old}' berhasil diubah menjadi '{new}' di kota '{city}'."

    def find_person(self, person: str) -> list[str]:
        """Names of every city that lists ``person``, in city order."""
        return [city.name for city in self.cities if person in city.people]

    # --- display ------------------------------------------------------

    def show_city(self, city: str) -> str:
        node = self._city(city, "")
        return f"\nDaftar orang di kota '{city}':\n" + format_names(node.people)

    def show_all(self) -> str:
        if not len(self.cities):
            return _NO_CITIES
        return "".join(
            f"\nKota: {city.name}\n" + format_names(city.people)
            for city in self.cities
        )

    def show_cities_reversed(self) -> str:
        if not len(self.cities):
            return _NO_CITIES
        return "\nDaftar kota secara terbalik:\n" + "".join(
            f"- {city.name}\n" for city in reversed(self.cities)
        )

    def show_people_reversed(self, city: str) -> str:
        node = self._city(city, "")
        return f"\nDaftar orang di kota '{city}' (terbalik):\n" + format_names_reversed(
            node.people
        )


def menu_text() -> str:
    """The main menu shown before each choice."""
    return (
        "\n============ MENU KOTA =============\n"
        "1. Tambah Kota\n"
        "2. Tambah Kota Diantara Kota Lain\n"
        "3. Hapus Kota\n"
        "4. Edit Kota\n"
        "\n============ MENU NAMA =============\n"
        "5. Tambah Orang dalam Kota\n"
        "6. Tambah Orang Diantara Nama lain\n"
        "7. Hapus Orang dalam Kota\n"
        "8. Edit Nama Orang dalam Kota\n"
        "9. Cari Nama Orang Berada\n"
        "\n=========== MENU DISPLAY ===========\n"
        "10. Tampilkan Data Satu Kota\n"
        "11. Tampilkan Semua Data\n"
        "12. Tampilkan Kota Terbalik\n"
        "13. Tampilkan Nama Terbalik\n"
        "\n====================================\n"
        "0. Keluar\n\n"
        "Pilihan Anda: "
    )