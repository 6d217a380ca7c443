import pytest

from metrolist.linked import (
    CityList,
    NameList,
    format_cities,
    format_cities_reversed,
    format_names,
    format_names_reversed,
)


def test_append_keeps_order_both_ways():
    names = NameList(["Ani", "Budi", "Cici"])
    assert list(names) == ["Ani", "Budi", "Cici"]
    assert list(reversed(names)) == ["Cici", "Budi", "Ani"]
    assert len(names) == 3


def test_insert_after_middle_and_end():
    names = NameList(["Ani", "Cici"])
    names.insert_after("Ani", "Budi")
    names.insert_after("Cici", "Dedi")
    assert list(names) == ["Ani", "Budi", "Cici", "Dedi"]
    assert list(reversed(names)) == ["Dedi", "Cici", "Budi", "Ani"]
    assert len(names) == 4


def test_insert_after_missing_raises():
    names = NameList(["Ani"])
    with pytest.raises(KeyError):
        names.insert_after("Zed", "Budi")
    assert list(names) == ["Ani"]


@pytest.mark.parametrize("victim", ["Ani", "Budi", "Cici"])
def test_remove_keeps_links_consistent(victim):
    names = NameList(["Ani", "Budi", "Cici"])
    removed = names.remove(victim)
    assert removed.name == victim
    expected = [n for n in ["Ani", "Budi", "Cici"] if n != victim]
    assert list(names) == expected
    assert list(reversed(names)) == expected[::-1]
    assert victim not in names


def test_remove_missing_raises():
    with pytest.raises(KeyError):
        NameList(["Ani"]).remove("Budi")


def test_remove_only_first_duplicate():
    names = NameList(["Ani", "Ani"])
    names.remove("Ani")
    assert list(names) == ["Ani"]


def test_clear_empties_list():
    names = NameList(["Ani", "Budi"])
    names.clear()
    assert list(names) == []
    assert len(names) == 0
    names.append("Cici")
    assert list(reversed(names)) == ["Cici"]


def test_rename_and_find():
    names = NameList(["Ani", "Budi"])
    names.rename("Budi", "Bayu")
    assert list(names) == ["Ani", "Bayu"]
    assert names.find("Bayu").name == "Bayu"
    assert names.find("Budi") is None
    with pytest.raises(KeyError):
        names.rename("Budi", "X")


def test_city_list_nodes_carry_people():
    cities = CityList(["Bandung", "Jakarta"])
    cities.find("Bandung").people.append("Ani")
    assert [c.name for c in cities] == ["Bandung", "Jakarta"]
    assert list(cities.find("Bandung").people) == ["Ani"]
    assert list(cities.find("Jakarta").people) == []


def test_city_list_insert_after_tail_updates_reverse():
    cities = CityList(["Bandung"])
    cities.insert_after("Bandung", "Bogor")
    assert [c.name for c in reversed(cities)] == ["Bogor", "Bandung"]
    cities.remove("Bogor")
    assert [c.name for c in reversed(cities)] == ["Bandung"]
    assert "Bogor" not in cities
    assert "Bandung" in cities


def test_format_names():
    assert format_names(NameList(["Ani", "Budi"])) == "   - Ani\n   - Budi\n"


def test_format_names_reversed():
    assert format_names_reversed(NameList()) == "  (Kosong)\n"
    assert format_names_reversed(NameList(["Ani", "Budi"])) == "  - Budi\n  - Ani\n"


def test_format_cities():
    cities = CityList(["Bandung", "Jakarta"])
    cities.find("Jakarta").people.append("Ani")
    assert format_cities(cities) == (
        "\n? Kota: Bandung\n" "\n? Kota: Jakarta\n" "   - Ani\n"
    )
    assert format_cities_reversed(cities) == (
        "\n? Kota: Jakarta\n" "\n? Kota: Bandung\n"
    )