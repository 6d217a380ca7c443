# metrolist

A small interactive directory of cities and the people who live in them.
Cities are kept in a doubly linked list, and every city holds its own doubly
linked list of names, so both can be walked forwards and backwards.

## Installing

```
pip install .
```

## Using the menu

Start the program with:

```
metrolist
```

It takes no options besides `--help`. A menu is shown and you pick an
option by number:

- 1 add a city, 2 insert a city after another, 3 remove a city (with all its
  people), 4 rename a city
- 5 add a person to a city, 6 insert a person after another, 7 remove a
  person, 8 rename a person
- 9 find which cities a person lives in
- 10 show one city, 11 show every city and its people, 12 list cities in
  reverse, 13 list a city's people in reverse
- 0 quit

At most 20 cities can be stored. City names are unique, and names are unique
within a city. Each answer is cut to 49 characters. After each action the
program waits for ENTER before the menu is shown again. Any other choice
prints a "not valid" message and shows the menu again; the program also ends
when its input runs out. When writing to a terminal the screen is cleared
before each menu and action.

The menu loop can be driven from any pair of text streams with
`metrolist.cli.run(input_stream, output_stream)`, which returns 0 when it
finishes.

## Using it as a library

```python
from metrolist.metro import Directory, DuplicateCityError

directory = Directory()
directory.add_city("Bandung")
directory.add_city("Jakarta")
directory.insert_city_after("Bandung", "Bogor")
directory.add_person("Bandung", "Ani")
directory.add_person("Bandung", "Budi")
directory.insert_person_after("Bandung", "Ani", "Citra")

print(directory.show_all())
print(directory.find_person("Budi"))   # ['Bandung']

try:
    directory.add_city("Jakarta")
except DuplicateCityError as exc:
    print(exc)
```

`Directory(capacity=20)` sets the maximum number of cities. The methods that
change the directory (`add_city`, `insert_city_after`, `remove_city`,
`rename_city`, `add_person`, `insert_person_after`, `remove_person`,
`rename_person`) return a confirmation message. The `show_city`, `show_all`,
`show_cities_reversed` and `show_people_reversed` methods return the text to
display, and `find_person` returns the names of the cities that list the
person. `menu_text()` returns the menu.

Every refused operation raises a subclass of `MetroError`:
`CapacityError`, `CityNotFoundError`, `DuplicateCityError`,
`NameNotFoundError` or `DuplicateNameError`.

The lists themselves live in `metrolist.linked` as `CityList` and `NameList`.
Both support `append`, `insert_after`, `remove`, `rename`, `find`, `len()`,
`in`, iteration and `reversed()`; `NameList` also has `clear`. Iterating a
`NameList` yields names, iterating a `CityList` yields `CityNode` objects,
each with a `name` and a `people` list. `insert_after`, `remove` and `rename`
raise `KeyError` when the name is absent.

## Limitations

The directory lives in memory only: nothing is saved, and all cities and
people are gone when the program ends.

## Running the tests

```
pip install .[test]
pytest
```