# This project was developed with assistance from AI tools.
"""Centralized mock data for functional tests.

Produces consistent mock ORM objects shared across the flow tests:
- George Franklin (id 1), the only owner with his last name
- Betty and Harold Davis (ids 2, 4)
- Jean Coleman (id 6) with two cats and four visits
- twelve Smiths (ids 101-112) for pagination

All IDs are fixed so tests can reference them by number.
"""

from datetime import date
from unittest.mock import MagicMock


def _pet_type(name: str) -> MagicMock:
    t = MagicMock()
    t.name = name
    return t


def _visit(id: int, visit_date: date, description: str) -> MagicMock:
    v = MagicMock()
    v.id = id
    v.visit_date = visit_date
    v.description = description
    return v


def _pet(id: int, name: str, type_name: str, birth_date: date, visits=None) -> MagicMock:
    p = MagicMock()
    p.id = id
    p.name = name
    p.type = _pet_type(type_name)
    p.birth_date = birth_date
    p.visits = visits or []
    return p


def _owner(id, first_name, last_name, address, city, telephone, pets=None) -> MagicMock:
    o = MagicMock()
    o.id = id
    o.first_name = first_name
    o.last_name = last_name
    o.address = address
    o.city = city
    o.telephone = telephone
    o.pets = pets or []
    return o


# ---------------------------------------------------------------------------
# Owners
# ---------------------------------------------------------------------------


def make_franklin() -> MagicMock:
    return _owner(
        1,
        "George",
        "Franklin",
        "110 W. Liberty St.",
        "Madison",
        "6085551023",
        pets=[_pet(1, "Leo", "cat", date(2010, 9, 7))],
    )


def make_davises() -> list[MagicMock]:
    return [
        _owner(
            2,
            "Betty",
            "Davis",
            "638 Cardinal Ave.",
            "Sun Prairie",
            "6085551749",
            pets=[_pet(2, "Basil", "hamster", date(2012, 8, 6))],
        ),
        _owner(
            4,
            "Harold",
            "Davis",
            "563 Friendly St.",
            "Windsor",
            "6085553198",
            pets=[_pet(5, "Iggy", "lizard", date(2010, 11, 30))],
        ),
    ]


def make_coleman() -> MagicMock:
    samantha = _pet(
        7,
        "Samantha",
        "cat",
        date(2012, 9, 4),
        visits=[
            _visit(1, date(2013, 1, 1), "rabies shot"),
            _visit(4, date(2013, 1, 4), "spayed"),
        ],
    )
    max_ = _pet(
        8,
        "Max",
        "cat",
        date(2012, 9, 4),
        visits=[
            _visit(2, date(2013, 1, 2), "rabies shot"),
            _visit(3, date(2013, 1, 3), "neutered"),
        ],
    )
    return _owner(
        6, "Jean", "Coleman", "105 N. Lake St.", "Monona", "6085552654", pets=[max_, samantha]
    )


def make_smiths() -> list[MagicMock]:
    return [
        _owner(100 + i, f"Pat{i}", "Smith", f"{i} Main St.", "Madison", f"60855500{i:02d}")
        for i in range(1, 13)
    ]
