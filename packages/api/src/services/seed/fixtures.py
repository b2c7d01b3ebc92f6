# This project was developed with assistance from AI tools.
"""
Demo fixture data for the pet clinic.

All fixture data is defined as Python dicts. Pets point at their owner and
type through the ``ref`` / name keys below; the seeder resolves those to
database ids.

Simulated for demonstration purposes -- not real customer data.
"""

import hashlib
import json
from datetime import date

# ---------------------------------------------------------------------------
# Pet types
# ---------------------------------------------------------------------------

PET_TYPES = ["cat", "dog", "lizard", "snake", "bird", "hamster"]

# ---------------------------------------------------------------------------
# Owners
# ---------------------------------------------------------------------------

OWNERS = [
    {
        "ref": "franklin",
        "first_name": "George",
        "last_name": "Franklin",
        "address": "110 W. Liberty St.",
        "city": "Madison",
        "telephone": "6085551023",
    },
    {
        "ref": "betty_davis",
        "first_name": "Betty",
        "last_name": "Davis",
        "address": "638 Cardinal Ave.",
        "city": "Sun Prairie",
        "telephone": "6085551749",
    },
    {
        "ref": "rodriquez",
        "first_name": "Eduardo",
        "last_name": "Rodriquez",
        "address": "2693 Commerce St.",
        "city": "McFarland",
        "telephone": "6085558763",
    },
    {
        "ref": "harold_davis",
        "first_name": "Harold",
        "last_name": "Davis",
        "address": "563 Friendly St.",
        "city": "Windsor",
        "telephone": "6085553198",
    },
    {
        "ref": "mctavish",
        "first_name": "Peter",
        "last_name": "McTavish",
        "address": "2387 S. Fair Way",
        "city": "Madison",
        "telephone": "6085552765",
    },
    {
        "ref": "coleman",
        "first_name": "Jean",
        "last_name": "Coleman",
        "address": "105 N. Lake St.",
        "city": "Monona",
        "telephone": "6085552654",
    },
    {
        "ref": "black",
        "first_name": "Jeff",
        "last_name": "Black",
        "address": "1450 Oak Blvd.",
        "city": "Monona",
        "telephone": "6085555387",
    },
    {
        "ref": "escobito",
        "first_name": "Maria",
        "last_name": "Escobito",
        "address": "345 Maple St.",
        "city": "Madison",
        "telephone": "6085557683",
    },
    {
        "ref": "schroeder",
        "first_name": "David",
        "last_name": "Schroeder",
        "address": "2749 Blackhawk Trail",
        "city": "Madison",
        "telephone": "6085559435",
    },
    {
        "ref": "estaban",
        "first_name": "Carlos",
        "last_name": "Estaban",
        "address": "2335 Independence La.",
        "city": "Waunakee",
        "telephone": "6085555487",
    },
]

# ---------------------------------------------------------------------------
# Pets and visits
# ---------------------------------------------------------------------------

PETS = [
    {"name": "Leo", "birth_date": date(2010, 9, 7), "type": "cat", "owner_ref": "franklin"},
    {"name": "Basil", "birth_date": date(2012, 8, 6), "type": "hamster", "owner_ref": "betty_davis"},
    {"name": "Rosy", "birth_date": date(2011, 4, 17), "type": "dog", "owner_ref": "rodriquez"},
    {"name": "Jewel", "birth_date": date(2010, 3, 7), "type": "dog", "owner_ref": "rodriquez"},
    {"name": "Iggy", "birth_date": date(2010, 11, 30), "type": "lizard", "owner_ref": "harold_davis"},
    {"name": "George", "birth_date": date(2010, 1, 20), "type": "snake", "owner_ref": "mctavish"},
    {
        "name": "Samantha",
        "birth_date": date(2012, 9, 4),
        "type": "cat",
        "owner_ref": "coleman",
        "visits": [
            {"visit_date": date(2013, 1, 1), "description": "rabies shot"},
            {"visit_date": date(2013, 1, 4), "description": "spayed"},
        ],
    },
    {
        "name": "Max",
        "birth_date": date(2012, 9, 4),
        "type": "cat",
        "owner_ref": "coleman",
        "visits": [
            {"visit_date": date(2013, 1, 2), "description": "rabies shot"},
            {"visit_date": date(2013, 1, 3), "description": "neutered"},
        ],
    },
    {"name": "Lucky", "birth_date": date(2011, 8, 6), "type": "bird", "owner_ref": "black"},
    {"name": "Mulligan", "birth_date": date(2007, 2, 24), "type": "dog", "owner_ref": "escobito"},
    {"name": "Freddy", "birth_date": date(2010, 3, 9), "type": "bird", "owner_ref": "schroeder"},
    {"name": "Lucky", "birth_date": date(2010, 6, 24), "type": "dog", "owner_ref": "estaban"},
    {"name": "Sly", "birth_date": date(2012, 6, 8), "type": "cat", "owner_ref": "estaban"},
]


def visit_count() -> int:
    return sum(len(p.get("visits", [])) for p in PETS)


def compute_config_hash() -> str:
    """Compute a SHA-256 hash of the fixture data for idempotency checks."""
    content = json.dumps(
        {
            "owner_count": len(OWNERS),
            "pet_type_count": len(PET_TYPES),
            "pet_count": len(PETS),
            "visit_count": visit_count(),
            "owner_refs": [o["ref"] for o in OWNERS],
        },
        sort_keys=True,
    )
    return hashlib.sha256(content.encode()).hexdigest()
