# This project was developed with assistance from AI tools.
"""Field-level validation for the create/edit owner form.

Pure functions that validate and normalize individual field values, plus
``validate_owner_form`` which runs them all and returns either the cleaned
values or the list of field errors to redisplay.
"""

import re
from dataclasses import dataclass, field

from ..schemas.error import FieldError
from ..schemas.owner import OwnerForm

# Column limits from the owners table
_MAX_LENGTHS = {
    "first_name": 30,
    "last_name": 30,
    "address": 255,
    "city": 80,
}


@dataclass
class OwnerFormResult:
    """Outcome of validating an owner form.

    ``values`` holds the cleaned fields when ``errors`` is empty.
    """

    values: dict = field(default_factory=dict)
    errors: list[FieldError] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors


def validate_required(value: str | None, max_length: int) -> tuple[bool, str, str, str | None]:
    """Require a non-blank value no longer than ``max_length``.

    Returns (ok, code, message, normalized).
    """
    cleaned = (value or "").strip()
    if not cleaned:
        return False, "NotBlank", "must not be blank", None
    if len(cleaned) > max_length:
        return False, "Size", f"must be at most {max_length} characters", None
    return True, "", "", cleaned


def validate_telephone(value: str | None) -> tuple[bool, str, str, str | None]:
    """Telephone must be exactly 10 digits."""
    cleaned = (value or "").strip()
    if not cleaned:
        return False, "NotBlank", "must not be blank", None
    if not re.fullmatch(r"\d{10}", cleaned):
        return False, "Pattern", "Telephone must be a 10-digit number", None
    return True, "", "", cleaned


def validate_owner_form(form: OwnerForm) -> OwnerFormResult:
    """Validate every owner field, collecting all errors rather than stopping at the first."""
    result = OwnerFormResult()
    raw = form.model_dump()

    checks = [(name, validate_required(raw[name], limit)) for name, limit in _MAX_LENGTHS.items()]
    checks.append(("telephone", validate_telephone(raw["telephone"])))

    for name, (ok, code, message, cleaned) in checks:
        if ok:
            result.values[name] = cleaned
        else:
            result.errors.append(FieldError(field=name, code=code, message=message))

    if result.errors:
        result.values = {}
    return result
