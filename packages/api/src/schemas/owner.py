# This project was developed with assistance from AI tools.
"""Owner request/response schemas."""

from datetime import date

from pydantic import BaseModel, ConfigDict

from . import Pagination


class OwnerForm(BaseModel):
    """Create/edit owner form.

    Fields are optional here so that blank or missing values reach
    ``validate_owner_form`` and come back as field errors instead of a
    generic 422. ``id`` is not a form field; unknown keys are dropped.
    """

    model_config = ConfigDict(extra="ignore")

    first_name: str | None = None
    last_name: str | None = None
    address: str | None = None
    city: str | None = None
    telephone: str | None = None


class OwnerSearchForm(BaseModel):
    """Find-owners form; an empty last name matches every owner."""

    last_name: str = ""


class VisitSummary(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    visit_date: date | None = None
    description: str | None = None


class PetSummary(BaseModel):
    """Pet info nested inside owner detail responses."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    birth_date: date | None = None
    type: str | None = None
    visits: list[VisitSummary] = []


class OwnerResponse(BaseModel):
    """Owner details, including pets and their visits."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    first_name: str
    last_name: str
    address: str
    city: str
    telephone: str
    pets: list[PetSummary] = []


class OwnerSummary(BaseModel):
    """One row of the owners listing."""

    id: int
    first_name: str
    last_name: str
    address: str
    city: str
    telephone: str
    pets: list[str] = []


class OwnerListResponse(BaseModel):
    """Paginated owner search results."""

    data: list[OwnerSummary]
    pagination: Pagination


class OwnerMutationResponse(BaseModel):
    """Result of a create or update, with the message to show after redirecting."""

    message: str
    data: OwnerResponse
