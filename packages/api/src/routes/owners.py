# This project was developed with assistance from AI tools.
"""Owner routes: create, show, edit, and paginated search by last name."""

import logging

from db import Owner, get_db
from fastapi import APIRouter, Depends, HTTPException, Query, Request, Response, status
from fastapi.responses import JSONResponse, RedirectResponse
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.errors import problem_response
from ..schemas import Pagination
from ..schemas.error import FieldError, FormErrorResponse
from ..schemas.owner import (
    OwnerForm,
    OwnerListResponse,
    OwnerMutationResponse,
    OwnerResponse,
    OwnerSearchForm,
    OwnerSummary,
    PetSummary,
    VisitSummary,
)
from ..services import owner as owner_service
from ..services.owner_search import OwnersNotFound, SingleOwnerMatch, search_owners
from ..services.owner_validation import validate_owner_form

logger = logging.getLogger(__name__)

router = APIRouter()


def _owner_url(owner_id: int) -> str:
    return f"/api/owners/{owner_id}"


def _build_owner_response(owner: Owner) -> OwnerResponse:
    """Build OwnerResponse from ORM object, populating pets and their visits."""
    pets = []
    for pet in getattr(owner, "pets", []) or []:
        pets.append(
            PetSummary(
                id=pet.id,
                name=pet.name,
                birth_date=pet.birth_date,
                type=pet.type.name if pet.type is not None else None,
                visits=[
                    VisitSummary(id=v.id, visit_date=v.visit_date, description=v.description)
                    for v in pet.visits or []
                ],
            )
        )

    return OwnerResponse(
        id=owner.id,
        first_name=owner.first_name,
        last_name=owner.last_name,
        address=owner.address,
        city=owner.city,
        telephone=owner.telephone,
        pets=pets,
    )


def _build_owner_summary(owner: Owner) -> OwnerSummary:
    return OwnerSummary(
        id=owner.id,
        first_name=owner.first_name,
        last_name=owner.last_name,
        address=owner.address,
        city=owner.city,
        telephone=owner.telephone,
        pets=[pet.name for pet in getattr(owner, "pets", []) or []],
    )


def _form_error(
    request: Request,
    status_code: int,
    detail: str,
    errors: list[FieldError],
    form: dict,
) -> JSONResponse:
    """Problem Details body carrying field errors and the form to redisplay."""
    return problem_response(
        request, status_code, detail, model=FormErrorResponse, errors=errors, form=form
    )


def _owner_not_found() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail="Owner not found",
    )


@router.get("/new", response_model=OwnerForm)
async def init_creation_form() -> OwnerForm:
    """Return an empty owner form."""
    logger.info("Starting creation form for a new owner")
    return OwnerForm()


@router.post(
    "/new",
    response_model=OwnerMutationResponse,
    status_code=status.HTTP_201_CREATED,
    responses={422: {"model": FormErrorResponse}},
)
async def process_creation_form(
    form: OwnerForm,
    request: Request,
    response: Response,
    session: AsyncSession = Depends(get_db),
):
    """Create an owner. Invalid input comes back as 422 with field errors."""
    result = validate_owner_form(form)
    if not result.ok:
        logger.info("Owner creation rejected: %d field error(s)", len(result.errors))
        return _form_error(
            request,
            422,
            "There was an error in creating the owner.",
            result.errors,
            form.model_dump(),
        )

    owner = await owner_service.create_owner(session, result.values)
    logger.info("Owner created with ID: %s", owner.id)
    response.headers["Location"] = _owner_url(owner.id)
    return OwnerMutationResponse(message="New Owner Created", data=_build_owner_response(owner))


@router.get("/find", response_model=OwnerSearchForm)
async def init_find_form() -> OwnerSearchForm:
    """Return an empty find-owners form."""
    return OwnerSearchForm()


@router.get(
    "/",
    response_model=OwnerListResponse,
    responses={
        303: {"description": "Exactly one owner matched; redirects to its details."},
        404: {"model": FormErrorResponse},
    },
)
async def process_find_form(
    request: Request,
    page: int = Query(default=1, ge=1),
    last_name: str | None = Query(default=None),
    session: AsyncSession = Depends(get_db),
):
    """Search owners by last-name prefix.

    No match returns 404 with a ``notFound`` error on ``last_name``; one
    match redirects to that owner; several matches return one page of 5.
    A request without ``last_name`` lists every owner.
    """
    outcome = await search_owners(session, page=page, last_name=last_name)

    if isinstance(outcome, OwnersNotFound):
        return _form_error(
            request,
            status.HTTP_404_NOT_FOUND,
            "No owners found.",
            [FieldError(field=outcome.field, code=outcome.error_kind, message=outcome.message)],
            OwnerSearchForm(last_name=outcome.last_name).model_dump(),
        )

    if isinstance(outcome, SingleOwnerMatch):
        return RedirectResponse(
            url=_owner_url(outcome.owner_id),
            status_code=status.HTTP_303_SEE_OTHER,
        )

    return OwnerListResponse(
        data=[_build_owner_summary(o) for o in outcome.owners],
        pagination=Pagination(
            current_page=outcome.current_page,
            total_pages=outcome.total_pages,
            total_items=outcome.total_items,
            page_size=outcome.page_size,
        ),
    )


@router.get("/{owner_id}/edit", response_model=OwnerForm)
async def init_update_owner_form(
    owner_id: int,
    session: AsyncSession = Depends(get_db),
) -> OwnerForm:
    """Return the edit form pre-filled with the owner's current values."""
    owner = await owner_service.find_by_id(session, owner_id)
    if owner is None:
        raise _owner_not_found()
    logger.info("Starting update form for owner with ID: %s", owner_id)
    return OwnerForm(
        first_name=owner.first_name,
        last_name=owner.last_name,
        address=owner.address,
        city=owner.city,
        telephone=owner.telephone,
    )


@router.post(
    "/{owner_id}/edit",
    response_model=OwnerMutationResponse,
    responses={422: {"model": FormErrorResponse}},
)
async def process_update_owner_form(
    owner_id: int,
    form: OwnerForm,
    request: Request,
    response: Response,
    session: AsyncSession = Depends(get_db),
):
    """Overwrite an owner's fields. The id always comes from the path."""
    logger.info("Starting owner update with ID: %s", owner_id)
    result = validate_owner_form(form)
    if not result.ok:
        logger.warning("Owner update with ID %s rejected: %d field error(s)", owner_id, len(result.errors))
        return _form_error(
            request,
            422,
            "There was an error in updating the owner.",
            result.errors,
            form.model_dump(),
        )

    owner = await owner_service.update_owner(session, owner_id, result.values)
    if owner is None:
        raise _owner_not_found()

    logger.info("Owner with ID: %s updated ok", owner_id)
    response.headers["Location"] = _owner_url(owner_id)
    return OwnerMutationResponse(message="Owner Values Updated", data=_build_owner_response(owner))


@router.get("/{owner_id}", response_model=OwnerResponse)
async def show_owner(
    owner_id: int,
    session: AsyncSession = Depends(get_db),
) -> OwnerResponse:
    """Owner details with pets and visits."""
    logger.info("Showing details for owner with ID: %s", owner_id)
    owner = await owner_service.find_by_id(session, owner_id)
    if owner is None:
        raise _owner_not_found()
    return _build_owner_response(owner)
