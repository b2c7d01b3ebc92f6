# This project was developed with assistance from AI tools.
"""
SQLAdmin configuration for database administration UI

Access the admin panel at: http://localhost:8000/admin

When AUTH_DISABLED=false, requires admin credentials via login form.
When AUTH_DISABLED=true, admin panel is open (dev mode).
"""

from db import Owner, Pet, PetType, Visit
from fastapi.security import HTTPBasicCredentials
from sqladmin import Admin, ModelView
from sqladmin.authentication import AuthenticationBackend
from sqlalchemy import create_engine
from starlette.requests import Request
from starlette.responses import Response

from .core.config import settings
from .middleware.auth import credentials_match

# SQLAdmin requires a sync engine; derive from the async DATABASE_URL
_sync_url = settings.DATABASE_URL.replace("+asyncpg", "")
engine = create_engine(_sync_url, echo=False)


class AdminAuth(AuthenticationBackend):
    """Session-based auth gate for SQLAdmin.

    When AUTH_DISABLED=true, authenticate() always returns True (dev mode).
    Otherwise, requires login with SQLADMIN_USER / SQLADMIN_PASSWORD.
    """

    async def login(self, request: Request) -> bool:
        form = await request.form()
        credentials = HTTPBasicCredentials(
            username=str(form.get("username") or ""),
            password=str(form.get("password") or ""),
        )
        if credentials_match(credentials):
            request.session.update({"admin_authenticated": True})
            return True
        return False

    async def logout(self, request: Request) -> bool:
        request.session.clear()
        return True

    async def authenticate(self, request: Request) -> Response | bool:
        if settings.AUTH_DISABLED:
            return True
        return request.session.get("admin_authenticated", False)


class OwnerAdmin(ModelView, model=Owner):
    column_list = [
        Owner.id,
        Owner.first_name,
        Owner.last_name,
        Owner.city,
        Owner.telephone,
        Owner.created_at,
    ]
    column_searchable_list = [Owner.first_name, Owner.last_name, Owner.city]
    column_sortable_list = [Owner.id, Owner.last_name, Owner.created_at]
    column_default_sort = [(Owner.last_name, False)]
    name = "Owner"
    name_plural = "Owners"
    icon = "fa-solid fa-user"


class PetAdmin(ModelView, model=Pet):
    column_list = [Pet.id, Pet.name, Pet.birth_date, Pet.type, Pet.owner]
    column_searchable_list = [Pet.name]
    column_sortable_list = [Pet.id, Pet.name, Pet.birth_date]
    name = "Pet"
    name_plural = "Pets"
    icon = "fa-solid fa-paw"


class PetTypeAdmin(ModelView, model=PetType):
    column_list = [PetType.id, PetType.name]
    name = "Pet Type"
    name_plural = "Pet Types"
    icon = "fa-solid fa-tags"


class VisitAdmin(ModelView, model=Visit):
    column_list = [Visit.id, Visit.pet, Visit.visit_date, Visit.description]
    column_sortable_list = [Visit.id, Visit.visit_date]
    column_default_sort = [(Visit.visit_date, True)]
    name = "Visit"
    name_plural = "Visits"
    icon = "fa-solid fa-notes-medical"


def setup_admin(app):
    """Set up SQLAdmin and mount it to the FastAPI app."""
    auth_backend = AdminAuth(
        secret_key=settings.SQLADMIN_SECRET_KEY,
    )
    admin = Admin(app, engine, title="Pet Clinic Admin", authentication_backend=auth_backend)

    admin.add_view(OwnerAdmin)
    admin.add_view(PetAdmin)
    admin.add_view(PetTypeAdmin)
    admin.add_view(VisitAdmin)

    return admin
