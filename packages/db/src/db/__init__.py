# This project was developed with assistance from AI tools.
__version__ = "0.1.0"

from .database import Base, DatabaseService, get_db, get_db_service
from .models import DemoDataManifest, Owner, Pet, PetType, Visit

__all__ = [
    "Base",
    "DatabaseService",
    "get_db",
    "get_db_service",
    "__version__",
    # Models
    "DemoDataManifest",
    "Owner",
    "Pet",
    "PetType",
    "Visit",
]
