# This project was developed with assistance from AI tools.
__version__ = "0.1.0"

from .database import Base, SessionLocal, get_db
from .enums import ApplicationStatus, DocumentRequestStatus, UserRole
from .models import Application, DocumentRequest

__all__ = [
    "Base",
    "SessionLocal",
    "get_db",
    "__version__",
    # Enums
    "ApplicationStatus",
    "DocumentRequestStatus",
    "UserRole",
    # Models
    "Application",
    "DocumentRequest",
]
