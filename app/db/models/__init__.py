"""
Database models module.

Importing this package registers every model with Base.metadata before table
creation.
"""
from app.db.models.user import User
from app.db.models.interview import Interview
from app.db.models.feedback import Feedback

__all__ = [
    "User",
    "Interview",
    "Feedback",
]
