"""
SQLAlchemy ORM models.
Separated from db.py for cleaner imports.
"""

from .db import KeyValueModel, Base

__all__ = ["KeyValueModel", "Base"]
