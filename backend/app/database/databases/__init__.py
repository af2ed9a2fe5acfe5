"""
Database definitions and collection constants.
"""
from app.database.databases import institute_db

__all__ = ["institute_db"]
