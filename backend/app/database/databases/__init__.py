"""
Database definitions and field constants.
"""
from app.database.databases import records_db

__all__ = ["records_db"]
