"""
Data layer for TechMatch.

Provides database connections, data models, and repository classes
for data access throughout the application.

Submodules:
- database: MongoDB connection management
- models: Pydantic data models
- repositories: Read access to profiles and job postings
"""

from .database import DatabaseManager, build_connection_uri, get_database_manager

__all__ = [
    "build_connection_uri",
    "DatabaseManager",
    "get_database_manager",
]
