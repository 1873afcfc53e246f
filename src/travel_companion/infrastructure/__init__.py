"""Infrastructure layer - storage backends and the HTTP API.

Implements the TravelStore contract defined by the domain services with
SQLAlchemy or process memory, and exposes the services over FastAPI.
"""

from travel_companion.infrastructure.persistence.database import (
    Base,
    DatabaseManager,
    close_database,
    get_db_manager,
    get_db_session,
    init_database,
)

__all__ = [
    "Base",
    "DatabaseManager",
    "get_db_manager",
    "get_db_session",
    "init_database",
    "close_database",
]
