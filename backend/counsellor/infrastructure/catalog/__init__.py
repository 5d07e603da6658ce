# University catalog
from counsellor.infrastructure.catalog.university_repository import (
    DEFAULT_CATALOG_PATH,
    UniversityRepository,
)

__all__ = [
    "DEFAULT_CATALOG_PATH",
    "UniversityRepository",
]
