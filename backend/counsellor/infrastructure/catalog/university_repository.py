"""
University Repository

In-memory university catalog loaded from a JSON seed file.
The catalog is read-only at runtime; filters mirror the listing endpoint.
"""

import json
import logging
from pathlib import Path
from typing import Iterable, List, Optional, Union

from pydantic import TypeAdapter, ValidationError as PydanticValidationError

from counsellor.domain.models import University
from counsellor.infrastructure.exceptions import ConfigurationError, NotFoundError


logger = logging.getLogger(__name__)

DEFAULT_CATALOG_PATH = Path(__file__).resolve().parents[2] / "data" / "universities.json"

_catalog_adapter = TypeAdapter(List[University])


class UniversityRepository:
    """
    Repository for the university catalog.

    Returns universities in catalog order, which is also the tie order the
    ranker preserves.
    """

    def __init__(self, universities: Iterable[University]):
        self._universities: List[University] = list(universities)
        self._by_id = {u.id: u for u in self._universities}

    @classmethod
    def from_file(cls, path: Optional[Union[str, Path]] = None) -> "UniversityRepository":
        """
        Load the catalog from a JSON file.

        Raises:
            ConfigurationError: file missing, not JSON, or not a valid catalog
        """
        catalog_path = Path(path) if path else DEFAULT_CATALOG_PATH

        try:
            with open(catalog_path, "r", encoding="utf-8") as f:
                raw = json.load(f)
        except FileNotFoundError as e:
            raise ConfigurationError(
                f"University catalog not found at {catalog_path}",
                original_error=e,
            )
        except json.JSONDecodeError as e:
            raise ConfigurationError(
                f"University catalog at {catalog_path} is not valid JSON",
                original_error=e,
            )

        try:
            universities = _catalog_adapter.validate_python(raw)
        except PydanticValidationError as e:
            raise ConfigurationError(
                f"University catalog at {catalog_path} failed validation: {e.error_count()} errors",
                original_error=e,
            )

        logger.info(f"Loaded {len(universities)} universities from {catalog_path}")
        return cls(universities)

    def __len__(self) -> int:
        return len(self._universities)

    def all(self) -> List[University]:
        return list(self._universities)

    def get(self, university_id: str) -> University:
        university = self._by_id.get(university_id)
        if university is None:
            raise NotFoundError(
                "University not found",
                resource="university",
                resource_id=university_id,
            )
        return university

    def list_universities(
        self,
        country: Optional[str] = None,
        max_cost: Optional[float] = None,
        max_ranking: Optional[int] = None,
        max_acceptance_rate: Optional[float] = None,
        search: Optional[str] = None,
    ) -> List[University]:
        """
        List universities matching every given filter.

        Args:
            country: Exact country name
            max_cost: Annual cost at or below this amount
            max_ranking: Ranking at or better than this position
            max_acceptance_rate: Acceptance rate (percent) at or below
            search: Case-insensitive substring of name, country or city
        """
        results = self._universities

        if country:
            results = [u for u in results if u.country == country]

        if max_cost is not None:
            results = [u for u in results if u.cost <= max_cost]

        if max_ranking is not None:
            results = [u for u in results if u.ranking is not None and u.ranking <= max_ranking]

        if max_acceptance_rate is not None:
            results = [
                u for u in results
                if u.acceptance_rate is not None and u.acceptance_rate <= max_acceptance_rate
            ]

        if search:
            needle = search.strip().lower()
            results = [
                u for u in results
                if needle in u.name.lower()
                or needle in u.country.lower()
                or needle in u.city.lower()
            ]

        return list(results)
