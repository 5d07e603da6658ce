"""
Recommendation Ranker

Orders scored universities for list display.
"""

from typing import Any, Iterable, List, Tuple, TypeVar

from counsellor.domain.scoring.parsing import parse_optional_number


T = TypeVar("T")


def _score_key(entry: Tuple[Any, Any]) -> float:
    # Missing or unparsable scores sort as 0, never ahead of real scores
    return parse_optional_number(entry[1]) or 0.0


class RecommendationRanker:
    """
    Ranks (university, fit score) pairs by score, highest first.

    Ties keep their input order, so any upstream ordering (relevance,
    alphabetical) survives among equal scores.
    """

    def rank(self, entries: Iterable[Tuple[T, Any]]) -> List[Tuple[T, Any]]:
        # sorted() is stable, including with reverse=True
        return sorted(entries, key=_score_key, reverse=True)

    def top(self, entries: Iterable[Tuple[T, Any]], count: int) -> List[Tuple[T, Any]]:
        """The first `count` entries of the ranking."""
        if count <= 0:
            return []
        return self.rank(entries)[:count]


_ranker = RecommendationRanker()


def rank(entries: Iterable[Tuple[T, Any]]) -> List[Tuple[T, Any]]:
    return _ranker.rank(entries)
