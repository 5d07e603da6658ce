"""
Unit tests for RecommendationService.

All fit-score consumers go through this service, so these tests pin the
ranked list, the single-university breakdown and the chat context payload
against the seed catalog.
"""

from unittest.mock import MagicMock

import pytest

from counsellor.domain.models import StudentProfileInput
from counsellor.domain.scoring import AdmissionCategory, RecommendationRanker
from counsellor.domain.services import RecommendationService
from counsellor.infrastructure.exceptions import NotFoundError


class TestRecommend:

    def test_ranks_catalog_by_fit_score(self, recommendation_service, strong_profile):
        recommendations = recommendation_service.recommend(strong_profile)

        assert [r.university.id for r in recommendations] == [
            "mit", "oxford", "cambridge", "eth-zurich", "nus", "stanford",
        ]
        assert [r.fit_score for r in recommendations] == [100, 100, 100, 100, 100, 65]
        assert recommendations[-1].category == AdmissionCategory.TARGET
        assert all(r.category == AdmissionCategory.SAFE for r in recommendations[:5])

    def test_accepts_pydantic_profile(self, recommendation_service, strong_profile):
        from_dict = recommendation_service.recommend(strong_profile)
        from_model = recommendation_service.recommend(StudentProfileInput(**strong_profile))

        assert [r.to_summary() for r in from_model] == [r.to_summary() for r in from_dict]

    def test_empty_profile_scores_zero_in_catalog_order(self, recommendation_service):
        recommendations = recommendation_service.recommend({})

        assert [r.university.id for r in recommendations] == [
            "mit", "stanford", "oxford", "cambridge", "eth-zurich", "nus",
        ]
        assert {r.fit_score for r in recommendations} == {0}
        assert {r.category for r in recommendations} == {AdmissionCategory.DREAM}

    def test_category_matches_score(self, recommendation_service):
        profile = {"gpa": 3.4, "toefl": 96, "budget": 30000}

        for scored in recommendation_service.recommend(profile):
            if scored.fit_score >= 80:
                assert scored.category == AdmissionCategory.SAFE
            elif scored.fit_score >= 60:
                assert scored.category == AdmissionCategory.TARGET
            else:
                assert scored.category == AdmissionCategory.DREAM


    def test_limit_keeps_the_best(self, recommendation_service, strong_profile):
        recommendations = recommendation_service.recommend(strong_profile, limit=2)

        assert [r.university.id for r in recommendations] == ["mit", "oxford"]
        assert recommendation_service.recommend(strong_profile, limit=0) == []

    def test_limit_is_applied_by_the_ranker(self, repository, strong_profile):
        ranker = MagicMock(wraps=RecommendationRanker())
        service = RecommendationService(repository, ranker=ranker)

        service.advisor_context(strong_profile, top_n=3)

        ranker.top.assert_called_once()
        assert ranker.top.call_args.args[1] == 3
        ranker.rank.assert_not_called()


class TestEvaluate:

    def test_breakdown_for_partial_match(self, recommendation_service, strong_profile):
        assessment = recommendation_service.evaluate(strong_profile, "stanford")

        assert assessment.fit_score == 65
        assert assessment.category == AdmissionCategory.TARGET
        assert [c.to_dict() for c in assessment.components] == [
            {"name": "academic_fit", "earned": 20, "max": 40},
            {"name": "english_exam", "earned": 30, "max": 30},
            {"name": "graduate_exam", "earned": 10, "max": 20},
            {"name": "budget_fit", "earned": 5, "max": 10},
        ]

    def test_agrees_with_recommend(self, recommendation_service, strong_profile):
        for scored in recommendation_service.recommend(strong_profile):
            assessment = recommendation_service.evaluate(strong_profile, scored.university.id)
            assert assessment.fit_score == scored.fit_score
            assert assessment.category == scored.category

    def test_unknown_university(self, recommendation_service, strong_profile):
        with pytest.raises(NotFoundError):
            recommendation_service.evaluate(strong_profile, "atlantis")


class TestAdvisorContext:

    def test_contains_strength_and_top_universities(self, recommendation_service, strong_profile):
        context = recommendation_service.advisor_context(strong_profile, top_n=2)

        assert context["profile_strength"] == {
            "overall": 100,
            "academics": "Strong",
            "exams": "Strong",
            "sop": "Not started",
        }
        assert context["top_universities"] == [
            {
                "id": "mit",
                "name": "Massachusetts Institute of Technology (MIT)",
                "country": "United States",
                "fit_score": 100,
                "category": "Safe",
            },
            {
                "id": "oxford",
                "name": "University of Oxford",
                "country": "United Kingdom",
                "fit_score": 100,
                "category": "Safe",
            },
        ]

    def test_without_profile(self, recommendation_service):
        assert recommendation_service.advisor_context(None) == {
            "profile_strength": None,
            "top_universities": [],
        }

    def test_zero_universities(self, recommendation_service, strong_profile):
        context = recommendation_service.advisor_context(strong_profile, top_n=0)
        assert context["top_universities"] == []
