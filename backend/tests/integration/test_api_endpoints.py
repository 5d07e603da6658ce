"""
Integration tests for API endpoints.

Runs the full FastAPI application (lifespan included) against the seed
catalog. The chat service is replaced with a fake; Gemini is never called.
"""

from unittest.mock import AsyncMock, MagicMock

from counsellor.api.dependencies import get_chat_service
from counsellor.domain.models import ChatReply, ChatSuggestion
from counsellor.infrastructure.exceptions import RateLimitError


# =============================================================================
# Health Check Tests
# =============================================================================

class TestHealthEndpoints:

    def test_health_check(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "healthy", "service": "study-abroad-counsellor"}

    def test_root(self, client):
        response = client.get("/")

        assert response.status_code == 200
        data = response.json()
        assert data["version"] == "1.0.0"
        assert data["docs"] == "/docs"


# =============================================================================
# University Endpoint Tests
# =============================================================================

class TestUniversityEndpoints:

    def test_list_universities(self, client):
        response = client.get("/api/universities")

        assert response.status_code == 200
        data = response.json()
        assert data["count"] == 6
        assert data["universities"][0]["acceptanceRate"] == 7.3

    def test_list_filters(self, client):
        response = client.get(
            "/api/universities",
            params={"budget": 40000, "acceptanceRate": 20},
        )

        assert response.status_code == 200
        data = response.json()
        assert [u["id"] for u in data["universities"]] == ["oxford", "nus"]
        assert data["count"] == 2

    def test_list_rejects_negative_budget(self, client):
        response = client.get("/api/universities", params={"budget": -1})
        assert response.status_code == 422

    def test_get_university(self, client):
        response = client.get("/api/universities/eth-zurich")

        assert response.status_code == 200
        assert response.json()["name"] == "ETH Zurich"

    def test_get_unknown_university(self, client):
        response = client.get("/api/universities/atlantis")

        assert response.status_code == 404
        body = response.json()
        assert body["error"] == "NotFoundError"
        assert body["details"]["id"] == "atlantis"

    def test_recommend(self, client, strong_profile):
        response = client.post("/api/universities/recommend", json=strong_profile)

        assert response.status_code == 200
        data = response.json()
        assert data["count"] == 6
        ranked = [(u["university"]["id"], u["fit_score"], u["category"]) for u in data["universities"]]
        assert ranked[0] == ("mit", 100, "Safe")
        assert ranked[-1] == ("stanford", 65, "Target")

    def test_recommend_accepts_camel_case_sop_status(self, client):
        response = client.post(
            "/api/universities/recommend",
            json={"gpa": 3.0, "sopStatus": "draft"},
        )
        assert response.status_code == 200

    def test_recommend_rejects_out_of_range_gpa(self, client):
        response = client.post("/api/universities/recommend", json={"gpa": 5.0})
        assert response.status_code == 422

    def test_fit_breakdown(self, client, strong_profile):
        response = client.post("/api/universities/stanford/fit", json=strong_profile)

        assert response.status_code == 200
        data = response.json()
        assert data["university_id"] == "stanford"
        assert data["fit_score"] == 65
        assert data["category"] == "Target"
        assert data["components"][0] == {"name": "academic_fit", "earned": 20, "max": 40}

    def test_fit_unknown_university(self, client, strong_profile):
        response = client.post("/api/universities/atlantis/fit", json=strong_profile)
        assert response.status_code == 404


# =============================================================================
# Profile Endpoint Tests
# =============================================================================

class TestProfileEndpoints:

    def test_profile_strength(self, client):
        response = client.post(
            "/api/profiles/strength",
            json={"gpa": 2.7, "toefl": 92, "sopStatus": "Draft"},
        )

        assert response.status_code == 200
        assert response.json() == {
            "overall": 56,
            "academics": "Weak",
            "exams": "Average",
            "sop": "Draft",
        }

    def test_empty_profile(self, client):
        response = client.post("/api/profiles/strength", json={})

        assert response.status_code == 200
        assert response.json()["overall"] == 0

    def test_unknown_sop_status(self, client):
        response = client.post("/api/profiles/strength", json={"sopStatus": "Outline"})
        assert response.status_code == 422


# =============================================================================
# Chat Endpoint Tests
# =============================================================================

def fake_chat_service(reply=None, error=None):
    service = MagicMock()
    service.reply = AsyncMock(return_value=reply, side_effect=error)
    return service


class TestChatEndpoints:

    def test_chat(self, client, app):
        reply = ChatReply(
            message="Oxford is a Safe match.",
            suggestions=[ChatSuggestion(text="Open list", type="navigate", payload="/universities")],
        )
        service = fake_chat_service(reply=reply)
        app.dependency_overrides[get_chat_service] = lambda: service

        response = client.post(
            "/api/ai/chat",
            json={"message": "Where should I apply?", "profile": {"gpa": 3.8}, "stage": "Discovery"},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["response"]["message"] == "Oxford is a Safe match."
        assert data["response"]["suggestions"][0]["payload"] == "/universities"
        assert "timestamp" in data

        message, profile, stage = service.reply.call_args.args
        assert message == "Where should I apply?"
        assert profile.gpa == 3.8
        assert stage == "Discovery"

    def test_chat_rate_limited(self, client, app):
        service = fake_chat_service(error=RateLimitError("Gemini API rate limit exceeded"))
        app.dependency_overrides[get_chat_service] = lambda: service

        response = client.post("/api/ai/chat", json={"message": "Hi"})

        assert response.status_code == 429
        assert response.json()["error"] == "RateLimitError"

    def test_chat_requires_message(self, client, app):
        app.dependency_overrides[get_chat_service] = lambda: fake_chat_service()

        response = client.post("/api/ai/chat", json={"message": ""})
        assert response.status_code == 422

    def test_chat_unavailable_without_api_key(self, client):
        client.app.state.chat_service = None

        response = client.post("/api/ai/chat", json={"message": "Hi"})

        assert response.status_code == 503
        assert response.json()["error"] == "ConfigurationError"


class TestProfileAnalysisEndpoint:

    def test_analyze_profile(self, client, app):
        service = MagicMock()
        service.analyze_profile = AsyncMock(return_value="- Strong GPA\n- Take the GRE")
        app.dependency_overrides[get_chat_service] = lambda: service

        response = client.post("/api/ai/analyze-profile", json={"gpa": 3.8, "sopStatus": "Draft"})

        assert response.status_code == 200
        data = response.json()
        assert data["analysis"] == "- Strong GPA\n- Take the GRE"
        assert "timestamp" in data

        profile = service.analyze_profile.call_args.args[0]
        assert profile.gpa == 3.8
        assert profile.sop_status == "Draft"

    def test_analyze_profile_validates_ranges(self, client, app):
        app.dependency_overrides[get_chat_service] = lambda: fake_chat_service()

        response = client.post("/api/ai/analyze-profile", json={"toefl": 150})
        assert response.status_code == 422

    def test_analyze_profile_unavailable_without_api_key(self, client):
        client.app.state.chat_service = None

        response = client.post("/api/ai/analyze-profile", json={"gpa": 3.8})

        assert response.status_code == 503
