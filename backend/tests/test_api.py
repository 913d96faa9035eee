import pytest
from fastapi.testclient import TestClient

from api.dependencies import get_external_scorer
from main import app

client = TestClient(app)

PROFILE = {
    "skills": ["Python", "Data Analysis"],
    "interests": ["Finance"],
    "preferred_location": "Pune",
}


@pytest.fixture(autouse=True)
def _local_scoring_only():
    """Keep API tests off the network regardless of GEMINI_API_KEY."""
    app.dependency_overrides[get_external_scorer] = lambda: None
    yield
    app.dependency_overrides.clear()


def test_health():
    response = client.get("/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert "gemini_configured" in data


def test_categories():
    response = client.get("/categories")
    assert response.status_code == 200
    assert "Data Analytics Intern" in response.json()["categories"]


def test_insights():
    response = client.get("/insights")
    assert response.status_code == 200
    data = response.json()
    assert data["total_opportunities"] == 5
    assert data["top_skills"][0]["skill"] == "Data Analysis"


def test_opportunities_unfiltered():
    response = client.get("/opportunities")
    assert response.status_code == 200
    data = response.json()
    assert data["total"] == 5
    first = data["opportunities"][0]
    assert first["opportunity"]["title"] == "Data Analytics Intern"
    assert first["applications"] == "45/100 applied"
    assert first["is_full"] is False


def test_opportunities_filtered():
    response = client.get(
        "/opportunities", params={"search": "analy", "category": "business", "location": "pune"}
    )
    assert response.status_code == 200
    data = response.json()
    assert data["total"] == 1
    assert data["opportunities"][0]["opportunity"]["id"] == "4"


def test_opportunities_no_match():
    response = client.get("/opportunities", params={"category": "legal"})
    assert response.status_code == 200
    assert response.json() == {"total": 0, "opportunities": []}


def test_rank_server_catalog():
    response = client.post("/rank", json={"profile": PROFILE, "top_n": 3})
    assert response.status_code == 200
    data = response.json()
    assert len(data["results"]) == 3
    scores = [r["score"] for r in data["results"]]
    assert scores == sorted(scores, reverse=True)
    assert data["scoring_method"] == "fallback"
    assert data["degraded"] is True
    assert data["summary"]["total"] == 3
    # 60 + 30*1//4 + 10 (Pune); "Finance" is not a substring of "Financial"
    top = data["results"][0]
    assert top["opportunity"]["title"] == "Financial Analyst Intern"
    assert top["score"] == 77
    assert top["matched_skills"] == ["Data Analysis"]


def test_rank_with_catalog_snapshot():
    catalog = [
        {"id": "a", "title": "Intern A", "organization": "Org A", "required_skills": ["SQL"]},
        {"id": "b", "title": "Python Intern", "organization": "Org B", "required_skills": ["Python"],
         "location": "Pune", "stipend": 30000, "category": "tech"},
        {"id": "c", "title": "Closed", "required_skills": ["Python"], "is_active": False},
    ]
    response = client.post("/rank", json={"profile": PROFILE, "catalog": catalog, "top_n": 10})
    assert response.status_code == 200
    results = response.json()["results"]
    assert [r["opportunity"]["id"] for r in results] == ["b", "a"]
    assert results[0]["score"] == 95
    assert results[0]["badges"] == ["Top Match", "High Stipend", "Tech Heavy"]


def test_rank_rejects_bad_top_n():
    response = client.post("/rank", json={"profile": PROFILE, "top_n": 0})
    assert response.status_code == 400


def test_rank_rejects_empty_catalog():
    response = client.post("/rank", json={"profile": PROFILE, "catalog": []})
    assert response.status_code == 400
    assert "empty" in response.json()["detail"].lower()


def test_rank_rejects_string_skills():
    response = client.post("/rank", json={"profile": {"skills": "Python"}})
    assert response.status_code == 422


def test_analyze_gaps_with_categories():
    response = client.post(
        "/analyze-gaps",
        json={"profile": PROFILE, "categories": ["Data Analytics Intern", "Unknown Track"]},
    )
    assert response.status_code == 200
    data = response.json()
    assert data["categories"] == ["Data Analytics Intern"]
    assert data["skipped_categories"] == ["Unknown Track"]
    gap = data["per_category"][0]
    assert gap["possessed_required"] == ["Python"]
    assert gap["completion"] == 20
    assert len(data["priority"]) <= 6
    assert data["priority"][0]["skill"] == "SQL"
    assert len(data["priority"][0]["resources"]) == 2


def test_analyze_gaps_derives_categories_from_interests():
    profile = {**PROFILE, "interests": ["Design"]}
    response = client.post("/analyze-gaps", json={"profile": profile})
    assert response.status_code == 200
    assert response.json()["categories"] == ["UI/UX Design Intern"]


def test_analyze_gaps_priority_cap():
    response = client.post("/analyze-gaps", json={"profile": PROFILE, "max_priority": 1})
    assert response.status_code == 200
    assert len(response.json()["priority"]) == 1
