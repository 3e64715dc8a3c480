"""Tests for the HTTP API."""

from fastapi.testclient import TestClient


def test_health(client: TestClient) -> None:
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}


def test_predict(client: TestClient) -> None:
    response = client.post(
        "/api/predict",
        json={"exam_score": 162, "puc_score": 96, "category": "general"},
    )

    assert response.status_code == 200
    data = response.json()
    assert data["prediction"]["medium"] == 691
    assert data["prediction"]["rank_band"] == "Excellent"
    assert data["analysis"]["rank_gap"] == "200-1,200"
    assert data["suggestion"] == {"name": "MSRIT, PESIT, BMSIT", "branch": "CSE, ECE, ISE"}
    assert data["summary"].startswith("Excellent rank!")


def test_predict_defaults_to_general_category(client: TestClient) -> None:
    response = client.post("/api/predict", json={"exam_score": 180, "puc_score": 100})

    assert response.status_code == 200
    data = response.json()
    assert data["prediction"]["medium"] == 1
    assert data["suggestion"]["name"] == "RVCE, BMSCE, IISc"


def test_predict_rejects_invalid_composite(client: TestClient) -> None:
    response = client.post("/api/predict", json={"exam_score": 400, "puc_score": 100})

    assert response.status_code == 400
    assert response.json()["detail"] == "Please enter valid marks (KCET: 0-180, PUC: 0-100)"


def test_predict_requires_both_scores(client: TestClient) -> None:
    response = client.post("/api/predict", json={"exam_score": 120})

    assert response.status_code == 422


def test_classifier_endpoints(client: TestClient) -> None:
    assert client.get("/api/rank-band", params={"rank": 5000}).json()["rank_band"] == "Good"
    assert (
        client.get("/api/competition-level", params={"composite": 72}).json()["competition_level"]
        == "Moderately Low"
    )
    assert client.get("/api/percentile", params={"composite": 91}).json()["percentile"] == "Top 5%"
    assert (
        client.get("/api/calculate-percentile", params={"rank": 1000}).json()["percentile"]
        == "99.62%"
    )


def test_rank_gap_endpoint(client: TestClient) -> None:
    response = client.get("/api/rank-gap", params={"composite": 77})

    assert response.status_code == 200
    assert response.json() == {
        "rank_gap": "8,000-16,000",
        "candidates_per_percent": "1,500",
        "competition_level": "Moderate",
        "improvement_potential": "Moderate",
    }


def test_college_suggestions_endpoint(client: TestClient) -> None:
    response = client.get("/api/college-suggestions", params={"rank": 12000, "category": "obc"})

    assert response.status_code == 200
    assert response.json() == {"name": "Regional colleges", "branch": "All branches"}


def test_cutoffs(client: TestClient) -> None:
    response = client.get("/api/cutoffs")

    assert response.status_code == 200
    data = response.json()
    assert len(data) == 7
    assert data[1] == {"target_rank": "Top 1,000", "expected_aggregate": "92.5%+"}


def test_trends(client: TestClient) -> None:
    response = client.get("/api/trends")

    assert response.status_code == 200
    data = response.json()
    assert len(data["trends"]) == 15
    assert data["trends"][0] == {"checkpoint": 1, "2022": 1, "2023": 1, "2024": 1}
    assert data["trends"][-1]["2024"] == 190000
    assert data["plot_data"] is not None
    assert len(data["plot_data"]["data"]) == 3


def test_colleges_from_bundled_list(client: TestClient) -> None:
    response = client.get("/api/colleges")

    assert response.status_code == 200
    data = response.json()
    assert len(data) == 12
    assert data[0] == {
        "code": "E001",
        "name": "University of Visvesvaraya College of Engineering Bangalore",
    }


def test_college_detail(client: TestClient) -> None:
    response = client.get("/api/colleges/e005")

    assert response.status_code == 200
    assert response.json()["name"] == "R. V. College of Engineering Bangalore"


def test_unknown_college_is_404(client: TestClient) -> None:
    response = client.get("/api/colleges/X999")

    assert response.status_code == 404
    assert response.json()["detail"] == "College not found"
