# tests/test_api.py

"""
API Endpoint Tests - Tests for all FastAPI endpoints
"""

import pytest
from fastapi import status



# HEALTH


class TestHealthEndpoint:

    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["status"] == "healthy"
        assert "version" in data

    def test_root_lists_endpoints(self, client):
        data = client.get("/").json()
        assert data["endpoints"]["projects"] == "/api/v1/ieop/projects"



# SCORED PROJECTS


class TestProjectsEndpoint:
    """Tests for GET /api/v1/ieop/projects (catalog offline → bundled dataset)."""

    def test_falls_back_to_bundled_dataset(self, client):
        response = client.get("/api/v1/ieop/projects", params={"as_of": "2025-01-01"})
        assert response.status_code == status.HTTP_200_OK

        data = response.json()
        assert data["source"] == "fallback"
        assert data["as_of"] == "2025-01-01"
        assert data["total"] == 12
        assert len(data["results"]) == 12

    def test_sorted_by_index_descending(self, client):
        data = client.get("/api/v1/ieop/projects", params={"as_of": "2025-01-01"}).json()
        indices = [r["index"] for r in data["results"]]
        assert indices == sorted(indices, reverse=True)

    def test_result_shape(self, client):
        data = client.get("/api/v1/ieop/projects", params={"as_of": "2025-01-01"}).json()
        result = data["results"][0]
        assert set(result["components"]) == {"cost", "schedule", "recurrence", "execution"}
        assert set(result["metrics"]) == {
            "cost_per_m2", "delay_percent", "budget_deviation", "has_recurrence"
        }
        assert result["classification"] in {"Excellent", "Good", "Regular", "Poor", "Critical"}

    def test_invalid_as_of(self, client):
        response = client.get("/api/v1/ieop/projects", params={"as_of": "not-a-date"})
        assert response.status_code == 422



# SUMMARY


class TestSummaryEndpoint:

    def test_summary_totals(self, client):
        response = client.get("/api/v1/ieop/summary", params={"as_of": "2025-01-01"})
        assert response.status_code == status.HTTP_200_OK

        stats = response.json()["statistics"]
        assert stats["total"] == 12
        assert sum(stats["by_classification"].values()) == 12
        assert sum(stats["by_status"].values()) == 12
        assert set(stats["by_status"]) == {
            "Concluída", "Em Andamento", "Paralisada", "Não Iniciada", "Cancelada"
        }
        assert 0 <= stats["recurrence_rate"] <= 100



# SCORE ARBITRARY RECORDS


class TestScoreEndpoint:
    """Tests for POST /api/v1/ieop/score."""

    def test_score_catalog_record(self, client, catalog_payload):
        response = client.post(
            "/api/v1/ieop/score",
            json={"projects": [catalog_payload], "as_of": "2025-01-01"},
        )
        assert response.status_code == status.HTTP_200_OK

        data = response.json()
        result = data["results"][0]
        # R$ 2400/m² vs reference 3000 → ratio 0.8 → 100; on time; aligned
        assert result["components"] == {
            "cost": 100, "schedule": 100, "recurrence": 100, "execution": 100
        }
        assert result["index"] == 100
        assert result["classification"] == "Excellent"
        assert data["statistics"]["total"] == 1

    def test_huge_amounts_are_scored(self, client, catalog_payload):
        catalog_payload["valorContratadoR$"] = 0
        catalog_payload["valorPagoR$"] = 1e25
        catalog_payload["percentualExecutado"] = 1e30
        response = client.post(
            "/api/v1/ieop/score",
            json={"projects": [catalog_payload], "as_of": "2025-01-01"},
        )
        assert response.status_code == status.HTTP_200_OK

        result = response.json()["results"][0]
        assert result["components"]["cost"] == 0
        assert result["components"]["execution"] == 0
        assert result["index"] == 45
        assert result["metrics"]["cost_per_m2"] == 10 ** 22
        assert result["metrics"]["budget_deviation"] == pytest.approx(1e27)

    def test_empty_portfolio(self, client):
        response = client.post("/api/v1/ieop/score", json={"projects": [], "as_of": "2025-01-01"})
        assert response.status_code == status.HTTP_200_OK

        data = response.json()
        assert data["results"] == []
        assert data["statistics"]["total"] == 0
        assert data["statistics"]["mean_index"] == 0
        assert all(v == 0 for v in data["statistics"]["by_classification"].values())

    def test_unknown_work_type_rejected(self, client, catalog_payload):
        catalog_payload["tipo"] = "Aeroporto"
        response = client.post("/api/v1/ieop/score", json={"projects": [catalog_payload]})
        assert response.status_code == 422

    def test_negative_amount_rejected(self, client, catalog_payload):
        catalog_payload["valorContratadoR$"] = -1
        response = client.post("/api/v1/ieop/score", json={"projects": [catalog_payload]})
        assert response.status_code == 422



# METHODOLOGY / DATASET


class TestMethodologyEndpoint:

    def test_weights_sum_to_one(self, client):
        data = client.get("/api/v1/ieop/methodology").json()
        assert data["weights"] == {
            "cost": 0.30, "schedule": 0.30, "recurrence": 0.15, "execution": 0.25
        }
        assert sum(data["weights"].values()) == pytest.approx(1.0)

    def test_bands_and_reference_costs(self, client):
        data = client.get("/api/v1/ieop/methodology").json()
        assert [b["min_index"] for b in data["classification_bands"]] == [80, 60, 40, 20, 0]
        assert data["classification_bands"][0]["label_pt"] == "Ótimo"
        assert len(data["reference_costs"]) == 8


class TestDatasetEndpoint:

    def test_dataset_metadata(self, client):
        data = client.get("/api/v1/ieop/dataset").json()
        assert data["id"] == "painel-obras-rj-2024"

    def test_dataset_detail_unavailable(self, client):
        response = client.get("/api/v1/ieop/dataset/abc-123")
        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {"dataset_id": "abc-123", "available": False, "detail": None}
