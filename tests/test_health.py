"""
Tests for health, metrics and root endpoints.
"""


class TestHealth:

    def test_root(self, client):
        response = client.get("/")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_detailed_health_checks_database(self, client):
        response = client.get("/health/detailed")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["checks"]["database"]["status"] == "healthy"

    def test_metrics_counts(self, client, sample_test):
        client.post("/api/v1/candidates/start", json={
            "test_id": sample_test.id, "name": "Jane", "email": "jane@example.com"
        })

        response = client.get("/metrics")

        assert response.status_code == 200
        metrics = response.json()["metrics"]
        assert metrics["total_jobs"] == 1
        assert metrics["total_tests"] == 1
        assert metrics["total_candidates"] == 1
        assert metrics["candidates_by_status"]["in_progress"] == 1
        assert metrics["candidates_by_status"]["completed"] == 0
