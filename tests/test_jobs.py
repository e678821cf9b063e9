"""
Test suite for job-related endpoints.

Tests cover:
- Job creation (admin only)
- Job retrieval and listing (public)
- Updates and deletion with cascade to tests
- AI-drafted job details
"""

from app.models.test import Test
from seed_jobs import DEFAULT_JOBS, seed_jobs
from app.models.job import Job


class TestJobCreation:
    """Tests for job creation endpoint"""

    def test_create_job_success(self, client, admin_headers, sample_job_data):
        """Test successful job creation"""
        response = client.post("/api/v1/jobs/", json=sample_job_data, headers=admin_headers)

        assert response.status_code == 201
        data = response.json()
        assert data["id"]
        assert data["title"] == sample_job_data["title"]
        assert data["skills"] == sample_job_data["skills"]

    def test_create_job_requires_auth(self, client, sample_job_data):
        response = client.post("/api/v1/jobs/", json=sample_job_data)

        assert response.status_code == 401

    def test_create_job_requires_admin(self, client, user_headers, sample_job_data):
        response = client.post("/api/v1/jobs/", json=sample_job_data, headers=user_headers)

        assert response.status_code == 403
        assert "admin" in response.json()["detail"].lower()

    def test_create_job_missing_fields(self, client, admin_headers):
        """Test job creation with missing required fields"""
        response = client.post("/api/v1/jobs/", json={
            "title": "Test Job"
            # Missing description, experience, skills
        }, headers=admin_headers)

        assert response.status_code == 422  # Validation error

    def test_create_job_blank_skills(self, client, admin_headers, sample_job_data):
        sample_job_data["skills"] = ["  ", ""]

        response = client.post("/api/v1/jobs/", json=sample_job_data, headers=admin_headers)

        assert response.status_code == 422


class TestJobRetrieval:
    """Tests for job retrieval endpoints"""

    def test_get_job_by_id(self, client, sample_job):
        response = client.get(f"/api/v1/jobs/{sample_job.id}")

        assert response.status_code == 200
        data = response.json()
        assert data["id"] == sample_job.id
        assert data["experience"] == sample_job.experience

    def test_get_nonexistent_job(self, client):
        """Test retrieving a job that doesn't exist"""
        response = client.get("/api/v1/jobs/99999")

        assert response.status_code == 404
        assert "not found" in response.json()["detail"].lower()

    def test_list_jobs(self, client, admin_headers, sample_job_data):
        """Test listing all jobs"""
        for i in range(3):
            job_data = sample_job_data.copy()
            job_data["title"] = f"Job {i}"
            client.post("/api/v1/jobs/", json=job_data, headers=admin_headers)

        response = client.get("/api/v1/jobs/")

        assert response.status_code == 200
        titles = [job["title"] for job in response.json()]
        assert sorted(titles) == ["Job 0", "Job 1", "Job 2"]

    def test_list_jobs_pagination(self, client, admin_headers, sample_job_data):
        for i in range(5):
            job_data = sample_job_data.copy()
            job_data["title"] = f"Job {i}"
            client.post("/api/v1/jobs/", json=job_data, headers=admin_headers)

        response = client.get("/api/v1/jobs/?skip=1&limit=2")

        assert response.status_code == 200
        assert len(response.json()) == 2


class TestJobUpdateAndDelete:
    """Tests for job updates and deletion"""

    def test_partial_update(self, client, admin_headers, sample_job):
        response = client.put(
            f"/api/v1/jobs/{sample_job.id}",
            json={"experience": "5+ years"},
            headers=admin_headers
        )

        assert response.status_code == 200
        data = response.json()
        assert data["experience"] == "5+ years"
        assert data["title"] == sample_job.title

    def test_update_nonexistent_job(self, client, admin_headers):
        response = client.put("/api/v1/jobs/99999", json={"title": "X"}, headers=admin_headers)

        assert response.status_code == 404

    def test_delete_job_cascades_to_tests(self, client, db_session, admin_headers, sample_test):
        job_id = sample_test.job_id

        response = client.delete(f"/api/v1/jobs/{job_id}", headers=admin_headers)

        assert response.status_code == 204
        assert db_session.query(Job).filter(Job.id == job_id).first() is None
        assert db_session.query(Test).filter(Test.job_id == job_id).count() == 0

    def test_delete_requires_admin(self, client, user_headers, sample_job):
        response = client.delete(f"/api/v1/jobs/{sample_job.id}", headers=user_headers)

        assert response.status_code == 403


class TestJobDetailsGeneration:
    """Tests for AI-drafted job details"""

    def test_generate_details(self, client, admin_headers, mock_generator):
        response = client.post(
            "/api/v1/jobs/generate-details",
            json={"title": "Data Engineer"},
            headers=admin_headers
        )

        assert response.status_code == 200
        data = response.json()
        assert "Data Engineer" in data["description"]
        assert data["skills"]
        assert mock_generator.calls == [("job_details", "Data Engineer")]

    def test_generate_details_failure(self, client, admin_headers, mock_generator):
        mock_generator.fail = True

        response = client.post(
            "/api/v1/jobs/generate-details",
            json={"title": "Data Engineer"},
            headers=admin_headers
        )

        assert response.status_code == 502


class TestSeedJobs:
    """Tests for the default job catalogue script"""

    def test_seed_is_idempotent(self, db_session):
        created, skipped = seed_jobs(db_session)
        assert created == len(DEFAULT_JOBS)
        assert skipped == 0

        created, skipped = seed_jobs(db_session)
        assert created == 0
        assert skipped == len(DEFAULT_JOBS)
        assert db_session.query(Job).count() == len(DEFAULT_JOBS)
