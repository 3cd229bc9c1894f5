"""
Tests for the job postings API.
"""

import pytest
from fastapi.testclient import TestClient

from job_postings.api.app import create_app

JOB = {
    "title": "Backend Engineer",
    "description": "Build and ship backend services",
    "company": "Acme Corp",
    "city": "Austin",
    "state": "TX",
}


def _create(client, **overrides) -> dict:
    response = client.post("/jobs", json={**JOB, **overrides})
    assert response.status_code == 201
    return response.json()


def test_root(client):
    """Test root endpoint."""
    response = client.get("/")
    assert response.status_code == 200
    data = response.json()
    assert data["name"] == "Job Postings API"
    assert data["endpoints"]["jobs"] == "/jobs"


def test_health(client):
    """Test health check endpoint."""
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy", "database_healthy": True, "cache_healthy": True}


def test_health_with_cache_down(client, cache_store):
    """Test the service stays healthy without its cache."""
    cache_store.available = False
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["cache_healthy"] is False


def test_create_job(client):
    """Test POST /jobs returns 201 with the new job."""
    data = _create(client)
    assert data["id"] >= 1
    assert data["status"] is True
    assert data["created_at"] == 1_700_000_000
    assert data["title"] == JOB["title"]


@pytest.mark.parametrize(
    "body",
    [
        {"title": "Only a title"},
        {**JOB, "company": ""},
        {**JOB, "city": None},
    ],
)
def test_create_job_invalid_body(client, body):
    """Test missing or empty fields are a 400."""
    response = client.post("/jobs", json=body)
    assert response.status_code == 400


def test_list_jobs(client):
    """Test GET /jobs pages newest first with total, page and limit."""
    a = _create(client, title="A")
    b = _create(client, title="B")
    c = _create(client, title="C")

    first = client.get("/jobs", params={"page": 1, "limit": 2}).json()
    second = client.get("/jobs", params={"page": 2, "limit": 2}).json()

    assert [job["id"] for job in first["jobs"]] == [c["id"], b["id"]]
    assert [job["id"] for job in second["jobs"]] == [a["id"]]
    assert first["total"] == second["total"] == 3
    assert (first["page"], first["limit"]) == (1, 2)


def test_list_jobs_normalizes_paging(client):
    """Test bad page/limit values fall back to defaults."""
    response = client.get("/jobs", params={"page": "abc", "limit": "-5"})
    assert response.status_code == 200
    data = response.json()
    assert (data["page"], data["limit"], data["total"]) == (1, 10, 0)


def test_list_jobs_caps_limit(client):
    """Test limit is capped at MAX_PAGE_SIZE and the capped value is reported."""
    response = client.get("/jobs", params={"limit": "500"})
    assert response.status_code == 200
    assert response.json()["limit"] == 100


def test_out_of_range_page_falls_back_to_first_page(client):
    """Test a page beyond the 64-bit range is treated as missing."""
    created = _create(client, title="Python Developer")
    huge = "99999999999999999999"

    listed = client.get("/jobs", params={"page": huge})
    searched = client.get("/jobs/search", params={"q": "python", "page": huge})

    assert listed.status_code == 200
    assert searched.status_code == 200
    for data in (listed.json(), searched.json()):
        assert (data["page"], data["limit"], data["total"]) == (1, 10, 1)
        assert [job["id"] for job in data["jobs"]] == [created["id"]]


def test_largest_page_is_empty(client):
    """Test a huge in-range page returns an empty page, not an error."""
    _create(client)

    response = client.get("/jobs", params={"page": str(2**62)})

    assert response.status_code == 200
    assert response.json()["jobs"] == []
    assert response.json()["total"] == 1


def test_get_job(client):
    """Test GET /jobs/{id}."""
    created = _create(client)
    response = client.get(f"/jobs/{created['id']}")
    assert response.status_code == 200
    assert response.json() == created


def test_get_job_errors(client):
    """Test bad ids are 400 and missing jobs are 404."""
    assert client.get("/jobs/abc").status_code == 400
    assert client.get("/jobs/0").status_code == 400
    assert client.get("/jobs/999").status_code == 404


def test_out_of_range_id_is_bad_request(client):
    """Test an id beyond the 64-bit range is a 400 on every /jobs/{id} route."""
    huge = "99999999999999999999"

    assert client.get(f"/jobs/{huge}").status_code == 400
    assert client.put(f"/jobs/{huge}", json={"title": "X"}).status_code == 400
    assert client.delete(f"/jobs/{huge}").status_code == 400


def test_update_job(client):
    """Test PUT /jobs/{id} changes only the given fields."""
    created = _create(client)

    response = client.put(f"/jobs/{created['id']}", json={"title": "Staff Engineer", "status": False})

    assert response.status_code == 200
    data = response.json()
    assert data["title"] == "Staff Engineer"
    assert data["status"] is False
    assert data["company"] == created["company"]
    assert data["created_at"] == created["created_at"]
    assert client.get(f"/jobs/{created['id']}").json() == data


def test_update_job_errors(client):
    """Test PUT validation: bad id, no fields, bad body, missing job."""
    created = _create(client)

    assert client.put("/jobs/abc", json={"title": "X"}).status_code == 400
    assert client.put(f"/jobs/{created['id']}", json={}).status_code == 400
    assert client.put(f"/jobs/{created['id']}", json={"title": ""}).status_code == 400
    assert client.put("/jobs/999", json={"title": "X"}).status_code == 404


def test_delete_job(client):
    """Test DELETE /jobs/{id} returns 204 and the job is gone."""
    created = _create(client)

    response = client.delete(f"/jobs/{created['id']}")
    assert response.status_code == 204
    assert response.content == b""

    assert client.get(f"/jobs/{created['id']}").status_code == 404
    assert client.delete(f"/jobs/{created['id']}").status_code == 204
    assert client.delete("/jobs/abc").status_code == 400


def test_search_jobs(client):
    """Test GET /jobs/search matches any text field."""
    _create(client, title="Python Developer")
    _create(client, title="Chef", city="Pythonville")
    _create(client, title="Plumber")

    response = client.get("/jobs/search", params={"q": "python", "limit": 1})

    assert response.status_code == 200
    data = response.json()
    assert data["total"] == 2
    assert len(data["jobs"]) == 1
    assert data["jobs"][0]["title"] == "Chef"


def test_search_jobs_requires_query(client):
    """Test a missing or empty q is a 400."""
    assert client.get("/jobs/search").status_code == 400
    assert client.get("/jobs/search", params={"q": ""}).status_code == 400


def test_api_works_with_cache_down(client, cache_store):
    """Test the whole API keeps working while the cache is unavailable."""
    cache_store.available = False

    created = _create(client)
    assert client.get(f"/jobs/{created['id']}").status_code == 200
    assert client.get("/jobs").json()["total"] == 1
    assert client.put(f"/jobs/{created['id']}", json={"city": "Dallas"}).json()["city"] == "Dallas"
    assert client.delete(f"/jobs/{created['id']}").status_code == 204


def test_store_failure_is_500(client, job_service, monkeypatch):
    """Test store errors map to 500 without leaking details."""
    from job_postings.exceptions import JobStoreError

    def broken(*args, **kwargs):
        raise JobStoreError("connection refused")

    monkeypatch.setattr(job_service.store, "list_jobs", broken)

    response = client.get("/jobs")
    assert response.status_code == 500
    assert response.json() == {"detail": "Failed to list jobs"}


def test_handler_not_initialized():
    """Test requests fail loudly when the lifespan did not wire the handler."""
    client = TestClient(create_app(lifespan=None), raise_server_exceptions=False)
    assert client.get("/jobs").status_code == 500
