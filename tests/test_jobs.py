from datetime import datetime, timedelta

from jobboard.extensions import db
from jobboard.models import Job
from tests.conftest import post_job


def titles(response):
    return {job["title"] for job in response.get_json()["jobs"]}


class TestCreateJob:
    def test_recruiter_posts_job(self, client, recruiter, recruiter_headers):
        job = post_job(client, recruiter_headers, minSalary=80000, maxSalary=120000, salary="$80k-$120k")
        assert job["postedBy"] == recruiter.id
        assert job["company"] == "Acme"
        assert job["experienceLevel"] == "Entry Level"
        assert job["type"] == "Full-time"
        assert job["minSalary"] == 80000

    def test_explicit_company_wins(self, client, recruiter_headers):
        job = post_job(client, recruiter_headers, company="Initech")
        assert job["company"] == "Initech"

    def test_admin_without_company_must_supply_one(self, client, admin_headers):
        payload = {"title": "Ops", "location": "NYC", "type": "Contract", "description": "Run things"}
        assert client.post("/api/jobs", json=payload, headers=admin_headers).status_code == 400
        assert post_job(client, admin_headers, company="HQ")["company"] == "HQ"

    def test_job_seeker_cannot_post(self, client, seeker_headers):
        payload = {"title": "x", "location": "y", "type": "z", "description": "d", "company": "c"}
        response = client.post("/api/jobs", json=payload, headers=seeker_headers)
        assert response.status_code == 403

    def test_requires_token(self, client):
        assert client.post("/api/jobs", json={}).status_code == 401

    def test_invalid_experience_level(self, client, recruiter_headers):
        payload = {"title": "x", "location": "y", "type": "z", "description": "d", "experienceLevel": "Guru"}
        assert client.post("/api/jobs", json=payload, headers=recruiter_headers).status_code == 400

    def test_min_above_max_salary(self, client, recruiter_headers):
        payload = {"title": "x", "location": "y", "type": "z", "description": "d", "minSalary": 10, "maxSalary": 5}
        assert client.post("/api/jobs", json=payload, headers=recruiter_headers).status_code == 400


class TestListJobs:
    def test_public_and_counted(self, client, recruiter_headers):
        post_job(client, recruiter_headers, title="A")
        post_job(client, recruiter_headers, title="B")
        response = client.get("/api/jobs")
        assert response.status_code == 200
        body = response.get_json()
        assert body["success"] is True
        assert body["total"] == 2
        assert titles(response) == {"A", "B"}

    def test_newest_first(self, client, recruiter_headers):
        old = post_job(client, recruiter_headers, title="Old")
        post_job(client, recruiter_headers, title="New")
        db.session.get(Job, old["id"]).created_at = datetime.utcnow() - timedelta(days=3)
        db.session.commit()
        jobs = client.get("/api/jobs").get_json()["jobs"]
        assert [j["title"] for j in jobs] == ["New", "Old"]

    def test_search_matches_title_or_company(self, client, recruiter_headers):
        post_job(client, recruiter_headers, title="Python Engineer", company="Initech")
        post_job(client, recruiter_headers, title="Designer", company="Pythonic Labs")
        post_job(client, recruiter_headers, title="Accountant", company="Initrode")
        assert titles(client.get("/api/jobs?search=PYTHON")) == {"Python Engineer", "Designer"}

    def test_search_treats_wildcards_literally(self, client, recruiter_headers):
        post_job(client, recruiter_headers, title="100% Remote")
        post_job(client, recruiter_headers, title="Onsite")
        assert titles(client.get("/api/jobs?search=%25")) == {"100% Remote"}

    def test_exact_and_substring_filters(self, client, recruiter_headers):
        post_job(client, recruiter_headers, title="A", department="Engineering", location="San Francisco, CA",
                 type="Full-time", experienceLevel="Senior Level")
        post_job(client, recruiter_headers, title="B", department="Engineering", location="New York, NY",
                 type="Internship", experienceLevel="Internship")
        post_job(client, recruiter_headers, title="C", department="Sales", location="san jose", type="Full-time")

        assert titles(client.get("/api/jobs?department=Engineering")) == {"A", "B"}
        assert titles(client.get("/api/jobs?location=san")) == {"A", "C"}
        assert titles(client.get("/api/jobs?type=Full-time")) == {"A", "C"}
        assert titles(client.get("/api/jobs?experienceLevel=Internship")) == {"B"}
        assert titles(client.get("/api/jobs?department=Engineering&type=Full-time")) == {"A"}

    def test_unknown_experience_level_matches_nothing(self, client, recruiter_headers):
        post_job(client, recruiter_headers, title="A", experienceLevel="Senior Level")
        response = client.get("/api/jobs?experienceLevel=Principal")
        assert response.status_code == 200
        assert response.get_json()["total"] == 0

    def test_blank_filters_are_ignored(self, client, recruiter_headers):
        post_job(client, recruiter_headers, title="A")
        assert titles(client.get("/api/jobs?search=&department=&minSalary=")) == {"A"}

    def test_salary_bounds(self, client, recruiter_headers):
        post_job(client, recruiter_headers, title="Backend Dev", minSalary=80000, maxSalary=120000)
        post_job(client, recruiter_headers, title="Junior", minSalary=40000, maxSalary=60000)
        post_job(client, recruiter_headers, title="Unlisted")

        assert titles(client.get("/api/jobs?minSalary=90000")) == set()
        assert titles(client.get("/api/jobs?minSalary=70000")) == {"Backend Dev"}
        assert titles(client.get("/api/jobs?minSalary=30000")) == {"Backend Dev", "Junior"}
        assert titles(client.get("/api/jobs?maxSalary=100000")) == {"Junior"}
        assert titles(client.get("/api/jobs?minSalary=50000&maxSalary=130000")) == {"Backend Dev"}

    def test_non_numeric_salary(self, client):
        assert client.get("/api/jobs?minSalary=lots").status_code == 400


class TestMyJobs:
    def test_scoped_to_caller(self, client, recruiter_headers, other_recruiter_headers):
        post_job(client, recruiter_headers, title="Mine")
        post_job(client, other_recruiter_headers, title="Theirs")
        response = client.get("/api/jobs/my-jobs", headers=recruiter_headers)
        assert response.status_code == 200
        assert titles(response) == {"Mine"}

    def test_job_seeker_forbidden(self, client, seeker_headers):
        assert client.get("/api/jobs/my-jobs", headers=seeker_headers).status_code == 403


class TestDeleteJob:
    def test_owner_deletes(self, client, recruiter_headers):
        job = post_job(client, recruiter_headers)
        response = client.delete(f"/api/jobs/{job['id']}", headers=recruiter_headers)
        assert response.status_code == 200
        assert response.get_json()["message"] == "Job removed"
        assert client.get("/api/jobs").get_json()["total"] == 0

    def test_other_recruiter_forbidden(self, client, recruiter_headers, other_recruiter_headers):
        job = post_job(client, recruiter_headers)
        response = client.delete(f"/api/jobs/{job['id']}", headers=other_recruiter_headers)
        assert response.status_code == 403
        assert client.get("/api/jobs").get_json()["total"] == 1

    def test_admin_deletes_any(self, client, recruiter_headers, admin_headers):
        job = post_job(client, recruiter_headers)
        assert client.delete(f"/api/jobs/{job['id']}", headers=admin_headers).status_code == 200
        assert client.get("/api/jobs").get_json()["jobs"] == []

    def test_missing_job(self, client, admin_headers):
        assert client.delete("/api/jobs/nope", headers=admin_headers).status_code == 404

    def test_applications_survive_deletion(self, client, recruiter_headers, seeker_headers):
        job = post_job(client, recruiter_headers)
        client.post(f"/api/jobs/{job['id']}/apply", json={}, headers=seeker_headers)
        client.delete(f"/api/jobs/{job['id']}", headers=recruiter_headers)

        applications = client.get("/api/jobs/my-applications", headers=seeker_headers).get_json()["applications"]
        assert len(applications) == 1
        assert applications[0]["jobTitle"] is None


class TestStats:
    def test_role_scoped_counts(self, client, recruiter_headers, other_recruiter_headers, seeker_headers, admin_headers):
        mine = post_job(client, recruiter_headers, title="Mine")
        theirs = post_job(client, other_recruiter_headers, title="Theirs")
        client.post(f"/api/jobs/{mine['id']}/apply", json={}, headers=seeker_headers)
        client.post(f"/api/jobs/{theirs['id']}/apply", json={}, headers=seeker_headers)

        recruiter_stats = client.get("/api/jobs/stats", headers=recruiter_headers).get_json()["stats"]
        assert recruiter_stats["jobsCount"] == 1
        assert recruiter_stats["applicationsCount"] == 1

        seeker_stats = client.get("/api/jobs/stats", headers=seeker_headers).get_json()["stats"]
        assert seeker_stats["jobsCount"] == 2
        assert seeker_stats["applicationsCount"] == 2

        admin_stats = client.get("/api/jobs/stats", headers=admin_headers).get_json()["stats"]
        assert admin_stats == {"jobsCount": 2, "applicationsCount": 2, "usersCount": 4}

    def test_requires_token(self, client):
        assert client.get("/api/jobs/stats").status_code == 401
