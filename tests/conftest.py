import pytest

from config import TestingConfig
from jobboard import create_app
from jobboard.extensions import db, identity_provider, resume_storage
from jobboard.models import Role, User, UserStatus
from jobboard.services.auth import AuthService


@pytest.fixture
def app():
    app = create_app(TestingConfig)
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


class FakeStorage:
    """Records uploads instead of talking to Cloudinary."""

    def __init__(self):
        self.uploads = []
        self.fail = False

    def upload(self, data, public_id):
        if self.fail:
            from jobboard.errors import StorageError
            raise StorageError("Cloudinary upload failed")
        locator = f"resumes/{public_id}"
        self.uploads.append((locator, data))
        return locator

    def signed_url(self, locator, expires_in=3600):
        return f"https://storage.test/{locator}.pdf?expires_in={expires_in}"


@pytest.fixture
def storage(monkeypatch):
    fake = FakeStorage()
    monkeypatch.setattr(resume_storage, "upload", fake.upload)
    monkeypatch.setattr(resume_storage, "signed_url", fake.signed_url)
    return fake


@pytest.fixture
def google_profile(monkeypatch):
    """Make the identity provider return whatever profile the test puts here."""
    profile = {
        "name": "Grace Hopper",
        "email": "grace@example.com",
        "picture": "https://img.test/grace.png",
        "sub": "google-123",
    }

    def fetch_profile(access_token):
        return dict(profile)

    monkeypatch.setattr(identity_provider, "fetch_profile", fetch_profile)
    return profile


def make_user(email, role=Role.JOB_SEEKER, password="pw1", status=UserStatus.ACTIVE, **fields):
    user = User(
        name=fields.pop("name", email.split("@")[0]),
        email=email,
        password=AuthService.hash_password(password),
        role=role.value,
        status=status.value,
        **fields,
    )
    db.session.add(user)
    db.session.commit()
    return user


def auth_header(client, email, password="pw1"):
    response = client.post("/api/auth/login", json={"email": email, "password": password})
    assert response.status_code == 200, response.get_json()
    return {"Authorization": f"Bearer {response.get_json()['token']}"}


@pytest.fixture
def seeker(app):
    return make_user("seeker@example.com", Role.JOB_SEEKER, skills="python, sql", cgpa=8.4, year="3", department="CS")


@pytest.fixture
def recruiter(app):
    return make_user("recruiter@example.com", Role.RECRUITER, company_name="Acme")


@pytest.fixture
def other_recruiter(app):
    return make_user("other@example.com", Role.RECRUITER, company_name="Globex")


@pytest.fixture
def admin(app):
    return make_user("admin@example.com", Role.ADMIN)


@pytest.fixture
def seeker_headers(client, seeker):
    return auth_header(client, seeker.email)


@pytest.fixture
def recruiter_headers(client, recruiter):
    return auth_header(client, recruiter.email)


@pytest.fixture
def other_recruiter_headers(client, other_recruiter):
    return auth_header(client, other_recruiter.email)


@pytest.fixture
def admin_headers(client, admin):
    return auth_header(client, admin.email)


def post_job(client, headers, **overrides):
    payload = {
        "title": "Backend Dev",
        "location": "Remote",
        "type": "Full-time",
        "description": "Build APIs",
    }
    payload.update(overrides)
    response = client.post("/api/jobs", json=payload, headers=headers)
    assert response.status_code == 201, response.get_json()
    return response.get_json()["job"]
