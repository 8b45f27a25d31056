"""Shared fixtures: in-memory stand-ins for the Supabase-backed services."""
import pytest
from fastapi.testclient import TestClient

from api.index import app
from api.models import Identity
from api.utils.alerts import get_alert_notifier
from api.utils.auth_checks import get_identity_resolver
from api.utils.security_log import get_security_log_store
from api.utils.storage import get_certification_storage, get_file_storage

VALID_TOKEN = "valid-token"
TEST_USER = Identity(id="user-123", email="pharmacist@example.com")

ENV_VARS = (
    "SUPABASE_URL",
    "SUPABASE_ANON_KEY",
    "SUPABASE_SERVICE_ROLE_KEY",
    "STRIPE_PUBLISHABLE_KEY",
    "VAPID_PUBLIC_KEY",
    "UPLOADS_BUCKET",
    "CERTIFICATIONS_BUCKET",
    "SECURITY_LOG_TABLE",
    "BREVO_API_KEY",
    "BREVO_SENDER_EMAIL",
    "BREVO_SENDER_NAME",
    "SECURITY_ALERT_EMAILS",
)


class FakeIdentityResolver:
    def __init__(self):
        self.tokens = []

    def resolve(self, token):
        self.tokens.append(token)
        return TEST_USER if token == VALID_TOKEN else None


class FakeFileStorage:
    def __init__(self, bucket, fail=False):
        self.bucket = bucket
        self.fail = fail
        self.uploads = []

    def upload(self, owner_id, filename, content, content_type=None):
        if self.fail:
            raise RuntimeError("storage backend exploded: secret-internal-detail")
        self.uploads.append(
            {"owner_id": owner_id, "filename": filename, "content": content, "content_type": content_type}
        )
        return f"https://files.example.com/{self.bucket}/{owner_id}/{filename}"


class FakeSecurityLogStore:
    def __init__(self, fail=False):
        self.fail = fail
        self.entries = []

    def create(self, entry):
        if self.fail:
            raise RuntimeError("insert failed: permission denied for table security_logs")
        self.entries.append(entry)


class FakeAlertNotifier:
    def __init__(self):
        self.sent = []

    def notify(self, entry):
        self.sent.append(entry)
        return True


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def resolver():
    return FakeIdentityResolver()


@pytest.fixture
def file_storage():
    return FakeFileStorage("uploads")


@pytest.fixture
def certification_storage():
    return FakeFileStorage("certifications")


@pytest.fixture
def log_store():
    return FakeSecurityLogStore()


@pytest.fixture
def notifier():
    return FakeAlertNotifier()


@pytest.fixture
def client(resolver, file_storage, certification_storage, log_store, notifier):
    app.dependency_overrides[get_identity_resolver] = lambda: resolver
    app.dependency_overrides[get_file_storage] = lambda: file_storage
    app.dependency_overrides[get_certification_storage] = lambda: certification_storage
    app.dependency_overrides[get_security_log_store] = lambda: log_store
    app.dependency_overrides[get_alert_notifier] = lambda: notifier
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def auth_headers():
    return {"Authorization": f"Bearer {VALID_TOKEN}"}
