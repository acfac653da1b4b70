from __future__ import annotations

"""Pytest fixtures for FastAPI integration tests.

MongoDB is replaced by the in-process stub in ``tests/mongo_stub.py`` so the
request pipeline runs end-to-end without a database server.
"""

import os
import sys
from dataclasses import replace
from pathlib import Path

import pytest
from starlette.testclient import TestClient

# ---------------------------------------------------------------------------
# Runtime env for the application
# ---------------------------------------------------------------------------

os.environ.setdefault("MONGO_URI", "mongodb://test.invalid:27017")
os.environ.setdefault("API_KEY", "s3cr3t")
os.environ.setdefault("APP_ENV", "development")

# Ensure project root on PYTHONPATH so `import form_ingest` works when pytest is run
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from form_ingest.main import create_app  # noqa: E402
from form_ingest.settings import Settings  # noqa: E402
from tests.mongo_stub import MongoStubFactory  # noqa: E402

API_KEY = "s3cr3t"
SUBMIT_PATH = "/submit-form"


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture()
def settings() -> Settings:
    return Settings(
        mongo_uri="mongodb://test.invalid:27017",
        api_key=API_KEY,
        app_env="development",
    )


@pytest.fixture()
def mongo() -> MongoStubFactory:
    return MongoStubFactory()


@pytest.fixture()
def make_client(settings, mongo):
    """Factory: build a started TestClient, optionally overriding settings."""

    opened: list[TestClient] = []

    def _make(**overrides) -> TestClient:
        app = create_app(replace(settings, **overrides), client_factory=mongo)
        client = TestClient(app)
        client.__enter__()  # run lifespan startup
        opened.append(client)
        return client

    yield _make

    for client in opened:
        client.__exit__(None, None, None)


@pytest.fixture()
def api_client(make_client) -> TestClient:  # noqa: D401 – pooled mode default
    return make_client()


@pytest.fixture()
def per_request_client(make_client) -> TestClient:
    return make_client(mongo_connect_per_request=True)
