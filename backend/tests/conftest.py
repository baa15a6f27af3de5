"""
Shared fixtures.

Seeded in-memory data (see `database`):
    user 1 - employer, owns company 1, which posts job 1
    user 4 - employer, owns company 2, which posts job 2
    user 2 - candidate with candidate profile 7
    user 3 - candidate without a profile
"""

import base64
import json
import os
import sys
import time
from datetime import datetime, timezone
from types import SimpleNamespace

# Must be set before src is imported: Config reads the environment at import time
os.environ["APP_ENV"] = "testing"
os.environ["SERVICE_AUTH_SECRET"] = "test-secret"
os.environ["SERVICE_AUTH_ISSUER"] = "jobboard-api"
os.environ["SERVICE_AUTH_AUDIENCE"] = "jobboard-clients"

# Add backend directory to path
sys.path.insert(0, os.path.abspath(os.path.dirname(__file__) + "/.."))

import jwt
import pytest
from fastapi.testclient import TestClient

from src.config.settings import Config
from src.domain.entities import CandidateProfile, Company, Job
from src.domain.value_objects import UserId
from src.fastapi_app import create_fastapi_app
from src.infrastructure.persistence import InMemoryDatabase
from src.infrastructure.realtime import ConnectionRegistry
from src.infrastructure.security import JwtTokenService
from src.presentation.api.rate_limit import limiter
from src.setup.ioc.container import create_container

SEED = SimpleNamespace(
    employer_id=1,
    candidate_id=2,
    candidate_without_profile_id=3,
    other_employer_id=4,
    company_id=1,
    other_company_id=2,
    job_id=1,
    other_job_id=2,
    candidate_profile_id=7,
)


def _service_token(user_id, role="candidate", email=None, ttl=300, secret=None):
    now = int(time.time())
    return jwt.encode(
        {
            "sub": str(user_id),
            "userId": user_id,
            "email": email or f"user{user_id}@example.com",
            "role": role,
            "iat": now,
            "exp": now + ttl,
            "iss": Config.SERVICE_AUTH_ISSUER,
            "aud": Config.SERVICE_AUTH_AUDIENCE,
        },
        secret or Config.SERVICE_AUTH_SECRET,
        algorithm="HS256",
    )


@pytest.fixture()
def seed():
    return SEED


@pytest.fixture()
def database():
    db = InMemoryDatabase()
    now = datetime.now(timezone.utc)
    db.add_company(Company(id=SEED.company_id, owner_id=UserId(SEED.employer_id), name="Acme"))
    db.add_company(
        Company(id=SEED.other_company_id, owner_id=UserId(SEED.other_employer_id), name="Globex")
    )
    db.add_job(
        Job(
            id=SEED.job_id,
            company_id=SEED.company_id,
            title="Backend Engineer",
            description="Build the messaging service",
            type="full-time",
            created_at=now,
            location="Remote",
            is_remote=True,
        )
    )
    db.add_job(
        Job(
            id=SEED.other_job_id,
            company_id=SEED.other_company_id,
            title="Data Analyst",
            description="Dashboards",
            type="contract",
            created_at=now,
        )
    )
    db.add_candidate_profile(
        CandidateProfile(
            id=SEED.candidate_profile_id,
            user_id=UserId(SEED.candidate_id),
            first_name="Jane",
            last_name="Doe",
        )
    )
    return db


@pytest.fixture()
def container(database):
    return create_container(database)


@pytest.fixture()
def app(container):
    """Create and configure a new FastAPI app instance for each test."""
    return create_fastapi_app(container)


@pytest.fixture()
def client(app):
    """A test client for the FastAPI app; the lifespan closes the container."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture(autouse=True)
def reset_rate_limits():
    limiter.reset()
    yield


@pytest.fixture()
def registry(client, container) -> ConnectionRegistry:
    return client.portal.call(container.get, ConnectionRegistry)


@pytest.fixture()
def make_token():
    """Factory: make_token(user_id, role="candidate", ttl=300, secret=None)."""
    return _service_token


@pytest.fixture()
def auth_headers():
    """Factory: auth_headers(user_id, role) -> Authorization header dict."""

    def _headers(user_id, role="candidate"):
        return {"Authorization": f"Bearer {_service_token(user_id, role)}"}

    return _headers


@pytest.fixture()
def ws_url():
    """Factory: ws_url(token) -> socket path with the token query parameter."""

    def _url(token=None):
        return Config.WS_PATH if token is None else f"{Config.WS_PATH}?token={token}"

    return _url


@pytest.fixture()
def token_service():
    return JwtTokenService(
        secret=Config.SERVICE_AUTH_SECRET,
        issuer=Config.SERVICE_AUTH_ISSUER,
        audience=Config.SERVICE_AUTH_AUDIENCE,
        access_ttl_seconds=Config.ACCESS_TOKEN_TTL_SECONDS,
        socket_ttl_seconds=Config.WS_TOKEN_TTL_SECONDS,
    )


@pytest.fixture()
def tamper_token():
    """Factory: rewrite the userId claim of a token, keeping the old signature."""

    def _tamper(token, user_id=1):
        header, payload, signature = token.split(".")
        claims = json.loads(base64.urlsafe_b64decode(payload + "=" * (-len(payload) % 4)))
        claims["userId"] = user_id
        claims["sub"] = str(user_id)
        forged = base64.urlsafe_b64encode(json.dumps(claims).encode()).rstrip(b"=").decode()
        return ".".join([header, forged, signature])

    return _tamper
