import pytest
from fastapi.testclient import TestClient

from whisker.main import app, limiter
from whisker.deps import get_session_store
from whisker.services.sessions import ScalingSessionStore


@pytest.fixture(autouse=True, scope="session")
def _disable_rate_limit():
    # The suite fires far more than the per-minute default at one client IP.
    limiter.enabled = False
    yield
    limiter.enabled = True


@pytest.fixture
def session_store():
    """Fresh session registry per test."""
    return ScalingSessionStore(max_sessions=10)


@pytest.fixture
def client(session_store):
    """Test client with the session store override."""
    app.dependency_overrides[get_session_store] = lambda: session_store
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
