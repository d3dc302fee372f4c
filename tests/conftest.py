"""Shared pytest fixtures for Notifer tests."""

import pytest


@pytest.fixture
def credential_store():
    """In-memory credential store holding a global and a job-scoped token."""
    from notifer.credentials.store import InMemoryCredentialStore
    store = InMemoryCredentialStore()
    store.add_secret("ci-token", "tk_global_secret")
    store.add_secret("deploy-token", "tk_deploy_secret", "deploy-api")
    return store


@pytest.fixture
def scope():
    """Scope of a job named deploy-api."""
    from notifer.credentials.base import CredentialScope
    return CredentialScope(principal="jenkins", item="deploy-api")


@pytest.fixture
def build_env():
    """Typical build environment."""
    return {
        "JOB_NAME": "deploy-api",
        "BUILD_NUMBER": "42",
        "BUILD_URL": "https://ci.example.com/job/deploy-api/42/",
        "BRANCH_NAME": "main",
    }


@pytest.fixture
def mock_transport():
    """Recording transport that accepts every request."""
    from notifer.api.client import MockNotiferClient
    return MockNotiferClient()


@pytest.fixture
def dispatcher(credential_store, mock_transport):
    """Dispatcher wired to the in-memory store and the recording transport."""
    from notifer.credentials.resolver import CredentialResolver
    from notifer.dispatch.orchestrator import NotificationDispatcher
    return NotificationDispatcher(CredentialResolver(credential_store), mock_transport)


@pytest.fixture
def sink():
    """Collects lines written to the build console (pass sink.append)."""
    return []


@pytest.fixture
def sample_api_response():
    """Sample Notifer API response body."""
    return {
        "id": "msg_01HZX4",
        "topic": "ci-builds",
        "message": "deploy-api #42 failed",
        "priority": 5,
        "tags": ["ci", "deploy"],
    }
