"""Shared test fixtures for authorgraph."""

import os

import pytest

# Settings are loaded at import time and the signing secret has no default
os.environ.setdefault("JWT_SECRET_KEY", "authorgraph-test-signing-secret-0123456789")

from authorgraph.config import settings
from authorgraph.main import create_app
from authorgraph.db import Store
from authorgraph.db.seed import seed_store
from authorgraph.auth import schemas, service, token as auth_token


@pytest.fixture(autouse=True)
def fast_bcrypt():
    """Use the lowest bcrypt work factor so hashing does not dominate test time."""
    original = settings.bcrypt_work_factor
    settings.bcrypt_work_factor = 4
    yield
    settings.bcrypt_work_factor = original


@pytest.fixture
def store():
    """Empty store."""
    return Store()


@pytest.fixture
def seeded_store():
    """Store holding the two demo authors and the demo article."""
    s = Store()
    seed_store(s)
    return s


@pytest.fixture
def app(seeded_store):
    """Flask app serving the seeded store. Each test gets a fresh one."""
    test_app = create_app(seeded_store)
    test_app.config["TESTING"] = True
    return test_app


@pytest.fixture
def client(app):
    """Create test client for API testing."""
    with app.test_client() as client:
        yield client


@pytest.fixture
def test_author(seeded_store):
    """Register an author in the seeded store.

    Returns a tuple of (author, password) where author is the AuthorResponse
    schema and password is the plain text password.
    """
    password = "TestPass123"
    data = schemas.AuthorCreate(
        first_name="Ada",
        last_name="Lovelace",
        user_name="ada",
        password=password,
    )
    service.register_author(seeded_store, data)
    author = seeded_store.author.get_by_username("ada").unwrap()
    return service.to_response(author), password


@pytest.fixture
def jwt_token(test_author):
    """Generate a JWT token for the test author."""
    author, _password = test_author
    return auth_token.generate_access_token(author)


@pytest.fixture
def graphql(client):
    """Post a GraphQL document and return (status_code, json body).

    Usage: graphql(query, variables=None, token=None)
    """
    def post(query, variables=None, token=None, **kwargs):
        url = settings.graphql_path
        if token is not None:
            url = f"{url}?token={token}"
        body = {"query": query}
        if variables is not None:
            body["variables"] = variables
        response = client.post(url, json=body, **kwargs)
        return response.status_code, response.get_json()

    return post
