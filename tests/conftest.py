"""
Shared pytest fixtures for the Blog API test suite.

Fixtures here build the application, give each test a freshly created
database (tables created before the test and dropped after it), and
seed it with Faker-generated blog posts.

Key Concepts Demonstrated:
- Fixture scopes (function, session)
- Fixture dependencies
- Test data factories
- Drop-and-reseed database isolation
- Test client creation
"""

import os
import pytest
from typing import Any
from faker import Faker

# Set testing environment before importing app
os.environ["FLASK_ENV"] = "testing"

from app import create_app, db
from app.models import BlogPost
from app.store import PostStore


# Initialize Faker for generating test data
fake = Faker()

SEED_POST_COUNT = 10


def generate_blog_post_data() -> dict[str, Any]:
    """
    Generate one plausible blog post in the ``POST /posts`` body shape.

    ``created`` is a datetime in the past; drop it before sending the
    dict as JSON.
    """
    return {
        "author": {
            "firstName": fake.first_name(),
            "lastName": fake.last_name(),
        },
        "title": fake.sentence(nb_words=4),
        "content": "\n\n".join(fake.paragraphs(nb=13)),
        "created": fake.past_datetime(),
    }


# -----------------------------------------------------------------------------
# Application Fixtures
# -----------------------------------------------------------------------------

@pytest.fixture(scope="session")
def app():
    """
    Create application instance for the test session.

    Yields:
        Flask application instance configured for testing.
    """
    application = create_app("testing")
    yield application


@pytest.fixture(scope="function")
def client(app):
    """
    Create a test client for making HTTP requests.

    Yields:
        Flask test client for making HTTP requests.
    """
    with app.test_client() as test_client:
        yield test_client


@pytest.fixture(scope="function")
def db_session(app):
    """
    Create a fresh database for each test.

    Tables are created before the test and dropped afterwards, so no
    record survives from one test to the next.

    Yields:
        SQLAlchemy extension bound to the app context.
    """
    with app.app_context():
        db.create_all()
        yield db
        db.session.rollback()
        db.drop_all()


@pytest.fixture
def store(db_session) -> PostStore:
    """Post store over the test database session."""
    return PostStore(db_session.session)


# -----------------------------------------------------------------------------
# Test Data Factory Fixtures
# -----------------------------------------------------------------------------

@pytest.fixture
def post_factory(store):
    """
    Factory fixture for creating BlogPost records.

    Example:
        def test_something(post_factory):
            post = post_factory(first_name="Ada", last_name="Lovelace")
            assert post.id is not None
    """

    def _create_post(
        first_name: str | None = None,
        last_name: str | None = None,
        title: str | None = None,
        content: str | None = None
    ) -> BlogPost:
        return store.create(
            author={
                "firstName": first_name or fake.first_name(),
                "lastName": last_name or fake.last_name(),
            },
            title=title or fake.sentence(nb_words=4),
            content=content or fake.paragraph(),
        )

    return _create_post


@pytest.fixture
def seeded_posts(store) -> list[BlogPost]:
    """Seed the test database with ten random blog posts."""
    return store.insert_many(
        generate_blog_post_data() for _ in range(SEED_POST_COUNT)
    )


@pytest.fixture
def sample_post(post_factory) -> BlogPost:
    """A single post with a known author, title and content."""
    return post_factory(
        first_name="Ada",
        last_name="Lovelace",
        title="T",
        content="C"
    )


# -----------------------------------------------------------------------------
# Test Data Fixtures
# -----------------------------------------------------------------------------

@pytest.fixture
def new_post_data() -> dict[str, Any]:
    """
    Provide a valid ``POST /posts`` body.

    Returns:
        JSON-serializable dictionary with author, title and content.
    """
    data = generate_blog_post_data()
    del data["created"]
    return data


@pytest.fixture
def api_headers() -> dict[str, str]:
    """
    Provide common headers for API requests.

    Returns:
        Dictionary of HTTP headers.
    """
    return {
        "Content-Type": "application/json",
        "Accept": "application/json"
    }
