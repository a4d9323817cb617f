import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from unittest.mock import MagicMock

from mflix_api.api import get_movies_collection
from mflix_api.config.settings import Settings
from mflix_api.main import create_app

ALLOWED_ORIGIN = "http://localhost:5173"


def make_movie_doc(i: int) -> dict:
    return {
        "_id": f"573a1390f29313caabcd{i:04d}",
        "title": f"Movie {i}",
        "year": 1900 + i,
        "runtime": 90 + i,
        "genres": ["Drama"],
        "cast": ["Someone"],
        "imdb": {"rating": 6.5, "votes": 100 + i, "id": i},
        "awards": {"wins": 1, "nominations": 2, "text": "1 win & 2 nominations."},
        "tomatoes": {"viewer": {"rating": 3.5, "numReviews": 10, "meter": 70}, "fresh": 5},
    }


def make_collection(count: int, docs=None) -> MagicMock:
    """Fake pymongo collection: count_documents -> count, find().skip().limit() -> docs."""
    collection = MagicMock()
    collection.count_documents.return_value = count
    collection.find.return_value.skip.return_value.limit.return_value = list(docs or [])
    return collection


@pytest.fixture
def settings():
    return Settings(
        _env_file=None,
        MONGOURI="mongodb://localhost:27017",
        ALLOWED_ORIGIN=ALLOWED_ORIGIN,
        SAMPLE_SIZE=10,
        HOST="0.0.0.0",
        PORT=8080,
    )


@pytest.fixture
def mock_collection():
    return make_collection(20, [make_movie_doc(i) for i in range(10)])


@pytest.fixture
def app(settings, mock_collection):
    app = create_app(settings)
    app.dependency_overrides[get_movies_collection] = lambda: mock_collection
    yield app
    app.dependency_overrides = {}


@pytest_asyncio.fixture
async def client(app):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
