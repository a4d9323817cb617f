from fastapi import APIRouter, Depends, Request
from fastapi.responses import PlainTextResponse
from pymongo.collection import Collection

from mflix_api.dao.movies import DEFAULT_SAMPLE_SIZE, fetch_random_movies
from mflix_api.schemas.api import HealthResponse, MoviesEnvelope
from mflix_api.utils.logger import get_logger

logger = get_logger(__name__)

router = APIRouter()

GREETING = "Hey boy"


def get_movies_collection(request: Request) -> Collection:
    """Collection handle opened at start-up; overridden in tests."""
    return request.app.state.movies_collection


def get_sample_size(request: Request) -> int:
    return getattr(request.app.state, "sample_size", DEFAULT_SAMPLE_SIZE)


@router.get("/", response_class=PlainTextResponse)
def root():
    return GREETING


@router.get("/health", response_model=HealthResponse)
def health_check():
    """Health check endpoint for monitoring."""
    return HealthResponse(status="ok", service="mflix-api")


@router.get("/movies", response_model=MoviesEnvelope)
def get_movies(collection: Collection = Depends(get_movies_collection),
               sample_size: int = Depends(get_sample_size)):
    """Return up to `sample_size` movies starting at a random offset.

    An empty batch is not an error: it comes back as code 1 with a null
    response. Database failures surface as plain-text 500s through the
    SampleQueryError handler.
    """
    movies = fetch_random_movies(collection, limit=sample_size)
    if not movies:
        logger.info("no movies found")
    return MoviesEnvelope.from_movies(movies)
