import random
from typing import List, Optional

from pydantic import ValidationError
from pymongo.collection import Collection
from pymongo.errors import PyMongoError

from mflix_api.exceptions import SampleQueryError
from mflix_api.schemas.movie import Movie
from mflix_api.utils.logger import get_logger

logger = get_logger(__name__)

DEFAULT_SAMPLE_SIZE = 10


def pick_offset(count: int, rng: random.Random) -> int:
    """Return a skip value in [0, count) drawn from `rng`."""
    if count <= 0:
        raise ValueError("count must be positive to pick an offset")
    return rng.randrange(count)


def fetch_random_movies(collection: Collection, rng: Optional[random.Random] = None,
                        limit: int = DEFAULT_SAMPLE_SIZE) -> List[Movie]:
    """Fetch up to `limit` consecutive movies starting at a random offset.

    This is not a uniform sample: the batch is the run of documents that
    follows the offset in natural order, and it is shorter than `limit`
    when the offset lands near the end of the collection.
    """
    try:
        count = collection.count_documents({})
    except PyMongoError as e:
        logger.error("Error counting documents: %s", repr(e), exc_info=True)
        raise SampleQueryError("count", "Error fetching movies") from e

    if count == 0:
        logger.info("movies collection is empty")
        return []

    # a fresh generator per call keeps concurrent requests independent
    rng = rng or random.Random()
    offset = pick_offset(count, rng)

    try:
        docs = list(collection.find({}).skip(offset).limit(limit))
    except PyMongoError as e:
        logger.error("Error fetching movies: %s", repr(e), exc_info=True)
        raise SampleQueryError("query", "Error fetching movies") from e

    try:
        movies = [Movie.model_validate(doc) for doc in docs]
    except ValidationError as e:
        logger.error("Error decoding movies: %s", repr(e), exc_info=True)
        raise SampleQueryError("decode", "Error decoding movies") from e

    logger.debug("sampled %d of %d movies at offset %d", len(movies), count, offset)
    return movies
