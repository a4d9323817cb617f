from pymongo import MongoClient
from pymongo.collection import Collection
from pymongo.errors import ConfigurationError, PyMongoError

from mflix_api.exceptions import ConfigError, DatabaseUnavailableError
from mflix_api.utils.logger import get_logger

logger = get_logger(__name__)


def connect_to_mongodb(uri: str, timeout_seconds: float = 10) -> MongoClient:
    """Open a client for `uri` and ping the server before handing it out.

    Raises ConfigError for an empty or malformed URI and
    DatabaseUnavailableError when the server cannot be reached within
    `timeout_seconds`.
    """
    if not uri:
        raise ConfigError("MONGOURI not found in environment variables")

    timeout_ms = int(timeout_seconds * 1000)
    try:
        client = MongoClient(
            uri,
            serverSelectionTimeoutMS=timeout_ms,
            connectTimeoutMS=timeout_ms,
        )
    except ConfigurationError as e:
        logger.error("invalid MongoDB URI: %s", repr(e))
        raise ConfigError(f"Invalid MongoDB URI: {e}") from e

    try:
        client.admin.command("ping")
    except PyMongoError as e:
        logger.error("MongoDB ping failed: %s", repr(e))
        client.close()
        raise DatabaseUnavailableError(f"Could not connect to MongoDB: {e}") from e

    logger.info("Connected to MongoDB")
    return client


def get_movies_collection(client: MongoClient, db_name: str = "sample_mflix",
                          collection_name: str = "movies") -> Collection:
    return client.get_database(db_name)[collection_name]
