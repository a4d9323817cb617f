import sys
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI
from pymongo import MongoClient

from mflix_api.api import router
from mflix_api.config.settings import Settings, load_settings
from mflix_api.db import connect_to_mongodb, get_movies_collection
from mflix_api.errors import sample_query_error_handler
from mflix_api.exceptions import ConfigError, DatabaseUnavailableError, SampleQueryError
from mflix_api.middleware import SingleOriginCORSMiddleware
from mflix_api.utils.logger import get_logger, set_log_level

logger = get_logger(__name__)


def create_app(settings: Settings, client: Optional[MongoClient] = None) -> FastAPI:
    """Build the FastAPI app around an already connected client.

    The client is closed when the app shuts down. Without a client the app
    still serves / and /health; /movies needs `app.state.movies_collection`
    (tests provide it through dependency overrides).
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        try:
            yield
        finally:
            if client is not None:
                client.close()
                logger.info("MongoDB connection closed")

    app = FastAPI(title="mflix-api", lifespan=lifespan)
    app.state.settings = settings
    app.state.sample_size = settings.SAMPLE_SIZE
    if client is not None:
        app.state.movies_collection = get_movies_collection(
            client, settings.MONGODB_DB_NAME, settings.MONGODB_COLLECTION
        )

    app.include_router(router)
    app.add_exception_handler(SampleQueryError, sample_query_error_handler)
    app.add_middleware(SingleOriginCORSMiddleware, allowed_origin=settings.ALLOWED_ORIGIN)
    return app


def run(env_file: Optional[str] = ".env"):
    """Validate config, connect, then serve. Exits with status 1 on startup failure."""
    try:
        settings = load_settings(env_file)
        set_log_level(settings.LOG_LEVEL)
        client = connect_to_mongodb(settings.MONGOURI, settings.MONGODB_TIMEOUT_SECONDS)
    except (ConfigError, DatabaseUnavailableError) as e:
        logger.critical("startup failed: %s", e.message)
        sys.exit(1)

    app = create_app(settings, client)
    logger.info("Serving on %s:%s", settings.HOST, settings.PORT)
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    run()
