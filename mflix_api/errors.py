from fastapi import Request
from fastapi.responses import PlainTextResponse

from mflix_api.exceptions import SampleQueryError
from mflix_api.utils.logger import get_logger

logger = get_logger(__name__)


async def sample_query_error_handler(request: Request, exc: SampleQueryError):
    logger.error("%s %s failed at %s stage: %s", request.method, request.url.path, exc.stage, exc.message)
    return PlainTextResponse(f"{exc.message}\n", status_code=500)
