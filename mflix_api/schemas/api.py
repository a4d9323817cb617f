from typing import List, Optional

from pydantic import BaseModel, model_validator

from mflix_api.schemas.movie import Movie

CODE_SUCCESS = 0
CODE_EMPTY = 1

SUCCESS_MESSAGE = "Movies fetched successfully"
EMPTY_MESSAGE = "No movies found"


class MoviesEnvelope(BaseModel):
    """Wrapper for every /movies reply.

    `code` travels alongside the HTTP status: 0 means `response` holds the
    movies, 1 means nothing was found and `response` is null.
    """

    message: str
    response: Optional[List[Movie]] = None
    code: int

    @model_validator(mode="after")
    def check_code_matches_payload(self):
        if self.code == CODE_SUCCESS and not self.response:
            raise ValueError("code 0 requires a non-empty response")
        if self.code == CODE_EMPTY and self.response is not None:
            raise ValueError("code 1 requires a null response")
        if self.code not in (CODE_SUCCESS, CODE_EMPTY):
            raise ValueError("code must be 0 (success) or 1 (empty)")
        return self

    @classmethod
    def success(cls, movies: List[Movie]) -> "MoviesEnvelope":
        return cls(message=SUCCESS_MESSAGE, response=movies, code=CODE_SUCCESS)

    @classmethod
    def empty(cls) -> "MoviesEnvelope":
        return cls(message=EMPTY_MESSAGE, response=None, code=CODE_EMPTY)

    @classmethod
    def from_movies(cls, movies: List[Movie]) -> "MoviesEnvelope":
        return cls.success(movies) if movies else cls.empty()


class HealthResponse(BaseModel):
    status: str
    service: str
