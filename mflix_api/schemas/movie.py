"""Pydantic schema for documents in the sample_mflix movies collection.

Missing fields fall back to the zero value of their type so every record
serialises to the same shape. Values straight out of pymongo (ObjectId,
datetime) and Extended JSON wrappers left behind by mongoimport are
normalised before validation.
"""
import calendar
from datetime import datetime
from typing import Any, List, Optional

from bson import ObjectId, json_util
from pydantic import AliasChoices, BaseModel, ConfigDict, Field, model_validator

NUMERIC_TYPES = (int, float)


def datetime_to_millis(value: datetime) -> int:
    # naive datetimes from pymongo are UTC
    return calendar.timegm(value.utctimetuple()) * 1000 + value.microsecond // 1000


def normalise_value(value: Any) -> Any:
    if isinstance(value, dict):
        value = {k: normalise_value(v) for k, v in value.items()}
        # converts {"$numberInt": "7"}, {"$date": ...}, {"$oid": ...} etc.
        value = json_util.object_hook(value)
    elif isinstance(value, list):
        return [normalise_value(v) for v in value]

    if isinstance(value, ObjectId):
        return str(value)
    if isinstance(value, datetime):
        return datetime_to_millis(value)
    return value


def usable_number(value: Any, number_type: type) -> bool:
    """False for scalars that should be read as a missing number.

    Lists and dicts are left for validation to reject.
    """
    if value is None:
        return False
    if isinstance(value, str):
        try:
            number_type(value.strip())
        except ValueError:
            return False
    return True


class MflixDocument(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    @model_validator(mode="before")
    @classmethod
    def normalise(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        try:
            data = normalise_value(data)
        except TypeError as e:
            # json_util rejects wrappers with extra keys, e.g. {"$date": .., "x": ..}
            raise ValueError(f"malformed extended JSON value: {e}") from e

        # mflix stores some missing numbers as "" or junk like "2007è"
        for name, field in cls.model_fields.items():
            if field.annotation not in NUMERIC_TYPES:
                continue
            for key in (field.alias, name):
                if key and key in data and not usable_number(data[key], field.annotation):
                    data.pop(key)
        return data


class Awards(MflixDocument):
    wins: int = 0
    nominations: int = 0
    text: str = ""


class IMDB(MflixDocument):
    rating: float = 0
    votes: int = 0
    id: int = 0


class ReviewScore(MflixDocument):
    rating: float = 0
    num_reviews: int = Field(default=0, alias="numReviews")
    meter: int = 0


class Viewer(ReviewScore):
    pass


class Critic(ReviewScore):
    pass


class Tomatoes(MflixDocument):
    viewer: Viewer = Field(default_factory=Viewer)
    critic: Critic = Field(default_factory=Critic)
    fresh: int = 0
    rotten: int = 0
    last_updated: int = Field(default=0, alias="lastUpdated")


class Movie(MflixDocument):
    id: str = Field(default="", validation_alias=AliasChoices("_id", "id"))
    plot: str = ""
    genres: Optional[List[str]] = None
    runtime: int = 0
    cast: Optional[List[str]] = None
    poster: str = ""
    title: str = ""
    fullplot: str = ""
    languages: Optional[List[str]] = None
    released: int = 0
    directors: Optional[List[str]] = None
    rated: str = ""
    awards: Awards = Field(default_factory=Awards)
    lastupdated: str = ""
    year: int = 0
    imdb: IMDB = Field(default_factory=IMDB)
    countries: Optional[List[str]] = None
    type: str = ""
    tomatoes: Tomatoes = Field(default_factory=Tomatoes)
    num_mflix_comments: int = 0
