import pytest
from pydantic import ValidationError

from mflix_api.schemas.api import EMPTY_MESSAGE, SUCCESS_MESSAGE, MoviesEnvelope
from mflix_api.schemas.movie import Movie


def test_success_envelope():
    env = MoviesEnvelope.success([Movie(title="Traffic in Souls")])
    assert env.code == 0
    assert env.message == SUCCESS_MESSAGE
    assert env.response[0].title == "Traffic in Souls"


def test_empty_envelope():
    env = MoviesEnvelope.from_movies([])
    assert env.code == 1
    assert env.message == EMPTY_MESSAGE
    assert env.response is None


@pytest.mark.parametrize("payload", [
    {"message": "m", "response": None, "code": 0},
    {"message": "m", "response": [], "code": 0},
    {"message": "m", "response": [{"title": "x"}], "code": 1},
    {"message": "m", "response": None, "code": 2},
])
def test_code_and_payload_must_agree(payload):
    with pytest.raises(ValidationError):
        MoviesEnvelope.model_validate(payload)
