class MflixAPIError(Exception):
    message = "mflix api error"

    def __init__(self, message: str | None = None):
        self.message = message or self.message
        super().__init__(self.message)


class ConfigError(MflixAPIError):
    message = "Invalid or missing configuration"


class DatabaseUnavailableError(MflixAPIError):
    message = "Could not connect to MongoDB"


class SampleQueryError(MflixAPIError):
    """A per-request database failure while sampling movies.

    `stage` is one of "count", "query" or "decode"; `message` is what the
    caller sees in the plain-text 500 body.
    """

    message = "Error fetching movies"

    def __init__(self, stage: str, message: str | None = None):
        self.stage = stage
        super().__init__(message)
