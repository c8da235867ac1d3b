"""Exception types and the standard error responses seeded into every route."""


class ComposerError(Exception):
    """Base class for failures that abort a document build."""


class RouteLoadError(ComposerError):
    """A route module could not provide usable metadata."""

    def __init__(self, module, reason: str = "Invalid route file to import docs"):
        self.module = module
        super().__init__(f"{reason} {module}")


class ConfigError(ComposerError):
    """The project configuration file is missing or malformed."""


ERROR_RESPONSES: dict[str, dict] = {
    "400": {
        "code": 400,
        "description": "The request contains errors or didn't properly encode content.",
    },
    "401": {
        "code": 401,
        "description": "The request is missing, or contains bad, authorization credentials.",
    },
    "404": {
        "code": 404,
        "description": "Resource couldn't be found.",
    },
    "408": {
        "code": 408,
        "description": "The request has taken too long to process.",
    },
    "429": {
        "code": 429,
        "description": "Too many requests are currently being processed.",
    },
    "500": {
        "code": 500,
        "description": "An internal error occurred when handling the request.",
    },
}
