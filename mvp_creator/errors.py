# mvp_creator/errors.py

INVALID_IDEA_MESSAGE = "Please enter a product idea."
PARSE_FAILURE_MESSAGE = "Failed to parse the generated code from the model's response."
SERVICE_FAILURE_MESSAGE = "Could not connect to the generation service. Please try again later."


class MVPCreatorError(Exception):
    """Base class for every error raised by this package."""


class ConfigurationError(MVPCreatorError):
    """A required setting (usually the API credential) is missing. Fatal at startup."""


class InvalidIdeaError(MVPCreatorError):
    def __init__(self, message: str = INVALID_IDEA_MESSAGE):
        super().__init__(message)


class ServiceError(MVPCreatorError):
    """The generation request failed in transport or on the provider's side."""


class ResponseParseError(MVPCreatorError):
    def __init__(self, message: str = PARSE_FAILURE_MESSAGE):
        super().__init__(message)


class GenerationError(MVPCreatorError):
    """The one failure a caller of the generation cycle ever sees."""
