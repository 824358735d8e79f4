class ServiceError(Exception):
    """Remote extraction failed; callers fall back to the local strategy."""


class ServiceUnavailable(ServiceError):
    """No generative-text service is configured."""


class NetworkFailure(ServiceError):
    """The request could not complete or returned a non-success status."""


class MalformedResponse(ServiceError):
    """The response could not be parsed into the expected shape."""


class InvalidCategory(ServiceError):
    """The parsed response carries a category outside the closed set."""
