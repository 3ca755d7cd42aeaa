class PrAnnotatorError(Exception):
    """Base class for every failure reported by pr-annotator."""


class ConfigurationError(PrAnnotatorError):
    pass


class ApiError(PrAnnotatorError):
    pass


class AuthError(ApiError):
    pass


class NotFoundError(ApiError):
    pass


class RateLimitError(ApiError):
    pass


class NetworkError(ApiError):
    pass
