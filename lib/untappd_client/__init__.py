from .client import UntappdClient
from .errors import (
    ApiError,
    ConfigError,
    ContentTypeError,
    EndOfInputError,
    MissingClientIDError,
    MissingClientSecretError,
    NetworkError,
    UnexpectedEndOfInputError,
    UntappdClientError,
)

__all__ = [
    "UntappdClient",
    "ApiError",
    "ConfigError",
    "ContentTypeError",
    "EndOfInputError",
    "MissingClientIDError",
    "MissingClientSecretError",
    "NetworkError",
    "UnexpectedEndOfInputError",
    "UntappdClientError",
]
