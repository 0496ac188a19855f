"""Core modules for the Atlassian client.

Configuration, logging and the error taxonomy shared by the request pipeline.
"""

from .config_manager import AuthConfig, ClientConfig, ConfigManager
from .error_handler import (
    AtlassianClientError,
    Cancelled,
    ConfigurationError,
    ContextError,
    DeadlineExceeded,
    DecodingError,
    EncodingError,
    ErrorSeverity,
    HTTPStatusError,
    InvalidURL,
    ParameterError,
    RequestBuildError,
    ResponseError,
    TransportFailure
)
from .logging_manager import LoggingManager

__all__ = [
    "AuthConfig",
    "ClientConfig",
    "ConfigManager",
    "AtlassianClientError",
    "Cancelled",
    "ConfigurationError",
    "ContextError",
    "DeadlineExceeded",
    "DecodingError",
    "EncodingError",
    "ErrorSeverity",
    "HTTPStatusError",
    "InvalidURL",
    "ParameterError",
    "RequestBuildError",
    "ResponseError",
    "TransportFailure",
    "LoggingManager"
]
