"""notionloom: an asynchronous Python client for the Notion API.

The client translates typed method calls into single authenticated HTTP
requests and returns the parsed JSON responses.
"""

from .constants import NOTIONLOOM_VERSION as __version__

from .client import NotionClient
from .config import ClientSettings, get_settings
from .exceptions import (
    APIResponseError,
    NetworkError,
    NotionloomError,
    NotionloomRequestError,
    RequestTimeoutError,
    ResponseParseError,
    ValidationError,
)
from .log_config import LoguruRequestLogger, LogLevel, RequestLogger, configure_logging
from .types import RequestSpec

__all__ = [
    "__version__",
    # Client and configuration
    "NotionClient",
    "ClientSettings",
    "get_settings",
    "RequestSpec",
    # Logging
    "LogLevel",
    "LoguruRequestLogger",
    "RequestLogger",
    "configure_logging",
    # Exceptions
    "NotionloomError",
    "APIResponseError",
    "NetworkError",
    "NotionloomRequestError",
    "RequestTimeoutError",
    "ResponseParseError",
    "ValidationError",
]
