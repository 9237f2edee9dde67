"""Constants used throughout the notionloom library.

This module defines the API origin and path prefix, default client settings,
and the identifying User-Agent sent with every request.
"""

# Base URLs
NOTION_API_ORIGIN: str = "https://api.notion.com"
API_PATH_PREFIX: str = "/v1/"

# Default settings
DEFAULT_TIMEOUT_MS: int = 60_000  # Whole-call bound, in milliseconds

NOTIONLOOM_VERSION: str = "0.1.0"
DEFAULT_USER_AGENT: str = f"notionloom/{NOTIONLOOM_VERSION}"
