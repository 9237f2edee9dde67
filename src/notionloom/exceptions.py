"""Custom exception classes for the notionloom library."""

import httpx


class NotionloomError(Exception):
    """Base exception class for all notionloom errors."""

    def __init__(
        self,
        message: str,
        *,
        response: httpx.Response | None = None,
        request: httpx.Request | None = None,
    ):
        """Initializes the base exception.

        Args:
            message: The error message.
            response: Optional httpx.Response object associated with the error.
            request: Optional httpx.Request object associated with the error.
        """
        super().__init__(message)
        self.message = message
        self.response = response
        self.request = request

    def __str__(self) -> str:
        if self.response is not None:
            url_info = getattr(getattr(self.response, "request", None), "url", "N/A")
            return (
                f"{self.message} (Status: {self.response.status_code}, URL: {url_info})"
            )
        if isinstance(self.request, httpx.Request):
            return f"{self.message} (URL: {self.request.url})"
        return self.message


class APIResponseError(NotionloomError):
    """Represents any non-2xx response returned by the API.

    The status code and raw body are kept as received; no attempt is made to
    classify the error further.
    """

    def __init__(self, message: str, *, response: httpx.Response):
        super().__init__(message, response=response, request=response.request)

    @property
    def status_code(self) -> int:
        """The HTTP status code of the failed response."""
        assert self.response is not None
        return self.response.status_code

    @property
    def body(self) -> str:
        """The raw text body of the failed response."""
        assert self.response is not None
        return self.response.text


class ResponseParseError(NotionloomError):
    """Raised when a successful response body is not valid JSON."""


class ValidationError(NotionloomError):
    """Represents a caller argument error detected before any request is sent.

    Raised, for example, when a required path parameter is missing.
    """

    def __init__(self, message: str):
        super().__init__(message)


class RequestTimeoutError(NotionloomError):
    """Represents a request that did not complete within the configured timeout."""

    def __init__(self, message: str, *, request: httpx.Request | None = None):
        """Initializes the RequestTimeoutError.

        Args:
            message: The error message.
            request: The httpx.Request object associated with the timeout.
        """
        super().__init__(message, request=request, response=None)


class NetworkError(NotionloomError):
    """Represents a network connection error (e.g., DNS resolution failure, connection refused)."""

    def __init__(self, message: str, *, request: httpx.Request | None = None):
        super().__init__(message, request=request, response=None)


class NotionloomRequestError(NotionloomError):
    """Represents any other failure of the HTTP request process itself."""
