"""Resolution of the Authorization header for outgoing requests."""

from .log_config import logger


def resolve_auth_header(
    auth: str | None, default_auth: str | None = None
) -> dict[str, str]:
    """Build the authorization header for one request.

    The per-call token wins over the client default. When neither is set the
    result is empty and the request is sent unauthenticated.

    Args:
        auth: API key or access token passed for this call only.
        default_auth: The client's configured token.

    Returns:
        dict[str, str]: ``{"authorization": "Bearer <token>"}`` or ``{}``.
    """
    token = auth if auth is not None else default_auth
    if token is None:
        logger.trace("No auth token resolved, sending request unauthenticated.")
        return {}
    return {"authorization": f"Bearer {token}"}
