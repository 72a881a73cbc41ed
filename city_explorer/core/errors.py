import logging

from fastapi import HTTPException, status

logger = logging.getLogger(__name__)

GENERIC_ERROR_MESSAGE = "Sorry, something went wrong"


class CityExplorerError(Exception):
    """Base class for errors raised by this service."""


class FetchError(CityExplorerError):
    """A provider request failed or answered with an unexpected body."""

    def __init__(self, provider: str, reason: str):
        self.provider = provider
        self.reason = reason
        super().__init__(f"{provider} fetch failed: {reason}")


def handle_error(exc: Exception) -> HTTPException:
    """
    Single funnel for every failure on the request path.

    Store errors, provider errors and malformed payloads all end up here:
    the exception is logged with its traceback and the caller gets back a
    500 carrying a fixed message. Callers raise the returned exception.
    """
    logger.error("Request failed: %s", exc, exc_info=exc)
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=GENERIC_ERROR_MESSAGE,
    )
