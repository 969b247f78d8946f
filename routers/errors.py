"""HTTP errors shared by the routers."""

from fastapi import HTTPException, status


def internal_error() -> HTTPException:
    """Generic failure returned for store errors; details only go to the log."""
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail="Internal server error",
    )
