class RatingError(Exception):
    """Base class for rating service errors."""

    code = "RATING_ERROR"
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(RatingError, ValueError):
    """Malformed input: value out of range, missing or ambiguous target id."""

    code = "VALIDATION_ERROR"
    status_code = 400


class NotFoundError(RatingError):
    """The rated target does not exist."""

    code = "NOT_FOUND"
    status_code = 404


class StoreError(RatingError):
    """Persistence failure; the SQLAlchemy error is chained as __cause__."""

    code = "STORE_ERROR"
    status_code = 500
