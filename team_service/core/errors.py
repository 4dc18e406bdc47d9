# team_service/core/errors.py
"""
Error taxonomy raised by the service layer. Routes translate these into HTTP status codes.
"""


class TeamServiceError(Exception):
    """Base class for every error the services raise on purpose."""

    def __init__(self, detail: str | None = None):
        super().__init__(detail or self.default_detail)
        self.detail = detail or self.default_detail

    default_detail = "Team service error"


class NotFoundError(TeamServiceError, LookupError):
    default_detail = "Not found"


class StoreUnavailableError(NotFoundError):
    """The database could not serve the requested record set."""

    default_detail = "Record store is unavailable"


class BadRequestError(TeamServiceError, ValueError):
    default_detail = "Bad request"


class DuplicateTeamError(TeamServiceError):
    default_detail = "A team with the same name or location already exists"


class ConcurrencyConflictError(TeamServiceError):
    """The row changed underneath an update for a reason other than deletion."""

    default_detail = "The record was modified by another request"
