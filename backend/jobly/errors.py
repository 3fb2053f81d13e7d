"""Error kinds raised by the query services.

Database failures are not wrapped: anything raised by SQLAlchemy reaches the
caller as a ``sqlalchemy.exc.SQLAlchemyError``.
"""


class JoblyError(Exception):
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(JoblyError):
    """Caller input is structurally invalid."""

    status_code = 400


class DuplicateError(JoblyError):
    """A uniqueness rule would be violated."""

    status_code = 409


class NotFoundError(JoblyError):
    """The targeted row does not exist."""

    status_code = 404
