"""Error types raised by the show directory."""


class ShowDirectoryError(Exception):
    """Base class for show directory failures.

    ``status_code`` is the HTTP status the API layer reports for the error.
    """

    status_code = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(ShowDirectoryError):
    """Required input was missing or malformed. Raised before any store access."""

    status_code = 400


class NotFound(ShowDirectoryError):
    """The requested show, or a movie/theater it references, does not exist."""

    status_code = 404


class StoreFailure(ShowDirectoryError):
    """The database rejected or could not execute a statement."""

    status_code = 500
