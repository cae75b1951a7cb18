"""
Error kinds raised by services and providers.

Routers never catch these; the handlers registered in ``main.py`` are the
single place where an error kind becomes an HTTP status code.
"""


class ArticlesApiError(Exception):
    """Base class for every error kind the API translates into a response."""

    status_code: int = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class NotFoundError(ArticlesApiError):
    status_code = 404


class InvalidOperationError(ArticlesApiError):
    """A business rule was violated (duplicate title, unknown id, ...)."""

    status_code = 400


class UnauthorizedError(ArticlesApiError):
    status_code = 401


class DataSourceUnavailableError(ArticlesApiError):
    """The object store could not be reached or returned an unusable payload."""

    status_code = 503
