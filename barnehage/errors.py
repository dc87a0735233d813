"""Errors raised by services and routes, rendered as JSON by error_handlers."""


class AppError(Exception):
    """An API request that cannot be served, with the HTTP status to answer."""

    def __init__(self, message, status_code=400):
        """Store the message shown to the client and its status code."""
        super().__init__(message)
        self.status_code = status_code
        self.message = message


class ValidationError(AppError):
    """A payload or query value was rejected, e.g. an unknown child status."""

    def __init__(self, message="Invalid request data."):
        """Answer with 400."""
        super().__init__(message, 400)


class NotFoundError(AppError):
    """A child, parent, group or message id does not exist."""

    def __init__(self, message="Record not found."):
        """Answer with 404."""
        super().__init__(message, 404)
