"""Exceptions raised by the bookmark validation and storage layers."""


class BookmarkValidationError(Exception):
    """
    Base exception for client-input errors on bookmark writes.

    Every subclass maps to an HTTP 400 whose body carries `message` verbatim.
    """

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class MissingFieldError(BookmarkValidationError):
    """Raised when a required field is absent (or null) on create."""

    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(f"Missing '{field}' in request body")


class InvalidUrlError(BookmarkValidationError):
    """Raised when `url` is not an absolute URL with a scheme and host."""

    def __init__(self) -> None:
        super().__init__("Invalid url supplied")


class InvalidRatingError(BookmarkValidationError):
    """Raised when `rating` is not an integer between 1 and 5."""

    def __init__(self) -> None:
        super().__init__(
            "Invalid rating supplied. Rating must be an integer between 1 and 5",
        )


class InvalidTextFieldError(BookmarkValidationError):
    """Raised when `title` or `description` is not acceptable text."""

    def __init__(self, field: str, requirement: str) -> None:
        self.field = field
        super().__init__(f"Invalid {field} supplied. {field.capitalize()} {requirement}")


class EmptyPatchBodyError(BookmarkValidationError):
    """Raised when a partial update carries none of the bookmark fields."""

    def __init__(self) -> None:
        super().__init__(
            "Request body must contain at least one of "
            "'title', 'url', 'description', or 'rating'",
        )


class StoreError(Exception):
    """
    Raised when the database rejects or fails a bookmark operation.

    Wraps constraint violations and connectivity failures. Never carries
    detail to the client; the API responds with a generic 500.
    """

    def __init__(self, operation: str) -> None:
        self.operation = operation
        super().__init__(f"Bookmark store failed during {operation}")
