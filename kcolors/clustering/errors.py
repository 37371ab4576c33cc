"""Errors raised by the clustering engine."""


class EmptyInputError(ValueError):
    """Raised when there are no points to sample initial centers from."""

    def __init__(self, message: str = "cannot initialize clusters from an empty point sequence"):
        super().__init__(message)
