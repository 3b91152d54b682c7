"""Domain errors."""


class ResolutionError(Exception):
    """A stop id could not be resolved.

    The message is shown to the user as-is, so it must not leak transport
    details. The underlying cause is chained via ``raise ... from``.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message
