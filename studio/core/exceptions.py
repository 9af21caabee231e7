"""Exception hierarchy for the studio core."""


class StudioError(Exception):
    """Base class for studio errors."""


class StoreWriteError(StudioError):
    """A collection could not be written to the key-value store."""

    def __init__(self, keys, cause: Exception):
        super().__init__(f"Failed to write {', '.join(keys)}: {cause}")
        self.keys = list(keys)
        self.cause = cause


class NotAuthenticatedError(StudioError):
    """An operation needs a logged-in user and there is none."""
