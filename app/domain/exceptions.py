"""Errors raised by use cases and translated to HTTP responses by the API."""


class ProfileNotFoundError(LookupError):
    """The profile does not exist or belongs to another account.

    Both cases are reported identically so the existence of other users'
    profiles is never revealed.
    """

    def __init__(self, message: str = "profile_not_found") -> None:
        super().__init__(message)


class InvalidInputError(ValueError):
    """A request argument is missing or malformed."""


__all__ = ["InvalidInputError", "ProfileNotFoundError"]
