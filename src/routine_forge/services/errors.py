"""Errors surfaced by services to the API layer."""


class ProfileNotFoundError(LookupError):
    """Raised when a user has not completed onboarding."""

    def __init__(self, user_email: str) -> None:
        super().__init__(f"No profile stored for {user_email}")
        self.user_email = user_email


class InvalidRequestError(ValueError):
    """Raised when a request lacks a required identifier."""
