class BackendError(RuntimeError):
    """Raised when the hosted backend rejects a call or cannot be reached."""

    def __init__(self, message: str, code: str | None = None, status: int | None = None) -> None:
        super().__init__(message)
        self.code = code
        self.status = status


class AuthError(BackendError):
    """Raised when the auth service refuses credentials or a session operation."""
    pass


class ProfileNotFoundError(BackendError):
    """Raised when a signed-in user has no row in the profiles table."""
    pass


class DuplicateAccountError(ValueError):
    pass


class ValidationError(ValueError):
    pass
