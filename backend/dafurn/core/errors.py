# dafurn/core/errors.py
"""
Error types shared by the storage layer, the HTTP layer and the seeding command.

- DatabaseConfigError: DATABASE_URL is missing or unusable (fatal at startup)
- MissingDatabaseURLError: DATABASE_URL is not configured
- StorageUnavailableError: the database connection or driver failed
- InvalidIdentifierError: a user id that can never match a stored record
- DuplicateEmailError: an insert collided with the unique email index
"""


class DafurnError(Exception):
    """Base class for every error raised by this application."""


class DatabaseConfigError(DafurnError):
    pass


class MissingDatabaseURLError(DatabaseConfigError):
    def __init__(self) -> None:
        super().__init__("DATABASE_URL is not defined in environment variables")


class StorageUnavailableError(DafurnError):
    pass


class InvalidIdentifierError(DafurnError):
    def __init__(self, value: object) -> None:
        super().__init__(f"Invalid user id: {value!r}")
        self.value = value


class DuplicateEmailError(DafurnError):
    def __init__(self, email: str | None = None) -> None:
        message = "A user with this email already exists"
        if email:
            message = f"A user with email {email!r} already exists"
        super().__init__(message)
        self.email = email
