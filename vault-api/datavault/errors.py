class DataVaultError(Exception):
    """Base class for errors raised by DataVault services."""

    status_code: int = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class NotFoundError(DataVaultError):
    """The record does not exist or is not owned by the caller."""

    status_code = 404


class InvalidOperationError(DataVaultError):
    """The request is well-formed but cannot be applied to this record."""

    status_code = 400
