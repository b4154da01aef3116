"""
Errors raised while assembling the genesis state.

Every error aborts the run; none is retried.
"""
from typing import Iterable, Optional


class GenutilError(Exception):
    """Base exception for genesis assembly errors."""

    pass


class GenesisIOError(GenutilError):
    """Exception raised when the gentx directory or a gentx file cannot be read."""

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message)
        self.path = path


class GenesisDecodeError(GenutilError):
    """Exception raised when a genesis document, app state or gentx cannot be decoded."""

    def __init__(self, message: str, file_name: Optional[str] = None):
        super().__init__(message)
        self.file_name = file_name


class GenTxValidationError(GenutilError):
    """Exception raised when a gentx violates a structural or referential rule."""

    def __init__(
        self,
        reason: str,
        file_name: str,
        address: Optional[str] = None,
        known_addresses: Iterable[str] = (),
    ):
        self.reason = reason
        self.file_name = file_name
        self.address = address
        self.known_addresses = sorted(known_addresses)

        message = f"{file_name}: {reason}"
        if address is not None:
            message += f" (account {address}, genesis accounts: {self.known_addresses})"
        super().__init__(message)


class EmptyGenesisError(GenutilError):
    """Exception raised when no genesis transaction was found."""

    pass


class GenesisPersistError(GenutilError):
    """Exception raised when an output artifact cannot be written."""

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message)
        self.path = path
