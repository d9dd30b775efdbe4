"""Custom exceptions for sshlist.

This module defines a small hierarchy of exceptions:
- SshListError: Base exception for all sshlist errors
- ConfigurationError: Invalid sshlist settings
- MenuBackendError: The menu renderer could not be started
"""


class SshListError(Exception):
    """Base exception for all sshlist errors.

    All sshlist-specific exceptions inherit from this class, allowing
    callers to catch all sshlist errors with a single except clause.
    """

    pass


class ConfigurationError(SshListError):
    """Configuration related errors.

    Raised when configuration is invalid, such as:
    - Unknown menu backend name
    - Negative pause duration
    """

    pass


class MenuBackendError(SshListError):
    """Menu backend errors.

    Attributes:
        backend: Name of the backend that failed
    """

    def __init__(self, message: str, backend: str = ""):
        super().__init__(message)
        self.backend = backend
