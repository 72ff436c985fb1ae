"""Custom exceptions for secret-sync.

This module defines the exception hierarchy used throughout the application
to separate fatal setup problems from user cancellation.
"""


class SecretSyncError(Exception):
    """Base exception for all secret-sync errors.

    All custom exceptions in this package inherit from this class,
    allowing callers to catch every secret-sync error with a single
    except clause if desired.
    """

    pass


class SourceMissingError(SecretSyncError):
    """Raised when the secret declaration file does not exist.

    Usually this means the project was never set up and the
    ``.dev.vars`` file has not been created yet.
    """

    pass


class DeclarationReadError(SecretSyncError):
    """Raised when the secret declaration file exists but cannot be read.

    This can occur when:
    - The path is a directory
    - The file is not readable by the current user
    - The file is not valid UTF-8
    """

    pass


class ConfigParsingError(SecretSyncError):
    """Raised when the settings file cannot be used.

    This can occur when:
    - The file is not valid YAML
    - The document is not a mapping
    - The document contains unknown or mistyped keys
    """

    pass


class BinaryNotFoundError(SecretSyncError):
    """Raised when the wrangler binary cannot be located.

    Neither the configured path, the project's ``node_modules/.bin``
    nor the system PATH provide a wrangler executable.
    """

    pass


class ControlPlaneNotReadyError(SecretSyncError):
    """Raised when wrangler cannot be used against the remote store.

    This can occur when:
    - No wrangler configuration file exists in the project root
    - wrangler reports that no account is logged in
    """

    pass


class OperationCancelledError(SecretSyncError):
    """Raised when the user abandons an interactive selection.

    Cancellation always happens before any remote call was made,
    so nothing needs to be undone.
    """

    pass
