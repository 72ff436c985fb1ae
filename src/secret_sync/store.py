"""Secret store interface.

The orchestrator only talks to a :class:`SecretStore`; the wrangler-backed
store performs the real calls. Every store runs the same argument checks
before contacting anything remote.
"""

from typing import Protocol

from secret_sync import console
from secret_sync.models import OperationResult
from secret_sync.validation import INVALID_NAME_HINT, is_valid_name


class SecretStore(Protocol):
    """Operations a remote secret store must provide."""

    def upload(self, name: str, value: str) -> OperationResult:
        """Create or overwrite a secret."""
        ...

    def list(self) -> list[str]:
        """Return the names of all stored secrets, or [] on failure."""
        ...

    def delete(self, name: str) -> OperationResult:
        """Remove a secret."""
        ...


def rejected(name: str, value: str | None = None) -> OperationResult | None:
    """Check the arguments of a store call before anything is sent.

    Args:
        name: Secret name to check.
        value: Secret value to check, or None for calls that carry no value.

    Returns:
        A failed result if the call must not proceed, otherwise None.

    """
    if not is_valid_name(name):
        message = f"Invalid secret name: {name} ({INVALID_NAME_HINT})"
        console.error(console.escape(message))
        return OperationResult(name=name, succeeded=False, error_message=message)
    if value is not None and not value:
        console.warning(f"Skipping {name} (empty value)")
        return OperationResult(name=name, succeeded=False, error_message="empty value")
    return None

