"""Data models for secret-sync.

This module provides the small value types passed between the declaration
reader, the secret store adapters and the orchestrator.
"""

from dataclasses import dataclass, field
from enum import Enum


class Action(str, Enum):
    """Operations the tool can perform in a single run.

    Inherits from str so the values can be used directly as
    command-line choices and prompt answers.
    """

    UPLOAD_ALL = "upload-all"
    UPLOAD_SELECT = "upload-select"
    LIST = "list"
    DELETE = "delete"


@dataclass(frozen=True, slots=True)
class Secret:
    """A declared secret.

    Attributes:
        name: The secret name, already checked against the name grammar.
        value: The secret value.

    """

    name: str
    value: str

    def __repr__(self) -> str:
        """Return a representation that never includes the value."""
        return f"Secret(name={self.name!r})"


@dataclass(frozen=True, slots=True)
class OperationResult:
    """Outcome of one upload or delete call.

    Truthiness follows ``succeeded``, so a result can be used wherever
    a plain success flag is expected.

    Attributes:
        name: The secret the call was made for.
        succeeded: Whether the remote store accepted the change.
        error_message: Diagnostic from the control plane when the call failed.

    """

    name: str
    succeeded: bool
    error_message: str | None = None

    def __bool__(self) -> bool:
        return self.succeeded


@dataclass(slots=True)
class Summary:
    """Aggregated outcome of a batch, in processing order."""

    results: list[OperationResult] = field(default_factory=list)

    @property
    def succeeded_count(self) -> int:
        return sum(1 for result in self.results if result.succeeded)

    @property
    def failed_count(self) -> int:
        return sum(1 for result in self.results if not result.succeeded)
