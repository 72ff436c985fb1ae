"""secret-sync: Interactive secret uploader for Cloudflare Workers.

This package reads the secrets declared in a project's ``.dev.vars`` file
and uploads, lists or deletes them through the wrangler CLI.

Example usage:
    from pathlib import Path

    from secret_sync import SecretSync, Wrangler, find_wrangler

    root = Path(".")
    wrangler = Wrangler(find_wrangler(root), root)
    summary = SecretSync(wrangler, root / ".dev.vars").upload_all()
"""

__version__ = "0.1.0"

from secret_sync.cli import cli
from secret_sync.declarations import read_declarations
from secret_sync.exceptions import (
    BinaryNotFoundError,
    ConfigParsingError,
    ControlPlaneNotReadyError,
    DeclarationReadError,
    OperationCancelledError,
    SecretSyncError,
    SourceMissingError,
)
from secret_sync.models import Action, OperationResult, Secret, Summary
from secret_sync.store import SecretStore
from secret_sync.sync import SecretSync
from secret_sync.validation import is_valid_name
from secret_sync.wrangler import Wrangler, find_wrangler

__all__ = [
    # Version
    "__version__",
    # Main CLI
    "cli",
    # Classes
    "SecretSync",
    "Wrangler",
    "SecretStore",
    # Models
    "Action",
    "OperationResult",
    "Secret",
    "Summary",
    # Functions
    "find_wrangler",
    "is_valid_name",
    "read_declarations",
    # Exceptions
    "SecretSyncError",
    "BinaryNotFoundError",
    "ConfigParsingError",
    "ControlPlaneNotReadyError",
    "DeclarationReadError",
    "OperationCancelledError",
    "SourceMissingError",
]
