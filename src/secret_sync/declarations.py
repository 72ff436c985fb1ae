"""Secret declaration file parsing.

This module reads the ``.dev.vars`` file of a project and turns its
``NAME=value`` lines into :class:`Secret` objects.
"""

from collections.abc import Iterable, Sequence
from pathlib import Path

from icecream import ic

from secret_sync import console
from secret_sync.exceptions import DeclarationReadError, SourceMissingError
from secret_sync.models import Secret
from secret_sync.validation import INVALID_NAME_HINT, is_valid_name

DEFAULT_PUBLIC_PREFIXES: tuple[str, ...] = ("NEXT_PUBLIC_",)


def parse_declarations(
    lines: Iterable[str],
    public_prefixes: Sequence[str] = DEFAULT_PUBLIC_PREFIXES,
) -> list[Secret]:
    """Parse declaration lines into secrets.

    Blank lines, ``#`` comments, public configuration and entries with an
    empty name or value are dropped. Entries with an invalid name are
    dropped with a warning.

    Args:
        lines: Raw lines of a declaration file.
        public_prefixes: Name prefixes marking client-exposed configuration.

    Returns:
        Secrets in declaration order.

    """
    secrets: list[Secret] = []

    for line in lines:
        stripped = line.strip()
        if not stripped or stripped.startswith("#"):
            continue

        name, _, value = stripped.partition("=")
        name = name.strip()
        value = value.strip()

        if name.startswith(tuple(public_prefixes)):
            continue
        if not name or not value:
            continue

        if not is_valid_name(name):
            console.warning(f"Skipping invalid secret name: {console.escape(name)} ({INVALID_NAME_HINT})")
            continue

        secrets.append(Secret(name=name, value=value))

    return secrets


def read_declarations(
    path: Path,
    public_prefixes: Sequence[str] = DEFAULT_PUBLIC_PREFIXES,
) -> list[Secret]:
    """Read the secrets declared in a file.

    Args:
        path: Path to the declaration file.
        public_prefixes: Name prefixes marking client-exposed configuration.

    Returns:
        Secrets in declaration order, possibly empty.

    Raises:
        SourceMissingError: If the file does not exist.
        DeclarationReadError: If the file cannot be read or decoded.

    """
    try:
        content = path.read_text(encoding="utf-8")
    except FileNotFoundError as err:
        raise SourceMissingError(f"{path.name} file not found at {path}") from err
    except (OSError, UnicodeDecodeError) as err:
        raise DeclarationReadError(f"Cannot read {path.name} at {path}: {err}") from err

    secrets = parse_declarations(content.splitlines(), public_prefixes)
    ic([secret.name for secret in secrets])
    return secrets
