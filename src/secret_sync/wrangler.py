"""Wrangler-backed secret store.

This module provides the Wrangler class which wraps the ``wrangler`` CLI to
upload, list and delete Cloudflare Workers secrets, and to check that the
CLI is logged in.
"""

import contextlib
import json
import os
import shutil
import subprocess
from collections.abc import Generator
from pathlib import Path
from tempfile import NamedTemporaryFile

from icecream import ic

from secret_sync import console
from secret_sync.exceptions import BinaryNotFoundError
from secret_sync.models import OperationResult
from secret_sync.store import rejected

_NOT_AUTHENTICATED = "not authenticated"


def find_wrangler(root: Path, configured: str | None = None) -> str:
    """Locate the wrangler executable.

    Args:
        root: Project directory, searched for a local ``node_modules`` install.
        configured: Explicit binary name or path. Paths are taken relative to root.

    Returns:
        The command to run wrangler with.

    Raises:
        BinaryNotFoundError: If no wrangler executable can be found.

    """
    if configured is not None:
        if os.sep in configured or (os.altsep and os.altsep in configured):
            candidate = root / configured
            if candidate.is_file():
                return str(candidate)
        elif (found := shutil.which(configured)) is not None:
            return found
        raise BinaryNotFoundError(f"Configured wrangler binary '{configured}' not found")

    local = root / "node_modules" / ".bin" / "wrangler"
    if local.is_file():
        return str(local)

    system_binary = shutil.which("wrangler")
    if system_binary is None:
        raise BinaryNotFoundError(
            "wrangler binary not found. Install it in the project (npm install wrangler) "
            "or make sure it is on your PATH."
        )
    return system_binary


def _diagnostic(err: subprocess.CalledProcessError | OSError) -> str:
    """Extract the most useful message from a failed invocation."""
    if isinstance(err, subprocess.CalledProcessError):
        for stream in (err.stderr, err.stdout):
            if stream and stream.strip():
                return stream.strip()
        return f"wrangler exited with code {err.returncode}"
    return str(err)


@contextlib.contextmanager
def _value_file(value: str) -> Generator[Path, None, None]:
    """Write a secret value to a private temporary file for the duration of a call.

    The file is removed on every exit path.

    Args:
        value: The secret value.

    Yields:
        Path of the temporary file.

    """
    # delete=False so the file can be reopened as stdin on every platform
    temp_file = NamedTemporaryFile("w", prefix=".secret-sync-", delete=False, encoding="utf-8")
    temp_path = Path(temp_file.name)
    try:
        with temp_file:
            temp_file.write(value)
        yield temp_path
    finally:
        with contextlib.suppress(OSError):
            temp_path.unlink(missing_ok=True)


class Wrangler:
    """Secret store operations through the wrangler CLI.

    Attributes:
        binary: Command used to run wrangler.
        root: Project directory wrangler runs in.
        env: wrangler environment passed with ``--env``, if any.

    """

    def __init__(self, binary: str, root: Path, env: str | None = None) -> None:
        self.binary = binary
        self.root = root
        self.env = env

    def __repr__(self) -> str:
        return f"Wrangler(binary={self.binary!r}, root={self.root!r}, env={self.env!r})"

    def _build_cmd(self, *args: str) -> list[str]:
        """Build a wrangler command, adding the environment flag when set."""
        cmd = [self.binary, *args]
        if self.env:
            cmd.extend(["--env", self.env])
        return cmd

    def _run(self, cmd: list[str], **kwargs) -> subprocess.CompletedProcess:
        ic(cmd)
        return subprocess.run(cmd, cwd=self.root, capture_output=True, text=True, check=True, **kwargs)

    def whoami(self) -> str:
        """Return the output of ``wrangler whoami``.

        Raises:
            subprocess.CalledProcessError: If wrangler exits with an error.
            OSError: If wrangler cannot be started.

        """
        return self._run([self.binary, "whoami"], stdin=subprocess.DEVNULL).stdout

    def is_authenticated(self) -> bool:
        """Check whether wrangler has a logged-in account."""
        try:
            output = self.whoami()
        except (subprocess.CalledProcessError, OSError) as err:
            ic(_diagnostic(err))
            return False
        return _NOT_AUTHENTICATED not in output.lower()

    def upload(self, name: str, value: str) -> OperationResult:
        """Create or overwrite a secret.

        The value is passed to ``wrangler secret put`` through stdin from a
        short-lived temporary file, never on the command line.

        Args:
            name: Secret name.
            value: Secret value.

        Returns:
            The outcome; failures carry wrangler's diagnostic.

        """
        if (result := rejected(name, value)) is not None:
            return result

        cmd = self._build_cmd("secret", "put", name)
        try:
            with _value_file(value) as value_path, value_path.open(encoding="utf-8") as stdin_f:
                self._run(cmd, stdin=stdin_f)
        except (subprocess.CalledProcessError, OSError) as err:
            return OperationResult(name=name, succeeded=False, error_message=_diagnostic(err))
        return OperationResult(name=name, succeeded=True)

    def list(self) -> list[str]:
        """Return the names of the secrets stored remotely.

        A failed call or unparseable output is reported on the console and
        yields an empty list, the same as a store without secrets.

        """
        cmd = self._build_cmd("secret", "list", "--format", "json")
        try:
            output = self._run(cmd, stdin=subprocess.DEVNULL).stdout
            entries = json.loads(output)
        except (subprocess.CalledProcessError, OSError) as err:
            console.error(f"Failed to list secrets: {console.escape(_diagnostic(err))}")
            return []
        except json.JSONDecodeError as err:
            console.error(f"Failed to list secrets: unexpected wrangler output ({console.escape(str(err))})")
            return []

        if not isinstance(entries, list):
            console.error("Failed to list secrets: wrangler did not return a list")
            return []

        return [
            entry["name"]
            for entry in entries
            if isinstance(entry, dict) and isinstance(entry.get("name"), str) and entry["name"]
        ]

    def delete(self, name: str) -> OperationResult:
        """Remove a secret.

        stdin is detached so wrangler skips its confirmation prompt.

        Args:
            name: Secret name.

        Returns:
            The outcome; failures carry wrangler's diagnostic.

        """
        if (result := rejected(name)) is not None:
            return result

        cmd = self._build_cmd("secret", "delete", name)
        try:
            self._run(cmd, stdin=subprocess.DEVNULL)
        except (subprocess.CalledProcessError, OSError) as err:
            return OperationResult(name=name, succeeded=False, error_message=_diagnostic(err))
        return OperationResult(name=name, succeeded=True)
