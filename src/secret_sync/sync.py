"""Secret synchronization operations.

This module provides the SecretSync class which runs one of the four
operations against a secret store. Batches are processed one secret at a
time; a failure is recorded and the batch moves on.
"""

from collections.abc import Callable, Sequence
from pathlib import Path

from icecream import ic

from secret_sync import console
from secret_sync.declarations import DEFAULT_PUBLIC_PREFIXES, read_declarations
from secret_sync.exceptions import OperationCancelledError
from secret_sync.models import Action, OperationResult, Secret, Summary
from secret_sync.prompts import select_secrets
from secret_sync.store import SecretStore

Selector = Callable[[str, list[str]], list[str] | None]


class SecretSync:
    """Runs secret operations against a store.

    Attributes:
        store: Secret store receiving the calls.
        declarations_path: Path of the declaration file.
        public_prefixes: Name prefixes skipped when reading declarations.
        selector: Prompt returning the chosen names, or None on cancellation.

    """

    def __init__(
        self,
        store: SecretStore,
        declarations_path: Path,
        *,
        public_prefixes: Sequence[str] = DEFAULT_PUBLIC_PREFIXES,
        selector: Selector = select_secrets,
    ) -> None:
        self.store = store
        self.declarations_path = declarations_path
        self.public_prefixes = public_prefixes
        self.selector = selector

    def run(self, action: Action) -> Summary | list[str] | None:
        """Run a single operation.

        Args:
            action: The operation to run.

        Returns:
            The batch Summary for upload/delete operations, the remote names
            for a listing, or None when there was nothing to do.

        Raises:
            SourceMissingError: If an upload is requested without a declaration file.
            OperationCancelledError: If the user cancels a selection.

        """
        ic(action)
        match action:
            case Action.UPLOAD_ALL:
                return self.upload_all()
            case Action.UPLOAD_SELECT:
                return self.upload_selected()
            case Action.LIST:
                return self.list_remote()
            case Action.DELETE:
                return self.delete_selected()

    def _read(self) -> list[Secret]:
        secrets = read_declarations(self.declarations_path, self.public_prefixes)
        if not secrets:
            console.warning(
                f"No secrets found in {self.declarations_path.name} "
                "(all variables may be public or empty)"
            )
        return secrets

    def _select(self, message: str, names: list[str]) -> list[str]:
        selected = self.selector(message, names)
        if selected is None:
            raise OperationCancelledError("Operation cancelled.")
        ic(selected)
        return selected

    def _upload(self, secret: Secret) -> OperationResult:
        with console.spinner(f"Uploading {secret.name}..."):
            result = self.store.upload(secret.name, secret.value)
        if result:
            console.success(f"{secret.name} uploaded")
        else:
            console.error(f"Failed to upload {secret.name}: {console.escape(result.error_message or '')}")
        return result

    def _delete(self, name: str) -> OperationResult:
        with console.spinner(f"Deleting {console.escape(name)}..."):
            result = self.store.delete(name)
        if result:
            console.success(f"{console.escape(name)} deleted")
        else:
            console.error(f"Failed to delete {console.escape(name)}: {console.escape(result.error_message or '')}")
        return result

    def upload_all(self) -> Summary | None:
        """Upload every declared secret."""
        secrets = self._read()
        if not secrets:
            return None

        console.action(f"Uploading {console.highlight(str(len(secrets)))} secret(s)...")
        summary = Summary([self._upload(secret) for secret in secrets])
        _report(summary, "Uploaded")
        return summary

    def upload_selected(self) -> Summary | None:
        """Upload the declared secrets the user picks.

        An empty selection is not a cancellation: it reports an empty batch.

        Raises:
            OperationCancelledError: If the selection is cancelled.

        """
        secrets = self._read()
        if not secrets:
            return None

        selected = self._select("Select secrets to upload:", [secret.name for secret in secrets])
        by_name = {secret.name: secret for secret in secrets}
        batch = [by_name[name] for name in selected if name in by_name]

        console.action(f"Uploading {console.highlight(str(len(batch)))} secret(s)...")
        summary = Summary([self._upload(secret) for secret in batch])
        _report(summary, "Uploaded")
        return summary

    def _fetch_remote(self) -> list[str]:
        console.info("Fetching remote secrets...")
        with console.spinner("Waiting for wrangler..."):
            names = self.store.list()
        ic(names)
        return names

    def list_remote(self) -> list[str]:
        """Print the names of the secrets stored remotely."""
        names = self._fetch_remote()
        if not names:
            console.warning("No secrets found in Cloudflare Workers.")
            return names

        console.success("Remote secrets:")
        for name in names:
            console.step(console.escape(name))
        return names

    def delete_selected(self) -> Summary | None:
        """Delete the remote secrets the user picks.

        An empty selection is not a cancellation: it reports an empty batch.

        Raises:
            OperationCancelledError: If the selection is cancelled.

        """
        names = self._fetch_remote()
        if not names:
            console.warning("No secrets found to delete.")
            return None

        selected = self._select("Select secrets to delete:", names)
        console.action(f"Deleting {console.highlight(str(len(selected)))} secret(s)...")
        summary = Summary([self._delete(name) for name in selected])
        _report(summary, "Deleted")
        return summary


def _report(summary: Summary, verb: str) -> None:
    """Print the outcome of a batch."""
    console.newline()
    console.summary_panel(
        "Summary",
        {
            verb: f"{summary.succeeded_count} secret(s)",
            "Failed": f"{summary.failed_count} secret(s)",
        },
        failed=summary.failed_count > 0,
    )
