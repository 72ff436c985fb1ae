#!/usr/bin/env python
"""Command-line interface for secret-sync.

This module provides the main CLI entry point: it resolves settings, runs the
startup checks once, asks for the operation and hands it to SecretSync.
"""

import sys
from pathlib import Path

import click
from icecream import ic

from secret_sync import __version__, console
from secret_sync.config import load_settings
from secret_sync.exceptions import ControlPlaneNotReadyError, OperationCancelledError, SecretSyncError
from secret_sync.models import Action
from secret_sync.preflight import check_readiness
from secret_sync.prompts import select_action
from secret_sync.sync import SecretSync
from secret_sync.wrangler import Wrangler, find_wrangler


@click.command(help="Sync secrets from .dev.vars to Cloudflare Workers")
@click.option("--version", "-v", required=False, is_flag=True, help="print version")
@click.option("--debug", required=False, is_flag=True, help="print debug information")
@click.option(
    "--root",
    "-r",
    required=False,
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    default=Path(),
    help="project directory (defaults to the current one)",
)
@click.option(
    "--action",
    "-a",
    "action_name",
    required=False,
    type=click.Choice([action.value for action in Action]),
    help="operation to run instead of prompting for one",
)
@click.option("--env", "-e", required=False, help="wrangler environment to target")
@click.option(
    "--config",
    "-c",
    "config_file",
    required=False,
    type=click.Path(dir_okay=False, path_type=Path),
    help="settings file (defaults to secret-sync.yaml in the project directory)",
)
def cli(
    version: bool,
    debug: bool,
    root: Path,
    action_name: str | None,
    env: str | None,
    config_file: Path | None,
) -> None:
    """Process CLI arguments and run the requested operation.

    Args:
        version: Print version and exit.
        debug: Enable debug output.
        root: Project directory.
        action_name: Operation to run without prompting.
        env: wrangler environment.
        config_file: Settings file path.

    """
    if not debug:
        ic.disable()

    if version:
        click.echo(__version__)
        return

    console.intro("🔐 Secrets Management Tool")

    try:
        settings = load_settings(root, config_file=config_file, env=env)
        ic(settings)
        wrangler = Wrangler(find_wrangler(settings.root, settings.wrangler), settings.root, env=settings.env)

        readiness = check_readiness(settings.root, wrangler)
        if not readiness.ready:
            raise ControlPlaneNotReadyError(readiness.problem)

        action = Action(action_name) if action_name else select_action()
        if action is None:
            raise OperationCancelledError("Operation cancelled.")

        sync = SecretSync(wrangler, settings.declarations, public_prefixes=settings.public_prefixes)
        sync.run(action)
    except OperationCancelledError as e:
        console.warning(str(e))
        return
    except SecretSyncError as e:
        console.error(console.escape(str(e)))
        sys.exit(1)

    console.outro("✨ Done!")


if __name__ == "__main__":
    cli()
