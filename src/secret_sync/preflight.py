"""Startup checks run once before any secret is touched."""

from pathlib import Path
from typing import NamedTuple

from secret_sync.wrangler import Wrangler

WRANGLER_CONFIG_FILES: tuple[str, ...] = ("wrangler.json", "wrangler.jsonc", "wrangler.toml")


class Readiness(NamedTuple):
    """Result of the startup checks.

    Attributes:
        ready: Whether secret operations may start.
        problem: What to fix when not ready.

    """

    ready: bool
    problem: str | None = None


def find_wrangler_config(root: Path) -> Path | None:
    """Return the wrangler configuration file of a project, if any."""
    for filename in WRANGLER_CONFIG_FILES:
        candidate = root / filename
        if candidate.is_file():
            return candidate
    return None


def check_readiness(root: Path, wrangler: Wrangler) -> Readiness:
    """Verify that the project is configured and wrangler is logged in.

    Args:
        root: Project directory.
        wrangler: Store adapter used for the login check.

    Returns:
        Readiness describing the first unmet precondition, if any.

    """
    if find_wrangler_config(root) is None:
        return Readiness(
            ready=False,
            problem=f"No wrangler configuration ({', '.join(WRANGLER_CONFIG_FILES)}) found in {root}. "
            "Run the project setup first.",
        )

    if not wrangler.is_authenticated():
        return Readiness(ready=False, problem="Not logged in. Please run 'wrangler login' first.")

    return Readiness(ready=True)
