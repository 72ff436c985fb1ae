"""Settings for secret-sync.

Settings come from built-in defaults, an optional ``secret-sync.yaml`` file
in the project root and finally the command-line options.
"""

from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any

import yaml
from icecream import ic

from secret_sync.declarations import DEFAULT_PUBLIC_PREFIXES
from secret_sync.exceptions import ConfigParsingError

DEFAULT_CONFIG_FILE = "secret-sync.yaml"
DEFAULT_DECLARATIONS_FILE = ".dev.vars"

_KNOWN_KEYS = frozenset({"declarations", "public_prefixes", "wrangler", "env"})


@dataclass(frozen=True)
class Settings:
    """Resolved settings for one run.

    Attributes:
        root: Project directory holding the declaration and wrangler files.
        declarations: Path of the declaration file.
        public_prefixes: Name prefixes that are never treated as secrets.
        wrangler: Explicit wrangler binary, or None to look it up.
        env: wrangler environment to target, or None for the default one.

    """

    root: Path
    declarations: Path
    public_prefixes: tuple[str, ...] = field(default=DEFAULT_PUBLIC_PREFIXES)
    wrangler: str | None = None
    env: str | None = None


def _parse_config_file(path: Path) -> dict[str, Any]:
    """Parse a settings file.

    Args:
        path: Path to the YAML settings file.

    Returns:
        The settings mapping, empty if the file is empty.

    Raises:
        ConfigParsingError: If the file is malformed or has unexpected content.

    """
    try:
        with path.open(encoding="utf-8") as stream:
            document = yaml.safe_load(stream)
    except yaml.YAMLError as err:
        raise ConfigParsingError(f"Settings file '{path}' contains malformed YAML: {err}") from err
    except (OSError, UnicodeDecodeError) as err:
        raise ConfigParsingError(f"Settings file '{path}' cannot be read: {err}") from err

    if document is None:
        return {}
    if not isinstance(document, dict):
        raise ConfigParsingError(f"Settings file '{path}' does not contain a YAML mapping")

    unknown = sorted(set(document) - _KNOWN_KEYS)
    if unknown:
        raise ConfigParsingError(f"Settings file '{path}' has unknown keys: {', '.join(map(str, unknown))}")

    for key in ("declarations", "wrangler", "env"):
        if key in document and not isinstance(document[key], str):
            raise ConfigParsingError(f"Settings file '{path}': '{key}' must be a string")

    prefixes = document.get("public_prefixes")
    if prefixes is not None and (
        not isinstance(prefixes, list) or not all(isinstance(prefix, str) and prefix for prefix in prefixes)
    ):
        raise ConfigParsingError(f"Settings file '{path}': 'public_prefixes' must be a list of non-empty strings")

    return document


def load_settings(
    root: Path,
    *,
    config_file: Path | None = None,
    env: str | None = None,
) -> Settings:
    """Build the settings for a run.

    Args:
        root: Project directory.
        config_file: Settings file to read. Defaults to ``secret-sync.yaml`` in
            the root, which is optional; an explicitly given file must exist.
        env: wrangler environment from the command line, overriding the file.

    Returns:
        The resolved Settings.

    Raises:
        ConfigParsingError: If the settings file is missing or invalid.

    """
    root = root.resolve()
    settings = Settings(root=root, declarations=root / DEFAULT_DECLARATIONS_FILE)

    if config_file is None:
        candidate = root / DEFAULT_CONFIG_FILE
        document = _parse_config_file(candidate) if candidate.is_file() else {}
    elif config_file.is_file():
        document = _parse_config_file(config_file)
    else:
        raise ConfigParsingError(f"Settings file '{config_file}' does not exist")

    ic(document)

    if "declarations" in document:
        settings = replace(settings, declarations=root / document["declarations"])
    if "public_prefixes" in document:
        settings = replace(settings, public_prefixes=tuple(document["public_prefixes"]))
    if "wrangler" in document:
        settings = replace(settings, wrangler=document["wrangler"])
    if "env" in document:
        settings = replace(settings, env=document["env"])
    if env is not None:
        settings = replace(settings, env=env)

    return settings
