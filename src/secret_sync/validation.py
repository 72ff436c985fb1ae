"""Secret name validation.

Secret names end up as arguments of wrangler commands, so anything outside
upper-case letters, digits and underscores is rejected rather than escaped.
"""

import re

SECRET_NAME_PATTERN = re.compile(r"[A-Z][A-Z0-9_]*")

INVALID_NAME_HINT = "must be uppercase alphanumeric + underscore"


def is_valid_name(name: str) -> bool:
    """Check whether a name is an acceptable secret name.

    Args:
        name: The candidate secret name.

    Returns:
        True if the whole name matches ``^[A-Z][A-Z0-9_]*$``.

    """
    return SECRET_NAME_PATTERN.fullmatch(name) is not None
