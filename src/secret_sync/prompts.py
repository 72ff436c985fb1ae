"""Interactive user prompts.

Both prompts return None when the user cancels (Ctrl-C), which callers
must keep apart from an empty selection.
"""

import questionary

from secret_sync.models import Action
from secret_sync.styles import POINTER, PROMPT_STYLE, QMARK

ACTION_LABELS: dict[Action, str] = {
    Action.UPLOAD_ALL: "Upload all secrets from .dev.vars",
    Action.UPLOAD_SELECT: "Upload selected secrets",
    Action.LIST: "List remote secrets",
    Action.DELETE: "Delete secrets",
}


def select_action() -> Action | None:
    """Ask which operation to run.

    Returns:
        The chosen Action, or None if the prompt was cancelled.

    """
    answer = questionary.select(
        "What would you like to do?",
        choices=[questionary.Choice(title=label, value=action.value) for action, label in ACTION_LABELS.items()],
        style=PROMPT_STYLE,
        pointer=POINTER,
        qmark=QMARK,
    ).ask()
    if answer is None:
        return None
    return Action(answer)


def select_secrets(message: str, names: list[str]) -> list[str] | None:
    """Ask which secrets to process.

    Args:
        message: Prompt text.
        names: Secret names to choose from.

    Returns:
        The chosen names in display order, or None if the prompt was cancelled.

    """
    return questionary.checkbox(
        message,
        choices=names,
        style=PROMPT_STYLE,
        pointer=POINTER,
        qmark=QMARK,
    ).ask()
