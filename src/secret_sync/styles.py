"""Custom styling for questionary prompts.

Shared by the action and secret selection prompts so both look the same.
"""

from questionary import Style

# Orange accents, ANSI 256 colors
PROMPT_STYLE = Style(
    [
        ("qmark", "fg:#ff8700 bold"),
        ("question", "bold"),
        ("answer", "fg:#ffaf00 bold"),
        ("pointer", "fg:#ff8700 bold"),
        ("highlighted", "fg:#1c1c1c bg:#ffaf00 bold"),
        ("selected", "fg:#87d787"),  # checked checkbox entries
        ("separator", "fg:#6c6c6c"),
        ("instruction", "fg:#6c6c6c italic"),
        ("text", ""),
        ("disabled", "fg:#585858 italic"),
    ]
)

POINTER = "❯"
QMARK = "🔐"
