"""Interactive questionary prompts used by `ai-dev init`."""

from typing import List, Optional

import questionary
from questionary import Separator, Style

from .paths import AI_BRIDGES, AVAILABLE_STACKS

ALL_STACKS = "__all__"

# Custom style for Questionary (no background highlight)
CUSTOM_STYLE = Style([
    ('qmark', 'fg:#00d4ff bold'),
    ('question', 'bold'),
    ('answer', 'fg:#00d4ff bold'),
    ('pointer', 'fg:#00d4ff bold'),
    ('highlighted', 'fg:#00d4ff bold bg:default'),
    ('selected', 'fg:#00d4ff bold bg:default'),
    ('checkbox', 'fg:#888888'),
    ('checkbox-selected', 'fg:#00d4ff bold'),
])


def prompt_stack() -> Optional[str]:
    """Ask which stack to install. None means every stack (or a cancelled prompt)."""
    choices = [questionary.Choice(stack, value=stack) for stack in AVAILABLE_STACKS]
    choices += [Separator(), questionary.Choice("All stacks", value=ALL_STACKS)]

    answer = questionary.select(
        "Could not detect the stack. Which one should be installed?",
        choices=choices,
        style=CUSTOM_STYLE,
    ).ask()

    if not answer or answer == ALL_STACKS:
        return None
    return answer


def prompt_tools() -> Optional[List[str]]:
    """Ask which AI tool bridges to create. None when the prompt was cancelled."""
    return questionary.checkbox(
        "Select AI tool bridges:",
        choices=[
            questionary.Choice(f"{tool} ({bridge}/)", value=tool, checked=True)
            for tool, bridge in AI_BRIDGES.items()
        ],
        style=CUSTOM_STYLE,
        instruction="Space=toggle, Enter=confirm",
    ).ask()
