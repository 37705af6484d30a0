from aicraft.integrations.prompter.abc import Prompter
from aicraft.integrations.prompter.real import ClickPrompter

__all__ = [
    "ClickPrompter",
    "Prompter",
]
