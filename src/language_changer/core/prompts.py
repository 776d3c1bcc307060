"""User prompts the core calls out to.

The core never talks to a GUI toolkit directly. The shell passes an object
implementing Prompter (see gui.dialogs.TkPrompter); tests pass a scripted fake.
"""

from pathlib import Path
from typing import Optional, Protocol


class Prompter(Protocol):
    """Interactive prompts used during install discovery"""

    def confirm_install_folder(self, folder: Path) -> bool:
        """Ask whether a detected folder is the installation folder."""
        ...

    def choose_folder(self) -> Optional[Path]:
        """Let the user pick a folder; None if the dialog was cancelled."""
        ...

    def ask_retry_not_found(self) -> bool:
        """Report that the settings file was not found and ask to pick again."""
        ...
