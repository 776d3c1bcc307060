"""Tk message boxes and folder picker used by the core and the main window"""

from pathlib import Path
from tkinter import filedialog, messagebox
from typing import Optional

from ..config.paths import GamePaths


class TkPrompter:
    """Prompter implementation backed by native Tk dialogs.

    Args:
        parent: Window the dialogs are attached to
    """

    FOLDER_DESCRIPTION = "Select your League of Legends folder"

    def __init__(self, parent):
        self.parent = parent

    def confirm_install_folder(self, folder: Path) -> bool:
        return messagebox.askyesno(
            "League of Legends folder",
            f"Is '{folder}' your League of Legends installation folder?",
            icon=messagebox.QUESTION,
            default=messagebox.YES,
            parent=self.parent,
        )

    def choose_folder(self) -> Optional[Path]:
        selected = filedialog.askdirectory(
            parent=self.parent,
            title=self.FOLDER_DESCRIPTION,
            mustexist=True,
        )
        # askdirectory returns "" (or an empty tuple on some platforms) when cancelled
        return Path(selected) if selected else None

    def ask_retry_not_found(self) -> bool:
        return messagebox.askyesno(
            "Error",
            f"Settings file '{GamePaths.SETTINGS_FILE_NAME}' not found. "
            "Do you want to select a new folder?",
            icon=messagebox.ERROR,
            parent=self.parent,
        )


def show_language_changed(parent, old_name: str, new_name: str) -> None:
    messagebox.showinfo(
        "Success",
        f"Language changed from {old_name} to {new_name}.",
        parent=parent,
    )


def show_error(parent, title: str, message: str) -> None:
    messagebox.showerror(title, message, parent=parent)
