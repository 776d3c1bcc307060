"""Configuration/Settings dialog"""

import customtkinter as ctk

from ..config.manager import ConfigurationManager
from ..config.schema import AbandonPolicy, HeuristicsMode, WriteMode
from .styles import FONTS, PADDING, WINDOW_SIZES

# Labels shown in the option menus, keyed by enum member
HEURISTICS_LABELS = {
    HeuristicsMode.ENABLED: "Shortcut and default folders, then ask",
    HeuristicsMode.DISABLED: "Always ask for the folder",
}
ABANDON_LABELS = {
    AbandonPolicy.EXIT: "Close quietly",
    AbandonPolicy.RAISE: "Close and report an error",
}
WRITE_MODE_LABELS = {
    WriteMode.OVERWRITE: "Overwrite in place",
    WriteMode.ATOMIC: "Write copy, then replace",
}


class ConfigDialog(ctk.CTkToplevel):
    """Settings dialog for discovery and save behaviour.

    Discovery settings apply from the next start, since the installation
    folder is only located once per run. The write mode applies immediately.
    """

    def __init__(self, parent, config_manager: ConfigurationManager):
        """Initialize the configuration dialog.

        Args:
            parent: Parent window
            config_manager: Configuration manager instance
        """
        super().__init__(parent)

        self.config_manager = config_manager
        self.config_changed = False

        # Window setup
        self.title("Settings")
        width, height = WINDOW_SIZES["config_dialog"]
        self.geometry(f"{width}x{height}")
        self.resizable(False, False)

        self.transient(parent)
        self.grab_set()

        self._create_ui()

        self.focus_force()

    def _create_ui(self):
        """Create the dialog UI."""
        settings = self.config_manager.config.settings

        container = ctk.CTkFrame(self)
        container.pack(fill="both", expand=True, padx=PADDING["medium"], pady=PADDING["medium"])

        title = ctk.CTkLabel(container, text="Settings", font=FONTS["title"])
        title.pack(anchor="w", padx=PADDING["small"], pady=(PADDING["small"], 0))

        self.heuristics_var = self._create_option_row(
            container, "Finding the game folder:", HEURISTICS_LABELS, settings.heuristics
        )
        self.abandon_var = self._create_option_row(
            container, "When no folder is selected:", ABANDON_LABELS, settings.abandon_policy
        )
        self.write_mode_var = self._create_option_row(
            container, "Saving the settings file:", WRITE_MODE_LABELS, settings.write_mode
        )

        note = ctk.CTkLabel(
            container,
            text="Folder search settings take effect the next time the app starts.",
            font=FONTS["small"],
            text_color="gray",
        )
        note.pack(anchor="w", padx=PADDING["small"], pady=(PADDING["small"], 0))

        self._create_buttons(container)

    def _create_option_row(self, parent, label: str, labels: dict, current) -> ctk.StringVar:
        """Create a label and option menu for one enum setting."""
        row = ctk.CTkFrame(parent, fg_color="transparent")
        row.pack(fill="x", padx=PADDING["small"], pady=(PADDING["small"], 0))

        ctk.CTkLabel(row, text=label, font=FONTS["body"]).pack(anchor="w")

        var = ctk.StringVar(value=labels[current])
        menu = ctk.CTkOptionMenu(row, values=list(labels.values()), variable=var, width=280)
        menu.pack(anchor="w", pady=(2, 0))
        return var

    def _create_buttons(self, parent):
        """Create the dialog buttons."""
        button_frame = ctk.CTkFrame(parent, fg_color="transparent")
        button_frame.pack(side="bottom", fill="x", padx=PADDING["small"], pady=PADDING["small"])

        cancel_btn = ctk.CTkButton(
            button_frame,
            text="Cancel",
            width=100,
            fg_color="transparent",
            border_width=1,
            text_color=("gray10", "gray90"),
            command=self.destroy,
        )
        cancel_btn.pack(side="left")

        save_btn = ctk.CTkButton(
            button_frame,
            text="Save",
            width=120,
            command=self._save_and_close,
        )
        save_btn.pack(side="right")

    @staticmethod
    def _selected(var: ctk.StringVar, labels: dict):
        """Map the option menu text back to its enum member."""
        text = var.get()
        for member, member_label in labels.items():
            if member_label == text:
                return member
        raise ValueError(f"Unknown option: {text}")

    def _save_and_close(self):
        """Save configuration and close dialog."""
        settings = self.config_manager.config.settings
        settings.heuristics = self._selected(self.heuristics_var, HEURISTICS_LABELS)
        settings.abandon_policy = self._selected(self.abandon_var, ABANDON_LABELS)
        settings.write_mode = self._selected(self.write_mode_var, WRITE_MODE_LABELS)

        self.config_manager.save()

        self.config_changed = True
        self.destroy()
