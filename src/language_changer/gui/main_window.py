"""Main application window with the language picker"""

from typing import Optional

import customtkinter as ctk

from .. import __app_name__, __version__
from ..config.manager import ConfigurationManager
from ..core.context import AppContext
from ..core.errors import LanguageChangerError
from ..core.languages import LANGUAGES, Language, find_language_by_name
from ..core.path_resolver import PathResolver
from ..core.settings_accessor import SettingsAccessor
from ..logging_config import get_logger
from .config_dialog import ConfigDialog
from .dialogs import TkPrompter, show_error, show_language_changed
from .styles import COLORS, FONTS, PADDING, WINDOW_SIZES

logger = get_logger("main_window")

UNKNOWN_LANGUAGE = "Unknown"


class MainWindow(ctk.CTk):
    """Main application window.

    The window stays hidden while the installation folder is being located,
    so discovery prompts appear on their own. It is shown once the settings
    file has been read.
    """

    def __init__(self, config_manager: ConfigurationManager):
        super().__init__()

        self.config_manager = config_manager
        self.context = AppContext(
            prompter=TkPrompter(self),
            settings=config_manager.config.settings,
            request_shutdown=self.destroy,
        )
        self.resolver = PathResolver(self.context)
        self.accessor = SettingsAccessor(self.context, self.resolver)

        # Window setup
        self.title(f"{__app_name__} v{__version__}")
        width, height = WINDOW_SIZES["main"]
        self.geometry(f"{width}x{height}")
        self.resizable(False, False)
        self.withdraw()

    def load(self):
        """Locate and read the settings file, then show the window.

        Raises:
            SystemExit: User gave up looking for the installation folder
            DiscoveryAbandonedError: Same, under the "raise" abandon policy
            OSError: Settings file could not be read
            LanguageNotFoundError: Settings file has an unsupported locale
        """
        current = self.accessor.current_language

        self._create_ui()
        self._show_language(current)
        self._set_status(str(self.accessor.settings_path))

        self._center_on_screen()
        self.deiconify()

    def _create_ui(self):
        container = ctk.CTkFrame(self)
        container.pack(fill="both", expand=True, padx=PADDING["medium"], pady=PADDING["medium"])

        # Header: title and settings button
        header = ctk.CTkFrame(container, fg_color="transparent")
        header.pack(fill="x", padx=PADDING["small"], pady=(PADDING["small"], 0))

        title = ctk.CTkLabel(header, text="Client Language", font=FONTS["title"])
        title.pack(side="left")

        self.settings_btn = ctk.CTkButton(
            header, text="⚙", width=36, height=36,
            font=("Segoe UI", 18),
            fg_color="transparent", hover_color=("gray80", "gray30"),
            command=self._open_settings,
        )
        self.settings_btn.pack(side="right")

        # Current language
        current_frame = ctk.CTkFrame(container, fg_color="transparent")
        current_frame.pack(fill="x", padx=PADDING["small"], pady=PADDING["small"])

        ctk.CTkLabel(current_frame, text="Current:", font=FONTS["body"]).pack(side="left")
        self.current_label = ctk.CTkLabel(current_frame, text="", font=FONTS["heading"])
        self.current_label.pack(side="left", padx=(PADDING["small"], 0))

        # Picker and save button
        picker_frame = ctk.CTkFrame(container, fg_color="transparent")
        picker_frame.pack(fill="x", padx=PADDING["small"], pady=PADDING["small"])

        self.language_var = ctk.StringVar(value=LANGUAGES[0].display_name)
        self.language_menu = ctk.CTkOptionMenu(
            picker_frame,
            values=[language.display_name for language in LANGUAGES],
            variable=self.language_var,
            width=200,
            font=FONTS["body"],
        )
        self.language_menu.pack(side="left")

        self.save_btn = ctk.CTkButton(
            picker_frame,
            text="Save",
            width=100,
            fg_color=COLORS["primary"],
            hover_color=COLORS["primary_hover"],
            command=self._on_save,
        )
        self.save_btn.pack(side="right")

        # Status bar with the settings file path
        self.status_label = ctk.CTkLabel(
            container, text="", font=FONTS["small"], text_color=COLORS["muted"],
            wraplength=WINDOW_SIZES["main"][0] - 2 * PADDING["large"], justify="left",
        )
        self.status_label.pack(side="bottom", anchor="w", padx=PADDING["small"], pady=(0, PADDING["small"]))

    def _show_language(self, language: Optional[Language]):
        """Reflect the language from the settings file in the UI."""
        if language is None:
            self.current_label.configure(text=UNKNOWN_LANGUAGE, text_color=COLORS["warning"])
            # Nothing to replace in a file without a locale field
            self.save_btn.configure(state="disabled")
            return

        self.current_label.configure(text=language.display_name, text_color=COLORS["success"])
        self.language_var.set(language.display_name)
        self.save_btn.configure(state="normal")

    def _on_save(self):
        selected = find_language_by_name(self.language_var.get())
        try:
            change = self.accessor.apply_language(selected)
        except (OSError, LanguageChangerError) as e:
            logger.exception("Failed to change language")
            show_error(self, "Error", f"Could not change the language:\n\n{e}")
            # Re-read the file on the next attempt
            self.accessor.reload()
            return

        self._show_language(change.new)
        old_name = change.old.display_name if change.old else UNKNOWN_LANGUAGE
        new_name = change.new.display_name if change.new else UNKNOWN_LANGUAGE
        show_language_changed(self, old_name, new_name)

    def _open_settings(self):
        """Open the settings dialog."""
        dialog = ConfigDialog(self, self.config_manager)
        self.wait_window(dialog)

        if dialog.config_changed:
            self._set_status("Configuration updated")

    def _set_status(self, message: str):
        """Update the status bar message."""
        self.status_label.configure(text=message)

    def _center_on_screen(self):
        self.update_idletasks()
        width, height = WINDOW_SIZES["main"]
        x = (self.winfo_screenwidth() - width) // 2
        y = (self.winfo_screenheight() - height) // 2
        self.geometry(f"{width}x{height}+{x}+{y}")
