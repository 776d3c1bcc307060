"""GUI module using CustomTkinter for a modern interface.

Components:
    MainWindow: Language picker showing the current client language
    ConfigDialog: Settings dialog for folder discovery and save behaviour

Submodules:
    dialogs: TkPrompter and message boxes built on tkinter
    styles: Theme constants (colors, fonts, padding, window sizes)
"""

from .main_window import MainWindow
from .config_dialog import ConfigDialog

__all__ = [
    "MainWindow",
    "ConfigDialog",
]
