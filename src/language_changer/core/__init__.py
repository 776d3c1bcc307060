"""Core business logic module.

This module contains the install discovery and settings file logic. It has
no GUI dependency: prompts go through the Prompter protocol.

Submodules:
    languages: LANGUAGES catalog and tag/name lookups
    system_probe: SystemProbe for drives, desktop shortcut and file checks
    prompts: Prompter protocol implemented by the GUI
    context: AppContext holding the state of one run
    path_resolver: PathResolver for finding the installation folder
    settings_accessor: SettingsAccessor for reading/rewriting the locale field
    errors: Exception hierarchy
"""

from .context import AppContext
from .errors import (
    DiscoveryAbandonedError,
    LanguageChangerError,
    LanguageNotFoundError,
    LocaleFieldNotFoundError,
)
from .languages import LANGUAGES, Language, find_language, find_language_by_name
from .path_resolver import PathResolver
from .settings_accessor import LanguageChange, SettingsAccessor
from .system_probe import SystemProbe

__all__ = [
    "AppContext",
    "DiscoveryAbandonedError",
    "LanguageChangerError",
    "LanguageNotFoundError",
    "LocaleFieldNotFoundError",
    "LANGUAGES",
    "Language",
    "find_language",
    "find_language_by_name",
    "PathResolver",
    "LanguageChange",
    "SettingsAccessor",
    "SystemProbe",
]
