"""Languages supported by the League of Legends client"""

from dataclasses import dataclass

from .errors import LanguageNotFoundError


@dataclass(frozen=True)
class Language:
    """A client language: the name shown to the user and the game locale tag"""
    display_name: str
    tag: str  # e.g. "en_US"


# Order is the order shown in the picker
LANGUAGES: tuple[Language, ...] = (
    Language("English (US)", "en_US"),
    Language("Português", "pt_BR"),
    Language("Türkçe", "tr_TR"),
    Language("English (GB)", "en_GB"),
    Language("Deutsch", "de_DE"),
    Language("Español (ES)", "es_ES"),
    Language("Français", "fr_FR"),
    Language("Italiano", "it_IT"),
    Language("Čeština", "cs_CZ"),
    Language("Ελληνικά", "el_GR"),
    Language("Magyar", "hu_HU"),
    Language("Polski", "pl_PL"),
    Language("Română", "ro_RO"),
    Language("Русский", "ru_RU"),
    Language("Español (MX)", "es_MX"),
    Language("English (AU)", "en_AU"),
    Language("日本語", "ja_JP"),
)


def find_language(tag: str) -> Language:
    """Look up a language by its locale tag.

    Args:
        tag: Locale tag such as "pt_BR"

    Returns:
        The matching Language

    Raises:
        LanguageNotFoundError: If no language has this tag
    """
    for language in LANGUAGES:
        if language.tag == tag:
            return language
    raise LanguageNotFoundError(tag)


def find_language_by_name(display_name: str) -> Language:
    """Look up a language by the name shown in the picker."""
    for language in LANGUAGES:
        if language.display_name == display_name:
            return language
    raise LanguageNotFoundError(display_name)
