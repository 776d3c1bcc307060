"""Exceptions raised by the core"""


class LanguageChangerError(Exception):
    """Base class for all application errors"""


class LanguageNotFoundError(LanguageChangerError, LookupError):
    """A locale tag or display name has no entry in the language catalog"""

    def __init__(self, key: str):
        super().__init__(f"Unsupported language: {key}")
        self.key = key


class LocaleFieldNotFoundError(LanguageChangerError):
    """The settings file has no locale field to rewrite"""

    def __init__(self, path):
        super().__init__(f"No locale field found in {path}")
        self.path = path


class DiscoveryAbandonedError(LanguageChangerError):
    """The user stopped looking for the installation folder"""
