"""Read and rewrite the locale field of LeagueClientSettings.yaml.

The settings file is treated as opaque text. Only the value inside
``locale: "xx_XX"`` is ever changed; every other byte is written back as read.
"""

import contextlib
import os
import re
import tempfile
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from ..config.paths import GamePaths
from ..config.schema import WriteMode
from ..logging_config import get_logger
from .context import AppContext
from .errors import LocaleFieldNotFoundError
from .languages import Language, find_language
from .path_resolver import PathResolver

logger = get_logger("settings_accessor")

# Undecodable bytes map to lone surrogates and are encoded back unchanged
FILE_ENCODING = "utf-8"
FILE_ERRORS = "surrogateescape"

LOCALE_PATTERN = re.compile(r'locale: "([a-z]{2}_[A-Z]{2})"')

_UNSET = object()


@dataclass(frozen=True)
class LanguageChange:
    """Result of a save: the language before and after"""
    old: Optional[Language]
    new: Optional[Language]


class SettingsAccessor:
    """Loads the settings document and reads/writes its locale field."""

    def __init__(self, context: AppContext, resolver: PathResolver):
        self.context = context
        self.resolver = resolver
        self._current_language = _UNSET

    @property
    def settings_path(self) -> Path:
        return GamePaths.settings_path(self.resolver.resolve())

    @property
    def document(self) -> str:
        """Full text of the settings file, read on first access.

        Raises:
            OSError: If the file cannot be read
        """
        if self.context.document is None:
            path = self.settings_path
            logger.debug(f"Loading settings from {path}")
            # newline="" keeps \r\n intact so untouched lines are written back unchanged
            with open(path, "r", encoding=FILE_ENCODING, errors=FILE_ERRORS, newline="") as f:
                self.context.document = f.read()
        return self.context.document

    @property
    def current_language(self) -> Optional[Language]:
        """Language configured in the document, None if it has no locale field."""
        if self._current_language is _UNSET:
            self._current_language = self.extract_language()
        return self._current_language

    def extract_language(self) -> Optional[Language]:
        """Find the configured language in the document.

        Returns:
            The configured Language, or None if the document has no locale field

        Raises:
            LanguageNotFoundError: If the locale tag is not in the catalog
        """
        match = LOCALE_PATTERN.search(self.document)
        if match is None:
            logger.info("No locale field in settings file")
            return None

        language = find_language(match.group(1))
        logger.debug(f"Settings language is {language.tag}")
        return language

    def apply_language(self, language: Language) -> LanguageChange:
        """Write a new language into the settings file.

        Only the tag inside the first locale field is replaced. The whole
        document is then written back and the current language is read
        again from the new text.

        Args:
            language: The language to switch to

        Returns:
            LanguageChange with the previous and the re-read language

        Raises:
            LocaleFieldNotFoundError: If the document has no locale field
            OSError: If the file cannot be written
        """
        old = self.current_language
        document = self.document
        match = LOCALE_PATTERN.search(document)
        if match is None:
            raise LocaleFieldNotFoundError(self.settings_path)

        updated = document[:match.start(1)] + language.tag + document[match.end(1):]
        self._write(updated)

        self.context.document = updated
        self._current_language = self.extract_language()
        logger.info(
            f"Language changed from {old.tag if old else 'unknown'} "
            f"to {self._current_language.tag if self._current_language else 'unknown'}"
        )
        return LanguageChange(old=old, new=self._current_language)

    def reload(self) -> None:
        """Forget the loaded document so the next access reads the file again."""
        self.context.document = None
        self._current_language = _UNSET

    def _write(self, text: str) -> None:
        path = self.settings_path
        if self.context.settings.write_mode is WriteMode.ATOMIC:
            self._write_atomic(path, text)
        else:
            logger.debug(f"Overwriting {path}")
            with open(path, "w", encoding=FILE_ENCODING, errors=FILE_ERRORS, newline="") as f:
                f.write(text)

    @staticmethod
    def _write_atomic(path: Path, text: str) -> None:
        """Write to a temp file next to the target, sync to disk, then replace."""
        logger.debug(f"Atomically replacing {path}")
        tmp = tempfile.NamedTemporaryFile(
            mode="w", encoding=FILE_ENCODING, errors=FILE_ERRORS, newline="",
            dir=path.parent, prefix=f".{path.name}.", suffix=".tmp", delete=False,
        )
        try:
            with tmp:
                tmp.write(text)
                tmp.flush()
                os.fsync(tmp.fileno())
            os.replace(tmp.name, path)
        except BaseException:
            # Never leave the temp file behind in the game's Config folder
            with contextlib.suppress(OSError):
                os.unlink(tmp.name)
            raise
