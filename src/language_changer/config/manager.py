"""Configuration management - load/save XML configuration"""

import xml.etree.ElementTree as ET
from enum import Enum
from pathlib import Path
from typing import Optional, TypeVar
from xml.dom import minidom

from .paths import GamePaths
from .schema import AbandonPolicy, AppConfiguration, HeuristicsMode, Settings, WriteMode
from ..logging_config import get_logger

logger = get_logger("config_manager")

E = TypeVar("E", bound=Enum)


class ConfigurationManager:
    """Manages application configuration persistence.

    Handles loading and saving configuration to XML format. A missing or
    unreadable file yields the default configuration.
    """

    def __init__(self, config_path: Optional[Path] = None):
        self.config_path = config_path or GamePaths.CONFIG_FILE
        self.config: Optional[AppConfiguration] = None

    def load_or_default(self) -> AppConfiguration:
        """Load the configuration, falling back to defaults.

        Returns:
            The loaded configuration, or a default one if the file is
            missing or corrupted
        """
        if not self.config_path.exists():
            logger.info(f"No configuration at {self.config_path}, using defaults")
            return self.create_default()

        try:
            return self.load()
        except (ET.ParseError, OSError) as e:
            # Corrupted config = start from defaults
            logger.warning(f"Could not load config, using defaults: {e}")
            return self.create_default()

    def load(self) -> AppConfiguration:
        """Load configuration from XML file.

        Returns:
            AppConfiguration object with loaded settings

        Raises:
            FileNotFoundError: If config file doesn't exist
            ET.ParseError: If XML is malformed
        """
        logger.debug(f"Loading configuration from {self.config_path}")
        tree = ET.parse(self.config_path)
        root = tree.getroot()

        defaults = Settings()
        settings_elem = root.find("Settings")

        if settings_elem is not None:
            settings = Settings(
                heuristics=self._parse_enum(settings_elem, "Heuristics", defaults.heuristics),
                abandon_policy=self._parse_enum(settings_elem, "AbandonPolicy", defaults.abandon_policy),
                write_mode=self._parse_enum(settings_elem, "WriteMode", defaults.write_mode),
            )
        else:
            # Missing Settings element - use all defaults
            settings = defaults

        self.config = AppConfiguration(settings=settings)
        logger.debug(
            f"Configuration loaded: heuristics={settings.heuristics.value}, "
            f"abandon_policy={settings.abandon_policy.value}, write_mode={settings.write_mode.value}"
        )
        return self.config

    def save(self) -> None:
        """Save current configuration to XML file.

        Creates the configuration directory if it doesn't exist.
        """
        if self.config is None:
            raise ValueError("No configuration to save")

        logger.debug(f"Saving configuration to {self.config_path}")

        self.config_path.parent.mkdir(parents=True, exist_ok=True)

        root = ET.Element("LanguageChanger", version="1.0")

        settings = self.config.settings
        settings_elem = ET.SubElement(root, "Settings")
        ET.SubElement(settings_elem, "Heuristics").text = settings.heuristics.value
        ET.SubElement(settings_elem, "AbandonPolicy").text = settings.abandon_policy.value
        ET.SubElement(settings_elem, "WriteMode").text = settings.write_mode.value

        # Write pretty-printed XML
        xml_str = minidom.parseString(ET.tostring(root, encoding="unicode")).toprettyxml(indent="  ")
        # Remove extra blank lines that minidom adds
        lines = [line for line in xml_str.split('\n') if line.strip()]
        xml_str = '\n'.join(lines)

        self.config_path.write_text(xml_str, encoding="utf-8")

    def create_default(self) -> AppConfiguration:
        """Create a default configuration.

        Returns:
            New AppConfiguration with default values
        """
        self.config = AppConfiguration(settings=Settings())
        return self.config

    # Helper methods for XML parsing
    @staticmethod
    def _get_text(parent: ET.Element, tag: str, default: str = "") -> str:
        """Get text content of a child element."""
        elem = parent.find(tag)
        return elem.text.strip() if elem is not None and elem.text else default

    @classmethod
    def _parse_enum(cls, parent: ET.Element, tag: str, default: E) -> E:
        """Parse an enum value from child element, keeping the default if unknown."""
        text = cls._get_text(parent, tag)
        if not text:
            return default
        try:
            return type(default)(text.lower())
        except ValueError:
            logger.warning(f"Unknown value '{text}' for {tag}, using '{default.value}'")
            return default
