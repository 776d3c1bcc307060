"""Configuration management module.

This module provides configuration storage, loading, and data models for the application.

Submodules:
    manager: ConfigurationManager for loading/saving XML configuration
    schema: Data classes and enums defining configuration structure
    paths: GamePaths with the default install layout and config file locations

The configuration is stored as XML in %APPDATA%/LanguageChanger/configuration.xml.
"""

from .manager import ConfigurationManager
from .schema import AbandonPolicy, AppConfiguration, HeuristicsMode, Settings, WriteMode
from .paths import GamePaths

__all__ = [
    "ConfigurationManager",
    "AbandonPolicy",
    "AppConfiguration",
    "HeuristicsMode",
    "Settings",
    "WriteMode",
    "GamePaths",
]
