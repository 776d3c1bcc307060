"""Default paths for the game installation and application files"""

import os
from pathlib import Path


class GamePaths:
    """Default paths for the game installation and application files.

    All paths use environment variable expansion for portability.
    """

    # Default install layout: <drive>\Riot Games\League of Legends
    VENDOR_FOLDER = "Riot Games"
    PRODUCT_FOLDER = "League of Legends"

    # Settings file, relative to the installation folder
    SETTINGS_FILE_NAME = "LeagueClientSettings.yaml"
    SETTINGS_RELATIVE = Path("Config") / SETTINGS_FILE_NAME

    # Desktop shortcut created by the installer
    SHORTCUT_NAME = f"{PRODUCT_FOLDER}.lnk"

    # Windows system directory, used to order drive candidates
    SYSTEM_DIR = Path(os.path.expandvars(r"%SystemRoot%\System32"))

    # Configuration file location
    CONFIG_DIR = Path(os.path.expandvars(r"%APPDATA%\LanguageChanger"))
    CONFIG_FILE = CONFIG_DIR / "configuration.xml"
    LOG_FILE = CONFIG_DIR / "language_changer.log"

    @classmethod
    def settings_path(cls, install_dir: Path) -> Path:
        """Full path of the settings file inside an installation folder.

        Args:
            install_dir: The installation folder

        Returns:
            Path to LeagueClientSettings.yaml
        """
        return Path(install_dir) / cls.SETTINGS_RELATIVE

    @classmethod
    def default_install_dir(cls, drive: Path) -> Path:
        """Default installation folder on a drive.

        Args:
            drive: Drive root, e.g. ``C:\\``

        Returns:
            Path to the League of Legends folder on that drive
        """
        return Path(drive) / cls.VENDOR_FOLDER / cls.PRODUCT_FOLDER

    @classmethod
    def ensure_config_dir(cls) -> Path:
        """Ensure the configuration directory exists.

        Returns:
            Path to the configuration directory
        """
        cls.CONFIG_DIR.mkdir(parents=True, exist_ok=True)
        return cls.CONFIG_DIR
