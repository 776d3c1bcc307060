"""Access to the parts of the operating system used for install discovery.

SystemProbe wraps the desktop folder, the fixed drive list, the system
directory and Windows shortcut resolution. Non-Windows platforms have no
fixed drives or shortcuts, so discovery goes straight to the folder picker.
"""

import os
import string
import sys
from pathlib import Path
from typing import Optional

from ..config.paths import GamePaths
from ..logging_config import get_logger

logger = get_logger("system_probe")

# GetDriveTypeW return value for hard disks
DRIVE_FIXED = 3


class SystemProbe:
    """Filesystem and OS queries used by the PathResolver."""

    def desktop_dir(self) -> Path:
        """The user's desktop folder, following redirection (e.g. OneDrive).

        Returns:
            The folder reported by the Windows shell, or ~/Desktop if it is
            unavailable
        """
        fallback = Path.home() / "Desktop"
        shell = self._wscript_shell()
        if shell is None:
            return fallback

        try:
            desktop = shell.SpecialFolders("Desktop")
        except self._com_errors() as e:
            logger.warning(f"Could not query desktop folder: {e}")
            return fallback
        return Path(desktop) if desktop else fallback

    def system_dir(self) -> Path:
        return GamePaths.SYSTEM_DIR

    def fixed_drives(self) -> list[Path]:
        """List the roots of all fixed (non-removable) local drives.

        Returns:
            Drive roots such as ``C:\\``, in drive letter order. Empty on
            platforms without drive letters.
        """
        if sys.platform != "win32":
            return []

        import ctypes

        kernel32 = ctypes.windll.kernel32
        bitmask = kernel32.GetLogicalDrives()
        drives = []
        for index, letter in enumerate(string.ascii_uppercase):
            if not bitmask & (1 << index):
                continue
            root = f"{letter}:\\"
            if kernel32.GetDriveTypeW(root) == DRIVE_FIXED:
                drives.append(Path(root))
        logger.debug(f"Fixed drives: {[str(d) for d in drives]}")
        return drives

    def resolve_shortcut(self, shortcut: Path) -> Optional[Path]:
        """Resolve the target of a Windows .lnk shortcut.

        Args:
            shortcut: Path to the .lnk file

        Returns:
            The target path, or None if it cannot be resolved
        """
        shell = self._wscript_shell()
        if shell is None:
            return None

        try:
            target = shell.CreateShortcut(str(shortcut)).TargetPath
        except self._com_errors() as e:
            logger.warning(f"Could not read shortcut {shortcut}: {e}")
            return None
        return Path(target) if target else None

    def _wscript_shell(self):
        """The WScript.Shell COM object, or None off Windows or without pywin32."""
        if sys.platform != "win32":
            return None

        try:
            import win32com.client  # type: ignore
        except ImportError:
            logger.warning("pywin32 not installed - cannot query the Windows shell")
            return None

        try:
            return win32com.client.Dispatch("WScript.Shell")
        except self._com_errors() as e:
            logger.warning(f"WScript.Shell unavailable: {e}")
            return None

    def _com_errors(self) -> tuple[type[BaseException], ...]:
        import pywintypes  # type: ignore

        return (pywintypes.com_error,)

    def has_settings_file(self, folder: Optional[Path]) -> bool:
        """Check whether a folder contains a readable settings file.

        Args:
            folder: Candidate installation folder, may be None or empty

        Returns:
            True if <folder>/Config/LeagueClientSettings.yaml exists and is readable
        """
        if folder is None or not str(folder).strip():
            return False
        settings_path = GamePaths.settings_path(folder)
        return settings_path.is_file() and os.access(settings_path, os.R_OK)
