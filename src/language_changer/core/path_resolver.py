"""Locate the League of Legends installation folder"""

import sys
from pathlib import Path
from typing import Optional

from ..config.paths import GamePaths
from ..config.schema import AbandonPolicy
from ..logging_config import get_logger
from .context import AppContext
from .errors import DiscoveryAbandonedError

logger = get_logger("path_resolver")


class PathResolver:
    """Find the folder that contains Config/LeagueClientSettings.yaml.

    With heuristics enabled the resolver tries, in order:
        1. the target of the "League of Legends" desktop shortcut
        2. <drive>\\Riot Games\\League of Legends on every fixed drive,
           system drive first
        3. asking the user to pick the folder

    With heuristics disabled only step 3 runs. The result is stored on the
    context, so discovery and prompting happen at most once per run.
    """

    def __init__(self, context: AppContext):
        self.context = context

    def resolve(self) -> Path:
        """Return the installation folder, discovering it on first call.

        Returns:
            Path to the installation folder

        Raises:
            SystemExit: User gave up under AbandonPolicy.EXIT
            DiscoveryAbandonedError: User gave up under AbandonPolicy.RAISE
        """
        if self.context.install_dir is not None:
            return self.context.install_dir

        folder = None
        if self.context.settings.heuristics_enabled:
            folder = self._from_shortcut() or self._from_default_locations()
        if folder is None:
            folder = self._from_user_selection()

        logger.info(f"Using installation folder {folder}")
        self.context.install_dir = folder
        return folder

    def _has_settings_file(self, folder: Optional[Path]) -> bool:
        return self.context.probe.has_settings_file(folder)

    def _from_shortcut(self) -> Optional[Path]:
        """Use the folder the desktop shortcut points into."""
        probe = self.context.probe
        shortcut = probe.desktop_dir() / GamePaths.SHORTCUT_NAME
        if not shortcut.exists():
            logger.debug(f"No desktop shortcut at {shortcut}")
            return None

        target = probe.resolve_shortcut(shortcut)
        if target is None:
            logger.debug(f"Could not resolve shortcut {shortcut}")
            return None

        folder = target.parent
        if self._has_settings_file(folder):
            logger.debug(f"Found settings file via desktop shortcut in {folder}")
            return folder
        logger.debug(f"Shortcut target folder {folder} has no settings file")
        return None

    def candidate_folders(self) -> list[Path]:
        """Default install folders on fixed drives that contain the settings file.

        Returns:
            Candidates ordered with the system drive first, then by drive name
        """
        probe = self.context.probe
        system_dir = str(probe.system_dir()).upper()

        def sort_key(drive: Path):
            return (not system_dir.startswith(str(drive).upper()), str(drive).upper())

        drives = sorted(probe.fixed_drives(), key=sort_key)
        candidates = [GamePaths.default_install_dir(drive) for drive in drives]
        return [folder for folder in candidates if self._has_settings_file(folder)]

    def _from_default_locations(self) -> Optional[Path]:
        candidates = self.candidate_folders()
        if not candidates:
            logger.debug("No installation found at default locations")
            return None

        if len(candidates) == 1:
            return candidates[0]

        # Several installs found, let the user choose
        for folder in candidates:
            if self.context.prompter.confirm_install_folder(folder):
                return folder
        logger.debug("User rejected all default locations")
        return None

    def _from_user_selection(self) -> Path:
        """Ask for the folder until one with a settings file is picked."""
        prompter = self.context.prompter
        while True:
            selected = prompter.choose_folder()
            if selected is not None:
                if self._has_settings_file(selected):
                    return selected

                nested = selected / GamePaths.PRODUCT_FOLDER
                if self._has_settings_file(nested):
                    return nested
                logger.debug(f"No settings file in selected folder {selected}")

            if prompter.ask_retry_not_found():
                continue

            self._abandon()

    def _abandon(self) -> None:
        policy = self.context.settings.abandon_policy
        logger.info(f"Installation folder search abandoned (policy: {policy.value})")
        if policy is AbandonPolicy.EXIT:
            sys.exit(0)

        self.context.request_shutdown()
        raise DiscoveryAbandonedError("No installation folder selected")
