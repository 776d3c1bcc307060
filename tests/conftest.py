from __future__ import annotations

from pathlib import Path
from typing import Optional
import sys

import pytest

ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT / "src"))

from language_changer.config.paths import GamePaths  # noqa: E402
from language_changer.core.system_probe import SystemProbe  # noqa: E402


class FakeProbe(SystemProbe):
    """SystemProbe with drives, desktop and shortcuts under a temp directory."""

    def __init__(self, root: Path, drives: list[Path] | None = None, system_drive: Path | None = None):
        self.root = root
        self.drives = drives or []
        self.system_drive = system_drive
        self.shortcut_targets: dict[Path, Path] = {}

    def desktop_dir(self) -> Path:
        return self.root / "Desktop"

    def system_dir(self) -> Path:
        base = self.system_drive or (self.root / "nowhere")
        return base / "Windows" / "System32"

    def fixed_drives(self) -> list[Path]:
        return list(self.drives)

    def resolve_shortcut(self, shortcut: Path) -> Optional[Path]:
        return self.shortcut_targets.get(shortcut)


class FakePrompter:
    """Scripted answers; records every prompt it receives."""

    def __init__(self, confirms=(), folders=(), retries=()):
        self.confirms = list(confirms)
        self.folders = list(folders)
        self.retries = list(retries)
        self.calls: list[tuple] = []

    def confirm_install_folder(self, folder: Path) -> bool:
        self.calls.append(("confirm", folder))
        return self.confirms.pop(0)

    def choose_folder(self) -> Optional[Path]:
        self.calls.append(("choose",))
        return self.folders.pop(0)

    def ask_retry_not_found(self) -> bool:
        self.calls.append(("retry",))
        return self.retries.pop(0)


def make_install(folder: Path, content: str = 'locale: "en_US"\n') -> Path:
    """Create <folder>/Config/LeagueClientSettings.yaml and return its path."""
    settings_path = GamePaths.settings_path(folder)
    settings_path.parent.mkdir(parents=True, exist_ok=True)
    settings_path.write_bytes(content.encode("utf-8"))
    return settings_path


@pytest.fixture
def fake_probe(tmp_path: Path) -> FakeProbe:
    return FakeProbe(tmp_path)
