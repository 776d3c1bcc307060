"""Long-lived application state shared by the core components"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Optional

from ..config.schema import Settings
from .prompts import Prompter
from .system_probe import SystemProbe


def _no_shutdown() -> None:
    pass


@dataclass
class AppContext:
    """State for one run of the application.

    The install folder and the settings document are filled in lazily by
    PathResolver and SettingsAccessor and are kept for the rest of the run.
    """
    prompter: Prompter
    settings: Settings = field(default_factory=Settings)
    probe: SystemProbe = field(default_factory=SystemProbe)
    # Called before DiscoveryAbandonedError is raised (AbandonPolicy.RAISE)
    request_shutdown: Callable[[], None] = _no_shutdown

    install_dir: Optional[Path] = None
    document: Optional[str] = None
