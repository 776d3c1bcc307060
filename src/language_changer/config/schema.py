"""Configuration data models"""

from dataclasses import dataclass, field
from enum import Enum


class HeuristicsMode(Enum):
    """Whether automatic install discovery runs before the folder picker"""
    ENABLED = "enabled"
    DISABLED = "disabled"


class AbandonPolicy(Enum):
    """What happens when the user gives up looking for the install folder"""
    EXIT = "exit"    # Terminate the process with exit code 0
    RAISE = "raise"  # Signal shutdown, then raise DiscoveryAbandonedError


class WriteMode(Enum):
    """How the settings file is written back"""
    OVERWRITE = "overwrite"  # Truncate and rewrite in place
    ATOMIC = "atomic"        # Write a temp file next to it, then replace


@dataclass
class Settings:
    """Application settings"""
    heuristics: HeuristicsMode = HeuristicsMode.ENABLED
    abandon_policy: AbandonPolicy = AbandonPolicy.EXIT
    write_mode: WriteMode = WriteMode.OVERWRITE

    @property
    def heuristics_enabled(self) -> bool:
        return self.heuristics is HeuristicsMode.ENABLED


@dataclass
class AppConfiguration:
    """Complete application configuration"""
    settings: Settings = field(default_factory=Settings)
