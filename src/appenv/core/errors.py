"""Error taxonomy for appenv.

Every failure surfaces synchronously as one of these exceptions. The
underlying OSError, when there is one, is chained as ``__cause__``.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .tier import Tier


class AppEnvError(Exception):
    """Base class for all appenv errors."""


class DirectoryMissing(AppEnvError):
    """A tier directory required by an operation does not exist."""

    def __init__(self, tier: Tier, path: Path):
        super().__init__(f"{tier.label} directory does not exist: {path}")
        self.tier = tier
        self.path = path


class DirectoryCreationFailed(AppEnvError):
    """The builder could not create a requested tier directory."""

    def __init__(self, tier: Tier, path: Path):
        super().__init__(f"Failed to create {tier.value} directory: {path}")
        self.tier = tier
        self.path = path


class PropertyReadFailed(AppEnvError):
    def __init__(self, path: Path):
        super().__init__(f"Failed to load properties from {path}")
        self.path = path


class PropertyWriteFailed(AppEnvError):
    def __init__(self, path: Path):
        super().__init__(f"Failed to save properties to {path}")
        self.path = path


class DeletionFailed(AppEnvError):
    def __init__(self, path: Path):
        super().__init__(f"Failed to delete {path}")
        self.path = path
