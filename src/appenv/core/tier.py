"""Storage tiers of an app environment."""

from __future__ import annotations

from enum import Enum


class Tier(Enum):
    HOME = "home"  # Per user, shared across working directories
    LOCAL = "local"  # Per working directory

    @property
    def label(self) -> str:
        return self.value.capitalize()

    @classmethod
    def parse(cls, value: str) -> "Tier":
        try:
            return cls(value.lower())
        except ValueError:
            raise ValueError(f"Unknown tier: {value!r} (expected 'home' or 'local')") from None
