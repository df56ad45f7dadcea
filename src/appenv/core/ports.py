"""Core ports (interfaces) for appenv.

The context talks to property storage only through this protocol, so the
file format lives in an adapter.
"""

from __future__ import annotations

from typing import Mapping, Protocol, runtime_checkable


@runtime_checkable
class PropertyStore(Protocol):
    """Flat string-to-string storage bound to one location."""

    def load(self) -> dict[str, str]:
        """Return stored properties; empty when nothing was stored yet."""

    def save(self, props: Mapping[str, str]) -> None:
        """Replace the stored properties with `props`."""
