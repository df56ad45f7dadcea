"""App context: resolved directories and layered property I/O."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Mapping

from ..adapters.properties_file import DEFAULT_HEADER, PropertiesFileStore
from .cleanup import delete_tree
from .errors import DirectoryMissing
from .ports import PropertyStore
from .tier import Tier

logger = logging.getLogger(__name__)


class AppContext:
    """The on-disk environment of a CLI app.

    - A home directory, by default ~/.{app}, shared by every working directory
    - A local directory, by default {cwd}/.{app}
    - A properties file in each
    - A merged view of both where local values override home values

    Instances are built by AppBuilder and never change afterwards. Property
    operations require the tier directory to exist; they never create it.
    """

    __slots__ = (
        "_app_name",
        "_dirs",
        "_files",
        "_stores",
    )

    def __init__(
        self,
        app_name: str,
        home_dir: Path,
        local_dir: Path,
        home_properties_file: Path,
        local_properties_file: Path,
        header: str = DEFAULT_HEADER,
    ):
        self._app_name = app_name
        self._dirs = {
            Tier.HOME: Path(home_dir).absolute(),
            Tier.LOCAL: Path(local_dir).absolute(),
        }
        self._files = {
            Tier.HOME: Path(home_properties_file).absolute(),
            Tier.LOCAL: Path(local_properties_file).absolute(),
        }
        self._stores: dict[Tier, PropertyStore] = {
            tier: PropertiesFileStore(path, header=header) for tier, path in self._files.items()
        }

    def __repr__(self) -> str:
        return (
            f"AppContext(app_name={self._app_name!r}, "
            f"home_dir={str(self.home_dir)!r}, local_dir={str(self.local_dir)!r})"
        )

    @property
    def app_name(self) -> str:
        return self._app_name

    @property
    def home_dir(self) -> Path:
        return self._dirs[Tier.HOME]

    @property
    def local_dir(self) -> Path:
        return self._dirs[Tier.LOCAL]

    @property
    def home_properties_file(self) -> Path:
        return self._files[Tier.HOME]

    @property
    def local_properties_file(self) -> Path:
        return self._files[Tier.LOCAL]

    def dir_for(self, tier: Tier) -> Path:
        return self._dirs[tier]

    def properties_file_for(self, tier: Tier) -> Path:
        return self._files[tier]

    def exists(self, tier: Tier) -> bool:
        return self._dirs[tier].is_dir()

    def load_properties(self, tier: Tier) -> dict[str, str]:
        """Load the properties of one tier.

        A missing properties file yields an empty dict.

        Raises:
            DirectoryMissing: The tier directory does not exist
            PropertyReadFailed: The file exists but cannot be read
        """
        self._require_dir(tier)
        return self._stores[tier].load()

    def save_properties(self, tier: Tier, props: Mapping[str, str]) -> None:
        """Overwrite the properties file of one tier with `props`.

        Raises:
            DirectoryMissing: The tier directory does not exist
            PropertyWriteFailed: The file cannot be written
        """
        self._require_dir(tier)
        self._stores[tier].save(props)
        logger.debug(f"Saved {len(props)} {tier.value} properties to {self._files[tier]}")

    def load_home_properties(self) -> dict[str, str]:
        return self.load_properties(Tier.HOME)

    def load_local_properties(self) -> dict[str, str]:
        return self.load_properties(Tier.LOCAL)

    def save_home_properties(self, props: Mapping[str, str]) -> None:
        self.save_properties(Tier.HOME, props)

    def save_local_properties(self, props: Mapping[str, str]) -> None:
        self.save_properties(Tier.LOCAL, props)

    def get_merged_properties(self) -> dict[str, str]:
        """Home properties overridden key by key by local properties.

        Both tier directories must exist. The result is never persisted.
        """
        merged = dict(self.load_home_properties())
        merged.update(self.load_local_properties())
        return merged

    def delete_app(self) -> list[Path]:
        """Delete the home and local directories with all their contents.

        Missing directories are skipped. Returns the removed paths.

        Raises:
            DeletionFailed: An entry could not be removed; earlier removals stay
        """
        logger.info(f"Deleting app directories: {self.home_dir} and {self.local_dir}")
        removed = delete_tree(self.home_dir)
        removed.extend(delete_tree(self.local_dir))
        return removed

    def _require_dir(self, tier: Tier) -> None:
        if not self._dirs[tier].is_dir():
            raise DirectoryMissing(tier, self._dirs[tier])
