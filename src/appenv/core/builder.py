"""Fluent builder for AppContext."""

from __future__ import annotations

import logging
import os
from dataclasses import replace
from pathlib import Path

from .. import platform_utils
from ..naming import escape_name
from .config_model import DEFAULT_APP_NAME, PROPERTIES_SUFFIX, BuilderConfig
from .context import AppContext
from .errors import DirectoryCreationFailed
from .tier import Tier

logger = logging.getLogger(__name__)

PathLike = str | os.PathLike


class AppBuilder:
    """Collects options for an AppContext; build() is terminal.

    Usage:
        app = (
            AppBuilder()
            .app_name("cli-power-tools")
            .with_home_directory()
            .with_local_directory()
            .build()
        )
        app.save_home_properties({"editor": "vim"})
        print(app.get_merged_properties())
    """

    def __init__(self, config: BuilderConfig | None = None):
        self._config = replace(config) if config is not None else BuilderConfig()
        self._built = False

    @classmethod
    def from_config(cls, config: BuilderConfig) -> "AppBuilder":
        return cls(config)

    @property
    def config(self) -> BuilderConfig:
        return self._config

    def app_name(self, name: str) -> "AppBuilder":
        self._config.app_name = name
        return self

    def home_dir(self, path: PathLike) -> "AppBuilder":
        self._config.home_dir_override = Path(path)
        return self

    def local_dir(self, path: PathLike) -> "AppBuilder":
        self._config.local_dir_override = Path(path)
        return self

    def home_properties_file_name(self, file_name: str) -> "AppBuilder":
        self._config.home_properties_file_name = file_name
        return self

    def local_properties_file_name(self, file_name: str) -> "AppBuilder":
        self._config.local_properties_file_name = file_name
        return self

    def with_home_directory(self) -> "AppBuilder":
        """Create the home directory when building."""
        self._config.create_home_dir = True
        return self

    def with_local_directory(self) -> "AppBuilder":
        """Create the local directory when building."""
        self._config.create_local_dir = True
        return self

    def with_working_directory(self, path: PathLike) -> "AppBuilder":
        """Derive the default local directory from `path` instead of the cwd."""
        self._config.working_dir = Path(path)
        return self

    def with_user_home(self, path: PathLike) -> "AppBuilder":
        """Derive the default home directory from `path` instead of the user home."""
        self._config.user_home = Path(path)
        return self

    def build(self) -> AppContext:
        """Resolve all paths, create requested directories and return the context.

        Raises:
            RuntimeError: build() was already called on this builder
            ValueError: The app name cannot be turned into a directory name
            DirectoryCreationFailed: A requested directory could not be created
        """
        if self._built:
            raise RuntimeError("build() has already been called on this builder")

        cfg = self._config
        app_name = cfg.app_name if cfg.app_name is not None else DEFAULT_APP_NAME
        safe_name = escape_name(app_name)
        dir_name = "." + safe_name
        if dir_name in (".", ".."):
            raise ValueError(f"App name {app_name!r} does not yield a usable directory name")
        default_file_name = safe_name + PROPERTIES_SUFFIX
        home_file_name = _file_name(cfg.home_properties_file_name, default_file_name)
        local_file_name = _file_name(cfg.local_properties_file_name, default_file_name)
        self._built = True

        working = Path(cfg.working_dir) if cfg.working_dir is not None else platform_utils.working_dir()
        working = working.absolute()
        user_home = Path(cfg.user_home) if cfg.user_home is not None else platform_utils.user_home_dir()
        user_home = user_home.absolute()

        if cfg.home_dir_override is not None:
            home_dir = _anchor(cfg.home_dir_override, working)
        else:
            home_dir = user_home / dir_name
        if cfg.local_dir_override is not None:
            local_dir = _anchor(cfg.local_dir_override, working)
        else:
            local_dir = working / dir_name

        home_file = home_dir / home_file_name
        local_file = local_dir / local_file_name

        app = AppContext(
            app_name,
            home_dir,
            local_dir,
            home_file,
            local_file,
            header=cfg.properties_header,
        )

        if cfg.create_home_dir:
            _create_dir(Tier.HOME, app.home_dir)
        if cfg.create_local_dir:
            _create_dir(Tier.LOCAL, app.local_dir)

        return app


def _file_name(explicit: str | None, default: str) -> str:
    if explicit is None:
        return default
    if explicit in ("", ".", ".."):
        raise ValueError(f"Properties file name {explicit!r} does not name a file")
    return explicit


def _anchor(path: Path, working: Path) -> Path:
    path = Path(path).expanduser()
    return path if path.is_absolute() else working / path


def _create_dir(tier: Tier, path: Path) -> None:
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        logger.warning(f"Could not create {tier.value} directory {path}: {e}")
        raise DirectoryCreationFailed(tier, path) from e
    logger.info(f"Using {tier.value} directory {path}")
