"""Builder configuration model (structured view)."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

DEFAULT_APP_NAME = "app"
PROPERTIES_SUFFIX = ".properties"


@dataclass
class BuilderConfig:
    """Options accumulated by AppBuilder and consumed once by build().

    Attributes:
        app_name: Name of the app; "app" when unset
        home_dir_override: Explicit home directory instead of ~/.{app}
        local_dir_override: Explicit local directory instead of {cwd}/.{app}
        working_dir: Base for the default local directory; process cwd when unset
        user_home: Base for the default home directory; user home when unset
        home_properties_file_name: Defaults to {app}.properties
        local_properties_file_name: Defaults to {app}.properties
        create_home_dir: Create the home directory during build()
        create_local_dir: Create the local directory during build()
        properties_header: Comment line written at the top of properties files
    """

    app_name: str | None = None
    home_dir_override: Path | None = None
    local_dir_override: Path | None = None
    working_dir: Path | None = None
    user_home: Path | None = None
    home_properties_file_name: str | None = None
    local_properties_file_name: str | None = None
    create_home_dir: bool = False
    create_local_dir: bool = False
    properties_header: str = "App properties"
