"""Platform detection and environment lookups for appenv"""

import platform
import sys
from pathlib import Path

# Platform detection
IS_WINDOWS = sys.platform == "win32"
IS_LINUX = sys.platform.startswith("linux")
IS_MACOS = sys.platform == "darwin"


def user_home_dir() -> Path:
    """The current user's home directory."""
    return Path.home()


def working_dir() -> Path:
    """The process working directory."""
    return Path.cwd()


def get_platform_info() -> dict:
    """Get detailed platform information."""
    return {
        "system": platform.system(),
        "release": platform.release(),
        "python_version": platform.python_version(),
        "is_windows": IS_WINDOWS,
        "is_linux": IS_LINUX,
        "is_macos": IS_MACOS,
        "user_home": str(user_home_dir()),
        "working_dir": str(working_dir()),
    }


def print_platform_info():
    """Print platform information for debugging."""
    info = get_platform_info()
    print(f"Platform: {info['system']} {info['release']}")
    print(f"Python: {info['python_version']}")
    print(f"User home: {info['user_home']}")
    print(f"Working directory: {info['working_dir']}")
