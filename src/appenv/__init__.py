"""appenv - Home and local directories with layered properties for CLI apps"""

__version__ = "1.0.0"
__description__ = "Home and local directories with layered properties for CLI apps"

__all__ = ["AppBuilder", "AppContext", "Tier", "escape_name", "main", "__version__"]


def __getattr__(name: str):
    """Lazy import so that `import appenv` does not read .env files.

    The config module calls load_dotenv() at import time, which only the
    CLI and the builder defaults need.
    """
    if name == "AppBuilder":
        from .core.builder import AppBuilder

        return AppBuilder
    if name == "AppContext":
        from .core.context import AppContext

        return AppContext
    if name == "Tier":
        from .core.tier import Tier

        return Tier
    if name == "escape_name":
        from .naming import escape_name

        return escape_name
    if name == "main":
        from .main import main

        return main
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
