"""Filesystem-safe names for app directories and files."""

import re

_UNSAFE = re.compile(r"[^A-Za-z0-9.\-]")


def escape_name(name: str) -> str:
    """Replace every character that is not a letter, digit, dot or dash with `_`.

    The result has the same length as the input and is safe to use as a single
    path segment.
    """
    return _UNSAFE.sub("_", name)
