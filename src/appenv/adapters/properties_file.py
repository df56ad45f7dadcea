"""Flat key=value properties files.

Files are UTF-8 text with one `key=value` entry per line and a single
comment header. Reading accepts the usual `.properties` conventions:
`#`/`!` comments, `=`/`:`/whitespace separators, backslash escapes
(including `\\uXXXX`) and trailing-backslash line continuations.
"""

from __future__ import annotations

import os
import re
from pathlib import Path
from typing import Mapping

from ..core.errors import PropertyReadFailed, PropertyWriteFailed

DEFAULT_HEADER = "App properties"

_LINE_BREAK = re.compile(r"\r\n|\r|\n")
_WHITESPACE = " \t\f"
_SEPARATORS = "=:"
_DECODE = {"t": "\t", "n": "\n", "r": "\r", "f": "\f"}
_ENCODE = {"\\": "\\\\", "\t": "\\t", "\n": "\\n", "\r": "\\r", "\f": "\\f"}


def parse_properties(text: str) -> dict[str, str]:
    """Parse properties text into a dict.

    Raises:
        ValueError: On a malformed `\\uXXXX` escape
    """
    props: dict[str, str] = {}
    for line in _logical_lines(text):
        key, value = _split_entry(line)
        props[_unescape(key)] = _unescape(value)
    return props


def dump_properties(props: Mapping[str, str], header: str | None = DEFAULT_HEADER) -> str:
    """Render properties as text, one entry per line sorted by key."""
    lines = []
    if header:
        lines.append("#" + header.replace("\r", " ").replace("\n", " "))
    for key in sorted(props):
        value = props[key]
        if not isinstance(key, str) or not isinstance(value, str):
            raise TypeError(f"Properties must map str to str, got {key!r}: {value!r}")
        lines.append(f"{_escape(key, is_key=True)}={_escape(value, is_key=False)}")
    return "\n".join(lines) + "\n"


class PropertiesFileStore:
    """PropertyStore backed by a single properties file."""

    def __init__(self, path: Path, header: str = DEFAULT_HEADER):
        self.path = Path(path)
        self.header = header

    def load(self) -> dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            with open(self.path, encoding="utf-8") as handle:
                return parse_properties(handle.read())
        except (OSError, ValueError) as e:
            raise PropertyReadFailed(self.path) from e

    def save(self, props: Mapping[str, str]) -> None:
        """Replace the file contents; the previous file survives any failure."""
        try:
            data = dump_properties(props, self.header).encode("utf-8")
        except UnicodeEncodeError as e:
            raise PropertyWriteFailed(self.path) from e

        tmp = self.path.with_name(self.path.name + ".tmp")
        try:
            with open(tmp, "wb") as handle:
                handle.write(data)
            os.replace(tmp, self.path)
        except OSError as e:
            if os.path.lexists(tmp):
                tmp.unlink()
            raise PropertyWriteFailed(self.path) from e


def _logical_lines(text: str):
    pending: str | None = None
    for raw in _LINE_BREAK.split(text):
        line = raw.lstrip(_WHITESPACE)
        if pending is None:
            if not line or line[0] in "#!":
                continue
        else:
            line = pending + line
            pending = None

        trailing = len(line) - len(line.rstrip("\\"))
        if trailing % 2 == 1:
            pending = line[:-1]
            continue
        if line:
            yield line

    if pending:
        yield pending


def _split_entry(line: str) -> tuple[str, str]:
    i = 0
    while i < len(line):
        ch = line[i]
        if ch == "\\":
            i += 2
            continue
        if ch in _SEPARATORS or ch in _WHITESPACE:
            break
        i += 1

    key = line[:i]
    rest = line[i:].lstrip(_WHITESPACE)
    if rest and rest[0] in _SEPARATORS:
        rest = rest[1:].lstrip(_WHITESPACE)
    return key, rest


def _unescape(text: str) -> str:
    if "\\" not in text:
        return text

    out = []
    i = 0
    while i < len(text):
        ch = text[i]
        if ch != "\\":
            out.append(ch)
            i += 1
            continue
        if i + 1 >= len(text):
            break
        nxt = text[i + 1]
        if nxt == "u":
            digits = text[i + 2 : i + 6]
            if len(digits) != 4 or not all(c in "0123456789abcdefABCDEF" for c in digits):
                raise ValueError(f"Malformed \\uxxxx encoding: {text[i:i + 6]!r}")
            out.append(chr(int(digits, 16)))
            i += 6
            continue
        out.append(_DECODE.get(nxt, nxt))
        i += 2
    return _join_surrogates("".join(out))


def _join_surrogates(text: str) -> str:
    # \uD83D\uDE00 style pairs become one code point; lone surrogates are kept
    if not any("\ud800" <= ch <= "\udfff" for ch in text):
        return text
    return text.encode("utf-16-le", "surrogatepass").decode("utf-16-le", "surrogatepass")


def _escape(text: str, is_key: bool) -> str:
    out = []
    for i, ch in enumerate(text):
        if ch in _ENCODE:
            out.append(_ENCODE[ch])
        elif ch == " " and (is_key or i == 0):
            out.append("\\ ")
        elif is_key and ch in "=:#!":
            out.append("\\" + ch)
        else:
            out.append(ch)
    return "".join(out)
