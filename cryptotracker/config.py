"""Settings read from a ``.env`` file."""

from __future__ import annotations

import os
from typing import Mapping

DEFAULT_COPYRIGHT = "© 2023 Crypto Tracker"


def read_env_file(path: str | os.PathLike[str]) -> dict[str, str]:
    """Read KEY=VALUE lines from *path*; a missing file gives an empty mapping.

    Keys and values are stripped of surrounding whitespace; lines without
    ``=`` and lines that are not valid UTF-8 are ignored.
    """
    try:
        with open(path, "rb") as handle:
            raw = handle.read()
    except FileNotFoundError:
        return {}

    settings: dict[str, str] = {}
    for raw_line in raw.split(b"\n"):
        if raw_line.endswith(b"\r"):
            raw_line = raw_line[:-1]
        try:
            line = raw_line.decode("utf-8")
        except UnicodeDecodeError:
            continue
        key, sep, value = line.partition("=")
        if sep:
            settings[key.strip()] = value.strip()
    return settings


def copyright_text(env: Mapping[str, str]) -> str:
    """Return the footer text, falling back to the default when unset."""
    return env.get("COPYRIGHT_TEXT", DEFAULT_COPYRIGHT)