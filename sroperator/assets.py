"""Reading numbered manifest files from a directory."""

from __future__ import annotations

import fnmatch
import logging
import os
import posixpath
import re
from dataclasses import dataclass
from pathlib import Path

__all__ = ["Metadata", "get_from", "file_path_pattern_valid", "valid_state_name"]

log = logging.getLogger(__name__)

_PATTERNS = (
    "[0-9][0-9][0-9][0-9]-*.yaml",
    "[0-9][0-9][0-9][0-9]_*.yaml",
)

_STATE_NAME = re.compile(r"[0-9]{4}[-_].*\.yaml")

_EXTENSION = ".yaml"


@dataclass(frozen=True)
class Metadata:
    """A manifest's file name and raw content."""

    name: str
    content: bytes


def _base(path: str) -> str:
    """Last element of a slash-separated path, trailing slashes ignored."""
    if not path:
        return "."
    stripped = path.rstrip("/")
    if not stripped:
        return "/"
    return posixpath.basename(stripped)


def file_path_pattern_valid(path: str) -> bool:
    """True if the file name starts with four digits followed by '-' or '_' and ends in .yaml."""
    name = _base(str(path))
    return any(fnmatch.fnmatchcase(name, pattern) for pattern in _PATTERNS)


def valid_state_name(path: str) -> bool:
    """True if the file name is a state manifest name such as 0000_state.yaml."""
    return _STATE_NAME.fullmatch(_base(str(path))) is not None


def _manifest_paths(root: Path) -> list[Path]:
    if not root.exists():
        raise FileNotFoundError(f"Directory {root} does not exist")

    if not root.is_dir():
        candidates = [root]
    else:
        candidates = []
        for entry in sorted(os.scandir(root), key=lambda e: e.name):
            if entry.is_dir():
                log.info("WalkDir skipping directory %s", entry.path)
                continue
            candidates.append(Path(entry.path))

    files = []
    for path in candidates:
        if not path.name.endswith(_EXTENSION):
            log.info("WalkDir path does not match *.yaml: %s", path)
            continue
        if not file_path_pattern_valid(path.name):
            continue
        log.info("WalkDir path valid: %s", path)
        files.append(path)
    return files


def get_from(assets: str | os.PathLike[str]) -> list[Metadata]:
    """Read every numbered ``*.yaml`` manifest directly inside ``assets``, in name order."""
    return [Metadata(path.name, path.read_bytes()) for path in _manifest_paths(Path(assets))]