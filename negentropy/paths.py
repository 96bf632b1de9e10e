"""Locations of workspace files."""

from __future__ import annotations

import os
from pathlib import Path


def workspace_path(root: str | os.PathLike[str] = ".") -> Path:
    """Directory that holds the diagram files under ``root``."""
    return Path(root) / "Workspace"