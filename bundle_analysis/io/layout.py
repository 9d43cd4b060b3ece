"""bundle_analysis.io.layout

Canonical build-output layout.

A Next.js build writes everything under one directory (``.next`` unless
configured otherwise)::

  <root>/build-manifest.json              page route -> script paths
  <root>/static/...                       the scripts themselves
  <root>/analyze/__bundle_analysis.json   written by this tool

The root is always resolved against the current working directory, so the tool
has to be run from the application's project directory.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union


BUILD_MANIFEST_NAME = "build-manifest.json"
REPORT_DIRNAME = "analyze"
REPORT_FILENAME = "__bundle_analysis.json"


class BuildOutputMissingError(FileNotFoundError):
    """The build output root is missing or unreadable."""

    def __init__(self, root: Path, build_dir: str) -> None:
        self.root = root
        self.build_dir = build_dir
        super().__init__(
            f'No "{build_dir}" directory found at "{root}" - you may not have your '
            'working directory set correctly, or not have run "next build".'
        )


@dataclass(frozen=True)
class BuildPaths:
    """Canonical paths inside one build output root."""

    root: Path
    build_dir: str

    @property
    def manifest(self) -> Path:
        return self.root / BUILD_MANIFEST_NAME

    @property
    def report_dir(self) -> Path:
        return self.root / REPORT_DIRNAME

    @property
    def report(self) -> Path:
        return self.report_dir / REPORT_FILENAME

    def script_path(self, script: str) -> Path:
        """Absolute, normalized path of a manifest script entry.

        Entries are relative to the root; a leading slash is still treated as
        root-relative.
        """
        return Path(os.path.normpath(os.path.join(str(self.root), script.lstrip("/\\"))))


def resolve_build_paths(
    build_dir: str = ".next",
    *,
    cwd: Optional[Union[str, Path]] = None,
) -> BuildPaths:
    """Resolve the build output root against *cwd* (default: process cwd)."""
    base = Path(cwd) if cwd is not None else Path.cwd()
    return BuildPaths(root=(base / build_dir).absolute(), build_dir=build_dir)


def ensure_build_root(paths: BuildPaths) -> None:
    """Raise BuildOutputMissingError unless the root is a readable directory."""
    root = paths.root
    if not root.is_dir() or not os.access(root, os.R_OK):
        raise BuildOutputMissingError(root, paths.build_dir)
