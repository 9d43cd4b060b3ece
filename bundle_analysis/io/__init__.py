"""bundle_analysis.io

Filesystem contracts and IO helpers.

Design principle
----------------
Where the build output lives, where the manifest is read from, and where the
report is written are a contract with the build tool and with whatever reads
the report afterwards. This module keeps those rules in one place.
"""

from __future__ import annotations

from .layout import (
    BUILD_MANIFEST_NAME,
    REPORT_DIRNAME,
    REPORT_FILENAME,
    BuildOutputMissingError,
    BuildPaths,
    ensure_build_root,
    resolve_build_paths,
)

__all__ = [
    "BUILD_MANIFEST_NAME",
    "REPORT_DIRNAME",
    "REPORT_FILENAME",
    "BuildOutputMissingError",
    "BuildPaths",
    "ensure_build_root",
    "resolve_build_paths",
]
