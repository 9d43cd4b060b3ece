"""bundle_analysis.manifest

Loader for ``build-manifest.json``.

The manifest is produced by ``next build`` and is trusted as-is: only the
``pages`` mapping is read, and a missing or malformed file is a hard failure
(it means the build output is corrupt or from an incompatible Next.js version,
not something to work around).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, List, Mapping

from bundle_analysis.io.fs import read_json
from bundle_analysis.io.layout import BuildPaths

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BuildManifest:
    """Page route -> ordered script paths (relative to the build root)."""

    pages: Mapping[str, List[str]]

    @classmethod
    def from_dict(cls, d: Mapping[str, object]) -> "BuildManifest":
        pages = d["pages"]
        return cls(pages={str(route): list(scripts) for route, scripts in pages.items()})

    def scripts_for(self, route: str) -> List[str]:
        if route not in self.pages:
            raise KeyError(f"route {route!r} not found in build manifest")
        return self.pages[route]


def load_build_manifest(paths: BuildPaths) -> BuildManifest:
    """Read and parse ``<root>/build-manifest.json``."""
    data: Dict[str, object] = read_json(paths.manifest)
    manifest = BuildManifest.from_dict(data)
    logger.debug("Loaded %d page(s) from %s", len(manifest.pages), paths.manifest)
    return manifest
