"""bundle_analysis.report

Assemble, render and write the bundle analysis report.

Report shape (one JSON object)::

  {"/": {"raw": 1234, "gzip": 567}, ..., "__global": {"raw": ..., "gzip": ...}}

``__global`` is the ``/_app`` shell that every page loads. Each page entry
excludes those shared scripts, so it is the weight that page adds on top of the
shell. The ``/_app`` route keeps its own entry as well; it always reads zero
because its scripts are all subtracted from themselves.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Dict

from bundle_analysis.config import DEFAULT_GLOBAL_ROUTE
from bundle_analysis.io.fs import write_text_atomic
from bundle_analysis.io.layout import BuildPaths
from bundle_analysis.manifest import BuildManifest
from bundle_analysis.sizes import SizeCache

logger = logging.getLogger(__name__)

# Leading underscores keep this from colliding with a real route ("/...").
GLOBAL_REPORT_KEY = "__global"

Report = Dict[str, Dict[str, int]]


def build_report(
    manifest: BuildManifest,
    cache: SizeCache,
    *,
    global_route: str = DEFAULT_GLOBAL_ROUTE,
) -> Report:
    """Compute the per-page report for *manifest*.

    Page entries keep manifest order and are followed by ``__global``.
    """
    global_scripts = manifest.scripts_for(global_route)
    global_size = cache.script_set_size(global_scripts)
    excluded = set(global_scripts)

    report: Report = {}
    for route, scripts in manifest.pages.items():
        own = [s for s in scripts if s not in excluded]
        report[route] = cache.script_set_size(own).to_dict()

    report[GLOBAL_REPORT_KEY] = global_size.to_dict()
    logger.debug(
        "Report built for %d page(s); %d unique script(s), %d file read(s)",
        len(manifest.pages),
        len(cache),
        cache.reads,
    )
    return report


def render_report_json(report: Report) -> str:
    """Compact JSON, insertion order preserved. Same text for stdout and disk."""
    return json.dumps(report, separators=(",", ":"))


def write_report(paths: BuildPaths, payload: str) -> Path:
    """Write the rendered report to ``<root>/analyze/__bundle_analysis.json``."""
    out = paths.report
    write_text_atomic(out, payload)
    logger.info("Wrote bundle analysis to %s", out)
    return out
