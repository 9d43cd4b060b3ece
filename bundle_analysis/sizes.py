"""bundle_analysis.sizes

Raw and gzip size measurement for script files.

Bundlers share runtime and vendor chunks across many pages, so the same file
shows up under most routes in the manifest. ``SizeCache`` measures each file
at most once per run; every later lookup is served from memory.
"""

from __future__ import annotations

import gzip
import logging
from pathlib import Path
from typing import Callable, Dict, Iterable, Optional

from bundle_analysis.domain.sizes import ScriptSize
from bundle_analysis.io.layout import BuildPaths

logger = logging.getLogger(__name__)

GZIP_LEVEL = 9

MeasureFn = Callable[[Path], ScriptSize]


def gzip_size(data: bytes) -> int:
    # mtime=0 keeps the header (and so the output) deterministic.
    return len(gzip.compress(data, compresslevel=GZIP_LEVEL, mtime=0))


def measure_script_file(path: Path) -> ScriptSize:
    """Measure one script as the browser receives it (UTF-8 text)."""
    text = Path(path).read_bytes().decode("utf-8", errors="replace")
    encoded = text.encode("utf-8")
    return ScriptSize(raw=len(encoded), gzip=gzip_size(encoded))


class SizeCache:
    """Memoized script measurements for one report run.

    Keys are absolute, normalized script paths. ``reads`` counts the real
    measurements performed, i.e. cache misses.
    """

    def __init__(self, paths: BuildPaths, *, measure: Optional[MeasureFn] = None) -> None:
        self.paths = paths
        self._measure: MeasureFn = measure or measure_script_file
        self._sizes: Dict[Path, ScriptSize] = {}
        self.reads = 0

    def __len__(self) -> int:
        return len(self._sizes)

    def script_size(self, script: str) -> ScriptSize:
        key = self.paths.script_path(script)
        cached = self._sizes.get(key)
        if cached is not None:
            return cached

        size = self._measure(key)
        self.reads += 1
        self._sizes[key] = size
        logger.debug("Measured %s: raw=%d gzip=%d", key, size.raw, size.gzip)
        return size

    def script_set_size(self, scripts: Iterable[str]) -> ScriptSize:
        """Summed size of *scripts*; a path listed twice is counted once."""
        total = ScriptSize.zero()
        for script in dict.fromkeys(scripts):
            total = total + self.script_size(script)
        return total
