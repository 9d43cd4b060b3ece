"""bundle_analysis.config

Runtime settings.

The tool has no flags for *where* to look: it always analyzes the build output
under the current working directory. The two knobs a project may need
(a custom ``distDir`` and a different shell route) come from the environment,
which the CLI first populates from a ``.env`` file in the working directory.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional


DEFAULT_BUILD_DIR = ".next"
DEFAULT_GLOBAL_ROUTE = "/_app"

ENV_BUILD_DIR = "BUNDLE_ANALYSIS_BUILD_DIR"
ENV_GLOBAL_ROUTE = "BUNDLE_ANALYSIS_GLOBAL_ROUTE"


@dataclass(frozen=True)
class AnalysisConfig:
    build_dir: str = DEFAULT_BUILD_DIR
    global_route: str = DEFAULT_GLOBAL_ROUTE


def _env_or_default(env: Mapping[str, str], key: str, default: str) -> str:
    raw = env.get(key)
    if raw is None or not raw.strip():
        return default
    return raw.strip()


def load_config(env: Optional[Mapping[str, str]] = None) -> AnalysisConfig:
    """Build an AnalysisConfig from *env* (default: ``os.environ``)."""
    source = os.environ if env is None else env
    return AnalysisConfig(
        build_dir=_env_or_default(source, ENV_BUILD_DIR, DEFAULT_BUILD_DIR),
        global_route=_env_or_default(source, ENV_GLOBAL_ROUTE, DEFAULT_GLOBAL_ROUTE),
    )
