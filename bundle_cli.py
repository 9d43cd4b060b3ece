#!/usr/bin/env python3
"""
CLI for the Next.js bundle analysis report.

Run from the application's project directory after ``next build``:
  1) check that the build output directory exists and is readable
  2) load <build dir>/build-manifest.json
  3) measure the /_app scripts and every page's own scripts
  4) print the report JSON and write it to <build dir>/analyze/__bundle_analysis.json

Usage:
  python bundle_cli.py
  python bundle_cli.py --log-level DEBUG

Environment (also read from ./.env):
  BUNDLE_ANALYSIS_BUILD_DIR     build output directory name (default: .next)
  BUNDLE_ANALYSIS_GLOBAL_ROUTE  route of the shared app shell (default: /_app)
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from dotenv import load_dotenv

from bundle_analysis.config import load_config
from bundle_analysis.io.layout import BuildOutputMissingError, ensure_build_root, resolve_build_paths
from bundle_analysis.manifest import load_build_manifest
from bundle_analysis.report import build_report, render_report_json, write_report
from bundle_analysis.sizes import SizeCache

logger = logging.getLogger("bundle_analysis")

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Report per-page JavaScript bundle sizes (raw + gzip) for a Next.js build."
    )
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        default="WARNING",
        help="Diagnostics written to stderr (stdout only carries the report JSON)",
    )
    return parser.parse_args(argv)


def configure_logging(level: str) -> None:
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
    logger.handlers[:] = [handler]
    logger.setLevel(level)
    logger.propagate = False


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    configure_logging(args.log_level)

    # .env next to the app, so CI and local runs see the same settings
    load_dotenv(Path.cwd() / ".env")
    config = load_config()

    paths = resolve_build_paths(config.build_dir)
    try:
        ensure_build_root(paths)
    except BuildOutputMissingError as e:
        print(str(e), file=sys.stderr)
        return 1

    manifest = load_build_manifest(paths)
    cache = SizeCache(paths)
    report = build_report(manifest, cache, global_route=config.global_route)

    payload = render_report_json(report)
    # picked up from the CI log
    print(payload)
    write_report(paths, payload)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
