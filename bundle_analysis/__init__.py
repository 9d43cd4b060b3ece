"""bundle_analysis

Per-page JavaScript bundle size reporting for a Next.js build output.

Why this exists
---------------
Bundle size regressions are easy to miss in review: a new import on one page
can pull a whole vendor chunk into it, and a change to the app shell adds
weight to *every* page.

This package measures both. It reads the build manifest, computes the size of
the shared ``/_app`` scripts once, and reports each page's size with those
shared scripts subtracted out. The CLI (``bundle_cli.py``) is a thin
composition root over the modules here.
"""

from __future__ import annotations
