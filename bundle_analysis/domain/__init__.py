"""bundle_analysis.domain

Value types that form the contract between the size computation and the
report writer.
"""

from __future__ import annotations

from .sizes import ScriptSize

__all__ = [
    "ScriptSize",
]
