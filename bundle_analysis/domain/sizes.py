"""bundle_analysis.domain.sizes

Canonical representation of a measured script (or set of scripts).

The report file is consumed by other tooling (CI comments, history diffs), so
the ``{"raw": ..., "gzip": ...}`` shape is a public contract. Keeping the
conversion in one place means the computation never builds those dicts by hand.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict


@dataclass(frozen=True)
class ScriptSize:
    """Raw and gzip byte sizes."""

    raw: int
    gzip: int

    @classmethod
    def zero(cls) -> "ScriptSize":
        return cls(0, 0)

    def __add__(self, other: "ScriptSize") -> "ScriptSize":
        if not isinstance(other, ScriptSize):
            return NotImplemented
        return ScriptSize(self.raw + other.raw, self.gzip + other.gzip)

    def to_dict(self) -> Dict[str, int]:
        return {"raw": self.raw, "gzip": self.gzip}
