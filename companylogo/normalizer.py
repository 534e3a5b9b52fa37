from __future__ import annotations

import re
from dataclasses import dataclass

_WHITESPACE_RE = re.compile(r"\s+")
_NON_ALNUM_RE = re.compile(r"[^a-z0-9\s]")


@dataclass(frozen=True)
class NormalizedName:
    canonical: str
    variants: tuple[str, ...]

    def candidates(self) -> tuple[str, ...]:
        """Lookup keys in priority order: canonical first, then each variant."""
        return (self.canonical,) + self.variants


def canonicalize(name: str) -> str:
    return str(name or "").strip().lower()


def normalize(name: str) -> NormalizedName:
    canonical = canonicalize(name)
    # Order matters: lookups stop at the first hit.
    variants = (
        _WHITESPACE_RE.sub("", canonical),
        _WHITESPACE_RE.sub("-", canonical),
        _NON_ALNUM_RE.sub("", canonical),
    )
    return NormalizedName(canonical=canonical, variants=variants)
