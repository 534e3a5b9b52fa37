from __future__ import annotations

import re

# Dot-separated labels of 1-63 letters/digits/hyphens with no leading or
# trailing hyphen, ending in an alphabetic TLD of at least two letters.
_DOMAIN_RE = re.compile(
    r"^(?:[A-Za-z0-9](?:[A-Za-z0-9-]{0,61}[A-Za-z0-9])?\.)+[A-Za-z]{2,63}$"
)


def is_domain(value: str) -> bool:
    """Return True when ``value`` (after trimming) is shaped like a domain.

    Purely syntactic: nothing is resolved on the network.
    """
    candidate = str(value or "").strip()
    if not candidate:
        return False
    return _DOMAIN_RE.fullmatch(candidate) is not None
