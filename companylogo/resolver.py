from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import Any

from .directory import COMPANY_DIRECTORY, CompanyDirectory
from .domain_validator import is_domain
from .normalizer import normalize

logger = logging.getLogger(__name__)

_WHITESPACE_RE = re.compile(r"\s+")
HEURISTIC_SUFFIX = ".com"


class Provenance(str, Enum):
    DIRECT = "direct"
    MAPPED = "mapped"
    HEURISTIC = "heuristic"


@dataclass(frozen=True)
class ResolutionResult:
    domain: str
    provenance: Provenance
    original_input: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "domain": self.domain,
            "source": self.provenance.value,
            "originalInput": self.original_input,
        }


def company_name_to_domain(company_name: str, directory: CompanyDirectory = COMPANY_DIRECTORY) -> str:
    """Map a company name to a domain via the directory, else ``<name>.com``."""
    name = normalize(company_name)
    for key in name.candidates():
        domain = directory.lookup(key)
        if domain:
            return domain
    return _WHITESPACE_RE.sub("", name.canonical) + HEURISTIC_SUFFIX


def resolve_company_to_domain(value: str, directory: CompanyDirectory = COMPANY_DIRECTORY) -> ResolutionResult:
    """Turn free-form company input into a domain tagged with its provenance.

    Never raises: blank input resolves to the degenerate heuristic ``.com``.
    """
    original = "" if value is None else str(value)
    trimmed = original.strip()

    if is_domain(trimmed):
        logger.debug("[resolve] %r -> %s (direct)", original, trimmed)
        return ResolutionResult(domain=trimmed, provenance=Provenance.DIRECT, original_input=original)

    domain = company_name_to_domain(trimmed, directory=directory)
    provenance = Provenance.MAPPED if directory.reverse_contains(domain) else Provenance.HEURISTIC
    logger.debug("[resolve] %r -> %s (%s)", original, domain, provenance.value)
    return ResolutionResult(domain=domain, provenance=provenance, original_input=original)
