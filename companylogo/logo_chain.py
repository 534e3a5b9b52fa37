from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any
from urllib.parse import quote, urlencode

import requests

from .resolver import Provenance
from .settings import (
    CLEARBIT_LOGO_BASE_URL,
    ENABLE_CLEARBIT_PROBE,
    FAVICON_BASE_URL,
    FAVICON_SIZE,
    LOGO_PROBE_TIMEOUT_SECONDS,
)

logger = logging.getLogger(__name__)


class LogoSource(str, Enum):
    CLEARBIT = "clearbit"
    FAVICON = "favicon"
    # Only produced when no URL can be built at all.
    FAILED = "failed"


@dataclass(frozen=True)
class ProviderOutcome:
    url: str | None
    reason: str = ""

    @classmethod
    def success(cls, url: str) -> "ProviderOutcome":
        return cls(url=url)

    @classmethod
    def unavailable(cls, reason: str) -> "ProviderOutcome":
        return cls(url=None, reason=reason)

    @property
    def available(self) -> bool:
        return bool(self.url)


@dataclass(frozen=True)
class LogoResult:
    logo_url: str | None
    domain: str
    company_name: str
    source: LogoSource
    resolution: Provenance

    def __post_init__(self):
        if self.source == LogoSource.FAILED and self.logo_url is not None:
            raise ValueError("failed logo results cannot carry a URL")
        if self.source != LogoSource.FAILED and not self.logo_url:
            raise ValueError(f"{self.source.value} logo results need a URL")

    def to_dict(self) -> dict[str, Any]:
        return {
            "logoUrl": self.logo_url,
            "domain": self.domain,
            "companyName": self.company_name,
            "source": self.source.value,
            "resolution": self.resolution.value,
        }


def clearbit_logo_url(domain: str) -> str:
    return f"{CLEARBIT_LOGO_BASE_URL}/{quote(domain.strip(), safe='.-')}"


def favicon_url(domain: str) -> str:
    return f"{FAVICON_BASE_URL}?{urlencode({'domain': domain.strip(), 'sz': FAVICON_SIZE})}"


def probe_clearbit(domain: str, session: requests.Session | None = None, timeout: float | None = None) -> ProviderOutcome:
    """HEAD-probe Provider A. Every failure mode comes back as ``unavailable``."""
    url = clearbit_logo_url(domain)
    http = session or requests
    try:
        resp = http.head(
            url,
            timeout=LOGO_PROBE_TIMEOUT_SECONDS if timeout is None else float(timeout),
            allow_redirects=True,
        )
    except requests.RequestException as exc:
        return ProviderOutcome.unavailable(type(exc).__name__)
    status = int(getattr(resp, "status_code", 0) or 0)
    if 200 <= status < 300:
        return ProviderOutcome.success(url)
    return ProviderOutcome.unavailable(f"status={status}")


def fetch_logo(
    domain: str,
    company_name: str,
    resolution: Provenance,
    session: requests.Session | None = None,
    probe: bool | None = None,
) -> LogoResult:
    """Pick a logo URL for ``domain``: Clearbit when its probe succeeds, else the favicon.

    At most one outbound request is made (the Clearbit probe). The favicon URL
    is templated and handed back unverified; callers render initials if it
    does not load.
    """
    target = str(domain or "").strip()
    if not target:
        logger.warning("[logo] no domain for %r, nothing to fetch", company_name)
        return LogoResult(
            logo_url=None,
            domain=target,
            company_name=company_name,
            source=LogoSource.FAILED,
            resolution=resolution,
        )

    use_probe = ENABLE_CLEARBIT_PROBE if probe is None else bool(probe)
    if use_probe:
        outcome = probe_clearbit(target, session=session)
        if outcome.available:
            return LogoResult(
                logo_url=outcome.url,
                domain=target,
                company_name=company_name,
                source=LogoSource.CLEARBIT,
                resolution=resolution,
            )
        logger.info("[logo] clearbit unavailable for %s (%s), using favicon fallback", target, outcome.reason)
    else:
        logger.debug("[logo] clearbit probe disabled, using favicon for %s", target)

    return LogoResult(
        logo_url=favicon_url(target),
        domain=target,
        company_name=company_name,
        source=LogoSource.FAVICON,
        resolution=resolution,
    )
