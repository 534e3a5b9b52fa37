from __future__ import annotations

import logging

import requests

from .domain_validator import is_domain
from .logo_chain import LogoResult, fetch_logo
from .resolver import Provenance, resolve_company_to_domain

logger = logging.getLogger(__name__)


class LogoRequestError(ValueError):
    """Raised when a logo request names neither a company nor a domain."""


def _clean(value) -> str:
    if value is None:
        return ""
    return str(value).strip()


def resolve_logo_request(
    company: str | None = None,
    domain: str | None = None,
    session: requests.Session | None = None,
    probe: bool | None = None,
) -> LogoResult:
    company_name = _clean(company)
    requested_domain = _clean(domain)
    if not company_name and not requested_domain:
        raise LogoRequestError("Either company name or domain is required")

    # An explicit, well-formed domain wins over company-name resolution.
    if requested_domain and is_domain(requested_domain):
        target = requested_domain
        resolution = Provenance.DIRECT
        display_name = company_name or requested_domain
    else:
        resolved = resolve_company_to_domain(company_name or requested_domain)
        target = resolved.domain
        resolution = resolved.provenance
        display_name = company_name or resolved.original_input

    logger.info("[logo] %s -> %s (%s)", display_name, target, resolution.value)
    return fetch_logo(target, company_name=display_name, resolution=resolution, session=session, probe=probe)
