from .directory import COMPANY_DIRECTORY, CompanyDirectory
from .domain_validator import is_domain
from .extraction import extract_company_names
from .logo_chain import LogoResult, LogoSource, fetch_logo
from .normalizer import NormalizedName, normalize
from .resolver import Provenance, ResolutionResult, resolve_company_to_domain
from .service import LogoRequestError, resolve_logo_request

__version__ = "1.0.0"

__all__ = [
    "COMPANY_DIRECTORY",
    "CompanyDirectory",
    "is_domain",
    "extract_company_names",
    "LogoResult",
    "LogoSource",
    "fetch_logo",
    "NormalizedName",
    "normalize",
    "Provenance",
    "ResolutionResult",
    "resolve_company_to_domain",
    "LogoRequestError",
    "resolve_logo_request",
]
