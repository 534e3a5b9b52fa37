import os

from dotenv import load_dotenv

load_dotenv()


def _float_from_env(name, default):
    raw = os.getenv(name)
    if raw is None:
        return float(default)

    try:
        return float(raw)
    except ValueError:
        return float(default)


def _int_from_env(name, default):
    raw = os.getenv(name)
    if raw is None:
        return int(default)
    try:
        return int(raw)
    except ValueError:
        return int(default)


def _str_from_env(name, default):
    raw = os.getenv(name)
    if raw is None:
        return str(default)
    return str(raw)


def _bool_from_env(name, default):
    raw = os.getenv(name)
    if raw is None:
        return bool(default)
    return str(raw).strip().lower() in {"1", "true", "yes", "on"}


def _probe_timeout_from_env():
    timeout = _float_from_env("LOGO_PROBE_TIMEOUT_SECONDS", 3.0)
    if timeout <= 0:
        return 3.0
    return timeout


def _log_level_from_env():
    level = _str_from_env("LOG_LEVEL", "INFO").strip().upper()
    if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
        return "INFO"
    return level


# Provider A: logo-by-domain, existence checked with a HEAD probe.
CLEARBIT_LOGO_BASE_URL = _str_from_env("CLEARBIT_LOGO_BASE_URL", "https://logo.clearbit.com").strip().rstrip("/")
LOGO_PROBE_TIMEOUT_SECONDS = _probe_timeout_from_env()
ENABLE_CLEARBIT_PROBE = _bool_from_env("ENABLE_CLEARBIT_PROBE", True)

# Provider B: favicon-by-domain, templated, never probed.
FAVICON_BASE_URL = _str_from_env("FAVICON_BASE_URL", "https://www.google.com/s2/favicons").strip().rstrip("/")
FAVICON_SIZE = max(_int_from_env("FAVICON_SIZE", 64), 16)

# Chat collaborator.
GEMINI_API_KEY = _str_from_env("GEMINI_API_KEY", "").strip()
GEMINI_MODEL = _str_from_env("GEMINI_MODEL", "gemini-1.5-flash").strip()
GEMINI_TIMEOUT_SECONDS = _float_from_env("GEMINI_TIMEOUT_SECONDS", 20.0)

# API process.
API_CORS_ORIGINS = [x.strip() for x in _str_from_env("API_CORS_ORIGINS", "*").split(",") if x.strip()]
LOG_LEVEL = _log_level_from_env()
