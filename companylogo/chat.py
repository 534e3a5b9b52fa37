from __future__ import annotations

import logging
import re
from typing import Any, Iterable

import requests

from .settings import GEMINI_API_KEY, GEMINI_MODEL, GEMINI_TIMEOUT_SECONDS

logger = logging.getLogger(__name__)

GEMINI_URL = "https://generativelanguage.googleapis.com/v1beta/models/{model}:generateContent"
_LOGO_COMMAND_RE = re.compile(r"^/logo\s+(.+)$", re.IGNORECASE | re.DOTALL)


class ChatError(RuntimeError):
    pass


class GeminiChatClient:
    """Plain text-in/text-out wrapper around Gemini ``generateContent``."""

    def __init__(
        self,
        api_key: str = GEMINI_API_KEY,
        model: str = GEMINI_MODEL,
        timeout_seconds: float = GEMINI_TIMEOUT_SECONDS,
        session: requests.Session | None = None,
    ):
        self.api_key = str(api_key or "").strip()
        self.model = str(model or "gemini-1.5-flash").strip()
        self.timeout_seconds = float(timeout_seconds)
        self.session = session

    def enabled(self) -> bool:
        return bool(self.api_key)

    def _extract_text(self, payload: dict[str, Any]) -> str:
        candidates = payload.get("candidates", []) or []
        if not candidates:
            return ""
        parts = (((candidates[0] or {}).get("content", {}) or {}).get("parts", []) or [])
        return "".join(str(p.get("text", "")) for p in parts if isinstance(p, dict))

    def generate(self, message: str) -> str:
        if not self.enabled():
            raise ChatError("GEMINI_API_KEY is not configured")
        url = GEMINI_URL.format(model=self.model)
        body = {"contents": [{"parts": [{"text": str(message)}]}]}
        http = self.session or requests
        try:
            resp = http.post(url, params={"key": self.api_key}, json=body, timeout=self.timeout_seconds)
            resp.raise_for_status()
            payload = resp.json() or {}
        except requests.RequestException as exc:
            raise ChatError(f"gemini request failed: {type(exc).__name__}") from exc
        except ValueError as exc:
            raise ChatError("gemini returned a non-JSON body") from exc
        text = self._extract_text(payload)
        if not text.strip():
            raise ChatError("gemini returned no candidates")
        logger.debug("[chat] model=%s chars_in=%d chars_out=%d", self.model, len(message), len(text))
        return text


def parse_logo_command(message: str) -> str | None:
    """Company named by a ``/logo <company>`` chat command, if any."""
    match = _LOGO_COMMAND_RE.match(str(message or "").strip())
    if not match:
        return None
    company = match.group(1).strip()
    return company or None


def decorate_with_companies(reply: str, companies: Iterable[str]) -> str:
    names = sorted(companies)
    if not names:
        return reply
    return f"*Detected companies: {', '.join(names)}*\n\n{reply}"
