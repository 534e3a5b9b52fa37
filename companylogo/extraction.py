from __future__ import annotations

import re
from functools import lru_cache

from .directory import COMPANY_DIRECTORY, CompanyDirectory


@lru_cache(maxsize=256)
def _whole_word_pattern(key: str) -> re.Pattern[str]:
    return re.compile(rf"\b{re.escape(key)}\b", re.IGNORECASE)


def extract_company_names(text: str, directory: CompanyDirectory = COMPANY_DIRECTORY) -> set[str]:
    """Directory keys mentioned in ``text`` as whole words, case-insensitively."""
    body = str(text or "")
    if not body.strip():
        return set()
    return {key for key in directory.all_keys() if _whole_word_pattern(key).search(body)}
