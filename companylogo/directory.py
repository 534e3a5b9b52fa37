from __future__ import annotations

from types import MappingProxyType
from typing import Mapping


_COMPANY_DOMAINS = {
    # Technology
    "apple": "apple.com",
    "google": "google.com",
    "microsoft": "microsoft.com",
    "amazon": "amazon.com",
    "meta": "meta.com",
    "facebook": "facebook.com",
    "netflix": "netflix.com",
    "tesla": "tesla.com",
    "twitter": "twitter.com",
    "x": "x.com",
    "linkedin": "linkedin.com",
    "instagram": "instagram.com",
    "youtube": "youtube.com",
    "tiktok": "tiktok.com",
    "snapchat": "snapchat.com",
    "discord": "discord.com",
    "slack": "slack.com",
    "spotify": "spotify.com",
    "adobe": "adobe.com",
    "salesforce": "salesforce.com",
    "oracle": "oracle.com",
    "ibm": "ibm.com",
    "intel": "intel.com",
    "nvidia": "nvidia.com",
    "amd": "amd.com",
    # Retail & e-commerce
    "walmart": "walmart.com",
    "target": "target.com",
    "ebay": "ebay.com",
    "etsy": "etsy.com",
    "shopify": "shopify.com",
    "alibaba": "alibaba.com",
    # Finance
    "paypal": "paypal.com",
    "stripe": "stripe.com",
    "visa": "visa.com",
    "mastercard": "mastercard.com",
    "jpmorgan": "jpmorganchase.com",
    "goldman sachs": "goldmansachs.com",
    # Travel
    "airbnb": "airbnb.com",
    "uber": "uber.com",
    "lyft": "lyft.com",
    "booking": "booking.com",
    "expedia": "expedia.com",
    # Food & beverage
    "mcdonalds": "mcdonalds.com",
    "starbucks": "starbucks.com",
    "coca cola": "coca-cola.com",
    "pepsi": "pepsi.com",
    # Automotive
    "toyota": "toyota.com",
    "ford": "ford.com",
    "bmw": "bmw.com",
    "mercedes": "mercedes-benz.com",
    "volkswagen": "volkswagen.com",
    # Fashion
    "nike": "nike.com",
    "adidas": "adidas.com",
    "zara": "zara.com",
    "h&m": "hm.com",
    "uniqlo": "uniqlo.com",
}


class CompanyDirectory:
    """Read-only company name -> domain table.

    Keys are lower-cased canonical names. There is no mutation API; the
    backing mapping is wrapped in a ``MappingProxyType`` so instances can be
    shared freely between concurrent requests.
    """

    __slots__ = ("_entries", "_domains")

    def __init__(self, entries: Mapping[str, str]):
        table = {str(k).strip().lower(): str(v).strip().lower() for k, v in entries.items()}
        self._entries = MappingProxyType(table)
        self._domains = frozenset(table.values())

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and key.strip().lower() in self._entries

    def lookup(self, key: str) -> str | None:
        return self._entries.get(str(key or "").strip().lower())

    def reverse_contains(self, domain: str) -> bool:
        return str(domain or "").strip().lower() in self._domains

    def all_keys(self) -> frozenset[str]:
        return frozenset(self._entries)


COMPANY_DIRECTORY = CompanyDirectory(_COMPANY_DOMAINS)
