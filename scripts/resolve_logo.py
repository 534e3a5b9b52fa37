#!/usr/bin/env python3
from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from companylogo.extraction import extract_company_names
from companylogo.service import LogoRequestError, resolve_logo_request


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Resolve a company name or domain to a logo URL.")
    parser.add_argument("company", nargs="?", default="", help="Company name, or free text with --extract")
    parser.add_argument("--domain", default="", help="Explicit domain; used verbatim when well-formed")
    parser.add_argument("--no-probe", action="store_true", help="Skip the Clearbit probe and return the favicon URL")
    parser.add_argument("--extract", action="store_true", help="List known companies mentioned in the text instead")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)

    if args.extract:
        print(json.dumps({"companies": sorted(extract_company_names(args.company))}, indent=2))
        return 0

    try:
        result = resolve_logo_request(company=args.company, domain=args.domain, probe=False if args.no_probe else None)
    except LogoRequestError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    print(json.dumps(result.to_dict(), indent=2))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
