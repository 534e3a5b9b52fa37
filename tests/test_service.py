import unittest
from unittest.mock import Mock, patch

import requests

from companylogo.logo_chain import LogoSource
from companylogo.resolver import Provenance
from companylogo.service import LogoRequestError, resolve_logo_request


def _response(status_code):
    resp = Mock()
    resp.status_code = status_code
    return resp


@patch("companylogo.logo_chain.requests.head")
class ResolveLogoRequestTests(unittest.TestCase):
    def test_requires_company_or_domain(self, mock_head):
        for company, domain in [(None, None), ("", ""), ("  ", None)]:
            with self.assertRaises(LogoRequestError):
                resolve_logo_request(company=company, domain=domain)
        mock_head.assert_not_called()

    def test_valid_domain_bypasses_resolver(self, mock_head):
        mock_head.return_value = _response(200)

        result = resolve_logo_request(company="Apple", domain="brand.example.com")

        self.assertEqual(result.domain, "brand.example.com")
        self.assertEqual(result.resolution, Provenance.DIRECT)
        self.assertEqual(result.company_name, "Apple")
        self.assertEqual(result.source, LogoSource.CLEARBIT)

    def test_domain_only_uses_domain_as_name(self, mock_head):
        mock_head.return_value = _response(200)

        result = resolve_logo_request(domain="stripe.com")

        self.assertEqual(result.company_name, "stripe.com")
        self.assertEqual(result.resolution, Provenance.DIRECT)

    def test_invalid_domain_is_resolved_as_company_name(self, mock_head):
        mock_head.return_value = _response(200)

        result = resolve_logo_request(domain="Coca Cola")

        self.assertEqual(result.domain, "coca-cola.com")
        self.assertEqual(result.resolution, Provenance.MAPPED)
        self.assertEqual(result.company_name, "Coca Cola")

    def test_company_name_resolution_with_favicon_fallback(self, mock_head):
        mock_head.side_effect = requests.Timeout()

        result = resolve_logo_request(company="Acme Rockets")

        self.assertEqual(result.domain, "acmerockets.com")
        self.assertEqual(result.resolution, Provenance.HEURISTIC)
        self.assertEqual(result.source, LogoSource.FAVICON)
        self.assertTrue(result.logo_url)

    def test_probe_flag_is_passed_through(self, mock_head):
        result = resolve_logo_request(company="Nike", probe=False)

        self.assertEqual(result.source, LogoSource.FAVICON)
        self.assertEqual(result.domain, "nike.com")
        mock_head.assert_not_called()


if __name__ == "__main__":
    unittest.main()
