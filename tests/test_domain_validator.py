import unittest

from companylogo.domain_validator import is_domain


class DomainValidatorTests(unittest.TestCase):
    def test_accepts_common_domains(self):
        for value in ["apple.com", "coca-cola.com", "mercedes-benz.com", "bbc.co.uk", "x.com", "a1.io"]:
            self.assertTrue(is_domain(value), value)

    def test_trims_before_matching(self):
        self.assertTrue(is_domain("  stripe.com \n"))

    def test_rejects_company_names_and_garbage(self):
        for value in ["apple", "Coca Cola", "", "   ", ".com", "-apple.com", "apple-.com", "apple.c", "apple.c0m", "a..com"]:
            self.assertFalse(is_domain(value), value)

    def test_rejects_label_longer_than_63(self):
        self.assertTrue(is_domain("a" * 63 + ".com"))
        self.assertFalse(is_domain("a" * 64 + ".com"))

    def test_none_is_not_a_domain(self):
        self.assertFalse(is_domain(None))


if __name__ == "__main__":
    unittest.main()
