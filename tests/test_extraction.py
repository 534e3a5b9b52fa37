import unittest

from companylogo.directory import CompanyDirectory
from companylogo.extraction import extract_company_names


class ExtractionTests(unittest.TestCase):
    def test_case_insensitive_whole_word(self):
        self.assertIn("apple", extract_company_names("I love Apple pie"))
        self.assertNotIn("apple", extract_company_names("application"))

    def test_single_letter_key_needs_word_boundary(self):
        self.assertNotIn("x", extract_company_names("put it in the box"))
        self.assertIn("x", extract_company_names("posted on X yesterday"))

    def test_multiple_companies_deduplicated(self):
        found = extract_company_names("Nike vs Adidas, and nike again. Then COCA COLA.")
        self.assertEqual(found, {"nike", "adidas", "coca cola"})

    def test_regex_characters_in_keys_are_escaped(self):
        self.assertIn("h&m", extract_company_names("Bought a shirt at H&M"))
        directory = CompanyDirectory({"a.b": "ab.com"})
        self.assertEqual(extract_company_names("axb", directory=directory), set())
        self.assertEqual(extract_company_names("see a.b now", directory=directory), {"a.b"})

    def test_empty_text(self):
        self.assertEqual(extract_company_names(""), set())
        self.assertEqual(extract_company_names(None), set())


if __name__ == "__main__":
    unittest.main()
