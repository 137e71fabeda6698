import unittest

from teachload.matching import NamePattern, fold


class TestNamePattern(unittest.TestCase):
    def test_fold_collapses_whitespace_and_case(self) -> None:
        self.assertEqual(fold("  Juan \t DELA   Cruz "), "juan dela cruz")

    def test_tokens_in_order_with_gaps(self) -> None:
        p = NamePattern.from_text("JUAN DELA CRUZ")
        self.assertTrue(p.matches("Juan Miguel Dela Cruz"))
        self.assertTrue(p.matches("juan  dela cruz"))

    def test_tokens_out_of_order_do_not_match(self) -> None:
        p = NamePattern.from_text("JUAN CRUZ")
        self.assertFalse(p.matches("Cruz Juan"))

    def test_partial_token_matches_inside_word(self) -> None:
        self.assertTrue(NamePattern.from_text("it").matches("BSIT"))

    def test_punctuation_is_literal(self) -> None:
        p = NamePattern.from_text("J. (CRUZ)")
        self.assertTrue(p.matches("J. (Cruz)"))
        self.assertFalse(p.matches("JX CRUZ"))

    def test_empty_pattern_matches_nothing(self) -> None:
        p = NamePattern.from_text("   ")
        self.assertTrue(p.is_empty)
        self.assertFalse(p.matches("Anyone"))


if __name__ == "__main__":
    unittest.main()
