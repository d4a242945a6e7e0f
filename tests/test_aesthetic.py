import unittest

from normal_text.aesthetic import AESTHETIC_TABLE, fold

_LETTERS = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz"


class FoldTests(unittest.TestCase):
    def test_folds_every_math_letter_style(self) -> None:
        for start in (0x1D400, 0x1D504, 0x1D538, 0x1D5A0, 0x1D670):
            styled = "".join(chr(start + offset) for offset in range(52))
            with self.subTest(start=hex(start)):
                self.assertEqual(fold(styled), _LETTERS)

    def test_folds_math_digits(self) -> None:
        self.assertEqual(fold("𝟎𝟙𝟤𝟹𝟺"), "01234")

    def test_folds_letterlike_symbols(self) -> None:
        self.assertEqual(fold("ℌℑℜℨℂℍℕℙℚℝℤℎ"), "HIRZCHNPQRZh")

    def test_folds_enclosed_and_fullwidth(self) -> None:
        self.assertEqual(fold("ⓐⒷ①⓪"), "aB10")
        self.assertEqual(fold("🅰🄱🅒"), "ABC")
        self.assertEqual(fold("ＦｕｌｌＷｉｄｔｈ１２"), "FullWidth12")

    def test_folds_lookalike_alphabets_to_capitals(self) -> None:
        self.assertEqual(fold("ᗩᗷᑕ"), "ABC")
        self.assertEqual(fold("ꍏꌃꉓ"), "ABC")
        self.assertEqual(fold("ᎯᏰᏨ"), "ABC")
        self.assertEqual(fold("ƛƁƇ"), "ABC")

    def test_strips_decoration_marks(self) -> None:
        self.assertEqual(fold("a̶b̶"), "ab")
        self.assertEqual(fold("a̲̅Z̲̅"), "aZ")
        self.assertEqual(fold("aͦ"), "a")
        self.assertEqual(fold("ḧ̤"), "h")
        self.assertEqual(fold("7̶"), "7")

    def test_strips_composed_diaeresis_decoration(self) -> None:
        self.assertEqual(fold("ä̤"), "a")
        self.assertEqual(fold("Ṳ̈ẍ̤"), "Ux")

    def test_keeps_plain_accents(self) -> None:
        self.assertEqual(fold("ä"), "ä")
        self.assertEqual(fold("ä"), "ä")
        self.assertEqual(fold("Pokémon"), "Pokémon")

    def test_keeps_mark_after_styled_letter(self) -> None:
        self.assertEqual(fold("ｅ́"), "é")

    def test_leaves_unrelated_text(self) -> None:
        text = "お早うございます Lorem 🤧😇 – € ̶"
        self.assertEqual(fold(text), text)

    def test_table_has_no_ascii_keys(self) -> None:
        for key in AESTHETIC_TABLE.entries:
            self.assertFalse(len(key) == 1 and key.isascii(), key)
