import json
from pathlib import Path
import unicodedata
import unittest

from normal_text import (
    ACCENT_TABLE,
    AESTHETIC_TABLE,
    DIACRITIC_TABLE,
    consolidate,
    fold,
    normalize,
    strip,
    trace,
)

CORPUS_DIR = Path(__file__).parent / "corpus"

# Their second-pass output is transliterated again.
_CYRILLIC_WITH_ACCENT = set("ЃѓЌќ")

TRAILING_MARKS = ("", "\u0301", "\u0308", "\u0306", "\u030C", "\u0324", "\u0336")


class NormalizeTests(unittest.TestCase):
    def test_examples(self) -> None:
        self.assertEqual(normalize("Pokémon"), "Pokemon")
        self.assertEqual(normalize("Fußball"), "Fussball")
        self.assertEqual(normalize("Pokémon are tHe bḖSt 2023!"), "Pokemon are tHe bESt 2023!")
        self.assertEqual(normalize("mUltįįįį----- slug! 111"), "mUltiiii----- slug! 111")

    def test_preserves_non_targets(self) -> None:
        for text in ("お早うございます", "Lorem 🤧😇 Ipsum", "@_$><=-#!,.`'\"", " \t\n", ""):
            with self.subTest(text=text):
                self.assertEqual(normalize(text), text)

    def test_preserves_punctuation_around_expansions(self) -> None:
        text = "Größe: 70 % – 700 € (Kopfhörer)\nÜbermorgen!"
        self.assertEqual(normalize(text), "Groesse: 70 % – 700 € (Kopfhoerer)\nUebermorgen!")

    def test_styled_letter_with_accent_needs_fold_first(self) -> None:
        text = "ｅ́"
        self.assertEqual(normalize(text), "e")
        self.assertNotEqual(strip(fold(consolidate(text))), "e")

    def test_decorated_umlaut_folds_to_bare_letter(self) -> None:
        self.assertEqual(normalize("ä̤ö"), "aoe")

    def test_is_idempotent_on_corpus(self) -> None:
        for path in sorted(CORPUS_DIR.glob("*.json")):
            suite = json.loads(path.read_text(encoding="utf-8"))
            for case in suite["cases"]:
                if _CYRILLIC_WITH_ACCENT & set(case["text"]):
                    continue
                once = normalize(case["text"])
                with self.subTest(path=path.name, text=case["text"][:20]):
                    self.assertEqual(normalize(once), once)

    def test_is_idempotent_on_keys_with_trailing_marks(self) -> None:
        unstable = []
        for table in (AESTHETIC_TABLE, ACCENT_TABLE, DIACRITIC_TABLE):
            for key in table.entries:
                for mark in TRAILING_MARKS:
                    if not mark and key in _CYRILLIC_WITH_ACCENT:
                        continue
                    once = normalize(key + mark)
                    if normalize(once) != once:
                        unstable.append(key + mark)
        self.assertEqual(unstable, [])

    def test_decomposed_text_matches_composed(self) -> None:
        for word in ("Việt", "Ǘ", "ḗ", "Ấ", "Nguyễn", "Kopfhörer", "ǚ"):
            with self.subTest(word=word):
                decomposed = unicodedata.normalize("NFD", word)
                self.assertEqual(normalize(decomposed), normalize(word))

    def test_marks_after_expansions_are_folded(self) -> None:
        self.assertEqual(normalize("ß́"), "ss")
        self.assertEqual(normalize("À́"), "A")
        self.assertEqual(normalize("Việt"), "Viet")


class TraceTests(unittest.TestCase):
    def test_records_each_stage(self) -> None:
        result = trace("𝔰trαße ɑ")
        self.assertEqual(result.original, "𝔰trαße ɑ")
        self.assertEqual(result.folded, "strαße ɑ")
        self.assertEqual(result.consolidated, "strαsse ɑ")
        self.assertEqual(result.normalized, "strαsse a")
        self.assertEqual(result.changed_stages(), ["fold", "consolidate", "strip"])

    def test_unchanged_text_has_no_stages(self) -> None:
        result = trace("cat")
        self.assertEqual(result.normalized, "cat")
        self.assertEqual(result.changed_stages(), [])

    def test_matches_normalize(self) -> None:
        text = "INｔèｒｎåｔïｏｎɑｌíƶａｔï߀ԉ"
        self.assertEqual(trace(text).normalized, normalize(text))
