import json
from pathlib import Path
import unittest

from normal_text import normalize

CORPUS_DIR = Path(__file__).parent / "corpus"


def _load_suites() -> list:
    return [
        json.loads(path.read_text(encoding="utf-8"))
        for path in sorted(CORPUS_DIR.glob("*.json"))
    ]


class CorpusRunnerTests(unittest.TestCase):
    def test_corpus_cases_match_expectations(self) -> None:
        suites = _load_suites()
        self.assertTrue(suites, "No corpus files found under tests/corpus")

        for suite in suites:
            for index, case in enumerate(suite["cases"]):
                label = case.get("name", str(index))
                with self.subTest(suite=suite["name"], case=label):
                    self.assertEqual(normalize(case["text"]), case["expected"])

    def test_aesthetic_block_keeps_lines(self) -> None:
        suite = json.loads((CORPUS_DIR / "aesthetic.json").read_text(encoding="utf-8"))
        text = "\n".join(f"{case['name']} {case['text']}" for case in suite["cases"])
        expected = "\n".join(f"{case['name']} {case['expected']}" for case in suite["cases"])
        self.assertEqual(normalize(text), expected)
