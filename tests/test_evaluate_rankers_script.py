import json
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from scripts import evaluate_rankers


class TestEvaluateRankersScript(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self._tmp.cleanup)
        patcher = mock.patch.object(evaluate_rankers, "setup_logging")
        patcher.start()
        self.addCleanup(patcher.stop)

    def _write(self, name: str, content: str) -> str:
        path = Path(self._tmp.name) / name
        path.write_text(content, encoding="utf-8")
        return str(path)

    def test_prints_metrics_per_ranker(self):
        suite = {
            "name": "demo",
            "documents": [{"id": "a", "text": "red shoes"}, {"id": "b", "text": "blue shoes"}],
            "cases": [{"id": "c1", "query_tokens": ["red"], "relevant_ids": ["a"]}],
        }
        path = self._write("suite.json", json.dumps(suite))
        with mock.patch("builtins.print") as printed:
            summary = evaluate_rankers.main([path, "--ranker", "tfidf", "--top-k", "1"])
        self.assertEqual(list(summary), ["tfidf"])
        self.assertAlmostEqual(summary["tfidf"]["precision@1"], 1.0)
        printed.assert_called_once()

    def test_load_suite(self):
        path = self._write(
            "graded.json",
            json.dumps({"documents": [{"id": 1, "text": "x"}], "cases": [{"query_tokens": ["x"], "grades": {"1": 2}}]}),
        )
        suite = evaluate_rankers.load_suite(Path(path))
        self.assertEqual(suite.name, "graded")
        self.assertEqual(suite.documents[0].id, "1")
        self.assertEqual(suite.cases[0].id, "0")
        self.assertEqual(suite.cases[0].grades, {"1": 2})

    def test_malformed_suite_exits(self):
        path = self._write("broken.json", "{not json")
        with mock.patch("sys.stderr"), self.assertRaises(SystemExit) as ctx:
            evaluate_rankers.main([path])
        self.assertEqual(ctx.exception.code, 2)

    def test_unknown_ranker_exits(self):
        path = self._write("empty.json", "{}")
        with mock.patch("sys.stderr"), self.assertRaises(SystemExit):
            evaluate_rankers.main([path, "--ranker", "word2vec"])


if __name__ == "__main__":
    unittest.main()
