import unittest

from application.evaluation.metrics import aggregate_mean, hit_at_k, mrr_at_k, ndcg_at_k, precision_at_k, recall_at_k


class TestEvaluationMetrics(unittest.TestCase):
    def test_basic_binary_metrics(self):
        ranked = ["d1", "d2", "d3", "d4"]
        rel = {"d2", "d5"}
        self.assertAlmostEqual(precision_at_k(ranked, rel, 2), 0.5)
        self.assertAlmostEqual(recall_at_k(ranked, rel, 2), 0.5)
        self.assertEqual(hit_at_k(ranked, rel, 1), 0.0)
        self.assertEqual(hit_at_k(ranked, rel, 2), 1.0)
        self.assertAlmostEqual(mrr_at_k(ranked, rel, 4), 1 / 2)

    def test_empty_inputs(self):
        self.assertEqual(precision_at_k([], {"d1"}, 3), 0.0)
        self.assertEqual(precision_at_k(["d1"], {"d1"}, 0), 0.0)
        self.assertEqual(recall_at_k(["d1"], set(), 3), 0.0)
        self.assertEqual(mrr_at_k(["d1"], {"d2"}, 3), 0.0)

    def test_ndcg(self):
        gains = {"d1": 3, "d2": 2, "d3": 1}
        self.assertAlmostEqual(ndcg_at_k(["d1", "d2", "d3"], gains, 3), 1.0)
        score = ndcg_at_k(["d2", "d1", "d3"], gains, 3)
        self.assertGreater(score, 0.0)
        self.assertLess(score, 1.0)
        self.assertEqual(ndcg_at_k(["d1"], {}, 3), 0.0)

    def test_aggregate_mean(self):
        self.assertEqual(aggregate_mean([]), {})
        self.assertEqual(aggregate_mean([{"a": 1.0, "b": 0.0}, {"a": 0.0}]), {"a": 0.5, "b": 0.0})


if __name__ == "__main__":
    unittest.main()
