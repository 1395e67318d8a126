import copy
import math
import unittest

from application.ranking.tfidf_ranker import TfidfRanker, rank, score_documents
from domain.entities import Document


def _docs(*pairs: tuple[str, str]) -> list[Document]:
    return [Document(id=doc_id, text=text) for doc_id, text in pairs]


SHOES = _docs(("a", "red shoes"), ("b", "blue shoes"), ("c", "red car"))
SEPATU = _docs(
    ("p1", "sepatu pria kulit hitam"),
    ("p2", "tas wanita kulit coklat"),
    ("p3", "sepatu anak sport"),
)


class TestRankOrdering(unittest.TestCase):
    def test_overlapping_documents_rank_ahead(self):
        self.assertEqual(rank(SHOES, ["red"], 3), ["a", "c", "b"])

    def test_more_matched_terms_rank_higher(self):
        self.assertEqual(rank(SEPATU, ["sepatu", "kulit"], 3), ["p1", "p3", "p2"])

    def test_scores_follow_tfidf_cosine(self):
        scores = {item.id: item.score for item in score_documents(SEPATU, ["sepatu", "kulit"])}
        self.assertAlmostEqual(scores["p1"], 2 / math.sqrt(20))
        self.assertAlmostEqual(scores["p3"], 1 / (3 * math.sqrt(2)))
        self.assertAlmostEqual(scores["p2"], 1 / math.sqrt(26))

    def test_equal_scores_keep_input_order(self):
        docs = _docs(("x", "kopi susu"), ("y", "teh"), ("z", "kopi susu"))
        self.assertEqual(rank(docs, ["kopi"], 3), ["x", "z", "y"])

    def test_repeated_query_tokens_add_weight(self):
        docs = _docs(("k", "kopi"), ("t", "teh"))
        repeated = score_documents(docs, ["kopi", "kopi", "teh"])[0].score
        single = score_documents(docs, ["kopi", "teh"])[0].score
        self.assertGreater(repeated, single)

    def test_phrases_are_split_like_document_text(self):
        self.assertEqual(
            score_documents(SEPATU, ["sepatu kulit"]),
            score_documents(SEPATU, ["sepatu", "kulit"]),
        )


class TestRankNormalisation(unittest.TestCase):
    def test_case_insensitive_match(self):
        docs = _docs(("k", "Kopi"), ("t", "teh"))
        lower = score_documents(docs, ["kopi"])[0].score
        upper = score_documents(docs, ["KOPI"])[0].score
        self.assertGreater(lower, 0.0)
        self.assertAlmostEqual(lower, upper)

    def test_diacritics_are_folded(self):
        docs = _docs(("c", "Café"), ("t", "teh"))
        self.assertGreater(score_documents(docs, ["cafe"])[0].score, 0.0)
        self.assertEqual(rank(docs, ["cafe"], 1), ["c"])


class TestRankDegenerateInput(unittest.TestCase):
    def test_empty_corpus(self):
        self.assertEqual(rank([], ["kopi"], 5), [])

    def test_empty_query_returns_input_order(self):
        self.assertEqual(rank(SEPATU, [], 2), ["p1", "p2"])
        self.assertTrue(all(item.score == 0.0 for item in score_documents(SEPATU, [])))

    def test_non_positive_top_n(self):
        self.assertEqual(rank(SEPATU, ["sepatu"], 0), [])
        self.assertEqual(rank(SEPATU, ["sepatu"], -3), [])

    def test_top_n_larger_than_corpus(self):
        self.assertEqual(len(rank(SEPATU, ["sepatu"], 10)), 3)

    def test_document_without_terms_scores_zero(self):
        docs = _docs(("blank", "!!!"), ("k", "kopi"))
        self.assertEqual(score_documents(docs, ["kopi"])[0].score, 0.0)
        self.assertEqual(rank(docs, ["kopi"], 2), ["k", "blank"])

    def test_query_of_unseen_terms_scores_zero(self):
        self.assertTrue(all(item.score == 0.0 for item in score_documents(SHOES, ["green"])))


class TestRankProperties(unittest.TestCase):
    def setUp(self) -> None:
        self.docs = _docs(
            ("1", "Kopi Susu Gula Aren minuman"),
            ("2", "Keripik Pedas makanan ringan"),
            ("3", "Es Teh Manis minuman"),
            ("4", "Nasi Goreng makanan berat"),
            ("5", "Brownies Coklat dessert"),
            ("6", "Kopi Hitam minuman"),
        )
        self.query = ["minuman", "kopi", "coklat"]

    def test_deterministic(self):
        self.assertEqual(rank(self.docs, self.query, 4), rank(self.docs, self.query, 4))

    def test_output_is_subset_with_bounded_length(self):
        ids = {doc.id for doc in self.docs}
        for top_n in range(-1, 9):
            result = rank(self.docs, self.query, top_n)
            self.assertTrue(set(result) <= ids)
            self.assertEqual(len(result), max(0, min(top_n, len(self.docs))))
            self.assertEqual(len(result), len(set(result)))

    def test_inputs_are_not_mutated(self):
        docs_before = copy.deepcopy(self.docs)
        query_before = list(self.query)
        rank(self.docs, self.query, 3)
        self.assertEqual(self.docs, docs_before)
        self.assertEqual(self.query, query_before)

    def test_ranker_class_matches_function(self):
        ranker = TfidfRanker()
        self.assertEqual(ranker.name, "tfidf")
        self.assertEqual(ranker.rank(self.docs, self.query, 3), rank(self.docs, self.query, 3))
        self.assertEqual(ranker.score(self.docs, self.query), score_documents(self.docs, self.query))


if __name__ == "__main__":
    unittest.main()
