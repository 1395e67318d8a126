from application.evaluation.metrics import aggregate_mean, hit_at_k, mrr_at_k, ndcg_at_k, precision_at_k, recall_at_k
from application.evaluation.models import CaseResult, EvaluationRun, EvaluationSuite, RelevanceCase
from application.evaluation.runner import compare_rankers, run_ranker_suite

__all__ = [
    "RelevanceCase",
    "EvaluationSuite",
    "CaseResult",
    "EvaluationRun",
    "precision_at_k",
    "recall_at_k",
    "hit_at_k",
    "mrr_at_k",
    "ndcg_at_k",
    "aggregate_mean",
    "run_ranker_suite",
    "compare_rankers",
]
