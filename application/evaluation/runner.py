from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Iterable
from uuid import uuid4

from application.evaluation.metrics import aggregate_mean, hit_at_k, mrr_at_k, ndcg_at_k, precision_at_k, recall_at_k
from application.evaluation.models import CaseResult, EvaluationRun, EvaluationSuite
from domain.interfaces import Ranker

logger = logging.getLogger(__name__)


def run_ranker_suite(suite: EvaluationSuite, ranker: Ranker, top_k: int = 8) -> EvaluationRun:
    case_results: list[CaseResult] = []

    for case in suite.cases:
        ranked_ids = ranker.rank(suite.documents, case.query_tokens, top_k)
        gains = case.gains()
        relevant = {doc_id for doc_id, grade in gains.items() if grade > 0}

        case_metrics = {
            f"precision@{top_k}": precision_at_k(ranked_ids, relevant, top_k),
            f"recall@{top_k}": recall_at_k(ranked_ids, relevant, top_k),
            f"hit@{top_k}": hit_at_k(ranked_ids, relevant, top_k),
            f"mrr@{top_k}": mrr_at_k(ranked_ids, relevant, top_k),
            f"ndcg@{top_k}": ndcg_at_k(ranked_ids, gains, top_k),
        }
        case_results.append(CaseResult(case_id=case.id, ranked_ids=ranked_ids, metrics=case_metrics))

    aggregate = aggregate_mean([result.metrics for result in case_results])
    logger.info("Evaluated %s on suite %s: %s", ranker.name, suite.name, aggregate)
    return EvaluationRun(
        id=str(uuid4()),
        suite_id=suite.id,
        ranker_name=ranker.name,
        top_k=top_k,
        created_at=datetime.now(timezone.utc),
        case_results=case_results,
        aggregate_metrics=aggregate,
    )


def compare_rankers(suite: EvaluationSuite, rankers: Iterable[Ranker], top_k: int = 8) -> dict[str, EvaluationRun]:
    return {ranker.name: run_ranker_suite(suite, ranker, top_k) for ranker in rankers}
