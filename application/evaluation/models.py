from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from domain.entities import Document


@dataclass(slots=True)
class RelevanceCase:
    id: str
    query_tokens: list[str]
    relevant_ids: list[str] = field(default_factory=list)
    grades: dict[str, int] = field(default_factory=dict)

    def gains(self) -> dict[str, int]:
        """Graded relevance, defaulting every relevant id to grade 1."""

        return {doc_id: self.grades.get(doc_id, 1) for doc_id in self.relevant_ids} | self.grades


@dataclass(slots=True)
class EvaluationSuite:
    id: str
    name: str
    documents: list[Document] = field(default_factory=list)
    cases: list[RelevanceCase] = field(default_factory=list)


@dataclass(slots=True)
class CaseResult:
    case_id: str
    ranked_ids: list[str]
    metrics: dict[str, float] = field(default_factory=dict)


@dataclass(slots=True)
class EvaluationRun:
    id: str
    suite_id: str
    ranker_name: str
    top_k: int
    created_at: datetime
    case_results: list[CaseResult] = field(default_factory=list)
    aggregate_metrics: dict[str, float] = field(default_factory=dict)
