"""Compare recommendation rankers on a labelled JSON suite."""
from __future__ import annotations

import argparse
import json
from pathlib import Path
from typing import Any

from application.evaluation.models import EvaluationSuite, RelevanceCase
from application.evaluation.runner import compare_rankers
from domain.entities import Document
from infrastructure.config import build_ranker
from ui.logging_utils import setup_logging

DEFAULT_RANKERS = ("tfidf", "bm25")


def load_suite(path: Path) -> EvaluationSuite:
    """Read a suite file: ``{"name", "documents": [{id, text}], "cases": [...]}``."""

    raw: dict[str, Any] = json.loads(path.read_text(encoding="utf-8"))
    documents = [Document(id=str(doc["id"]), text=str(doc.get("text", ""))) for doc in raw.get("documents", [])]
    cases = [
        RelevanceCase(
            id=str(case.get("id", index)),
            query_tokens=list(case["query_tokens"]),
            relevant_ids=[str(doc_id) for doc_id in case.get("relevant_ids", [])],
            grades={str(doc_id): int(grade) for doc_id, grade in case.get("grades", {}).items()},
        )
        for index, case in enumerate(raw.get("cases", []))
    ]
    return EvaluationSuite(id=path.stem, name=str(raw.get("name", path.stem)), documents=documents, cases=cases)


def parse_args(argv: list[str] | None = None) -> tuple[argparse.ArgumentParser, argparse.Namespace]:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("suite", help="Path to the JSON suite file")
    parser.add_argument(
        "--ranker",
        action="append",
        dest="rankers",
        help="Ranker name (tfidf, bm25). Can be passed several times; defaults to all.",
    )
    parser.add_argument("--top-k", type=int, default=8, help="Cut-off for the metrics (default: 8)")
    return parser, parser.parse_args(argv)


def main(argv: list[str] | None = None) -> dict[str, dict[str, float]]:
    parser, args = parse_args(argv)
    setup_logging()

    try:
        suite = load_suite(Path(args.suite).expanduser())
    except (OSError, ValueError, KeyError, TypeError) as exc:
        parser.error(f"cannot read suite {args.suite}: {exc}")
    try:
        rankers = [build_ranker(name) for name in args.rankers or DEFAULT_RANKERS]
    except ValueError as exc:
        parser.error(str(exc))

    runs = compare_rankers(suite, rankers, top_k=args.top_k)
    summary = {name: run.aggregate_metrics for name, run in runs.items()}
    for name, metrics in summary.items():
        formatted = ", ".join(f"{key}={value:.3f}" for key, value in metrics.items())
        print(f"{name}: {formatted}")
    return summary


if __name__ == "__main__":
    main()
