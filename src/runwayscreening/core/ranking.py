"""Ranking and dashboard aggregates over an evaluation batch."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable

from ..schemas import CandidateRecord, EvaluationBatch


@dataclass
class RankingConfig:
    """Thresholds used by the dashboard aggregates."""

    top_score_threshold: int = 80


@dataclass(frozen=True, slots=True)
class BatchSummary:
    """Read-only aggregates computed once per batch."""

    total_candidates: int
    average_score: int
    top_candidate_count: int
    flagged_candidate_count: int


def _records(source: EvaluationBatch | Iterable[CandidateRecord]) -> list[CandidateRecord]:
    if isinstance(source, EvaluationBatch):
        return list(source.candidates)
    return list(source)


def rank_candidates(source: EvaluationBatch | Iterable[CandidateRecord]) -> list[CandidateRecord]:
    """Sort by score, highest first; equal scores keep their input order."""
    return sorted(_records(source), key=lambda record: record.score, reverse=True)


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def summarize(
    source: EvaluationBatch | Iterable[CandidateRecord],
    *,
    config: RankingConfig | None = None,
) -> BatchSummary:
    config = config or RankingConfig()
    records = _records(source)
    scores = [record.score for record in records]
    average = round_half_up(sum(scores) / len(scores)) if scores else 0
    return BatchSummary(
        total_candidates=len(records),
        average_score=average,
        top_candidate_count=sum(1 for score in scores if score >= config.top_score_threshold),
        flagged_candidate_count=sum(1 for record in records if record.red_flags),
    )


class Ranker:
    """Container-friendly wrapper around ranking and aggregation."""

    def __init__(self, *, config: RankingConfig | None = None) -> None:
        self._config = config or RankingConfig()

    def rank(self, source: EvaluationBatch | Iterable[CandidateRecord]) -> list[CandidateRecord]:
        return rank_candidates(source)

    def summarize(self, source: EvaluationBatch | Iterable[CandidateRecord]) -> BatchSummary:
        return summarize(source, config=self._config)
