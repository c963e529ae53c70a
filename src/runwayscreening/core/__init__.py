"""Candidate evaluation, ranking and aggregation."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from ..schemas import CandidateAssessment, Document, JobDescription


@runtime_checkable
class CandidateScorer(Protocol):
    """Scoring contract: one job description and one document in, one assessment out."""

    def assess(
        self,
        *,
        job: JobDescription,
        document: Document,
        display_name: str,
    ) -> CandidateAssessment:
        """Return the assessment of ``document`` against ``job``."""


# NOTE: imported after the protocol so submodules can reference it.
from .evaluation import CandidateEvaluator, EvaluationConfig, EvaluationTask  # noqa: E402
from .evaluators import PlaceholderConfig, PlaceholderScorer  # noqa: E402
from .ranking import BatchSummary, Ranker, RankingConfig, rank_candidates, summarize  # noqa: E402

__all__ = [
    "BatchSummary",
    "CandidateEvaluator",
    "CandidateScorer",
    "EvaluationConfig",
    "EvaluationTask",
    "PlaceholderConfig",
    "PlaceholderScorer",
    "Ranker",
    "RankingConfig",
    "rank_candidates",
    "summarize",
]
