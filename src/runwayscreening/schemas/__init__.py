"""Pydantic schema definitions shared across the pipeline."""

from __future__ import annotations

from .candidate import (
    CandidateAssessment,
    CandidateRecord,
    DocumentError,
    EvaluationBatch,
)
from .document import Document
from .job import JobDescription

__all__ = [
    "CandidateAssessment",
    "CandidateRecord",
    "Document",
    "DocumentError",
    "EvaluationBatch",
    "JobDescription",
]
