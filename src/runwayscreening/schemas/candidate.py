"""Candidate evaluation output schemas."""

from __future__ import annotations

import uuid
from datetime import datetime

import pendulum
from pydantic import BaseModel, ConfigDict, Field

from .job import JobDescription


class CandidateAssessment(BaseModel):
    """Scorer output for a single document."""

    score: int = Field(ge=0, le=100)
    match_percentage: int = Field(ge=0, le=100)
    overview: str
    qualifications: tuple[str, ...] = Field(min_length=1)
    red_flags: tuple[str, ...] = Field(default_factory=tuple)
    strengths: tuple[str, ...] = Field(min_length=1)
    interview_questions: tuple[str, ...] = Field(min_length=1)

    model_config = ConfigDict(frozen=True, extra="forbid")


class CandidateRecord(CandidateAssessment):
    """Assessment enriched with candidate identity."""

    id: int = Field(ge=1)
    display_name: str = Field(min_length=1)
    contact_handle: str
    source_file_name: str

    @property
    def has_red_flags(self) -> bool:
        return bool(self.red_flags)


class DocumentError(BaseModel):
    """Per-document failure captured while building a batch."""

    position: int
    file_name: str
    message: str

    model_config = ConfigDict(frozen=True)


class EvaluationBatch(BaseModel):
    """All candidate records produced from one evaluation run."""

    job: JobDescription
    candidates: tuple[CandidateRecord, ...] = ()
    errors: tuple[DocumentError, ...] = ()
    batch_id: str = Field(default_factory=lambda: uuid.uuid4().hex)
    created_at: datetime = Field(default_factory=pendulum.now)

    model_config = ConfigDict(frozen=True)

    def __len__(self) -> int:
        return len(self.candidates)
