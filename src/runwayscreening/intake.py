"""Document intake: filtering, capping and submission gating."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

import structlog

from .errors import IncompleteSubmission, RejectedInput
from .schemas import Document, JobDescription
from .text import has_allowed_extension


@dataclass
class IntakeConfig:
    """Acceptance rules for uploaded resumes."""

    allowed_extensions: tuple[str, ...] = (".pdf", ".doc", ".docx", ".txt")
    max_documents: int = 50
    max_file_size_bytes: int | None = None

    def __post_init__(self) -> None:
        self.allowed_extensions = tuple(
            ext if ext.startswith(".") else f".{ext}" for ext in self.allowed_extensions
        )


@dataclass(frozen=True, slots=True)
class Submission:
    """Validated hand-off from intake to evaluation."""

    job: JobDescription
    documents: tuple[Document, ...]


class DocumentIntake:
    """Collect candidate documents ahead of an evaluation run."""

    def __init__(self, *, config: IntakeConfig | None = None) -> None:
        self._config = config or IntakeConfig()
        self._documents: list[Document] = []
        self._rejected: list[RejectedInput] = []
        self._logger = structlog.get_logger(__name__)

    @property
    def documents(self) -> tuple[Document, ...]:
        return tuple(self._documents)

    @property
    def rejected(self) -> tuple[RejectedInput, ...]:
        return tuple(self._rejected)

    @property
    def remaining_capacity(self) -> int:
        return max(self._config.max_documents - len(self._documents), 0)

    def __len__(self) -> int:
        return len(self._documents)

    def accept(self, files: Iterable[Document]) -> list[Document]:
        """Add allowed files up to the cap and return the ones newly accepted."""
        accepted: list[Document] = []
        dropped = 0
        for document in files:
            reason = self._rejection_reason(document)
            if reason is not None:
                self._rejected.append(RejectedInput(document.file_name, reason))
                self._logger.debug(
                    "intake.rejected", file_name=document.file_name, reason=reason
                )
                continue
            if not self.remaining_capacity:
                dropped += 1
                continue
            self._documents.append(document)
            accepted.append(document)

        if dropped:
            self._logger.warning(
                "intake.cap_reached",
                max_documents=self._config.max_documents,
                dropped=dropped,
            )
        return accepted

    def remove(self, index: int) -> Document:
        """Remove a held document by position."""
        return self._documents.pop(index)

    def clear(self) -> None:
        self._documents.clear()
        self._rejected.clear()

    def missing_requirements(self, job_text: str) -> list[str]:
        reasons: list[str] = []
        if not job_text.strip():
            reasons.append("job description is empty")
        if not self._documents:
            reasons.append("no documents accepted")
        return reasons

    def can_submit(self, job_text: str) -> bool:
        return not self.missing_requirements(job_text)

    def submit(self, job_text: str) -> Submission:
        reasons = self.missing_requirements(job_text)
        if reasons:
            raise IncompleteSubmission(reasons)
        submission = Submission(
            job=JobDescription(text=job_text),
            documents=tuple(self._documents),
        )
        self._logger.info(
            "intake.submitted",
            role_title=submission.job.role_title,
            document_count=len(submission.documents),
        )
        return submission

    def _rejection_reason(self, document: Document) -> str | None:
        if not has_allowed_extension(document.file_name, self._config.allowed_extensions):
            return "unsupported file type"
        limit = self._config.max_file_size_bytes
        if limit is not None and document.size_bytes > limit:
            return "file too large"
        return None


__all__ = ["DocumentIntake", "IntakeConfig", "Submission"]
