"""Error taxonomy for intake, evaluation and export."""

from __future__ import annotations

from dataclasses import dataclass


class ScreeningError(Exception):
    """Base class for recoverable screening failures."""


@dataclass(frozen=True, slots=True)
class RejectedInput:
    """A file filtered out by intake. Recorded, never raised."""

    file_name: str
    reason: str


class InvalidDocument(ScreeningError, ValueError):
    """Raised when a document cannot be identified (blank name)."""

    def __init__(self, file_name: str, message: str) -> None:
        super().__init__(message)
        self.file_name = file_name


class IncompleteSubmission(ScreeningError, ValueError):
    """Raised when intake is submitted without a job description or documents."""

    def __init__(self, reasons: list[str]) -> None:
        super().__init__("Submission incomplete")
        self.reasons = reasons

    def __str__(self) -> str:
        return f"Submission incomplete: {'; '.join(self.reasons)}"


class ExportFailure(ScreeningError, RuntimeError):
    """Raised when a well-formed export artifact cannot be produced."""


class EvaluationCancelled(ScreeningError):
    """Raised when awaiting an evaluation task that was cancelled."""


__all__ = [
    "EvaluationCancelled",
    "ExportFailure",
    "IncompleteSubmission",
    "InvalidDocument",
    "RejectedInput",
    "ScreeningError",
]
