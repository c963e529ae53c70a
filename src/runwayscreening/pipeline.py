"""Screening pipeline assembly and execution."""

from __future__ import annotations

import json
import mimetypes
import uuid
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Iterable

import pendulum
import structlog

from . import __version__
from .core import BatchSummary, CandidateEvaluator, Ranker
from .errors import RejectedInput
from .export import CsvExporter
from .intake import DocumentIntake
from .logging import bind_run, clear_run
from .schemas import CandidateRecord, Document, EvaluationBatch, JobDescription


class DocumentLoader:
    """Read resume files from disk into documents.

    Directories are expanded one level deep in name order; content is loaded
    but never interpreted.
    """

    def load(self, paths: Iterable[Path]) -> list[Document]:
        documents: list[Document] = []
        for path in paths:
            path = Path(path)
            if path.is_dir():
                documents.extend(
                    self._read(child)
                    for child in sorted(path.iterdir(), key=lambda p: p.name)
                    if child.is_file()
                )
            else:
                documents.append(self._read(path))
        return documents

    @staticmethod
    def _read(path: Path) -> Document:
        content = path.read_bytes()
        mime_type, _ = mimetypes.guess_type(path.name)
        return Document(
            file_name=path.name,
            mime_type=mime_type,
            size_bytes=len(content),
            content=content,
        )


class JobLoader:
    """Load a job description from a text file."""

    def load(self, path: Path) -> JobDescription:
        try:
            text = path.read_text(encoding="utf-8")
        except UnicodeDecodeError as exc:
            raise ValueError(f"Job description must be UTF-8 text: {exc}") from exc
        return JobDescription(text=text)


class OutputWriter:
    """Persist the dashboard payload."""

    def write(self, path: Path, payload: dict | list[dict]) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(
            json.dumps(payload, ensure_ascii=False, indent=2),
            encoding="utf-8",
        )


@dataclass(slots=True)
class ScreeningReport:
    """Everything one pipeline run produced."""

    batch: EvaluationBatch
    ranked: list[CandidateRecord]
    summary: BatchSummary
    rejected: list[RejectedInput] = field(default_factory=list)
    export_path: Path | None = None

    @property
    def top_candidate(self) -> CandidateRecord | None:
        return self.ranked[0] if self.ranked else None


class ScreeningPipeline:
    """End-to-end orchestrator: intake, evaluation, ranking, export."""

    def __init__(
        self,
        *,
        evaluator: CandidateEvaluator,
        ranker: Ranker,
        exporter: CsvExporter,
        intake_factory: Callable[[], DocumentIntake] = DocumentIntake,
        document_loader: DocumentLoader | None = None,
        job_loader: JobLoader | None = None,
        writer: OutputWriter | None = None,
    ) -> None:
        self._evaluator = evaluator
        self._ranker = ranker
        self._exporter = exporter
        self._intake_factory = intake_factory
        self._documents = document_loader or DocumentLoader()
        self._jobs = job_loader or JobLoader()
        self._writer = writer or OutputWriter()
        self._logger = structlog.get_logger(__name__)

    def run(
        self,
        *,
        job_path: Path,
        resume_paths: Iterable[Path],
        output_path: Path,
        export_dir: Path | None = None,
    ) -> ScreeningReport:
        job = self._jobs.load(job_path)
        intake = self._intake_factory()
        intake.accept(self._documents.load(resume_paths))
        submission = intake.submit(job.text)

        run_id = uuid.uuid4().hex
        bind_run(run_id, role_title=submission.job.role_title)
        try:
            batch = self._evaluator.evaluate(submission.job, submission.documents)
            bind_run(run_id, batch_id=batch.batch_id)
            report = self._report(batch, rejected=list(intake.rejected))
            if export_dir is not None and report.ranked:
                report.export_path = self._exporter.write(
                    export_dir, batch.job, report.ranked
                )
            self._writer.write(output_path, self._payload(report))
            self._logger.info(
                "screening.completed",
                role_title=batch.job.role_title,
                candidate_count=report.summary.total_candidates,
                average_score=report.summary.average_score,
                rejected_count=len(report.rejected),
            )
        finally:
            clear_run()
        return report

    def _report(self, batch: EvaluationBatch, *, rejected: list[RejectedInput]) -> ScreeningReport:
        return ScreeningReport(
            batch=batch,
            ranked=self._ranker.rank(batch),
            summary=self._ranker.summarize(batch),
            rejected=rejected,
        )

    @staticmethod
    def _payload(report: ScreeningReport) -> dict[str, Any]:
        batch = report.batch
        metadata = {
            "batch_id": batch.batch_id,
            "role_title": batch.job.role_title,
            "candidate_count": len(batch.candidates),
            "rejected": [
                {"file_name": item.file_name, "reason": item.reason}
                for item in report.rejected
            ],
            "errors": [error.model_dump(mode="json") for error in batch.errors],
            "export_path": str(report.export_path) if report.export_path else None,
            "timestamp": pendulum.now().to_iso8601_string(),
            "app_version": __version__,
        }
        results = [
            {"rank": rank, **record.model_dump(mode="json")}
            for rank, record in enumerate(report.ranked, start=1)
        ]
        return {
            "metadata": metadata,
            "summary": {
                "total_candidates": report.summary.total_candidates,
                "average_score": report.summary.average_score,
                "top_candidate_count": report.summary.top_candidate_count,
                "flagged_candidate_count": report.summary.flagged_candidate_count,
            },
            "results": results,
        }
