"""Batch construction around a pluggable candidate scorer."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, Iterable, Sequence

import structlog

from ..errors import EvaluationCancelled, InvalidDocument
from ..schemas import (
    CandidateAssessment,
    CandidateRecord,
    Document,
    DocumentError,
    EvaluationBatch,
    JobDescription,
)
from ..text import DEFAULT_CONTACT_DOMAIN, contact_handle, display_name

if TYPE_CHECKING:
    from . import CandidateScorer


@dataclass
class EvaluationConfig:
    """Execution settings for batch evaluation."""

    concurrency: int = 4
    simulated_delay_seconds: float = 0.0
    contact_domain: str = DEFAULT_CONTACT_DOMAIN


class EvaluationTask:
    """Handle on an in-flight asynchronous evaluation.

    Awaiting :meth:`result` is the completion signal. A cancelled task never
    yields a partial batch.
    """

    def __init__(self, task: asyncio.Task[EvaluationBatch]) -> None:
        self._task = task

    def cancel(self) -> bool:
        return self._task.cancel()

    def cancelled(self) -> bool:
        return self._task.cancelled()

    def done(self) -> bool:
        return self._task.done()

    def add_done_callback(self, callback: Callable[[EvaluationTask], Any]) -> None:
        self._task.add_done_callback(lambda _: callback(self))

    async def result(self) -> EvaluationBatch:
        try:
            return await self._task
        except asyncio.CancelledError as exc:
            if self._task.cancelled():
                raise EvaluationCancelled("Evaluation was cancelled") from exc
            raise


class CandidateEvaluator:
    """Map documents to candidate records through a scorer."""

    def __init__(
        self,
        scorer: CandidateScorer,
        *,
        config: EvaluationConfig | None = None,
    ) -> None:
        self._scorer = scorer
        self._config = config or EvaluationConfig()
        self._logger = structlog.get_logger(__name__)

    @property
    def scorer(self) -> CandidateScorer:
        return self._scorer

    def evaluate_one(
        self,
        job: JobDescription,
        document: Document,
        position: int,
    ) -> CandidateRecord:
        """Score a single document; ``position`` is its 1-based input index."""
        if not document.file_name.strip():
            raise InvalidDocument(document.file_name, "Document has no file name")
        name = display_name(document.file_name)
        if not name:
            raise InvalidDocument(
                document.file_name,
                f"File name {document.file_name!r} yields an empty display name",
            )

        raw = self._scorer.assess(job=job, document=document, display_name=name)
        assessment = CandidateAssessment.model_validate(raw)
        return CandidateRecord(
            id=position,
            display_name=name,
            contact_handle=contact_handle(name, self._config.contact_domain),
            source_file_name=document.file_name,
            **assessment.model_dump(),
        )

    def evaluate(
        self,
        job: JobDescription,
        documents: Iterable[Document],
    ) -> EvaluationBatch:
        outcomes = [
            self._evaluate_or_error(job, document, position)
            for position, document in enumerate(documents, start=1)
        ]
        return self._build_batch(job, outcomes)

    async def evaluate_async(
        self,
        job: JobDescription,
        documents: Iterable[Document],
    ) -> EvaluationBatch:
        """Score documents concurrently in worker threads, keeping input order."""
        semaphore = asyncio.Semaphore(max(self._config.concurrency, 1))
        delay = self._config.simulated_delay_seconds

        async def run_one(position: int, document: Document) -> CandidateRecord | DocumentError:
            async with semaphore:
                if delay > 0:
                    await asyncio.sleep(delay)
                return await asyncio.to_thread(
                    self._evaluate_or_error, job, document, position
                )

        outcomes = await asyncio.gather(
            *(run_one(position, document) for position, document in enumerate(documents, start=1))
        )
        return self._build_batch(job, outcomes)

    def start(
        self,
        job: JobDescription,
        documents: Iterable[Document],
    ) -> EvaluationTask:
        """Schedule an evaluation on the running event loop."""
        loop = asyncio.get_running_loop()
        return EvaluationTask(loop.create_task(self.evaluate_async(job, list(documents))))

    def _evaluate_or_error(
        self,
        job: JobDescription,
        document: Document,
        position: int,
    ) -> CandidateRecord | DocumentError:
        try:
            return self.evaluate_one(job, document, position)
        except InvalidDocument as exc:
            self._logger.warning(
                "evaluation.document_failed",
                position=position,
                file_name=exc.file_name,
                error=str(exc),
            )
            return DocumentError(position=position, file_name=exc.file_name, message=str(exc))

    def _build_batch(
        self,
        job: JobDescription,
        outcomes: Sequence[CandidateRecord | DocumentError],
    ) -> EvaluationBatch:
        batch = EvaluationBatch(
            job=job,
            candidates=tuple(item for item in outcomes if isinstance(item, CandidateRecord)),
            errors=tuple(item for item in outcomes if isinstance(item, DocumentError)),
        )
        self._logger.info(
            "evaluation.completed",
            batch_id=batch.batch_id,
            scorer=getattr(self._scorer, "method", type(self._scorer).__name__),
            candidate_count=len(batch.candidates),
            error_count=len(batch.errors),
        )
        return batch
