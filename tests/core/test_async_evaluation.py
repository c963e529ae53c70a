from __future__ import annotations

import asyncio

import pytest

from runwayscreening.core import CandidateEvaluator, EvaluationConfig, PlaceholderConfig, PlaceholderScorer
from runwayscreening.errors import EvaluationCancelled
from runwayscreening.schemas import Document, JobDescription

JOB = JobDescription(text="Platform Engineer")


def documents(count: int) -> list[Document]:
    return [Document(file_name=f"candidate-{idx:02d}.pdf") for idx in range(count)]


def test_evaluate_async_preserves_input_order():
    evaluator = CandidateEvaluator(
        PlaceholderScorer(config=PlaceholderConfig(seed=7)),
        config=EvaluationConfig(concurrency=3),
    )
    docs = documents(10)

    batch = asyncio.run(evaluator.evaluate_async(JOB, docs))

    assert [record.source_file_name for record in batch.candidates] == [doc.file_name for doc in docs]
    assert [record.id for record in batch.candidates] == list(range(1, 11))


def test_seeded_async_matches_sequential_scores():
    scorer = PlaceholderScorer(config=PlaceholderConfig(seed=11))
    evaluator = CandidateEvaluator(scorer, config=EvaluationConfig(concurrency=4))
    docs = documents(8)

    sequential = evaluator.evaluate(JOB, docs)
    concurrent = asyncio.run(evaluator.evaluate_async(JOB, docs))

    assert [r.score for r in sequential.candidates] == [r.score for r in concurrent.candidates]


def test_evaluation_task_completes():
    evaluator = CandidateEvaluator(PlaceholderScorer())
    completed: list[bool] = []

    async def scenario():
        task = evaluator.start(JOB, documents(3))
        task.add_done_callback(lambda handle: completed.append(handle.done()))
        batch = await task.result()
        await asyncio.sleep(0)
        return task, batch

    task, batch = asyncio.run(scenario())

    assert task.done()
    assert not task.cancelled()
    assert len(batch.candidates) == 3
    assert completed == [True]


def test_cancelled_evaluation_discards_partial_results():
    evaluator = CandidateEvaluator(
        PlaceholderScorer(),
        config=EvaluationConfig(concurrency=1, simulated_delay_seconds=0.05),
    )

    async def scenario():
        task = evaluator.start(JOB, documents(20))
        await asyncio.sleep(0.06)
        task.cancel()
        with pytest.raises(EvaluationCancelled):
            await task.result()
        return task

    task = asyncio.run(scenario())

    assert task.cancelled()


def test_start_requires_running_loop():
    evaluator = CandidateEvaluator(PlaceholderScorer())

    with pytest.raises(RuntimeError):
        evaluator.start(JOB, documents(1))
