from __future__ import annotations

import random
from typing import Any

import pytest

from runwayscreening.core import Ranker, RankingConfig, rank_candidates, summarize
from runwayscreening.core.ranking import round_half_up
from runwayscreening.schemas import CandidateRecord, EvaluationBatch, JobDescription


def build_record(idx: int, score: int, **kwargs: Any) -> CandidateRecord:
    defaults: dict[str, Any] = {
        "id": idx,
        "display_name": f"candidate {idx}",
        "contact_handle": f"candidate.{idx}@email.com",
        "source_file_name": f"candidate-{idx}.pdf",
        "score": score,
        "match_percentage": 80,
        "overview": "ok",
        "qualifications": ["q"],
        "red_flags": [],
        "strengths": ["s"],
        "interview_questions": ["i"],
    }
    defaults.update(kwargs)
    return CandidateRecord(**defaults)


def build_batch(records: list[CandidateRecord]) -> EvaluationBatch:
    return EvaluationBatch(job=JobDescription(text="Analyst"), candidates=tuple(records))


def test_rank_sorts_descending_and_is_stable():
    records = [
        build_record(1, 70),
        build_record(2, 90),
        build_record(3, 70),
        build_record(4, 90),
        build_record(5, 60),
    ]

    ranked = rank_candidates(build_batch(records))

    assert [record.id for record in ranked] == [2, 4, 1, 3, 5]


def test_rank_does_not_mutate_batch():
    batch = build_batch([build_record(1, 60), build_record(2, 95)])

    rank_candidates(batch)

    assert [record.id for record in batch.candidates] == [1, 2]


def test_ranking_property_over_random_batches():
    rng = random.Random(3)
    for _ in range(25):
        records = [build_record(idx, rng.randint(60, 65)) for idx in range(1, 30)]
        ranked = rank_candidates(records)
        for first, second in zip(ranked, ranked[1:]):
            assert first.score >= second.score
            if first.score == second.score:
                assert first.id < second.id


def test_summary_aggregates():
    records = [
        build_record(1, 80, red_flags=["Gap in employment history"]),
        build_record(2, 79),
        build_record(3, 92),
        build_record(4, 61, red_flags=["Missing required experience"]),
    ]

    summary = summarize(build_batch(records))

    assert summary.total_candidates == 4
    assert summary.average_score == round_half_up((80 + 79 + 92 + 61) / 4)
    assert summary.average_score == 78
    assert summary.top_candidate_count == 2
    assert summary.flagged_candidate_count == 2


def test_summary_is_order_independent():
    records = [build_record(idx, score) for idx, score in enumerate([61, 99, 85, 70, 80], start=1)]
    batch = build_batch(records)

    assert summarize(batch) == summarize(rank_candidates(batch))


def test_average_rounds_half_up():
    records = [build_record(1, 70), build_record(2, 71)]

    assert summarize(records).average_score == 71
    assert round_half_up(70.49) == 70


def test_summary_of_empty_batch():
    summary = summarize(build_batch([]))

    assert summary.total_candidates == 0
    assert summary.average_score == 0
    assert summary.top_candidate_count == 0


def test_ranker_uses_configured_threshold():
    ranker = Ranker(config=RankingConfig(top_score_threshold=90))
    batch = build_batch([build_record(1, 85), build_record(2, 95)])

    assert ranker.summarize(batch).top_candidate_count == 1
    assert [record.id for record in ranker.rank(batch)] == [2, 1]


@pytest.mark.parametrize("threshold", [0, 100])
def test_threshold_extremes(threshold: int):
    records = [build_record(1, 0), build_record(2, 100)]

    summary = summarize(records, config=RankingConfig(top_score_threshold=threshold))

    assert summary.top_candidate_count == (2 if threshold == 0 else 1)
