"""Placeholder scorer producing randomized assessments."""

from __future__ import annotations

import random
from dataclasses import dataclass, field

from ...schemas import CandidateAssessment, Document, JobDescription

DEFAULT_RED_FLAGS: tuple[str, ...] = (
    "Missing required experience",
    "Gap in employment history",
)
DEFAULT_STRENGTHS: tuple[str, ...] = (
    "Strong technical background",
    "Relevant industry experience",
    "Good communication skills",
    "Problem-solving abilities",
)
DEFAULT_INTERVIEW_QUESTIONS: tuple[str, ...] = (
    "Tell me about your experience with the technologies mentioned in your resume.",
    "How do you handle challenging projects with tight deadlines?",
    "What interests you most about this role and our company?",
    "Describe a complex problem you solved and your approach.",
)
DEFAULT_QUALIFICATIONS: tuple[str, ...] = (
    "Bachelor's degree in related field",
    "Strong technical skills in required technologies",
    "Proven track record of successful projects",
)


@dataclass
class PlaceholderConfig:
    """Tunable constants for the placeholder scorer.

    Ranges are inclusive on both ends.
    """

    score_range: tuple[int, int] = (60, 99)
    match_range: tuple[int, int] = (70, 99)
    red_flag_probability: float = 0.3
    experience_years_range: tuple[int, int] = (2, 9)
    excellent_threshold: int = 80
    strong_threshold: int = 70
    seed: int | None = None
    red_flags: tuple[str, ...] = field(default=DEFAULT_RED_FLAGS)

    def __post_init__(self) -> None:
        for name in ("score_range", "match_range", "experience_years_range"):
            low, high = getattr(self, name)
            if low > high:
                raise ValueError(f"{name} lower bound exceeds upper bound")
            setattr(self, name, (int(low), int(high)))
        if not 0.0 <= self.red_flag_probability <= 1.0:
            raise ValueError("red_flag_probability must be within [0, 1]")
        self.red_flags = tuple(self.red_flags)


class PlaceholderScorer:
    """Stand-in for a real resume model.

    Scores are drawn uniformly from the configured ranges and the narrative is
    banded by score. Document content is ignored.
    """

    method = "placeholder"

    def __init__(self, *, config: PlaceholderConfig | None = None) -> None:
        self._config = config or PlaceholderConfig()
        self._rng = random.Random()

    @property
    def config(self) -> PlaceholderConfig:
        return self._config

    def assess(
        self,
        *,
        job: JobDescription,
        document: Document,
        display_name: str,
    ) -> CandidateAssessment:
        rng = self._rng_for(document)
        score = rng.randint(*self._config.score_range)
        match_percentage = rng.randint(*self._config.match_range)
        years = rng.randint(*self._config.experience_years_range)
        flagged = rng.random() < self._config.red_flag_probability

        return CandidateAssessment(
            score=score,
            match_percentage=match_percentage,
            overview=self.overview(display_name, score),
            qualifications=(f"{years}+ years of relevant experience", *DEFAULT_QUALIFICATIONS),
            red_flags=self._config.red_flags if flagged else (),
            strengths=DEFAULT_STRENGTHS,
            interview_questions=DEFAULT_INTERVIEW_QUESTIONS,
        )

    def overview(self, name: str, score: int) -> str:
        if score >= self._config.excellent_threshold:
            alignment, competency = "excellent", "exceptional"
            verdict = "Highly recommended for interview."
        elif score >= self._config.strong_threshold:
            alignment, competency = "strong", "solid"
            verdict = "Good candidate worth considering."
        else:
            alignment, competency = "adequate", "solid"
            verdict = "May require additional evaluation."
        return (
            f"{name} demonstrates {alignment} alignment with the role requirements. "
            f"Shows {competency} technical competencies and relevant experience. {verdict}"
        )

    def _rng_for(self, document: Document) -> random.Random:
        if self._config.seed is None:
            return self._rng
        # per-document stream keeps seeded runs stable under concurrent scoring
        return random.Random(f"{self._config.seed}:{document.file_name}")
