"""Dependency injection container for the screening pipeline."""

from __future__ import annotations

from typing import Any

from dependency_injector import containers, providers

from .core import (
    CandidateEvaluator,
    EvaluationConfig,
    PlaceholderConfig,
    PlaceholderScorer,
    Ranker,
    RankingConfig,
)
from .export import CsvExporter, ExportConfig
from .intake import DocumentIntake, IntakeConfig
from .pipeline import ScreeningPipeline


class ScreeningContainer(containers.DeclarativeContainer):
    """Dependency-injector container definition."""

    scorer = providers.Singleton(PlaceholderScorer)

    evaluator = providers.Singleton(CandidateEvaluator, scorer=scorer)

    ranker = providers.Singleton(Ranker)

    exporter = providers.Singleton(CsvExporter)

    intake = providers.Factory(DocumentIntake)

    pipeline = providers.Factory(
        ScreeningPipeline,
        evaluator=evaluator,
        ranker=ranker,
        exporter=exporter,
        intake_factory=intake.provider,
    )


def create_container(*, settings: dict[str, Any] | None = None) -> ScreeningContainer:
    """Instantiate container with optional per-component overrides."""

    container = ScreeningContainer()

    if not settings:
        return container

    if "scorer" in settings:
        scorer_config = PlaceholderConfig(**_tuples(settings["scorer"]))
        container.scorer.override(
            providers.Singleton(PlaceholderScorer, config=scorer_config)
        )

    if "evaluation" in settings:
        evaluation_config = EvaluationConfig(**settings["evaluation"])
        container.evaluator.override(
            providers.Singleton(
                CandidateEvaluator,
                scorer=container.scorer,
                config=evaluation_config,
            )
        )

    if "ranking" in settings:
        ranking_config = RankingConfig(**settings["ranking"])
        container.ranker.override(providers.Singleton(Ranker, config=ranking_config))

    if "export" in settings:
        export_config = ExportConfig(**settings["export"])
        container.exporter.override(providers.Singleton(CsvExporter, config=export_config))

    if "intake" in settings:
        intake_config = IntakeConfig(**_tuples(settings["intake"]))
        container.intake.override(providers.Factory(DocumentIntake, config=intake_config))

    return container


def _tuples(section: dict[str, Any]) -> dict[str, Any]:
    # YAML has no tuple type; ranges and allow-lists arrive as lists.
    return {key: tuple(value) if isinstance(value, list) else value for key, value in section.items()}
