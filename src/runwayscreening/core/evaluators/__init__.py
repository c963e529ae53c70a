"""Scorer implementations for the evaluation core."""

from .placeholder import PlaceholderConfig, PlaceholderScorer

__all__ = [
    "PlaceholderConfig",
    "PlaceholderScorer",
]
