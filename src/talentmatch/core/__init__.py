"""Core matching engine: posting parser, match scorer and profile checks."""

from __future__ import annotations

from .match import MatchFactor, MatchResult, Recommendation, round_half_up
from .parser import PostingParser, PostingParserConfig, parse_job_posting
from .scoring import Factor, MatchScorer, RecommendationRule, default_factors, score_match
from .completeness import CompletenessReport, ProfileCompletenessAnalyzer, analyze_profile


__all__ = [
    "Factor",
    "MatchFactor",
    "MatchResult",
    "Recommendation",
    "round_half_up",
    "PostingParser",
    "PostingParserConfig",
    "parse_job_posting",
    "MatchScorer",
    "RecommendationRule",
    "default_factors",
    "score_match",
    "CompletenessReport",
    "ProfileCompletenessAnalyzer",
    "analyze_profile",
]
