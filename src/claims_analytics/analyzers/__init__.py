"""Categorization and analytics engine for insurance claims."""

import logging
from collections.abc import Iterable, Mapping
from datetime import date
from typing import Any

from ..errors import EmptyDatasetError
from ..rule_store import RuleStore
from ..schemas.analysis import AnalysisResult, RejectionAnalysis, TrainingSuggestion
from ..schemas.claim import Claim
from .classifier import categorize_rejection, classify_claim, classify_claims, match_score
from .comparison import analyze_comparisons
from .overview import find_rejection_patterns, generate_insights, summarize
from .prediction import analyze_predictions
from .rule_impact import analyze_impact, generate_training_suggestions
from .statistics import analyze_statistics
from .trends import analyze_trends
from .validation import filter_valid_claims, validate_claim

logger = logging.getLogger(__name__)

__all__ = [
    "run_full_analysis",
    "build_analysis_result",
    "match_score",
    "categorize_rejection",
    "classify_claim",
    "classify_claims",
    "analyze_impact",
    "generate_training_suggestions",
    "analyze_statistics",
    "analyze_trends",
    "analyze_comparisons",
    "analyze_predictions",
    "find_rejection_patterns",
    "generate_insights",
    "validate_claim",
    "filter_valid_claims",
]


def run_full_analysis(
    records: Iterable[Claim | Mapping[str, Any]],
    rule_store: RuleStore,
    as_of: date | None = None,
) -> AnalysisResult:
    """Classify claims and compute every analysis as one consistent snapshot.

    Pipeline:
    - Validation: invalid claims are logged and skipped
    - Classification: rejected claims get a medical/technical category
    - Rule impact: rules ranked by estimated savings, plus training suggestions
    - Statistics, trends, comparisons and predictions over all claims

    Raises:
        EmptyDatasetError: if no valid claims remain.
    """
    claims = filter_valid_claims(records)
    if not claims:
        raise EmptyDatasetError("No valid claims to analyze")

    as_of = as_of or date.today()
    claims = classify_claims(claims, rule_store)
    rejected = [c for c in claims if c.is_rejected]

    active_rules = rule_store.all_active_rules()
    rejection_analysis = analyze_impact(rejected, active_rules)

    result = build_analysis_result(
        claims,
        rejection_analysis,
        generate_training_suggestions(rejection_analysis, active_rules),
        as_of,
    )

    logger.info(
        "Analyzed %d claims: %d rejected, %d rules with matches",
        result.total_claims,
        result.rejected_claims,
        len(rejection_analysis),
    )
    return result


def build_analysis_result(
    claims: list[Claim],
    rejection_analysis: list[RejectionAnalysis],
    training_suggestions: list[TrainingSuggestion],
    as_of: date,
) -> AnalysisResult:
    """Assemble the population analyses around already classified claims and ranked rules."""
    return AnalysisResult(
        **summarize(claims),
        claims=claims,
        patterns=find_rejection_patterns(claims),
        insights=generate_insights(claims),
        rejection_analysis=rejection_analysis,
        training_suggestions=training_suggestions,
        statistical_analysis=analyze_statistics(claims),
        trend_analysis=analyze_trends(claims, as_of),
        comparative_analysis=analyze_comparisons(claims, as_of),
        prediction_results=analyze_predictions(claims),
    )
