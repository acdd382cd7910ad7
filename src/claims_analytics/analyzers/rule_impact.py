"""Rule impact ranking and provider training suggestions."""

import logging

from ..config import (
    CURRENCY,
    IMPACT_MATCH_THRESHOLD,
    MAX_TRAINING_SUGGESTIONS,
    MEDICAL_PATTERN_MIN_MATCHES,
    RECOVERY_RATES,
)
from ..schemas.analysis import RejectionAnalysis, TrainingSuggestion
from ..schemas.claim import Claim
from ..schemas.common import Priority, RejectionCategory, RuleSeverity
from ..schemas.rule import RejectionRule
from .classifier import match_score

logger = logging.getLogger(__name__)


def analyze_impact(
    rejected_claims: list[Claim],
    active_rules: list[RejectionRule],
) -> list[RejectionAnalysis]:
    """Match rejected claims against every rule and rank rules by combined impact.

    A claim matches a rule scoring above 0.6, a looser threshold than
    classification. Rules without matches are omitted. Ranking is by
    ``estimated_savings * len(matches)``, descending, keeping rule order on ties.
    """
    analyses: list[RejectionAnalysis] = []

    for rule in active_rules:
        scored: list[tuple[Claim, float]] = []
        for claim in rejected_claims:
            if not _applies_to(rule, claim):
                continue
            score = match_score(claim.rejection_reason or "", claim.codes, rule)
            if score > IMPACT_MATCH_THRESHOLD:
                scored.append((claim, score))

        if not scored:
            continue

        matches = [claim for claim, _ in scored]
        analyses.append(
            RejectionAnalysis(
                rule_id=rule.id,
                rule_name=rule.name,
                matches=matches,
                confidence=sum(score for _, score in scored) / len(scored),
                suggested_action=rule.fix_suggestion,
                estimated_savings=_estimated_savings(matches, rule),
            )
        )

    analyses.sort(key=lambda a: a.impact_score, reverse=True)

    logger.info(
        "%d of %d rules matched %d rejected claims",
        len(analyses),
        len(active_rules),
        len(rejected_claims),
    )
    return analyses


def generate_training_suggestions(
    analyses: list[RejectionAnalysis],
    rules: list[RejectionRule],
) -> list[TrainingSuggestion]:
    """Derive up to 10 training suggestions, highest priority first."""
    rules_by_id = {r.id: r for r in rules}
    suggestions: list[TrainingSuggestion] = []

    # One suggestion per critical/high severity rule
    for analysis in analyses:
        rule = rules_by_id.get(analysis.rule_id)
        if rule is None or rule.severity not in (RuleSeverity.CRITICAL, RuleSeverity.HIGH):
            continue
        suggestions.append(
            TrainingSuggestion(
                priority=Priority.HIGH,
                title=f"Address {rule.name} Issues",
                description=f"{len(analysis.matches)} claims affected by {rule.description}",
                action_items=[
                    rule.fix_suggestion,
                    "Review and update staff training materials",
                    "Implement additional quality checks",
                    "Monitor progress weekly",
                ],
                estimated_impact=f"Potential savings: {_format_currency(analysis.estimated_savings)}",
            )
        )

    suggestions.extend(_pattern_suggestions(analyses, rules_by_id))

    priority_order = {Priority.HIGH: 0, Priority.MEDIUM: 1, Priority.LOW: 2}
    suggestions.sort(key=lambda s: priority_order[s.priority])

    return suggestions[:MAX_TRAINING_SUGGESTIONS]


def _applies_to(rule: RejectionRule, claim: Claim) -> bool:
    return not rule.provider_specific or claim.provider_id == rule.provider_id


def _estimated_savings(matches: list[Claim], rule: RejectionRule) -> float:
    if not rule.auto_fix:
        return 0.0
    total_amount = sum(c.amount for c in matches)
    return total_amount * RECOVERY_RATES[rule.severity]


def _pattern_suggestions(
    analyses: list[RejectionAnalysis],
    rules_by_id: dict[str, RejectionRule],
) -> list[TrainingSuggestion]:
    """Category-level suggestions from the mix of matched medical and technical rules."""
    categories = [
        rules_by_id[a.rule_id].category for a in analyses if a.rule_id in rules_by_id
    ]
    medical_count = categories.count(RejectionCategory.MEDICAL)
    technical_count = categories.count(RejectionCategory.TECHNICAL)

    suggestions: list[TrainingSuggestion] = []
    if technical_count > medical_count:
        suggestions.append(
            TrainingSuggestion(
                priority=Priority.MEDIUM,
                title="Improve Technical Process Improvement Processes",
                description="High number of technical rejections indicates system or process issues",
                action_items=[
                    "Review data entry procedures",
                    "Implement additional validation checks",
                    "Train staff on proper coding practices",
                    "Upgrade system integrations",
                ],
                estimated_impact="High - Technical issues are often easily preventable",
            )
        )
    if medical_count > MEDICAL_PATTERN_MIN_MATCHES:
        suggestions.append(
            TrainingSuggestion(
                priority=Priority.MEDIUM,
                title="Improve Clinical Documentation Processes",
                description="Significant medical rejections suggest documentation or authorization issues",
                action_items=[
                    "Enhance prior authorization processes",
                    "Improve clinical documentation training",
                    "Implement clinical decision support tools",
                    "Review medical necessity criteria",
                ],
                estimated_impact="Medium - Requires clinical workflow changes",
            )
        )
    return suggestions


def _format_currency(amount: float) -> str:
    return f"{CURRENCY} {amount:,.0f}"
