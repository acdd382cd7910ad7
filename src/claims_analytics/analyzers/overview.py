"""Headline totals, rejection patterns and reviewer insights."""

from collections import defaultdict

from ..config import (
    HIGH_OVERALL_REJECTION_RATE,
    INDUSTRY_AVERAGE_REJECTION_RATE,
    PROBLEM_PROVIDER_MIN_CLAIMS,
    PROBLEM_PROVIDER_REJECTION_RATE,
    RECOVERABLE_SHARE,
)
from ..schemas.analysis import InsightData, RejectionPattern
from ..schemas.claim import Claim
from ..schemas.common import (
    ClaimStatus,
    ImpactLevel,
    InsightCategory,
    Priority,
    RejectionCategory,
    TrendDirection,
)
from .comparison import category_trends
from .statistics import percentage


def summarize(claims: list[Claim]) -> dict:
    """Headline counts and rates for the claim population."""
    rejected = sum(1 for c in claims if c.is_rejected)
    return {
        "total_claims": len(claims),
        "total_amount": sum(c.amount for c in claims),
        "rejected_claims": rejected,
        "pending_claims": sum(1 for c in claims if c.status == ClaimStatus.PENDING),
        "rejection_rate": percentage(rejected, len(claims)),
        "avg_processing_time": (
            sum(c.processing_time for c in claims) / len(claims) if claims else 0.0
        ),
    }


def find_rejection_patterns(claims: list[Claim]) -> list[RejectionPattern]:
    """Count categorized rejections per subcategory, medical first.

    Impact is relative to all rejected claims: high above 10%, medium above 5%.
    """
    rejected = [c for c in claims if c.is_rejected]
    counts: dict[tuple, int] = defaultdict(int)
    for claim in rejected:
        if claim.rejection_category in (RejectionCategory.MEDICAL, RejectionCategory.TECHNICAL):
            counts[(claim.rejection_category, claim.rejection_subcategory or "Other")] += 1

    trends = category_trends(rejected)
    patterns = [
        RejectionPattern(
            category=category,
            subcategory=subcategory,
            count=count,
            percentage=percentage(count, len(rejected)),
            trend=trends.get((category, subcategory), TrendDirection.STABLE),
            impact=_pattern_impact(count, len(rejected)),
        )
        for (category, subcategory), count in counts.items()
    ]
    patterns.sort(key=lambda p: (p.category != RejectionCategory.MEDICAL, -p.count))
    return patterns


def generate_insights(claims: list[Claim]) -> list[InsightData]:
    """Data-driven recommendations for reducing rejections."""
    insights: list[InsightData] = []
    if not claims:
        return insights

    rejected = [c for c in claims if c.is_rejected]
    rejection_rate = percentage(len(rejected), len(claims))

    if rejection_rate > HIGH_OVERALL_REJECTION_RATE:
        total_amount = sum(c.amount for c in claims)
        recoverable = (
            (rejection_rate - INDUSTRY_AVERAGE_REJECTION_RATE) / 100 * total_amount * RECOVERABLE_SHARE
        )
        insights.append(
            InsightData(
                id="high-rejection-rate",
                title="High Overall Rejection Rate Detected",
                description=(
                    f"Current rejection rate is {rejection_rate:.1f}%, significantly above the "
                    f"market average of {INDUSTRY_AVERAGE_REJECTION_RATE:.0f}%. This represents "
                    "potential revenue loss and operational inefficiency."
                ),
                category=InsightCategory.ACTIONABLE,
                priority=Priority.HIGH,
                action_items=[
                    "Review and update pre-submission validation processes",
                    "Create feedback loop with insurance companies",
                    "Implement real-time claim validation system",
                    "Focus training on top rejection categories",
                ],
                estimated_impact=(
                    f"Reducing rejection rate to {INDUSTRY_AVERAGE_REJECTION_RATE:.0f}% could save "
                    f"approximately {recoverable:,.0f} SAR annually"
                ),
                timeline="3-6 months",
            )
        )

    medical = sum(1 for c in rejected if c.rejection_category == RejectionCategory.MEDICAL)
    technical = sum(1 for c in rejected if c.rejection_category == RejectionCategory.TECHNICAL)
    if technical > medical:
        insights.append(
            InsightData(
                id="technical-focus",
                title="Technical Rejections Dominate",
                description=(
                    f"{percentage(technical, len(rejected)):.1f}% of rejections are "
                    "technical/administrative. These are typically easier to resolve than "
                    "medical rejections."
                ),
                category=InsightCategory.ACTIONABLE,
                priority=Priority.HIGH,
                action_items=[
                    "Audit data entry processes and accuracy",
                    "Implement automated validation checks",
                    "Train staff on proper coding and documentation",
                    "Establish real-time claim validation system",
                ],
                estimated_impact="Could reduce technical rejections by 60-80%",
                timeline="1-3 months",
            )
        )

    problem_providers = _problem_providers(claims)
    if problem_providers:
        insights.append(
            InsightData(
                id="provider-training",
                title="Specific Providers Need Focused Training",
                description=(
                    f"{len(problem_providers)} provider(s) have rejection rates above "
                    f"{PROBLEM_PROVIDER_REJECTION_RATE:.0f}%. Targeted training could "
                    "significantly improve overall performance."
                ),
                category=InsightCategory.ACTIONABLE,
                priority=Priority.MEDIUM,
                action_items=[
                    "Schedule one-on-one training sessions with high-rejection providers",
                    "Create provider-specific rejection reports",
                    "Implement monthly performance reviews",
                    "Establish best practice sharing sessions",
                ],
                estimated_impact="Could reduce provider-specific rejections by 40-60%",
                timeline="2-4 months",
            )
        )

    return insights


def _pattern_impact(count: int, rejected_total: int) -> ImpactLevel:
    if count * 10 > rejected_total:
        return ImpactLevel.HIGH
    if count * 20 > rejected_total:
        return ImpactLevel.MEDIUM
    return ImpactLevel.LOW


def _problem_providers(claims: list[Claim]) -> list[str]:
    """Providers with more than 10 claims and a rejection rate above 30%."""
    totals: dict[str, list[int]] = defaultdict(lambda: [0, 0])
    for claim in claims:
        totals[claim.provider_name or claim.provider_id][0] += 1
        if claim.is_rejected:
            totals[claim.provider_name or claim.provider_id][1] += 1

    return [
        provider
        for provider, (total, rejected) in totals.items()
        if total > PROBLEM_PROVIDER_MIN_CLAIMS
        and percentage(rejected, total) > PROBLEM_PROVIDER_REJECTION_RATE
    ]
