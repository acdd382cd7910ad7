"""Provider ranking, rejection category frequency and period-over-period comparison."""

from collections import defaultdict
from datetime import date, timedelta

from ..config import (
    COMPARISON_PERIOD_DAYS,
    HIGH_IMPACT_FREQUENCY,
    INDUSTRY_AVERAGE_REJECTION_RATE,
    LOW_IMPACT_FREQUENCY,
)
from ..schemas.analysis import (
    CategoryComparison,
    ComparativeAnalysis,
    PeriodSummary,
    ProviderComparison,
    TimeComparison,
)
from ..schemas.claim import Claim
from ..schemas.common import BenchmarkComparison, ImpactLevel, TrendDirection
from .statistics import percentage
from .trends import group_by_month, trend_direction


def analyze_comparisons(claims: list[Claim], as_of: date | None = None) -> ComparativeAnalysis:
    """Compare providers against the benchmark, categories by frequency, and the last two 30-day windows."""
    return ComparativeAnalysis(
        provider_comparison=compare_providers(claims),
        category_comparison=compare_categories(claims),
        time_comparison=compare_periods(claims, as_of or date.today()),
    )


def compare_providers(claims: list[Claim]) -> list[ProviderComparison]:
    """Rank providers by rejection rate, lowest (best) first."""
    stats: dict[str, dict] = {}
    for claim in claims:
        provider = stats.setdefault(
            claim.provider_id,
            {"name": claim.provider_name, "total": 0, "rejected": 0, "amount": 0.0},
        )
        provider["total"] += 1
        provider["amount"] += claim.amount
        if claim.is_rejected:
            provider["rejected"] += 1

    rows = [
        (provider_id, s, percentage(s["rejected"], s["total"]))
        for provider_id, s in stats.items()
    ]
    rows.sort(key=lambda row: row[2])

    return [
        ProviderComparison(
            provider_id=provider_id,
            provider_name=s["name"],
            total_claims=s["total"],
            rejected_claims=s["rejected"],
            total_amount=s["amount"],
            rejection_rate=rate,
            average_amount=s["amount"] / s["total"] if s["total"] else 0.0,
            ranking=rank,
            benchmark_comparison=benchmark_label(rate),
        )
        for rank, (provider_id, s, rate) in enumerate(rows, start=1)
    ]


def benchmark_label(rejection_rate: float) -> BenchmarkComparison:
    if rejection_rate > INDUSTRY_AVERAGE_REJECTION_RATE:
        return BenchmarkComparison.ABOVE
    if rejection_rate < INDUSTRY_AVERAGE_REJECTION_RATE:
        return BenchmarkComparison.BELOW
    return BenchmarkComparison.AT


def compare_categories(claims: list[Claim]) -> list[CategoryComparison]:
    """Frequency of each (category, subcategory) among categorized rejected claims."""
    categorized = [
        c
        for c in claims
        if c.is_rejected and c.rejection_category and c.rejection_subcategory
    ]

    frequency: dict[tuple, int] = defaultdict(int)
    for claim in categorized:
        frequency[(claim.rejection_category, claim.rejection_subcategory)] += 1

    trends = category_trends(categorized)
    comparisons = [
        CategoryComparison(
            category=category,
            subcategory=subcategory,
            frequency=count,
            impact=_frequency_impact(count),
            trend=trends.get((category, subcategory), TrendDirection.STABLE),
        )
        for (category, subcategory), count in frequency.items()
    ]
    comparisons.sort(key=lambda c: c.frequency, reverse=True)
    return comparisons


def category_trends(rejected_claims: list[Claim]) -> dict[tuple, TrendDirection]:
    """Direction of each category pair between the two latest submission months."""
    months = list(group_by_month(rejected_claims).items())
    if len(months) < 2:
        return {}

    (_, previous_claims), (_, latest_claims) = months[-2], months[-1]
    previous = _count_pairs(previous_claims)
    latest = _count_pairs(latest_claims)
    return {
        pair: trend_direction(latest.get(pair, 0), previous.get(pair, 0))
        for pair in set(previous) | set(latest)
    }


def compare_periods(claims: list[Claim], as_of: date) -> TimeComparison:
    """Last 30 days ending ``as_of`` versus the 30 days before that."""
    current_start = as_of - timedelta(days=COMPARISON_PERIOD_DAYS)
    previous_start = as_of - timedelta(days=2 * COMPARISON_PERIOD_DAYS)

    current = [c for c in claims if current_start <= c.submission_date <= as_of]
    previous = [c for c in claims if previous_start <= c.submission_date < current_start]

    current_rate = percentage(sum(1 for c in current if c.is_rejected), len(current))
    previous_rate = percentage(sum(1 for c in previous if c.is_rejected), len(previous))

    return TimeComparison(
        current_period=PeriodSummary(
            start_date=current_start,
            end_date=as_of,
            total_claims=len(current),
            rejection_rate=current_rate,
        ),
        previous_period=PeriodSummary(
            start_date=previous_start,
            end_date=current_start,
            total_claims=len(previous),
            rejection_rate=previous_rate,
        ),
        percentage_change=percentage(current_rate - previous_rate, previous_rate),
    )


def _count_pairs(claims: list[Claim]) -> dict[tuple, int]:
    counts: dict[tuple, int] = defaultdict(int)
    for claim in claims:
        if claim.rejection_category and claim.rejection_subcategory:
            counts[(claim.rejection_category, claim.rejection_subcategory)] += 1
    return counts


def _frequency_impact(frequency: int) -> ImpactLevel:
    if frequency > HIGH_IMPACT_FREQUENCY:
        return ImpactLevel.HIGH
    if frequency < LOW_IMPACT_FREQUENCY:
        return ImpactLevel.LOW
    return ImpactLevel.MEDIUM
