"""Monthly, seasonal and year-over-year claim trends."""

import logging
from collections import defaultdict
from datetime import date

from ..config import TREND_CHANGE_RATIO
from ..schemas.analysis import (
    MonthlyTrend,
    SeasonalPattern,
    TrendAnalysis,
    YearOverYearComparison,
)
from ..schemas.claim import Claim
from ..schemas.common import TrendDirection
from .statistics import percentage

logger = logging.getLogger(__name__)

QUARTERS = ("Q1", "Q2", "Q3", "Q4")


def analyze_trends(claims: list[Claim], as_of: date | None = None) -> TrendAnalysis:
    """Bucket claims by submission month and quarter and label their direction."""
    monthly = group_by_month(claims)

    monthly_trends: list[MonthlyTrend] = []
    previous_count: int | None = None
    for month, month_claims in monthly.items():
        total = len(month_claims)
        rejected = sum(1 for c in month_claims if c.is_rejected)
        monthly_trends.append(
            MonthlyTrend(
                month=month,
                total_claims=total,
                rejected_claims=rejected,
                average_amount=sum(c.amount for c in month_claims) / total,
                rejection_rate=percentage(rejected, total),
                trend=(
                    TrendDirection.STABLE
                    if previous_count is None
                    else trend_direction(total, previous_count)
                ),
            )
        )
        previous_count = total

    return TrendAnalysis(
        monthly_trends=monthly_trends,
        seasonal_patterns=_seasonal_patterns(claims),
        year_over_year_comparison=_year_over_year(claims, as_of or date.today()),
    )


def month_key(day: date) -> str:
    return f"{day.year}-{day.month:02d}"


def group_by_month(claims: list[Claim]) -> dict[str, list[Claim]]:
    """Claims keyed by ``YYYY-MM`` submission month, in chronological order."""
    groups: dict[str, list[Claim]] = defaultdict(list)
    for claim in claims:
        groups[month_key(claim.submission_date)].append(claim)
    return {month: groups[month] for month in sorted(groups)}


def trend_direction(current: int, previous: int) -> TrendDirection:
    """Increasing or decreasing only when the change is strictly more than 10%."""
    if current > previous * (1 + TREND_CHANGE_RATIO):
        return TrendDirection.INCREASING
    if current < previous * (1 - TREND_CHANGE_RATIO):
        return TrendDirection.DECREASING
    return TrendDirection.STABLE


def _quarter(day: date) -> str:
    return QUARTERS[(day.month - 1) // 3]


def _seasonal_patterns(claims: list[Claim]) -> list[SeasonalPattern]:
    """Per calendar quarter, averaged over the years that have claims in it.

    Years of the dataset with no claims in a quarter do not count toward that
    quarter's average, so a quarter seen once in a two-year dataset reports its
    single-year totals.
    """
    # quarter -> year -> [total, rejected]
    buckets: dict[str, dict[int, list[int]]] = defaultdict(lambda: defaultdict(lambda: [0, 0]))
    for claim in claims:
        counts = buckets[_quarter(claim.submission_date)][claim.submission_date.year]
        counts[0] += 1
        if claim.is_rejected:
            counts[1] += 1

    patterns: list[SeasonalPattern] = []
    for quarter in QUARTERS:
        years = buckets.get(quarter, {})
        if not years:
            patterns.append(
                SeasonalPattern(season=quarter, average_claims=0.0, average_rejection_rate=0.0)
            )
            continue

        rates = [percentage(rejected, total) for total, rejected in years.values()]
        patterns.append(
            SeasonalPattern(
                season=quarter,
                average_claims=sum(total for total, _ in years.values()) / len(years),
                average_rejection_rate=sum(rates) / len(rates),
            )
        )
    return patterns


def _year_over_year(claims: list[Claim], as_of: date) -> YearOverYearComparison | None:
    current_year = as_of.year
    previous_year = current_year - 1

    current = [c for c in claims if c.submission_date.year == current_year]
    previous = [c for c in claims if c.submission_date.year == previous_year]
    if not previous:
        logger.debug("No claims for %d, skipping year-over-year comparison", previous_year)
        return None

    current_rate = percentage(sum(1 for c in current if c.is_rejected), len(current))
    previous_rate = percentage(sum(1 for c in previous if c.is_rejected), len(previous))

    return YearOverYearComparison(
        current_year=current_year,
        previous_year=previous_year,
        growth_rate=percentage(len(current) - len(previous), len(previous)),
        rejection_rate_change=current_rate - previous_rate,
    )
