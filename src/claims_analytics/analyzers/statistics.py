"""Descriptive statistics and outlier detection over claim amounts and processing times."""

import logging
from collections import defaultdict

import numpy as np

from ..config import OUTLIER_STDDEV_MULTIPLIER
from ..errors import EmptyDatasetError
from ..schemas.analysis import (
    AmountStatistics,
    Correlations,
    Outliers,
    ProcessingTimeStatistics,
    StatisticalAnalysis,
)
from ..schemas.claim import Claim

logger = logging.getLogger(__name__)


def analyze_statistics(claims: list[Claim]) -> StatisticalAnalysis:
    """Compute amount and processing-time statistics for a claim population.

    Amount statistics use claims with a positive amount; processing-time
    statistics use claims with a positive processing time. Standard
    deviations are population standard deviations.

    Raises:
        EmptyDatasetError: if ``claims`` is empty.
    """
    if not claims:
        raise EmptyDatasetError("No claims data provided for statistical analysis")

    amounts = np.array([c.amount for c in claims if c.amount > 0], dtype=float)
    times = np.array([c.processing_time for c in claims if c.processing_time > 0], dtype=float)

    amount_stats = _amount_statistics(amounts)
    time_stats = ProcessingTimeStatistics(
        mean=_mean(times),
        median=float(np.median(times)) if times.size else 0.0,
        standard_deviation=_std(times),
    )

    correlations = Correlations(
        amount_vs_processing_time=pearson_correlation(
            [c.amount for c in claims],
            [float(c.processing_time) for c in claims],
        ),
        rejection_rate_by_provider=rejection_rate_by_provider(claims),
    )

    outliers = _identify_outliers(claims, amount_stats, time_stats)
    logger.info(
        "Statistics over %d claims: %d high-value and %d long-processing outliers",
        len(claims),
        len(outliers.high_value_claims),
        len(outliers.long_processing_claims),
    )

    return StatisticalAnalysis(
        claim_amounts=amount_stats,
        processing_times=time_stats,
        correlations=correlations,
        outliers=outliers,
    )


def pearson_correlation(x: list[float], y: list[float]) -> float:
    """Pearson coefficient of paired series; 0 when either series has no variance."""
    if len(x) != len(y) or not x:
        return 0.0

    xs = np.asarray(x, dtype=float)
    ys = np.asarray(y, dtype=float)
    dx = xs - xs.mean()
    dy = ys - ys.mean()
    denominator = np.sqrt(np.sum(dx**2)) * np.sqrt(np.sum(dy**2))
    if denominator == 0:
        return 0.0
    return float(np.sum(dx * dy) / denominator)


def rejection_rate_by_provider(claims: list[Claim]) -> dict[str, float]:
    """Percentage of rejected claims per provider id."""
    totals: dict[str, int] = defaultdict(int)
    rejected: dict[str, int] = defaultdict(int)
    for claim in claims:
        totals[claim.provider_id] += 1
        if claim.is_rejected:
            rejected[claim.provider_id] += 1

    return {
        provider_id: percentage(rejected[provider_id], total)
        for provider_id, total in totals.items()
    }


def percentage(part: float, whole: float) -> float:
    """``part / whole`` as a percentage, 0 when ``whole`` is 0."""
    if not whole:
        return 0.0
    return part * 100 / whole


def _amount_statistics(amounts: np.ndarray) -> AmountStatistics:
    if not amounts.size:
        return AmountStatistics(
            mean=0.0,
            median=0.0,
            standard_deviation=0.0,
            min=0.0,
            max=0.0,
            quartiles=(0.0, 0.0, 0.0),
        )

    # Averages the two neighbours when n * p is whole, else takes the next order statistic
    q1, q2, q3 = np.quantile(amounts, [0.25, 0.5, 0.75], method="averaged_inverted_cdf")
    return AmountStatistics(
        mean=_mean(amounts),
        median=float(np.median(amounts)),
        standard_deviation=_std(amounts),
        min=float(amounts.min()),
        max=float(amounts.max()),
        quartiles=(float(q1), float(q2), float(q3)),
    )


def _identify_outliers(
    claims: list[Claim],
    amount_stats: AmountStatistics,
    time_stats: ProcessingTimeStatistics,
) -> Outliers:
    """One-sided outliers: more than two standard deviations above the mean."""
    amount_threshold = amount_stats.mean + OUTLIER_STDDEV_MULTIPLIER * amount_stats.standard_deviation
    time_threshold = time_stats.mean + OUTLIER_STDDEV_MULTIPLIER * time_stats.standard_deviation

    return Outliers(
        high_value_claims=[c for c in claims if c.amount > amount_threshold],
        long_processing_claims=[c for c in claims if c.processing_time > time_threshold],
    )


def _mean(values: np.ndarray) -> float:
    return float(values.mean()) if values.size else 0.0


def _std(values: np.ndarray) -> float:
    return float(values.std()) if values.size else 0.0
