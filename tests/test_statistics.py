"""Unit tests for descriptive claim statistics."""

import pytest

from claims_analytics.analyzers.statistics import (
    analyze_statistics,
    pearson_correlation,
    percentage,
    rejection_rate_by_provider,
)
from claims_analytics.errors import EmptyDatasetError
from claims_analytics.schemas import ClaimStatus


class TestAnalyzeStatistics:
    """Tests for amount/processing-time statistics and outliers."""

    def test_empty_population_raises(self):
        with pytest.raises(EmptyDatasetError):
            analyze_statistics([])

    def test_amount_statistics(self, make_claim):
        claims = [make_claim(amount=a) for a in (100, 200, 300, 400)]

        stats = analyze_statistics(claims).claim_amounts

        assert stats.mean == pytest.approx(250.0)
        assert stats.median == pytest.approx(250.0)
        assert stats.standard_deviation == pytest.approx(111.8034, rel=1e-5)
        assert stats.min == 100.0
        assert stats.max == 400.0
        assert stats.quartiles == pytest.approx((150.0, 250.0, 350.0))

    def test_quartiles_take_next_order_statistic_between_ranks(self, make_claim):
        claims = [make_claim(amount=a) for a in (1, 2, 3, 4, 5)]
        stats = analyze_statistics(claims).claim_amounts
        assert stats.quartiles == pytest.approx((2.0, 3.0, 4.0))

    def test_quartiles_average_neighbours_on_whole_ranks(self, make_claim):
        claims = [make_claim(amount=a) for a in (4, 1, 3, 2)]
        stats = analyze_statistics(claims).claim_amounts
        assert stats.quartiles == pytest.approx((1.5, 2.5, 3.5))

    def test_zero_amounts_and_times_are_excluded(self, make_claim):
        claims = [
            make_claim(amount=0, processing_time=0),
            make_claim(amount=500, processing_time=4),
            make_claim(amount=1500, processing_time=8),
        ]

        result = analyze_statistics(claims)

        assert result.claim_amounts.mean == pytest.approx(1000.0)
        assert result.claim_amounts.min == 500.0
        assert result.processing_times.mean == pytest.approx(6.0)
        assert result.processing_times.median == pytest.approx(6.0)

    def test_all_zero_amounts_resolve_to_zeros(self, make_claim):
        result = analyze_statistics([make_claim(amount=0, processing_time=0)])
        assert result.claim_amounts.mean == 0.0
        assert result.claim_amounts.quartiles == (0.0, 0.0, 0.0)
        assert result.processing_times.standard_deviation == 0.0

    def test_high_value_outlier(self, make_claim):
        claims = [make_claim(amount=100) for _ in range(9)]
        claims.append(make_claim(id="claim-big", amount=10000))

        outliers = analyze_statistics(claims).outliers

        assert [c.id for c in outliers.high_value_claims] == ["claim-big"]
        assert outliers.long_processing_claims == []

    def test_amount_at_threshold_is_not_an_outlier(self, make_claim):
        """Four claims of 100 and one of 10000 put mean + 2 sd exactly at 10000."""
        claims = [make_claim(amount=100) for _ in range(4)]
        claims.append(make_claim(amount=10000))

        result = analyze_statistics(claims)
        amounts = result.claim_amounts

        assert amounts.mean == 2080.0
        assert amounts.standard_deviation == 3960.0
        assert amounts.mean + 2 * amounts.standard_deviation == 10000.0
        assert result.outliers.high_value_claims == []

    def test_processing_time_at_threshold_is_not_an_outlier(self, make_claim):
        claims = [make_claim(processing_time=1) for _ in range(4)]
        claims.append(make_claim(processing_time=51))

        result = analyze_statistics(claims)
        times = result.processing_times

        assert times.mean + 2 * times.standard_deviation == 51.0
        assert result.outliers.long_processing_claims == []

    def test_long_processing_outlier(self, make_claim):
        claims = [make_claim(processing_time=2) for _ in range(9)]
        claims.append(make_claim(id="claim-slow", processing_time=60))

        outliers = analyze_statistics(claims).outliers

        assert [c.id for c in outliers.long_processing_claims] == ["claim-slow"]

    def test_uniform_population_has_no_outliers(self, make_claim):
        claims = [make_claim(amount=750, processing_time=3) for _ in range(5)]
        outliers = analyze_statistics(claims).outliers
        assert outliers.high_value_claims == []
        assert outliers.long_processing_claims == []

    def test_amount_vs_processing_time_correlation(self, make_claim):
        claims = [make_claim(amount=100 * n, processing_time=n) for n in range(1, 6)]
        result = analyze_statistics(claims)
        assert result.correlations.amount_vs_processing_time == pytest.approx(1.0)


class TestCorrelation:
    """Tests for the Pearson coefficient helper."""

    def test_zero_variance_returns_zero(self):
        assert pearson_correlation([5, 5, 5], [1, 2, 3]) == 0.0

    def test_negative_correlation(self):
        assert pearson_correlation([1, 2, 3], [3, 2, 1]) == pytest.approx(-1.0)

    def test_mismatched_or_empty_series_return_zero(self):
        assert pearson_correlation([], []) == 0.0
        assert pearson_correlation([1, 2], [1]) == 0.0


class TestProviderRates:
    """Tests for per-provider rejection percentages."""

    def test_rejection_rate_by_provider(self, make_claim):
        claims = [
            make_claim(provider_id="P1", status=ClaimStatus.REJECTED),
            make_claim(provider_id="P1"),
            make_claim(provider_id="P1"),
            make_claim(provider_id="P1"),
            make_claim(provider_id="P2", status=ClaimStatus.PENDING),
        ]
        assert rejection_rate_by_provider(claims) == {"P1": 25.0, "P2": 0.0}

    def test_percentage_guards_zero_whole(self):
        assert percentage(3, 0) == 0.0
        assert percentage(3, 20) == 15.0
