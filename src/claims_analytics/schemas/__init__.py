"""Claims categorization and analytics schemas."""

from .analysis import (
    AmountStatistics,
    AnalysisResult,
    ApprovalPrediction,
    CategoryComparison,
    ClaimApprovalModel,
    Classification,
    ComparativeAnalysis,
    Correlations,
    CostPrediction,
    FraudDetection,
    InsightData,
    MonthlyTrend,
    Outliers,
    PeriodSummary,
    PredictionResults,
    ProcessingTimeStatistics,
    ProviderComparison,
    RejectionAnalysis,
    RejectionPattern,
    SeasonalPattern,
    StatisticalAnalysis,
    SuspiciousClaim,
    TimeComparison,
    TrainingSuggestion,
    TrendAnalysis,
    TrendForecasting,
    VolumeForecast,
    YearOverYearComparison,
)
from .claim import Claim
from .common import (
    BenchmarkComparison,
    ClaimStatus,
    ImpactLevel,
    InsightCategory,
    Priority,
    RejectionCategory,
    RiskLevel,
    RuleSeverity,
    TrendDirection,
)
from .rule import CustomCategories, InsuranceProvider, RejectionRule

__all__ = [
    # Common
    "ClaimStatus",
    "RejectionCategory",
    "RuleSeverity",
    "Priority",
    "ImpactLevel",
    "TrendDirection",
    "BenchmarkComparison",
    "RiskLevel",
    "InsightCategory",
    # Inputs
    "Claim",
    "RejectionRule",
    "CustomCategories",
    "InsuranceProvider",
    # Classification
    "Classification",
    "RejectionAnalysis",
    "TrainingSuggestion",
    # Statistics
    "AmountStatistics",
    "ProcessingTimeStatistics",
    "Correlations",
    "Outliers",
    "StatisticalAnalysis",
    # Trends
    "MonthlyTrend",
    "SeasonalPattern",
    "YearOverYearComparison",
    "TrendAnalysis",
    # Comparisons
    "ProviderComparison",
    "CategoryComparison",
    "PeriodSummary",
    "TimeComparison",
    "ComparativeAnalysis",
    # Predictions
    "ApprovalPrediction",
    "ClaimApprovalModel",
    "SuspiciousClaim",
    "FraudDetection",
    "CostPrediction",
    "VolumeForecast",
    "TrendForecasting",
    "PredictionResults",
    # Output
    "RejectionPattern",
    "InsightData",
    "AnalysisResult",
]
