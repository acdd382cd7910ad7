"""Output schemas produced by the categorization and analytics engine."""

from datetime import date

from pydantic import BaseModel

from .claim import Claim
from .common import (
    BenchmarkComparison,
    ClaimStatus,
    ImpactLevel,
    InsightCategory,
    Priority,
    RejectionCategory,
    RiskLevel,
    TrendDirection,
)
from .rule import RejectionRule


# --- Classification & rule impact ---


class Classification(BaseModel):
    """Result of classifying one rejection narrative."""

    category: RejectionCategory
    subcategory: str
    confidence: float
    matched_rule: RejectionRule | None = None


class RejectionAnalysis(BaseModel):
    """Claims matched by one rule, with the estimated recoverable amount."""

    rule_id: str
    rule_name: str
    matches: list[Claim] = []
    confidence: float
    suggested_action: str
    estimated_savings: float

    @property
    def impact_score(self) -> float:
        return self.estimated_savings * len(self.matches)


class TrainingSuggestion(BaseModel):
    """Provider training recommendation derived from rule impact."""

    priority: Priority
    title: str
    description: str
    action_items: list[str] = []
    estimated_impact: str


# --- Statistics ---


class AmountStatistics(BaseModel):
    mean: float
    median: float
    standard_deviation: float
    min: float
    max: float
    quartiles: tuple[float, float, float]


class ProcessingTimeStatistics(BaseModel):
    mean: float
    median: float
    standard_deviation: float


class Correlations(BaseModel):
    amount_vs_processing_time: float
    rejection_rate_by_provider: dict[str, float] = {}


class Outliers(BaseModel):
    high_value_claims: list[Claim] = []
    long_processing_claims: list[Claim] = []


class StatisticalAnalysis(BaseModel):
    """Descriptive statistics over claim amounts and processing times."""

    claim_amounts: AmountStatistics
    processing_times: ProcessingTimeStatistics
    correlations: Correlations
    outliers: Outliers


# --- Trends ---


class MonthlyTrend(BaseModel):
    month: str
    total_claims: int
    rejected_claims: int
    average_amount: float
    rejection_rate: float
    trend: TrendDirection


class SeasonalPattern(BaseModel):
    season: str
    average_claims: float
    average_rejection_rate: float


class YearOverYearComparison(BaseModel):
    current_year: int
    previous_year: int
    growth_rate: float
    rejection_rate_change: float


class TrendAnalysis(BaseModel):
    """Monthly, seasonal and year-over-year claim volume trends."""

    monthly_trends: list[MonthlyTrend] = []
    seasonal_patterns: list[SeasonalPattern] = []
    year_over_year_comparison: YearOverYearComparison | None = None


# --- Comparisons ---


class ProviderComparison(BaseModel):
    provider_id: str
    provider_name: str
    total_claims: int
    rejected_claims: int
    total_amount: float
    rejection_rate: float
    average_amount: float
    ranking: int
    benchmark_comparison: BenchmarkComparison


class CategoryComparison(BaseModel):
    category: RejectionCategory
    subcategory: str
    frequency: int
    impact: ImpactLevel
    trend: TrendDirection


class PeriodSummary(BaseModel):
    start_date: date
    end_date: date
    total_claims: int
    rejection_rate: float


class TimeComparison(BaseModel):
    current_period: PeriodSummary
    previous_period: PeriodSummary
    percentage_change: float


class ComparativeAnalysis(BaseModel):
    """Provider ranking, category frequency and period-over-period comparison."""

    provider_comparison: list[ProviderComparison] = []
    category_comparison: list[CategoryComparison] = []
    time_comparison: TimeComparison


# --- Predictions ---


class ApprovalPrediction(BaseModel):
    claim_id: str
    predicted_status: ClaimStatus
    confidence: float
    risk_factors: list[str] = []


class ClaimApprovalModel(BaseModel):
    accuracy: float
    predictions: list[ApprovalPrediction] = []


class SuspiciousClaim(BaseModel):
    claim_id: str
    risk_score: int
    risk_level: RiskLevel
    flags: list[str] = []


class FraudDetection(BaseModel):
    suspicious_claims: list[SuspiciousClaim] = []
    overall_fraud_rate: float


class CostPrediction(BaseModel):
    next_period_estimate: float
    confidence: float
    factors: list[str] = []


class VolumeForecast(BaseModel):
    expected_claims: int
    expected_rejection_rate: float
    confidence: float


class TrendForecasting(BaseModel):
    next_month_prediction: VolumeForecast
    next_quarter_prediction: VolumeForecast


class PredictionResults(BaseModel):
    """Heuristic approval, fraud, cost and volume predictions."""

    claim_approval_model: ClaimApprovalModel
    fraud_detection: FraudDetection
    cost_prediction: CostPrediction
    trend_forecasting: TrendForecasting


# --- Overview ---


class RejectionPattern(BaseModel):
    category: RejectionCategory
    subcategory: str
    count: int
    percentage: float
    trend: TrendDirection
    impact: ImpactLevel


class InsightData(BaseModel):
    id: str
    title: str
    description: str
    category: InsightCategory
    priority: Priority
    action_items: list[str] = []
    estimated_impact: str
    timeline: str


class AnalysisResult(BaseModel):
    """Complete snapshot of one analysis run."""

    total_claims: int
    total_amount: float
    rejected_claims: int
    pending_claims: int
    rejection_rate: float
    avg_processing_time: float
    claims: list[Claim] = []
    patterns: list[RejectionPattern] = []
    insights: list[InsightData] = []
    rejection_analysis: list[RejectionAnalysis] = []
    training_suggestions: list[TrainingSuggestion] = []
    statistical_analysis: StatisticalAnalysis
    trend_analysis: TrendAnalysis
    comparative_analysis: ComparativeAnalysis
    prediction_results: PredictionResults
