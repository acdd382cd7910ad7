"""Heuristic approval, fraud, cost and volume predictions.

These are fixed scoring tables, not trained models. Each rule below adds or
subtracts a constant when its condition holds.
"""

import math
from collections import Counter

from ..config import (
    BASE_APPROVAL_SCORE,
    FAST_PROCESSING_DAYS,
    FAST_PROCESSING_SCORE,
    FRAUD_AMOUNT_SCORE,
    FRAUD_AMOUNT_THRESHOLD,
    HIGH_AMOUNT_PENALTY,
    HIGH_AMOUNT_THRESHOLD,
    HIGH_PROVIDER_REJECTION_RATE,
    HIGH_RISK_SCORE,
    HIGH_VOLUME_PROVIDER_CLAIMS,
    HIGH_VOLUME_PROVIDER_SCORE,
    LONG_PROCESSING_DAYS,
    LONG_PROCESSING_PENALTY,
    MAX_APPROVAL_SCORE,
    MEDIUM_RISK_SCORE,
    MIN_APPROVAL_SCORE,
    PROVIDER_REJECTION_PENALTY,
)
from ..schemas.analysis import (
    ApprovalPrediction,
    ClaimApprovalModel,
    CostPrediction,
    FraudDetection,
    PredictionResults,
    SuspiciousClaim,
    TrendForecasting,
    VolumeForecast,
)
from ..schemas.claim import Claim
from ..schemas.common import ClaimStatus, RiskLevel
from .statistics import percentage, rejection_rate_by_provider
from .trends import group_by_month


def analyze_predictions(claims: list[Claim]) -> PredictionResults:
    return PredictionResults(
        claim_approval_model=predict_approvals(claims),
        fraud_detection=detect_fraud(claims),
        cost_prediction=predict_costs(claims),
        trend_forecasting=forecast_trends(claims),
    )


def predict_approvals(claims: list[Claim]) -> ClaimApprovalModel:
    """Score each claim's approval likelihood and measure agreement with actual status.

    | condition                        | adjustment |
    |----------------------------------|------------|
    | amount > 10,000                  | -0.20      |
    | provider rejection rate > 20%    | -0.15      |
    | processing time > 15 days        | -0.10      |

    The score starts at 0.5 and is clamped to [0.1, 0.9]; above 0.5 predicts
    approval. Accuracy is the percentage of claims whose recorded status
    equals the prediction.
    """
    provider_rates = rejection_rate_by_provider(claims)
    predictions: list[ApprovalPrediction] = []
    correct = 0

    for claim in claims:
        score = BASE_APPROVAL_SCORE
        risk_factors: list[str] = []

        if claim.amount > HIGH_AMOUNT_THRESHOLD:
            score -= HIGH_AMOUNT_PENALTY
            risk_factors.append("High claim amount")
        if provider_rates.get(claim.provider_id, 0.0) > HIGH_PROVIDER_REJECTION_RATE:
            score -= PROVIDER_REJECTION_PENALTY
            risk_factors.append("High provider rejection rate")
        if claim.processing_time > LONG_PROCESSING_DAYS:
            score -= LONG_PROCESSING_PENALTY
            risk_factors.append("Extended processing time")

        score = max(MIN_APPROVAL_SCORE, min(MAX_APPROVAL_SCORE, score))
        predicted = ClaimStatus.APPROVED if score > BASE_APPROVAL_SCORE else ClaimStatus.REJECTED
        if claim.status == predicted:
            correct += 1

        predictions.append(
            ApprovalPrediction(
                claim_id=claim.id,
                predicted_status=predicted,
                confidence=round_half_up(score, 2),
                risk_factors=risk_factors,
            )
        )

    return ClaimApprovalModel(
        accuracy=percentage(correct, len(predictions)),
        predictions=predictions,
    )


def detect_fraud(claims: list[Claim]) -> FraudDetection:
    """Flag claims with a non-zero fraud risk score.

    | condition                         | points |
    |-----------------------------------|--------|
    | amount > 50,000                   | +30    |
    | processing time < 1 day           | +20    |
    | provider has more than 100 claims | +15    |

    Risk is high from 40 points and medium from 20. The overall fraud rate
    is the percentage of all claims at high risk.
    """
    provider_volume = Counter(c.provider_id for c in claims)
    suspicious: list[SuspiciousClaim] = []

    for claim in claims:
        score = 0
        flags: list[str] = []

        if claim.amount > FRAUD_AMOUNT_THRESHOLD:
            score += FRAUD_AMOUNT_SCORE
            flags.append("Exceptionally high amount")
        if claim.processing_time < FAST_PROCESSING_DAYS:
            score += FAST_PROCESSING_SCORE
            flags.append("Unusually fast processing")
        if provider_volume[claim.provider_id] > HIGH_VOLUME_PROVIDER_CLAIMS:
            score += HIGH_VOLUME_PROVIDER_SCORE
            flags.append("High volume provider")

        if score == 0:
            continue
        suspicious.append(
            SuspiciousClaim(
                claim_id=claim.id,
                risk_score=score,
                risk_level=_risk_level(score),
                flags=flags,
            )
        )

    high_risk = sum(1 for s in suspicious if s.risk_level == RiskLevel.HIGH)
    return FraudDetection(
        suspicious_claims=suspicious,
        overall_fraud_rate=percentage(high_risk, len(claims)),
    )


def predict_costs(claims: list[Claim]) -> CostPrediction:
    """Average monthly total, nudged by half of the latest month-over-month change."""
    totals = [sum(c.amount for c in month) for month in group_by_month(claims).values()]
    if not totals:
        return CostPrediction(
            next_period_estimate=0.0,
            confidence=0.0,
            factors=["Insufficient data for prediction"],
        )

    average = sum(totals) / len(totals)
    recent_change = totals[-1] - totals[-2] if len(totals) >= 2 else 0.0

    return CostPrediction(
        next_period_estimate=max(0.0, average + recent_change * 0.5),
        confidence=0.75 if len(totals) >= 3 else 0.5,
        factors=[
            "Historical monthly averages",
            "Recent trend analysis",
            "Seasonal adjustments",
        ],
    )


def forecast_trends(claims: list[Claim]) -> TrendForecasting:
    """Project the last three months' average volume and rejection rate forward."""
    monthly = list(group_by_month(claims).values())
    if len(monthly) < 2:
        empty = VolumeForecast(expected_claims=0, expected_rejection_rate=0.0, confidence=0.0)
        return TrendForecasting(next_month_prediction=empty, next_quarter_prediction=empty)

    recent = monthly[-3:]
    avg_claims = sum(len(m) for m in recent) / len(recent)
    avg_rate = sum(
        percentage(sum(1 for c in m if c.is_rejected), len(m)) for m in recent
    ) / len(recent)
    full_window = len(recent) >= 3

    return TrendForecasting(
        next_month_prediction=VolumeForecast(
            expected_claims=int(round_half_up(avg_claims)),
            expected_rejection_rate=round_half_up(avg_rate, 2),
            confidence=0.8 if full_window else 0.6,
        ),
        next_quarter_prediction=VolumeForecast(
            expected_claims=int(round_half_up(avg_claims * 3)),
            expected_rejection_rate=round_half_up(avg_rate, 2),
            confidence=0.7 if full_window else 0.5,
        ),
    )


def round_half_up(value: float, digits: int = 0) -> float:
    """Round with halves going up, so 2.5 becomes 3 rather than the even 2."""
    scale = 10**digits
    return math.floor(value * scale + 0.5) / scale


def _risk_level(score: int) -> RiskLevel:
    if score >= HIGH_RISK_SCORE:
        return RiskLevel.HIGH
    if score >= MEDIUM_RISK_SCORE:
        return RiskLevel.MEDIUM
    return RiskLevel.LOW
