"""Shared enums for claims categorization and analytics schemas."""

from enum import Enum


class ClaimStatus(str, Enum):
    """Adjudication status of an insurance claim."""

    APPROVED = "approved"
    REJECTED = "rejected"
    PENDING = "pending"


class RejectionCategory(str, Enum):
    """Root cause family of a claim rejection."""

    MEDICAL = "medical"
    TECHNICAL = "technical"
    UNKNOWN = "unknown"


class RuleSeverity(str, Enum):
    """Severity of a rejection rule, used for recovery rates and training priority."""

    CRITICAL = "critical"
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class Priority(str, Enum):
    """Priority of a suggestion or insight."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class ImpactLevel(str, Enum):
    """Impact of a rejection pattern or category."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class TrendDirection(str, Enum):
    """Direction of change between two consecutive periods."""

    INCREASING = "increasing"
    DECREASING = "decreasing"
    STABLE = "stable"


class BenchmarkComparison(str, Enum):
    """Provider rejection rate relative to the industry benchmark."""

    ABOVE = "above"
    BELOW = "below"
    AT = "at"


class RiskLevel(str, Enum):
    """Fraud risk level of a claim."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class InsightCategory(str, Enum):
    """Kind of insight surfaced to the reviewer."""

    ACTIONABLE = "actionable"
    INFORMATIONAL = "informational"
    WARNING = "warning"
