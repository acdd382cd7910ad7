"""Fixed scoring thresholds and the rule-set configuration file."""

import json
import logging
import os
from fractions import Fraction
from pathlib import Path

from pydantic import BaseModel

from .schemas.common import RuleSeverity
from .schemas.rule import InsuranceProvider, RejectionRule

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "CLAIMS_ANALYTICS_CONFIG"
DEFAULT_CONFIG_PATH = Path("configs") / "config.json"

# --- Classification ---

KEYWORD_WEIGHT = 0.7
CODE_WEIGHT = 0.3
CLASSIFICATION_THRESHOLD = 0.7
IMPACT_MATCH_THRESHOLD = 0.6
FALLBACK_CONFIDENCE = 0.5

MEDICAL_FALLBACK_KEYWORDS = [
    "medical necessity",
    "diagnosis",
    "treatment",
    "procedure",
    "clinical",
    "prior authorization",
    "medical review",
    "inappropriate",
    "experimental",
]
TECHNICAL_FALLBACK_KEYWORDS = [
    "data",
    "code",
    "billing",
    "format",
    "system",
    "entry",
    "documentation",
    "missing",
    "invalid",
    "incomplete",
    "timeout",
    "error",
]
MEDICAL_FALLBACK_SUBCATEGORY = "Medical Review Required"
TECHNICAL_FALLBACK_SUBCATEGORY = "Data/System Issue"
UNKNOWN_SUBCATEGORY = "Unclassified"

# --- Rule impact ---

RECOVERY_RATES: dict[RuleSeverity, float] = {
    RuleSeverity.CRITICAL: 0.8,
    RuleSeverity.HIGH: 0.6,
    RuleSeverity.MEDIUM: 0.4,
    RuleSeverity.LOW: 0.2,
}
MAX_TRAINING_SUGGESTIONS = 10
MEDICAL_PATTERN_MIN_MATCHES = 5
CURRENCY = "SAR"

# --- Analytics ---

OUTLIER_STDDEV_MULTIPLIER = 2
TREND_CHANGE_RATIO = Fraction(1, 10)
INDUSTRY_AVERAGE_REJECTION_RATE = 15.0
HIGH_IMPACT_FREQUENCY = 50
LOW_IMPACT_FREQUENCY = 10
COMPARISON_PERIOD_DAYS = 30

# --- Prediction ---

BASE_APPROVAL_SCORE = 0.5
HIGH_AMOUNT_THRESHOLD = 10_000
HIGH_AMOUNT_PENALTY = 0.2
HIGH_PROVIDER_REJECTION_RATE = 20.0
PROVIDER_REJECTION_PENALTY = 0.15
LONG_PROCESSING_DAYS = 15
LONG_PROCESSING_PENALTY = 0.1
MIN_APPROVAL_SCORE = 0.1
MAX_APPROVAL_SCORE = 0.9

FRAUD_AMOUNT_THRESHOLD = 50_000
FRAUD_AMOUNT_SCORE = 30
FAST_PROCESSING_DAYS = 1
FAST_PROCESSING_SCORE = 20
HIGH_VOLUME_PROVIDER_CLAIMS = 100
HIGH_VOLUME_PROVIDER_SCORE = 15
HIGH_RISK_SCORE = 40
MEDIUM_RISK_SCORE = 20

# --- Insights ---

HIGH_OVERALL_REJECTION_RATE = 20.0
PROBLEM_PROVIDER_MIN_CLAIMS = 10
PROBLEM_PROVIDER_REJECTION_RATE = 30.0
RECOVERABLE_SHARE = 0.8


class RulesConfig(BaseModel):
    """Rule-set settings read from the ``rules`` section of the config file."""

    include_defaults: bool = True
    disabled_rule_ids: list[str] = []
    custom_rules: list[RejectionRule] = []
    providers: list[InsuranceProvider] = []


def get_config_path() -> Path:
    return Path(os.getenv(CONFIG_ENV_VAR, str(DEFAULT_CONFIG_PATH)))


def load_rules_config(path: Path | None = None) -> RulesConfig:
    """Load the rule-set configuration, falling back to defaults when absent."""
    config_path = path or get_config_path()
    if not config_path.exists():
        logger.info("No config file at %s, using built-in rule set", config_path)
        return RulesConfig()

    config = json.loads(config_path.read_text(encoding="utf-8"))
    return RulesConfig.model_validate(config.get("rules", {}))
