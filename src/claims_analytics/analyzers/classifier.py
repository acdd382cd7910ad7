"""Rule-based classification of rejected claims into medical and technical causes."""

import logging

from ..config import (
    CLASSIFICATION_THRESHOLD,
    CODE_WEIGHT,
    FALLBACK_CONFIDENCE,
    KEYWORD_WEIGHT,
    MEDICAL_FALLBACK_KEYWORDS,
    MEDICAL_FALLBACK_SUBCATEGORY,
    TECHNICAL_FALLBACK_KEYWORDS,
    TECHNICAL_FALLBACK_SUBCATEGORY,
    UNKNOWN_SUBCATEGORY,
)
from ..rule_store import RuleStore
from ..schemas.analysis import Classification
from ..schemas.claim import Claim
from ..schemas.common import RejectionCategory
from ..schemas.rule import RejectionRule

logger = logging.getLogger(__name__)


def match_score(reason: str, codes: list[str], rule: RejectionRule) -> float:
    """Blend keyword overlap (up to 0.7) and code overlap (up to 0.3), capped at 1.0.

    A claim code matches a rule code when either one contains the other.
    Empty keyword or code lists contribute nothing.
    """
    score = 0.0
    reason_lower = (reason or "").lower()

    keywords = rule.all_keywords
    if keywords and reason_lower:
        keyword_matches = sum(1 for kw in keywords if kw and kw.lower() in reason_lower)
        score += keyword_matches / len(keywords) * KEYWORD_WEIGHT

    claim_codes = [c for c in codes if c]
    if rule.codes and claim_codes:
        code_matches = sum(
            1
            for code in rule.codes
            if code and any(code in cc or cc in code for cc in claim_codes)
        )
        score += code_matches / len(rule.codes) * CODE_WEIGHT

    return min(score, 1.0)


def active_rules_for(rule_store: RuleStore, provider_id: str | None = None) -> list[RejectionRule]:
    """Global rules first, then the provider's own rules."""
    rules = rule_store.active_global_rules()
    if provider_id:
        rules = [*rules, *rule_store.active_provider_rules(provider_id)]
    return rules


def categorize_rejection(
    reason: str,
    codes: list[str],
    rule_store: RuleStore,
    provider_id: str | None = None,
) -> Classification:
    """Return the first rule scoring above the threshold, else a keyword fallback.

    Rule order is the tie-break: the first sufficiently confident rule wins
    even if a later rule would score higher.
    """
    for rule in active_rules_for(rule_store, provider_id):
        confidence = match_score(reason, codes, rule)
        if confidence > CLASSIFICATION_THRESHOLD:
            logger.debug("Rule %s matched with confidence %.2f", rule.id, confidence)
            return Classification(
                category=rule.category,
                subcategory=rule.subcategory,
                confidence=confidence,
                matched_rule=rule,
            )

    category, subcategory = _basic_categorization(reason)
    return Classification(
        category=category,
        subcategory=subcategory,
        confidence=FALLBACK_CONFIDENCE,
    )


def classify_claim(
    claim: Claim,
    rule_store: RuleStore,
    provider_id: str | None = None,
) -> Classification:
    """Classify a claim's rejection narrative, scoped to its provider by default."""
    return categorize_rejection(
        claim.rejection_reason or "",
        claim.codes,
        rule_store,
        provider_id or claim.provider_id or None,
    )


def classify_claims(claims: list[Claim], rule_store: RuleStore) -> list[Claim]:
    """Return copies of the claims with rejected ones categorized.

    Existing categories are only replaced by a medical or technical result,
    never cleared.
    """
    classified: list[Claim] = []
    updated = 0

    for claim in claims:
        if not claim.is_rejected:
            classified.append(claim)
            continue

        result = classify_claim(claim, rule_store)
        if result.category == RejectionCategory.UNKNOWN:
            classified.append(claim)
            continue

        classified.append(
            claim.model_copy(
                update={
                    "rejection_category": result.category,
                    "rejection_subcategory": result.subcategory,
                }
            )
        )
        updated += 1

    logger.info("Categorized %d of %d claims", updated, len(claims))
    return classified


def _basic_categorization(reason: str) -> tuple[RejectionCategory, str]:
    """Fallback keyword dictionary, checking medical indicators first."""
    reason_lower = (reason or "").lower()

    if any(kw in reason_lower for kw in MEDICAL_FALLBACK_KEYWORDS):
        return RejectionCategory.MEDICAL, MEDICAL_FALLBACK_SUBCATEGORY
    if any(kw in reason_lower for kw in TECHNICAL_FALLBACK_KEYWORDS):
        return RejectionCategory.TECHNICAL, TECHNICAL_FALLBACK_SUBCATEGORY
    return RejectionCategory.UNKNOWN, UNKNOWN_SUBCATEGORY
