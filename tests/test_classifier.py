"""Unit tests for rejection rule matching and claim classification."""

import pytest

from claims_analytics.analyzers.classifier import (
    categorize_rejection,
    classify_claim,
    classify_claims,
    match_score,
)
from claims_analytics.rule_store import InMemoryRuleStore
from claims_analytics.schemas import (
    ClaimStatus,
    InsuranceProvider,
    RejectionCategory,
)


# ============================================================================
# MATCH SCORE TESTS
# ============================================================================


class TestMatchScore:
    """Tests for the keyword/code blended match score."""

    def test_full_keyword_and_code_match_scores_one(self, make_rule):
        rule = make_rule(keywords=["missing documentation"], codes=["DOC001"])
        score = match_score("Missing documentation for visit", ["DOC001"], rule)
        assert score == pytest.approx(1.0)

    def test_keywords_only_cap_at_seventy_percent(self, make_rule):
        rule = make_rule(keywords=["missing documentation"], codes=["DOC001"])
        assert match_score("missing documentation", [], rule) == pytest.approx(0.7)

    def test_partial_keyword_overlap_is_proportional(self, make_rule):
        rule = make_rule(keywords=["alpha", "beta", "gamma", "delta"], codes=[])
        assert match_score("alpha and beta", [], rule) == pytest.approx(0.35)

    def test_arabic_keywords_count_toward_merged_list(self, make_rule):
        rule = make_rule(keywords=["prior authorization"], keywords_ar=["موافقة مسبقة"], codes=[])
        assert match_score("prior authorization", [], rule) == pytest.approx(0.35)
        assert match_score("موافقة مسبقة مطلوبة", [], rule) == pytest.approx(0.35)

    def test_code_matches_by_substring_either_way(self, make_rule):
        rule = make_rule(keywords=[], codes=["AUTH", "PA001-EXT"])
        # "AUTH" is inside "AUTH001"; "PA001" is inside "PA001-EXT"
        assert match_score("", ["AUTH001", "PA001"], rule) == pytest.approx(0.3)

    def test_empty_keyword_and_code_lists_score_zero(self, make_rule):
        rule = make_rule(keywords=[], codes=[])
        assert match_score("anything at all", ["X1"], rule) == 0.0

    def test_blank_claim_codes_do_not_match_everything(self, make_rule):
        rule = make_rule(keywords=[], codes=["DOC001"])
        assert match_score("", ["", ""], rule) == 0.0


# ============================================================================
# CLASSIFICATION TESTS
# ============================================================================


class TestCategorizeRejection:
    """Tests for first-match rule classification and keyword fallback."""

    def test_documentation_and_prior_auth_rejections(self, make_claim, make_rule):
        """Claims are classified by the rule whose keywords and codes they carry."""
        docs_rule = make_rule(
            id="rule-docs",
            name="Missing Documentation",
            category=RejectionCategory.TECHNICAL,
            subcategory="Documentation",
            keywords=["missing documentation"],
            codes=["DOC001"],
        )
        auth_rule = make_rule(
            id="rule-auth",
            name="Prior Authorization",
            category=RejectionCategory.MEDICAL,
            subcategory="Prior Authorization",
            keywords=["prior authorization"],
            codes=["AUTH001"],
        )
        store = InMemoryRuleStore(rules=[docs_rule, auth_rule])
        claim1 = make_claim(
            amount=5000,
            status=ClaimStatus.REJECTED,
            rejection_reason="missing documentation",
            procedure_code="DOC001",
        )
        claim2 = make_claim(
            amount=20000,
            status=ClaimStatus.REJECTED,
            rejection_reason="prior authorization required",
            procedure_code="AUTH001",
        )

        first = classify_claim(claim1, store)
        second = classify_claim(claim2, store)

        assert first.category == RejectionCategory.TECHNICAL
        assert first.subcategory == "Documentation"
        assert first.confidence >= 0.7
        assert first.matched_rule.id == "rule-docs"
        assert second.category == RejectionCategory.MEDICAL
        assert second.subcategory == "Prior Authorization"
        assert second.confidence >= 0.7

    def test_first_confident_rule_wins_over_better_later_rule(self, make_rule):
        """Rule order breaks ties, not the highest score."""
        earlier = make_rule(
            id="rule-earlier",
            subcategory="Earlier",
            keywords=["alpha", "beta", "gamma", "delta"],
            codes=["C1"],
        )
        later = make_rule(id="rule-later", subcategory="Later", keywords=["alpha"], codes=["C1"])
        store = InMemoryRuleStore(rules=[earlier, later])

        result = categorize_rejection("alpha beta gamma", ["C1"], store)

        assert result.matched_rule.id == "rule-earlier"
        assert result.confidence == pytest.approx(0.825)

    def test_score_of_exactly_threshold_falls_back(self, monkeypatch, make_rule):
        """Classification requires a score strictly above 0.7."""
        store = InMemoryRuleStore(rules=[make_rule()])
        monkeypatch.setattr(
            "claims_analytics.analyzers.classifier.match_score", lambda *args: 0.7
        )
        result = categorize_rejection("test keyword", ["TST001"], store)
        assert result.matched_rule is None
        assert result.confidence == 0.5

    def test_score_just_above_threshold_matches(self, monkeypatch, make_rule):
        store = InMemoryRuleStore(rules=[make_rule()])
        monkeypatch.setattr(
            "claims_analytics.analyzers.classifier.match_score", lambda *args: 0.71
        )
        result = categorize_rejection("whatever", [], store)
        assert result.matched_rule is not None
        assert result.subcategory == "Testing"

    def test_keyword_only_match_uses_fallback(self, make_rule):
        """A full keyword match without codes scores exactly 0.7 and is not enough."""
        store = InMemoryRuleStore(
            rules=[make_rule(keywords=["missing documentation"], codes=["DOC001"])]
        )
        result = categorize_rejection("missing documentation", [], store)
        assert result.category == RejectionCategory.TECHNICAL
        assert result.subcategory == "Data/System Issue"
        assert result.confidence == 0.5

    def test_fallback_checks_medical_indicators_first(self):
        store = InMemoryRuleStore()
        result = categorize_rejection("diagnosis code missing", [], store)
        assert result.category == RejectionCategory.MEDICAL
        assert result.subcategory == "Medical Review Required"

    def test_fallback_unknown_when_no_indicator(self):
        result = categorize_rejection("payer declined", [], InMemoryRuleStore())
        assert result.category == RejectionCategory.UNKNOWN
        assert result.subcategory == "Unclassified"
        assert result.confidence == 0.5

    def test_empty_reason_and_codes_fall_through(self, make_rule):
        store = InMemoryRuleStore(rules=[make_rule()])
        result = categorize_rejection("", [], store)
        assert result.category == RejectionCategory.UNKNOWN

    def test_inactive_rules_are_ignored(self, make_rule):
        store = InMemoryRuleStore(rules=[make_rule(is_active=False)])
        result = categorize_rejection("test keyword", ["TST001"], store)
        assert result.matched_rule is None

    def test_provider_rule_only_applies_to_its_provider(self, make_claim, make_rule):
        provider_rule = make_rule(
            id="rule-provider",
            subcategory="Eligibility",
            keywords=["not eligible"],
            codes=["ELIG001"],
        )
        store = InMemoryRuleStore(
            providers=[
                InsuranceProvider(id="PRV-BUPA", name="Bupa", specific_rules=[provider_rule])
            ]
        )
        own = make_claim(
            provider_id="PRV-BUPA",
            status=ClaimStatus.REJECTED,
            rejection_reason="member not eligible",
            procedure_code="ELIG001",
        )
        other = own.model_copy(update={"provider_id": "PRV-OTHER"})

        assert classify_claim(own, store).subcategory == "Eligibility"
        assert classify_claim(other, store).matched_rule is None

    def test_category_is_always_known_value(self, make_claim, make_rule):
        store = InMemoryRuleStore(rules=[make_rule()])
        reasons = ["test keyword", "clinical review", "billing format", "", "unexpected"]
        for reason in reasons:
            claim = make_claim(status=ClaimStatus.REJECTED, rejection_reason=reason)
            assert classify_claim(claim, store).category in set(RejectionCategory)


class TestClassifyClaims:
    """Tests for applying classifications to a claim collection."""

    def test_only_rejected_claims_are_categorized(self, make_claim):
        store = InMemoryRuleStore()
        approved = make_claim(status=ClaimStatus.APPROVED, rejection_reason="billing error")
        rejected = make_claim(status=ClaimStatus.REJECTED, rejection_reason="billing error")

        result = classify_claims([approved, rejected], store)

        assert result[0].rejection_category is None
        assert result[1].rejection_category == RejectionCategory.TECHNICAL
        assert result[1].rejection_subcategory == "Data/System Issue"

    def test_unknown_result_never_erases_existing_category(self, make_claim):
        claim = make_claim(
            status=ClaimStatus.REJECTED,
            rejection_reason="payer declined",
            rejection_category=RejectionCategory.MEDICAL,
            rejection_subcategory="Coverage Limitation",
        )
        result = classify_claims([claim], InMemoryRuleStore())
        assert result[0].rejection_category == RejectionCategory.MEDICAL
        assert result[0].rejection_subcategory == "Coverage Limitation"

    def test_input_claims_are_not_mutated(self, make_claim):
        claim = make_claim(status=ClaimStatus.REJECTED, rejection_reason="missing data")
        classify_claims([claim], InMemoryRuleStore())
        assert claim.rejection_category is None
