"""Shared factories for claims analytics tests."""

from datetime import date
from itertools import count

import pytest

from claims_analytics.schemas import (
    Claim,
    ClaimStatus,
    RejectionCategory,
    RejectionRule,
    RuleSeverity,
)

_ids = count(1)


def build_claim(**overrides) -> Claim:
    """Create a valid claim, overriding any field."""
    n = next(_ids)
    fields = {
        "id": f"claim-{n}",
        "claim_number": f"CLM{n:05d}",
        "patient_name": f"Patient {n:03d}",
        "provider_id": "PRV001",
        "provider_name": "King Faisal Specialist Hospital",
        "service_date": date(2024, 3, 1),
        "submission_date": date(2024, 3, 5),
        "amount": 1000.0,
        "status": ClaimStatus.APPROVED,
        "processing_time": 5,
        "diagnosis_code": "ICD00001",
        "procedure_code": "CPT00001",
        "membership_number": f"MEM{n:06d}",
        "policy_number": "POL00001",
    }
    fields.update(overrides)
    return Claim(**fields)


def build_rule(**overrides) -> RejectionRule:
    """Create an active global rule with one keyword and one code."""
    fields = {
        "id": "rule-test-001",
        "name": "Test Rule",
        "description": "test rejections",
        "category": RejectionCategory.TECHNICAL,
        "subcategory": "Testing",
        "keywords": ["test keyword"],
        "codes": ["TST001"],
        "severity": RuleSeverity.MEDIUM,
        "auto_fix": True,
        "fix_suggestion": "Fix the test issue",
    }
    fields.update(overrides)
    return RejectionRule(**fields)


@pytest.fixture
def make_claim():
    return build_claim


@pytest.fixture
def make_rule():
    return build_rule
