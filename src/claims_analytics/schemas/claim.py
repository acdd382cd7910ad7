"""Insurance claim record schema."""

from datetime import date

from pydantic import BaseModel, Field, field_validator

from .common import ClaimStatus, RejectionCategory


class Claim(BaseModel):
    """A single insurance claim as produced by ingestion.

    Only ``rejection_category`` and ``rejection_subcategory`` are ever
    changed by the analytics engine, and only on rejected claims.
    """

    id: str = Field(min_length=1)
    claim_number: str = Field(min_length=1)
    patient_name: str = ""
    provider_id: str = ""
    provider_name: str = ""
    service_date: date | None = None
    submission_date: date
    amount: float = Field(ge=0)
    status: ClaimStatus
    rejection_reason: str | None = None
    rejection_category: RejectionCategory | None = None
    rejection_subcategory: str | None = None
    processing_time: int = Field(default=0, ge=0)
    diagnosis_code: str = ""
    procedure_code: str = ""
    membership_number: str = ""
    policy_number: str = ""

    @field_validator("status", mode="before")
    def normalize_status(cls, v):
        if isinstance(v, str):
            return v.lower().strip()
        return v

    @property
    def codes(self) -> list[str]:
        """Diagnosis and procedure codes, skipping blanks."""
        return [c for c in (self.diagnosis_code, self.procedure_code) if c]

    @property
    def is_rejected(self) -> bool:
        return self.status == ClaimStatus.REJECTED
