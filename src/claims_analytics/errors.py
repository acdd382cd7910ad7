"""Exceptions raised by the analytics engine."""


class ClaimsAnalyticsError(Exception):
    """Base class for analytics engine errors."""


class EmptyDatasetError(ClaimsAnalyticsError):
    """Analysis was requested on a dataset with no usable claims."""


class InvalidClaimError(ClaimsAnalyticsError):
    """A claim record is missing identifying fields or has out-of-range values."""

    def __init__(self, claim_id: str | None, reason: str) -> None:
        self.claim_id = claim_id
        self.reason = reason
        super().__init__(f"Invalid claim {claim_id or '<unknown>'}: {reason}")
