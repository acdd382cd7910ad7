"""Per-claim input checks applied before aggregate analysis."""

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from pydantic import ValidationError

from ..errors import InvalidClaimError
from ..schemas.claim import Claim

logger = logging.getLogger(__name__)


def validate_claim(record: Claim | Mapping[str, Any]) -> Claim:
    """Parse and check one claim record.

    Raises:
        InvalidClaimError: if identifying fields are missing or amounts are out of range.
    """
    if isinstance(record, Claim):
        record = record.model_dump()

    try:
        return Claim.model_validate(record)
    except ValidationError as e:
        fields = ", ".join(".".join(str(p) for p in err["loc"]) for err in e.errors())
        raise InvalidClaimError(record.get("id"), f"invalid fields: {fields}") from e


def filter_valid_claims(records: Iterable[Claim | Mapping[str, Any]]) -> list[Claim]:
    """Keep the records that pass validation, logging and skipping the rest."""
    valid: list[Claim] = []
    skipped = 0

    for record in records:
        try:
            valid.append(validate_claim(record))
        except InvalidClaimError as e:
            skipped += 1
            logger.warning("Skipping claim %s: %s", e.claim_id, e.reason)

    if skipped:
        logger.info("Skipped %d invalid claims, %d remain", skipped, len(valid))
    return valid
