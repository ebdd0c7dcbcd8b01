"""Builds a ComparisonResult from the model's parsed JSON.

Only structure is checked: required fields are present and carry the right
JSON types. Values are taken as returned; ranges, currency codes and the
number of policies are not cross-checked.
"""

import math
from typing import Any

from policy_compare.comparison.exceptions import ExtractionError
from policy_compare.comparison.models import (
    UNSPECIFIED,
    ComparisonResult,
    ExtractedPolicyRecord,
)

_REQUIRED_POLICY_FIELDS = (
    "companyName",
    "premiumAmount",
    "currency",
    "coverageAmount",
    "deductible",
    "limits",
)


def validate_and_build(data: dict[str, Any]) -> ComparisonResult:
    """Validate raw parsed JSON and build a ComparisonResult.

    Raises:
        ExtractionError: if the object does not have the expected shape.
    """
    for name in ("policies", "summary"):
        if name not in data:
            raise ExtractionError(f"Missing required top-level field: {name}")
    summary = data["summary"]
    if not isinstance(summary, str):
        raise ExtractionError("'summary' must be a string")
    policies = data["policies"]
    if not isinstance(policies, list):
        raise ExtractionError("'policies' must be a list")
    return ComparisonResult(
        policies=[_build_policy(item, i) for i, item in enumerate(policies)],
        summary=summary,
    )


def _build_policy(raw: Any, index: int) -> ExtractedPolicyRecord:
    if not isinstance(raw, dict):
        raise ExtractionError(f"Policy at index {index} must be an object")
    for name in _REQUIRED_POLICY_FIELDS:
        if name not in raw:
            raise ExtractionError(f"Policy at index {index}: missing '{name}'")

    premium = raw["premiumAmount"]
    # bool is an int subclass
    if isinstance(premium, bool) or not isinstance(premium, (int, float)):
        raise ExtractionError(f"Policy at index {index}: 'premiumAmount' must be a number")
    if not math.isfinite(premium):
        raise ExtractionError(f"Policy at index {index}: 'premiumAmount' must be finite")

    return ExtractedPolicyRecord(
        company_name=_string(raw, "companyName", index),
        policy_type=_string(raw, "policyType", index, default=UNSPECIFIED),
        premium_amount=premium,
        currency=_string(raw, "currency", index),
        coverage_amount=_string(raw, "coverageAmount", index),
        deductible=_string(raw, "deductible", index),
        limits=_string_list(raw, "limits", index),
        pros=_string_list(raw, "pros", index),
        cons=_string_list(raw, "cons", index),
    )


def _string(raw: dict[str, Any], name: str, index: int, default: str | None = None) -> str:
    value = raw.get(name, default)
    if not isinstance(value, str):
        raise ExtractionError(f"Policy at index {index}: '{name}' must be a string")
    return value


def _string_list(raw: dict[str, Any], name: str, index: int) -> list[str]:
    value = raw.get(name, [])
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ExtractionError(f"Policy at index {index}: '{name}' must be a list of strings")
    return list(value)
