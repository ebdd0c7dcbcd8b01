from policy_compare.comparison.factory import RequesterFactory
from policy_compare.comparison.models import ComparisonResult, ExtractedPolicyRecord
from policy_compare.comparison.requester import ComparisonRequester

__all__ = [
    "ComparisonRequester",
    "ComparisonResult",
    "ExtractedPolicyRecord",
    "RequesterFactory",
]
