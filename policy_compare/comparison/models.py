from dataclasses import dataclass, field

UNSPECIFIED = "Belirtilmemiş"


@dataclass(frozen=True)
class ExtractedPolicyRecord:
    """Normalized fields the model extracted from one policy document."""

    company_name: str
    premium_amount: float
    currency: str
    coverage_amount: str
    deductible: str
    limits: list[str] = field(default_factory=list)
    policy_type: str = UNSPECIFIED
    pros: list[str] = field(default_factory=list)
    cons: list[str] = field(default_factory=list)

    def to_wire(self) -> dict[str, object]:
        """Return the camelCase shape used by the structured-output schema."""
        return {
            "companyName": self.company_name,
            "policyType": self.policy_type,
            "premiumAmount": self.premium_amount,
            "currency": self.currency,
            "coverageAmount": self.coverage_amount,
            "deductible": self.deductible,
            "limits": list(self.limits),
            "pros": list(self.pros),
            "cons": list(self.cons),
        }


@dataclass(frozen=True)
class ComparisonResult:
    """All extracted records, in model output order, plus one summary."""

    policies: list[ExtractedPolicyRecord]
    summary: str

    def to_wire(self) -> dict[str, object]:
        return {
            "policies": [policy.to_wire() for policy in self.policies],
            "summary": self.summary,
        }


@dataclass(frozen=True)
class TextPart:
    """Plain-text content part of a model request."""

    text: str


@dataclass(frozen=True)
class BinaryPart:
    """Inline base64 content part of a model request."""

    data: str
    media_type: str
    name: str = ""


ContentPart = TextPart | BinaryPart
