import json

from policy_compare.comparison.models import ExtractedPolicyRecord


def make_policy(**overrides: object) -> ExtractedPolicyRecord:
    fields: dict[str, object] = {
        "company_name": "Anadolu Sigorta",
        "policy_type": "Kasko",
        "premium_amount": 12500,
        "currency": "TL",
        "coverage_amount": "850.000 TL",
        "deductible": "%2",
        "limits": ["İMM: 1.000.000 TL", "Manevi Tazminat: Dahil"],
        "pros": ["Geniş servis ağı"],
        "cons": ["Cam muafiyeti var"],
    }
    fields.update(overrides)
    return ExtractedPolicyRecord(**fields)  # type: ignore[arg-type]


def policy_json(**overrides: object) -> dict[str, object]:
    data: dict[str, object] = {
        "companyName": "Anadolu Sigorta",
        "policyType": "Kasko",
        "premiumAmount": 12500,
        "currency": "TL",
        "coverageAmount": "850.000 TL",
        "deductible": "%2",
        "limits": ["İMM: 1.000.000 TL"],
        "pros": ["Geniş servis ağı"],
        "cons": [],
    }
    data.update(overrides)
    return data


def response_json(policies: list[dict[str, object]], summary: str = "Özet") -> str:
    return json.dumps({"policies": policies, "summary": summary}, ensure_ascii=False)
