"""Example comparison client adapter.

Use this module as a reference when implementing new provider adapters.
Implement BaseComparisonClient and register the provider in RequesterFactory.
"""

import json

from policy_compare.comparison.client_base import BaseComparisonClient
from policy_compare.comparison.models import (
    UNSPECIFIED,
    BinaryPart,
    ComparisonResult,
    ContentPart,
    ExtractedPolicyRecord,
    TextPart,
)


class ExampleClientAdapter(BaseComparisonClient):
    """Example adapter that returns a fixed valid comparison JSON.

    No network calls. Emits one placeholder record per attached document so
    the UI and exports can be exercised locally.
    """

    SUMMARY = "Örnek karşılaştırma: gerçek bir yapay zeka sağlayıcısı yapılandırılmadı."

    def create_completion(
        self,
        *,
        model: str,
        temperature: float,
        system_prompt: str,
        parts: list[ContentPart],
        json_schema: dict[str, object],
    ) -> str:
        _ = model, temperature, system_prompt, json_schema
        documents = [p for p in parts if isinstance(p, BinaryPart) or _is_document_text(p)]
        result = ComparisonResult(
            policies=[
                ExtractedPolicyRecord(
                    company_name=f"Örnek Sigorta {index}",
                    premium_amount=0,
                    currency="TL",
                    coverage_amount=UNSPECIFIED,
                    deductible=UNSPECIFIED,
                )
                for index, _part in enumerate(documents, start=1)
            ],
            summary=self.SUMMARY,
        )
        return json.dumps(result.to_wire(), ensure_ascii=False)


def _is_document_text(part: ContentPart) -> bool:
    return isinstance(part, TextPart) and part.text.startswith("File Name:")
