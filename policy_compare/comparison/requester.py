"""Single-call, multi-document policy comparison against an AI provider."""

import asyncio
import json
from collections.abc import Sequence
from pathlib import Path

from policy_compare.comparison.client_base import BaseComparisonClient
from policy_compare.comparison.exceptions import ExtractionError
from policy_compare.comparison.models import (
    UNSPECIFIED,
    BinaryPart,
    ComparisonResult,
    ContentPart,
    TextPart,
)
from policy_compare.comparison.prompt_loader import (
    load_json_schema,
    load_prompt_template,
    load_system_prompt,
    load_tabular_note,
)
from policy_compare.comparison.validator import validate_and_build
from policy_compare.documents.models import (
    BinaryPayload,
    NormalizedPayload,
    TextPayload,
    UploadedDocument,
)
from policy_compare.documents.normalizer import DocumentNormalizer
from policy_compare.logging.logger import Log


class ComparisonRequester:
    """Normalizes documents and asks the model for one structured comparison."""

    def __init__(
        self,
        *,
        client: BaseComparisonClient,
        normalizer: DocumentNormalizer,
        model: str,
        temperature: float = 0.0,
        prompt_template_path: Path | None = None,
        json_schema_path: Path | None = None,
    ) -> None:
        self._client = client
        self._normalizer = normalizer
        self._model = model
        self._temperature = max(0.0, min(0.2, temperature))
        self._prompt = load_prompt_template(prompt_template_path).format(
            unspecified=UNSPECIFIED
        ).strip()
        self._tabular_note = load_tabular_note()
        self._system_prompt = load_system_prompt()
        self._json_schema = json.loads(load_json_schema(json_schema_path))

    async def compare(self, documents: Sequence[UploadedDocument]) -> ComparisonResult:
        """Return the model's comparison of all documents.

        Raises:
            DocumentReadError: if any document cannot be normalized.
            UnsupportedFormatError: if the provider rejects a content type.
            ExtractionError: if the response is empty or not a valid result.
            ComparisonNetworkError: on provider transport failures.
        """
        payloads = await asyncio.gather(
            *(self._normalizer.normalize(document) for document in documents)
        )
        Log.info("Normalized documents", documents=len(payloads))

        parts = self.build_parts(payloads)
        raw_response = await asyncio.to_thread(self._call_ai, parts)
        Log.debug(f"AI raw response:\n{raw_response}", model=self._model)

        result = validate_and_build(self._parse_json(raw_response))
        Log.info(
            "Comparison complete",
            policies=len(result.policies),
            documents=len(documents),
        )
        return result

    def build_parts(self, payloads: Sequence[NormalizedPayload]) -> list[ContentPart]:
        """One part per payload in input order, followed by the instruction."""
        parts: list[ContentPart] = [_payload_part(payload) for payload in payloads]
        instruction = self._prompt
        if any(isinstance(payload, TextPayload) for payload in payloads):
            instruction = f"{instruction}\n\n{self._tabular_note}"
        Log.debug(f"Comparison prompt:\n{instruction}")
        parts.append(TextPart(text=instruction))
        return parts

    def _call_ai(self, parts: list[ContentPart]) -> str:
        return self._client.create_completion(
            model=self._model,
            temperature=self._temperature,
            system_prompt=self._system_prompt,
            parts=parts,
            json_schema=self._json_schema,
        )

    @staticmethod
    def _parse_json(raw: str) -> dict[str, object]:
        if not raw or not raw.strip():
            raise ExtractionError("Veri üretilemedi.")
        try:
            parsed = json.loads(raw)
        except json.JSONDecodeError as exc:
            raise ExtractionError(f"Invalid JSON response: {exc}") from exc
        if not isinstance(parsed, dict):
            raise ExtractionError("JSON response must be an object")
        return parsed


def _payload_part(payload: NormalizedPayload) -> ContentPart:
    if isinstance(payload, BinaryPayload):
        return BinaryPart(
            data=payload.data, media_type=payload.media_type, name=payload.source_name
        )
    return TextPart(
        text=(
            f"File Name: {payload.source_name}\n"
            f"File Type: {payload.source_kind}\n"
            f"Content:\n{payload.text}"
        )
    )
