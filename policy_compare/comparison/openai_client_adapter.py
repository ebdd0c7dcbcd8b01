import httpx
import openai

from policy_compare.comparison.client_base import BaseComparisonClient
from policy_compare.comparison.exceptions import (
    ComparisonNetworkError,
    ExtractionError,
    UnsupportedFormatError,
)
from policy_compare.comparison.models import BinaryPart, ContentPart, TextPart
from policy_compare.logging.logger import Log

_UNSUPPORTED_MARKERS = ("unsupported mime type", "unsupported file", "invalid mime type")


def _original_message(exc: Exception) -> str:
    message = getattr(exc, "message", None)
    return message if isinstance(message, str) and message else str(exc)


def _data_url(part: BinaryPart) -> str:
    return f"data:{part.media_type};base64,{part.data}"


def to_openai_content(part: ContentPart) -> dict[str, object]:
    """Map a content part to an OpenAI chat message content item."""
    if isinstance(part, TextPart):
        return {"type": "text", "text": part.text}
    if part.media_type.startswith("image/"):
        return {"type": "image_url", "image_url": {"url": _data_url(part)}}
    return {
        "type": "file",
        "file": {"filename": part.name or "document", "file_data": _data_url(part)},
    }


class OpenAIClientAdapter(BaseComparisonClient):
    """Comparison AI client adapter built on OpenAI-compatible chat API."""

    def __init__(
        self,
        *,
        api_key: str,
        timeout_seconds: int,
        base_url: str | None = None,
    ) -> None:
        self._base_url = base_url or "https://api.openai.com/v1"
        self._client = openai.OpenAI(
            api_key=api_key,
            timeout=timeout_seconds,
            base_url=base_url,
        )

    def create_completion(
        self,
        *,
        model: str,
        temperature: float,
        system_prompt: str,
        parts: list[ContentPart],
        json_schema: dict[str, object],
    ) -> str:
        try:
            response = self._client.chat.completions.create(
                model=model,
                temperature=temperature,
                response_format={
                    "type": "json_schema",
                    "json_schema": {
                        "name": "comparison_result",
                        "strict": False,
                        "schema": json_schema,
                    },
                },
                messages=[
                    {"role": "system", "content": system_prompt},
                    {"role": "user", "content": [to_openai_content(p) for p in parts]},
                ],
            )
        except (openai.APIConnectionError, httpx.ConnectError, httpx.TimeoutException) as exc:
            Log.error(f"AI provider network error: {exc}", base_url=self._base_url)
            raise ComparisonNetworkError(_original_message(exc)) from exc
        except openai.BadRequestError as exc:
            if any(marker in str(exc).lower() for marker in _UNSUPPORTED_MARKERS):
                raise UnsupportedFormatError() from exc
            Log.error(f"AI provider API error: {exc}", base_url=self._base_url)
            raise ComparisonNetworkError(_original_message(exc)) from exc
        except openai.APIError as exc:
            Log.error(f"AI provider API error: {exc}", base_url=self._base_url)
            raise ComparisonNetworkError(_original_message(exc)) from exc

        if not response.choices:
            raise ExtractionError("Veri üretilemedi.")
        content = response.choices[0].message.content
        if content is None:
            raise ExtractionError("Veri üretilemedi.")
        return content
